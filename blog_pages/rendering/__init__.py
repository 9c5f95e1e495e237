"""Markdown-to-HTML rendering shared by the content loader and page builders."""

from .link_rewriter import BrokenLinkError, InternalLinkExtension
from .renderer import HtmlContentRenderer

__all__ = [
    "BrokenLinkError",
    "HtmlContentRenderer",
    "InternalLinkExtension",
]
