"""Rewrite ``@/`` internal content links to page and section permalinks."""

from __future__ import annotations

import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from blog_pages._constants import INTERNAL_LINK_PREFIX

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


class BrokenLinkError(LookupError):
    """Raised when an internal link points at content that does not exist."""


class InternalLinkExtension(Extension):
    """Resolve ``@/path/to/file.md`` links against the content tree.

    Articles cross-reference each other by source path (for example
    ``[ownership](@/learning-path/ownership.md#moves)``) so links survive
    slug or base URL changes. The mapping passed in associates every
    content-relative source path with its permalink.
    """

    def __init__(self, permalinks: typ.Mapping[str, str]) -> None:
        super().__init__()
        self.permalinks = permalinks

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the internal-link treeprocessor on the Markdown instance."""
        processor = InternalLinkTreeprocessor(md, self.permalinks)
        md.treeprocessors.register(processor, "blog_internal_links", 15)


class InternalLinkTreeprocessor(Treeprocessor):
    """Replace internal link targets on ``<a>`` and ``<img>`` elements."""

    def __init__(self, md: Markdown, permalinks: typ.Mapping[str, str]) -> None:
        super().__init__(md)
        self.permalinks = permalinks

    def run(self, root: Element) -> Element:
        """Rewrite internal targets in the parsed markdown tree."""
        for element in root.iter():
            attribute = {"a": "href", "img": "src"}.get(element.tag)
            if attribute is None:
                continue
            rewritten = self.resolve(element.get(attribute))
            if rewritten:
                element.set(attribute, rewritten)
        return root

    def resolve(self, target: str | None) -> str | None:
        """Return the permalink for an internal ``target`` or None for other links.

        Raises
        ------
        BrokenLinkError
            If ``target`` uses the internal prefix but names no known content.
        """
        if not target or not target.startswith(INTERNAL_LINK_PREFIX):
            return None
        parsed = urlsplit(target[len(INTERNAL_LINK_PREFIX) :])
        path = parsed.path.strip("/")
        permalink = self.permalinks.get(path)
        if permalink is None:
            msg = f"Internal link '{target}' does not match any content file."
            raise BrokenLinkError(msg)
        if parsed.query:
            permalink = f"{permalink}?{parsed.query}"
        if parsed.fragment:
            permalink = f"{permalink}#{parsed.fragment}"
        return permalink


__all__ = [
    "BrokenLinkError",
    "InternalLinkExtension",
    "InternalLinkTreeprocessor",
]
