"""Render article Markdown into HTML with Pygments-highlighted code blocks."""

from __future__ import annotations

import io
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

LANGUAGE_PREFIX = "language-"
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
# Rust snippets often carry rustdoc attributes (```rust,ignore); Pygments only
# understands the bare language name.
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
BASE_EXTENSIONS: tuple[str, ...] = (
    "fenced_code",
    "codehilite",
    "tables",
    "sane_lists",
    "footnotes",
)


class LanguageHtmlFormatter(HtmlFormatter):
    """Pygments HTML formatter that tags its wrapper with ``data-language``.

    Markdown's ``codehilite`` extension instantiates a formatter class once
    per code block and passes ``lang_str`` (``"language-<name>"``). Fenced,
    tilde-fenced, and indented blocks all flow through here, so every
    highlighted block carries its own language.
    """

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.language = lang_str.removeprefix(LANGUAGE_PREFIX) or "text"

    def format_unencoded(self, tokensource: typ.Any, outfile: typ.Any) -> None:
        buffer = io.StringIO()
        super().format_unencoded(tokensource, buffer)
        opening = f'<div class="{self.cssclass}">'
        tagged = (
            f'<div class="{self.cssclass}" '
            f'data-language="{escape(self.language, quote=True)}">'
        )
        outfile.write(buffer.getvalue().replace(opening, tagged, 1))


class HtmlContentRenderer:
    """Render article bodies with consistent highlighting and link handling."""

    def __init__(
        self, pygments_style: str = "monokai", link_extension: Extension | None = None
    ) -> None:
        """Initialize a renderer with a Pygments style and optional link extension.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        link_extension : Extension, optional
            Markdown extension that rewrites internal ``@/`` links; pass
            ``None`` to leave links untouched.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        extensions: list[Extension | str] = list(BASE_EXTENSIONS)
        if link_extension:
            extensions.append(link_extension)
        self._md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": pygments_style,
                    "lang_prefix": LANGUAGE_PREFIX,
                    "pygments_formatter": LanguageHtmlFormatter,
                }
            },
            output_format="html",
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render ``text`` into HTML, returning an empty string for blank input."""
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        return self._md.reset().convert(normalized)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            return f"{fence}{language or ''}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["HtmlContentRenderer", "LanguageHtmlFormatter"]
