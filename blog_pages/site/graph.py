"""Read-only lookup structure over the pages and sections of one build."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Page, Section


class SiteBuildError(RuntimeError):
    """Raised when the content tree cannot be turned into a consistent site."""


class SectionNotFoundError(SiteBuildError, KeyError):
    """Raised when a section identifier does not match any ``_index.md``."""


class PageNotFoundError(SiteBuildError, KeyError):
    """Raised when a source path does not match any loaded page."""


@dc.dataclass(frozen=True, slots=True)
class SiteGraph:
    """Sections keyed by identifier and pages keyed by source path."""

    sections: typ.Mapping[str, Section]
    pages: typ.Mapping[str, Page]

    def get_section(self, identifier: str) -> Section:
        """Return the section registered under ``identifier``.

        Raises
        ------
        SectionNotFoundError
            If no section uses ``identifier``. This is a configuration error
            and is meant to abort the build.
        """
        try:
            return self.sections[identifier]
        except KeyError as exc:
            available = ", ".join(sorted(self.sections)) or "<none>"
            msg = f"Unknown section '{identifier}'. Known sections: {available}"
            raise SectionNotFoundError(msg) from exc

    def get_page(self, path: str) -> Page:
        """Return the page loaded from ``path``."""
        try:
            return self.pages[path]
        except KeyError as exc:
            msg = f"Unknown page '{path}'."
            raise PageNotFoundError(msg) from exc

    def iter_pages(self) -> cabc.Iterator[Page]:
        """Yield pages in discovery order."""
        yield from self.pages.values()

    def iter_sections(self) -> cabc.Iterator[Section]:
        """Yield sections in discovery order."""
        yield from self.sections.values()

    def pages_by_tag(self) -> dict[str, list[Page]]:
        """Group pages by tag name, keeping tag first-seen and page discovery order."""
        grouped: dict[str, list[Page]] = {}
        for page in self.iter_pages():
            for tag in page.tags:
                grouped.setdefault(tag, []).append(page)
        return grouped


__all__ = [
    "PageNotFoundError",
    "SectionNotFoundError",
    "SiteBuildError",
    "SiteGraph",
]
