"""Related-article listing for article pages.

Every article ends with links to the other articles of its series. The series
is the section that directly contains the article (the last entry of its
ancestor chain); articles without ancestors fall back to a configured default
section. The section's pages are ordered newest first and the article itself
is left out.

Example
-------
>>> from blog_pages.listing import resolve_listing_section
>>> from blog_pages.site import Page
>>> page = Page(
...     path="learning-path/traits.md",
...     slug="traits",
...     title="Traits",
...     date=None,
...     content="",
...     ancestors=("_index.md", "learning-path/_index.md"),
...     permalink="https://example.com/learning-path/traits/",
... )
>>> resolve_listing_section(page)
'learning-path/_index.md'
"""

from __future__ import annotations

import datetime as dt
import typing as typ

from ._constants import DEFAULT_SECTION

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .site import Page, SiteGraph


def resolve_listing_section(page: Page, default_section: str = DEFAULT_SECTION) -> str:
    """Return the identifier of the section whose pages are listed for ``page``."""
    if page.ancestors:
        return page.ancestors[-1]
    return default_section


def sort_by_date(pages: cabc.Iterable[Page]) -> list[Page]:
    """Return ``pages`` newest first.

    Python's sort is stable, including with ``reverse=True``, so pages sharing
    a date keep the order they were given in. Undated pages sort last.
    """
    ordered = list(pages)
    dated = [page for page in ordered if page.date is not None]
    undated = [page for page in ordered if page.date is None]
    dated.sort(key=_date_key, reverse=True)
    return dated + undated


def sibling_pages(
    page: Page, graph: SiteGraph, default_section: str = DEFAULT_SECTION
) -> cabc.Iterator[tuple[str, str]]:
    """Lazily yield ``(title, permalink)`` for the other pages of the series.

    Parameters
    ----------
    page : Page
        Article being rendered.
    graph : SiteGraph
        Site graph used to look up the listing section.
    default_section : str, optional
        Section identifier used when ``page`` has no ancestors.

    Yields
    ------
    tuple[str, str]
        Title and permalink of each sibling, newest first, never ``page``.

    Raises
    ------
    SectionNotFoundError
        If the resolved section does not exist. Raised on first iteration.
    """
    section = graph.get_section(resolve_listing_section(page, default_section))
    for candidate in sort_by_date(section.pages):
        if candidate != page:
            yield candidate.title, candidate.permalink


def _date_key(page: Page) -> dt.date:
    return typ.cast("dt.date", page.date)


__all__ = ["resolve_listing_section", "sibling_pages", "sort_by_date"]
