"""Unit tests for the related-article listing.

The listing picks the section that directly contains an article (or a
default section for articles without ancestors), orders its pages newest
first, and leaves the article itself out. These tests build ``Page`` and
``Section`` records by hand so they exercise the listing logic without
touching the filesystem.
"""

from __future__ import annotations

import datetime as dt
import types

import pytest

from blog_pages._constants import DEFAULT_SECTION
from blog_pages.listing import resolve_listing_section, sibling_pages, sort_by_date
from blog_pages.site import Page, Section, SectionNotFoundError, SiteGraph

SECTION_ID = "learning-path/_index.md"


def _page(
    slug: str,
    date: dt.date | None,
    *,
    ancestors: tuple[str, ...] = ("_index.md", SECTION_ID),
) -> Page:
    return Page(
        path=f"learning-path/{slug}.md",
        slug=slug,
        title=f"{slug} title",
        date=date,
        content=f"<p>{slug}</p>",
        ancestors=ancestors,
        permalink=f"https://blog.example.com/learning-path/{slug}/",
    )


def _graph(*sections: Section) -> SiteGraph:
    pages = {page.path: page for section in sections for page in section.pages}
    return SiteGraph(
        sections=types.MappingProxyType({s.identifier: s for s in sections}),
        pages=types.MappingProxyType(pages),
    )


def _section(identifier: str, *pages: Page) -> Section:
    return Section(
        identifier=identifier,
        title=identifier,
        permalink=f"https://blog.example.com/{identifier}/",
        pages=pages,
    )


@pytest.fixture
def series() -> tuple[Page, Page, Page]:
    """Return three pages dated 2024-09-25, -26 and -27 in file order."""
    return (
        _page("cargo", dt.date(2024, 9, 25)),
        _page("ownership", dt.date(2024, 9, 26)),
        _page("traits", dt.date(2024, 9, 27)),
    )


def test_section_resolves_to_last_ancestor() -> None:
    """Pages with ancestors list the section that directly contains them."""
    page = _page("ownership", None)
    assert resolve_listing_section(page) == SECTION_ID
    assert resolve_listing_section(page, "other/_index.md") == SECTION_ID


def test_section_falls_back_without_ancestors() -> None:
    """Pages without ancestors fall back to the default section identifier."""
    page = _page("orphan", None, ancestors=())
    assert resolve_listing_section(page) == DEFAULT_SECTION == "index.md"
    assert resolve_listing_section(page, "_index.md") == "_index.md"


def test_siblings_are_newest_first_without_current_page(
    series: tuple[Page, Page, Page],
) -> None:
    """Rendering the middle article lists the newer one first, then the older."""
    cargo, ownership, traits = series
    graph = _graph(_section(SECTION_ID, cargo, ownership, traits))
    siblings = list(sibling_pages(ownership, graph))
    assert siblings == [
        ("traits title", traits.permalink),
        ("cargo title", cargo.permalink),
    ], f"unexpected sibling order: {siblings!r}"


def test_current_page_never_listed(series: tuple[Page, Page, Page]) -> None:
    """No page appears in its own listing and every other page does."""
    graph = _graph(_section(SECTION_ID, *series))
    for page in series:
        titles = [title for title, _ in sibling_pages(page, graph)]
        assert page.title not in titles
        assert len(titles) == len(series) - 1


def test_sibling_dates_never_increase(series: tuple[Page, Page, Page]) -> None:
    """Listing order is non-increasing by date regardless of file order."""
    shuffled = (series[1], series[2], series[0], _page("extra", dt.date(2024, 9, 1)))
    graph = _graph(_section(SECTION_ID, *shuffled))
    by_link = {page.permalink: page for page in shuffled}
    dates = [
        by_link[link].date for _, link in sibling_pages(_page("x", None), graph)
    ]
    assert dates == sorted(dates, reverse=True)


def test_equal_dates_keep_section_order() -> None:
    """Ties keep the order the section provides."""
    same_day = dt.date(2024, 9, 26)
    first, second, third = (
        _page("first", same_day),
        _page("second", same_day),
        _page("third", same_day),
    )
    assert sort_by_date([first, second, third]) == [first, second, third]
    assert sort_by_date([third, first, second]) == [third, first, second]


def test_undated_pages_sort_last() -> None:
    """Pages without a date follow every dated page, in their original order."""
    undated_a = _page("a", None)
    dated = _page("b", dt.date(2024, 1, 1))
    undated_c = _page("c", None)
    assert sort_by_date([undated_a, dated, undated_c]) == [dated, undated_a, undated_c]


def test_fallback_section_is_used_for_orphans(
    series: tuple[Page, Page, Page],
) -> None:
    """Orphan pages list the pages of the default ``index.md`` section."""
    orphan = _page("orphan", dt.date(2024, 10, 1), ancestors=())
    graph = _graph(_section(DEFAULT_SECTION, orphan, *series))
    titles = [title for title, _ in sibling_pages(orphan, graph)]
    assert titles == ["traits title", "ownership title", "cargo title"]


def test_single_page_section_lists_nothing() -> None:
    """A section holding only the current page yields an empty listing."""
    only = _page("only", dt.date(2024, 9, 26))
    graph = _graph(_section(SECTION_ID, only))
    assert list(sibling_pages(only, graph)) == []
    assert list(sibling_pages(only, _graph(_section(SECTION_ID)))) == []


def test_missing_section_is_fatal() -> None:
    """An unknown listing section raises when the listing is consumed."""
    orphan = _page("orphan", None, ancestors=())
    graph = _graph(_section(SECTION_ID, orphan))
    listing = sibling_pages(orphan, graph)
    with pytest.raises(SectionNotFoundError, match="index.md"):
        next(listing)


def test_listing_does_not_mutate_section(series: tuple[Page, Page, Page]) -> None:
    """Sorting for the listing leaves the section's own order untouched."""
    section = _section(SECTION_ID, *series)
    graph = _graph(section)
    list(sibling_pages(series[0], graph))
    assert graph.get_section(SECTION_ID).pages == series
