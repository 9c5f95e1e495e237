"""End-to-end tests for article page rendering.

These tests load the ``learning-path`` fixture site (three articles dated
2024-09-25, 2024-09-26 and 2024-09-27), render article pages through
``ArticlePageBuilder``, and inspect the HTML with BeautifulSoup. They cover
the shared header macro, the formatted date, the subscription form, and the
related-articles list.
"""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest
from bs4 import BeautifulSoup

from blog_pages.config import SiteConfig, load_site_config
from blog_pages.generator import ArticlePageBuilder, format_date
from blog_pages.site import Page, SectionNotFoundError, SiteGraph, load_site

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def site(learning_path_site: Path) -> tuple[SiteConfig, SiteGraph]:
    """Load the fixture config and its site graph."""
    config = load_site_config(learning_path_site)
    return config, load_site(config)


@pytest.fixture
def ownership_soup(site: tuple[SiteConfig, SiteGraph]) -> BeautifulSoup:
    """Render the middle article of the series."""
    config, graph = site
    builder = ArticlePageBuilder(config, graph)
    html = builder.render(graph.get_page("learning-path/ownership.md"))
    return BeautifulSoup(html, "html.parser")


def test_related_articles_are_newest_first(ownership_soup: BeautifulSoup) -> None:
    """The related list shows the 09-27 article, then the 09-25 article."""
    links = ownership_soup.select(".related__list a")
    assert [a.get_text(strip=True) for a in links] == ["Traits", "Cargo basics"]
    assert [a["href"] for a in links] == [
        "https://blog.example.com/learning-path/traits/",
        "https://blog.example.com/learning-path/cargo/",
    ]


def test_article_head_and_body(ownership_soup: BeautifulSoup) -> None:
    """Title, canonical link, date, and body are rendered."""
    assert ownership_soup.title is not None
    assert ownership_soup.title.get_text() == "Ownership | Test Blog"
    canonical = ownership_soup.select_one("link[rel=canonical]")
    assert canonical is not None
    assert canonical["href"] == "https://blog.example.com/learning-path/ownership/"
    assert ownership_soup.select_one(".article__title").get_text() == "Ownership"
    date = ownership_soup.select_one("time.article__date")
    assert date is not None
    assert date["datetime"] == "2024-09-26"
    assert date.get_text() == "September 26, 2024"
    body = ownership_soup.select_one(".article__body p")
    assert body is not None
    assert body.get_text() == "Ownership body."


def test_shared_header_is_rendered(ownership_soup: BeautifulSoup) -> None:
    """The header macro renders the brand link and navigation."""
    brand = ownership_soup.select_one(".site-header__brand")
    assert brand is not None
    assert brand["href"] == "https://blog.example.com/"
    nav = [a.get_text(strip=True) for a in ownership_soup.select(".site-header__nav a")]
    assert nav == ["Learning path"]


def test_subscription_form_posts_externally(ownership_soup: BeautifulSoup) -> None:
    """The static form posts to the configured external endpoint."""
    form = ownership_soup.select_one("form.subscribe__form")
    assert form is not None
    assert form["action"] == "https://forms.example.com/subscribe"
    assert form["method"] == "post"
    assert form.select_one("input[type=email]") is not None


def test_tag_links_point_at_tag_pages(ownership_soup: BeautifulSoup) -> None:
    """Each tag links to its tag page."""
    hrefs = [a["href"] for a in ownership_soup.select(".article__tags a")]
    assert hrefs == [
        "https://blog.example.com/tags/ownership/",
        "https://blog.example.com/tags/tooling/",
    ]


def test_single_article_series_shows_placeholder(
    make_site: typ.Any,
) -> None:
    """A series with one article renders an empty-state entry."""
    config = load_site_config(
        make_site(
            {
                "_index.md": "",
                "solo/_index.md": "",
                "solo/only.md": '+++\ntitle = "Only"\ndate = 2024-09-26\n+++\n',
            }
        )
    )
    graph = load_site(config)
    html = ArticlePageBuilder(config, graph).render(graph.get_page("solo/only.md"))
    soup = BeautifulSoup(html, "html.parser")
    assert soup.select(".related__list a") == []
    assert soup.select_one(".related__item--empty") is not None


def test_orphan_with_missing_default_section_fails(
    site: tuple[SiteConfig, SiteGraph],
) -> None:
    """Falling back to a section that does not exist aborts rendering."""
    config, graph = site
    config.defaults.default_section = "index.md"
    orphan = Page(
        path="orphan.md",
        slug="orphan",
        title="Orphan",
        date=None,
        content="",
        ancestors=(),
        permalink="https://blog.example.com/orphan/",
    )
    with pytest.raises(SectionNotFoundError):
        ArticlePageBuilder(config, graph).render(orphan)


def test_run_writes_index_html(
    site: tuple[SiteConfig, SiteGraph], tmp_path: Path
) -> None:
    """Pages are written to ``<permalink path>/index.html`` with a newline."""
    config, graph = site
    output_dir = tmp_path / "out"
    path = ArticlePageBuilder(config, graph, output_dir=output_dir).run(
        graph.get_page("learning-path/traits.md")
    )
    assert path == output_dir / "learning-path" / "traits" / "index.html"
    assert path.read_text(encoding="utf-8").endswith("\n")


def test_format_date() -> None:
    """The date filter formats calendar dates and tolerates missing values."""
    assert format_date(dt.date(2024, 9, 25)) == "September 25, 2024"
    assert format_date(dt.date(2024, 9, 25), "%Y-%m-%d") == "2024-09-25"
    assert format_date(None) == ""
