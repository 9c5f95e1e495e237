"""Render individual article pages.

An article page combines the shared head and header/navigation fragment with
the article's formatted date, title, and pre-rendered body, followed by the
static subscription form and the list of other articles in the same series.
The series list comes from :func:`blog_pages.listing.sibling_pages` and is
handed to the template as a lazy sequence.

Example
-------
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> from blog_pages.generator import ArticlePageBuilder
>>> from blog_pages.site import load_site
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> graph = load_site(config)  # doctest: +SKIP
>>> builder = ArticlePageBuilder(config, graph)  # doctest: +SKIP
>>> builder.run(graph.get_page("learning-path/ownership.md"))  # doctest: +SKIP
PosixPath('public/learning-path/ownership/index.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ

from markupsafe import Markup

from blog_pages.listing import sibling_pages

from .environment import build_environment
from .listing_pages import tag_permalink
from .output import write_html

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Environment

    from blog_pages.config import SiteConfig
    from blog_pages.site import Page, SiteGraph


class ArticlePageBuilder:
    """Render one article page, including its related-articles listing."""

    def __init__(
        self,
        config: SiteConfig,
        graph: SiteGraph,
        *,
        env: Environment | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and load the article template.

        Parameters
        ----------
        config : SiteConfig
            Site configuration providing the title, navigation, subscription
            form, and default listing section.
        graph : SiteGraph
            Read-only site graph used for the sibling lookup.
        env : Environment, optional
            Preconfigured Jinja environment; built from ``config`` when omitted.
        output_dir : Path, optional
            Override for ``config.defaults.output_dir``.
        """
        self.config = config
        self.graph = graph
        self.env = env or build_environment(config)
        self.output_dir = output_dir or config.defaults.output_dir
        self.template = self.env.get_template("article.jinja")

    def render(self, page: Page, *, generated_at: dt.datetime | None = None) -> str:
        """Return the HTML document for ``page`` without touching the disk."""
        context = {
            "config": self.config,
            "page": page,
            "content": Markup(page.content),
            "siblings": sibling_pages(
                page, self.graph, self.config.defaults.default_section
            ),
            "tag_links": [
                (name, tag_permalink(self.config, name)) for name in page.tags
            ],
            "subscribe": self.config.subscribe,
            "html_title": f"{page.title} | {self.config.title}",
            "meta_description": page.description or self.config.description,
            "generated_at": generated_at or dt.datetime.now(dt.UTC),
        }
        return self.template.render(**context)

    def run(self, page: Page) -> Path:
        """Render ``page`` and write it below the output directory."""
        html = self.render(page)
        return write_html(
            self.output_dir, self.config.output_path(page.permalink), html
        )


__all__ = ["ArticlePageBuilder"]
