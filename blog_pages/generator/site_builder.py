"""High-level orchestration for a full blog build.

:class:`SiteBuilder` takes a loaded :class:`~blog_pages.config.SiteConfig` and
its :class:`~blog_pages.site.SiteGraph`, then writes the syntax stylesheet,
copies static files, and renders every article, section, and tag page into
the output directory. The compiled site stylesheet (``assets/site.css``) comes
from the external CSS toolchain and is only referenced by the templates.

Example
-------
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> from blog_pages.generator import SiteBuilder
>>> from blog_pages.site import load_site
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config, load_site(config)).run()  # doctest: +SKIP
[PosixPath('public/assets/syntax.css'), ...]
"""

from __future__ import annotations

import typing as typ

from blog_pages._constants import SYNTAX_CSS_PATH
from blog_pages.rendering import HtmlContentRenderer

from .article_page import ArticlePageBuilder
from .environment import build_environment
from .listing_pages import SectionPageBuilder, TagPagesBuilder
from .output import copy_static, write_text_asset

if typ.TYPE_CHECKING:
    from pathlib import Path

    from blog_pages.config import SiteConfig
    from blog_pages.site import SiteGraph


class SiteBuilder:
    """Render every page of the site graph to static HTML."""

    def __init__(
        self,
        config: SiteConfig,
        graph: SiteGraph,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and its page builders.

        Parameters
        ----------
        config : SiteConfig
            Site configuration with build defaults.
        graph : SiteGraph
            Pages and sections produced by :func:`blog_pages.site.load_site`.
        templates_dir : Path, optional
            Template directory override.
        output_dir : Path, optional
            Output directory override; defaults to ``config.defaults.output_dir``.
        """
        self.config = config
        self.graph = graph
        self.output_dir = output_dir or config.defaults.output_dir
        env = build_environment(config, templates_dir=templates_dir)
        self.articles = ArticlePageBuilder(
            config, graph, env=env, output_dir=self.output_dir
        )
        self.sections = SectionPageBuilder(
            config, graph, env=env, output_dir=self.output_dir
        )
        self.tags = TagPagesBuilder(config, graph, env=env, output_dir=self.output_dir)

    def run(self) -> list[Path]:
        """Write all artefacts and return their paths in write order.

        Returns
        -------
        list[Path]
            Stylesheet, static files, then article, section, and tag pages.

        Notes
        -----
        Tag permalinks are checked before anything is written. Any missing
        listing section, template, or filesystem error aborts the build;
        there is no partial-recovery mode.
        """
        tags = self.tags.collect()
        self.output_dir.mkdir(parents=True, exist_ok=True)
        stylesheet = HtmlContentRenderer(self.config.defaults.pygments_style).stylesheet
        written = [write_text_asset(self.output_dir, SYNTAX_CSS_PATH, stylesheet)]
        written.extend(copy_static(self.config.defaults.static_dir, self.output_dir))
        written.extend(self.articles.run(page) for page in self.graph.iter_pages())
        written.extend(
            self.sections.run(section) for section in self.graph.iter_sections()
        )
        written.extend(self.tags.run(tags))
        return written


__all__ = ["SiteBuilder"]
