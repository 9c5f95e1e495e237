"""Render section index pages and tag pages."""

from __future__ import annotations

import datetime as dt
import typing as typ

from markupsafe import Markup

from blog_pages.listing import sort_by_date
from blog_pages.site import SiteBuildError, slugify

from .environment import build_environment
from .models import ListingEntry, TagModel
from .output import write_html

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from jinja2 import Environment

    from blog_pages.config import SiteConfig
    from blog_pages.site import Page, Section, SiteGraph

TAGS_PATH = "tags"


def tag_slug(name: str) -> str:
    """Return the URL segment used for tag ``name``."""
    return slugify(name) or "tag"


def tag_permalink(config: SiteConfig, name: str) -> str:
    """Return the absolute URL of the page listing articles tagged ``name``."""
    return config.url_for(f"{TAGS_PATH}/{tag_slug(name)}")


def _entries(pages: cabc.Iterable[Page]) -> list[ListingEntry]:
    return [
        ListingEntry(
            title=page.title,
            permalink=page.permalink,
            date=page.date,
            description=page.description,
        )
        for page in pages
    ]


def _claim(owners: dict[str, str], permalink: str, owner: str) -> None:
    if permalink in owners:
        msg = (
            f"{owner} and {owners[permalink]} both resolve to permalink "
            f"'{permalink}'."
        )
        raise SiteBuildError(msg)
    owners[permalink] = owner


class SectionPageBuilder:
    """Render the landing page of a section with its articles and subsections."""

    def __init__(
        self,
        config: SiteConfig,
        graph: SiteGraph,
        *,
        env: Environment | None = None,
        output_dir: Path | None = None,
    ) -> None:
        self.config = config
        self.graph = graph
        self.env = env or build_environment(config)
        self.output_dir = output_dir or config.defaults.output_dir
        self.template = self.env.get_template("section.jinja")

    def render(self, section: Section) -> str:
        """Return the HTML for ``section``; ``sort_by = "none"`` keeps file order."""
        pages = (
            sort_by_date(section.pages)
            if section.sort_by == "date"
            else list(section.pages)
        )
        subsections = [
            self.graph.get_section(identifier) for identifier in section.subsections
        ]
        context = {
            "config": self.config,
            "section": section,
            "content": Markup(section.content),
            "entries": _entries(pages),
            "subsections": subsections,
            "subscribe": self.config.subscribe,
            "html_title": (
                self.config.title
                if not section.ancestors
                else f"{section.title} | {self.config.title}"
            ),
            "meta_description": section.description or self.config.description,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        return self.template.render(**context)

    def run(self, section: Section) -> Path:
        """Render ``section`` and write it below the output directory."""
        return write_html(
            self.output_dir,
            self.config.output_path(section.permalink),
            self.render(section),
        )


class TagPagesBuilder:
    """Render ``/tags/`` and one ``/tags/<slug>/`` page per tag."""

    def __init__(
        self,
        config: SiteConfig,
        graph: SiteGraph,
        *,
        env: Environment | None = None,
        output_dir: Path | None = None,
    ) -> None:
        self.config = config
        self.graph = graph
        self.env = env or build_environment(config)
        self.output_dir = output_dir or config.defaults.output_dir
        self.index_template = self.env.get_template("tags.jinja")
        self.tag_template = self.env.get_template("tag.jinja")

    def collect(self) -> list[TagModel]:
        """Return tag models sorted by name, each listing articles newest first.

        Raises
        ------
        SiteBuildError
            If two tags share a slug, or a tag page would land on the
            permalink of a content page or section.
        """
        grouped = self.graph.pages_by_tag()
        if not grouped:
            return []
        owners = {
            page.permalink: f"'{page.path}'" for page in self.graph.iter_pages()
        }
        owners.update(
            (section.permalink, f"'{section.identifier}'")
            for section in self.graph.iter_sections()
        )
        _claim(owners, self.config.url_for(TAGS_PATH), "the tag index")
        tags: list[TagModel] = []
        for name, pages in grouped.items():
            permalink = tag_permalink(self.config, name)
            _claim(owners, permalink, f"tag '{name}'")
            tags.append(
                TagModel(
                    name=name,
                    slug=tag_slug(name),
                    permalink=permalink,
                    entries=_entries(sort_by_date(pages)),
                )
            )
        tags.sort(key=lambda tag: tag.name.lower())
        return tags

    def run(self, tags: list[TagModel] | None = None) -> list[Path]:
        """Write the tag index and every tag page; nothing is written without tags.

        ``tags`` may be passed in when the caller already ran :meth:`collect`.
        """
        if tags is None:
            tags = self.collect()
        if not tags:
            return []
        generated_at = dt.datetime.now(dt.UTC)
        base_context = {
            "config": self.config,
            "subscribe": self.config.subscribe,
            "meta_description": self.config.description,
            "generated_at": generated_at,
        }
        written = [
            write_html(
                self.output_dir,
                TAGS_PATH,
                self.index_template.render(
                    tags=tags,
                    html_title=f"Tags | {self.config.title}",
                    **base_context,
                ),
            )
        ]
        for tag in tags:
            html = self.tag_template.render(
                tag=tag,
                html_title=f"#{tag.name} | {self.config.title}",
                **base_context,
            )
            written.append(write_html(self.output_dir, f"{TAGS_PATH}/{tag.slug}", html))
        return written


__all__ = [
    "TAGS_PATH",
    "SectionPageBuilder",
    "TagPagesBuilder",
    "tag_permalink",
    "tag_slug",
]
