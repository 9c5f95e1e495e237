"""Discover Markdown content and assemble the immutable site graph.

The loader walks the configured content directory, parses front matter for
every ``*.md`` file, and decides which files are sections (``_index.md``) and
which are pages. It then assigns slugs, permalinks, and ancestor chains,
renders every body once through :class:`HtmlContentRenderer` (with internal
``@/`` links resolved against the full permalink table), and freezes the
result into a :class:`SiteGraph`.

Example
-------
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> from blog_pages.site import load_site
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> graph = load_site(config)  # doctest: +SKIP
>>> graph.get_section("learning-path/_index.md").title  # doctest: +SKIP
'Learning path'
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
import re
import typing as typ
from pathlib import PurePosixPath

from blog_pages._constants import SECTION_INDEX
from blog_pages.front_matter import FrontMatter, parse_front_matter
from blog_pages.rendering import HtmlContentRenderer, InternalLinkExtension

from .graph import SiteBuildError, SiteGraph
from .models import Page, Section

if typ.TYPE_CHECKING:
    from pathlib import Path

    from blog_pages.config import SiteConfig


@dc.dataclass(slots=True)
class _Source:
    """A parsed content file awaiting permalink assignment and rendering."""

    path: str
    meta: FrontMatter
    body: str

    @property
    def is_section(self) -> bool:
        return PurePosixPath(self.path).name == SECTION_INDEX

    @property
    def directory(self) -> str:
        parent = posixpath.dirname(self.path)
        return "" if parent == "." else parent


def load_site(config: SiteConfig, *, include_drafts: bool | None = None) -> SiteGraph:
    """Load every content file under the configured content directory.

    Parameters
    ----------
    config : SiteConfig
        Site configuration supplying the content directory, base URL, and
        Pygments style.
    include_drafts : bool, optional
        Override for ``config.defaults.include_drafts``.

    Returns
    -------
    SiteGraph
        Fully rendered, read-only pages and sections.

    Raises
    ------
    FileNotFoundError
        If the content directory does not exist.
    FrontMatterError
        If any content file has malformed front matter.
    SiteBuildError
        If two content files resolve to the same permalink.
    BrokenLinkError
        If a body links to an ``@/`` target that is not part of the build.
    """
    content_dir = config.defaults.content_dir
    if not content_dir.is_dir():
        msg = f"Content directory '{content_dir}' not found."
        raise FileNotFoundError(msg)
    drafts = config.defaults.include_drafts if include_drafts is None else include_drafts

    sources = _discover_sources(content_dir)
    section_sources = [src for src in sources if src.is_section]
    page_sources = [
        src
        for src in sources
        if not src.is_section and (drafts or not src.meta.draft)
    ]
    section_ids = {src.path for src in section_sources}

    permalinks: dict[str, str] = {}
    owners: dict[str, str] = {}
    slugs: dict[str, str] = {}
    for src in section_sources:
        _register(permalinks, owners, src.path, config.url_for(src.directory))
    for src in page_sources:
        slug = src.meta.slug or slugify(PurePosixPath(src.path).stem) or "page"
        slugs[src.path] = slug
        url_path = posixpath.join(src.directory, slug)
        _register(permalinks, owners, src.path, config.url_for(url_path))

    renderer = HtmlContentRenderer(
        config.defaults.pygments_style,
        link_extension=InternalLinkExtension(permalinks),
    )
    pages: dict[str, Page] = {}
    for src in page_sources:
        pages[src.path] = Page(
            path=src.path,
            slug=slugs[src.path],
            title=src.meta.title or _title_from_path(src.path),
            date=src.meta.date,
            content=renderer.markdown(src.body),
            ancestors=_ancestors(src.directory, section_ids),
            permalink=permalinks[src.path],
            tags=src.meta.tags,
            draft=src.meta.draft,
            description=src.meta.description,
            extra=src.meta.extra,
        )

    # The root section has no ancestors; every other section hangs off the
    # nearest directory above it that has an index file.
    section_chains = {
        src.path: (
            _ancestors(_parent_directory(src.directory), section_ids)
            if src.directory
            else ()
        )
        for src in section_sources
    }
    sections: dict[str, Section] = {}
    for src in section_sources:
        sections[src.path] = Section(
            identifier=src.path,
            title=src.meta.title or _section_title(src.directory, config.title),
            permalink=permalinks[src.path],
            pages=tuple(
                page
                for page in pages.values()
                if page.ancestors[-1:] == (src.path,)
            ),
            ancestors=section_chains[src.path],
            subsections=tuple(
                other
                for other, chain in section_chains.items()
                if chain[-1:] == (src.path,)
            ),
            description=src.meta.description,
            content=renderer.markdown(src.body),
            sort_by=src.meta.sort_by,
        )

    return SiteGraph(sections=sections, pages=pages)


def slugify(value: str) -> str:
    """Convert a string into a lowercase hyphen-separated slug."""
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


def _discover_sources(content_dir: Path) -> list[_Source]:
    """Parse every Markdown file below ``content_dir`` in sorted path order."""
    sources: list[_Source] = []
    relative_paths = sorted(
        path.relative_to(content_dir).as_posix()
        for path in content_dir.rglob("*.md")
        if path.is_file()
    )
    for rel_path in relative_paths:
        text = (content_dir / rel_path).read_text(encoding="utf-8")
        meta, body = parse_front_matter(text, source=rel_path)
        sources.append(_Source(path=rel_path, meta=meta, body=body))
    return sources


def _register(
    permalinks: dict[str, str], owners: dict[str, str], path: str, permalink: str
) -> None:
    """Record ``permalink`` for ``path``, rejecting collisions."""
    if permalink in owners:
        msg = (
            f"'{path}' and '{owners[permalink]}' both resolve to permalink "
            f"'{permalink}'."
        )
        raise SiteBuildError(msg)
    owners[permalink] = path
    permalinks[path] = permalink


def _ancestors(directory: str, section_ids: typ.Collection[str]) -> tuple[str, ...]:
    """Return existing section identifiers from the root down to ``directory``."""
    candidates = [SECTION_INDEX]
    parts = PurePosixPath(directory).parts if directory else ()
    for depth in range(1, len(parts) + 1):
        candidates.append("/".join((*parts[:depth], SECTION_INDEX)))
    return tuple(candidate for candidate in candidates if candidate in section_ids)


def _parent_directory(directory: str) -> str:
    parent = posixpath.dirname(directory)
    return "" if parent == "." else parent


def _title_from_path(path: str) -> str:
    return PurePosixPath(path).stem.replace("-", " ").replace("_", " ").title()


def _section_title(directory: str, site_title: str) -> str:
    if not directory:
        return site_title
    return PurePosixPath(directory).name.replace("-", " ").capitalize()


__all__ = ["load_site", "slugify"]
