"""Cyclopts CLI entrypoint for building the blog.

The ``blog`` console script defined here renders the Markdown articles under
the configured content directory into static HTML, and can check that the
content tree is consistent without writing anything. Typical usage involves
running ``blog build`` locally or in the hosting provider's build hook, and
``blog check`` in CI before publishing.

Examples
--------
Build the site with the default configuration:

>>> from blog_pages.cli import main
>>> main()  # doctest: +SKIP

Build drafts into a preview directory:

>>> from blog_pages.cli import app
>>> app(["build", "--drafts", "--output-dir", "preview"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .generator import SiteBuilder
from .listing import resolve_listing_section
from .site import load_site

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="blog", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the blog's Markdown content into static HTML.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    drafts: typ.Annotated[
        bool, Parameter(help="Include draft articles", env_var="INPUT_DRAFTS")
    ] = False,
) -> None:
    """Build every article, section, and tag page.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.
    drafts : bool, optional
        Render pages marked ``draft`` as well; also enabled when the config
        sets ``include_drafts``.

    Returns
    -------
    None
        Writes rendered artefacts and prints one ``wrote`` line per file.

    Raises
    ------
    SiteConfigError
        If the configuration is invalid.
    FrontMatterError
        If a content file has malformed front matter.
    SiteBuildError
        If permalinks collide or an article's listing section does not exist.
    """
    site_config = load_site_config(config)
    graph = load_site(
        site_config, include_drafts=drafts or site_config.defaults.include_drafts
    )
    for path in SiteBuilder(site_config, graph, output_dir=output_dir).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Validate configuration and content without writing output.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    drafts: typ.Annotated[
        bool, Parameter(help="Include draft articles", env_var="INPUT_DRAFTS")
    ] = False,
) -> None:
    """Load the site and resolve every article's listing section.

    Raises the same errors as :func:`build`, including
    :class:`~blog_pages.site.SectionNotFoundError` when an article would fall
    back to a default section that does not exist.
    """
    site_config = load_site_config(config)
    graph = load_site(
        site_config, include_drafts=drafts or site_config.defaults.include_drafts
    )
    default_section = site_config.defaults.default_section
    for page in graph.iter_pages():
        graph.get_section(resolve_listing_section(page, default_section))
    print(f"ok: {len(graph.pages)} pages, {len(graph.sections)} sections")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``blog`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
