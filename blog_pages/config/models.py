"""Typed dataclasses describing blog site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from blog_pages._constants import DEFAULT_DATE_FORMAT, DEFAULT_SECTION


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Navigation link rendered by the shared header macro."""

    label: str
    href: str
    external: bool = False


@dc.dataclass(slots=True)
class SubscribeFormConfig:
    """Static newsletter form posting to an external handler."""

    action: str
    heading: str = "Get new articles by email"
    button_label: str = "Subscribe"
    email_placeholder: str = "you@example.com"


@dc.dataclass(slots=True)
class BuildDefaults:
    """Filesystem locations and rendering knobs applied to every build."""

    content_dir: Path = Path("content")
    output_dir: Path = Path("public")
    static_dir: Path = Path("static")
    templates_dir: Path | None = None
    default_section: str = DEFAULT_SECTION
    pygments_style: str = "monokai"
    date_format: str = DEFAULT_DATE_FORMAT
    include_drafts: bool = False


@dc.dataclass(slots=True)
class SiteConfig:
    """Site-wide metadata alongside build defaults."""

    title: str
    base_url: str
    description: str = ""
    author: str | None = None
    defaults: BuildDefaults = dc.field(default_factory=BuildDefaults)
    nav_links: list[NavLinkConfig] = dc.field(default_factory=list)
    subscribe: SubscribeFormConfig | None = None

    def url_for(self, path: str) -> str:
        """Return an absolute URL for a site-relative ``path``."""
        base = self.base_url.rstrip("/")
        normalized = path.strip("/")
        if not normalized:
            return f"{base}/"
        return f"{base}/{normalized}/"

    def asset_url(self, path: str) -> str:
        """Return an absolute URL for a file (no trailing slash) under the site."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def output_path(self, permalink: str) -> str:
        """Return the site-relative directory that serves ``permalink``."""
        base = self.base_url.rstrip("/")
        if not permalink.startswith(base):
            msg = f"Permalink '{permalink}' is outside base URL '{self.base_url}'."
            raise SiteConfigError(msg)
        return permalink[len(base) :].strip("/")


__all__ = [
    "BuildDefaults",
    "NavLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "SubscribeFormConfig",
]
