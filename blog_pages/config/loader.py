"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_defaults,
    _build_nav_links,
    _build_subscribe_config,
    _mapping_block,
    _optional_str,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the blog and its build defaults.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative directories inside the file resolve
        against the directory that contains it.

    Returns
    -------
    SiteConfig
        Parsed site configuration, including build defaults, navigation links,
        and the optional subscription form.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required fields (``title``, ``base_url``) are missing or a nested
        block is malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from blog_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.defaults.default_section  # doctest: +SKIP
    '_index.md'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    title = _optional_str(raw.get("title"))
    if not title:
        msg = "Site configuration requires a 'title'."
        raise SiteConfigError(msg)
    base_url = _optional_str(raw.get("base_url"))
    if not base_url:
        msg = "Site configuration requires a 'base_url'."
        raise SiteConfigError(msg)

    base_dir = path.resolve().parent
    defaults = _build_defaults(
        _mapping_block(raw.get("defaults"), "defaults"), base_dir
    )
    navigation = _mapping_block(raw.get("navigation"), "navigation")
    nav_links = _build_nav_links(navigation.get("links"))
    subscribe = _build_subscribe_config(raw.get("subscribe"))

    return SiteConfig(
        title=title,
        base_url=base_url,
        description=_optional_str(raw.get("description")) or "",
        author=_optional_str(raw.get("author")),
        defaults=defaults,
        nav_links=nav_links,
        subscribe=subscribe,
    )


__all__ = ["load_site_config"]
