"""Shared Jinja environment for every page builder."""

from __future__ import annotations

import datetime as dt
import functools
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from blog_pages._constants import DEFAULT_DATE_FORMAT

if typ.TYPE_CHECKING:
    from blog_pages.config import SiteConfig

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def format_date(value: dt.date | None, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    """Format ``value`` with ``strftime``; missing dates render as ``""``."""
    if value is None:
        return ""
    return value.strftime(fmt)


def build_environment(
    config: SiteConfig, *, templates_dir: Path | None = None
) -> Environment:
    """Return a Jinja environment with the blog filters and globals installed.

    Parameters
    ----------
    config : SiteConfig
        Site configuration providing the date format and URL helpers.
    templates_dir : Path, optional
        Template directory; falls back to ``config.defaults.templates_dir`` and
        then to the packaged ``blog_pages/templates``.
    """
    directory = templates_dir or config.defaults.templates_dir or DEFAULT_TEMPLATES_DIR
    env = Environment(
        loader=FileSystemLoader(str(directory)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["date"] = functools.partial(
        _date_filter, default_format=config.defaults.date_format
    )
    env.globals["asset_url"] = config.asset_url
    env.globals["url_for"] = config.url_for
    return env


def _date_filter(
    value: dt.date | None, fmt: str | None = None, *, default_format: str
) -> str:
    return format_date(value, fmt or default_format)


__all__ = ["DEFAULT_TEMPLATES_DIR", "build_environment", "format_date"]
