"""Utility helpers shared by the blog configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import (
    BuildDefaults,
    NavLinkConfig,
    SiteConfigError,
    SubscribeFormConfig,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _mapping_block(value: object | None, name: str) -> typ.Mapping[str, typ.Any]:
    """Return the ``name`` block as a mapping, treating an absent block as empty."""
    match value:
        case None:
            return {}
        case dict() as block:
            return block
        case _:
            msg = f"'{name}' configuration must be a mapping."
            raise SiteConfigError(msg)


def _flag(value: object | None, name: str, *, default: bool = False) -> bool:
    """Return a YAML boolean, rejecting strings such as ``"false"``."""
    match value:
        case None:
            return default
        case bool():
            return value
        case _:
            msg = f"'{name}' must be true or false, got {value!r}."
            raise SiteConfigError(msg)


def _resolve_path(value: object | None, base_dir: Path, fallback: Path) -> Path:
    """Return ``value`` as a path anchored at ``base_dir`` when relative."""
    text = _optional_str(value)
    path = Path(text) if text else fallback
    if path.is_absolute():
        return path
    return base_dir / path


def _build_defaults(
    payload: typ.Mapping[str, typ.Any], base_dir: Path
) -> BuildDefaults:
    """Build BuildDefaults from the ``defaults`` mapping of the config file."""
    base = BuildDefaults()
    templates_value = _optional_str(payload.get("templates_dir"))
    templates_dir = (
        _resolve_path(templates_value, base_dir, Path()) if templates_value else None
    )
    default_section = _optional_str(payload.get("default_section"))
    return BuildDefaults(
        content_dir=_resolve_path(
            payload.get("content_dir"), base_dir, base.content_dir
        ),
        output_dir=_resolve_path(payload.get("output_dir"), base_dir, base.output_dir),
        static_dir=_resolve_path(payload.get("static_dir"), base_dir, base.static_dir),
        templates_dir=templates_dir,
        default_section=default_section or base.default_section,
        pygments_style=payload.get("pygments_style", base.pygments_style),
        date_format=payload.get("date_format", base.date_format),
        include_drafts=_flag(
            payload.get("include_drafts"),
            "include_drafts",
            default=base.include_drafts,
        ),
    )


def _build_nav_links(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[NavLinkConfig]:
    """Build navigation link configurations for the shared header."""
    links: list[NavLinkConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case None:
            return links
        case _:
            msg = "Navigation 'links' must be a list."
            raise SiteConfigError(msg)
    for entry in iterable:
        match entry:
            case {"label": label, "href": href, **rest}:
                pass
            case _:
                msg = "Navigation links require 'label' and 'href'."
                raise SiteConfigError(msg)
        if not label or not href:
            msg = "Navigation links require 'label' and 'href'."
            raise SiteConfigError(msg)
        links.append(
            NavLinkConfig(
                label=str(label),
                href=str(href),
                external=_flag(rest.get("external"), "external"),
            )
        )
    return links


def _build_subscribe_config(
    payload: typ.Mapping[str, typ.Any] | None,
) -> SubscribeFormConfig | None:
    """Build the subscription form block, or None when it is not configured."""
    if payload is None:
        return None
    if not isinstance(payload, dict):
        msg = "Subscribe configuration must be a mapping."
        raise SiteConfigError(msg)
    action = _optional_str(payload.get("action"))
    if not action:
        msg = "Subscribe configuration requires an 'action' URL."
        raise SiteConfigError(msg)
    base = SubscribeFormConfig(action=action)
    return SubscribeFormConfig(
        action=action,
        heading=_optional_str(payload.get("heading")) or base.heading,
        button_label=_optional_str(payload.get("button_label")) or base.button_label,
        email_placeholder=(
            _optional_str(payload.get("email_placeholder")) or base.email_placeholder
        ),
    )


__all__ = [
    "_build_defaults",
    "_build_nav_links",
    "_build_subscribe_config",
    "_flag",
    "_mapping_block",
    "_optional_str",
    "_resolve_path",
]
