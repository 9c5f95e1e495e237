r"""Split content files into front-matter metadata and a Markdown body.

Articles and section index files open with a metadata block. ``+++`` fences
hold TOML (parsed with :mod:`tomllib`), while ``---`` fences hold YAML parsed
with ruamel.yaml in safe mode. Files without a block are treated as pure
Markdown with empty metadata.

Example
-------
>>> from blog_pages.front_matter import parse_front_matter
>>> meta, body = parse_front_matter(
...     '+++\ntitle = "Ownership"\ndate = 2024-09-26\n+++\nBody\n'
... )
>>> meta.title, meta.date.isoformat(), body
('Ownership', '2024-09-26', 'Body\n')
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import io
import re
import tomllib
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

FRONT_MATTER_PATTERN = re.compile(
    r"\A\ufeff?(\+\+\+|---)[ \t]*\r?\n(.*?)^\1[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)
OPENING_FENCE_PATTERN = re.compile(r"\A\ufeff?(\+\+\+|---)[ \t]*\r?$", re.MULTILINE)
SORT_OPTIONS = frozenset({"date", "none"})


class FrontMatterError(ValueError):
    """Raised when a content file carries malformed front matter."""


@dc.dataclass(frozen=True, slots=True)
class FrontMatter:
    """Metadata declared at the top of a content file.

    Attributes
    ----------
    title : str or None
        Display title of the page or section.
    date : datetime.date or None
        Publication date; datetimes are truncated to their calendar date.
    description : str or None
        Short summary used in listings and the ``<meta>`` description.
    draft : bool
        Whether the page is excluded from regular builds.
    slug : str or None
        Explicit URL segment overriding the slugified file name.
    tags : tuple[str, ...]
        Tag names, taken from ``tags`` or ``taxonomies.tags``.
    sort_by : str
        Section ordering hint, either ``"date"`` or ``"none"``.
    extra : dict[str, Any]
        Free-form values passed through to templates untouched.
    """

    title: str | None = None
    date: dt.date | None = None
    description: str | None = None
    draft: bool = False
    slug: str | None = None
    tags: tuple[str, ...] = ()
    sort_by: str = "date"
    extra: dict[str, typ.Any] = dc.field(default_factory=dict, hash=False)


def parse_front_matter(
    text: str, *, source: str = "<string>"
) -> tuple[FrontMatter, str]:
    """Return the parsed metadata and the remaining Markdown body of ``text``.

    Parameters
    ----------
    text : str
        Full file contents.
    source : str, optional
        Label used in error messages, usually the content-relative path.

    Returns
    -------
    tuple[FrontMatter, str]
        Metadata (defaults when no block is present) and the Markdown body.

    Raises
    ------
    FrontMatterError
        If the opening fence is never closed, the block fails to parse, the
        payload is not a mapping, or a known key holds an invalid value.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        if OPENING_FENCE_PATTERN.match(text):
            msg = f"{source}: front matter is missing its closing delimiter."
            raise FrontMatterError(msg)
        return FrontMatter(), text.removeprefix("\ufeff")

    fence, block = match.groups()
    body = text[match.end() :]
    payload = _load_toml(block, source) if fence == "+++" else _load_yaml(block, source)
    return _build_front_matter(payload, source), body


def _load_toml(block: str, source: str) -> dict[str, typ.Any]:
    try:
        return tomllib.loads(block)
    except tomllib.TOMLDecodeError as exc:
        msg = f"{source}: invalid TOML front matter: {exc}"
        raise FrontMatterError(msg) from exc


def _load_yaml(block: str, source: str) -> dict[str, typ.Any]:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(io.StringIO(block))
    except YAMLError as exc:
        msg = f"{source}: invalid YAML front matter: {exc}"
        raise FrontMatterError(msg) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        msg = f"{source}: front matter must be a mapping."
        raise FrontMatterError(msg)
    return dict(loaded)


def _build_front_matter(payload: dict[str, typ.Any], source: str) -> FrontMatter:
    """Validate known keys and assemble a FrontMatter instance."""
    sort_by = str(payload.get("sort_by", "date")).strip().lower()
    if sort_by not in SORT_OPTIONS:
        options = ", ".join(sorted(SORT_OPTIONS))
        msg = f"{source}: 'sort_by' must be one of: {options}."
        raise FrontMatterError(msg)
    extra = payload.get("extra") or {}
    if not isinstance(extra, dict):
        msg = f"{source}: 'extra' must be a mapping."
        raise FrontMatterError(msg)
    return FrontMatter(
        title=_optional_text(payload.get("title")),
        date=_parse_date(payload.get("date"), source),
        description=_optional_text(payload.get("description")),
        draft=_parse_draft(payload.get("draft"), source),
        slug=_optional_text(payload.get("slug")),
        tags=_parse_tags(payload, source),
        sort_by=sort_by,
        extra=dict(extra),
    )


def _optional_text(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_draft(value: object | None, source: str) -> bool:
    match value:
        case None:
            return False
        case bool():
            return value
        case _:
            msg = f"{source}: 'draft' must be true or false, got {value!r}."
            raise FrontMatterError(msg)


def _parse_date(value: object | None, source: str) -> dt.date | None:
    """Normalize a TOML/YAML date, datetime, or ISO string into a calendar date."""
    match value:
        case None:
            return None
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                return dt.datetime.fromisoformat(sanitized).date()
            except ValueError as exc:
                msg = f"{source}: unparsable date {text!r}."
                raise FrontMatterError(msg) from exc
        case _:
            msg = f"{source}: unsupported date value {value!r}."
            raise FrontMatterError(msg)


def _parse_tags(payload: typ.Mapping[str, typ.Any], source: str) -> tuple[str, ...]:
    """Return tags declared directly or under ``taxonomies.tags``."""
    raw = payload.get("tags")
    if raw is None:
        taxonomies = payload.get("taxonomies") or {}
        if isinstance(taxonomies, dict):
            raw = taxonomies.get("tags")
    match raw:
        case None:
            return ()
        case str() as single:
            candidates: list[object] = [single]
        case list() as items:
            candidates = items
        case _:
            msg = f"{source}: 'tags' must be a list of strings."
            raise FrontMatterError(msg)
    tags: list[str] = []
    for candidate in candidates:
        text = _optional_text(candidate)
        if text and text not in tags:
            tags.append(text)
    return tuple(tags)


__all__ = ["FrontMatter", "FrontMatterError", "parse_front_matter"]
