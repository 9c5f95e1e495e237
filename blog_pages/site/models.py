"""Immutable page and section records produced by the content loader."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A rendered article and its position in the content hierarchy.

    Attributes
    ----------
    path : str
        Source path relative to the content root, in POSIX form.
    slug : str
        Final URL segment of the page.
    title : str
        Display title.
    date : datetime.date or None
        Publication date, if declared.
    content : str
        Pre-rendered, HTML-safe body.
    ancestors : tuple[str, ...]
        Section identifiers from the root down to the immediate parent.
    permalink : str
        Absolute public URL.
    tags : tuple[str, ...]
        Tag names declared in front matter.
    draft : bool
        Whether the page was marked as a draft.
    description : str or None
        Optional summary.
    extra : dict[str, Any]
        Free-form front-matter values, left out of the hash.
    """

    path: str
    slug: str
    title: str
    date: dt.date | None
    content: str
    ancestors: tuple[str, ...]
    permalink: str
    tags: tuple[str, ...] = ()
    draft: bool = False
    description: str | None = None
    extra: dict[str, typ.Any] = dc.field(default_factory=dict, hash=False)


@dc.dataclass(frozen=True, slots=True)
class Section:
    """A content directory declared by an ``_index.md`` file."""

    identifier: str
    title: str
    permalink: str
    pages: tuple[Page, ...] = ()
    ancestors: tuple[str, ...] = ()
    subsections: tuple[str, ...] = ()
    description: str | None = None
    content: str = ""
    sort_by: str = "date"


__all__ = ["Page", "Section"]
