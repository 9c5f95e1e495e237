"""View models passed to the listing templates."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata


@dc.dataclass(slots=True)
class ListingEntry:
    """One linked article in a section or tag listing.

    Attributes
    ----------
    title : str
        Article title used as the link label.
    permalink : str
        Absolute article URL.
    date : datetime.date or None
        Publication date shown beside the link.
    description : str or None
        Optional one-line summary.
    """

    title: str
    permalink: str
    date: dt.date | None = None
    description: str | None = None


@dc.dataclass(slots=True)
class TagModel:
    """Tag summary rendered on the tag index page."""

    name: str
    slug: str
    permalink: str
    entries: list[ListingEntry]

    @property
    def count(self) -> int:
        """Return the number of articles carrying the tag."""
        return len(self.entries)


__all__ = ["ListingEntry", "TagModel"]
