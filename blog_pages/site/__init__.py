"""Content discovery and the read-only page/section graph for one build."""

from .graph import PageNotFoundError, SectionNotFoundError, SiteBuildError, SiteGraph
from .loader import load_site, slugify
from .models import Page, Section

__all__ = [
    "Page",
    "PageNotFoundError",
    "Section",
    "SectionNotFoundError",
    "SiteBuildError",
    "SiteGraph",
    "load_site",
    "slugify",
]
