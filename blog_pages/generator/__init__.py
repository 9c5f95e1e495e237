"""Utilities for rendering articles, sections, and tag pages to static HTML."""

from .article_page import ArticlePageBuilder
from .environment import build_environment, format_date
from .listing_pages import SectionPageBuilder, TagPagesBuilder
from .models import ListingEntry, TagModel
from .site_builder import SiteBuilder

__all__ = [
    "ArticlePageBuilder",
    "ListingEntry",
    "SectionPageBuilder",
    "SiteBuilder",
    "TagModel",
    "TagPagesBuilder",
    "build_environment",
    "format_date",
]
