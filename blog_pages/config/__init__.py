"""Load and validate site configuration YAML for blog builds.

This subpackage parses the project's ``site.yaml`` file, resolves content,
output, and static directories relative to the file, and produces strongly
typed dataclasses (:class:`SiteConfig`, :class:`BuildDefaults`, etc.) that the
content loader and page builders consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.url_for("learning-path/ownership")  # doctest: +SKIP
'https://example.com/learning-path/ownership/'
"""

from .loader import load_site_config
from .models import (
    BuildDefaults,
    NavLinkConfig,
    SiteConfig,
    SiteConfigError,
    SubscribeFormConfig,
)

__all__ = [
    "BuildDefaults",
    "NavLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "SubscribeFormConfig",
    "load_site_config",
]
