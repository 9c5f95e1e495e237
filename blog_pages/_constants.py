"""Common literal values used across blog_pages.

These constants keep filenames and identifiers centralized so the content
loader, the article listing, templates, and tests can import the same values
without drifting. Intended for internal use within the blog_pages package.

Examples
--------
>>> from blog_pages import _constants
>>> _constants.DEFAULT_SECTION
'index.md'
>>> _constants.SECTION_INDEX.startswith("_")
True
"""

DEFAULT_SECTION = "index.md"
SECTION_INDEX = "_index.md"
DEFAULT_DATE_FORMAT = "%B %d, %Y"
SYNTAX_CSS_PATH = "assets/syntax.css"
INTERNAL_LINK_PREFIX = "@/"
