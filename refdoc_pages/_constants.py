"""Common literal values used across refdoc_pages.

These constants keep reserved page names and output filenames centralized so
templates, generators, and tests can import the same values without drifting.
Intended for internal use within the refdoc_pages package.

Examples
--------
>>> from refdoc_pages import _constants
>>> _constants.DEFAULT_MAIN
'overview'
>>> _constants.PAGE_FILENAME_TEMPLATE.format(id="Enum")
'Enum.html'
"""

DEFAULT_MAIN = "overview"
RESERVED_MAIN = "index"

PAGE_FILENAME_TEMPLATE = "{id}.html"
INDEX_FILENAME = "index.html"
OVERVIEW_FILENAME = "overview.html"
NOT_FOUND_FILENAME = "404.html"
README_FILENAME = "README.html"
SIDEBAR_ITEMS_PATH = "dist/sidebar_items.js"

ASSETS_DIRNAME = "assets"
LOGO_PREFIX_LENGTH = 16
