"""Common literal values used across mint_migrate.

These constants keep filenames, suffixes and ranking defaults centralized so
the walker, the assembler, and tests import the same values without drifting.
Intended for internal use within the mint_migrate package.

Examples
--------
>>> from mint_migrate import _constants
>>> _constants.CATEGORY_META_FILENAME
'_category_.json'
>>> ".mdx" in _constants.CONTENT_SUFFIXES
True
"""

CATEGORY_META_FILENAME = "_category_.json"
CONTENT_SUFFIXES = (".md", ".mdx")
TARGET_SUFFIX = ".mdx"
INDEX_FILENAMES = frozenset({"index.md", "index.mdx", "README.md", "readme.md"})
INDEX_BASENAMES = frozenset({"index", "readme"})

INDEX_RANK = -1.0
DEFAULT_RANK = 9999.0

MANIFEST_FILENAME = "docs.json"
MANIFEST_SCHEMA_URL = "https://mintlify.com/docs.json"
IMAGES_DIRNAME = "images"
DEFAULT_OUTPUT_DIR = "mintlify-output"

GUIDES_DIRNAME = "guides"
SHARED_INCLUDES_DIRNAME = "partials"
GETTING_STARTED_LABEL = "Getting Started"
OVERVIEW_TITLE = "Overview"
