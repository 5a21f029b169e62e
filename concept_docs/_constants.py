"""Common literal values used across concept_docs.

These constants keep category names, filenames, and suffixes centralized so
the indexer, generators, templates, and tests can import the same values
without drifting. Intended for internal use within the concept_docs package.

Examples
--------
>>> from concept_docs import _constants
>>> _constants.CATEGORIES
('basics', 'advanced')
>>> "docs-manifest.json" == _constants.MANIFEST_FILENAME
True
"""

import typing as typ

Category = typ.Literal["basics", "advanced"]

CATEGORIES: tuple[Category, ...] = ("basics", "advanced")
MARKDOWN_SUFFIX = ".md"
MANIFEST_FILENAME = "docs-manifest.json"
NOT_FOUND_FILENAME = "404.html"
HOMEPAGE_FILENAME = "index.html"
DOCS_ROUTE_PREFIX = "docs"
