"""Load and validate site configuration YAML for concept_docs builds.

This subpackage parses the project's ``site.yaml`` file, applies defaults,
resolves content and output directories relative to the file, and produces
typed dataclasses (:class:`SiteConfig`, :class:`ThemeConfig`, etc.) that the
indexer and generators consume. The primary entry point is
:func:`load_site_config`; :meth:`SiteConfig.default` provides the built-in
configuration when no file exists.

Examples
--------
>>> from pathlib import Path
>>> from concept_docs.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.directory_for("basics")  # doctest: +SKIP
PosixPath('.../content/basics')
"""

from .loader import load_site_config
from .models import (
    FeatureCardConfig,
    HomepageConfig,
    NavLinkConfig,
    SiteConfig,
    SiteConfigError,
    ThemeConfig,
)

__all__ = [
    "FeatureCardConfig",
    "HomepageConfig",
    "NavLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
    "load_site_config",
]
