"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_category_dirs,
    _build_homepage_config,
    _build_nav_links,
    _build_theme_config,
    _normalize_base_path,
    _resolve_path,
)
from .models import SiteConfig, SiteConfigError, _default_features


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing content, output, and theming.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative directories inside the file are
        resolved against the file's own directory.

    Returns
    -------
    SiteConfig
        Parsed site configuration with defaults applied for absent keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section holds invalid values (for example, an unknown category).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from concept_docs.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.link_suffix  # doctest: +SKIP
    '.html'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.resolve().parent
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise SiteConfigError(msg)
    base = SiteConfig()

    link_suffix = defaults.get("link_suffix", base.link_suffix)
    if link_suffix is None:
        link_suffix = ""
    navigation = raw.get("navigation", {}) or {}
    if not isinstance(navigation, dict):
        msg = "'navigation' must be a mapping."
        raise SiteConfigError(msg)
    nav_links = _build_nav_links(navigation.get("links"))
    if "links" not in navigation:
        nav_links = SiteConfig.default().nav_links

    return SiteConfig(
        content_root=_resolve_path(
            defaults.get("content_root", base.content_root), base_dir
        ),
        output_dir=_resolve_path(defaults.get("output_dir", base.output_dir), base_dir),
        category_dirs=_build_category_dirs(raw.get("categories"), base_dir),
        pygments_style=str(defaults.get("pygments_style", base.pygments_style)),
        base_path=_normalize_base_path(defaults.get("base_path")),
        link_suffix=str(link_suffix),
        theme=_build_theme_config(raw.get("theme")),
        nav_links=nav_links,
        homepage=_build_homepage_config(raw.get("homepage"), _default_features()),
    )


__all__ = ["load_site_config"]
