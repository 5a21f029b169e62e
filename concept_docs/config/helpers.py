"""Utility helpers shared by the concept_docs configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from concept_docs._constants import CATEGORIES, Category

from .models import (
    FeatureCardConfig,
    HomepageConfig,
    NavLinkConfig,
    SiteConfigError,
    ThemeConfig,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(value: object, base_dir: Path) -> Path:
    """Return ``value`` as a Path, anchoring relative paths at ``base_dir``."""
    path = Path(str(value)).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def _require_category(value: object, context: str) -> Category:
    """Return ``value`` as a known category or raise SiteConfigError."""
    if value not in CATEGORIES:
        known = ", ".join(CATEGORIES)
        msg = f"{context}: unknown category {value!r} (expected one of {known})."
        raise SiteConfigError(msg)
    return typ.cast("Category", value)


def _normalize_base_path(value: object | None) -> str:
    """Return a base path without a trailing slash, or '' for the site root."""
    text = _optional_str(value)
    if not text or text == "/":
        return ""
    if not text.startswith("/"):
        text = f"/{text}"
    return text.rstrip("/")


def _build_category_dirs(
    payload: typ.Mapping[str, typ.Any] | None, base_dir: Path
) -> dict[Category, Path]:
    """Build per-category directory overrides from the ``categories`` mapping."""
    result: dict[Category, Path] = {}
    if not payload:
        return result
    for key, value in payload.items():
        category = _require_category(key, "categories")
        if value is None:
            continue
        result[category] = _resolve_path(value, base_dir)
    return result


def _build_theme_config(payload: typ.Mapping[str, typ.Any] | None) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    if not payload:
        return base
    tailwind_script = payload.get("tailwind_script", base.tailwind_script)
    return ThemeConfig(
        site_title=payload.get("site_title", base.site_title),
        brand=payload.get("brand", base.brand),
        description=payload.get("description", base.description),
        footer_note=payload.get("footer_note", base.footer_note),
        tailwind_script=_optional_str(tailwind_script),
    )


def _build_nav_links(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[NavLinkConfig]:
    """Build header navigation links from the ``navigation.links`` list."""
    links: list[NavLinkConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return links
    for entry in iterable:
        match entry:
            case {"label": label, **rest}:
                pass
            case _:
                msg = "Navigation links require a 'label'."
                raise SiteConfigError(msg)
        category = rest.get("category")
        href = _optional_str(rest.get("href"))
        if not label or (category is None and href is None):
            msg = "Navigation links require a 'label' and a 'category' or 'href'."
            raise SiteConfigError(msg)
        links.append(
            NavLinkConfig(
                label=str(label),
                category=(
                    _require_category(category, f"navigation link {label!r}")
                    if category is not None
                    else None
                ),
                href=href,
            )
        )
    return links


def _build_homepage_config(
    payload: typ.Mapping[str, typ.Any] | None,
    default_features: list[FeatureCardConfig],
) -> HomepageConfig:
    """Build the landing page configuration, keeping defaults for absent keys."""
    base = HomepageConfig()
    if not payload:
        return HomepageConfig(features=default_features)
    match payload:
        case dict() as data:
            pass
        case _:
            msg = "Homepage configuration must be a mapping."
            raise SiteConfigError(msg)
    features_raw = data.get("features")
    features = (
        _build_feature_cards(features_raw)
        if features_raw is not None
        else default_features
    )
    return HomepageConfig(
        title=str(data.get("title", base.title)),
        tagline=str(data.get("tagline", base.tagline)),
        cta_label=str(data.get("cta_label", base.cta_label)),
        fallback_href=str(data.get("fallback_href", base.fallback_href)),
        features=features,
    )


def _build_feature_cards(entries: object) -> list[FeatureCardConfig]:
    """Build feature tiles, rejecting entries without a title or description."""
    if not isinstance(entries, list):
        msg = "Homepage 'features' must be a list."
        raise SiteConfigError(msg)
    cards: list[FeatureCardConfig] = []
    for entry in entries:
        match entry:
            case {"title": title, "description": description, **rest}:
                cards.append(
                    FeatureCardConfig(
                        title=str(title),
                        description=str(description),
                        icon=str(rest.get("icon", "check")),
                    )
                )
            case _:
                msg = "Homepage features require 'title' and 'description'."
                raise SiteConfigError(msg)
    return cards


__all__ = [
    "_build_category_dirs",
    "_build_feature_cards",
    "_build_homepage_config",
    "_build_nav_links",
    "_build_theme_config",
    "_normalize_base_path",
    "_optional_str",
    "_require_category",
    "_resolve_path",
]
