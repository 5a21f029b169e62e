"""Typed dataclasses describing concept_docs site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from concept_docs._constants import CATEGORIES, Category


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Shared chrome rendered around every page."""

    site_title: str = "Frontend Concepts Documentation"
    brand: str = "Frontend Docs"
    description: str = "A comprehensive guide to frontend development concepts"
    footer_note: str = "Frontend Concepts Documentation"
    tailwind_script: str | None = "https://cdn.tailwindcss.com?plugins=typography"


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Header navigation link pointing at a category or a fixed href."""

    label: str
    category: Category | None = None
    href: str | None = None


@dc.dataclass(slots=True)
class FeatureCardConfig:
    """Feature tile shown beneath the landing page hero."""

    title: str
    description: str
    icon: str = "check"


@dc.dataclass(slots=True)
class HomepageConfig:
    """Hero copy and feature cards for the landing page."""

    title: str = "Frontend Concepts"
    tagline: str = (
        "A comprehensive collection of frontend development concepts, from "
        "basic JavaScript methods to advanced React patterns."
    )
    cta_label: str = "Get Started"
    fallback_href: str = "/docs/basics/array.prototype.filter.html"
    features: list[FeatureCardConfig] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site configuration consumed by the generators.

    Attributes
    ----------
    content_root : Path
        Directory holding one subdirectory per category.
    output_dir : Path
        Directory the static site is written to.
    category_dirs : dict[Category, Path]
        Per-category directory overrides; categories not listed here live at
        ``content_root / <category>``.
    pygments_style : str
        Pygments style used for highlighted code blocks.
    base_path : str
        URL prefix prepended to every internal link (``""`` for the root).
    link_suffix : str
        Suffix appended to document links, ``".html"`` unless the host serves
        clean URLs.
    theme : ThemeConfig
        Shared page chrome.
    nav_links : list[NavLinkConfig]
        Header navigation entries.
    homepage : HomepageConfig
        Landing page copy.
    """

    content_root: Path = Path("content")
    output_dir: Path = Path("public")
    category_dirs: dict[Category, Path] = dc.field(default_factory=dict)
    pygments_style: str = "monokai"
    base_path: str = ""
    link_suffix: str = ".html"
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    nav_links: list[NavLinkConfig] = dc.field(default_factory=list)
    homepage: HomepageConfig = dc.field(default_factory=HomepageConfig)

    @classmethod
    def default(cls, content_root: Path | None = None) -> SiteConfig:
        """Return the built-in configuration used when no file is supplied."""
        config = cls(
            nav_links=[
                NavLinkConfig(label="Basics", category="basics"),
                NavLinkConfig(label="Advanced", category="advanced"),
            ],
            homepage=HomepageConfig(features=_default_features()),
        )
        if content_root is not None:
            config.content_root = content_root
        return config

    def directory_for(self, category: Category) -> Path:
        """Return the content directory backing ``category``."""
        return self.category_dirs.get(category, self.content_root / category)

    def directories(self) -> dict[Category, Path]:
        """Return the directory for every category in index order."""
        return {category: self.directory_for(category) for category in CATEGORIES}


def _default_features() -> list[FeatureCardConfig]:
    return [
        FeatureCardConfig(
            title="Basic Concepts",
            description=(
                "Core JavaScript methods and fundamental programming concepts"
            ),
            icon="check",
        ),
        FeatureCardConfig(
            title="Advanced Patterns",
            description="Complex React patterns and modern frontend techniques",
            icon="bolt",
        ),
        FeatureCardConfig(
            title="Comprehensive",
            description="Detailed explanations with practical examples and use cases",
            icon="book",
        ),
    ]


__all__ = [
    "FeatureCardConfig",
    "HomepageConfig",
    "NavLinkConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
]
