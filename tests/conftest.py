"""Shared fixtures for building throwaway content trees and site configs."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from concept_docs.config import SiteConfig

SAMPLE_DOCS: dict[str, dict[str, str]] = {
    "basics": {
        "array.prototype.filter.md": (
            "---\n"
            "description: Keep matching elements.\n"
            "---\n"
            "# Array.prototype.filter\n\n"
            "Use `filter()` to keep matching elements.\n\n"
            "```js\n"
            "const long = words.filter((word) => word.length > 6);\n"
            "```\n\n"
            '{% hint style="info" %}\n'
            "`filter()` never mutates the original array.\n"
            "{% endhint %}\n"
        ),
        "closures.md": (
            "# Closures\n\n"
            "- captured bindings\n"
            "- lexical scope\n\n"
            '{% hint style="warning" %}Loops with `var` share one binding.'
            "{% endhint %}\n"
        ),
    },
    "advanced": {
        "currying-react-components.md": (
            "# Currying React Components\n\n"
            "```jsx\n"
            "const withTheme = (theme) => (Component) => Component;\n"
            "```\n"
        ),
    },
}


def write_content_tree(
    root: Path, docs: typ.Mapping[str, typ.Mapping[str, str]]
) -> Path:
    """Write ``docs`` as ``root/<category>/<file>`` and return ``root``."""
    for category, files in docs.items():
        directory = root / category
        directory.mkdir(parents=True, exist_ok=True)
        for name, body in files.items():
            (directory / name).write_text(body, encoding="utf-8")
    return root


@pytest.fixture
def make_content_tree() -> typ.Callable[..., Path]:
    """Return the helper that writes a content tree under a directory."""
    return write_content_tree


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Return a content tree with two basics docs and one advanced doc."""
    return write_content_tree(tmp_path / "content", SAMPLE_DOCS)


@pytest.fixture
def site_config(content_root: Path, tmp_path: Path) -> SiteConfig:
    """Build the default site config pointed at the sample content tree."""
    config = SiteConfig.default(content_root)
    config.output_dir = tmp_path / "public"
    return config
