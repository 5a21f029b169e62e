"""Cyclopts CLI entrypoint for generating the concept documentation site.

The ``concept-docs`` console script defined here renders the static site from
the Markdown content tree, lists the document index, and renders single pages
on demand. Typical usage involves running ``concept-docs generate`` locally or
in CI to rebuild ``public/``.

Examples
--------
Generate the full site for the default configuration:

>>> from concept_docs.cli import main
>>> main()  # doctest: +SKIP

Render one page into a custom directory:

>>> from concept_docs.cli import app
>>> app(
...     ["render", "--category", "basics", "--slug", "array.prototype.filter",
...      "--output-dir", "dist"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import os
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfig, load_site_config
from .docs_index import DocsIndex
from .generator import DocPageGenerator
from .homepage import HomePageBuilder

DEFAULT_CONFIG = Path("config/site.yaml")
LOG_LEVEL_ENV = "CONCEPT_DOCS_LOG_LEVEL"

app = App(
    name="concept-docs",
    config=cyclopts.config.Env("CONCEPT_DOCS_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(
    config: Path, content_root: Path | None, output_dir: Path | None
) -> SiteConfig:
    """Load ``config`` (or the built-in defaults) and apply CLI overrides.

    A missing file is only tolerated for the default location so that an
    explicit ``--config`` typo still fails loudly.
    """
    if config.exists() or config != DEFAULT_CONFIG:
        site = load_site_config(config)
    else:
        site = SiteConfig.default()
    if content_root is not None:
        site.content_root = content_root
        site.category_dirs = {}
    if output_dir is not None:
        site.output_dir = output_dir
    return site


ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="CONCEPT_DOCS_CONFIG")
]
ContentRootOption = typ.Annotated[
    Path | None,
    Parameter(
        help="Directory holding basics/ and advanced/",
        env_var="CONCEPT_DOCS_CONTENT_ROOT",
    ),
]
OutputDirOption = typ.Annotated[
    Path | None,
    Parameter(help="Override the output folder", env_var="CONCEPT_DOCS_OUTPUT_DIR"),
]


@app.command(help="Generate the static documentation site from Markdown.")
def generate(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    content_root: ContentRootOption = None,
    output_dir: OutputDirOption = None,
) -> None:
    """Render the landing page, every document page, the 404 page, and manifest.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file; the built-in defaults
        apply when the default path does not exist.
    content_root : Path or None, optional
        Override the directory holding the category folders. Per-category
        directory overrides from the config are discarded when set.
    output_dir : Path or None, optional
        Override the output directory.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.
    """
    site = _load_config(config, content_root, output_dir)
    index = DocsIndex(site.directories())
    homepage_path = HomePageBuilder(site, index=index).run()
    print(f"wrote {_format_path(homepage_path)}")
    for path in DocPageGenerator(site, index=index).run():
        print(f"wrote {_format_path(path)}")


@app.command(name="list", help="List indexed documents in navigation order.")
def list_docs(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    content_root: ContentRootOption = None,
) -> None:
    """Print one ``<category>/<slug>: <title>`` line per indexed document."""
    site = _load_config(config, content_root, None)
    for doc in DocsIndex(site.directories()).list_documents():
        print(f"{doc.category}/{doc.slug}: {doc.title}")


@app.command(help="Render a single document page.")
def render(
    *,
    category: typ.Annotated[str, Parameter(help="Document category")],
    slug: typ.Annotated[str, Parameter(help="Document slug (file name sans .md)")],
    config: ConfigOption = DEFAULT_CONFIG,
    content_root: ContentRootOption = None,
    output_dir: OutputDirOption = None,
) -> None:
    """Render the page for ``category``/``slug``.

    Raises
    ------
    SystemExit
        With status 1 when no document matches the pair.
    """
    site = _load_config(config, content_root, output_dir)
    path = DocPageGenerator(site).render_document(category, slug)
    if path is None:
        print(f"not found: {category}/{slug}", file=sys.stderr)
        raise SystemExit(1)
    print(f"wrote {_format_path(path)}")


def configure_logging() -> None:
    """Configure root logging from ``CONCEPT_DOCS_LOG_LEVEL`` (default WARNING)."""
    level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    """Invoke the Cyclopts application that powers the `concept-docs` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    configure_logging()
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
