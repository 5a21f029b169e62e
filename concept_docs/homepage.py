"""Landing page rendering pipeline.

This module renders ``index.html``, the page visitors reach first: a hero with
the site title and tagline, a "Get Started" link to the first ``basics``
document, and a row of feature cards. The main entry point is
``HomePageBuilder``, which loads the shared layout, resolves the start link
through the document index, and persists the generated HTML.

Typical usage mirrors the build pipeline:

>>> from concept_docs.config import SiteConfig
>>> builder = HomePageBuilder(SiteConfig.default())  # doctest: +SKIP
>>> output_path = builder.run()  # doctest: +SKIP
>>> print(output_path)  # doctest: +SKIP
public/index.html

When the ``basics`` directory is empty or unreadable the start link falls back
to ``homepage.fallback_href`` so the page still renders.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import HOMEPAGE_FILENAME
from .docs_index import DocsIndex
from .generator.links import build_nav_links, doc_href, home_href, site_href

if typ.TYPE_CHECKING:
    from .config import SiteConfig


class HomePageBuilder:
    """Render the landing page from structured config data."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        index: DocsIndex | None = None,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration; provides hero copy, feature cards, and
            the shared theme.
        index : DocsIndex, optional
            Document index used to find the first ``basics`` document.
            Defaults to one built from the site's category directories.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``concept_docs/templates``.
        output_dir : Path, optional
            Override for the directory receiving ``index.html``.
        """
        self.site = site
        self.index = index or DocsIndex(site.directories())
        self.output_dir = output_dir or site.output_dir
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("home_page.jinja")

    def start_href(self) -> str:
        """Return the link target of the "Get Started" button."""
        first = self.index.first_document("basics")
        if first is None:
            return site_href(self.site, self.site.homepage.fallback_href)
        return doc_href(self.site, first)

    def run(self) -> Path:
        """Render and write the landing page HTML, returning the output path."""
        output_path = self.output_dir / HOMEPAGE_FILENAME
        output_path.parent.mkdir(parents=True, exist_ok=True)
        context = {
            "theme": self.site.theme,
            "homepage": self.site.homepage,
            "nav_links": build_nav_links(self.site, self.index),
            "home_href": home_href(self.site),
            "start_href": self.start_href(),
            "html_title": self.site.theme.site_title,
            "current_year": dt.datetime.now(dt.UTC).year,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = ["HomePageBuilder"]
