"""High-level orchestration for documentation page generation.

This module turns the content tree into static HTML. It exposes
:class:`DocPageGenerator`, which consumes a
:class:`~concept_docs.config.SiteConfig`, enumerates every document through
:class:`~concept_docs.docs_index.DocsIndex`, renders each body with
``HtmlContentRenderer``, and writes one page per ``(category, slug)`` pair
plus the 404 page and a JSON manifest of the generated routes.

Example
-------
>>> from pathlib import Path
>>> from concept_docs.config import load_site_config
>>> from concept_docs.generator import DocPageGenerator
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> DocPageGenerator(site).run()  # doctest: +SKIP
[PosixPath('public/docs/basics/array.prototype.filter.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from concept_docs._constants import (
    DOCS_ROUTE_PREFIX,
    MANIFEST_FILENAME,
    NOT_FOUND_FILENAME,
)
from concept_docs.docs_index import DocsIndex, DocRef
from concept_docs.generator.element_styles import ElementClassExtension
from concept_docs.generator.links import build_nav_links, doc_href, home_href
from concept_docs.generator.models import DocPageModel, NavLinkModel
from concept_docs.generator.renderer import ContentRenderError, HtmlContentRenderer

if typ.TYPE_CHECKING:
    from concept_docs.config import SiteConfig
    from concept_docs.docs_index import DocDescriptor, ResolvedDoc

logger = logging.getLogger(__name__)

RENDER_ERROR_MESSAGE = "Error processing document content"
NOT_FOUND_MESSAGE = "Document not found"


class DocPageGenerator:
    """Render every indexed document into themed HTML files."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        index: DocsIndex | None = None,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        site : SiteConfig
            Site configuration describing content directories and theming.
        index : DocsIndex, optional
            Document index to render; defaults to one built from the site's
            category directories.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output_dir : Path, optional
            Override for the HTML output directory; defaults to the site config.
        """
        self.site = site
        self.index = index or DocsIndex(site.directories())
        self.output_dir = output_dir or site.output_dir
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.renderer = HtmlContentRenderer(
            site.pygments_style, extensions=[ElementClassExtension()]
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("doc_page.jinja")
        self.not_found_template = self.env.get_template("not_found.jinja")

    def run(self) -> list[Path]:
        """Render every document, the 404 page, and the route manifest.

        Returns
        -------
        list[Path]
            Paths to the generated document pages in index order, followed by
            the 404 page and the manifest.

        Raises
        ------
        OSError
            If a listed document cannot be read or an output file cannot be
            written.
        FrontMatterError
            If a document's front matter is malformed.

        Notes
        -----
        A document whose markdown fails to render still produces a page,
        showing the error state in place of the body.
        """
        docs = self.index.list_documents()
        context = self._shared_context()
        written: list[Path] = []
        for descriptor in docs:
            resolved = self.index.resolve(descriptor.slug, descriptor.category)
            if resolved is None:  # pragma: no cover - file removed mid-build
                logger.warning(
                    "Skipping %s/%s: no longer indexed",
                    descriptor.category,
                    descriptor.slug,
                )
                continue
            written.append(self._write_page(resolved, context))
        written.append(self.write_not_found(context))
        written.append(self.write_manifest(docs))
        return written

    def render_document(self, category: str, slug: str) -> Path | None:
        """Render a single document page.

        Returns
        -------
        Path | None
            Path of the written page, or ``None`` when no document matches
            ``(category, slug)``.
        """
        resolved = self.index.resolve(slug, category)
        if resolved is None:
            return None
        return self._write_page(resolved, self._shared_context())

    def write_not_found(self, context: dict[str, typ.Any] | None = None) -> Path:
        """Write the static page served for unknown routes."""
        out_path = self.output_dir / NOT_FOUND_FILENAME
        out_path.parent.mkdir(parents=True, exist_ok=True)
        html = self.not_found_template.render(
            **(context or self._shared_context()),
            html_title=f"{NOT_FOUND_MESSAGE} | {self.site.theme.site_title}",
            message=NOT_FOUND_MESSAGE,
        )
        out_path.write_text(html, encoding="utf-8")
        return out_path

    def write_manifest(self, docs: list[DocDescriptor]) -> Path:
        """Persist the generated routes, in index order, as JSON."""
        payload = {
            "documents": [
                {
                    "category": doc.category,
                    "slug": doc.slug,
                    "title": doc.title,
                    "href": doc_href(self.site, doc),
                    "path": self._page_path(doc.category, doc.slug)
                    .relative_to(self.output_dir)
                    .as_posix(),
                }
                for doc in docs
            ]
        }
        out_path = self.output_dir / MANIFEST_FILENAME
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        return out_path

    def _shared_context(self) -> dict[str, typ.Any]:
        """Return template values common to every page of the build."""
        return {
            "theme": self.site.theme,
            "nav_links": build_nav_links(self.site, self.index),
            "home_href": home_href(self.site),
            "pygments_css": self.renderer.stylesheet,
            "current_year": dt.datetime.now(dt.UTC).year,
        }

    def _write_page(self, doc: ResolvedDoc, context: dict[str, typ.Any]) -> Path:
        """Render ``doc`` through the page template and write it to disk."""
        model = self._build_page_model(doc)
        html = self.template.render(
            **context,
            doc=model,
            html_title=f"{model.title} | {self.site.theme.site_title}",
        )
        out_path = self._page_path(doc.category, doc.slug)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(html, encoding="utf-8")
        logger.debug("Rendered %s/%s to %s", doc.category, doc.slug, out_path)
        return out_path

    def _build_page_model(self, doc: ResolvedDoc) -> DocPageModel:
        """Construct a DocPageModel, falling back to the error state on failure."""
        error: str | None = None
        try:
            body_html = self.renderer.markdown(doc.content)
        except ContentRenderError:
            logger.exception("Error processing %s/%s", doc.category, doc.slug)
            body_html = ""
            error = RENDER_ERROR_MESSAGE
        return DocPageModel(
            title=doc.title,
            slug=doc.slug,
            category=doc.category,
            body_html=body_html,
            error=error,
            prev=self._nav_link(doc.navigation.prev),
            next=self._nav_link(doc.navigation.next),
        )

    def _nav_link(self, ref: DocRef | None) -> NavLinkModel | None:
        if ref is None:
            return None
        return NavLinkModel(label=ref.title, href=doc_href(self.site, ref))

    def _page_path(self, category: str, slug: str) -> Path:
        """Return the output path for the page of ``category``/``slug``."""
        return self.output_dir / DOCS_ROUTE_PREFIX / category / f"{slug}.html"


__all__ = ["NOT_FOUND_MESSAGE", "RENDER_ERROR_MESSAGE", "DocPageGenerator"]
