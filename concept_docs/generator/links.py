"""Build site-relative URLs and header navigation from the site config."""

from __future__ import annotations

import typing as typ

from concept_docs._constants import DOCS_ROUTE_PREFIX

from .models import NavLinkModel

if typ.TYPE_CHECKING:
    from concept_docs.config import SiteConfig
    from concept_docs.docs_index import DocDescriptor, DocRef, DocsIndex


def site_href(site: SiteConfig, path: str) -> str:
    """Prefix an absolute site path with the configured base path."""
    if not path.startswith("/"):
        return path
    return f"{site.base_path}{path}"


def doc_href(site: SiteConfig, doc: DocRef | DocDescriptor) -> str:
    """Return the URL of the page rendered for ``doc``."""
    path = f"/{DOCS_ROUTE_PREFIX}/{doc.category}/{doc.slug}{site.link_suffix}"
    return site_href(site, path)


def home_href(site: SiteConfig) -> str:
    """Return the URL of the landing page."""
    return f"{site.base_path}/"


def build_nav_links(site: SiteConfig, index: DocsIndex) -> list[NavLinkModel]:
    """Resolve header links, pointing category links at their first document.

    Category links whose directory holds no documents are omitted rather than
    rendered as dead links.
    """
    links: list[NavLinkModel] = []
    for link in site.nav_links:
        if link.category is not None:
            first = index.first_document(link.category)
            if first is None:
                continue
            links.append(NavLinkModel(label=link.label, href=doc_href(site, first)))
        elif link.href:
            links.append(NavLinkModel(label=link.label, href=site_href(site, link.href)))
    return links


__all__ = ["build_nav_links", "doc_href", "home_href", "site_href"]
