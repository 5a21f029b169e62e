"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class NavLinkModel:
    """A resolved link rendered in the header or the prev/next strip.

    Attributes
    ----------
    label : str
        Visible link text.
    href : str
        Site-relative URL including the configured base path and suffix.
    """

    label: str
    href: str


@dc.dataclass(slots=True)
class DocPageModel:
    """Structured data passed to the doc page template.

    Attributes
    ----------
    title : str
        Document title derived from its file name.
    slug : str
        Document slug.
    category : str
        Category the document belongs to.
    body_html : str
        Rendered HTML for the document body; empty when ``error`` is set.
    error : str | None
        Message shown in place of the body when rendering failed.
    prev : NavLinkModel | None
        Link to the preceding document in index order.
    next : NavLinkModel | None
        Link to the following document in index order.
    """

    title: str
    slug: str
    category: str
    body_html: str
    error: str | None
    prev: NavLinkModel | None
    next: NavLinkModel | None


__all__ = ["DocPageModel", "NavLinkModel"]
