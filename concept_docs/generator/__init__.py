"""Utilities for rendering and generating concept documentation pages."""

from .element_styles import ElementClassExtension
from .models import DocPageModel, NavLinkModel
from .page_generator import DocPageGenerator
from .renderer import ContentRenderError, HtmlContentRenderer

__all__ = [
    "ContentRenderError",
    "DocPageGenerator",
    "DocPageModel",
    "ElementClassExtension",
    "HtmlContentRenderer",
    "NavLinkModel",
]
