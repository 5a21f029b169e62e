"""Markdown extension that attaches presentational classes to rendered elements."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown.extensions import Extension
from markdown.postprocessors import Postprocessor
from markdown.treeprocessors import Treeprocessor
from markdown.util import HTML_PLACEHOLDER_RE

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

INLINE_CODE_CLASS = "inline-code"
HIGHLIGHTED_PRE_PATTERN = re.compile(r'(<div class="codehilite"[^>]*>\s*)<pre>')
ELEMENT_CLASSES: dict[str, str] = {
    "h1": "text-3xl font-bold mb-4",
    "h2": "text-2xl font-bold mb-3",
    "h3": "text-xl font-bold mb-2",
    "p": "mb-4",
    "ul": "list-disc ml-6 mb-4",
    "ol": "list-decimal ml-6 mb-4",
    "li": "mb-1",
    "pre": "relative",
    "blockquote": (
        "border-l-4 border-gray-300 pl-4 italic my-4 relative bg-gray-50 "
        "rounded-r py-2 pr-4"
    ),
}


class ElementClassExtension(Extension):
    """Style headings, paragraphs, lists, code, and quotes with Tailwind classes.

    Python-Markdown emits bare elements; the site layout relies on utility
    classes instead of a global prose stylesheet, so each element type listed
    in ``classes`` receives its class string. Inline ``code`` (code outside a
    ``pre`` block) is tagged ``inline-code`` so templates can style it apart
    from highlighted blocks. Highlighted blocks are stashed as raw HTML before
    the tree is walked, so their ``pre`` class is added after the stash is
    restored.
    """

    def __init__(self, classes: cabc.Mapping[str, str] | None = None) -> None:
        super().__init__()
        self.classes = dict(ELEMENT_CLASSES if classes is None else classes)

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the element-class treeprocessor on the Markdown instance."""
        processor = ElementClassTreeprocessor(md, self.classes)
        md.treeprocessors.register(processor, "concept_docs_element_classes", 15)
        pre_css = self.classes.get("pre")
        if pre_css:
            md.postprocessors.register(
                HighlightedPrePostprocessor(md, pre_css),
                "concept_docs_highlighted_pre",
                5,
            )


class ElementClassTreeprocessor(Treeprocessor):
    """Append configured classes to matching elements in the parsed tree."""

    def __init__(self, md: Markdown, classes: cabc.Mapping[str, str]) -> None:
        super().__init__(md)
        self.classes = classes

    def run(self, root: Element) -> Element:
        """Walk the tree once, tagging block elements and inline code spans."""
        block_code = {id(code) for pre in root.iter("pre") for code in pre.iter("code")}
        for element in root.iter():
            if element.tag == "code":
                if id(element) not in block_code:
                    _add_class(element, INLINE_CODE_CLASS)
                continue
            if _is_stash_placeholder(element):
                continue
            css = self.classes.get(element.tag)
            if css:
                _add_class(element, css)
        return root


class HighlightedPrePostprocessor(Postprocessor):
    """Add the ``pre`` class to Pygments blocks restored from the HTML stash."""

    def __init__(self, md: Markdown, css: str) -> None:
        super().__init__(md)
        self.css = css

    def run(self, text: str) -> str:
        tag = f'<pre class="{escape(self.css, quote=True)}">'
        return HIGHLIGHTED_PRE_PATTERN.sub(lambda match: f"{match.group(1)}{tag}", text)


def _is_stash_placeholder(element: Element) -> bool:
    """Return True for the paragraph wrapping stashed raw or highlighted HTML."""
    text = (element.text or "").strip()
    return (
        element.tag == "p"
        and len(element) == 0
        and HTML_PLACEHOLDER_RE.fullmatch(text) is not None
    )


def _add_class(element: Element, css: str) -> None:
    """Merge ``css`` into the element's existing class attribute."""
    existing = element.get("class")
    element.set("class", f"{existing} {css}" if existing else css)


__all__ = [
    "ELEMENT_CLASSES",
    "ElementClassExtension",
    "ElementClassTreeprocessor",
    "HighlightedPrePostprocessor",
]
