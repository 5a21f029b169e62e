"""Index the Markdown content tree and resolve single documents.

The index is the only stateful-looking piece of the site, and it is not
stateful at all: every call rescans the ``basics`` and ``advanced``
directories, so the list always mirrors what is on disk. Documents are ordered
as every ``basics`` file followed by every ``advanced`` file, each sorted by
file name, and prev/next navigation walks that single sequence. The last
``basics`` page therefore links forward to the first ``advanced`` page.

Typical usage pairs the index with a site config:

>>> from pathlib import Path
>>> from concept_docs.docs_index import DocsIndex
>>> index = DocsIndex.from_root(Path("content"))  # doctest: +SKIP
>>> [doc.title for doc in index.list_documents()]  # doctest: +SKIP
['Array.prototype.Filter', 'Currying React Components']
>>> index.resolve("array.prototype.filter", "basics").navigation.next  # doctest: +SKIP
DocRef(title='Currying React Components', slug='currying-react-components', ...)
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ
from pathlib import Path

from ._constants import CATEGORIES, MARKDOWN_SUFFIX, Category
from .markdown_parser import convert_hints, split_front_matter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

PROTOTYPE_SEGMENT = ".prototype."
SEPARATOR_PATTERN = re.compile(r"[.-]+")
WORD_START_PATTERN = re.compile(r"\b[a-z]")


@dc.dataclass(frozen=True, slots=True)
class DocRef:
    """Link target for a neighbouring document."""

    title: str
    slug: str
    category: Category


@dc.dataclass(frozen=True, slots=True)
class Navigation:
    """Previous and next documents in index order."""

    prev: DocRef | None = None
    next: DocRef | None = None


@dc.dataclass(frozen=True, slots=True)
class DocDescriptor:
    """A Markdown file discovered in one of the category directories.

    Attributes
    ----------
    slug : str
        File name without the ``.md`` extension; the lookup key.
    file_name : str
        File name as found on disk.
    title : str
        Display title derived with :func:`parse_title`.
    category : Category
        ``"basics"`` or ``"advanced"``.
    """

    slug: str
    file_name: str
    title: str
    category: Category

    def ref(self) -> DocRef:
        """Return the link triple for this document."""
        return DocRef(title=self.title, slug=self.slug, category=self.category)


@dc.dataclass(frozen=True, slots=True)
class ResolvedDoc:
    """A descriptor together with its transformed body and neighbours."""

    slug: str
    file_name: str
    title: str
    category: Category
    content: str
    navigation: Navigation


def parse_title(file_name: str) -> str:
    """Derive a display title from a Markdown file name.

    Parameters
    ----------
    file_name : str
        File name such as ``"b-test.md"`` or ``"array.prototype.filter.md"``.

    Returns
    -------
    str
        Title with separators (``.``, ``-``) collapsed into single spaces and
        each word capitalised. Segments joined by ``.prototype.`` keep their
        dots and the literal ``prototype`` stays lowercase, so
        ``"array.prototype.filter.md"`` becomes ``"Array.prototype.Filter"``.

    Examples
    --------
    >>> parse_title("b-test.md")
    'B Test'
    >>> parse_title("array.prototype.filter.md")
    'Array.prototype.Filter'
    """
    stem = file_name.removesuffix(MARKDOWN_SUFFIX)
    parts = stem.split(PROTOTYPE_SEGMENT)
    return PROTOTYPE_SEGMENT.join(_capitalize_words(part) for part in parts)


def _capitalize_words(text: str) -> str:
    """Replace separators with spaces and uppercase the start of every word."""
    spaced = SEPARATOR_PATTERN.sub(" ", text)
    return WORD_START_PATTERN.sub(lambda match: match.group(0).upper(), spaced)


def _list_markdown_files(directory: Path) -> list[str]:
    """Return sorted Markdown file names in ``directory`` or [] when unreadable."""
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        logger.warning("Error reading directory %s: %s", directory, exc)
        return []
    return sorted(
        entry.name
        for entry in entries
        if entry.name.endswith(MARKDOWN_SUFFIX) and entry.is_file()
    )


class DocsIndex:
    """List and resolve documents across the category directories."""

    def __init__(self, directories: cabc.Mapping[Category, Path]) -> None:
        """Initialize the index with one directory per category.

        Parameters
        ----------
        directories : Mapping[Category, Path]
            Directory to scan for each category. Categories without an entry
            contribute no documents.
        """
        self.directories: dict[Category, Path] = dict(directories)

    @classmethod
    def from_root(cls, content_root: Path) -> DocsIndex:
        """Build an index whose categories live directly under ``content_root``."""
        return cls({category: content_root / category for category in CATEGORIES})

    def list_documents(self) -> list[DocDescriptor]:
        """Scan every category directory and return descriptors in index order.

        Returns
        -------
        list[DocDescriptor]
            All ``basics`` documents followed by all ``advanced`` documents.
            A category whose directory cannot be read contributes nothing; the
            failure is logged rather than raised.
        """
        docs: list[DocDescriptor] = []
        for category in CATEGORIES:
            directory = self.directories.get(category)
            if directory is None:
                continue
            docs.extend(
                DocDescriptor(
                    slug=file_name.removesuffix(MARKDOWN_SUFFIX),
                    file_name=file_name,
                    title=parse_title(file_name),
                    category=category,
                )
                for file_name in _list_markdown_files(directory)
            )
        return docs

    def first_document(self, category: Category) -> DocDescriptor | None:
        """Return the first document listed for ``category``, if any."""
        return next(
            (doc for doc in self.list_documents() if doc.category == category), None
        )

    def resolve(self, slug: str, category: str) -> ResolvedDoc | None:
        """Load a document by slug and category along with its neighbours.

        Parameters
        ----------
        slug : str
            File name without extension.
        category : str
            Category the document must belong to.

        Returns
        -------
        ResolvedDoc | None
            The document with front matter removed, hint blocks rewritten, and
            prev/next computed across the whole index; ``None`` when no
            document matches the pair.

        Raises
        ------
        OSError
            If the matched file cannot be read.
        FrontMatterError
            If the file's front matter is malformed.
        """
        docs = self.list_documents()
        position = next(
            (
                idx
                for idx, doc in enumerate(docs)
                if doc.slug == slug and doc.category == category
            ),
            None,
        )
        if position is None:
            return None

        current = docs[position]
        prev_doc = docs[position - 1] if position > 0 else None
        next_doc = docs[position + 1] if position + 1 < len(docs) else None

        path = self.directories[current.category] / current.file_name
        raw = path.read_text(encoding="utf-8")
        _metadata, body = split_front_matter(raw)
        return ResolvedDoc(
            slug=current.slug,
            file_name=current.file_name,
            title=current.title,
            category=current.category,
            content=convert_hints(body),
            navigation=Navigation(
                prev=prev_doc.ref() if prev_doc else None,
                next=next_doc.ref() if next_doc else None,
            ),
        )


__all__ = [
    "DocDescriptor",
    "DocRef",
    "DocsIndex",
    "Navigation",
    "ResolvedDoc",
    "parse_title",
]
