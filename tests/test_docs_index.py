"""Unit tests for the document index.

These tests cover title derivation from file names, the basics-then-advanced
ordering of ``DocsIndex.list_documents``, prev/next navigation across the
category boundary, not-found resolution, and graceful degradation when a
category directory cannot be read.

Usage
-----
Run ``pytest tests/test_docs_index.py -v``. Fixtures come from
``tests/conftest.py`` and pytest's built-in ``tmp_path``.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import pytest

from concept_docs.docs_index import DocRef, DocsIndex, parse_title
from concept_docs.markdown_parser import FrontMatterError


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("a.md", "A"),
        ("b-test.md", "B Test"),
        ("array.prototype.filter.md", "Array.prototype.Filter"),
        ("array.prototype.flat-map.md", "Array.prototype.Flat Map"),
        ("promise.all.md", "Promise All"),
        ("event--loop.md", "Event Loop"),
        ("currying-react-components.md", "Currying React Components"),
        ("useEffect-cleanup.md", "UseEffect Cleanup"),
    ],
)
def test_parse_title(file_name: str, expected: str) -> None:
    """Titles capitalise each word and keep ``.prototype.`` verbatim."""
    assert parse_title(file_name) == expected, (
        f"Expected {expected!r} for {file_name!r}, got {parse_title(file_name)!r}"
    )


def test_list_documents_end_to_end(
    tmp_path: Path, make_content_tree: typ.Callable[..., Path]
) -> None:
    """Basics files come first, then advanced, with derived titles."""
    root = make_content_tree(
        tmp_path,
        {"basics": {"a.md": "A", "b-test.md": "B"}, "advanced": {"c.md": "C"}},
    )
    docs = DocsIndex.from_root(root).list_documents()
    assert [(doc.category, doc.slug, doc.title) for doc in docs] == [
        ("basics", "a", "A"),
        ("basics", "b-test", "B Test"),
        ("advanced", "c", "C"),
    ]
    assert docs[1].file_name == "b-test.md"


def test_list_documents_ignores_other_files(
    tmp_path: Path, make_content_tree: typ.Callable[..., Path]
) -> None:
    """Only ``.md`` files are indexed."""
    root = make_content_tree(
        tmp_path,
        {"basics": {"a.md": "A", "notes.txt": "x", "image.png": ""}},
    )
    (root / "basics" / "drafts.md").mkdir()
    docs = DocsIndex.from_root(root).list_documents()
    assert [doc.slug for doc in docs] == ["a"]


def test_missing_category_degrades_gracefully(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
    make_content_tree: typ.Callable[..., Path],
) -> None:
    """An unreadable advanced directory still yields every basics doc."""
    root = make_content_tree(tmp_path, {"basics": {"a.md": "A", "b.md": "B"}})
    with caplog.at_level(logging.WARNING, logger="concept_docs.docs_index"):
        docs = DocsIndex.from_root(root).list_documents()
    assert [doc.slug for doc in docs] == ["a", "b"]
    assert any("advanced" in record.getMessage() for record in caplog.records), (
        "expected a warning naming the unreadable advanced directory"
    )


def test_navigation_chains_across_categories(content_root: Path) -> None:
    """prev/next follow the concatenated basics + advanced order."""
    index = DocsIndex.from_root(content_root)
    docs = index.list_documents()
    for position, doc in enumerate(docs):
        resolved = index.resolve(doc.slug, doc.category)
        assert resolved is not None
        expected_prev = docs[position - 1].ref() if position > 0 else None
        expected_next = docs[position + 1].ref() if position + 1 < len(docs) else None
        assert resolved.navigation.prev == expected_prev
        assert resolved.navigation.next == expected_next


def test_last_basics_links_to_first_advanced(content_root: Path) -> None:
    resolved = DocsIndex.from_root(content_root).resolve("closures", "basics")
    assert resolved is not None
    assert resolved.navigation.next == DocRef(
        title="Currying React Components",
        slug="currying-react-components",
        category="advanced",
    )
    assert resolved.navigation.prev is not None
    assert resolved.navigation.prev.slug == "array.prototype.filter"


def test_first_and_last_have_open_ends(content_root: Path) -> None:
    index = DocsIndex.from_root(content_root)
    first = index.resolve("array.prototype.filter", "basics")
    last = index.resolve("currying-react-components", "advanced")
    assert first is not None
    assert last is not None
    assert first.navigation.prev is None
    assert last.navigation.next is None


@pytest.mark.parametrize(
    ("slug", "category"),
    [
        ("missing", "basics"),
        ("closures", "advanced"),
        ("closures", "unknown"),
        ("", ""),
    ],
)
def test_resolve_unknown_pair_returns_none(
    content_root: Path, slug: str, category: str
) -> None:
    """Unknown (slug, category) pairs resolve to None instead of raising."""
    assert DocsIndex.from_root(content_root).resolve(slug, category) is None


def test_resolve_strips_front_matter_and_converts_hints(content_root: Path) -> None:
    resolved = DocsIndex.from_root(content_root).resolve(
        "array.prototype.filter", "basics"
    )
    assert resolved is not None
    assert resolved.title == "Array.prototype.Filter"
    assert resolved.content.startswith("# Array.prototype.filter")
    assert "description:" not in resolved.content
    assert "> **Info:** `filter()` never mutates the original array." in (
        resolved.content
    )
    assert "{% hint" not in resolved.content


def test_resolve_read_failure_propagates(
    content_root: Path, mocker: typ.Any
) -> None:
    """A listed file that cannot be read is a fatal error."""
    mocker.patch.object(Path, "read_text", side_effect=PermissionError("denied"))
    with pytest.raises(PermissionError):
        DocsIndex.from_root(content_root).resolve("closures", "basics")


def test_resolve_malformed_front_matter_raises(
    tmp_path: Path, make_content_tree: typ.Callable[..., Path]
) -> None:
    root = make_content_tree(
        tmp_path, {"basics": {"broken.md": "---\n- just\n- a list\n---\nBody\n"}}
    )
    with pytest.raises(FrontMatterError):
        DocsIndex.from_root(root).resolve("broken", "basics")


def test_index_reflects_disk_changes(content_root: Path) -> None:
    """The index is recomputed per call, so new files appear immediately."""
    index = DocsIndex.from_root(content_root)
    assert index.first_document("basics") is not None
    (content_root / "basics" / "0-intro.md").write_text("Intro", encoding="utf-8")
    first = index.first_document("basics")
    assert first is not None
    assert first.slug == "0-intro"
    assert first.title == "0 Intro"


def test_first_document_of_empty_category(
    tmp_path: Path, make_content_tree: typ.Callable[..., Path]
) -> None:
    root = make_content_tree(tmp_path, {"basics": {"a.md": "A"}})
    assert DocsIndex.from_root(root).first_document("advanced") is None


def test_custom_directories(
    tmp_path: Path, make_content_tree: typ.Callable[..., Path]
) -> None:
    """Categories can be backed by arbitrary directories."""
    make_content_tree(tmp_path, {"one": {"x.md": "X"}, "two": {"y.md": "Y"}})
    index = DocsIndex({"basics": tmp_path / "one", "advanced": tmp_path / "two"})
    assert [(doc.category, doc.slug) for doc in index.list_documents()] == [
        ("basics", "x"),
        ("advanced", "y"),
    ]
