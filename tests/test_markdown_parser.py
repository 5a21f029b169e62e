"""Unit tests for hint callout conversion and front matter splitting."""

from __future__ import annotations

import pytest

from concept_docs.markdown_parser import (
    FrontMatterError,
    convert_hints,
    split_front_matter,
)


def test_info_hint_becomes_blockquote() -> None:
    assert convert_hints('{% hint style="info" %}Note{% endhint %}') == (
        "> **Info:** Note"
    )


def test_warning_hint_trims_inner_text() -> None:
    text = 'Before\n\n{% hint style="warning" %}\n  Careful here.\n\n{% endhint %}\nAfter'
    assert convert_hints(text) == "Before\n\n> **Warning:** Careful here.\nAfter"


def test_multiple_hints_are_converted_independently() -> None:
    text = (
        '{% hint style="warning" %}First{% endhint %}\n\n'
        '{% hint style="info" %}Second{% endhint %}'
    )
    assert convert_hints(text) == "> **Warning:** First\n\n> **Info:** Second"


def test_multiline_hint_keeps_inner_lines() -> None:
    text = '{% hint style="info" %}\nline one\nline two\n{% endhint %}'
    assert convert_hints(text) == "> **Info:** line one\nline two"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "# Heading\n\nPlain paragraph with {% raw %} braces.",
        "```js\nconst x = {a: 1};\n```",
    ],
)
def test_content_without_hints_is_unchanged(text: str) -> None:
    assert convert_hints(text) == text


@pytest.mark.parametrize(
    "text",
    [
        '{% hint style="info" %}Never closed',
        '{% hint style="danger" %}Unsupported style{% endhint %}',
        '{% hint style="info" %}Outer {% hint style="warning" %}Inner'
        "{% endhint %} tail{% endhint %}",
        "{% hint %}No style{% endhint %}",
    ],
)
def test_malformed_or_nested_hints_pass_through(text: str) -> None:
    """Blocks that are unclosed, nested, or of unknown style stay literal."""
    assert convert_hints(text) == text


def test_valid_hint_after_unclosed_opener_is_converted() -> None:
    """A stray opener stays literal without hiding the block that follows."""
    text = (
        '{% hint style="info" %}unclosed\n\n'
        '{% hint style="warning" %}Careful{% endhint %}'
    )
    assert convert_hints(text) == (
        '{% hint style="info" %}unclosed\n\n> **Warning:** Careful'
    )


def test_stray_endhint_does_not_block_later_hints() -> None:
    text = '{% endhint %}\n\n{% hint style="info" %}Note{% endhint %}'
    assert convert_hints(text) == "{% endhint %}\n\n> **Info:** Note"


def test_conversion_is_idempotent() -> None:
    once = convert_hints('{% hint style="info" %}Note{% endhint %}')
    assert convert_hints(once) == once


def test_split_front_matter_returns_metadata_and_body() -> None:
    metadata, body = split_front_matter(
        "---\ntitle: Filter\ntags:\n  - arrays\n---\n# Body\n"
    )
    assert metadata == {"title": "Filter", "tags": ["arrays"]}
    assert body == "# Body\n"


def test_split_front_matter_without_header() -> None:
    text = "# Body\n\n---\n\nAfter a rule.\n"
    assert split_front_matter(text) == ({}, text)


def test_split_empty_front_matter() -> None:
    assert split_front_matter("---\n---\nBody") == ({}, "Body")


@pytest.mark.parametrize(
    "text",
    [
        "---\n- a\n- b\n---\nBody",
        "---\ntitle: [unclosed\n---\nBody",
    ],
)
def test_split_front_matter_rejects_invalid_headers(text: str) -> None:
    with pytest.raises(FrontMatterError):
        split_front_matter(text)
