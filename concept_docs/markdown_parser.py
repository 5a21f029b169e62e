r"""Prepare authored Markdown for rendering.

Content files may open with a YAML front matter header and may contain
GitBook-style ``{% hint %}`` callouts, neither of which Python-Markdown
understands. This module splits the header from the body and rewrites hint
blocks into blockquote callouts so the renderer receives plain Markdown.

Example
-------
>>> from concept_docs.markdown_parser import convert_hints, split_front_matter
>>> convert_hints('{% hint style="info" %}Note{% endhint %}')
'> **Info:** Note'
>>> split_front_matter("---\ntitle: Filter\n---\nBody")
({'title': 'Filter'}, 'Body')
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

HINT_TOKEN_PATTERN = re.compile(
    r'\{% hint(?: style="(?P<style>[^"]*)")? %\}|\{% endhint %\}'
)
HINT_LABELS: dict[str, str] = {"info": "Info", "warning": "Warning"}
FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)


class FrontMatterError(ValueError):
    """Raised when a front matter header cannot be parsed into a mapping."""


@dc.dataclass(frozen=True, slots=True)
class _HintBlock:
    start: int
    end: int
    style: str | None
    inner: str


def _pair_hint_blocks(text: str) -> list[_HintBlock]:
    """Pair each opener with the nearest following ``{% endhint %}``.

    Openers that never close stay on the stack and are ignored, so a
    well-formed block after a stray opener still pairs on its own.
    """
    stack: list[re.Match[str]] = []
    blocks: list[_HintBlock] = []
    for token in HINT_TOKEN_PATTERN.finditer(text):
        if not token.group(0).startswith("{% endhint"):
            stack.append(token)
            continue
        if not stack:
            continue
        opener = stack.pop()
        blocks.append(
            _HintBlock(
                start=opener.start(),
                end=token.end(),
                style=opener.group("style"),
                inner=text[opener.end() : token.start()],
            )
        )
    return blocks


def _is_nested(block: _HintBlock, blocks: list[_HintBlock]) -> bool:
    return any(
        other is not block and other.start < block.end and block.start < other.end
        for other in blocks
    )


def convert_hints(text: str) -> str:
    """Rewrite ``{% hint %}`` blocks as blockquote callouts.

    Parameters
    ----------
    text : str
        Markdown body that may contain ``info`` or ``warning`` hint blocks.

    Returns
    -------
    str
        The body with every well-formed hint replaced by
        ``> **Info:** <text>`` or ``> **Warning:** <text>``. Text without hint
        blocks is returned unchanged, as are openers that never close, blocks
        that nest inside or around another block, and styles other than
        ``info``/``warning``.
    """
    blocks = _pair_hint_blocks(text)
    pieces: list[str] = []
    cursor = 0
    for block in sorted(blocks, key=lambda item: item.start):
        if block.style not in HINT_LABELS or _is_nested(block, blocks):
            continue
        pieces.append(text[cursor : block.start])
        pieces.append(f"> **{HINT_LABELS[block.style]}:** {block.inner.strip()}")
        cursor = block.end
    pieces.append(text[cursor:])
    return "".join(pieces)


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Separate a leading YAML front matter block from the Markdown body.

    Parameters
    ----------
    text : str
        Raw file contents.

    Returns
    -------
    tuple[dict[str, Any], str]
        Parsed metadata (empty when no header is present) and the remaining
        body.

    Raises
    ------
    FrontMatterError
        If the header is not valid YAML or does not describe a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return {}, text

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1))
    except YAMLError as exc:
        msg = f"Invalid front matter: {exc}"
        raise FrontMatterError(msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise FrontMatterError(msg)
    return dict(loaded), text[match.end() :]


__all__ = ["FrontMatterError", "convert_hints", "split_front_matter"]
