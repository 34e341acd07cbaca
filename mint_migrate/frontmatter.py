r"""Extract leading metadata blocks and first headings from Markdown documents.

Docusaurus documents may open with a ``---`` delimited block of ``key: value``
lines. This module reads that block into a plain mapping, without attempting a
full YAML parse, and separately locates the first level-one heading. Both
helpers are tolerant: a malformed block yields an empty mapping and never
raises.

Example
-------
>>> from mint_migrate.frontmatter import split_frontmatter
>>> meta, body = split_frontmatter("---\ntitle: 'Intro'\n---\n# Hello\n")
>>> meta["title"]
'Intro'
>>> body
'# Hello\n'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\n(?:(.*?)\n)?---[ \t]*(?:\n|\Z)", re.DOTALL
)
LENIENT_FRONTMATTER_PATTERN = re.compile(
    r"\A\s*---[ \t]*\n(?:(.*?)\n)?---[ \t]*(?:\n|\Z)", re.DOTALL
)
HEADING_PATTERN = re.compile(r"^#[ \t]+(.+?)[ \t]*$", re.MULTILINE)
_QUOTES = ("\"", "'")

Frontmatter = dict[str, str]


@dc.dataclass(slots=True)
class Heading:
    """First level-one heading found in a document.

    Attributes
    ----------
    text : str
        Heading text without the leading ``#`` marker.
    start : int
        Offset of the heading line within the searched text.
    end : int
        Offset just past the heading line, excluding the newline.
    """

    text: str
    start: int
    end: int


def _strip_quotes(value: str) -> str:
    """Remove one layer of matching or dangling quotes from ``value``."""
    if value[:1] in _QUOTES:
        value = value[1:]
    if value[-1:] in _QUOTES:
        value = value[:-1]
    return value


def parse_frontmatter_block(block: str) -> Frontmatter:
    """Parse the inside of a metadata block into a string mapping.

    Lines without a colon, or with an empty key, are skipped. Only the first
    colon separates key from value so URLs and times survive intact.
    """
    meta: Frontmatter = {}
    for line in block.splitlines():
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        meta[key] = _strip_quotes(value.strip())
    return meta


def split_frontmatter(text: str, *, lenient: bool = False) -> tuple[Frontmatter, str]:
    """Return the metadata mapping and the body that follows it.

    Parameters
    ----------
    text : str
        Full document text.
    lenient : bool, optional
        Allow whitespace before the opening delimiter. Defaults to ``False``.

    Returns
    -------
    tuple[Frontmatter, str]
        Parsed metadata (empty when absent) and the remaining text. When no
        block is present the text is returned unchanged.
    """
    pattern = LENIENT_FRONTMATTER_PATTERN if lenient else FRONTMATTER_PATTERN
    match = pattern.match(text)
    if not match:
        return {}, text
    return parse_frontmatter_block(match.group(1) or ""), text[match.end() :]


def read_document(path: Path) -> str:
    """Return the text of a source document.

    A leading byte-order mark is dropped and undecodable bytes become U+FFFD
    so a single badly encoded file cannot stop a run.
    """
    return path.read_text(encoding="utf-8-sig", errors="replace")


def read_frontmatter(text: str) -> Frontmatter:
    """Return only the metadata mapping from ``text``."""
    meta, _body = split_frontmatter(text)
    return meta


def first_heading(text: str) -> Heading | None:
    """Return the first ``# Heading`` line in ``text``, if any."""
    match = HEADING_PATTERN.search(text)
    if not match:
        return None
    return Heading(
        text=match.group(1).strip(), start=match.start(), end=match.end()
    )


def parse_rank(value: str | None) -> float | None:
    """Parse a numeric ordering value such as ``sidebar_position``."""
    if value is None:
        return None
    try:
        rank = float(value)
    except ValueError:
        return None
    if rank != rank:  # NaN never orders
        return None
    return rank


__all__ = [
    "Frontmatter",
    "Heading",
    "first_heading",
    "parse_frontmatter_block",
    "parse_rank",
    "read_document",
    "read_frontmatter",
    "split_frontmatter",
]
