"""Resolve the display order of sibling entries within one docs directory.

Docusaurus orders a sidebar level from three sources: index/readme pages always
come first, subdirectories carry a ``position`` in their ``_category_.json``,
and documents carry a ``sidebar_position`` frontmatter field. Anything without
an explicit rank falls back to :data:`~mint_migrate._constants.DEFAULT_RANK`.
Ties are broken by name so the resulting order is total.

Example
-------
>>> from pathlib import Path
>>> from mint_migrate.ordering import sorted_entries
>>> [node.name for node in sorted_entries(Path("docs"))]  # doctest: +SKIP
['index.md', 'basics.md', 'advanced.md', 'reference']
"""

from __future__ import annotations

import dataclasses as dc
import json
import logging
import math
import typing as typ

from ._constants import (
    CATEGORY_META_FILENAME,
    CONTENT_SUFFIXES,
    DEFAULT_RANK,
    INDEX_FILENAMES,
    INDEX_RANK,
)
from .frontmatter import parse_rank, read_document, read_frontmatter

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class CategoryMeta:
    """Optional directory metadata sourced from ``_category_.json``.

    Attributes
    ----------
    label : str or None
        Group label shown in navigation.
    position : float or None
        Explicit rank among siblings.
    """

    label: str | None = None
    position: float | None = None


@dc.dataclass(slots=True, frozen=True)
class SourceNode:
    """A file or directory entry ranked within its parent directory."""

    name: str
    path: Path
    is_dir: bool
    rank: float

    @property
    def sort_key(self) -> tuple[float, str]:
        """Return the ``(rank, name)`` key used to order siblings."""
        return (self.rank, self.name)

    @property
    def is_content(self) -> bool:
        """Return ``True`` for Markdown/MDX documents."""
        return not self.is_dir and self.name.endswith(CONTENT_SUFFIXES)


def read_category_meta(directory: Path) -> CategoryMeta:
    """Return the ``_category_.json`` metadata for ``directory``.

    Missing, unreadable, or malformed files yield an empty :class:`CategoryMeta`.
    Fields with the wrong type are ignored individually; booleans never count
    as a numeric position.
    """
    meta_path = directory / CATEGORY_META_FILENAME
    if not meta_path.is_file():
        return CategoryMeta()
    try:
        payload = json.loads(meta_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("ignoring unreadable %s: %s", meta_path, exc)
        return CategoryMeta()
    if not isinstance(payload, dict):
        return CategoryMeta()

    label = payload.get("label")
    position = payload.get("position")
    match position:
        case bool():
            position = None
        case int() | float() if math.isfinite(position):
            position = float(position)
        case _:
            position = None
    return CategoryMeta(
        label=label if isinstance(label, str) and label.strip() else None,
        position=position,
    )


def _document_rank(path: Path) -> float:
    """Return the ``sidebar_position`` of a document, or the default rank."""
    try:
        text = read_document(path)
    except OSError as exc:
        logger.debug("cannot read %s for ordering: %s", path, exc)
        return DEFAULT_RANK
    rank = parse_rank(read_frontmatter(text).get("sidebar_position"))
    return DEFAULT_RANK if rank is None else rank


def resolve_rank(path: Path, *, is_dir: bool) -> float:
    """Compute the ordering rank for a single directory entry."""
    if path.name in INDEX_FILENAMES:
        return INDEX_RANK
    if is_dir:
        position = read_category_meta(path).position
        return DEFAULT_RANK if position is None else position
    if path.name.endswith(CONTENT_SUFFIXES):
        return _document_rank(path)
    return DEFAULT_RANK


def rank_entries(paths: typ.Iterable[Path]) -> list[SourceNode]:
    """Rank and sort an arbitrary collection of sibling paths."""
    nodes = []
    for path in paths:
        is_dir = path.is_dir()
        nodes.append(
            SourceNode(
                name=path.name,
                path=path,
                is_dir=is_dir,
                rank=resolve_rank(path, is_dir=is_dir),
            )
        )
    return sorted(nodes, key=lambda node: node.sort_key)


def sorted_entries(directory: Path) -> list[SourceNode]:
    """Return the immediate entries of ``directory`` in display order.

    Parameters
    ----------
    directory : Path
        Directory whose children should be ordered.

    Returns
    -------
    list[SourceNode]
        Every entry, directories and files interleaved, sorted by
        ``(rank, name)``. Filtering of dotfiles and metadata files is left to
        the caller.
    """
    return rank_entries(directory.iterdir())


__all__ = [
    "CategoryMeta",
    "SourceNode",
    "rank_entries",
    "read_category_meta",
    "resolve_rank",
    "sorted_entries",
]
