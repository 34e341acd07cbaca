"""Shared fixtures for building throwaway Docusaurus trees on disk."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

TreeWriter = typ.Callable[["Path", "cabc.Mapping[str, str | None]"], "Path"]


def _write_tree(root: Path, files: cabc.Mapping[str, str | None]) -> Path:
    """Create ``files`` beneath ``root``; ``None`` values create directories."""
    for relative, content in files.items():
        target = root / relative
        if content is None:
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(dedent(content).lstrip("\n"), encoding="utf-8")
    return root


@pytest.fixture
def write_tree() -> TreeWriter:
    """Return a helper that materialises a mapping of relative paths to text."""
    return _write_tree
