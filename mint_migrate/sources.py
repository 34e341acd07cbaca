"""Locate Docusaurus input folders and copy static assets into the output.

Docusaurus projects keep Markdown under ``docs/`` and assets under
``static/``. Migrations are usually run from the project root, from a parent
folder holding an ``input-docusaurus`` checkout, or from a sibling folder, so
detection probes those locations in order. Copied assets all land in a single
``images`` folder, which is what makes ``/images/<name>`` references in the
converted pages resolve.
"""

from __future__ import annotations

import logging
import shutil
import typing as typ

from ._constants import IMAGES_DIRNAME

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

SEARCH_PREFIXES: tuple[str, ...] = (".", "input-docusaurus", "..")
STATIC_SUBFOLDERS: tuple[str, ...] = ("img", "images", "assets", "public", "static")
STATIC_ROOT_FILES: tuple[str, ...] = (
    "logo.svg",
    "logo.png",
    "favicon.ico",
    "logo-light.svg",
    "logo-dark.svg",
    "logo-light.png",
    "logo-dark.png",
)


class DocsRootNotFoundError(FileNotFoundError):
    """Raised when no Docusaurus ``docs`` directory can be located."""


def find_input_dir(folder_name: str, search_root: Path) -> Path | None:
    """Return the first existing ``folder_name`` directory near ``search_root``."""
    for prefix in SEARCH_PREFIXES:
        candidate = search_root / prefix / folder_name
        if candidate.is_dir():
            return candidate
    return None


def detect_docs_dir(search_root: Path, override: Path | None = None) -> Path:
    """Return the docs directory, honouring an explicit override.

    Raises
    ------
    DocsRootNotFoundError
        If the override is not a directory, or no candidate exists.
    """
    if override is not None:
        if not override.is_dir():
            msg = f"Docs directory '{override}' does not exist."
            raise DocsRootNotFoundError(msg)
        return override
    found = find_input_dir("docs", search_root)
    if found is None:
        msg = (
            "Could not automatically detect a Docusaurus 'docs' directory. "
            "Run from the project root or pass --docs-dir."
        )
        raise DocsRootNotFoundError(msg)
    return found


def detect_static_dir(search_root: Path, override: Path | None = None) -> Path | None:
    """Return the static assets directory, or ``None`` when absent."""
    if override is not None:
        return override if override.is_dir() else None
    return find_input_dir("static", search_root)


def copy_static_assets(static_dir: Path | None, output_dir: Path) -> Path:
    """Copy common static asset folders and logo files into ``output/images``.

    Parameters
    ----------
    static_dir : Path or None
        Docusaurus ``static`` directory; nothing is copied when ``None``.
    output_dir : Path
        Mintlify output root.

    Returns
    -------
    Path
        The images directory, created even when nothing was copied.
    """
    images_dir = output_dir / IMAGES_DIRNAME
    images_dir.mkdir(parents=True, exist_ok=True)
    if static_dir is None:
        return images_dir

    for name in STATIC_SUBFOLDERS:
        source = static_dir / name
        if source.is_dir():
            shutil.copytree(source, images_dir, dirs_exist_ok=True)
            logger.debug("copied %s into %s", source, images_dir)
    for name in STATIC_ROOT_FILES:
        source = static_dir / name
        if source.is_file():
            shutil.copy2(source, images_dir / name)
    return images_dir


def reset_output_dir(output_dir: Path) -> None:
    """Remove any previous output and recreate an empty ``output_dir``."""
    if output_dir.exists():
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True)


__all__ = [
    "DocsRootNotFoundError",
    "copy_static_assets",
    "detect_docs_dir",
    "detect_static_dir",
    "find_input_dir",
    "reset_output_dir",
]
