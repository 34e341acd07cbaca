"""Walk a Docusaurus docs tree and emit converted Mintlify pages.

:class:`HierarchyWalker` processes one directory at a time, depth-first. Each
directory becomes a :class:`~mint_migrate.models.Group` labelled from its
``_category_.json`` (or a title-cased folder name); each Markdown document is
converted and written to the mirrored location beneath the output root, and
its slug appended to the group. Groups left without pages are dropped by
their parent, so empty branches vanish at any depth.

Example
-------
>>> from pathlib import Path
>>> from mint_migrate.walker import HierarchyWalker
>>> walker = HierarchyWalker(Path("mintlify-output"))  # doctest: +SKIP
>>> group = walker.walk(Path("docs/guides"), "guides")  # doctest: +SKIP
>>> group.slugs()[:2]  # doctest: +SKIP
['guides/index', 'guides/setup']
"""

from __future__ import annotations

import logging
import posixpath
import typing as typ

from ._constants import (
    CATEGORY_META_FILENAME,
    INDEX_BASENAMES,
    TARGET_SUFFIX,
)
from .converter import convert_document
from .frontmatter import read_document
from .models import Group
from .naming import title_case
from .ordering import SourceNode, read_category_meta, sorted_entries

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def is_ignored(node: SourceNode) -> bool:
    """Return ``True`` for dotfiles and directory metadata files."""
    return node.name.startswith(".") or node.name == CATEGORY_META_FILENAME


def build_slug(relative_dir: str, base_name: str) -> str:
    """Join a relative directory and base name into a forward-slash slug."""
    slug = posixpath.join(relative_dir.replace("\\", "/"), base_name)
    return slug.lstrip("/")


def group_label(directory: Path) -> str:
    """Return the navigation label for ``directory``."""
    label = read_category_meta(directory).label
    return label or title_case(directory.name)


class HierarchyWalker:
    """Convert a directory tree into nested navigation groups."""

    def __init__(
        self,
        output_root: Path,
        *,
        converter: typ.Callable[[str, str, bool, str | None], str] = convert_document,
    ) -> None:
        """Initialise the walker.

        Parameters
        ----------
        output_root : Path
            Directory that receives the converted ``.mdx`` files.
        converter : callable, optional
            Document converter with the signature of
            :func:`~mint_migrate.converter.convert_document`.
        """
        self.output_root = output_root
        self.converter = converter
        self.written: list[Path] = []

    def walk(self, directory: Path, relative_dir: str) -> Group:
        """Return the navigation group for ``directory`` and everything below it.

        Parameters
        ----------
        directory : Path
            Source directory to process.
        relative_dir : str
            Path of ``directory`` relative to the docs root, mirrored beneath
            the output root and used as the slug prefix.

        Returns
        -------
        Group
            The populated group. It is empty when no document exists anywhere
            beneath ``directory``; callers drop empty groups.
        """
        label = group_label(directory)
        group = Group(label=label)
        for node in sorted_entries(directory):
            if is_ignored(node):
                continue
            if node.is_dir:
                child_dir = posixpath.join(relative_dir, node.name)
                group.add_group(self.walk(node.path, child_dir))
            elif node.is_content:
                slug = self.write_document(node.path, relative_dir, label)
                if not group.add_page(slug):
                    logger.warning(
                        "%s overwrote an earlier document with slug %s",
                        node.path,
                        slug,
                    )
        return group

    def write_document(
        self, source: Path, relative_dir: str, label: str | None
    ) -> str:
        """Convert ``source`` and write it beneath the output root.

        Returns
        -------
        str
            Slug of the written page.
        """
        base_name = source.name.rsplit(".", 1)[0]
        is_index = base_name.lower() in INDEX_BASENAMES
        raw = read_document(source)
        converted = self.converter(raw, base_name, is_index, label)

        target = self.output_root / relative_dir / f"{base_name}{TARGET_SUFFIX}"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(converted, encoding="utf-8")
        self.written.append(target)
        logger.debug("wrote %s", target)
        return build_slug(relative_dir, base_name)


__all__ = ["HierarchyWalker", "build_slug", "group_label", "is_ignored"]
