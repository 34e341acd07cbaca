"""High-level orchestration for a Docusaurus to Mintlify migration.

This module wires the collaborators together: it locates the Docusaurus
``docs`` and ``static`` folders, resets the output directory, copies assets,
scrapes branding, converts the docs tree into navigation tabs, and writes the
``docs.json`` manifest once traversal has finished.

Example
-------
>>> from pathlib import Path
>>> from mint_migrate.config import MigrationConfig
>>> from mint_migrate.migrator import DocsMigrator
>>> result = DocsMigrator(MigrationConfig()).run()  # doctest: +SKIP
>>> result.manifest_path  # doctest: +SKIP
PosixPath('mintlify-output/docs.json')
"""

from __future__ import annotations

import dataclasses as dc
import json
import logging
import typing as typ

from ._constants import MANIFEST_FILENAME
from .branding import Branding, detect_branding
from .navigation import TabAssembler, build_manifest, build_tabs
from .sources import (
    copy_static_assets,
    detect_docs_dir,
    detect_static_dir,
    reset_output_dir,
)
from .walker import HierarchyWalker

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import MigrationConfig
    from .models import Tab

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class MigrationResult:
    """Summary of a completed migration run.

    Attributes
    ----------
    docs_dir : Path
        The Docusaurus docs directory that was converted.
    output_dir : Path
        Root of the generated Mintlify project.
    manifest_path : Path
        Location of the written ``docs.json``.
    pages : list[Path]
        Every converted page written, in traversal order.
    branding : Branding
        Branding merged into the manifest.
    tabs : list[Tab]
        Navigation tabs recorded in the manifest.
    """

    docs_dir: Path
    output_dir: Path
    manifest_path: Path
    pages: list[Path]
    branding: Branding
    tabs: list[Tab]


def write_manifest(manifest: dict[str, typ.Any], output_dir: Path) -> Path:
    """Serialise ``manifest`` as two-space indented JSON into ``output_dir``."""
    path = output_dir / MANIFEST_FILENAME
    path.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return path


class DocsMigrator:
    """Convert a Docusaurus site into a Mintlify project directory."""

    def __init__(self, config: MigrationConfig) -> None:
        """Initialise the migrator.

        Parameters
        ----------
        config : MigrationConfig
            Resolved run configuration (input overrides, output location,
            branding overrides, navbar/footer content, keyword tables).
        """
        self.config = config

    def run(self) -> MigrationResult:
        """Perform the migration and return a summary.

        Returns
        -------
        MigrationResult
            Paths and navigation produced by the run.

        Raises
        ------
        DocsRootNotFoundError
            If no docs directory can be located. Raised before any output is
            touched.
        ValueError
            If the output directory would contain the docs input.
        """
        config = self.config
        docs_dir = detect_docs_dir(config.search_root, config.docs_dir)
        static_dir = detect_static_dir(config.search_root, config.static_dir)
        site_root = docs_dir.parent
        logger.info("converting docs from %s", docs_dir)

        output_dir = config.output_dir
        if docs_dir.resolve().is_relative_to(output_dir.resolve()):
            msg = f"Output directory '{output_dir}' must not contain the docs input."
            raise ValueError(msg)
        if config.clean:
            reset_output_dir(output_dir)
        else:
            output_dir.mkdir(parents=True, exist_ok=True)
        images_dir = copy_static_assets(static_dir, output_dir)

        branding = detect_branding(site_root, static_dir, images_dir).with_overrides(
            config.branding
        )

        walker = HierarchyWalker(output_dir)
        classifier = config.classification.build_classifier()
        buckets = TabAssembler(walker, classifier).assemble(docs_dir)
        tabs = build_tabs(buckets)

        manifest = build_manifest(
            tabs,
            branding,
            style=config.branding,
            navbar=config.navbar,
            footer=config.footer,
        )
        manifest_path = write_manifest(manifest, output_dir)
        return MigrationResult(
            docs_dir=docs_dir,
            output_dir=output_dir,
            manifest_path=manifest_path,
            pages=list(dict.fromkeys(walker.written)),
            branding=branding,
            tabs=tabs,
        )


__all__ = ["DocsMigrator", "MigrationResult", "write_manifest"]
