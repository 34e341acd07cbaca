"""Cyclopts CLI entrypoint for migrating Docusaurus docs to Mintlify.

The ``mint-migrate`` console script defined here converts a Docusaurus docs
tree into a Mintlify project: one ``.mdx`` page per source document, assets
under ``images/``, and a ``docs.json`` navigation manifest. Typical usage is
``mint-migrate migrate`` from the Docusaurus project root; ``mint-migrate
classify`` previews which navigation tab a top-level folder would land in.

Examples
--------
Migrate the docs found next to the working directory:

>>> from mint_migrate.cli import main
>>> main()  # doctest: +SKIP

Migrate an explicit docs folder into a custom directory:

>>> from mint_migrate.cli import app
>>> app(
...     ["migrate", "--docs-dir", "site/docs", "--output-dir", "dist"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from .config import MigrationConfigError, load_migration_config
from .migrator import DocsMigrator
from .sources import DocsRootNotFoundError

if typ.TYPE_CHECKING:
    from .config import MigrationConfig

app = App(name="mint-migrate", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(level: str) -> None:
    """Route library logging to stderr at the requested level."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


def _fail(message: str) -> typ.NoReturn:
    """Print ``message`` to stderr and exit with status 1."""
    print(f"error: {message}", file=sys.stderr)
    raise SystemExit(1)


def _load_config(config: Path | None) -> MigrationConfig:
    try:
        return load_migration_config(config, required=config is not None)
    except (FileNotFoundError, MigrationConfigError, TypeError, YAMLError) as exc:
        _fail(str(exc))


@app.command(help="Convert a Docusaurus docs tree into a Mintlify project.")
def migrate(
    *,
    docs_dir: typ.Annotated[
        Path | None,
        Parameter(help="Docusaurus docs folder", env_var="INPUT_DOCS_DIR"),
    ] = None,
    static_dir: typ.Annotated[
        Path | None,
        Parameter(help="Docusaurus static folder", env_var="INPUT_STATIC_DIR"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to mint-migrate.yaml", env_var="INPUT_CONFIG"),
    ] = None,
    clean: typ.Annotated[
        bool | None,
        Parameter(help="Empty the output folder before writing"),
    ] = None,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="INPUT_LOG_LEVEL")
    ] = "WARNING",
) -> None:
    """Migrate Docusaurus documentation into a Mintlify project directory.

    Parameters
    ----------
    docs_dir : Path or None, optional
        Docs folder to convert; auto-detected when ``None``.
    static_dir : Path or None, optional
        Static assets folder; auto-detected when ``None``.
    output_dir : Path or None, optional
        Destination for the Mintlify project; overrides the config file.
    config : Path or None, optional
        YAML configuration file. When ``None``, ``mint-migrate.yaml`` in the
        working directory is used if present.
    clean : bool or None, optional
        Whether to empty the output folder first; overrides the config file.
    log_level : str, optional
        Logging level for diagnostic output, ``WARNING`` by default.

    Returns
    -------
    None
        Writes the converted project and prints the manifest path and a
        summary. Exits with status 1 when the docs folder cannot be found or
        the configuration is invalid.
    """
    _configure_logging(log_level)
    settings = _load_config(config)
    overrides: dict[str, typ.Any] = {}
    if docs_dir is not None:
        overrides["docs_dir"] = docs_dir
    if static_dir is not None:
        overrides["static_dir"] = static_dir
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if clean is not None:
        overrides["clean"] = clean
    if overrides:
        settings = dc.replace(settings, **overrides)

    try:
        result = DocsMigrator(settings).run()
    except (DocsRootNotFoundError, ValueError) as exc:
        _fail(str(exc))

    print(f"detected docs at {_format_path(result.docs_dir)}")
    print(f"wrote {_format_path(result.manifest_path)}")
    print(
        f"Migrated {result.branding.name} ({len(result.pages)} pages) "
        f"to {_format_path(result.output_dir)}."
    )
    print(f"Next: cd {_format_path(result.output_dir)} && mint dev")


@app.command(help="Show which navigation tab top-level folders would land in.")
def classify(
    *names: str,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to mint-migrate.yaml", env_var="INPUT_CONFIG"),
    ] = None,
) -> None:
    """Print the tab (and SDK platform) chosen for each folder name.

    Parameters
    ----------
    *names : str
        Top-level docs folder names to classify.
    config : Path or None, optional
        YAML configuration supplying custom keyword tables.
    """
    classifier = _load_config(config).classification.build_classifier()
    for name in names:
        placement = classifier.classify(name)
        if placement.platform:
            print(f"{name}: {placement.tab} / {placement.platform}")
        else:
            print(f"{name}: {placement.tab}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``mint-migrate`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
