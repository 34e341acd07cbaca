"""Load migration configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from mint_migrate._constants import DEFAULT_OUTPUT_DIR

from .helpers import (
    _build_branding,
    _build_classification,
    _build_footer,
    _build_navbar,
    _optional_path,
    _require_mapping,
)
from .models import MigrationConfig, MigrationConfigError

DEFAULT_CONFIG_FILENAME = "mint-migrate.yaml"


def load_migration_config(
    path: Path | None = None, *, required: bool = False
) -> MigrationConfig:
    """Load the YAML configuration describing one migration run.

    Parameters
    ----------
    path : Path or None, optional
        Filesystem path to the YAML file. ``None`` looks for
        ``mint-migrate.yaml`` in the working directory.
    required : bool, optional
        When ``True`` a missing file is an error; otherwise defaults are
        returned. Defaults to ``False``.

    Returns
    -------
    MigrationConfig
        Parsed configuration, with every omitted field defaulted. Relative
        paths are resolved against the config file's directory.

    Raises
    ------
    FileNotFoundError
        If ``required`` is set and the file does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    MigrationConfigError
        If a section or field has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from mint_migrate.config import load_migration_config
    >>> config = load_migration_config(Path("mint-migrate.yaml"))  # doctest: +SKIP
    >>> config.output_dir  # doctest: +SKIP
    PosixPath('mintlify-output')
    """
    config_path = path or Path(DEFAULT_CONFIG_FILENAME)
    if not config_path.exists():
        if required:
            msg = f"Configuration file '{config_path}' not found."
            raise FileNotFoundError(msg)
        return MigrationConfig()

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with config_path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = config_path.resolve().parent

    defaults = _require_mapping(raw.get("defaults"), "defaults")
    clean = defaults.get("clean", True)
    if not isinstance(clean, bool):
        msg = "defaults.clean must be true or false."
        raise MigrationConfigError(msg)

    output_dir = _optional_path(defaults.get("output_dir")) or Path(DEFAULT_OUTPUT_DIR)
    return MigrationConfig(
        output_dir=_anchor(output_dir, base_dir),
        docs_dir=_anchor(_optional_path(defaults.get("docs_dir")), base_dir),
        static_dir=_anchor(_optional_path(defaults.get("static_dir")), base_dir),
        search_root=base_dir,
        clean=clean,
        branding=_build_branding(_require_mapping(raw.get("branding"), "branding")),
        navbar=_build_navbar(_require_mapping(raw.get("navbar"), "navbar")),
        footer=_build_footer(_require_mapping(raw.get("footer"), "footer")),
        classification=_build_classification(
            _require_mapping(raw.get("classification"), "classification")
        ),
    )


@typ.overload
def _anchor(path: Path, base_dir: Path) -> Path: ...


@typ.overload
def _anchor(path: None, base_dir: Path) -> None: ...


def _anchor(path: Path | None, base_dir: Path) -> Path | None:
    """Resolve a relative ``path`` against the config file directory."""
    if path is None or path.is_absolute():
        return path
    return base_dir / path


__all__ = ["DEFAULT_CONFIG_FILENAME", "load_migration_config"]
