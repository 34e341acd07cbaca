"""Load and validate migration configuration YAML for mint_migrate runs.

This subpackage parses an optional ``mint-migrate.yaml`` file, applies
defaults for every omitted section, and produces strongly typed dataclasses
(:class:`MigrationConfig`, :class:`BrandingConfig`, etc.) that the migrator
consumes. The primary entry point is :func:`load_migration_config`.

Examples
--------
>>> from pathlib import Path
>>> from mint_migrate.config import load_migration_config
>>> config = load_migration_config(Path("mint-migrate.yaml"))  # doctest: +SKIP
>>> config.branding.font_family  # doctest: +SKIP
'Inter'
"""

from .loader import DEFAULT_CONFIG_FILENAME, load_migration_config
from .models import (
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_PROJECT_NAME,
    BrandingConfig,
    ClassificationConfig,
    FooterConfig,
    FooterLinkGroupConfig,
    MigrationConfig,
    MigrationConfigError,
    NavbarConfig,
    NavButtonConfig,
    NavLinkConfig,
)

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_PRIMARY_COLOR",
    "DEFAULT_PROJECT_NAME",
    "BrandingConfig",
    "ClassificationConfig",
    "FooterConfig",
    "FooterLinkGroupConfig",
    "MigrationConfig",
    "MigrationConfigError",
    "NavButtonConfig",
    "NavLinkConfig",
    "NavbarConfig",
    "load_migration_config",
]
