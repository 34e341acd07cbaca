"""Typed dataclasses describing mint_migrate configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from mint_migrate._constants import DEFAULT_OUTPUT_DIR
from mint_migrate.classification import (
    DEFAULT_SDK_CATEGORIES,
    DEFAULT_SDK_KEYWORDS,
    DEFAULT_TOOL_KEYWORDS,
    FolderClassifier,
)

DEFAULT_PROJECT_NAME = "Documentation"
DEFAULT_PRIMARY_COLOR = "#2160fd"


class MigrationConfigError(ValueError):
    """Raised when the migration configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class BrandingConfig:
    """Branding overrides; ``None`` fields fall back to detected values."""

    name: str | None = None
    color: str | None = None
    logo: str | None = None
    font_family: str = "Inter"
    theme: str = "mint"


@dc.dataclass(slots=True)
class NavLinkConfig:
    """A labelled hyperlink used in the navbar and footer."""

    label: str
    href: str


@dc.dataclass(slots=True)
class NavButtonConfig:
    """Primary call-to-action button shown in the navbar."""

    label: str
    href: str
    type: str = "button"


@dc.dataclass(slots=True)
class NavbarConfig:
    """Navbar links and optional primary button."""

    links: list[NavLinkConfig] = dc.field(default_factory=list)
    primary: NavButtonConfig | None = None


@dc.dataclass(slots=True)
class FooterLinkGroupConfig:
    """A headed column of footer links."""

    header: str
    items: list[NavLinkConfig]


@dc.dataclass(slots=True)
class FooterConfig:
    """Footer social profiles and link columns."""

    socials: dict[str, str] = dc.field(default_factory=dict)
    links: list[FooterLinkGroupConfig] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class ClassificationConfig:
    """Keyword tables used to place top-level folders into tabs."""

    sdk_categories: dict[str, tuple[str, ...]] = dc.field(
        default_factory=lambda: dict(DEFAULT_SDK_CATEGORIES)
    )
    sdk_keywords: tuple[str, ...] = DEFAULT_SDK_KEYWORDS
    tool_keywords: tuple[str, ...] = DEFAULT_TOOL_KEYWORDS

    def build_classifier(self) -> FolderClassifier:
        """Return a :class:`FolderClassifier` using these tables."""
        return FolderClassifier(
            sdk_categories=dict(self.sdk_categories),
            sdk_keywords=self.sdk_keywords,
            tool_keywords=self.tool_keywords,
        )


@dc.dataclass(slots=True)
class MigrationConfig:
    """A fully resolved migration run definition."""

    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    docs_dir: Path | None = None
    static_dir: Path | None = None
    search_root: Path = Path()
    clean: bool = True
    branding: BrandingConfig = dc.field(default_factory=BrandingConfig)
    navbar: NavbarConfig = dc.field(default_factory=NavbarConfig)
    footer: FooterConfig = dc.field(default_factory=FooterConfig)
    classification: ClassificationConfig = dc.field(
        default_factory=ClassificationConfig
    )


__all__ = [
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
]
