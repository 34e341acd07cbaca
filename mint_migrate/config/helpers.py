"""Utility helpers shared by the mint_migrate configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from .models import (
    BrandingConfig,
    ClassificationConfig,
    FooterConfig,
    FooterLinkGroupConfig,
    MigrationConfigError,
    NavButtonConfig,
    NavbarConfig,
    NavLinkConfig,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: object | None) -> Path | None:
    """Return a Path for non-empty values, otherwise None."""
    text = _optional_str(value)
    return Path(text) if text else None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, context: str) -> str:
    """Return a required, non-empty string field or raise a config error."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"{context} requires a non-empty '{key}'."
        raise MigrationConfigError(msg)
    return value


def _require_mapping(value: object, context: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping; treat ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, cabc.Mapping):
        msg = f"{context} must be a mapping."
        raise MigrationConfigError(msg)
    return value


def _keyword_tuple(value: object, context: str) -> tuple[str, ...]:
    """Normalise a keyword list into a tuple of lowercase strings."""
    match value:
        case str():
            items: list[object] = value.split()
        case list() | tuple():
            items = list(value)
        case _:
            msg = f"{context} must be a list of keywords."
            raise MigrationConfigError(msg)
    keywords = tuple(
        text.lower() for item in items if (text := _optional_str(item)) is not None
    )
    if not keywords:
        msg = f"{context} must contain at least one keyword."
        raise MigrationConfigError(msg)
    return keywords


def _build_link(payload: object, context: str) -> NavLinkConfig:
    mapping = _require_mapping(payload, context)
    return NavLinkConfig(
        label=_require_str(mapping, "label", context),
        href=_require_str(mapping, "href", context),
    )


def _build_links(value: object, context: str) -> list[NavLinkConfig]:
    """Build a list of links, rejecting non-list payloads."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"{context} must be a list."
        raise MigrationConfigError(msg)
    return [
        _build_link(item, f"{context}[{idx}]") for idx, item in enumerate(value)
    ]


def _build_branding(payload: typ.Mapping[str, typ.Any]) -> BrandingConfig:
    """Build a BrandingConfig, keeping defaults for omitted fields."""
    base = BrandingConfig()
    return BrandingConfig(
        name=_optional_str(payload.get("name")),
        color=_optional_str(payload.get("color")),
        logo=_optional_str(payload.get("logo")),
        font_family=_optional_str(payload.get("font_family")) or base.font_family,
        theme=_optional_str(payload.get("theme")) or base.theme,
    )


def _build_navbar(payload: typ.Mapping[str, typ.Any]) -> NavbarConfig:
    """Build the navbar configuration."""
    primary_raw = payload.get("primary")
    primary = None
    if primary_raw is not None:
        mapping = _require_mapping(primary_raw, "navbar.primary")
        primary = NavButtonConfig(
            label=_require_str(mapping, "label", "navbar.primary"),
            href=_require_str(mapping, "href", "navbar.primary"),
            type=_optional_str(mapping.get("type")) or "button",
        )
    return NavbarConfig(
        links=_build_links(payload.get("links"), "navbar.links"),
        primary=primary,
    )


def _build_footer(payload: typ.Mapping[str, typ.Any]) -> FooterConfig:
    """Build the footer configuration."""
    socials_raw = _require_mapping(payload.get("socials"), "footer.socials")
    socials = {
        str(key): text
        for key, value in socials_raw.items()
        if (text := _optional_str(value)) is not None
    }
    groups_raw = payload.get("links")
    if groups_raw is None:
        groups_raw = []
    if not isinstance(groups_raw, list):
        msg = "footer.links must be a list."
        raise MigrationConfigError(msg)
    groups: list[FooterLinkGroupConfig] = []
    for idx, item in enumerate(groups_raw):
        context = f"footer.links[{idx}]"
        mapping = _require_mapping(item, context)
        groups.append(
            FooterLinkGroupConfig(
                header=_require_str(mapping, "header", context),
                items=_build_links(mapping.get("items"), f"{context}.items"),
            )
        )
    return FooterConfig(socials=socials, links=groups)


def _build_classification(
    payload: typ.Mapping[str, typ.Any],
) -> ClassificationConfig:
    """Build keyword tables, preserving the configured platform order."""
    base = ClassificationConfig()
    categories_raw = payload.get("sdk_categories")
    categories = base.sdk_categories
    if categories_raw is not None:
        mapping = _require_mapping(categories_raw, "classification.sdk_categories")
        categories = {
            str(platform): _keyword_tuple(
                keywords, f"classification.sdk_categories.{platform}"
            )
            for platform, keywords in mapping.items()
        }
    sdk_keywords = base.sdk_keywords
    if payload.get("sdk_keywords") is not None:
        sdk_keywords = _keyword_tuple(
            payload["sdk_keywords"], "classification.sdk_keywords"
        )
    tool_keywords = base.tool_keywords
    if payload.get("tool_keywords") is not None:
        tool_keywords = _keyword_tuple(
            payload["tool_keywords"], "classification.tool_keywords"
        )
    return ClassificationConfig(
        sdk_categories=categories,
        sdk_keywords=sdk_keywords,
        tool_keywords=tool_keywords,
    )


__all__ = [
    "_build_branding",
    "_build_classification",
    "_build_footer",
    "_build_links",
    "_build_navbar",
    "_keyword_tuple",
    "_optional_path",
    "_optional_str",
    "_require_mapping",
]
