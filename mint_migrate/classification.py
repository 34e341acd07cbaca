"""Keyword tables that sort top-level docs folders into navigation buckets.

Folder names are matched by substring, case-insensitively. Every table is
ordered and the first match wins; a name such as ``react-native-ui-kit``
satisfies several platform keyword sets, and the table order decides where it
lands.

Example
-------
>>> from mint_migrate.classification import FolderClassifier
>>> FolderClassifier().classify("android-core")
Placement(tab='SDKs', platform='Mobile')
>>> FolderClassifier().classify("cli-reference")
Placement(tab='Tools', platform=None)
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

GUIDES_TAB = "Guides"
SDKS_TAB = "SDKs"
TOOLS_TAB = "Tools"
OTHER_SDKS = "Other SDKs"

DEFAULT_SDK_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Web": ("react-web-core", "web-core", "javascript", "html", "web"),
    "Mobile": (
        "android",
        "android-core",
        "ios",
        "ios-core",
        "flutter",
        "flutter-core",
    ),
    "React Native": ("react-native", "rn-core", "rn-ui-kit"),
    "UI Kits": ("ui-kit", "react-ui-kit", "angular-ui-kit", "vue"),
}
DEFAULT_SDK_KEYWORDS: tuple[str, ...] = (
    "sdk",
    "android",
    "ios",
    "react",
    "flutter",
    "angular",
    "web",
    "core",
    "ui",
)
DEFAULT_TOOL_KEYWORDS: tuple[str, ...] = ("cli", "plugin", "tool", "package")


class Placement(typ.NamedTuple):
    """Where a top-level folder lands: a tab and, for SDKs, a platform."""

    tab: str
    platform: str | None = None


def _matches(name: str, keywords: typ.Iterable[str]) -> bool:
    return any(keyword in name for keyword in keywords)


@dc.dataclass(slots=True)
class FolderClassifier:
    """Ordered, first-match-wins classifier for top-level docs folders.

    Attributes
    ----------
    sdk_categories : dict[str, tuple[str, ...]]
        Platform name to keyword tuple, checked in insertion order.
    sdk_keywords : tuple[str, ...]
        Broad keywords that mark a folder as SDK documentation at all.
    tool_keywords : tuple[str, ...]
        Keywords that place a folder in the Tools tab.
    """

    sdk_categories: dict[str, tuple[str, ...]] = dc.field(
        default_factory=lambda: dict(DEFAULT_SDK_CATEGORIES)
    )
    sdk_keywords: tuple[str, ...] = DEFAULT_SDK_KEYWORDS
    tool_keywords: tuple[str, ...] = DEFAULT_TOOL_KEYWORDS

    @property
    def platforms(self) -> list[str]:
        """Return every SDK platform bucket in display order."""
        return [*self.sdk_categories, OTHER_SDKS]

    def sdk_platform(self, folder_name: str) -> str | None:
        """Return the first platform whose keywords match ``folder_name``.

        Falls back to ``Other SDKs`` for names that only match the broad SDK
        keywords, and to ``None`` for names that are not SDK docs at all.
        """
        lower = folder_name.lower()
        for platform, keywords in self.sdk_categories.items():
            if _matches(lower, keywords):
                return platform
        if _matches(lower, self.sdk_keywords):
            return OTHER_SDKS
        return None

    def classify(self, folder_name: str) -> Placement:
        """Return the navigation placement for a top-level folder.

        The reserved ``guides`` folder is unwrapped by the assembler before
        classification, so it is not special-cased here.
        """
        platform = self.sdk_platform(folder_name)
        if platform is not None:
            return Placement(SDKS_TAB, platform)
        if _matches(folder_name.lower(), self.tool_keywords):
            return Placement(TOOLS_TAB)
        return Placement(GUIDES_TAB)


__all__ = [
    "DEFAULT_SDK_CATEGORIES",
    "DEFAULT_SDK_KEYWORDS",
    "DEFAULT_TOOL_KEYWORDS",
    "GUIDES_TAB",
    "OTHER_SDKS",
    "SDKS_TAB",
    "TOOLS_TAB",
    "FolderClassifier",
    "Placement",
]
