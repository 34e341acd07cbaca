"""Assemble Mintlify navigation tabs and the ``docs.json`` manifest.

:class:`TabAssembler` walks the top level of a Docusaurus docs tree and sorts
every folder into a bucket: the reserved ``guides`` folder is unwrapped so its
sub-groups become top-level Guides entries, SDK folders are grouped by
platform, tool folders go to Tools, and everything else to Guides. Loose
top-level documents are gathered into a collapsed ``Getting Started`` group.
The buckets are returned as a :class:`NavigationBuckets` value; nothing is
accumulated outside a single :meth:`TabAssembler.assemble` call.

Example
-------
>>> from pathlib import Path
>>> from mint_migrate.navigation import TabAssembler, build_tabs
>>> from mint_migrate.walker import HierarchyWalker
>>> assembler = TabAssembler(HierarchyWalker(Path("out")))  # doctest: +SKIP
>>> tabs = build_tabs(assembler.assemble(Path("docs")))  # doctest: +SKIP
>>> [tab.name for tab in tabs]  # doctest: +SKIP
['Guides', 'SDKs']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import (
    GETTING_STARTED_LABEL,
    GUIDES_DIRNAME,
    MANIFEST_SCHEMA_URL,
    SHARED_INCLUDES_DIRNAME,
)
from .classification import (
    GUIDES_TAB,
    SDKS_TAB,
    TOOLS_TAB,
    FolderClassifier,
)
from .models import Group, Page, Tab
from .ordering import sorted_entries
from .walker import is_ignored

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .branding import Branding
    from .config import BrandingConfig, FooterConfig, NavbarConfig
    from .walker import HierarchyWalker


@dc.dataclass(slots=True)
class NavigationBuckets:
    """Top-level groups sorted into tabs for one migration run.

    Attributes
    ----------
    guides : list[Group]
        Groups shown under the Guides tab, in traversal order.
    platforms : dict[str, list[Group]]
        SDK groups keyed by platform, in platform display order.
    tools : list[Group]
        Groups shown under the Tools tab.
    loose_pages : list[Page]
        Top-level documents, plus loose documents of the ``guides`` folder.
    """

    guides: list[Group] = dc.field(default_factory=list)
    platforms: dict[str, list[Group]] = dc.field(default_factory=dict)
    tools: list[Group] = dc.field(default_factory=list)
    loose_pages: list[Page] = dc.field(default_factory=list)

    def getting_started(self) -> Group | None:
        """Return the synthetic group for loose pages, or ``None`` if there are none."""
        if not self.loose_pages:
            return None
        return Group(label=GETTING_STARTED_LABEL, pages=list(self.loose_pages))

    def guide_groups(self) -> list[Group]:
        """Return Guides groups with ``Getting Started`` first when present."""
        intro = self.getting_started()
        return [intro, *self.guides] if intro else list(self.guides)


class TabAssembler:
    """Walk the docs root and classify top-level folders into tab buckets."""

    def __init__(
        self,
        walker: HierarchyWalker,
        classifier: FolderClassifier | None = None,
    ) -> None:
        self.walker = walker
        self.classifier = classifier or FolderClassifier()

    def assemble(self, docs_root: Path) -> NavigationBuckets:
        """Convert the whole docs tree and return the populated buckets.

        Parameters
        ----------
        docs_root : Path
            The Docusaurus ``docs`` directory.

        Returns
        -------
        NavigationBuckets
            Fresh buckets holding every non-empty top-level group.
        """
        buckets = NavigationBuckets(
            platforms={platform: [] for platform in self.classifier.platforms}
        )
        for node in sorted_entries(docs_root):
            if is_ignored(node):
                continue
            lower = node.name.lower()
            if lower == SHARED_INCLUDES_DIRNAME:
                continue
            if node.is_dir:
                group = self.walker.walk(node.path, node.name)
                if group.is_empty:
                    continue
                if lower == GUIDES_DIRNAME:
                    self._unwrap_guides(group, buckets)
                else:
                    self._place(node.name, group, buckets)
            elif node.is_content:
                slug = self.walker.write_document(node.path, "", GETTING_STARTED_LABEL)
                if slug not in buckets.loose_pages:
                    buckets.loose_pages.append(slug)
        return buckets

    @staticmethod
    def _unwrap_guides(group: Group, buckets: NavigationBuckets) -> None:
        """Hoist child groups of ``guides`` and keep its loose pages aside."""
        for child in group.pages:
            if isinstance(child, Group):
                buckets.guides.append(child)
            else:
                buckets.loose_pages.append(child)

    def _place(self, name: str, group: Group, buckets: NavigationBuckets) -> None:
        placement = self.classifier.classify(name)
        if placement.tab == SDKS_TAB and placement.platform is not None:
            buckets.platforms.setdefault(placement.platform, []).append(group)
        elif placement.tab == TOOLS_TAB:
            buckets.tools.append(group)
        else:
            buckets.guides.append(group)


def build_tabs(buckets: NavigationBuckets) -> list[Tab]:
    """Return the Guides, SDKs, and Tools tabs, omitting empty ones."""
    tabs: list[Tab] = []
    guides = buckets.guide_groups()
    if guides:
        tabs.append(Tab(GUIDES_TAB, guides))

    platform_groups = [
        Group(label=platform, pages=list(groups))
        for platform, groups in buckets.platforms.items()
        if groups
    ]
    if platform_groups:
        tabs.append(Tab(SDKS_TAB, platform_groups))

    if buckets.tools:
        tabs.append(Tab(TOOLS_TAB, list(buckets.tools)))
    return tabs


def _navbar_payload(navbar: NavbarConfig) -> dict[str, typ.Any]:
    payload: dict[str, typ.Any] = {
        "links": [{"label": link.label, "href": link.href} for link in navbar.links]
    }
    if navbar.primary is not None:
        payload["primary"] = {
            "type": navbar.primary.type,
            "label": navbar.primary.label,
            "href": navbar.primary.href,
        }
    return payload


def _footer_payload(footer: FooterConfig) -> dict[str, typ.Any]:
    return {
        "socials": dict(footer.socials),
        "links": [
            {
                "header": column.header,
                "items": [
                    {"label": item.label, "href": item.href} for item in column.items
                ],
            }
            for column in footer.links
        ],
    }


def build_manifest(
    tabs: list[Tab],
    branding: Branding,
    *,
    style: BrandingConfig,
    navbar: NavbarConfig,
    footer: FooterConfig,
) -> dict[str, typ.Any]:
    """Return the ``docs.json`` payload for the assembled navigation.

    Parameters
    ----------
    tabs : list[Tab]
        Navigation tabs from :func:`build_tabs`.
    branding : Branding
        Project name, colour, and optional logo, used verbatim.
    style : BrandingConfig
        Theme and font family settings.
    navbar : NavbarConfig
        Navbar links and primary button.
    footer : FooterConfig
        Footer socials and link columns.

    Returns
    -------
    dict[str, Any]
        JSON-ready manifest. ``logo`` is present only when a logo was found.
    """
    manifest: dict[str, typ.Any] = {
        "$schema": MANIFEST_SCHEMA_URL,
        "theme": style.theme,
        "name": branding.name,
        "colors": {
            "primary": branding.color,
            "light": branding.color,
            "dark": branding.color,
        },
        "font": {"family": style.font_family},
        "contextual": {"options": ["copy", "view"]},
        "navbar": _navbar_payload(navbar),
        "navigation": {"tabs": [tab.to_dict() for tab in tabs]},
        "footer": _footer_payload(footer),
    }
    if branding.logo:
        manifest["logo"] = {"href": "/", "light": branding.logo, "dark": branding.logo}
    return manifest


__all__ = ["NavigationBuckets", "TabAssembler", "build_manifest", "build_tabs"]
