"""Navigation structures shared by the walker, the assembler, and the manifest."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

Page = str
"""Slug of one emitted document: relative, extension-less, ``/``-separated."""


@dc.dataclass(slots=True)
class Group:
    """A labelled, ordered navigation level holding pages and nested groups.

    Attributes
    ----------
    label : str
        Group name shown in the sidebar.
    pages : list[Page | Group]
        Children in display order.
    expanded : bool
        Whether the sidebar renders the group open by default.
    """

    label: str
    pages: list[Page | Group] = dc.field(default_factory=list)
    expanded: bool = False

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the group has no children."""
        return not self.pages

    def add_page(self, slug: Page) -> bool:
        """Append ``slug`` unless it is already listed; return whether it was added."""
        if slug in self.pages:
            return False
        self.pages.append(slug)
        return True

    def add_group(self, group: Group) -> bool:
        """Append ``group`` when it holds at least one page."""
        if group.is_empty:
            return False
        self.pages.append(group)
        return True

    def slugs(self) -> list[Page]:
        """Return every page slug beneath this group, depth-first."""
        found: list[Page] = []
        for child in self.pages:
            if isinstance(child, Group):
                found.extend(child.slugs())
            else:
                found.append(child)
        return found

    def to_dict(self) -> dict[str, typ.Any]:
        """Serialise into the ``{group, expanded, pages}`` manifest shape."""
        return {
            "group": self.label,
            "expanded": self.expanded,
            "pages": [
                child.to_dict() if isinstance(child, Group) else child
                for child in self.pages
            ],
        }


@dc.dataclass(slots=True)
class Tab:
    """Top-level navigation tab."""

    name: str
    groups: list[Group]

    def to_dict(self) -> dict[str, typ.Any]:
        """Serialise into the ``{tab, groups}`` manifest shape."""
        return {"tab": self.name, "groups": [group.to_dict() for group in self.groups]}


__all__ = ["Group", "Page", "Tab"]
