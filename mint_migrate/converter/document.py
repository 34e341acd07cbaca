"""Convert a single Docusaurus document into a Mintlify MDX page.

:func:`convert_document` runs the markup rewrites in a fixed order, resolves
the page title, and emits a fresh frontmatter block. The order matters: later
rewrites assume earlier ones already ran (images are canonicalised after tab
and callout wrappers are in place, and bracket escaping runs last so it never
sees tags the other stages still need to rename).

Example
-------
>>> from mint_migrate.converter import convert_document
>>> page = convert_document(":::tip\\nUse caching\\n:::", "caching", False, "Guides")
>>> page.splitlines()[:6]
['---', 'title: "Caching"', '---', '', '<Tip>', '']
"""

from __future__ import annotations

import typing as typ

from mint_migrate._constants import OVERVIEW_TITLE
from mint_migrate.frontmatter import first_heading, split_frontmatter
from mint_migrate.naming import title_case

from .images import canonicalize_images
from .rewrites import (
    convert_admonitions,
    convert_cards,
    convert_comments,
    convert_tabs,
    escape_bracketed_tags,
    strip_platform_imports,
)

MARKUP_REWRITES: tuple[typ.Callable[[str], str], ...] = (
    strip_platform_imports,
    convert_comments,
    convert_tabs,
    convert_admonitions,
    canonicalize_images,
    convert_cards,
    escape_bracketed_tags,
)


def rewrite_markup(body: str) -> str:
    """Apply every markup rewrite to ``body`` in pipeline order."""
    for rewrite in MARKUP_REWRITES:
        body = rewrite(body)
    return body


def resolve_title(
    body: str,
    base_name: str,
    *,
    is_index: bool,
    group_label: str | None,
) -> tuple[str, str]:
    """Resolve the page title and strip its source from ``body``.

    Parameters
    ----------
    body : str
        Rewritten document text, still carrying its original frontmatter.
    base_name : str
        File name without extension, used as the last-resort title.
    is_index : bool
        Whether the document is its directory's index or readme page.
    group_label : str or None
        Label of the containing navigation group.

    Returns
    -------
    tuple[str, str]
        The resolved title and the body with the frontmatter block removed
        (and the first heading too when it supplied the title).
    """
    meta, remainder = split_frontmatter(body, lenient=True)
    heading = first_heading(remainder)

    if meta.get("title"):
        title = meta["title"]
    elif heading is not None:
        title = heading.text
        remainder = remainder[: heading.start] + remainder[heading.end :]
    elif is_index:
        title = OVERVIEW_TITLE
    else:
        title = title_case(base_name)

    if is_index and group_label and title.lower() == group_label.lower():
        title = OVERVIEW_TITLE
    return title, remainder


def render_frontmatter(title: str) -> str:
    """Return a Mintlify frontmatter block carrying only ``title``."""
    escaped = title.replace('"', '\\"')
    return f'---\ntitle: "{escaped}"\n---\n\n'


def convert_document(
    raw: str,
    base_name: str,
    is_index: bool,  # noqa: FBT001
    group_label: str | None,
) -> str:
    """Convert one Docusaurus document body into Mintlify MDX.

    Parameters
    ----------
    raw : str
        Original document text, including any frontmatter.
    base_name : str
        File name without extension.
    is_index : bool
        ``True`` for ``index``/``readme`` pages, which default to an
        ``Overview`` title.
    group_label : str or None
        Label of the navigation group that will contain the page.

    Returns
    -------
    str
        The converted document: a generated frontmatter block followed by the
        rewritten body with leading whitespace removed.
    """
    body = rewrite_markup(raw or "")
    title, body = resolve_title(
        body, base_name, is_index=is_index, group_label=group_label
    )
    return render_frontmatter(title) + body.lstrip()


__all__ = [
    "MARKUP_REWRITES",
    "convert_document",
    "render_frontmatter",
    "resolve_title",
    "rewrite_markup",
]
