"""Text rewrites that translate Docusaurus MDX constructs to Mintlify MDX.

Each function takes the whole document body and returns a rewritten body.
None of them parse MDX; they rely on patterns that are known to occur in
Docusaurus corpora, so an input with no matching construct is returned
unchanged.
"""

from __future__ import annotations

import re

PLATFORM_IMPORT_PATTERN = re.compile(
    r"^import\s+.*?from\s+['\"]"
    r"(?:@site|@theme|@docusaurus|react-feather|@fluentui)[^'\"]*['\"]\s*;?[ \t]*\n",
    re.MULTILINE,
)
PARTIALS_IMPORT_PATTERN = re.compile(
    r"^import\s+.*?from\s+['\"][^'\"]*partials[^'\"]*['\"]\s*;?[ \t]*\n",
    re.MULTILINE,
)
HTML_COMMENT_PATTERN = re.compile(r"<!--(.*?)-->", re.DOTALL)

TABS_OPEN_PATTERN = re.compile(r"<Tabs\b[^>]*>")
TABS_CLOSE_PATTERN = re.compile(r"</Tabs>")
TAB_ITEM_OPEN_PATTERN = re.compile(r"<TabItem\b([^>]*)>")
TAB_ITEM_CLOSE_PATTERN = re.compile(r"</TabItem>")
LABEL_ATTR_PATTERN = re.compile(r"""label=["']([^"']+)["']""")

ADMONITION_PATTERN = re.compile(
    r"^[ \t]*:::([A-Za-z]*)[^\n]*\n(.*?)\n[ \t]*:::[ \t]*$",
    re.MULTILINE | re.DOTALL,
)
ADMONITION_TAGS: dict[str, str] = {
    "info": "Info",
    "note": "Note",
    "tip": "Tip",
    "warning": "Warning",
    "caution": "Warning",
    "danger": "Warning",
}
DEFAULT_ADMONITION_TAG = "Note"

CARD_LIST_OPEN_PATTERN = re.compile(r"<CardList\b[^>]*>")
CARD_LIST_CLOSE_PATTERN = re.compile(r"</CardList>")
CARD_TO_ATTR_PATTERN = re.compile(
    r"""<Card\b([^>]*?)\s*(?<![\w-])to=(["'][^"']+["'])([^>]*)>"""
)

BRACKETED_TAG_PATTERN = re.compile(r"<([A-Za-z0-9_]*[\[\\][^>]*)>")


def strip_platform_imports(body: str) -> str:
    """Drop imports of Docusaurus-only modules and shared partials."""
    body = PLATFORM_IMPORT_PATTERN.sub("", body)
    return PARTIALS_IMPORT_PATTERN.sub("", body)


def convert_comments(body: str) -> str:
    """Rewrite HTML comments as MDX expression comments."""
    return HTML_COMMENT_PATTERN.sub(r"{/*\1*/}", body)


def _tab_item(match: re.Match[str]) -> str:
    label = LABEL_ATTR_PATTERN.search(match.group(1))
    title = label.group(1) if label else "Tab"
    return f'\n\n<Tab title="{title}">\n\n'


def convert_tabs(body: str) -> str:
    """Rename ``Tabs``/``TabItem`` containers, carrying labels over as titles."""
    body = TABS_OPEN_PATTERN.sub("\n\n<Tabs>\n\n", body)
    body = TABS_CLOSE_PATTERN.sub("\n\n</Tabs>\n\n", body)
    body = TAB_ITEM_OPEN_PATTERN.sub(_tab_item, body)
    return TAB_ITEM_CLOSE_PATTERN.sub("\n\n</Tab>\n\n", body)


def admonition_tag(kind: str | None) -> str:
    """Map an admonition kind onto the Mintlify callout component name.

    Examples
    --------
    >>> admonition_tag("CAUTION")
    'Warning'
    >>> admonition_tag("important")
    'Note'
    """
    return ADMONITION_TAGS.get((kind or "").lower(), DEFAULT_ADMONITION_TAG)


def _admonition(match: re.Match[str]) -> str:
    tag = admonition_tag(match.group(1))
    return f"\n\n<{tag}>\n\n{match.group(2).strip()}\n\n</{tag}>\n\n"


def convert_admonitions(body: str) -> str:
    """Turn ``:::kind`` fenced blocks into typed callout components."""
    return ADMONITION_PATTERN.sub(_admonition, body)


def _card(match: re.Match[str]) -> str:
    attrs, target, rest = match.groups()
    return f"<Card{attrs} href={target}{rest}>"


def convert_cards(body: str) -> str:
    """Rename card lists and turn ``to=`` destinations into ``href=`` links."""
    body = CARD_LIST_OPEN_PATTERN.sub("<CardGroup cols={2}>", body)
    body = CARD_LIST_CLOSE_PATTERN.sub("</CardGroup>", body)
    return CARD_TO_ATTR_PATTERN.sub(_card, body)


def escape_bracketed_tags(body: str) -> str:
    """Escape tag-like text whose name holds ``[`` or ``\\`` so MDX keeps it literal."""
    return BRACKETED_TAG_PATTERN.sub(r"&lt;\1&gt;", body)


__all__ = [
    "ADMONITION_TAGS",
    "DEFAULT_ADMONITION_TAG",
    "admonition_tag",
    "convert_admonitions",
    "convert_cards",
    "convert_comments",
    "convert_tabs",
    "escape_bracketed_tags",
    "strip_platform_imports",
]
