r"""Canonicalise image references onto the ``/images/<name>`` asset path.

Static assets are copied from Docusaurus ``static/img``, ``static/images`` and
``static/assets`` into a single ``images`` folder at the Mintlify output root,
so every reference into one of those folders is rewritten to the same absolute
path. Four shapes are recognised:

* Markdown images, ``![alt](../static/img/diagram.png)``;
* raw tags, ``<img src="/img/diagram.png" />``;
* required sources, ``<img src={require('@site/static/img/diagram.png')} />``;
* required default exports, ``<img src={require('./img/diagram.png').default} />``.

Example
-------
>>> from mint_migrate.converter.images import canonicalize_images
>>> canonicalize_images("![Flow](./static/img/flow.png)")
'![Flow](/images/flow.png)'
>>> canonicalize_images("![Flow](/images/flow.png)")
'![Flow](/images/flow.png)'
"""

from __future__ import annotations

import re

CANONICAL_PREFIX = "/images/"
ASSET_FOLDERS = ("img", "images", "assets")

_ASSET_PREFIX = (
    r"\s*(?:/|(?:\.{1,2}/)+)?(?:@site/)?(?:static/)?"
    rf"(?:{'|'.join(ASSET_FOLDERS)})/"
)

MARKDOWN_IMAGE_PATTERN = re.compile(
    rf"!\[([^\]]*)\]\({_ASSET_PREFIX}([^)]+?)\s*\)"
)

_SRC_ATTR = r"<img\b[^>]*?(?<![\w-])src="

HTML_IMAGE_PATTERN = re.compile(
    rf"""{_SRC_ATTR}["']{_ASSET_PREFIX}([^"']+)["'][^>]*>"""
)
REQUIRE_IMAGE_PATTERN = re.compile(
    rf"""{_SRC_ATTR}\{{require\(["']{_ASSET_PREFIX}([^"']+)["']\)\}}[^>]*>"""
)
REQUIRE_DEFAULT_IMAGE_PATTERN = re.compile(
    rf"""{_SRC_ATTR}\{{require\(["']{_ASSET_PREFIX}([^"']+)["']\)"""
    r"""\.default\}[^>]*>"""
)

DEFAULT_ALT_TEXT = "Image"


def _markdown_image(match: re.Match[str]) -> str:
    alt, target = match.groups()
    return f"![{alt}]({CANONICAL_PREFIX}{target})"


def _tag_image(match: re.Match[str]) -> str:
    return f"![{DEFAULT_ALT_TEXT}]({CANONICAL_PREFIX}{match.group(1)})"


def canonicalize_images(body: str) -> str:
    """Rewrite every recognised image reference to ``/images/<name>``."""
    body = MARKDOWN_IMAGE_PATTERN.sub(_markdown_image, body)
    body = HTML_IMAGE_PATTERN.sub(_tag_image, body)
    body = REQUIRE_IMAGE_PATTERN.sub(_tag_image, body)
    return REQUIRE_DEFAULT_IMAGE_PATTERN.sub(_tag_image, body)


__all__ = ["ASSET_FOLDERS", "CANONICAL_PREFIX", "canonicalize_images"]
