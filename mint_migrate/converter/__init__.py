"""Rewrite Docusaurus MDX documents into Mintlify MDX pages."""

from .document import convert_document, resolve_title, rewrite_markup
from .images import canonicalize_images
from .rewrites import admonition_tag

__all__ = [
    "admonition_tag",
    "canonicalize_images",
    "convert_document",
    "resolve_title",
    "rewrite_markup",
]
