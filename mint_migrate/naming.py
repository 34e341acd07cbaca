"""Turn file and folder names into human-readable navigation labels."""

from __future__ import annotations

import re

ACRONYMS: dict[str, str] = {
    "ai": "AI",
    "api": "API",
    "ui": "UI",
    "sdk": "SDK",
    "cli": "CLI",
    "ios": "iOS",
    "html": "HTML",
    "rest": "REST",
    "sip": "SIP",
    "rtmp": "RTMP",
    "stt": "STT",
}

_SEPARATOR_PATTERN = re.compile(r"[-_]+")


def _title_word(word: str) -> str:
    lower = word.lower()
    if lower in ACRONYMS:
        return ACRONYMS[lower]
    return word[:1].upper() + word[1:].lower()


def title_case(value: str) -> str:
    """Return ``value`` as a title, honouring the acronym table.

    Hyphens and underscores separate words. Known acronyms are matched
    case-insensitively and replaced by their canonical spelling; every other
    word is capitalised with the rest lowercased.

    Examples
    --------
    >>> title_case("rest-api_reference")
    'REST API Reference'
    >>> title_case("ios-core")
    'iOS Core'
    >>> title_case("")
    ''
    """
    if not value:
        return ""
    words = _SEPARATOR_PATTERN.sub(" ", value).split()
    return " ".join(_title_word(word) for word in words)


__all__ = ["ACRONYMS", "title_case"]
