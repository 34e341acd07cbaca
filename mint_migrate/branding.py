"""Scrape project branding from a Docusaurus site.

The project title comes from ``docusaurus.config.js`` (or ``.ts``), the primary
colour from the ``--ifm-color-primary`` custom property in
``src/css/custom.css``, and the logo from the usual static locations. Every
source is optional; unreadable or unmatched files fall back to defaults.

Example
-------
>>> from pathlib import Path
>>> from mint_migrate.branding import detect_branding
>>> detect_branding(Path("."), None, None)  # doctest: +SKIP
Branding(name='Documentation', color='#2160fd', logo=None)
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ

from ._constants import IMAGES_DIRNAME
from .config.models import DEFAULT_PRIMARY_COLOR, DEFAULT_PROJECT_NAME

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import BrandingConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAMES: tuple[str, ...] = ("docusaurus.config.js", "docusaurus.config.ts")
CUSTOM_CSS_PATH = "src/css/custom.css"
TITLE_PATTERN = re.compile(r"""title:\s*['"](.*?)['"]""")
PRIMARY_COLOR_PATTERN = re.compile(
    r"--ifm-color-primary:\s*(#[0-9a-fA-F]{6})\s*;", re.IGNORECASE
)
STATIC_LOGO_CANDIDATES: tuple[str, ...] = (
    "img/logo.svg",
    "img/logo.png",
    "logo.svg",
    "logo.png",
    "images/logo.svg",
    "images/logo.png",
)
COPIED_LOGO_CANDIDATES: tuple[str, ...] = (
    "logo-light.svg",
    "logo.svg",
    "logo.png",
    "logo-light.png",
)


@dc.dataclass(slots=True)
class Branding:
    """Project identity merged verbatim into the navigation manifest."""

    name: str = DEFAULT_PROJECT_NAME
    color: str = DEFAULT_PRIMARY_COLOR
    logo: str | None = None

    def with_overrides(self, overrides: BrandingConfig) -> Branding:
        """Return a copy where configured values replace detected ones."""
        return Branding(
            name=overrides.name or self.name,
            color=overrides.color or self.color,
            logo=overrides.logo or self.logo,
        )


def _read_text(path: Path) -> str | None:
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("ignoring unreadable branding source %s: %s", path, exc)
        return None


def detect_project_name(site_root: Path) -> str | None:
    """Return the site ``title`` declared in the Docusaurus config file."""
    for filename in CONFIG_FILENAMES:
        text = _read_text(site_root / filename)
        if text is None:
            continue
        match = TITLE_PATTERN.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return None


def detect_primary_color(site_root: Path) -> str | None:
    """Return the ``--ifm-color-primary`` hex colour from the custom stylesheet."""
    text = _read_text(site_root / CUSTOM_CSS_PATH)
    if text is None:
        return None
    match = PRIMARY_COLOR_PATTERN.search(text)
    return match.group(1) if match else None


def detect_logo(static_dir: Path | None, images_dir: Path | None) -> str | None:
    """Return the ``/images/...`` path of the project logo, if one was found.

    Static candidates are checked first; their basenames are used because
    static asset folders are flattened into the output ``images`` folder.
    Files already present in ``images_dir`` are the fallback.
    """
    if static_dir is not None:
        for candidate in STATIC_LOGO_CANDIDATES:
            if (static_dir / candidate).exists():
                return f"/{IMAGES_DIRNAME}/{candidate.rsplit('/', 1)[-1]}"
    if images_dir is not None:
        for candidate in COPIED_LOGO_CANDIDATES:
            if (images_dir / candidate).exists():
                return f"/{IMAGES_DIRNAME}/{candidate}"
    return None


def detect_branding(
    site_root: Path, static_dir: Path | None, images_dir: Path | None
) -> Branding:
    """Collect project name, colour, and logo, defaulting whatever is missing."""
    return Branding(
        name=detect_project_name(site_root) or DEFAULT_PROJECT_NAME,
        color=detect_primary_color(site_root) or DEFAULT_PRIMARY_COLOR,
        logo=detect_logo(static_dir, images_dir),
    )


__all__ = [
    "Branding",
    "detect_branding",
    "detect_logo",
    "detect_primary_color",
    "detect_project_name",
]
