"""Builder image lookup by Runnable language."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from subo.release import SUBO_DOT_VERSION

DOCKER_IMAGE_FOR_LANG: Mapping[str, str] = MappingProxyType(
    {
        "rust": "suborbital/builder-rs",
        "swift": "suborbital/builder-swift",
        "assemblyscript": "suborbital/builder-as",
        "tinygo": "suborbital/builder-tinygo",
    }
)


def image_for_lang(lang: str) -> str | None:
    """Return the builder image for lang, tagged with this release.

    Returns None when the language has no builder; callers decide whether
    that is fatal.
    """
    img = DOCKER_IMAGE_FOR_LANG.get(lang)
    if img is None:
        return None
    return f"{img}:v{SUBO_DOT_VERSION}"


def supported_langs() -> tuple[str, ...]:
    """Languages that have a builder image, sorted."""
    return tuple(sorted(DOCKER_IMAGE_FOR_LANG))
