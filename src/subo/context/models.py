"""Records produced by a context scan. Immutable once created."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from subo.config.constants import MODULE_SUFFIX
from subo.directive.models import Runnable


@dataclass(frozen=True, slots=True)
class RunnableDir:
    """A directory containing a Runnable.

    Attributes:
        name: Runnable name (manifest name, or the directory's base name)
        underscore_name: name with hyphens replaced, usable as an identifier
        fullpath: Absolute path of the directory
        runnable: Manifest with defaults applied
        build_image: Versioned builder image for the Runnable's lang
    """

    name: str
    underscore_name: str
    fullpath: Path
    runnable: Runnable
    build_image: str

    @property
    def module_path(self) -> Path:
        """Where the compiled module for this Runnable is written."""
        return self.fullpath / f"{self.name}{MODULE_SUFFIX}"


@dataclass(frozen=True, slots=True)
class BundleRef:
    """Location of the project bundle and whether it existed at scan time."""

    fullpath: Path
    exists: bool = False
