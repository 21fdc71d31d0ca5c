"""Runnable manifest detection and loading for a single directory."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from subo.config.constants import DEFAULT_NAMESPACE, RUNNABLE_MARKER_PREFIX
from subo.context.images import image_for_lang
from subo.context.models import RunnableDir
from subo.core.errors import ContextError
from subo.directive.loader import parse_runnable


def find_runnable_manifest(names: Iterable[str]) -> str | None:
    """Return the first .runnable.* file name in names, if any."""
    for name in names:
        if name.startswith(RUNNABLE_MARKER_PREFIX):
            return name
    return None


def load_runnable_dir(directory: Path, names: Iterable[str]) -> RunnableDir | None:
    """Build a RunnableDir for directory, given the names of its entries.

    Returns None when the directory has no manifest. A manifest that cannot
    be read or parsed, or that declares a lang with no builder image, raises
    rather than skipping, so a broken Runnable never silently drops out of
    the build.

    Raises:
        ContextError: CONTEXT_MANIFEST_UNREADABLE, CONTEXT_MANIFEST_PARSE or
            CONTEXT_UNSUPPORTED_LANG.
    """
    filename = find_runnable_manifest(names)
    if filename is None:
        return None

    directory = Path(os.path.abspath(directory))
    manifest_path = directory / filename
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ContextError.manifest_unreadable(str(manifest_path), str(e)) from e

    runnable = parse_runnable(text, str(manifest_path))

    defaults: dict[str, str] = {}
    if not runnable.name:
        defaults["name"] = directory.name
    if not runnable.namespace:
        defaults["namespace"] = DEFAULT_NAMESPACE
    if defaults:
        runnable = runnable.model_copy(update=defaults)

    img = image_for_lang(runnable.lang)
    if img is None:
        raise ContextError.unsupported_lang(runnable.name, runnable.lang, str(manifest_path))

    return RunnableDir(
        name=runnable.name,
        underscore_name=runnable.name.replace("-", "_"),
        fullpath=directory,
        runnable=runnable,
        build_image=img,
    )
