"""Discovery of Runnable directories under a working directory."""

from __future__ import annotations

from pathlib import Path

import structlog

from subo.context.manifest import load_runnable_dir
from subo.context.models import RunnableDir
from subo.core.errors import ContextError

log = structlog.get_logger()


def _list_names(path: Path) -> list[str]:
    """Entry names of path, sorted. Raises OSError if it can't be listed."""
    return sorted(entry.name for entry in path.iterdir())


def get_runnable_dirs(cwd: Path) -> tuple[list[RunnableDir], bool]:
    """Find the Runnables in cwd.

    If cwd is itself a Runnable it is the only result and the second
    element is True; subdirectories are not examined. Otherwise every
    immediate subdirectory holding a manifest is returned, in name order.

    Subdirectories that can't be listed are skipped with a warning. Any
    manifest error aborts the scan.

    Raises:
        ContextError: cwd can't be listed, or a manifest is invalid.
    """
    try:
        top_level = _list_names(cwd)
    except OSError as e:
        raise ContextError.directory_unreadable(str(cwd), str(e)) from e

    runnable_dir = load_runnable_dir(cwd, top_level)
    if runnable_dir is not None:
        log.debug("scanner.cwd_is_runnable", path=str(cwd), name=runnable_dir.name)
        return [runnable_dir], True

    runnables: list[RunnableDir] = []
    for name in top_level:
        dir_path = cwd / name
        if not dir_path.is_dir():
            continue

        try:
            inner = _list_names(dir_path)
        except OSError as e:
            log.warning("scanner.dir_unreadable", path=str(dir_path), error=str(e))
            continue

        runnable_dir = load_runnable_dir(dir_path, inner)
        if runnable_dir is None:
            continue

        log.debug("scanner.runnable_found", path=str(dir_path), name=runnable_dir.name)
        runnables.append(runnable_dir)

    return runnables, False
