"""Bundle location."""

from __future__ import annotations

from pathlib import Path

from subo.config.constants import BUNDLE_FILENAME
from subo.context.models import BundleRef
from subo.core.errors import ContextError


def bundle_target_path(cwd: Path) -> BundleRef:
    """Return where the bundle for cwd lives and whether it exists now.

    The path is populated even when the bundle is missing so callers can
    write a new one there.

    Raises:
        ContextError: CONTEXT_BUNDLE_STAT if stat fails for any reason
            other than the file not existing.
    """
    path = cwd / BUNDLE_FILENAME
    try:
        path.stat()
    except FileNotFoundError:
        return BundleRef(fullpath=path, exists=False)
    except OSError as e:
        raise ContextError.bundle_stat(str(path), str(e)) from e
    return BundleRef(fullpath=path, exists=True)
