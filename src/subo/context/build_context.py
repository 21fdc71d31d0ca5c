"""Build context: everything later commands need to know about a project.

A BuildContext is assembled once per invocation by for_directory() and is
read-only afterwards, except for the language allow-list which callers
may set once they have parsed their options.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

import structlog

from subo.context.bundle import bundle_target_path
from subo.context.models import BundleRef, RunnableDir
from subo.context.scanner import get_runnable_dirs
from subo.core.errors import ContextError
from subo.directive.loader import read_directive_file
from subo.directive.models import Directive

if TYPE_CHECKING:
    from subo.config.models import SuboConfig

log = structlog.get_logger()


@dataclass(slots=True)
class BuildContext:
    """Snapshot of the project the tool is being run in.

    Attributes:
        cwd: Absolute working directory
        cwd_is_runnable: cwd is itself a Runnable (runnables has one entry)
        runnables: Runnables found, in scan order
        bundle: Bundle location and existence at scan time
        directive: Project Directive, None when the project has none
        atmo_version: Runtime version declared by the Directive, or ""
        langs: Language allow-list; None until set_build_langs() is called
    """

    cwd: Path
    cwd_is_runnable: bool
    runnables: tuple[RunnableDir, ...]
    bundle: BundleRef
    directive: Directive | None = None
    atmo_version: str = ""
    langs: tuple[str, ...] | None = None

    def runnable_exists(self, name: str) -> bool:
        """True if the context contains a Runnable named exactly name."""
        return self.runnable(name) is not None

    def runnable(self, name: str) -> RunnableDir | None:
        for r in self.runnables:
            if r.name == name:
                return r
        return None

    def set_build_langs(self, langs: Sequence[str]) -> None:
        """Restrict building to langs. Replaces any earlier allow-list."""
        self.langs = tuple(langs)

    def should_build_lang(self, lang: str) -> bool:
        """True if lang passes the allow-list. No allow-list allows all."""
        if not self.langs:
            return True
        return lang in self.langs

    @contextmanager
    def modules(self) -> Iterator[list[BinaryIO]]:
        """Open the compiled module of every Runnable for reading.

        All handles are closed when the block exits, including when a later
        module fails to open.

        Raises:
            ContextError: CONTEXT_MODULE_OPEN for the first missing module.
        """
        with ExitStack() as stack:
            files: list[BinaryIO] = []
            for r in self.runnables:
                path = r.module_path
                try:
                    files.append(stack.enter_context(path.open("rb")))
                except OSError as e:
                    raise ContextError.module_open(str(path), str(e)) from e
            yield files


def for_directory(directory: str | os.PathLike[str]) -> BuildContext:
    """Assemble the BuildContext for directory.

    Raises:
        ContextError: the first fatal error, with details["stage"] naming
            the step that failed.
    """
    cwd = Path(os.path.abspath(directory))

    try:
        runnables, cwd_is_runnable = get_runnable_dirs(cwd)
    except ContextError as e:
        raise ContextError.during("get_runnable_dirs", e) from e

    try:
        bundle = bundle_target_path(cwd)
    except ContextError as e:
        raise ContextError.during("bundle_target_path", e) from e

    try:
        directive = read_directive_file(cwd)
    except ContextError as e:
        raise ContextError.during("read_directive_file", e) from e

    bctx = BuildContext(
        cwd=cwd,
        cwd_is_runnable=cwd_is_runnable,
        runnables=tuple(runnables),
        bundle=bundle,
        directive=directive,
    )
    if directive is not None:
        bctx.atmo_version = directive.atmo_version

    log.debug(
        "context.assembled",
        cwd=str(cwd),
        runnables=len(bctx.runnables),
        cwd_is_runnable=cwd_is_runnable,
        bundle_exists=bundle.exists,
        has_directive=directive is not None,
    )
    return bctx


def from_config(directory: str | os.PathLike[str], config: SuboConfig) -> BuildContext:
    """Assemble the context and apply the configured language allow-list."""
    bctx = for_directory(directory)
    if config.build.langs:
        bctx.set_build_langs(config.build.langs)
    return bctx
