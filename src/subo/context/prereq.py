"""Prerequisites needed on the host before building a Runnable.

PREREQUISITE_COMMANDS maps OS -> language -> ordered prerequisites. Each
prerequisite names a sentinel file, relative to the Runnable's directory,
and the shell command that produces it when it is missing. Nothing here
runs the commands.
"""

from __future__ import annotations

import platform
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from subo.context.models import RunnableDir

REACTR_VERSION = "v0.13.0"


@dataclass(frozen=True, slots=True)
class Prereq:
    """A file paired with the native command that creates it."""

    file: str
    command: str


_NPM_INSTALL = (Prereq(file="node_modules", command="npm install --include=dev"),)


def _grain(tar_flags: str) -> tuple[Prereq, ...]:
    return (
        Prereq(file="_lib", command="mkdir _lib"),
        Prereq(
            file="_lib/_lib.tar.gz",
            command=(
                f"curl -L https://github.com/suborbital/reactr/archive/{REACTR_VERSION}.tar.gz"
                " -o _lib/_lib.tar.gz"
            ),
        ),
        Prereq(
            file="_lib/suborbital",
            command=f"tar {tar_flags} -C _lib -xvzf _lib/_lib.tar.gz **/api/grain/suborbital/*",
        ),
    )


def _table(grain: tuple[Prereq, ...]) -> Mapping[str, tuple[Prereq, ...]]:
    return MappingProxyType(
        {
            "rust": (),
            "swift": (),
            "grain": grain,
            "assemblyscript": _NPM_INSTALL,
            "tinygo": (),
            "js": _NPM_INSTALL,
        }
    )


PREREQUISITE_COMMANDS: Mapping[str, Mapping[str, tuple[Prereq, ...]]] = MappingProxyType(
    {
        "darwin": _table(_grain("--strip-components=3")),
        # GNU tar needs --wildcards for the ** pattern
        "linux": _table(_grain("--wildcards --strip-components=3")),
    }
)


def host_os() -> str:
    """Lower-cased OS name as used for PREREQUISITE_COMMANDS keys."""
    return platform.system().lower()


def prereqs_for(os_name: str, lang: str) -> tuple[Prereq, ...]:
    """Prerequisites for lang on os_name. Unknown keys mean none."""
    return PREREQUISITE_COMMANDS.get(os_name, {}).get(lang, ())


def missing_prereqs(runnable_dir: RunnableDir, os_name: str | None = None) -> list[Prereq]:
    """Prerequisites of a Runnable whose sentinel file does not exist yet.

    Order follows the table, so running the commands in sequence is safe
    (e.g. a directory is created before a download into it).
    """
    prereqs = prereqs_for(os_name or host_os(), runnable_dir.runnable.lang)
    return [p for p in prereqs if not (runnable_dir.fullpath / p.file).exists()]
