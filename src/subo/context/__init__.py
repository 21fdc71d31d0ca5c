"""Build context discovery.

Finds the Runnables of a project, their builder images, the bundle and the
Directive, and exposes the per-OS prerequisite table.
"""

from subo.context.build_context import BuildContext, for_directory, from_config
from subo.context.bundle import bundle_target_path
from subo.context.images import DOCKER_IMAGE_FOR_LANG, image_for_lang, supported_langs
from subo.context.manifest import find_runnable_manifest, load_runnable_dir
from subo.context.models import BundleRef, RunnableDir
from subo.context.prereq import (
    PREREQUISITE_COMMANDS,
    Prereq,
    host_os,
    missing_prereqs,
    prereqs_for,
)
from subo.context.scanner import get_runnable_dirs

__all__ = [
    "BuildContext",
    "BundleRef",
    "DOCKER_IMAGE_FOR_LANG",
    "PREREQUISITE_COMMANDS",
    "Prereq",
    "RunnableDir",
    "bundle_target_path",
    "find_runnable_manifest",
    "for_directory",
    "from_config",
    "get_runnable_dirs",
    "host_os",
    "image_for_lang",
    "load_runnable_dir",
    "missing_prereqs",
    "prereqs_for",
    "supported_langs",
]
