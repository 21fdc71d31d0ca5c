"""Configuration constants.

File names and markers that make up the on-disk layout of a project.
These are fixed by the build tooling and are NOT user-configurable.

For configurable values, see models.py.
"""

# =============================================================================
# Project layout
# =============================================================================

RUNNABLE_MARKER_PREFIX = ".runnable."
"""Any file whose name starts with this marks its directory as a Runnable."""

BUNDLE_FILENAME = "runnables.wasm.zip"
"""Output bundle, always written to the project root."""

DIRECTIVE_FILENAMES = ("Directive.yaml", "Directive.yml")
"""Top-level directive file names, checked in order."""

MODULE_SUFFIX = ".wasm"
"""Compiled output of a Runnable is <name>.wasm inside its directory."""

DEFAULT_NAMESPACE = "default"
"""Namespace given to Runnables that do not declare one."""

# =============================================================================
# Config file locations
# =============================================================================

CONFIG_DIRNAME = ".subo"
CONFIG_FILENAME = "config.yaml"
