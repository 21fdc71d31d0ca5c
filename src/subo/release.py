"""Release versions.

Builder images are tagged with the tool's own version so that images and
the CLI move in lockstep.
"""

SUBO_DOT_VERSION = "0.2.1"
"""Version of this tool. Also the tag of every builder image."""

ATMO_DOT_VERSION = "0.3.1"
"""Runtime version stamped into newly created Directives."""
