"""subo - build context discovery for WebAssembly Runnables."""

from subo.release import SUBO_DOT_VERSION

__version__ = SUBO_DOT_VERSION
