"""Directive module exports."""

from subo.directive.loader import parse_directive, parse_runnable, read_directive_file
from subo.directive.models import Directive, Runnable

__all__ = [
    "Directive",
    "Runnable",
    "parse_directive",
    "parse_runnable",
    "read_directive_file",
]
