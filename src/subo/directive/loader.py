"""YAML loading for Runnable manifests and the project Directive."""

from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from subo.config.constants import DIRECTIVE_FILENAMES
from subo.core.errors import ContextError
from subo.directive.models import Directive, Runnable

_M = TypeVar("_M", bound=BaseModel)


def _parse(model: type[_M], text: str) -> _M:
    """Parse YAML text into model. Raises ValueError with a readable reason."""
    try:
        data: Any = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(str(e)) from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping, got {type(data).__name__}")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        err = e.errors()[0]
        loc = ".".join(str(part) for part in err["loc"])
        raise ValueError(f"{loc}: {err['msg']}") from e


def parse_runnable(text: str, path: str) -> Runnable:
    """Parse the contents of a `.runnable.*` manifest.

    Raises:
        ContextError: CONTEXT_MANIFEST_PARSE on malformed content.
    """
    try:
        return _parse(Runnable, text)
    except ValueError as e:
        raise ContextError.manifest_parse(path, str(e)) from e


def parse_directive(text: str, path: str) -> Directive:
    """Parse the contents of a Directive file.

    Raises:
        ContextError: CONTEXT_DIRECTIVE_PARSE on malformed content.
    """
    try:
        return _parse(Directive, text)
    except ValueError as e:
        raise ContextError.directive_parse(path, str(e)) from e


def read_directive_file(cwd: Path) -> Directive | None:
    """Load the project Directive from cwd, or None if there is none."""
    for filename in DIRECTIVE_FILENAMES:
        path = cwd / filename
        if not path.is_file():
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ContextError.directive_parse(str(path), str(e)) from e
        return parse_directive(text, str(path))
    return None
