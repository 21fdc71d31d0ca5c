"""Fixtures for building Runnable projects on disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

MakeRunnable = Callable[..., Path]


@pytest.fixture
def make_runnable() -> MakeRunnable:
    """Factory writing a .runnable.yaml into a directory (created if needed)."""

    def _make(
        directory: Path,
        *,
        name: str | None = None,
        namespace: str | None = None,
        lang: str | None = "rust",
        filename: str = ".runnable.yaml",
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        lines = []
        if name is not None:
            lines.append(f"name: {name}")
        if namespace is not None:
            lines.append(f"namespace: {namespace}")
        if lang is not None:
            lines.append(f"lang: {lang}")
        (directory / filename).write_text("\n".join(lines) + "\n")
        return directory

    return _make
