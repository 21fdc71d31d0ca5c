"""Runnable and Directive schema.

Only the fields the build context reads are modelled; unknown keys are
ignored so that newer manifests still load. YAML numbers in string fields
(`version: 1.0`, `name: 2048`) are kept as their string form.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from subo.release import ATMO_DOT_VERSION


class Runnable(BaseModel):
    """Per-unit manifest (the contents of a `.runnable.yaml` file)."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, extra="ignore", coerce_numbers_to_str=True
    )

    name: str = ""
    namespace: str = ""
    lang: str = ""
    version: str = ""
    api_version: str = Field(default="", alias="apiVersion")
    fqfn: str = ""


class Directive(BaseModel):
    """Top-level manifest aggregating the Runnables of a project."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    identifier: str = ""
    app_version: str = Field(default="", alias="appVersion")
    atmo_version: str = Field(default="", alias="atmoVersion")
    runnables: list[Runnable] = Field(default_factory=list)
    handlers: list[dict[str, Any]] = Field(default_factory=list)
    schedules: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def default_for(cls, identifier: str, app_version: str = "v0.1.0") -> "Directive":
        """New directive pinned to the runtime this release ships with."""
        return cls(identifier=identifier, app_version=app_version, atmo_version=ATMO_DOT_VERSION)
