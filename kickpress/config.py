"""Kickpress configuration.

Typed configuration for a single scaffolding run. ``ProjectConfig`` is the
contract consumed by the scaffolder; ``ScaffoldSettings`` carries the
environment-driven defaults the command line falls back to.  Both use
Pydantic v2 models so they are validated at construction time.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_FALSY = ("0", "false", "no", "off")


class ProjectConfig(BaseModel):
    """Immutable description of the project to scaffold.

    Accepts both snake_case field names and their camelCase aliases
    (``projectName``, ``projectPath``) so a config dumped by other tooling can
    be validated directly.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    project_name: str = Field(
        ..., min_length=1, description="Project name, used verbatim in package.json and README"
    )
    project_path: Path = Field(..., description="Destination directory of the generated project")
    typescript: bool = Field(default=True, description="TypeScript (True) or JavaScript (False) mode")
    database: str = Field(default="sqlite", description="Database identifier for the env file")
    template: str = Field(default="default", description="Reserved template selector (ignored)")

    @field_validator("project_name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be blank")
        return value


class ScaffoldSettings(BaseModel):
    """Defaults applied by the command line when an option is omitted."""

    package_manager: str = Field(default="npm")
    database: str = Field(default="sqlite")
    template: str = Field(default="default")
    typescript: bool = Field(default=True)

    @classmethod
    def from_env(cls) -> "ScaffoldSettings":
        """Build ``ScaffoldSettings`` from environment variables.

        Recognised variables (all optional):
            KICKPRESS_PACKAGE_MANAGER, KICKPRESS_DATABASE, KICKPRESS_TEMPLATE,
            KICKPRESS_TYPESCRIPT (``0``/``false``/``no``/``off`` selects
            JavaScript).
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("KICKPRESS_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["KICKPRESS_PACKAGE_MANAGER"].strip()
        if os.environ.get("KICKPRESS_DATABASE"):
            kwargs["database"] = os.environ["KICKPRESS_DATABASE"].strip()
        if os.environ.get("KICKPRESS_TEMPLATE"):
            kwargs["template"] = os.environ["KICKPRESS_TEMPLATE"].strip()
        if os.environ.get("KICKPRESS_TYPESCRIPT"):
            kwargs["typescript"] = os.environ["KICKPRESS_TYPESCRIPT"].strip().lower() not in _FALSY

        return cls(**kwargs)
