"""Shared pytest fixtures for the Kickpress test suite.

Provides reusable fixtures for:
- Temporary project directories
- TypeScript and JavaScript ``ProjectConfig`` instances
- Resolved language variants and package manager profiles
"""

from __future__ import annotations

from pathlib import Path

import pytest

from kickpress.config import ProjectConfig
from kickpress.scaffolder.variants import (
    LANGUAGE_VARIANTS,
    LanguageMode,
    LanguageVariant,
)

SUPPORTED_PACKAGE_MANAGERS = ("npm", "pnpm", "yarn")


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Destination directory for a generated project (not created yet)."""
    return tmp_path / "demo-api"


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def ts_config(tmp_project_dir: Path) -> ProjectConfig:
    """TypeScript project configuration."""
    return ProjectConfig(
        project_name="demo-api",
        project_path=tmp_project_dir,
        typescript=True,
        database="sqlite",
        template="default",
    )


@pytest.fixture
def js_config(tmp_project_dir: Path) -> ProjectConfig:
    """JavaScript project configuration."""
    return ProjectConfig(
        project_name="demo-api",
        project_path=tmp_project_dir,
        typescript=False,
        database="sqlite",
        template="default",
    )


@pytest.fixture(params=[True, False], ids=["typescript", "javascript"])
def any_config(request, tmp_project_dir: Path) -> ProjectConfig:
    """Project configuration parametrized over both language modes."""
    return ProjectConfig(
        project_name="demo-api",
        project_path=tmp_project_dir,
        typescript=request.param,
    )


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@pytest.fixture
def ts_variant() -> LanguageVariant:
    return LANGUAGE_VARIANTS[LanguageMode.TYPESCRIPT]


@pytest.fixture
def js_variant() -> LanguageVariant:
    return LANGUAGE_VARIANTS[LanguageMode.JAVASCRIPT]


@pytest.fixture(params=SUPPORTED_PACKAGE_MANAGERS)
def package_manager(request) -> str:
    """Each supported package manager name."""
    return request.param
