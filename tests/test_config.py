"""Unit tests for ProjectConfig and ScaffoldSettings (kickpress.config).

Tests cover:
- ProjectConfig defaults, camelCase aliases, immutability, validation
- ScaffoldSettings defaults and from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from kickpress.config import ProjectConfig, ScaffoldSettings


# ---------------------------------------------------------------------------
# ProjectConfig
# ---------------------------------------------------------------------------


class TestProjectConfig:
    @pytest.mark.unit
    def test_defaults(self, tmp_path):
        config = ProjectConfig(project_name="demo-api", project_path=tmp_path)
        assert config.typescript is True
        assert config.database == "sqlite"
        assert config.template == "default"

    @pytest.mark.unit
    def test_path_coerced_from_string(self):
        config = ProjectConfig(project_name="demo-api", project_path="/tmp/demo-api")
        assert config.project_path == Path("/tmp/demo-api")

    @pytest.mark.unit
    def test_accepts_camel_case_aliases(self):
        config = ProjectConfig.model_validate(
            {
                "projectName": "demo-api",
                "projectPath": "/tmp/demo-api",
                "typescript": False,
                "database": "sqlite",
                "template": "default",
            }
        )
        assert config.project_name == "demo-api"
        assert config.project_path == Path("/tmp/demo-api")
        assert config.typescript is False

    @pytest.mark.unit
    def test_unknown_template_accepted(self, tmp_path):
        config = ProjectConfig(
            project_name="demo-api", project_path=tmp_path, template="anything-goes"
        )
        assert config.template == "anything-goes"

    @pytest.mark.unit
    def test_name_used_verbatim(self, tmp_path):
        config = ProjectConfig(project_name="My API!", project_path=tmp_path)
        assert config.project_name == "My API!"

    @pytest.mark.unit
    def test_is_frozen(self, tmp_path):
        config = ProjectConfig(project_name="demo-api", project_path=tmp_path)
        with pytest.raises(ValidationError):
            config.project_name = "other"

    @pytest.mark.unit
    def test_empty_name_rejected(self, tmp_path):
        with pytest.raises(ValidationError):
            ProjectConfig(project_name="", project_path=tmp_path)

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["   ", "\t", " \n "])
    def test_blank_name_rejected(self, tmp_path, name):
        with pytest.raises(ValidationError):
            ProjectConfig(project_name=name, project_path=tmp_path)

    @pytest.mark.unit
    def test_padded_name_kept_as_given(self, tmp_path):
        config = ProjectConfig(project_name=" demo-api ", project_path=tmp_path)
        assert config.project_name == " demo-api "

    @pytest.mark.unit
    def test_missing_path_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig(project_name="demo-api")


# ---------------------------------------------------------------------------
# ScaffoldSettings
# ---------------------------------------------------------------------------


class TestScaffoldSettings:
    @pytest.mark.unit
    def test_defaults(self):
        settings = ScaffoldSettings()
        assert settings.package_manager == "npm"
        assert settings.database == "sqlite"
        assert settings.template == "default"
        assert settings.typescript is True

    @pytest.mark.unit
    def test_from_env_empty(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = ScaffoldSettings.from_env()
        assert settings == ScaffoldSettings()

    @pytest.mark.unit
    def test_from_env_overrides(self):
        env = {
            "KICKPRESS_PACKAGE_MANAGER": "pnpm",
            "KICKPRESS_DATABASE": "sqlite",
            "KICKPRESS_TEMPLATE": "minimal",
            "KICKPRESS_TYPESCRIPT": "false",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = ScaffoldSettings.from_env()
        assert settings.package_manager == "pnpm"
        assert settings.template == "minimal"
        assert settings.typescript is False

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["1", "true", "yes", "TRUE"])
    def test_from_env_truthy_typescript(self, raw):
        with patch.dict(os.environ, {"KICKPRESS_TYPESCRIPT": raw}, clear=True):
            assert ScaffoldSettings.from_env().typescript is True

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["0", "no", "Off"])
    def test_from_env_falsy_typescript(self, raw):
        with patch.dict(os.environ, {"KICKPRESS_TYPESCRIPT": raw}, clear=True):
            assert ScaffoldSettings.from_env().typescript is False
