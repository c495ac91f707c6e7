"""Unit tests for AppSettings and ConfigManager.

This module tests:
- AppSettings defaults and validation
- default_view fallback for unknown names
- ConfigManager load/save round trip and error handling
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError as PydanticValidationError

from ecsvoyager.constants.enums import View
from ecsvoyager.models.state.app_settings import AppSettings, ConfigLoadError, ConfigSaveError
from ecsvoyager.models.state.config_manager import ConfigManager

# =============================================================================
# AppSettings Tests
# =============================================================================


class TestAppSettings:
    """Test AppSettings defaults and validation."""

    def test_defaults(self) -> None:
        """Test default settings values."""
        settings = AppSettings()
        assert settings.auto_refresh is True
        assert settings.refresh_interval == 30
        assert settings.default_view == "clusters"
        assert settings.read_only is False
        assert settings.show_charts is True
        assert settings.show_alarms is True
        assert settings.export_path == "./exports"
        assert settings.log_viewport_height == 20

    def test_refresh_interval_minimum(self) -> None:
        """Test that intervals below 5 seconds are rejected."""
        with pytest.raises(PydanticValidationError):
            AppSettings(refresh_interval=2)

    def test_unknown_default_view_falls_back(self) -> None:
        """Test that an unknown startup view becomes the cluster list."""
        settings = AppSettings(default_view="dashboard")
        assert settings.initial_view is View.CLUSTER_LIST

    def test_known_default_view(self) -> None:
        """Test that list views are accepted as startup views."""
        assert AppSettings(default_view="task_definitions").initial_view is View.TASK_DEFINITION_LIST

    def test_detail_view_not_a_startup_view(self) -> None:
        """Test that non-list views cannot be the startup view."""
        assert AppSettings(default_view="logs").initial_view is View.CLUSTER_LIST


# =============================================================================
# ConfigManager Tests
# =============================================================================


class TestConfigManager:
    """Test ConfigManager persistence."""

    def test_default_path(self) -> None:
        """Test the default settings location."""
        path = ConfigManager.default_path()
        assert path.name == "config.yaml"
        assert path.parent.name == ".ecs-voyager"

    def test_missing_file_writes_defaults(self, tmp_path: Path) -> None:
        """Test that loading a missing file creates it with defaults."""
        path = tmp_path / "nested" / "config.yaml"
        settings = ConfigManager.load(path)
        assert settings == AppSettings()
        assert path.exists()

    def test_round_trip(self, tmp_path: Path) -> None:
        """Test that saved settings load back unchanged."""
        path = tmp_path / "config.yaml"
        original = AppSettings(profile="staging", region="eu-west-1", refresh_interval=60, read_only=True)
        ConfigManager.save(original, path)
        assert ConfigManager.load(path) == original

    def test_partial_file(self, tmp_path: Path) -> None:
        """Test that missing keys take their defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("region: us-west-2\n", encoding="utf-8")
        settings = ConfigManager.load(path)
        assert settings.region == "us-west-2"
        assert settings.auto_refresh is True

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that unparsable YAML raises ConfigLoadError."""
        path = tmp_path / "config.yaml"
        path.write_text("region: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Test that out-of-range values raise ConfigLoadError."""
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"refresh_interval": 1}), encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test that a list document raises ConfigLoadError."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)

    def test_save_failure(self, tmp_path: Path) -> None:
        """Test that an unwritable location raises ConfigSaveError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file", encoding="utf-8")
        with pytest.raises(ConfigSaveError):
            ConfigManager.save(AppSettings(), blocker / "config.yaml")
