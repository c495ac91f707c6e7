"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from ecsvoyager.constants.defaults import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from ecsvoyager.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and save AppSettings at ``~/.ecs-voyager/config.yaml``."""

    @staticmethod
    def default_path() -> Path:
        return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, writing a default file when none exists.

        Raises:
            ConfigLoadError: If the file cannot be read, parsed or validated.
        """
        config_path = path or cls.default_path()
        if not config_path.exists():
            settings = AppSettings()
            try:
                cls.save(settings, config_path)
            except ConfigSaveError as exc:
                logger.warning("Could not write default settings: %s", exc)
            return settings

        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Failed to read {config_path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Expected a mapping in {config_path}")

        try:
            settings = AppSettings.model_validate(raw)
        except PydanticValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc

        logger.info("Loaded settings from %s", config_path)
        return settings

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Persist settings as YAML.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        config_path = path or cls.default_path()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(
                yaml.safe_dump(settings.model_dump(), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigSaveError(f"Failed to write {config_path}: {exc}") from exc
        return config_path
