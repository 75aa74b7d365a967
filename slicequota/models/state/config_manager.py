"""YAML-backed settings persistence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from slicequota.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and save AppSettings as YAML.

    A missing file is not an error: defaults are returned so a fresh
    deployment runs without any configuration.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None

    def load(self, path: Path | str | None = None) -> AppSettings:
        """Load settings from YAML.

        Raises:
            ConfigLoadError: If the file cannot be read, is not valid YAML,
                is not a mapping, or fails validation.
        """
        target = Path(path) if path is not None else self.path
        if target is None or not target.exists():
            logger.info("No settings file at %s, using defaults", target)
            return AppSettings()

        try:
            raw = target.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read settings file {target}: {exc}") from exc

        try:
            data: Any = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(f"Invalid YAML in {target}: {exc}") from exc

        if data is None:
            return AppSettings()
        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"Settings file {target} must contain a mapping, got {type(data).__name__}"
            )

        try:
            settings = AppSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {target}: {exc}") from exc

        logger.debug("Loaded settings from %s", target)
        return settings

    def save(self, settings: AppSettings, path: Path | str | None = None) -> Path:
        """Write settings as YAML and return the written path.

        Raises:
            ConfigSaveError: If no path is known or the file cannot be written.
        """
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ConfigSaveError("No settings path configured")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(
                yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write settings file {target}: {exc}") from exc

        logger.debug("Saved settings to %s", target)
        return target
