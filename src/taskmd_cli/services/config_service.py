"""Configuration service for taskmd.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Environment overrides (TASKMD_ROOT, TASKMD_LANGUAGE)
- Reading and writing individual settings by dotted key
- Loading the optional template used for new task documents
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import pydantic
from platformdirs import user_config_dir

from taskmd_cli.models import TaskIOError, ValidationError
from taskmd_cli.models.config_models import AppConfig
from taskmd_cli.utils.logger import get_logger

ENV_ROOT = "TASKMD_ROOT"
ENV_LANGUAGE = "TASKMD_LANGUAGE"


class ConfigService:
    """Service for managing application configuration.

    The file on disk only ever holds what the user set; environment overrides
    are applied when values are resolved, never saved.
    """

    def __init__(self):
        """Initialize the config service."""
        self.config_dir = Path(user_config_dir("taskmd_cli"))
        self.config_path = self.config_dir / "config.json"
        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from config.json, falling back to defaults."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run: defaults are used until something is saved
            self._config = AppConfig()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to config.json."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e
        get_logger("config").info("config saved: %s", self.config_path)

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults and persist them."""
        self._config = AppConfig()
        if self.config_path.exists():
            self.config_path.unlink()
        self.save_config()
        return self._config

    # -- dotted key access ----------------------------------------------

    def list_values(self) -> dict[str, Any]:
        """Flatten the configuration into ``section.key`` entries."""
        values: dict[str, Any] = {}
        for section, fields in self.config.model_dump().items():
            for key, value in fields.items():
                values[f"{section}.{key}"] = value
        return values

    def get_value(self, key: str) -> Any:
        """Get a setting by dotted key, e.g. ``storage.root``.

        Raises:
            ValidationError: If the key does not exist
        """
        values = self.list_values()
        if key not in values:
            raise ValidationError(f"Unknown config key: {key}")
        return values[key]

    def set_value(self, key: str, value: Any) -> Any:
        """Set a setting by dotted key and save the configuration.

        The value is validated by the config models, so ``"3001"`` becomes
        an int for ``server.port``.

        Raises:
            ValidationError: If the key does not exist or the value is invalid
        """
        section, _, field = key.partition(".")
        data = self.config.model_dump()
        if section not in data or field not in data[section]:
            raise ValidationError(f"Unknown config key: {key}")

        data[section][field] = value
        try:
            new_config = AppConfig.model_validate(data)
        except pydantic.ValidationError as e:
            first = e.errors()[0]
            raise ValidationError(f"Invalid value for {key}: {first['msg']}") from e

        self._config = new_config
        self.save_config()
        return self.get_value(key)

    # -- resolved settings ----------------------------------------------

    @property
    def language(self) -> str:
        """Message language, honouring TASKMD_LANGUAGE."""
        return os.environ.get(ENV_LANGUAGE) or self.config.ui.language

    def output_format(self, requested: str | None = None) -> str:
        """Output format from the command line, else ``output.format``."""
        return requested or self.config.output.format

    def resolve_root(self) -> Path:
        """Task tree root, honouring TASKMD_ROOT.

        Relative roots are resolved against the current working directory.
        """
        root = os.environ.get(ENV_ROOT) or self.config.storage.root
        return Path(root).expanduser().resolve()

    def load_template(self) -> str | None:
        """Read the template for new task documents, if one is configured.

        Raises:
            TaskIOError: If the configured template file cannot be read
        """
        template = self.config.storage.template
        if not template:
            return None
        path = Path(template).expanduser()
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise TaskIOError(f"Cannot read template {path}: {e}") from e


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
