"""
Configuration management with YAML and environment variable support.

Environment variables take precedence over YAML configuration.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from hijri_calendar.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "HIJRI_"

# Default configuration paths
DEFAULT_CONFIG_PATHS = [
    Path("hijri.yaml"),
    Path("hijri.yml"),
    Path("config/hijri.yaml"),
    Path.home() / ".hijri" / "config.yaml",
]

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """
    YAML + environment variable integrated configuration management.

    Environment variables take precedence over YAML values.
    Supports nested key access with dot notation (e.g., "output.format").

    Usage:
        config = Config()
        fmt = config.output_format
        level = config.get("logging.level", default="WARNING")

    Example hijri.yaml:
        logging:
          level: INFO
        output:
          format: json
    """

    def __init__(self, config_path: Path | str | None = None, env_file: Path | str | None = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file. If None, searches default locations.
            env_file: Path to .env file. If None, searches current directory.
        """
        env_path = Path(env_file) if env_file else None
        load_dotenv(dotenv_path=env_path, override=False)

        self._config: dict[str, Any] = {}
        self._config_path: Path | None = None

        self._load_yaml(config_path)

        logger.debug("Configuration initialized from: %s", self._config_path or "defaults only")

    def _load_yaml(self, config_path: Path | str | None = None) -> None:
        """Load YAML configuration file."""
        if config_path:
            path = Path(config_path)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")
            self._config_path = path
        else:
            for default_path in DEFAULT_CONFIG_PATHS:
                if default_path.exists():
                    self._config_path = default_path
                    break

        if self._config_path:
            try:
                with self._config_path.open("r", encoding="utf-8") as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self._config_path}: {e}") from e
            except OSError as e:
                raise ConfigurationError(f"Failed to read {self._config_path}: {e}") from e

            if loaded is not None and not isinstance(loaded, dict):
                raise ConfigurationError(
                    f"Configuration root must be a mapping: {self._config_path}",
                    details={"type": type(loaded).__name__},
                )
            if loaded:
                self._config = loaded
            logger.info("Loaded configuration from: %s", self._config_path)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Environment variable mapping:
            "output.format" -> HIJRI_OUTPUT_FORMAT

        Args:
            key: Configuration key (dot notation supported)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        env_key = f"{ENV_PREFIX}{key.upper().replace('.', '_')}"
        env_value = os.getenv(env_key)

        if env_value is not None:
            value = self._parse_env_value(env_value)
            logger.debug("Config %s from env: %s", key, value)
            return value

        value = self._get_nested(key)
        if value is not None:
            logger.debug("Config %s from yaml: %s", key, value)
            return value

        return default

    def _get_nested(self, key: str) -> Any:
        """Get nested value from config dict using dot notation."""
        value: Any = self._config

        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                return None
            if value is None:
                return None

        return value

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """Parse environment variable string to appropriate type."""
        if value.lower() in ("true", "yes", "1", "on"):
            return True
        if value.lower() in ("false", "no", "0", "off"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value

    @property
    def log_level(self) -> str:
        """Logging level name for the CLI (default WARNING)."""
        level = str(self.get("logging.level", default="WARNING")).upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {level}", details={"allowed": list(LOG_LEVELS)}
            )
        return level

    @property
    def output_format(self) -> str:
        """CLI output format, "text" or "json"."""
        fmt = str(self.get("output.format", default="text")).lower()
        if fmt not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format: {fmt}", details={"allowed": list(OUTPUT_FORMATS)}
            )
        return fmt

    @property
    def path(self) -> Path | None:
        """YAML file the configuration was loaded from, if any."""
        return self._config_path

    def __repr__(self) -> str:
        return f"Config(path={self._config_path})"
