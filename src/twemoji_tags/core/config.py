#!/usr/bin/env python3
"""Configuration loader that reads from config files."""
import os
from pathlib import Path
from typing import Any

import tomllib

from .exceptions import ConfigurationError

SUPPORTED_ICON_SIZES: tuple[int, ...] = (16, 36, 72)
MISSING_POLICIES: tuple[str, ...] = ("keep", "raise")
DUPLICATE_POLICIES: tuple[str, ...] = ("warn", "error", "ignore")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: dict[str, Any] = {
    "icon_size": 16,
    # Empty means the dataset bundled with the package.
    "index_path": "",
    "on_missing": "keep",
    "on_duplicate": "warn",
    "log_level": "INFO",
}


class ConfigLoader:
    """Load configuration from config files."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        if config_path is None:
            config_path = self._default_config_path()

        self.config_file = str(config_path)
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path, "rb") as f:
                try:
                    full_config = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e
            twemoji_config = full_config.get("twemoji", {})
        else:
            twemoji_config = {}

        self._config = self._merge_dicts(DEFAULT_CONFIG, twemoji_config)

        env_size = os.environ.get("TWEMOJI_ICON_SIZE")
        if env_size:
            try:
                self._config["icon_size"] = int(env_size)
            except ValueError as e:
                raise ConfigurationError(f"TWEMOJI_ICON_SIZE must be an integer, got {env_size!r}") from e

        self._validate()

    def _default_config_path(self) -> Path:
        env_path = os.environ.get("TWEMOJI_CONFIG")
        if env_path:
            return Path(env_path)
        return Path.home() / ".twemoji" / "config.toml"

    def _validate(self) -> None:
        """Reject policy values the resolver cannot act on"""
        if self.on_missing not in MISSING_POLICIES:
            raise ConfigurationError(
                f"on_missing must be one of {', '.join(MISSING_POLICIES)}, got {self.on_missing!r}"
            )
        if self.on_duplicate not in DUPLICATE_POLICIES:
            raise ConfigurationError(
                f"on_duplicate must be one of {', '.join(DUPLICATE_POLICIES)}, got {self.on_duplicate!r}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")

    def _merge_dicts(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = base.copy()
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_dicts(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value using dot notation (e.g., 'twemoji.icon_size')"""
        keys = key_path.split(".")
        if keys and keys[0] == "twemoji":
            keys = keys[1:]
        value: Any = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def icon_size(self) -> int:
        # Membership in SUPPORTED_ICON_SIZES is checked by the resolver.
        value = self.get("icon_size", 16)
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"icon_size must be an integer, got {value!r}") from e

    @property
    def index_path(self) -> Path | None:
        path = str(self.get("index_path", "") or "")
        return Path(path).expanduser() if path else None

    @property
    def on_missing(self) -> str:
        return str(self.get("on_missing", "keep"))

    @property
    def on_duplicate(self) -> str:
        return str(self.get("on_duplicate", "warn"))

    @property
    def log_level(self) -> str:
        return str(self.get("log_level", "INFO"))


# Global singleton instance
_config_loader: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Get the global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def reset_config() -> None:
    """Drop the cached global config so the next get_config() re-reads files"""
    global _config_loader
    _config_loader = None


# Re-export logging functions
from .logging import get_logger, setup_logging  # noqa: E402, F401
