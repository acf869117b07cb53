"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration with per-environment overlays and environment
variable overrides.

Features:
    - Base configuration (config/config.yaml)
    - Environment overlay (config/{env}.yaml), env from ENV (default: sandbox)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access with typed defaults
    - Immutable UiSettings snapshot passed explicitly to components

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[3] / "config"
DEFAULT_ENV = "sandbox"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. Environment overlay YAML (config/sandbox.yaml)
        3. Base YAML (config/config.yaml)
        4. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.timeout_seconds", 10)
        10
    """

    def __init__(
        self,
        config_dir: Optional[Path] = None,
        env: Optional[str] = None,
    ) -> None:
        """
        Initialize configuration loader.

        Args:
            config_dir: Directory holding config.yaml and {env}.yaml.
                        Uses DEFAULT_CONFIG_DIR if not specified.
            env: Environment name; defaults to the ENV variable or "sandbox".
        """
        self._config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
        self.env = (env or os.getenv("ENV", DEFAULT_ENV)).lower()
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load base configuration and merge the environment overlay."""
        base = self._read_yaml(self._config_dir / "config.yaml")
        if base is None:
            logger.warning(
                f"Configuration file not found: {self._config_dir / 'config.yaml'}. "
                f"Using defaults and environment variables only."
            )
            base = {}

        overlay = self._read_yaml(self._config_dir / f"{self.env}.yaml")
        if overlay:
            logger.debug(f"Merged environment config: {self.env}")
            base = deep_merge(base, overlay)

        self._config = base

    @staticmethod
    def _read_yaml(path: Path) -> Optional[Dict[str, Any]]:
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file {path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping"
            )
        logger.debug(f"Loaded configuration from: {path}")
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found; also the type that
                     environment variable strings are converted to

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire configuration section.

        Returns:
            Section dictionary or empty dict if not found
        """
        return dict(self._config.get(section, {}))

    def reload(self) -> None:
        """Reload configuration from disk."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_dir}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                raise ConfigurationError(
                    f"Expected an integer, got {value!r}"
                ) from None
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                raise ConfigurationError(
                    f"Expected a number, got {value!r}"
                ) from None

        return value


@dataclass(frozen=True)
class UiSettings:
    """
    Immutable settings for one UI test run.

    Built once from a ConfigLoader and injected into the browser manager,
    wait engine and page objects.
    """
    base_url: str = "http://localhost:3000"
    email: str = ""
    password: str = ""
    browser: str = "chromium"
    headless: bool = True
    grid_url: str = ""
    timeout_seconds: float = 10.0
    poll_interval: float = 0.5
    batch_timeout: float = 10.0
    next_page_timeout: float = 5.0
    log_level: str = "INFO"
    log_file: str = ""
    screenshot_dir: str = "test-results/screenshots"

    def __post_init__(self) -> None:
        for name in ("timeout_seconds", "batch_timeout", "next_page_timeout"):
            if not getattr(self, name) > 0:
                raise ConfigurationError(f"{name} must be > 0, got {getattr(self, name)}")
        if not self.poll_interval > 0:
            raise ConfigurationError(f"poll_interval must be > 0, got {self.poll_interval}")

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "UiSettings":
        """Build settings from configuration, field defaults filling the gaps."""
        return cls(
            base_url=config.get("ui.base_url", cls.base_url),
            email=config.get("ui.email", cls.email),
            password=config.get("ui.password", cls.password),
            browser=config.get("browser.name", cls.browser),
            headless=config.get("browser.headless", cls.headless),
            grid_url=config.get("browser.grid_url", cls.grid_url),
            timeout_seconds=float(config.get("wait.timeout_seconds", cls.timeout_seconds)),
            poll_interval=float(config.get("wait.poll_interval", cls.poll_interval)),
            batch_timeout=float(config.get("pagination.batch_timeout", cls.batch_timeout)),
            next_page_timeout=float(
                config.get("pagination.next_page_timeout", cls.next_page_timeout)
            ),
            log_level=config.get("logging.level", cls.log_level),
            log_file=config.get("logging.file", cls.log_file),
            screenshot_dir=config.get("reporting.screenshot_dir", cls.screenshot_dir),
        )


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UiSettings",
    "deep_merge",
]
