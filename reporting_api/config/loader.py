"""Configuration loader for the reporting API client.

This module loads the YAML configuration files shipped in this package, or
from the directory named by REPORTING_API_CONFIG_DIR, and provides a singleton
config object for easy access throughout the package.
"""

import os
from pathlib import Path
from typing import Any, cast

import yaml

from ..logging_config import get_module_logger

logger = get_module_logger("config")

CONFIG_DIR_ENV_VAR = "REPORTING_API_CONFIG_DIR"

# YAML defaults shipped next to this module
PACKAGED_CONFIG_DIR = Path(__file__).resolve().parent


class Config:
    """Configuration manager that loads and provides access to all config files."""

    def __init__(self, config_dict: dict[str, Any] | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, config files won't be loaded from disk.
        """
        self._configs: dict[str, Any]
        self._config_dir: Path | None

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = config_dict
            self._config_dir = None
        else:
            self._configs = {}
            self._config_dir = self._find_config_dir()
            self._load_all_configs()

    def _find_config_dir(self) -> Path | None:
        """Find the config directory from the environment or the packaged defaults."""
        override = os.environ.get(CONFIG_DIR_ENV_VAR)
        if override:
            config_dir = Path(override)
        else:
            config_dir = PACKAGED_CONFIG_DIR

        if not config_dir.is_dir():
            logger.warning(f"Config directory not found at {config_dir}, using defaults")
            return None

        return config_dir

    def _load_all_configs(self):
        """Load all YAML configuration files from the config directory."""
        if self._config_dir is None:
            return

        config_files = {
            "transport": "transport_config.yaml",
        }

        for key, filename in config_files.items():
            config_path = self._config_dir / filename
            if not config_path.exists():
                logger.warning(f"Config file {filename} not found at {config_path}")
                self._configs[key] = {}
                continue

            with open(config_path, encoding="utf-8") as f:
                loaded_config = yaml.safe_load(f)

            if not isinstance(loaded_config, dict):
                logger.warning(
                    f"Config file {filename} must contain a dictionary, "
                    f"got {type(loaded_config).__name__}. Using empty config."
                )
                self._configs[key] = {}
            else:
                self._configs[key] = loaded_config

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "transport.timeout")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("transport.timeout")
            30
            >>> config.get("transport.headers.user_agent")
            "reporting-api-client/1.0"
        """
        value = self._configs

        for part in path.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    @property
    def transport(self) -> dict[str, Any]:
        """Get transport configuration."""
        # Safe cast: _load_all_configs validates all config values are dicts
        return cast(dict[str, Any], self._configs.get("transport", {}))

    def reload(self):
        """Reload all configuration files."""
        self._configs.clear()
        self._load_all_configs()


# Create a singleton instance
config = Config()
