"""
Configuration utility for the layout engine.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "viewport": {
        "width": 800,
        "height": 600
    },
    "logging": {
        "console_level": "INFO",
        "file_level": "DEBUG",
        "file": None
    }
}


class Config:
    """Configuration manager backed by an optional JSON file."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to a JSON config file; defaults are used when
                it is None or the file does not exist
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}

        self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """Load configuration from file, layering it over the defaults."""
        self._set_defaults()

        if not self.config_path:
            return

        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return

        if not isinstance(loaded, dict):
            logger.error(f"Configuration in {self.config_path} is not a JSON object, using defaults")
            return

        _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self) -> None:
        """Save configuration to file."""
        if not self.config_path:
            logger.warning("No configuration path set, nothing saved")
            return

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'viewport.width')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        parts = key.split('.')
        config = self.config

        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                return default
            config = config[part]

        return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots)
            value: Configuration value
        """
        parts = key.split('.')
        config = self.config

        for part in parts[:-1]:
            if not isinstance(config.get(part), dict):
                config[part] = {}
            config = config[part]

        config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Returns:
            bool: True if key was removed
        """
        parts = key.split('.')
        config = self.config

        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                return False
            config = config[part]

        if parts[-1] in config:
            del config[parts[-1]]
            return True
        return False

    def get_all(self) -> Dict[str, Any]:
        return copy.deepcopy(self.config)

    def viewport(self) -> 'Dimensions':
        """
        Build the initial containing block from the viewport settings.

        Returns:
            Dimensions with only the content width and height set
        """
        from ..layout import Dimensions

        viewport = Dimensions()
        viewport.content.width = float(self.get('viewport.width', 800))
        viewport.content.height = float(self.get('viewport.height', 600))
        return viewport

    def _set_defaults(self) -> None:
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        logger.debug("Default configuration set")


def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """Recursively merge ``source`` into ``target``."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value
