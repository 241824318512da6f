#!/usr/bin/env python3
"""
Configuration management for the number game.

This module provides a GameConfig class for loading, managing, and accessing
configuration data from JSON files, with environment variable overrides
(usually populated from a .env file by the entry point).
"""

import copy
import os
from typing import Any, Dict, List, Optional, Tuple

from numguess.utils.json_utils import load_json, save_json
from numguess.utils.logging_config import get_logger

# Get the module logger
logger = get_logger("SYSTEM")

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Default configuration, per domain
DEFAULT_CONFIGS: Dict[str, Dict[str, Any]] = {
    "game": {
        "min_number": 1,
        "max_number": 10,
        "autostart": True,
    },
    "system": {
        "save_path": os.path.join("saves", "savegame.json"),
        "log_level": "INFO",
        "log_to_file": True,
        "log_dir": "logs",
    },
}

# Environment variable -> (key path, converter)
ENV_OVERRIDES: Dict[str, Tuple[str, Any]] = {
    "NUMGUESS_MIN_NUMBER": ("game.min_number", int),
    "NUMGUESS_MAX_NUMBER": ("game.max_number", int),
    "NUMGUESS_SAVE_PATH": ("system.save_path", str),
    "NUMGUESS_LOG_LEVEL": ("system.log_level", str),
}


class GameConfig:
    """
    Game configuration manager.

    Each domain ("game", "system") lives in its own JSON file inside the
    configuration directory. Missing files are created from the defaults.
    Values are read with dot notation, e.g. config.get("game.max_number").
    """

    # Default configuration directory relative to project root
    _CONFIG_DIR = "config"

    # Configuration files, mapping domain to file name within the config directory
    _DEFAULT_CONFIG_FILES = {
        "game": "game_config.json",
        "system": "system_config.json",
    }

    def __init__(self, config_dir: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        """
        Initialize the configuration.

        Args:
            config_dir: Directory holding the JSON files. Defaults to
                $NUMGUESS_CONFIG_DIR, then <project root>/config, then ./config.
            environ: Environment mapping used for overrides. Defaults to os.environ.
        """
        self._environ = os.environ if environ is None else environ
        config_dir = config_dir or self._environ.get("NUMGUESS_CONFIG_DIR")
        self._config_dir_abs = os.path.abspath(config_dir or self._default_config_dir())

        self._config_data: Dict[str, Dict[str, Any]] = {}

        self._load_all_configs()
        self._apply_env_overrides()

    @classmethod
    def _default_config_dir(cls) -> str:
        """The checkout's config directory, or ./config when installed without one."""
        checkout_dir = os.path.join(PROJECT_ROOT, cls._CONFIG_DIR)
        if os.path.isdir(checkout_dir):
            return checkout_dir
        return os.path.join(os.getcwd(), cls._CONFIG_DIR)

    @property
    def config_dir(self) -> str:
        """Absolute path of the configuration directory."""
        return self._config_dir_abs

    def _load_all_configs(self):
        """Load all configuration files."""
        for domain, filename in self._DEFAULT_CONFIG_FILES.items():
            self._load_config(domain, filename)

    def _load_config(self, domain: str, filename: str):
        """
        Load a configuration file for the specified domain.

        Values found in the file are layered over the defaults, so a partial
        file still yields a complete domain.
        """
        file_path = os.path.join(self._config_dir_abs, filename)
        self._config_data[domain] = copy.deepcopy(DEFAULT_CONFIGS[domain])

        if not os.path.exists(file_path):
            logger.warning(f"Config file for '{domain}' not found. Creating default: {file_path}")
            self._create_default_config(domain, file_path)
            return

        try:
            loaded_data = load_json(file_path)
        except Exception as e:
            logger.error(f"Error loading configuration for domain '{domain}' from {file_path}: {e}")
            return

        if not isinstance(loaded_data, dict):
            logger.warning(f"Configuration for domain '{domain}' is not a JSON object. Using defaults.")
            return

        self._config_data[domain].update(loaded_data)
        logger.debug(f"Loaded configuration for domain '{domain}' from {file_path}")

    def _create_default_config(self, domain: str, file_path: str):
        """Write the default configuration for a domain to file_path."""
        try:
            save_json(DEFAULT_CONFIGS[domain], file_path)
            logger.info(f"Created default configuration for {domain} at {file_path}")
        except Exception as e:
            # Defaults are already in memory
            logger.error(f"Error creating default configuration for {domain} at {file_path}: {e}")

    def _apply_env_overrides(self):
        """Apply NUMGUESS_* environment variables on top of the file values."""
        for env_name, (key_path, convert) in ENV_OVERRIDES.items():
            raw = self._environ.get(env_name)
            if raw is None or raw == "":
                continue
            try:
                value = convert(raw)
            except ValueError:
                logger.warning(f"Ignoring {env_name}={raw!r}: not a valid value for {key_path}")
                continue
            self.set(key_path, value)
            logger.debug(f"Environment override {env_name} -> {key_path}={value!r}")

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: The path to the configuration value (e.g., "game.min_number").
            default: The default value to return if the key is not found.
        """
        parts = key_path.split(".")
        current: Any = self._config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """
        Set a configuration value in memory using dot notation.

        Nothing is written back to disk; use save() for that.
        """
        parts = key_path.split(".")
        current = self._config_data
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def save(self, domain: str) -> bool:
        """
        Write a domain's current values to its JSON file.

        Returns:
            True if the file was written, False otherwise.
        """
        if domain not in self._DEFAULT_CONFIG_FILES:
            logger.error(f"Cannot save configuration for unknown domain '{domain}'.")
            return False

        file_path = os.path.join(self._config_dir_abs, self._DEFAULT_CONFIG_FILES[domain])
        try:
            save_json(self._config_data[domain], file_path)
            logger.info(f"Saved configuration for domain '{domain}' to {file_path}")
            return True
        except Exception as e:
            logger.error(f"Error saving configuration for domain '{domain}' to {file_path}: {e}")
            return False

    def get_all(self, domain: Optional[str] = None) -> Dict[str, Any]:
        """
        Get all configuration values for a domain, or all domains.

        Returns a copy; an unknown domain yields an empty dict.
        """
        if domain is None:
            return copy.deepcopy(self._config_data)

        if domain not in self._config_data:
            logger.warning(f"Domain '{domain}' not found in configuration")
            return {}

        return copy.deepcopy(self._config_data[domain])

    def reload(self) -> None:
        """Reload configuration from files and re-apply environment overrides."""
        logger.info("Reloading configuration")
        self._load_all_configs()
        self._apply_env_overrides()

    def validate(self) -> Tuple[bool, List[str]]:
        """
        Validate the configuration.

        Returns:
            A tuple of (is_valid, error_messages).
        """
        errors = []

        min_number = self.get("game.min_number")
        max_number = self.get("game.max_number")
        if not _is_int(min_number) or not _is_int(max_number):
            errors.append(f"game.min_number and game.max_number must be integers (got {min_number!r}, {max_number!r}).")
        elif min_number >= max_number:
            errors.append(f"game.min_number ({min_number}) must be less than game.max_number ({max_number}).")

        save_path = self.get("system.save_path")
        if not isinstance(save_path, str) or not save_path.strip():
            errors.append("system.save_path must be a non-empty string.")

        for error in errors:
            logger.error(error)
        if not errors:
            logger.debug("Configuration validation passed.")

        return not errors, errors


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
