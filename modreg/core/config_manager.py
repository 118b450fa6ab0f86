import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml
import yaml

from ..api.exceptions import ConfigurationError
from .config.schemas import ModregSettings

SUPPORTED_EXTENSIONS = (".toml", ".yml", ".yaml", ".json")


def read_config_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a TOML, YAML or JSON file into a dictionary.

    Raises:
        ConfigurationError: If the extension is not supported.
    """
    _, ext = os.path.splitext(str(file_path))
    with open(file_path, "r", encoding="utf-8") as f:
        if ext == ".toml":
            data = toml.load(f)
        elif ext in (".yml", ".yaml"):
            data = yaml.safe_load(f)
        elif ext == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported config file extension: {ext} for file {file_path}"
            )
    return data or {}


def write_config_file(file_path: Union[str, Path], data: Dict[str, Any]) -> None:
    """Write a dictionary as TOML, YAML or JSON depending on the extension."""
    _, ext = os.path.splitext(str(file_path))
    if ext not in SUPPORTED_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported config file extension: {ext} for file {file_path}"
        )
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        if ext == ".toml":
            toml.dump(data, f)
        elif ext in (".yml", ".yaml"):
            yaml.safe_dump(data, f, sort_keys=False)
        else:
            json.dump(data, f, indent=2)


class ConfigManager:
    """Handles loading and accessing modreg settings from TOML, YAML or JSON files."""

    def __init__(
        self,
        config_file_path: Optional[str] = None,
        config_dir: str = "config",
        config_name: str = "modreg",
    ):
        """
        Initialize ConfigManager.

        Args:
            config_file_path: Direct path to a config file.
            config_dir: Directory containing config files (used if config_file_path is None).
            config_name: Base name of config file (without extension, used if config_file_path is None).
        """
        self.config_file_path = config_file_path
        self.config_dir = config_dir
        self.config_name = config_name
        self.config_data: Dict[str, Any] = {}
        self.logger = logging.getLogger(__name__)

    def load_config(self) -> None:
        """Load configuration from the specified file path or search in the config directory."""
        if self.config_file_path and os.path.exists(self.config_file_path):
            self.config_data = read_config_file(self.config_file_path)
            self.logger.info(f"Loaded settings from {self.config_file_path}")
            return

        candidates = [
            os.path.join(self.config_dir, f"{self.config_name}{ext}")
            for ext in SUPPORTED_EXTENSIONS
        ]
        for path in candidates:
            if os.path.exists(path):
                self.config_data = read_config_file(path)
                self.logger.info(f"Loaded settings from {path}")
                return

        if self.config_file_path:
            candidates.insert(0, self.config_file_path)
        raise FileNotFoundError(
            f"No config file found. Searched at: {', '.join(candidates)}"
        )

    def get_param(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Get configuration parameter by dot notation key.

        Args:
            key: Dot notation key (e.g. 'logging.level')
            default: Default value if key not found

        Returns:
            The configuration value or default if not found
        """
        current = self.config_data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return default
            current = current[k]
        return current

    def set_param(self, key: str, value: Any) -> None:
        """
        Set a configuration parameter by dot notation key.

        Args:
            key: Dot notation key (e.g. 'logging.level')
            value: Value to set for the key
        """
        keys = key.split(".")
        current = self.config_data
        for k in keys[:-1]:
            current = current.setdefault(k, {})
        current[keys[-1]] = value

    def settings(self) -> ModregSettings:
        """Validate the loaded data against the settings schema.

        Raises:
            ConfigurationError: If the data does not match the schema.
        """
        try:
            return ModregSettings.model_validate(self.config_data)
        except ValueError as e:
            raise ConfigurationError(f"Invalid modreg settings: {e}") from e
