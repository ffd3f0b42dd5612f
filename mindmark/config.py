"""
Configuration management for Mindmark.

This module handles loading and accessing configuration values from config.yaml.
It provides a centralized way to manage conversion defaults, paths, batch
settings and logging without changing code.
"""

import yaml
from pathlib import Path
from typing import Any, Dict
import logging


class ConfigManager:
    """
    Manages configuration loading and access for Mindmark.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file, falling back to defaults."""
        defaults = self._get_default_config()

        if not self.config_path.exists():
            logging.debug(f"Configuration file not found: {self.config_path}; using defaults")
            self._config = defaults
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration: {e}")
            self._config = defaults
            return

        if not isinstance(loaded, dict):
            logging.error(f"Ignoring configuration in {self.config_path}: top level must be a mapping")
            self._config = defaults
            return

        self._config = _merge(defaults, loaded)
        logging.info(f"Configuration loaded from {self.config_path}")

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "conversion": {
                "default_mode": "heading",
                "source_extension": ".xmind",
                "output_extension": ".md"
            },
            "paths": {
                "input_dir": "result/output",
                "output_dir": "result/markdown",
                "log_file": "combined.log",
                "error_log_file": "error.log"
            },
            "batch": {
                "max_workers": 5
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "batch.max_workers")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("conversion.default_mode")  # Returns "heading"
            config.get("paths.output_dir")  # Returns "result/markdown"
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def default_mode(self) -> str:
        """Get the render mode used when none is chosen."""
        return self.get("conversion.default_mode", "heading")

    @property
    def source_extension(self) -> str:
        """Get the extension of convertible archives."""
        return self.get("conversion.source_extension", ".xmind")

    @property
    def output_extension(self) -> str:
        """Get the extension of generated Markdown files."""
        return self.get("conversion.output_extension", ".md")

    @property
    def input_directory(self) -> str:
        """Get the directory offered when prompting for input."""
        return self.get("paths.input_dir", "result/output")

    @property
    def output_directory(self) -> str:
        """Get the directory Markdown files are written to."""
        return self.get("paths.output_dir", "result/markdown")

    @property
    def log_filename(self) -> str:
        """Get log file name."""
        return self.get("paths.log_file", "combined.log")

    @property
    def error_log_filename(self) -> str:
        """Get error-only log file name."""
        return self.get("paths.error_log_file", "error.log")

    @property
    def max_workers(self) -> int:
        """Get the maximum number of files converted at once."""
        return int(self.get("batch.max_workers", 5))


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
