"""
Configuration manager for centralized configuration handling.

This module provides a manager for loading validator configuration
from YAML files, with support for different environments.
"""

from typing import Dict, Any, Optional
import os
import yaml
from pathlib import Path

from ...shared.exceptions.validation_errors import ConfigurationError
from .config_validator import ConfigValidator
from .environment_config import EnvironmentConfig


class ConfigManager:
    """
    Manager for validator configurations.

    Loads ``base.yaml`` and merges the optional environment file
    ``<environment>.yaml`` on top of it.
    """

    def __init__(
        self,
        config_dir: str = "config",
        environment: Optional[str] = None
    ):
        """
        Initialize the manager.

        Args:
            config_dir: Configuration directory path
            environment: Optional environment name
        """
        self.config_dir = Path(config_dir)
        self.environment = environment or os.getenv("PARAMGUARD_ENV", "development")
        self.validator = ConfigValidator()
        self._config: Optional[EnvironmentConfig] = None

    def load_config(self) -> EnvironmentConfig:
        """
        Load configuration from files.

        Returns:
            EnvironmentConfig: Loaded configuration

        Raises:
            FileNotFoundError: If base.yaml is not found
            ConfigurationError: If configuration is invalid
        """
        if self._config is not None:
            return self._config

        base_config = self._load_yaml("base.yaml")

        env_file = self.config_dir / f"{self.environment}.yaml"
        env_config = self._load_yaml(env_file.name) if env_file.exists() else {}

        config = self._merge_configs(base_config, env_config)
        self.validator.validate_config(config)

        environment_config = EnvironmentConfig(config)

        # Environment variable overrides are validated too
        self.validator.validate_config(environment_config.config)
        self._config = environment_config

        return self._config

    def get_config(self) -> EnvironmentConfig:
        """
        Get the current configuration.

        Returns:
            EnvironmentConfig: Current configuration
        """
        return self.load_config()

    def get_messages_config(self) -> Dict[str, str]:
        """
        Get default message templates.

        Returns:
            Dict[str, str]: Messages configuration
        """
        return self.get_config().get_default_messages()

    def get_logging_config(self) -> Dict[str, Any]:
        """
        Get logging configuration.

        Returns:
            Dict[str, Any]: Logging configuration
        """
        return self.get_config().get("logging", {})

    def _load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Args:
            filename: Configuration file name

        Returns:
            Dict[str, Any]: Loaded configuration

        Raises:
            FileNotFoundError: If file is not found
            ConfigurationError: If the file is not valid YAML
        """
        file_path = self.config_dir / filename
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {file_path}")
        return loaded

    def _merge_configs(
        self,
        base: Dict[str, Any],
        override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Merge two configurations.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Dict[str, Any]: Merged configuration
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result and
                isinstance(result[key], dict) and
                isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result
