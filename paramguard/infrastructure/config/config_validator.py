"""
Configuration validator for validating configuration values.

This module provides a validator for ensuring configuration values
meet the required format and constraints.
"""

from typing import Dict, Any, List

from ...core.entities.validation_entity import MessageMergeMode
from ...shared.exceptions.validation_errors import ConfigurationError


class ConfigValidator:
    """
    Validator for configuration values.

    This class validates configuration values to ensure they meet
    the required format and constraints.
    """

    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    def __init__(self):
        """Initialize the validator."""
        self.errors: List[str] = []

    def validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.errors = []

        if not isinstance(config, dict):
            raise ConfigurationError("Configuration must be a mapping")

        if "validator" in config:
            self._validate_validator_config(config["validator"])

        if "messages" in config:
            self._validate_messages_config(config["messages"])

        if "logging" in config:
            self._validate_logging_config(config["logging"])

        if self.errors:
            raise ConfigurationError("\n".join(self.errors))

    def _validate_validator_config(self, config: Any) -> None:
        """
        Validate validator configuration.

        Args:
            config: Validator configuration
        """
        if not isinstance(config, dict):
            self.errors.append("Validator configuration must be a mapping")
            return

        if "stop_on_field_message" in config:
            if not isinstance(config["stop_on_field_message"], bool):
                self.errors.append("Validator stop_on_field_message must be a boolean")

        if "message_mode" in config:
            valid_modes = [mode.value for mode in MessageMergeMode]
            if config["message_mode"] not in valid_modes:
                self.errors.append(
                    f"Validator message_mode must be one of: {', '.join(valid_modes)}"
                )

    def _validate_messages_config(self, config: Any) -> None:
        """
        Validate default message templates.

        Args:
            config: Identifier to template mapping
        """
        if config is None:
            return

        if not isinstance(config, dict):
            self.errors.append("Messages must be a mapping of rule identifiers to templates")
            return

        for identifier, template in config.items():
            if not isinstance(identifier, str) or not identifier:
                self.errors.append(f"Message identifier must be a non-empty string: {identifier!r}")
            if not isinstance(template, str):
                self.errors.append(f"Message template for '{identifier}' must be a string")

    def _validate_logging_config(self, config: Any) -> None:
        """
        Validate logging configuration.

        Args:
            config: Logging configuration
        """
        if not isinstance(config, dict):
            self.errors.append("Logging configuration must be a mapping")
            return

        if "level" in config:
            level = config["level"]
            if not isinstance(level, str) or level.upper() not in self.VALID_LOG_LEVELS:
                self.errors.append(
                    f"Logging level must be one of: {', '.join(self.VALID_LOG_LEVELS)}"
                )

        if "name" in config:
            name = config["name"]
            if not isinstance(name, str) or not name:
                self.errors.append("Logging name must be a non-empty string")
