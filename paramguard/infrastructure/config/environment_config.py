"""
Environment configuration for environment-specific settings.

This module wraps the merged configuration and applies overrides
from environment variables.
"""

from typing import Dict, Any
import os

from ...core.entities.validation_entity import MessageMergeMode, ValidatorSettings
from ...shared.logging.logger_interface import LogLevel

_TRUE_VALUES = {"1", "true", "yes", "on"}


class EnvironmentConfig:
    """
    Environment-specific configuration.

    This class provides typed access to the configuration, with
    support for environment variable overrides.
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the configuration.

        Args:
            config: Merged configuration
        """
        self.config = config
        self._apply_environment_overrides()

    def _apply_environment_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        if "PARAMGUARD_LOG_LEVEL" in os.environ:
            self.config.setdefault("logging", {})
            self.config["logging"]["level"] = os.environ["PARAMGUARD_LOG_LEVEL"]

        if "PARAMGUARD_STOP_ON_FIELD_MESSAGE" in os.environ:
            self.config.setdefault("validator", {})
            self.config["validator"]["stop_on_field_message"] = (
                os.environ["PARAMGUARD_STOP_ON_FIELD_MESSAGE"].strip().lower() in _TRUE_VALUES
            )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a top-level configuration section."""
        return self.config.get(key, default)

    def get_default_messages(self) -> Dict[str, str]:
        """
        Get default message templates.

        Returns:
            Dict[str, str]: Rule identifier to template
        """
        return dict(self.config.get("messages") or {})

    def get_stop_on_field_message(self) -> bool:
        """
        Get whether a literal field message stops the validation loop.

        Returns:
            bool: True to stop processing later fields
        """
        return self.config.get("validator", {}).get("stop_on_field_message", True)

    def get_message_mode(self) -> MessageMergeMode:
        """
        Get message merge mode.

        Returns:
            MessageMergeMode: Merge mode
        """
        return MessageMergeMode(
            self.config.get("validator", {}).get("message_mode", MessageMergeMode.CONCATENATE.value)
        )

    def get_validator_settings(self) -> ValidatorSettings:
        """
        Get validator settings.

        Returns:
            ValidatorSettings: Settings built from the validator section
        """
        return ValidatorSettings(
            stop_on_field_message=self.get_stop_on_field_message(),
            message_mode=self.get_message_mode()
        )

    def get_log_level(self) -> LogLevel:
        """
        Get logging level.

        Returns:
            LogLevel: Logging level
        """
        return LogLevel(self.config.get("logging", {}).get("level", "INFO").upper())

    def get_logger_name(self) -> str:
        """
        Get logger name.

        Returns:
            str: Logger name
        """
        return self.config.get("logging", {}).get("name", "paramguard")
