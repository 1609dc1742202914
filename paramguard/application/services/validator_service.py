"""
Request validator.

This module provides the Validator, which validates named request
parameters against per-field rules and keeps the validated data
and field-keyed error messages of the pass.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from ...core.entities.validation_entity import (
    MessageCatalog,
    ValidationState,
    ValidatorSettings
)
from ...infrastructure.config.environment_config import EnvironmentConfig
from ...infrastructure.request.request_sources import as_request_source
from ...shared.exceptions.error_context import ErrorContextManager
from ...shared.exceptions.validation_errors import ConfigurationError
from ...shared.logging.logger_interface import LoggerInterface
from ...shared.logging.structured_logger import configure_logging, get_logger
from ...shared.validation.validation_engine import ValidationEngine


class Validator:
    """
    Validator for request parameters.

    Default messages are fixed at construction. Data and errors live
    in a ValidationState that persists across ``validate`` calls until
    it is reset or replaced. An instance is not safe to share between
    threads; use one per request.

    Usage:
        validator = Validator({"notEmpty": "This field is required"})
        validator.validate(request, {"email": chain(NotEmptyRule(), EmailRule())})
        if not validator.is_valid():
            return validator.get_errors()
    """

    def __init__(
        self,
        default_messages: Optional[Mapping[str, str]] = None,
        settings: Optional[ValidatorSettings] = None,
        logger: Optional[LoggerInterface] = None
    ):
        """
        Initialize the validator.

        Args:
            default_messages: Templates applied to every validate call
            settings: Optional behavioral settings
            logger: Optional logger
        """
        self.settings = settings or ValidatorSettings()
        self._default_messages = MessageCatalog(default_messages)
        self._engine = ValidationEngine(self._default_messages, self.settings.message_mode)
        self._state = ValidationState()
        self.logger = logger or get_logger("paramguard.validator")

    @classmethod
    def from_config(
        cls,
        config: EnvironmentConfig,
        logger: Optional[LoggerInterface] = None
    ) -> "Validator":
        """
        Create a validator from loaded configuration.

        The logger, unless given, is configured from the ``logging``
        section, so its name and level follow the configuration.

        Args:
            config: Environment configuration
            logger: Optional logger

        Returns:
            Validator: Configured validator
        """
        if logger is None:
            logger = configure_logging(config.get_logger_name(), config.get_log_level())
        return cls(
            default_messages=config.get_default_messages(),
            settings=config.get_validator_settings(),
            logger=logger
        )

    @property
    def default_messages(self) -> MessageCatalog:
        """Default message templates of this validator."""
        return self._default_messages

    @property
    def state(self) -> ValidationState:
        """Current validation state."""
        return self._state

    def validate(
        self,
        source: Any,
        rules: Mapping[str, Any],
        messages: Optional[Mapping[str, str]] = None
    ) -> "Validator":
        """
        Validate request parameters with the given rules.

        Fields are validated in the order of ``rules``. The raw value of
        each field is stored before its rule runs. A field spec carrying a
        literal ``message`` stores that message alone and, unless
        ``settings.stop_on_field_message`` is False, ends the pass.

        Args:
            source: Request source, Flask request or mapping of parameters
            rules: Field name to rule specification
            messages: Call-level message templates

        Returns:
            Validator: This validator

        Raises:
            ConfigurationError: If a field specification carries no rule
        """
        params = as_request_source(source)
        messages = messages or {}
        processed: List[str] = []

        for field_name, spec in rules.items():
            value = params.get_param(field_name)
            self._state.data[field_name] = value

            try:
                outcome = self._engine.validate_field(field_name, value, spec, messages)
            except ConfigurationError as e:
                context = ErrorContextManager.create_context(
                    e,
                    field=field_name,
                    processed_fields=list(processed)
                )
                self.logger.error("Invalid validation rules", **context.to_dict())
                raise

            processed.append(field_name)

            if outcome.is_valid:
                continue

            self.logger.debug(
                "Field failed validation",
                field=field_name,
                identifiers=outcome.identifiers
            )

            if outcome.errors:
                self._state.errors[field_name] = outcome.errors

            if outcome.single_message and self.settings.stop_on_field_message:
                self.logger.debug(
                    "Validation stopped on field message",
                    field=field_name,
                    skipped_fields=[name for name in rules if name not in processed]
                )
                return self

        self.logger.debug(
            "Validation completed",
            fields=processed,
            failed_fields=list(self._state.errors)
        )
        return self

    def add_error(self, param: str, message: str) -> "Validator":
        """
        Add an error for param.

        Args:
            param: Field name
            message: Error message

        Returns:
            Validator: This validator
        """
        self._state.errors.setdefault(param, []).append(message)
        return self

    def add_errors(self, param: str, messages: Iterable[str]) -> "Validator":
        """
        Add errors for param.

        Args:
            param: Field name
            messages: Error messages

        Returns:
            Validator: This validator
        """
        self._state.errors.setdefault(param, []).extend(messages)
        return self

    def get_errors(self) -> Dict[str, List[str]]:
        """Get all errors."""
        return self._state.errors

    def set_errors(self, errors: Mapping[str, List[str]]) -> "Validator":
        """Replace all errors."""
        self._state.errors = {name: list(messages) for name, messages in errors.items()}
        return self

    def get_errors_of(self, param: str) -> List[str]:
        """Get errors of param, or an empty list."""
        return self._state.errors.get(param, [])

    def set_errors_of(self, param: str, errors: Iterable[str]) -> "Validator":
        """Replace errors of param."""
        self._state.errors[param] = list(errors)
        return self

    def get_first(self, param: str) -> str:
        """Get first error of param, or an empty string."""
        errors = self._state.errors.get(param)
        return errors[0] if errors else ""

    def get_value(self, param: str) -> Any:
        """
        Get the value of a parameter in validated data.

        Returns:
            Any: Stored value, or an empty string when absent or None
        """
        value = self._state.data.get(param)
        return "" if value is None else value

    def set_values(self, data: Mapping[str, Any]) -> "Validator":
        """Merge values into validated data; new keys win."""
        self._state.data.update(data)
        return self

    def set_data(self, data: Mapping[str, Any]) -> "Validator":
        """Replace validated data."""
        self._state.data = dict(data)
        return self

    def get_data(self) -> Dict[str, Any]:
        """Get validated data."""
        return self._state.data

    def is_valid(self) -> bool:
        """Return True if there is no error."""
        return self._state.is_valid

    def reset(self) -> "Validator":
        """Clear validated data and errors."""
        self._state.reset()
        return self
