"""
Flask integration for request validation.

Provides app configuration, a validator factory bound to the current
app, and a view decorator that rejects invalid requests.
"""

from functools import wraps
from typing import Any, Callable, Mapping, Optional

from flask import Flask, current_app, g, jsonify, request

from ...application.services.validator_service import Validator
from ...core.entities.validation_entity import MessageMergeMode, ValidatorSettings
from ...infrastructure.config.environment_config import EnvironmentConfig
from ...infrastructure.request.request_sources import FlaskRequestSource
from ...shared.logging.logger_interface import LogLevel
from ...shared.logging.structured_logger import configure_logging

MESSAGES_KEY = "PARAMGUARD_MESSAGES"
STOP_ON_FIELD_MESSAGE_KEY = "PARAMGUARD_STOP_ON_FIELD_MESSAGE"
MESSAGE_MODE_KEY = "PARAMGUARD_MESSAGE_MODE"
LOG_LEVEL_KEY = "PARAMGUARD_LOG_LEVEL"
LOGGER_NAME_KEY = "PARAMGUARD_LOGGER_NAME"


def init_app(app: Flask, config: Optional[EnvironmentConfig] = None) -> None:
    """
    Configure a Flask app for request validation.

    Args:
        app: Flask application
        config: Optional loaded configuration; values already present
            in ``app.config`` are kept when no configuration is given
    """
    if config is not None:
        settings = config.get_validator_settings()
        app.config[MESSAGES_KEY] = config.get_default_messages()
        app.config[STOP_ON_FIELD_MESSAGE_KEY] = settings.stop_on_field_message
        app.config[MESSAGE_MODE_KEY] = settings.message_mode.value
        app.config[LOG_LEVEL_KEY] = config.get_log_level().value
        app.config[LOGGER_NAME_KEY] = config.get_logger_name()
    else:
        app.config.setdefault(MESSAGES_KEY, {})
        app.config.setdefault(STOP_ON_FIELD_MESSAGE_KEY, True)
        app.config.setdefault(MESSAGE_MODE_KEY, MessageMergeMode.CONCATENATE.value)
        app.config.setdefault(LOG_LEVEL_KEY, LogLevel.INFO.value)
        app.config.setdefault(LOGGER_NAME_KEY, "paramguard")

    app.extensions["paramguard"] = True


def build_validator() -> Validator:
    """
    Create a validator from the current app's configuration.

    Returns:
        Validator: New validator for the current request
    """
    settings = ValidatorSettings(
        stop_on_field_message=current_app.config.get(STOP_ON_FIELD_MESSAGE_KEY, True),
        message_mode=MessageMergeMode(
            current_app.config.get(MESSAGE_MODE_KEY, MessageMergeMode.CONCATENATE.value)
        )
    )
    logger = configure_logging(
        current_app.config.get(LOGGER_NAME_KEY, "paramguard"),
        LogLevel(current_app.config.get(LOG_LEVEL_KEY, LogLevel.INFO.value).upper())
    )
    return Validator(current_app.config.get(MESSAGES_KEY, {}), settings=settings, logger=logger)


def error_response(validator: Validator, status_code: int = 400) -> Any:
    """
    Build the JSON response for a failed validation.

    Args:
        validator: Validator holding the errors
        status_code: HTTP status code

    Returns:
        Any: Flask response tuple
    """
    return jsonify({"errors": validator.get_errors()}), status_code


def validate_request(
    rules: Mapping[str, Any],
    messages: Optional[Mapping[str, str]] = None,
    status_code: int = 400
) -> Callable:
    """
    Decorator validating the current request before the view runs.

    The validator is stored on ``flask.g.validator`` so the view can
    read the validated data.

    Args:
        rules: Field name to rule specification
        messages: Call-level message templates
        status_code: Status code returned for invalid requests

    Returns:
        Callable: Decorator
    """
    def decorator(view: Callable) -> Callable:
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            validator = build_validator()
            validator.validate(FlaskRequestSource(request), rules, messages)
            g.validator = validator

            if not validator.is_valid():
                return error_response(validator, status_code)

            return view(*args, **kwargs)

        return wrapper

    return decorator
