"""
Exceptions module for paramguard.

This module provides access to the error types and error
context helpers used throughout the package.
"""

from .validation_errors import (
    ParamGuardError,
    ConfigurationError,
    AggregateValidationFailure,
    RuleViolation,
    render_template,
    stringify_input
)
from .error_context import ErrorContext, ErrorContextManager

__all__ = [
    'ParamGuardError',
    'ConfigurationError',
    'AggregateValidationFailure',
    'RuleViolation',
    'render_template',
    'stringify_input',
    'ErrorContext',
    'ErrorContextManager'
]
