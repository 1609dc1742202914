"""
paramguard: request parameter validation with layered error messages.

This module provides access to the validator, the rules and the
error types of the package.
"""

from .application.services import Validator
from .core.entities import (
    FieldRules,
    MessageCatalog,
    MessageMergeMode,
    ValidationState,
    ValidatorSettings
)
from .shared.exceptions import (
    AggregateValidationFailure,
    ConfigurationError,
    ParamGuardError,
    RuleViolation
)
from .shared.validation import (
    ValidationRule,
    NotEmptyRule,
    TypeRule,
    RangeRule,
    LengthRule,
    PatternRule,
    EmailRule,
    InRule,
    DateRule,
    CustomRule,
    CompositeRule,
    chain
)

__version__ = "1.0.0"

__all__ = [
    'Validator',
    'FieldRules',
    'MessageCatalog',
    'MessageMergeMode',
    'ValidationState',
    'ValidatorSettings',
    'AggregateValidationFailure',
    'ConfigurationError',
    'ParamGuardError',
    'RuleViolation',
    'ValidationRule',
    'NotEmptyRule',
    'TypeRule',
    'RangeRule',
    'LengthRule',
    'PatternRule',
    'EmailRule',
    'InRule',
    'DateRule',
    'CustomRule',
    'CompositeRule',
    'chain'
]
