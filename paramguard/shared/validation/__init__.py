from .validation_rules import (
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
    chain,
    normalize_identifier
)
from .message_resolver import MessageResolver
from .validation_engine import FieldOutcome, ValidationEngine

__all__ = [
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
    'chain',
    'normalize_identifier',
    'MessageResolver',
    'FieldOutcome',
    'ValidationEngine'
]
