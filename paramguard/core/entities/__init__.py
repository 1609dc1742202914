"""
Core entities module for paramguard.

This module provides access to all core entity classes used throughout
the package.
"""

from .validation_entity import (
    FieldRules,
    MessageCatalog,
    MessageMergeMode,
    ValidationState,
    ValidatorSettings
)

__all__ = [
    'FieldRules',
    'MessageCatalog',
    'MessageMergeMode',
    'ValidationState',
    'ValidatorSettings'
]
