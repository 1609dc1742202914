"""
Data models for request validation.

This module contains the data classes and enums used to describe
field rules, message catalogs, validator settings and the mutable
state produced by a validation pass.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional


class MessageMergeMode(Enum):
    """How message layers are merged into a field's error list."""
    CONCATENATE = "concatenate"
    OVERRIDE = "override"


@dataclass
class FieldRules:
    """
    Validation configuration of a single field.

    ``message`` replaces every resolved message with one literal
    string; ``messages`` overrides templates for this field only.
    """
    rule: Any
    message: Optional[str] = None
    messages: Optional[Mapping[str, str]] = None


@dataclass(frozen=True)
class ValidatorSettings:
    """Behavioral switches of a Validator."""
    stop_on_field_message: bool = True
    message_mode: MessageMergeMode = MessageMergeMode.CONCATENATE

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary representation."""
        return {
            'stop_on_field_message': self.stop_on_field_message,
            'message_mode': self.message_mode.value
        }


class MessageCatalog(Mapping[str, str]):
    """
    Immutable identifier to template mapping.

    Used for the default messages fixed when a Validator is built.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self._messages: Dict[str, str] = dict(messages or {})

    def __getitem__(self, identifier: str) -> str:
        return self._messages[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"MessageCatalog({self._messages!r})"


@dataclass
class ValidationState:
    """
    Mutable result of validation passes.

    ``data`` holds the raw value read for every validated field;
    ``errors`` holds the resolved messages of failing fields.
    """
    data: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, List[str]] = field(default_factory=dict)

    def reset(self) -> None:
        """Clear data and errors."""
        self.data = {}
        self.errors = {}

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert state to dictionary representation."""
        return {
            'is_valid': self.is_valid,
            'data': dict(self.data),
            'errors': {name: list(messages) for name, messages in self.errors.items()}
        }
