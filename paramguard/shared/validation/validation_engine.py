"""
Validation engine for running field rules.

This module provides the engine that checks one field's value
against its rule specification and turns a failure into the
field's resolved error messages.
"""

from typing import Any, List, Mapping, Optional
from dataclasses import dataclass, field

from ...core.entities.validation_entity import FieldRules, MessageCatalog, MessageMergeMode
from ..exceptions.validation_errors import ConfigurationError
from .message_resolver import MessageResolver
from .validation_rules import ValidationRule


@dataclass
class FieldOutcome:
    """Result of validating a single field."""

    field_name: str
    value: Any
    errors: List[str] = field(default_factory=list)
    identifiers: List[str] = field(default_factory=list)
    single_message: bool = False

    @property
    def is_valid(self) -> bool:
        return not self.identifiers


class ValidationEngine:
    """
    Engine for running field rules.

    The engine holds the validator-wide default messages and applies
    the message layers in precedence order when a field fails.
    """

    def __init__(
        self,
        default_messages: Optional[Mapping[str, str]] = None,
        mode: MessageMergeMode = MessageMergeMode.CONCATENATE
    ):
        """
        Initialize validation engine.

        Args:
            default_messages: Templates applied to every validated field
            mode: How message layers are merged
        """
        self.default_messages = (
            default_messages if isinstance(default_messages, MessageCatalog)
            else MessageCatalog(default_messages)
        )
        self.resolver = MessageResolver(mode)

    @staticmethod
    def resolve_spec(field_name: str, spec: Any) -> FieldRules:
        """
        Normalize a field specification.

        Args:
            field_name: Field the specification belongs to
            spec: A bare rule, a FieldRules record or a mapping

        Returns:
            FieldRules: Normalized specification

        Raises:
            ConfigurationError: If the specification carries no rule
        """
        if isinstance(spec, ValidationRule):
            return FieldRules(rule=spec)

        if isinstance(spec, FieldRules):
            record = spec
        elif isinstance(spec, Mapping):
            rule = spec.get("rule", spec.get("rules"))
            record = FieldRules(
                rule=rule,
                message=spec.get("message"),
                messages=spec.get("messages")
            )
        else:
            raise ConfigurationError(
                f"Invalid rule specification for '{field_name}'",
                field=field_name
            )

        if not isinstance(record.rule, ValidationRule):
            raise ConfigurationError(
                f"Validation rules are missing for '{field_name}'",
                field=field_name
            )

        return record

    def validate_field(
        self,
        field_name: str,
        value: Any,
        spec: Any,
        messages: Optional[Mapping[str, str]] = None
    ) -> FieldOutcome:
        """
        Validate one field.

        Args:
            field_name: Field name
            value: Raw field value
            spec: Field rule specification
            messages: Call-level message templates

        Returns:
            FieldOutcome: Validation outcome for the field

        Raises:
            ConfigurationError: If the specification carries no rule
        """
        record = self.resolve_spec(field_name, spec)
        outcome = FieldOutcome(field_name=field_name, value=value)

        failure = record.rule.check(value)
        if failure is None:
            return outcome

        outcome.identifiers = failure.identifiers

        if isinstance(record.message, str) and record.message:
            outcome.errors = [record.message]
            outcome.single_message = True
            return outcome

        layers: List[Mapping[str, str]] = [failure.default_templates()]
        if self.default_messages:
            layers.append(self.default_messages)
        if messages:
            layers.append(messages)
        if record.messages is not None:
            layers.append(record.messages)

        outcome.errors = self.resolver.compose(failure, layers)
        return outcome
