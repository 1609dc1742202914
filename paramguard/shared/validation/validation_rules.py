"""
Validation rules for request parameters.

This module provides reusable validation rules that can be
composed to create complex validation logic. Every rule carries
an explicit identifier used to look up message templates.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Optional, Pattern, Type, Union
import math
import re
from datetime import datetime
from enum import Enum

from ..exceptions.validation_errors import (
    AggregateValidationFailure,
    RuleViolation,
    stringify_input
)


def normalize_identifier(name: str) -> str:
    """
    Normalize a rule identifier to its lowercase-initial form.

    Args:
        name: Raw identifier, e.g. "NotEmpty"

    Returns:
        str: Normalized identifier, e.g. "notEmpty"
    """
    return name[:1].lower() + name[1:]


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    # nan and inf never satisfy a range
    return number if math.isfinite(number) else None


class ValidationRule(ABC):
    """
    Base class for validation rules.

    Subclasses implement ``validate``; ``check`` and ``assert_valid``
    turn a failed predicate into an AggregateValidationFailure.
    """

    rule_name = "rule"

    def __init__(
        self,
        message: Optional[str] = None,
        name: Optional[str] = None,
        label: Optional[str] = None
    ):
        """
        Initialize validation rule.

        Args:
            message: Optional default wording replacing the rule's own
            name: Optional identifier replacing the class identifier
            label: Optional human-readable name of the validated input
        """
        self.message = message
        self.identifier = normalize_identifier(name or self.rule_name)
        self.label = label

    @abstractmethod
    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """
        Validate value.

        Args:
            value: Value to validate
            context: Optional validation context

        Returns:
            bool: Whether value is valid
        """
        pass

    def default_template(self) -> str:
        """Default wording of the rule."""
        return "{name} is invalid"

    @property
    def template(self) -> str:
        """Template used when no message layer overrides it."""
        return self.message or self.default_template()

    def get_params(self) -> Dict[str, Any]:
        """Rule parameters available as template placeholders."""
        return {}

    def violations(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
        label: Optional[str] = None
    ) -> List[RuleViolation]:
        """
        Collect the violations of this rule for a value.

        Args:
            value: Value to validate
            context: Optional validation context
            label: Label inherited from an enclosing rule

        Returns:
            List[RuleViolation]: Empty when the value is valid
        """
        if self.validate(value, context):
            return []

        rendered = stringify_input(value)
        params = dict(self.get_params())
        params["input"] = rendered
        params["name"] = self.label or label or rendered
        return [RuleViolation(self.identifier, self.template, params)]

    def check(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> Optional[AggregateValidationFailure]:
        """
        Check a value and return the failure instead of raising it.

        Args:
            value: Value to validate
            context: Optional validation context

        Returns:
            Optional[AggregateValidationFailure]: None when the value is valid
        """
        violations = self.violations(value, context)
        if not violations:
            return None
        return AggregateValidationFailure(value, violations)

    def assert_valid(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Assert that a value is valid.

        Raises:
            AggregateValidationFailure: If any rule is violated
        """
        failure = self.check(value, context)
        if failure is not None:
            raise failure

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(identifier={self.identifier!r})"


class NotEmptyRule(ValidationRule):
    """Rule that requires a value to be present."""

    rule_name = "notEmpty"

    def default_template(self) -> str:
        return "{name} must not be empty"

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value is present."""
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip() != ""
        if hasattr(value, "__len__"):
            return len(value) > 0
        return True


class TypeRule(ValidationRule):
    """Rule that validates value type."""

    rule_name = "type"

    def __init__(
        self,
        expected_type: Union[Type, tuple],
        message: Optional[str] = None,
        name: Optional[str] = None,
        label: Optional[str] = None
    ):
        """
        Initialize type rule.

        Args:
            expected_type: Expected value type, or a tuple of types
            message: Optional default wording
            name: Optional identifier
            label: Optional input label
        """
        super().__init__(message, name, label)
        self.expected_type = expected_type

    def default_template(self) -> str:
        return "{name} must be of type {type}"

    def get_params(self) -> Dict[str, Any]:
        types = self.expected_type if isinstance(self.expected_type, tuple) else (self.expected_type,)
        return {"type": " or ".join(t.__name__ for t in types)}

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value is of expected type."""
        return isinstance(value, self.expected_type)


class RangeRule(ValidationRule):
    """Rule that validates a numeric value range, bounds included."""

    rule_name = "between"

    def __init__(
        self,
        min_value: Optional[Union[int, float]] = None,
        max_value: Optional[Union[int, float]] = None,
        message: Optional[str] = None,
        name: Optional[str] = None,
        label: Optional[str] = None
    ):
        """
        Initialize range rule.

        Args:
            min_value: Minimum allowed value
            max_value: Maximum allowed value
            message: Optional default wording
            name: Optional identifier
            label: Optional input label
        """
        super().__init__(message, name, label)
        self.min_value = min_value
        self.max_value = max_value

    def default_template(self) -> str:
        if self.min_value is not None and self.max_value is not None:
            return "{name} must be between {min} and {max}"
        if self.min_value is not None:
            return "{name} must be greater than or equal to {min}"
        return "{name} must be less than or equal to {max}"

    def get_params(self) -> Dict[str, Any]:
        return {"min": self.min_value, "max": self.max_value}

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value is within range. Numeric strings are accepted."""
        number = _as_number(value)
        if number is None:
            return False

        if self.min_value is not None and number < self.min_value:
            return False

        if self.max_value is not None and number > self.max_value:
            return False

        return True


class LengthRule(ValidationRule):
    """Rule that validates value length, bounds included."""

    rule_name = "length"

    def __init__(
        self,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        message: Optional[str] = None,
        name: Optional[str] = None,
        label: Optional[str] = None
    ):
        """
        Initialize length rule.

        Args:
            min_length: Minimum allowed length
            max_length: Maximum allowed length
            message: Optional default wording
            name: Optional identifier
            label: Optional input label
        """
        super().__init__(message, name, label)
        self.min_length = min_length
        self.max_length = max_length

    def default_template(self) -> str:
        if self.min_length is not None and self.max_length is not None:
            return "{name} must have a length between {min} and {max}"
        if self.min_length is not None:
            return "{name} must have a length greater than or equal to {min}"
        return "{name} must have a length lower than or equal to {max}"

    def get_params(self) -> Dict[str, Any]:
        return {"min": self.min_length, "max": self.max_length}

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value length is within range."""
        if not hasattr(value, "__len__"):
            return False

        length = len(value)

        if self.min_length is not None and length < self.min_length:
            return False

        if self.max_length is not None and length > self.max_length:
            return False

        return True


class PatternRule(ValidationRule):
    """Rule that validates value against pattern."""

    rule_name = "regex"

    def __init__(
        self,
        pattern: Union[str, Pattern],
        message: Optional[str] = None,
        name: Optional[str] = None,
        label: Optional[str] = None
    ):
        """
        Initialize pattern rule.

        Args:
            pattern: Regular expression pattern
            message: Optional default wording
            name: Optional identifier
            label: Optional input label
        """
        super().__init__(message, name, label)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def default_template(self) -> str:
        return "{name} must validate against {pattern}"

    def get_params(self) -> Dict[str, Any]:
        return {"pattern": self.pattern.pattern}

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value matches pattern."""
        if not isinstance(value, str):
            return False

        return bool(self.pattern.match(value))


class EmailRule(PatternRule):
    """Rule that validates an email address shape."""

    rule_name = "email"
    EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

    def __init__(
        self,
        message: Optional[str] = None,
        name: Optional[str] = None,
        label: Optional[str] = None
    ):
        super().__init__(self.EMAIL_PATTERN, message, name, label)

    def default_template(self) -> str:
        return "{name} must be valid email"


class InRule(ValidationRule):
    """Rule that validates membership in a set of choices or an enum."""

    rule_name = "in"

    def __init__(
        self,
        haystack: Union[Iterable[Any], Type[Enum]],
        message: Optional[str] = None,
        name: Optional[str] = None,
        label: Optional[str] = None
    ):
        """
        Initialize membership rule.

        Args:
            haystack: Allowed values, or an Enum class whose values are allowed
            message: Optional default wording
            name: Optional identifier
            label: Optional input label
        """
        super().__init__(message, name, label)
        if isinstance(haystack, type) and issubclass(haystack, Enum):
            self.enum_class: Optional[Type[Enum]] = haystack
            self.haystack = [member.value for member in haystack]
        else:
            self.enum_class = None
            self.haystack = list(haystack)

    def default_template(self) -> str:
        return "{name} must be in {haystack}"

    def get_params(self) -> Dict[str, Any]:
        return {"haystack": stringify_input(self.haystack)}

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value is one of the allowed values."""
        if self.enum_class is not None and isinstance(value, self.enum_class):
            return True
        try:
            return value in self.haystack
        except TypeError:
            return False


class DateRule(ValidationRule):
    """Rule that validates date format."""

    rule_name = "date"

    def __init__(
        self,
        format: str = "%Y-%m-%d",
        message: Optional[str] = None,
        name: Optional[str] = None,
        label: Optional[str] = None
    ):
        """
        Initialize date rule.

        Args:
            format: Expected date format
            message: Optional default wording
            name: Optional identifier
            label: Optional input label
        """
        super().__init__(message, name, label)
        self.format = format

    def default_template(self) -> str:
        return "{name} must be a valid date in the format {format}"

    def get_params(self) -> Dict[str, Any]:
        return {"format": self.format}

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value is valid date."""
        if isinstance(value, datetime):
            return True

        if not isinstance(value, str):
            return False

        try:
            datetime.strptime(value, self.format)
            return True
        except ValueError:
            return False


class CustomRule(ValidationRule):
    """Rule that uses custom validation function."""

    rule_name = "callback"

    def __init__(
        self,
        validator: Callable[[Any, Optional[Dict[str, Any]]], bool],
        message: Optional[str] = None,
        name: Optional[str] = None,
        label: Optional[str] = None
    ):
        """
        Initialize custom rule.

        Args:
            validator: Validation function taking (value, context)
            message: Optional default wording
            name: Optional identifier, e.g. "uniqueEmail"
            label: Optional input label
        """
        super().__init__(message, name, label)
        self.validator = validator

    def default_template(self) -> str:
        return "{name} must be valid"

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value is valid using custom validator."""
        return bool(self.validator(value, context))


class CompositeRule(ValidationRule):
    """
    Rule that combines multiple rules.

    A failing composite reports the violations of its failing
    members; nested composites report their leaf violations.
    """

    def __init__(
        self,
        rules: Optional[List[ValidationRule]] = None,
        require_all: bool = True,
        message: Optional[str] = None,
        name: Optional[str] = None,
        label: Optional[str] = None
    ):
        """
        Initialize composite rule.

        Args:
            rules: List of rules to combine
            require_all: Whether all rules must pass
            message: Optional default wording
            name: Optional identifier
            label: Optional input label passed to members without one
        """
        super().__init__(message, name or ("allOf" if require_all else "oneOf"), label)
        self.rules = list(rules or [])
        self.require_all = require_all

    def add(self, rule: ValidationRule) -> "CompositeRule":
        """Append a rule to the chain."""
        self.rules.append(rule)
        return self

    def get_rules(self) -> List[ValidationRule]:
        """Get the member rules."""
        return list(self.rules)

    def default_template(self) -> str:
        if self.require_all:
            return "All of the required rules must pass for {name}"
        return "At least one of these rules must pass for {name}"

    def validate(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Check if value is valid according to combined rules."""
        results = [
            rule.validate(value, context)
            for rule in self.rules
        ]

        if self.require_all or not results:
            return all(results)
        return any(results)

    def violations(
        self,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
        label: Optional[str] = None
    ) -> List[RuleViolation]:
        label = self.label or label
        per_rule = [
            rule.violations(value, context, label)
            for rule in self.rules
        ]

        if not self.require_all:
            # an empty oneOf passes, like an empty allOf
            if not per_rule or any(not found for found in per_rule):
                return []

        return [violation for found in per_rule for violation in found]


def chain(*rules: ValidationRule, label: Optional[str] = None) -> CompositeRule:
    """
    Build a rule chain where every rule must pass.

    Args:
        *rules: Rules in evaluation order
        label: Optional input label

    Returns:
        CompositeRule: The chain
    """
    return CompositeRule(list(rules), label=label)
