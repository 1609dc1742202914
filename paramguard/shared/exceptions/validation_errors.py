"""
Validation error types.

This module defines the errors raised while validating request
parameters, including the aggregate failure produced by rules.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple


class ParamGuardError(Exception):
    """Base class for all paramguard errors."""


class ConfigurationError(ParamGuardError, ValueError):
    """
    Raised when validation rules or configuration are malformed.

    A field specification without a usable rule, or an invalid YAML
    configuration, are both configuration errors. They are fatal to
    the current call and are never retried.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        """
        Initialize configuration error.

        Args:
            message: Error message
            field: Optional field whose specification is invalid
        """
        super().__init__(message)
        self.field = field


class _TemplateParams(dict):
    """Format mapping that leaves unknown placeholders untouched."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def stringify_input(value: Any) -> str:
    """
    Render an input value for use in a message.

    Args:
        value: Raw input value

    Returns:
        str: JSON-like rendering (strings quoted, None as null)
    """
    try:
        return json.dumps(value, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


def render_template(template: str, params: Mapping[str, Any]) -> str:
    """
    Render a message template.

    Args:
        template: Template using str.format placeholders
        params: Placeholder values

    Returns:
        str: Rendered message, or the template itself if it cannot be formatted
    """
    if not template:
        return template
    try:
        return template.format_map(_TemplateParams(params))
    except (ValueError, TypeError, IndexError, AttributeError, KeyError):
        return template


@dataclass
class RuleViolation:
    """A single violated rule within an aggregate failure."""

    identifier: str
    template: str
    params: Dict[str, Any] = field(default_factory=dict)

    def render(self, template: Optional[str] = None) -> str:
        """Render the given template, or the default one, with this violation's params."""
        return render_template(
            self.template if template is None else template,
            self.params
        )


class AggregateValidationFailure(ParamGuardError):
    """
    Failure produced when a value violates one or more rules.

    Rules return this object from ``check`` and raise it from
    ``assert_valid``. It carries every violated rule in the order
    the rule chain reported them.
    """

    def __init__(self, value: Any, violations: List[RuleViolation]):
        """
        Initialize aggregate failure.

        Args:
            value: The value that failed validation
            violations: Violated rules, in chain order
        """
        self.value = value
        self.violations = list(violations)
        super().__init__("; ".join(self.resolve(self.default_templates())))

    @property
    def identifiers(self) -> List[str]:
        """Ordered, de-duplicated identifiers of the violated rules."""
        seen: Dict[str, None] = {}
        for violation in self.violations:
            seen.setdefault(violation.identifier, None)
        return list(seen)

    def violation(self, identifier: str) -> Optional[RuleViolation]:
        """Return the first violation with the given identifier."""
        for violation in self.violations:
            if violation.identifier == identifier:
                return violation
        return None

    def default_templates(self) -> Dict[str, str]:
        """
        Get the default wording of every violated rule.

        Returns:
            Dict[str, str]: Identifier to default template, in chain order
        """
        templates: Dict[str, str] = {}
        for violation in self.violations:
            templates.setdefault(violation.identifier, violation.template)
        return templates

    def resolve_items(self, templates: Mapping[str, str]) -> List[Tuple[str, str]]:
        """
        Resolve templates against the violated rules.

        Args:
            templates: Identifier to template mapping

        Returns:
            List[Tuple[str, str]]: (identifier, message) pairs in the
            mapping's key order, skipping identifiers that did not fail
        """
        resolved = []
        for identifier, template in templates.items():
            violation = self.violation(identifier)
            if violation is None:
                continue
            resolved.append((identifier, violation.render(template)))
        return resolved

    def resolve(self, templates: Mapping[str, str]) -> List[str]:
        """
        Resolve templates into messages.

        Args:
            templates: Identifier to template mapping

        Returns:
            List[str]: One message per failing identifier found in templates
        """
        return [message for _, message in self.resolve_items(templates)]
