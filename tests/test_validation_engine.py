"""
Tests for the validation engine.
"""

import pytest

from paramguard.core.entities import FieldRules, MessageCatalog
from paramguard.shared.exceptions import ConfigurationError
from paramguard.shared.validation import (
    EmailRule,
    LengthRule,
    NotEmptyRule,
    ValidationEngine,
    chain,
)


class TestResolveSpec:
    """Normalizing field specifications."""

    def test_bare_rule(self):
        rule = NotEmptyRule()
        assert ValidationEngine.resolve_spec("name", rule) == FieldRules(rule=rule)

    def test_mapping_record(self):
        rule = NotEmptyRule()
        record = ValidationEngine.resolve_spec(
            "name", {"rule": rule, "message": "m", "messages": {"notEmpty": "x"}}
        )
        assert record == FieldRules(rule=rule, message="m", messages={"notEmpty": "x"})

    def test_legacy_rules_key(self):
        rule = NotEmptyRule()
        assert ValidationEngine.resolve_spec("name", {"rules": rule}).rule is rule

    @pytest.mark.parametrize("spec", [
        {},
        {"message": "required"},
        {"rule": "notEmpty"},
        FieldRules(rule=None),
        "notEmpty",
        None,
    ])
    def test_missing_rule_is_a_configuration_error(self, spec):
        with pytest.raises(ConfigurationError) as exc_info:
            ValidationEngine.resolve_spec("name", spec)
        assert exc_info.value.field == "name"

    def test_configuration_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            ValidationEngine.resolve_spec("name", {})


class TestValidateField:
    """Validating one field and resolving its messages."""

    def test_valid_value(self):
        outcome = ValidationEngine().validate_field("email", "a@b.co", EmailRule())
        assert outcome.is_valid
        assert outcome.errors == []

    def test_message_precedence(self):
        engine = ValidationEngine({"notEmpty": "D"})
        outcome = engine.validate_field("name", None, NotEmptyRule(), {"notEmpty": "C"})
        assert outcome.errors == ["null must not be empty", "D", "C"]

    def test_per_field_messages_come_last(self):
        engine = ValidationEngine({"notEmpty": "D"})
        spec = {"rule": NotEmptyRule(), "messages": {"notEmpty": "F"}}
        outcome = engine.validate_field("name", "", spec, {"notEmpty": "C"})
        assert outcome.errors == ['"" must not be empty', "D", "C", "F"]

    def test_empty_layers_are_skipped(self):
        outcome = ValidationEngine({}).validate_field("name", "", NotEmptyRule(), {})
        assert outcome.errors == ['"" must not be empty']

    def test_literal_message_replaces_all_messages(self):
        engine = ValidationEngine({"notEmpty": "D"})
        spec = FieldRules(rule=NotEmptyRule(), message="Name is required", messages={"notEmpty": "F"})
        outcome = engine.validate_field("name", "", spec, {"notEmpty": "C"})
        assert outcome.errors == ["Name is required"]
        assert outcome.single_message
        assert outcome.identifiers == ["notEmpty"]

    def test_empty_message_falls_back_to_layers(self):
        engine = ValidationEngine({"notEmpty": "D"})
        spec = FieldRules(rule=NotEmptyRule(), message="")
        outcome = engine.validate_field("name", "", spec)
        assert outcome.errors == ['"" must not be empty', "D"]
        assert not outcome.single_message

    def test_non_string_message_is_ignored(self):
        spec = {"rule": NotEmptyRule(), "message": ["not", "a", "string"]}
        outcome = ValidationEngine().validate_field("name", "", spec)
        assert outcome.errors == ['"" must not be empty']
        assert not outcome.single_message

    def test_only_failing_identifiers_are_resolved(self):
        engine = ValidationEngine({"notEmpty": "required", "email": "bad email", "length": "too short"})
        rule = chain(NotEmptyRule(), LengthRule(min_length=3), EmailRule())
        outcome = engine.validate_field("email", "abcd", rule)
        assert outcome.identifiers == ["email"]
        assert outcome.errors == ['"abcd" must be valid email', "bad email"]

    def test_default_messages_are_a_catalog(self):
        engine = ValidationEngine({"notEmpty": "D"})
        assert isinstance(engine.default_messages, MessageCatalog)
        assert dict(engine.default_messages) == {"notEmpty": "D"}
