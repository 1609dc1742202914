"""
Tests for validation rules.
"""

import pytest
from datetime import datetime
from enum import Enum

from paramguard.shared.exceptions import AggregateValidationFailure
from paramguard.shared.validation import (
    CompositeRule,
    CustomRule,
    DateRule,
    EmailRule,
    InRule,
    LengthRule,
    NotEmptyRule,
    PatternRule,
    RangeRule,
    TypeRule,
    chain,
    normalize_identifier,
)


class Color(Enum):
    RED = "red"
    BLUE = "blue"


class TestRuleIdentifiers:
    """Rule identifiers are explicit and normalized."""

    def test_normalize_identifier(self):
        assert normalize_identifier("NotEmpty") == "notEmpty"
        assert normalize_identifier("email") == "email"
        assert normalize_identifier("") == ""

    def test_builtin_identifiers(self):
        assert NotEmptyRule().identifier == "notEmpty"
        assert LengthRule(max_length=3).identifier == "length"
        assert RangeRule(min_value=1).identifier == "between"
        assert PatternRule(r"\d+").identifier == "regex"
        assert EmailRule().identifier == "email"
        assert InRule([1, 2]).identifier == "in"
        assert DateRule().identifier == "date"
        assert CustomRule(lambda v, c: True).identifier == "callback"
        assert CompositeRule([]).identifier == "allOf"
        assert CompositeRule([], require_all=False).identifier == "oneOf"

    def test_explicit_name_is_normalized(self):
        rule = CustomRule(lambda v, c: True, name="UniqueEmail")
        assert rule.identifier == "uniqueEmail"


class TestPrimitiveRules:
    """Predicates of the shipped rules."""

    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_not_empty_rejects_empty_values(self, value):
        assert not NotEmptyRule().validate(value)

    @pytest.mark.parametrize("value", ["a", 0, [1], False])
    def test_not_empty_accepts_present_values(self, value):
        assert NotEmptyRule().validate(value)

    def test_type_rule(self):
        assert TypeRule(int).validate(3)
        assert not TypeRule(int).validate("3")
        assert TypeRule((int, str)).get_params() == {"type": "int or str"}

    def test_range_rule_accepts_numeric_strings(self):
        rule = RangeRule(min_value=1, max_value=10)
        assert rule.validate(5)
        assert rule.validate("10")
        assert not rule.validate("11")
        assert not rule.validate("abc")
        assert not rule.validate(True)

    @pytest.mark.parametrize("value", ["nan", "inf", " -inf ", float("nan"), float("inf")])
    def test_range_rule_rejects_non_finite_numbers(self, value):
        assert not RangeRule(min_value=1).validate(value)
        assert not RangeRule(max_value=10).validate(value)
        assert not RangeRule(min_value=1, max_value=10).validate(value)

    def test_length_rule_bounds_are_inclusive(self):
        rule = LengthRule(min_length=2, max_length=4)
        assert rule.validate("ab")
        assert rule.validate("abcd")
        assert not rule.validate("a")
        assert not rule.validate("abcde")
        assert not rule.validate(None)

    def test_pattern_and_email(self):
        assert PatternRule(r"^\d+$").validate("123")
        assert not PatternRule(r"^\d+$").validate(123)
        assert EmailRule().validate("user@example.com")
        assert not EmailRule().validate("user@example")
        assert not EmailRule().validate("not an email")

    def test_in_rule_with_enum(self):
        rule = InRule(Color)
        assert rule.validate("red")
        assert rule.validate(Color.BLUE)
        assert not rule.validate("green")

    def test_in_rule_with_unhashable_value(self):
        assert not InRule(["a", "b"]).validate({"a": 1})

    def test_date_rule(self):
        rule = DateRule("%Y-%m-%d")
        assert rule.validate("2024-02-29")
        assert rule.validate(datetime(2024, 1, 1))
        assert not rule.validate("2023-02-29")
        assert not rule.validate(20240101)

    def test_custom_rule_receives_context(self):
        rule = CustomRule(lambda value, context: value == context["expected"])
        assert rule.validate("x", {"expected": "x"})
        assert not rule.validate("y", {"expected": "x"})


class TestRuleFailures:
    """Failures are returned by check and raised by assert_valid."""

    def test_check_returns_none_for_valid_value(self):
        assert NotEmptyRule().check("value") is None

    def test_check_returns_failure_with_default_wording(self):
        failure = NotEmptyRule().check("")
        assert isinstance(failure, AggregateValidationFailure)
        assert failure.identifiers == ["notEmpty"]
        assert failure.resolve(failure.default_templates()) == ['"" must not be empty']

    def test_label_replaces_input_in_name(self):
        failure = NotEmptyRule(label="Email").check(None)
        assert failure.resolve(failure.default_templates()) == ["Email must not be empty"]

    def test_message_replaces_default_wording(self):
        failure = LengthRule(max_length=2, message="{name} is too long").check("abc")
        assert str(failure) == '"abc" is too long'

    def test_rule_params_are_rendered(self):
        failure = LengthRule(min_length=3, max_length=5).check("ab")
        assert str(failure) == '"ab" must have a length between 3 and 5'

    def test_assert_valid_raises(self):
        with pytest.raises(AggregateValidationFailure) as exc_info:
            EmailRule().assert_valid("nope")
        assert exc_info.value.identifiers == ["email"]

    def test_assert_valid_passes_silently(self):
        EmailRule().assert_valid("user@example.com")


class TestCompositeRule:
    """Composite rules report their violated members."""

    def test_chain_reports_every_failing_member_in_order(self):
        rule = chain(NotEmptyRule(), LengthRule(min_length=3), EmailRule())
        failure = rule.check("")
        assert failure.identifiers == ["notEmpty", "length", "email"]

    def test_chain_skips_passing_members(self):
        rule = chain(NotEmptyRule(), LengthRule(min_length=3), EmailRule())
        failure = rule.check("abcd")
        assert failure.identifiers == ["email"]

    def test_nested_chains_are_flattened(self):
        rule = chain(NotEmptyRule(), chain(LengthRule(min_length=3), EmailRule()))
        assert rule.check("x").identifiers == ["length", "email"]

    def test_duplicate_identifiers_are_reported_once(self):
        rule = chain(LengthRule(min_length=3), LengthRule(min_length=5))
        failure = rule.check("ab")
        assert failure.identifiers == ["length"]
        assert len(failure.violations) == 2

    def test_one_of_passes_when_any_member_passes(self):
        rule = CompositeRule([EmailRule(), PatternRule(r"^\d+$")], require_all=False)
        assert rule.check("12345") is None
        assert rule.check("abc").identifiers == ["email", "regex"]

    def test_empty_composites_pass(self):
        assert CompositeRule([]).check("anything") is None
        assert CompositeRule([], require_all=False).check("anything") is None

    def test_chain_label_is_passed_to_members(self):
        rule = chain(NotEmptyRule(), EmailRule(label="Address"), label="Email")
        failure = rule.check("")
        assert failure.resolve(failure.default_templates()) == [
            "Email must not be empty",
            "Address must be valid email",
        ]

    def test_add_appends_member(self):
        rule = CompositeRule().add(NotEmptyRule()).add(EmailRule())
        assert [member.identifier for member in rule.get_rules()] == ["notEmpty", "email"]
