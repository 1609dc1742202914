"""
Tests for message resolution.
"""

from paramguard.core.entities import MessageMergeMode
from paramguard.shared.exceptions import AggregateValidationFailure, RuleViolation
from paramguard.shared.validation import LengthRule, MessageResolver, NotEmptyRule, RangeRule, chain


def _failure(*identifiers):
    return AggregateValidationFailure(
        "",
        [RuleViolation(identifier, f"default {identifier}", {"name": "field"}) for identifier in identifiers]
    )


class TestResolve:
    """Selecting templates from a single layer."""

    def test_skips_identifiers_without_template(self):
        layer = {"notEmpty": "required", "email": "bad email"}
        assert MessageResolver.resolve(["notEmpty", "length"], layer) == ["required"]

    def test_follows_layer_key_order(self):
        layer = {"email": "bad email", "notEmpty": "required"}
        assert MessageResolver.resolve(["notEmpty", "email"], layer) == ["bad email", "required"]

    def test_empty_layer(self):
        assert MessageResolver.resolve(["notEmpty"], {}) == []


class TestFailureResolve:
    """Rendering templates against an aggregate failure."""

    def test_renders_placeholders(self):
        failure = chain(NotEmptyRule(), LengthRule(min_length=3)).check("")
        assert failure.resolve({"length": "{name} needs {min} characters"}) == [
            '"" needs 3 characters'
        ]

    def test_unknown_placeholders_are_kept(self):
        failure = NotEmptyRule().check(None)
        assert failure.resolve({"notEmpty": "{field} is required"}) == ["{field} is required"]

    def test_malformed_template_is_returned_as_is(self):
        failure = NotEmptyRule().check(None)
        assert failure.resolve({"notEmpty": "missing {"}) == ["missing {"]

    def test_format_directive_on_unset_param_is_returned_as_is(self):
        failure = RangeRule(max_value=99).check(100)
        assert failure.resolve({"between": "at least {min:.1f}"}) == ["at least {min:.1f}"]


class TestCompose:
    """Merging layers into a field's error list."""

    def test_concatenates_layers_in_order(self):
        failure = _failure("notEmpty")
        layers = [failure.default_templates(), {"notEmpty": "D"}, {"notEmpty": "C"}]
        assert MessageResolver().compose(failure, layers) == ["default notEmpty", "D", "C"]

    def test_drops_empty_messages_without_deduplicating(self):
        failure = _failure("notEmpty", "email")
        layers = [{"notEmpty": "same", "email": ""}, {"notEmpty": "same"}]
        assert MessageResolver().compose(failure, layers) == ["same", "same"]

    def test_override_mode_keeps_one_message_per_identifier(self):
        failure = _failure("notEmpty", "email")
        layers = [
            failure.default_templates(),
            {"email": "bad email"},
            {"notEmpty": "required"},
        ]
        resolver = MessageResolver(MessageMergeMode.OVERRIDE)
        assert resolver.compose(failure, layers) == ["required", "bad email"]

    def test_override_mode_can_silence_a_message(self):
        failure = _failure("notEmpty", "email")
        layers = [failure.default_templates(), {"email": ""}]
        resolver = MessageResolver(MessageMergeMode.OVERRIDE)
        assert resolver.compose(failure, layers) == ["default notEmpty"]
