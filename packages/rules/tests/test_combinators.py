"""Tests for combinators and presence wrappers."""

import pytest

from ruleknobs_rules import (
    all_of,
    any_of,
    equals,
    maximum,
    minimum,
    optional,
    required,
    string_type,
)


def recording_rule(calls, name, message=None):
    """Rule that records its invocation and returns a fixed result."""

    def rule(value, field):
        calls.append(name)
        return message

    return rule


class TestAllOf:
    """Test sequential AND composition."""

    def test_username_bounds(self):
        rule = all_of(string_type(), minimum(4), maximum(10))
        assert rule("a", "username") == "username must be at least 4 characters"
        assert rule("toolongusername", "username") == "username must be at most 10 characters"
        assert rule("validUser", "username") is None

    def test_stops_at_first_failure(self):
        calls = []
        rule = all_of(
            recording_rule(calls, "first"),
            recording_rule(calls, "second", "second failed"),
            recording_rule(calls, "third", "third failed"),
        )
        assert rule("x", "field") == "second failed"
        assert calls == ["first", "second"]

    def test_empty_passes(self):
        assert all_of()("anything", "field") is None


class TestAnyOf:
    """Test eager OR composition."""

    def test_grade_choices(self):
        rule = any_of(equals("A"), equals("B"))
        assert rule("A", "grade") is None
        assert rule("B", "grade") is None
        assert rule("C", "grade") == "grade is invalid"

    def test_reports_first_branch_message(self):
        rule = any_of(
            equals("A", "not A"),
            equals("B", "not B"),
            equals("C", "not C"),
        )
        assert rule("D", "grade") == "not A"

    def test_evaluates_every_branch(self):
        calls = []
        rule = any_of(
            recording_rule(calls, "first"),
            recording_rule(calls, "second", "second failed"),
            recording_rule(calls, "third"),
        )
        assert rule("x", "field") is None
        assert calls == ["first", "second", "third"]

    def test_failing_first_branch_reported_after_later_failures(self):
        calls = []
        rule = any_of(
            recording_rule(calls, "first", "first failed"),
            recording_rule(calls, "second", "second failed"),
        )
        assert rule("x", "field") == "first failed"
        assert calls == ["first", "second"]

    def test_empty_passes(self):
        assert any_of()("anything", "field") is None

    def test_empty_message_branch_does_not_pass(self):
        rule = any_of(equals("A", message=""), equals("B"))
        assert rule("C", "grade") == "grade is invalid"
        assert rule("A", "grade") is None
        assert rule("B", "grade") is None

    def test_only_empty_messages_pass(self):
        rule = any_of(equals("A", message=""), equals("B", message=""))
        assert rule("C", "grade") is None

    def test_nested_in_all_of(self):
        rule = all_of(string_type(), any_of(equals("free"), equals("pro")))
        assert rule(1, "plan") == "plan must be a string"
        assert rule("team", "plan") == "plan is invalid"
        assert rule("pro", "plan") is None


class TestRequired:
    """Test the required presence wrapper."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_values_fail(self, value):
        rules = required(string_type())
        assert rules[0](value, "name") == "name is required"

    def test_presence_check_comes_first(self):
        rules = required(string_type(), minimum(2))
        assert len(rules) == 3
        assert rules[0]("x", "name") is None
        assert rules[1]("x", "name") is None
        assert rules[2]("x", "name") == "name must be at least 2 characters"

    def test_falsy_present_values_are_present(self):
        rules = required()
        assert rules[0](0, "count") is None
        assert rules[0](False, "flag") is None
        assert rules[0]([], "tags") is None


class TestOptional:
    """Test the optional presence wrapper."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_values_skip_rules(self, value):
        calls = []
        rules = optional(recording_rule(calls, "inner", "inner failed"))
        assert len(rules) == 1
        assert rules[0](value, "nickname") is None
        assert calls == []

    def test_present_values_run_rules(self):
        rules = optional(string_type(), minimum(3))
        assert rules[0]("ab", "nickname") == "nickname must be at least 3 characters"
        assert rules[0](5, "nickname") == "nickname must be a string"
        assert rules[0]("abc", "nickname") is None
