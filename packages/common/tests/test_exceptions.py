"""Tests for the exception framework."""

import pytest

from ruleknobs_common.exceptions import (
    ConfigurationError,
    NotFoundError,
    OperationError,
    RuleknobsError,
    ValidationError,
)


class TestRuleknobsError:
    """Test the base RuleknobsError class."""

    def test_basic_exception(self):
        """Test basic exception without context."""
        error = RuleknobsError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.context == {}
        assert error.details == {}

    def test_exception_with_context(self):
        """Test exception with context dictionary."""
        error = RuleknobsError("Rule failed", context={"field": "email"})
        assert error.context == {"field": "email"}
        assert error.details is error.context

    def test_details_takes_precedence(self):
        """Test that details parameter takes precedence over context."""
        error = RuleknobsError(
            "Error",
            context={"key": "context_value"},
            details={"key": "details_value"},
        )
        assert error.context == {"key": "details_value"}


class TestExceptionHierarchy:
    """Test that package exceptions share the base class."""

    @pytest.mark.parametrize(
        "exc_class", [ValidationError, ConfigurationError, NotFoundError, OperationError]
    )
    def test_subclasses_caught_as_base(self, exc_class):
        with pytest.raises(RuleknobsError) as exc_info:
            raise exc_class("failed", context={"k": "v"})
        assert exc_info.value.context == {"k": "v"}
