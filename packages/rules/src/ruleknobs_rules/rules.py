"""Rule factories for common value checks.

A rule is any callable taking ``(value, field_name)`` and returning an error
message, or ``None`` when the value passes. Every factory below accepts an
optional message override (a string, or a callable receiving the value).

Example:
    ```python
    rule = minimum(4, message="too short")
    rule("abc", "username")   # 'too short'
    rule("abcd", "username")  # None
    ```
"""

from __future__ import annotations

import re
from collections.abc import Callable
from numbers import Real
from re import Pattern as RegexPattern
from typing import Any, Optional

from .messages import MessageOverride, format_message

Rule = Callable[[Any, str], Optional[str]]
RuleList = list[Rule]

EMAIL_REGEX = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def _is_number(value: Any) -> bool:
    # bool is a subclass of int but is not a number here
    return isinstance(value, Real) and not isinstance(value, bool)


def _strictly_equal(left: Any, right: Any) -> bool:
    """Compare without cross-type coercion between booleans and numbers."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    return bool(left == right)


def _format_bound(n: Real | int) -> str:
    # 4.0 renders as "4"
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def _measure(value: Any) -> tuple[Real | int, str] | None:
    """Return the quantity bounded by minimum/maximum and the unit suffix.

    Strings are measured by length, numbers by value. Anything else is not
    measured.
    """
    if isinstance(value, str):
        return len(value), " characters"
    if _is_number(value):
        return value, ""
    return None


def string_type(message: MessageOverride | None = None) -> Rule:
    """Value must be a string."""

    def check(value: Any, field: str) -> str | None:
        if not isinstance(value, str):
            return format_message(f"{field} must be a string", value, message)
        return None

    return check


def number_type(message: MessageOverride | None = None) -> Rule:
    """Value must be a real number (booleans are rejected)."""

    def check(value: Any, field: str) -> str | None:
        if not _is_number(value):
            return format_message(f"{field} must be a number", value, message)
        return None

    return check


def boolean_type(message: MessageOverride | None = None) -> Rule:
    """Value must be a boolean."""

    def check(value: Any, field: str) -> str | None:
        if not isinstance(value, bool):
            return format_message(f"{field} must be a boolean", value, message)
        return None

    return check


def minimum(n: Real | int, message: MessageOverride | None = None) -> Rule:
    """String length or numeric value must be at least ``n``.

    Values that are neither strings nor numbers always pass.

    Args:
        n: Inclusive lower bound
        message: Optional message override

    Returns:
        Rule enforcing the bound
    """

    def check(value: Any, field: str) -> str | None:
        measured = _measure(value)
        if measured is None:
            return None
        quantity, unit = measured
        if quantity < n:
            return format_message(f"{field} must be at least {_format_bound(n)}{unit}", value, message)
        return None

    return check


def maximum(n: Real | int, message: MessageOverride | None = None) -> Rule:
    """String length or numeric value must be at most ``n``.

    Values that are neither strings nor numbers always pass.

    Args:
        n: Inclusive upper bound
        message: Optional message override

    Returns:
        Rule enforcing the bound
    """

    def check(value: Any, field: str) -> str | None:
        measured = _measure(value)
        if measured is None:
            return None
        quantity, unit = measured
        if quantity > n:
            return format_message(f"{field} must be at most {_format_bound(n)}{unit}", value, message)
        return None

    return check


def equals(expected: Any, message: MessageOverride | None = None) -> Rule:
    """Value must strictly equal ``expected``."""

    def check(value: Any, field: str) -> str | None:
        if not _strictly_equal(value, expected):
            return format_message(f"{field} is invalid", value, message)
        return None

    return check


def not_equals(rejected: Any, message: MessageOverride | None = None) -> Rule:
    """Value must not strictly equal ``rejected``."""

    def check(value: Any, field: str) -> str | None:
        if _strictly_equal(value, rejected):
            return format_message(f"{field} is invalid", value, message)
        return None

    return check


def pattern(regex: str | RegexPattern[str], message: MessageOverride | None = None) -> Rule:
    """String values must contain a match for ``regex``.

    The pattern is searched anywhere in the string; anchor it with ``^``/``$``
    to require a full match. Non-string values pass.

    Args:
        regex: Regex pattern (string or compiled pattern)
        message: Optional message override

    Returns:
        Rule enforcing the pattern
    """
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def check(value: Any, field: str) -> str | None:
        if isinstance(value, str) and not compiled.search(value):
            return format_message(f"{field} is invalid", value, message)
        return None

    return check


def email(message: MessageOverride | None = None) -> Rule:
    """String values must look like ``local@domain.tld``.

    This is a loose shape check: no whitespace or extra ``@`` in either part
    and at least one dot after the ``@``. Non-string values pass.
    """

    def check(value: Any, field: str) -> str | None:
        if isinstance(value, str) and not EMAIL_REGEX.fullmatch(value):
            return format_message(f"{field} must be a valid email", value, message)
        return None

    return check
