"""Error message formatting shared by all rule factories.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Union

MessageOverride = Union[str, Callable[[Any], str]]


def format_message(default: str, value: Any, override: MessageOverride | None = None) -> str:
    """Resolve the message reported by a failing rule.

    A callable override is invoked with the offending value and its return
    value is used. A string override is used verbatim. Without an override
    the default message is returned.

    Args:
        default: Default message, already interpolated with the field name
        value: The value that failed the rule
        override: Optional caller-supplied replacement

    Returns:
        The message to report
    """
    if callable(override):
        return override(value)
    if override is not None:
        return override
    return default
