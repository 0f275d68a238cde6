"""Rule combinators and presence wrappers.

``all_of`` and ``any_of`` build a new rule from existing rules.
``required`` and ``optional`` build the rule list bound to a schema field,
deciding whether an absent value (``None`` or ``""``) is itself an error.
"""

from __future__ import annotations

from typing import Any

from .rules import Rule, RuleList


def is_absent(value: Any) -> bool:
    """Missing keys, ``None`` and the empty string all count as absent."""
    return value is None or (isinstance(value, str) and value == "")


def run_rules(rules: tuple[Rule, ...] | list[Rule], value: Any, field: str) -> str | None:
    """Run rules in order and return the first failure message, if any."""
    for rule in rules:
        message = rule(value, field)
        if message:
            return message
    return None


def all_of(*rules: Rule) -> Rule:
    """Combine rules with AND: the first failing rule's message is reported."""
    chain = tuple(rules)

    def check(value: Any, field: str) -> str | None:
        return run_rules(chain, value, field)

    return check


def any_of(*rules: Rule) -> Rule:
    """Combine rules with OR: at least one rule must pass.

    Every rule is evaluated, even after one has passed. A branch passes only
    when it returns ``None``. When none pass, the first non-empty message in
    declaration order is reported.
    """
    branches = tuple(rules)

    def check(value: Any, field: str) -> str | None:
        messages = [rule(value, field) for rule in branches]
        if any(message is None for message in messages):
            return None
        return next((message for message in messages if message), None)

    return check


def required(*rules: Rule) -> RuleList:
    """Rule list that fails with ``"<field> is required"`` on absent values.

    The presence check comes first, so ``rules`` only run for present values.
    """

    def presence(value: Any, field: str) -> str | None:
        if is_absent(value):
            return f"{field} is required"
        return None

    return [presence, *rules]


def optional(*rules: Rule) -> RuleList:
    """Rule list that accepts absent values and checks present ones."""
    inner = tuple(rules)

    def check(value: Any, field: str) -> str | None:
        if is_absent(value):
            return None
        return run_rules(inner, value, field)

    return [check]
