"""Schema evaluation: run each field's rule list against a record.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .combinators import run_rules
from .exceptions import SchemaDefinitionError
from .result import FieldError, ValidationResult
from .rules import Rule

logger = logging.getLogger(__name__)


class Schema:
    """Compiled schema mapping field names to rule lists.

    A schema is a reusable validation function: call it (or its
    :meth:`validate` method) with a record mapping. Fields are checked in
    declaration order. Within a field the first failing rule wins; across
    fields every failure is collected.

    Instances hold no mutable state and may be shared between threads.
    """

    def __init__(self, rules: Mapping[str, Iterable[Rule] | Rule], name: str | None = None):
        """Initialize schema.

        Args:
            rules: Mapping of field name to rule list (or a single rule)
            name: Optional schema name used in logs and raised errors

        Raises:
            SchemaDefinitionError: If the mapping is malformed
        """
        self.name = name
        self._rules: dict[str, tuple[Rule, ...]] = _compile(rules)
        logger.debug(f"Built schema {name or '<anonymous>'} with {len(self._rules)} fields")

    @property
    def fields(self) -> tuple[str, ...]:
        """Field names in evaluation order."""
        return tuple(self._rules)

    def validate(self, record: Mapping[str, Any]) -> ValidationResult:
        """Validate a record against this schema.

        Args:
            record: Mapping to validate. Missing keys read as ``None``.

        Returns:
            Successful result carrying ``record`` unchanged, or a failed
            result with one error per failing field
        """
        errors: list[FieldError] = []

        for field_name, field_rules in self._rules.items():
            message = run_rules(field_rules, record.get(field_name), field_name)
            if message:
                errors.append(FieldError(field=field_name, message=message))

        if errors:
            logger.debug(
                f"Record failed schema {self.name or '<anonymous>'} with {len(errors)} errors"
            )
            return ValidationResult.failure(errors)
        return ValidationResult.success(record)

    __call__ = validate

    def validate_many(
        self,
        records: Iterable[Mapping[str, Any]],
        stop_on_error: bool = False,
    ) -> list[ValidationResult]:
        """Validate multiple records.

        Args:
            records: Records to validate
            stop_on_error: If True, stop after the first invalid record

        Returns:
            List of ValidationResults, in input order
        """
        results = []
        for record in records:
            result = self.validate(record)
            results.append(result)
            if not result.valid and stop_on_error:
                break
        return results

    def assert_valid(self, record: Mapping[str, Any]) -> Mapping[str, Any]:
        """Validate a record and return it, raising on failure.

        Raises:
            RecordValidationError: If the record is invalid
        """
        return self.validate(record).raise_for_errors(schema_name=self.name)

    def __repr__(self) -> str:
        return f"Schema(name={self.name!r}, fields={list(self._rules)})"


def _compile(rules: Mapping[str, Iterable[Rule] | Rule]) -> dict[str, tuple[Rule, ...]]:
    if not isinstance(rules, Mapping):
        raise SchemaDefinitionError(
            "Schema must be a mapping of field names to rule lists",
            context={"got": type(rules).__name__},
        )

    compiled: dict[str, tuple[Rule, ...]] = {}
    for field_name, field_rules in rules.items():
        if not isinstance(field_name, str):
            raise SchemaDefinitionError(
                f"Field names must be strings, got {type(field_name).__name__}",
                context={"field": repr(field_name)},
            )
        if callable(field_rules):
            field_rules = [field_rules]
        if not isinstance(field_rules, (list, tuple)):
            raise SchemaDefinitionError(
                f"Rules for field '{field_name}' must be a list",
                context={"field": field_name, "got": type(field_rules).__name__},
            )
        for position, rule in enumerate(field_rules):
            if not callable(rule):
                raise SchemaDefinitionError(
                    f"Rule {position} for field '{field_name}' is not callable",
                    context={"field": field_name, "position": position},
                )
        compiled[field_name] = tuple(field_rules)
    return compiled


def schema(rules: Mapping[str, Iterable[Rule] | Rule], name: str | None = None) -> Schema:
    """Build a reusable validation function from a field-to-rules mapping.

    Example:
        ```python
        validate = schema({
            "username": required(string_type(), minimum(4), maximum(10)),
            "email": optional(email()),
        })
        result = validate({"username": "validUser"})
        result.valid   # True
        ```
    """
    return Schema(rules, name=name)
