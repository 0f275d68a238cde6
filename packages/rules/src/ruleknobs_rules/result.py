"""Validation result types.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import RecordValidationError


@dataclass(frozen=True)
class FieldError:
    """A single validation failure for one field."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    """Outcome of validating one record against a schema.

    Exactly one of ``data`` and ``errors`` is populated: a valid result
    carries the record, an invalid one carries a non-empty error list.
    Use :meth:`success` and :meth:`failure` rather than the constructor.
    """

    valid: bool
    data: Mapping[str, Any] | None = None
    errors: list[FieldError] | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @classmethod
    def success(cls, data: Mapping[str, Any]) -> ValidationResult:
        """Create a successful result carrying the validated record.

        Args:
            data: The record, passed through unchanged

        Returns:
            Successful ValidationResult
        """
        return cls(valid=True, data=data, errors=None)

    @classmethod
    def failure(cls, errors: list[FieldError]) -> ValidationResult:
        """Create a failed result.

        Args:
            errors: Field errors in schema order

        Returns:
            Failed ValidationResult

        Raises:
            ValueError: If errors is empty
        """
        if not errors:
            raise ValueError("A failed validation result requires at least one error")
        return cls(valid=False, data=None, errors=list(errors))

    def errors_by_field(self) -> dict[str, str]:
        """Map each failing field to its message."""
        return {error.field: error.message for error in self.errors or []}

    def raise_for_errors(self, schema_name: str | None = None) -> Mapping[str, Any]:
        """Return the validated record, or raise if validation failed.

        Raises:
            RecordValidationError: If the result is invalid
        """
        if not self.valid:
            raise RecordValidationError(self.errors or [], schema_name=schema_name)
        return self.data  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        """Render the result in its wire shape.

        Returns:
            ``{"valid": True, "data": ...}`` or
            ``{"valid": False, "errors": [{"field": ..., "message": ...}]}``
        """
        if self.valid:
            return {"valid": True, "data": self.data}
        return {"valid": False, "errors": [error.to_dict() for error in self.errors or []]}
