"""Exceptions raised by the rules package.

Built on the common exception framework from ruleknobs_common.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ruleknobs_common import ConfigurationError, ValidationError

if TYPE_CHECKING:
    from .result import FieldError


class SchemaDefinitionError(ValidationError):
    """Raised when a schema mapping is malformed."""

    pass


class RuleConfigurationError(ConfigurationError):
    """Raised when a rule entry in configuration cannot be built."""

    pass


class RecordValidationError(ValidationError):
    """Raised on request when a record fails validation.

    Attributes:
        errors: The field errors of the failed validation
    """

    def __init__(self, errors: list[FieldError], schema_name: str | None = None):
        self.errors = list(errors)
        summary = "; ".join(error.message for error in self.errors)
        prefix = f"Record failed schema '{schema_name}'" if schema_name else "Record failed validation"
        context: dict = {"errors": [error.to_dict() for error in self.errors]}
        if schema_name:
            context["schema"] = schema_name
        super().__init__(f"{prefix}: {summary}", context=context)
