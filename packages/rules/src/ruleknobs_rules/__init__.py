"""Declarative record validation.

Rules are plain callables ``(value, field_name) -> message | None``. Rule
factories build the common ones, combinators compose them, and a schema
maps field names to rule lists and validates records:

- Rule factories: ``string_type``, ``number_type``, ``boolean_type``,
  ``minimum``, ``maximum``, ``equals``, ``not_equals``, ``pattern``, ``email``
- Combinators: ``all_of``, ``any_of``
- Presence wrappers: ``required``, ``optional``
- Evaluation: ``schema`` returning a callable ``Schema``
- Configuration: ``SchemaFactory``, ``load_schema``, ``register_rule``

Example:
    ```python
    from ruleknobs_rules import schema, required, optional, string_type, email

    validate = schema({
        "name": required(string_type()),
        "email": optional(email()),
    })
    validate({"name": 123}).errors
    # [FieldError(field='name', message='name must be a string')]
    ```
"""

from .combinators import all_of, any_of, optional, required
from .exceptions import RecordValidationError, RuleConfigurationError, SchemaDefinitionError
from .factory import RuleRegistry, SchemaFactory, load_schema, register_rule, rule_registry, schema_factory
from .messages import MessageOverride, format_message
from .result import FieldError, ValidationResult
from .rules import (
    Rule,
    RuleList,
    boolean_type,
    email,
    equals,
    maximum,
    minimum,
    not_equals,
    number_type,
    pattern,
    string_type,
)
from .schema import Schema, schema

__version__ = "0.1.0"

__all__ = [
    # Types
    "Rule",
    "RuleList",
    "MessageOverride",
    # Rule factories
    "string_type",
    "number_type",
    "boolean_type",
    "minimum",
    "maximum",
    "equals",
    "not_equals",
    "pattern",
    "email",
    "format_message",
    # Combinators
    "all_of",
    "any_of",
    "required",
    "optional",
    # Schema and results
    "Schema",
    "schema",
    "ValidationResult",
    "FieldError",
    # Exceptions
    "SchemaDefinitionError",
    "RecordValidationError",
    "RuleConfigurationError",
    # Configuration
    "RuleRegistry",
    "SchemaFactory",
    "load_schema",
    "register_rule",
    "rule_registry",
    "schema_factory",
]
