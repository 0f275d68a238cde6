"""Build schemas from configuration."""

import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ruleknobs_common import NotFoundError, Registry
from ruleknobs_config import FactoryBase, load_config

from .combinators import all_of, any_of, optional, required
from .exceptions import RuleConfigurationError
from .rules import (
    Rule,
    boolean_type,
    email,
    equals,
    maximum,
    minimum,
    not_equals,
    number_type,
    pattern as pattern_rule,
    string_type,
)
from .schema import Schema

logger = logging.getLogger(__name__)

RuleBuilder = Callable[..., Rule]


class RuleRegistry(Registry[RuleBuilder]):
    """Registry of rule builders keyed by the ``type`` used in configuration.

    A builder receives the rule entry's keys (other than ``type``) as keyword
    arguments and returns a rule. Entries with a nested ``rules`` list have
    it built first, so the builder receives a list of rules.
    """

    def __init__(self) -> None:
        super().__init__("rules")

    def register(self, key: str, item: RuleBuilder, allow_overwrite: bool = False) -> None:
        """Register a builder; rule type names are case-insensitive."""
        super().register(key.lower(), item, allow_overwrite=allow_overwrite)

    def get(self, key: str) -> RuleBuilder:
        return super().get(key.lower())


_FLAG_VALUES = {
    "true": True,
    "yes": True,
    "1": True,
    "false": False,
    "no": False,
    "0": False,
}


def _flag(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _FLAG_VALUES:
        # Values substituted from environment variables arrive as strings
        return _FLAG_VALUES[value.strip().lower()]
    raise RuleConfigurationError(
        f"Field '{field_name}' has a non-boolean 'required' value: {value!r}",
        context={"field": field_name, "value": value},
    )


def _number(value: Any, rule_type: str) -> int | float:
    if isinstance(value, bool):
        raise RuleConfigurationError(
            f"Rule '{rule_type}' requires a numeric value, got bool",
            context={"rule_type": rule_type, "value": value},
        )
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        # Values substituted from environment variables arrive as strings
        for convert in (int, float):
            try:
                return convert(value)
            except ValueError:
                continue
    raise RuleConfigurationError(
        f"Rule '{rule_type}' requires a numeric value, got {value!r}",
        context={"rule_type": rule_type, "value": value},
    )


def _build_minimum(value: Any, message: str | None = None) -> Rule:
    return minimum(_number(value, "minimum"), message)


def _build_maximum(value: Any, message: str | None = None) -> Rule:
    return maximum(_number(value, "maximum"), message)


def _build_pattern(pattern: str, flags: list[str] | None = None, message: str | None = None) -> Rule:
    combined = 0
    for flag_name in flags or []:
        flag = getattr(re, str(flag_name).upper(), None)
        if not isinstance(flag, re.RegexFlag):
            raise RuleConfigurationError(
                f"Unknown regex flag: {flag_name}",
                context={"rule_type": "pattern", "flag": flag_name},
            )
        combined |= flag
    try:
        compiled = re.compile(pattern, combined)
    except re.error as e:
        raise RuleConfigurationError(
            f"Invalid regex pattern {pattern!r}: {e}",
            context={"rule_type": "pattern", "pattern": pattern},
        ) from e
    return pattern_rule(compiled, message)


def _register_builtins(registry: RuleRegistry) -> None:
    registry.register("string", lambda message=None: string_type(message))
    registry.register("number", lambda message=None: number_type(message))
    registry.register("boolean", lambda message=None: boolean_type(message))
    registry.register("minimum", _build_minimum)
    registry.register("maximum", _build_maximum)
    registry.register("equals", lambda value, message=None: equals(value, message))
    registry.register("not_equals", lambda value, message=None: not_equals(value, message))
    registry.register("pattern", _build_pattern)
    registry.register("email", lambda message=None: email(message))
    registry.register("all_of", lambda rules: all_of(*rules))
    registry.register("any_of", lambda rules: any_of(*rules))


rule_registry = RuleRegistry()
_register_builtins(rule_registry)


def register_rule(name: str, builder: RuleBuilder, allow_overwrite: bool = False) -> None:
    """Make a custom rule available to configuration under ``name``.

    Example:
        ```python
        def build_zipcode(message=None):
            return pattern(r"^\\d{5}$", message or "invalid zipcode")

        register_rule("zipcode", build_zipcode)
        ```
    """
    rule_registry.register(name, builder, allow_overwrite=allow_overwrite)


class SchemaFactory(FactoryBase):
    """Factory for creating validation schemas from configuration.

    Configuration Options:
        name (str): Schema name
        fields (list | dict): Field definitions, in evaluation order

    Field Definition Options:
        name (str): Field name (list form only)
        required (bool): Whether absence is an error (default: False)
        rules (list): Rule entries, each with a ``type`` and its arguments

    Example Configuration:
        name: signup
        fields:
          - name: username
            required: true
            rules:
              - type: string
              - type: minimum
                value: 4
              - type: maximum
                value: 10
          - name: plan
            rules:
              - type: any_of
                rules:
                  - {type: equals, value: free}
                  - {type: equals, value: pro}
    """

    def __init__(self, registry: RuleRegistry | None = None):
        self.registry = registry if registry is not None else rule_registry

    def create(self, **config) -> Schema:
        """Create a Schema instance from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance

        Raises:
            RuleConfigurationError: If a field or rule entry is unusable
        """
        name = config.get("name")
        logger.info(f"Creating schema: {name or '<anonymous>'}")

        mapping = {}
        for field_name, field_config in self._iter_fields(config.get("fields", [])):
            rules = self._build_rules(field_config.get("rules", []), field_name)
            wrap = required if _flag(field_config.get("required", False), field_name) else optional
            mapping[field_name] = wrap(*rules)

        return Schema(mapping, name=name)

    def _iter_fields(self, fields: Any):
        if isinstance(fields, dict):
            for field_name, field_config in fields.items():
                field_config = field_config or {}
                if not isinstance(field_config, dict):
                    raise RuleConfigurationError(
                        f"Definition of field '{field_name}' must be a mapping",
                        context={"field": field_name, "got": type(field_config).__name__},
                    )
                yield field_name, field_config
            return

        if not isinstance(fields, list):
            raise RuleConfigurationError(
                "Schema 'fields' must be a list or a mapping",
                context={"got": type(fields).__name__},
            )
        for position, field_config in enumerate(fields):
            field_name = field_config.get("name") if isinstance(field_config, dict) else None
            if not field_name:
                raise RuleConfigurationError(
                    f"Field definition {position} is missing 'name'",
                    context={"position": position},
                )
            yield field_name, field_config

    def _build_rules(self, entries: Any, field_name: str) -> list[Rule]:
        if not isinstance(entries, list):
            raise RuleConfigurationError(
                f"Rules for field '{field_name}' must be a list",
                context={"field": field_name, "got": type(entries).__name__},
            )
        return [self._build_rule(entry, field_name) for entry in entries]

    def _build_rule(self, entry: Any, field_name: str) -> Rule:
        if isinstance(entry, str):
            entry = {"type": entry}
        if not isinstance(entry, dict) or "type" not in entry:
            raise RuleConfigurationError(
                f"Rule entry for field '{field_name}' must be a mapping with a 'type'",
                context={"field": field_name, "entry": entry},
            )

        options = dict(entry)
        rule_type = str(options.pop("type")).lower()

        try:
            builder = self.registry.get(rule_type)
        except NotFoundError as e:
            raise RuleConfigurationError(
                f"Unknown rule type: {rule_type}",
                context={
                    "field": field_name,
                    "rule_type": rule_type,
                    "available": self.registry.list_keys(),
                },
            ) from e

        if "rules" in options:
            options["rules"] = self._build_rules(options["rules"], field_name)

        try:
            rule = builder(**options)
        except TypeError as e:
            raise RuleConfigurationError(
                f"Invalid arguments for rule '{rule_type}' on field '{field_name}': {e}",
                context={"field": field_name, "rule_type": rule_type, "options": sorted(options)},
            ) from e

        logger.debug(f"Built rule '{rule_type}' for field '{field_name}'")
        return rule


def load_schema(path: str | Path, registry: RuleRegistry | None = None) -> Schema:
    """Load a schema definition from a YAML or JSON file.

    Args:
        path: Path to the schema file
        registry: Optional rule registry (defaults to the shared one)

    Returns:
        Schema instance
    """
    config = load_config(path)
    return SchemaFactory(registry).create(**config)


# Create singleton instance for registration
schema_factory = SchemaFactory()
