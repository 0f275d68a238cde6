"""Configuration file loading with environment variable substitution.

Supports YAML (``.yaml``/``.yml``) and JSON (``.json``) files. String values
may reference environment variables:

- ``${VAR_NAME}``: required variable, raises if not set
- ``${VAR_NAME:default}``: optional with default

Example:
    ```yaml
    # schemas/signup.yaml
    name: signup
    fields:
      - name: username
        required: true
        rules:
          - type: pattern
            pattern: ${USERNAME_PATTERN:^[a-z0-9_]+$}
    ```

    ```python
    config = load_config("schemas/signup.yaml")
    ```
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from ruleknobs_common.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_ENV_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


def substitute_env_vars(data: Any) -> Any:
    """Recursively substitute environment variables in configuration.

    Args:
        data: Configuration data (dict, list, string, or primitive)

    Returns:
        Data with environment variables substituted

    Raises:
        ConfigurationError: If a required environment variable is not set

    Example:
        >>> os.environ["MY_VAR"] = "hello"
        >>> substitute_env_vars({"key": "${MY_VAR}", "default": "${MISSING:world}"})
        {'key': 'hello', 'default': 'world'}
    """
    if isinstance(data, dict):
        return {k: substitute_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [substitute_env_vars(item) for item in data]
    elif isinstance(data, str):
        return _substitute_string(data)
    else:
        return data


def _substitute_string(value: str) -> str:
    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default_value = match.group(2)

        env_value = os.environ.get(var_name)

        if env_value is not None:
            return env_value
        elif default_value is not None:
            return default_value
        else:
            raise ConfigurationError(
                f"Required environment variable not set: {var_name}",
                context={"variable": var_name},
            )

    return _ENV_PATTERN.sub(replacer, value)


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a configuration file.

    Args:
        path: Path to a YAML or JSON file

    Returns:
        Configuration dictionary with environment variables substituted.
        An empty file yields an empty dictionary.

    Raises:
        ConfigurationError: If the file is missing, has an unsupported
            extension, cannot be parsed, or does not contain a mapping
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}",
            context={"path": str(path)},
        )

    suffix = path.suffix.lower()
    logger.debug(f"Loading configuration from {path}")

    try:
        with open(path, encoding="utf-8") as f:
            if suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            elif suffix == ".json":
                text = f.read()
                data = json.loads(text) if text.strip() else None
            else:
                raise ConfigurationError(
                    f"Unsupported configuration format: {suffix}",
                    context={"path": str(path), "supported": [".yaml", ".yml", ".json"]},
                )
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Failed to parse configuration file {path}: {e}",
            context={"path": str(path)},
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping: {path}",
            context={"path": str(path), "got": type(data).__name__},
        )

    return substitute_env_vars(data)
