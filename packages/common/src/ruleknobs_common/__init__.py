"""Common utilities and base classes for ruleknobs packages.

- **Exceptions**: Unified exception hierarchy with context support
- **Registry**: Generic registry pattern for managing named items
"""

from ruleknobs_common.exceptions import (
    ConfigurationError,
    NotFoundError,
    OperationError,
    RuleknobsError,
    ValidationError,
)
from ruleknobs_common.registry import Registry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Exceptions
    "RuleknobsError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
    # Registry
    "Registry",
]
