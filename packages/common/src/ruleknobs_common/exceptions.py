"""Common exception hierarchy for all ruleknobs packages.

Every ruleknobs package raises exceptions derived from :class:`RuleknobsError`.
Each exception may carry a context dictionary with structured information
about the failure (field names, config keys, offending values).

Example:
    ```python
    from ruleknobs_common.exceptions import ConfigurationError, RuleknobsError

    raise ConfigurationError(
        "Unknown rule type",
        context={"rule_type": "zipcode", "available": ["string", "email"]}
    )

    try:
        operation()
    except RuleknobsError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```

Note that a failing validation is *not* an exception: rules report failures
as messages collected into a result object. These exceptions cover malformed
definitions, bad configuration and callers who explicitly ask for a raise.
"""

from typing import Any, Dict


class RuleknobsError(Exception):
    """Base exception for all ruleknobs packages.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (both are supported)

    Example:
        ```python
        error = RuleknobsError("Operation failed", context={"field": "email"})
        str(error)
        # 'Operation failed'
        error.context
        # {'field': 'email'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (takes precedence over context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ValidationError(RuleknobsError):
    """Raised when data or a definition fails validation.

    Example:
        ```python
        raise ValidationError(
            "Rule list must be a list",
            context={"field": "email", "got": "str"}
        )
        ```
    """

    pass


class ConfigurationError(RuleknobsError):
    """Raised when configuration is invalid or missing.

    Example:
        ```python
        raise ConfigurationError(
            "Configuration file not found",
            context={"path": "schemas/user.yaml"}
        )
        ```
    """

    pass


class NotFoundError(RuleknobsError):
    """Raised when a requested item is not found."""

    pass


class OperationError(RuleknobsError):
    """Raised when an operation fails, e.g. a duplicate registration."""

    pass
