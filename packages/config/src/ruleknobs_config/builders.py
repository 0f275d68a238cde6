"""Factory base for objects declared in configuration files."""

from typing import Any


class FactoryBase:
    """Base class for factories that turn a configuration mapping into an object.

    Subclasses implement :meth:`create`; the keys of a loaded configuration
    file are passed as keyword arguments, e.g.
    ``SchemaFactory().create(**load_config("signup.yaml"))``.
    """

    def create(self, **config: Any) -> Any:
        """Create an object from configuration.

        Args:
            **config: Configuration parameters

        Returns:
            Created object
        """
        raise NotImplementedError(f"{type(self).__name__} must implement create()")
