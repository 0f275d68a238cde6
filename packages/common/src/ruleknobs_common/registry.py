"""Generic registry for managing named items.

Example:
    ```python
    from ruleknobs_common.registry import Registry

    registry = Registry[Callable]("validators")
    registry.register("zipcode", make_zipcode_rule)
    builder = registry.get("zipcode")
    ```
"""

import threading
from typing import Dict, Generic, List, TypeVar

from ruleknobs_common.exceptions import NotFoundError, OperationError

T = TypeVar("T")


class Registry(Generic[T]):
    """Thread-safe registry of items keyed by unique names.

    Args:
        name: Name for this registry instance (used in error context)
    """

    def __init__(self, name: str):
        self._name = name
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    def register(self, key: str, item: T, allow_overwrite: bool = False) -> None:
        """Register an item by key.

        Raises:
            OperationError: If the key is taken and allow_overwrite is False
        """
        with self._lock:
            if not allow_overwrite and key in self._items:
                raise OperationError(
                    f"Item '{key}' already registered in {self._name}",
                    context={"key": key, "registry": self._name},
                )
            self._items[key] = item

    def get(self, key: str) -> T:
        """Get an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={
                        "key": key,
                        "registry": self._name,
                        "available_keys": list(self._items),
                    },
                )
            return self._items[key]

    def list_keys(self) -> List[str]:
        """Registered keys in registration order."""
        with self._lock:
            return list(self._items)
