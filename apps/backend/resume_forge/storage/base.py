from abc import ABC, abstractmethod
from typing import Any, Optional


class KeyValueStore(ABC):
    """
    Minimal persistence contract used for the master profile: values are
    JSON-compatible objects, absence is reported as None.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the value stored under `key`, or None when there is none."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store `value` under `key`, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove `key`. Deleting a missing key is not an error."""
