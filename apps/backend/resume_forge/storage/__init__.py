from resume_forge.core import settings

from .base import KeyValueStore
from .exceptions import StorageError
from .file import JsonFileStore
from .memory import MemoryStore


def get_store(backend: str | None = None, path: str | None = None) -> KeyValueStore:
    """Build the store named by settings.STORE_BACKEND ("file" or "memory")."""
    backend = (backend or settings.STORE_BACKEND).lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "file":
        return JsonFileStore(path or settings.STORE_PATH)
    raise ValueError(f"Unsupported store backend: {backend}")


__all__ = ["KeyValueStore", "StorageError", "JsonFileStore", "MemoryStore", "get_store"]
