import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Optional

from .base import KeyValueStore
from .exceptions import StorageError

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class JsonFileStore(KeyValueStore):
    """
    One pretty-printed `<key>.json` file per key under `root_dir`.
    Writes go to a temp file in the same directory and are renamed into place.
    """

    def __init__(self, root_dir: str | Path):
        self.root_dir = Path(root_dir)

    def _path(self, key: str) -> Path:
        return self.root_dir / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring undecodable store file {path}: {e}")
            return None
        except OSError as e:
            raise StorageError(f"Could not read {path}: {e}") from e

    def set(self, key: str, value: Any) -> None:
        path = self._path(key)
        temp_path = None
        try:
            self.root_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.root_dir, suffix=".tmp", delete=False
            ) as temp_file:
                temp_path = temp_file.name
                json.dump(value, temp_file, ensure_ascii=False, indent=2)
            os.replace(temp_path, path)
            logger.debug(f"Wrote store key '{key}' to {path}")
        except (OSError, TypeError, ValueError) as e:
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)
            raise StorageError(f"Could not write {path}: {e}") from e

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Could not delete key '{key}': {e}") from e
