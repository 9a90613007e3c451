from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from utils.logging_setup import get_logger

logger = get_logger(__name__)


class LocalStore:
    """String key/value store kept in one JSON file, like browser localStorage.

    Every ``set``/``remove`` rewrites the file through a temp file and
    ``os.replace``, so a single key update is atomic on disk.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._data: Dict[str, str] = self._read()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store %s: expected an object, got %s", self.path, type(data).__name__)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._write()

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._write()

    def __contains__(self, key: object) -> bool:
        return key in self._data


class MemoryStore(LocalStore):
    """Non-persistent store with the same interface; nothing touches disk."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.path = Path(os.devnull)
        self._data = dict(initial or {})

    def _write(self) -> None:
        pass
