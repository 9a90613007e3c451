from __future__ import annotations

import json
from typing import Callable, Iterator, List, Optional

from storage.local_store import LocalStore
from utils.logging_setup import get_logger

logger = get_logger(__name__)

FAVORITES_KEY = "favorites"


class FavoritesStore:
    """Alpha-3 codes the user has starred, persisted after every change.

    Codes are not checked against the loaded collection; a favorite may point
    at a country that is not currently loaded.
    """

    def __init__(
        self,
        store: LocalStore,
        key: str = FAVORITES_KEY,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self.store = store
        self.key = key
        self.notify = notify or logger.info
        # list rather than set: the stored order is the order favorites were added
        self._codes: List[str] = self._load()

    def _load(self) -> List[str]:
        raw = self.store.get(self.key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("Corrupt favorites under %r, starting empty: %s", self.key, e)
            return []
        if not isinstance(data, list):
            logger.warning("Favorites under %r is not a list, starting empty", self.key)
            return []
        return list(dict.fromkeys(str(c) for c in data))

    def _save(self) -> None:
        self.store.set(self.key, json.dumps(self._codes))

    def add(self, code: str) -> None:
        # a code already present is saved and announced again
        if code not in self._codes:
            self._codes.append(code)
        self._save()
        self.notify("Added to favorites")

    def remove(self, code: str) -> None:
        self._codes = [c for c in self._codes if c != code]
        self._save()
        self.notify("Removed from favorites")

    def toggle(self, code: str) -> bool:
        """Flip ``code`` and return whether it is a favorite afterwards."""
        if code in self._codes:
            self.remove(code)
            return False
        self.add(code)
        return True

    def is_favorite(self, code: str) -> bool:
        return code in self._codes

    @property
    def codes(self) -> List[str]:
        return list(self._codes)

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._codes))

    def __len__(self) -> int:
        return len(self._codes)
