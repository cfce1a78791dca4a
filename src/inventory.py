"""Owned Genre/Type selection.

The inventory is the only mutable state in the app. It loads the two owned
lists from a persistence capability when created and writes the affected
list back after every change.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from core import kb
from settings import OWNED_GENRES_KEY, OWNED_TYPES_KEY, SettingsStore

logger = logging.getLogger(__name__)

GENRES = "genres"
TYPES = "types"
KINDS = (GENRES, TYPES)

_KEYS = {GENRES: OWNED_GENRES_KEY, TYPES: OWNED_TYPES_KEY}


class Store(Protocol):
    def load(self, key: str) -> List[str]: ...

    def save(self, key: str, values: Iterable[str]) -> None: ...


def filter_items(items: Sequence[str], query: str) -> List[str]:
    """Case-insensitive substring search on the query as typed; empty keeps everything."""
    q = (query or "").lower()
    if not q:
        return list(items)
    return [it for it in items if q in it.lower()]


class Inventory:
    def __init__(
        self,
        store: Optional[Store] = None,
        universe_genres: Optional[Sequence[str]] = None,
        universe_types: Optional[Sequence[str]] = None,
    ) -> None:
        self._store = store if store is not None else SettingsStore()
        self._universe: Dict[str, List[str]] = {
            GENRES: list(universe_genres if universe_genres is not None else kb.all_genres()),
            TYPES: list(universe_types if universe_types is not None else kb.all_types()),
        }
        # dicts double as insertion-ordered sets
        self._owned: Dict[str, Dict[str, None]] = {}
        for kind in KINDS:
            loaded = self._store.load(_KEYS[kind])
            self._owned[kind] = dict.fromkeys(loaded)
            logger.debug("loaded %d owned %s", len(self._owned[kind]), kind)

    # ------------------------------------------------------------------
    @staticmethod
    def _check_kind(kind: str) -> str:
        if kind not in KINDS:
            raise ValueError(f"unknown inventory kind: {kind!r}")
        return kind

    def _save(self, kind: str) -> None:
        self._store.save(_KEYS[kind], list(self._owned[kind]))

    # ------------------------------------------------------------------
    def universe(self, kind: str) -> List[str]:
        return list(self._universe[self._check_kind(kind)])

    def owned(self, kind: str) -> List[str]:
        return list(self._owned[self._check_kind(kind)])

    @property
    def owned_genres(self) -> List[str]:
        return self.owned(GENRES)

    @property
    def owned_types(self) -> List[str]:
        return self.owned(TYPES)

    def owns(self, kind: str, value: str) -> bool:
        return value in self._owned[self._check_kind(kind)]

    def owns_genre(self, genre: str) -> bool:
        return self.owns(GENRES, genre)

    def owns_type(self, type_: str) -> bool:
        return self.owns(TYPES, type_)

    def total_owned(self) -> int:
        return sum(len(v) for v in self._owned.values())

    # ------------------------------------------------------------------
    def toggle(self, kind: str, value: str) -> bool:
        """Flip ownership of ``value``; returns the new state."""
        owned = self._owned[self._check_kind(kind)]
        if value in owned:
            del owned[value]
            now = False
        else:
            owned[value] = None
            now = True
        self._save(kind)
        return now

    def toggle_genre(self, genre: str) -> bool:
        return self.toggle(GENRES, genre)

    def toggle_type(self, type_: str) -> bool:
        return self.toggle(TYPES, type_)

    def set_owned(self, kind: str, values: Iterable[str]) -> None:
        self._owned[self._check_kind(kind)] = dict.fromkeys(values)
        self._save(kind)

    def select_all(self, kind: str) -> None:
        self.set_owned(kind, self._universe[self._check_kind(kind)])

    def clear_all(self, kind: str) -> None:
        self.set_owned(kind, [])
