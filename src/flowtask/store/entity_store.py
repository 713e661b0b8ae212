# src/flowtask/store/entity_store.py

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator
from typing import Any, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)


class _Entity(Protocol):
    id: str


E = TypeVar("E", bound=_Entity)


class EntityStore(Generic[E]):
    """
    Ordered in-memory store of dataclass entities.

    - insertion order is the only ordering (no sorting)
    - every read and write goes through a copy, so callers never hold
      a reference to a stored record
    - ids are unique for the store's lifetime: a removed id is never accepted again
    """

    def __init__(self, name: str, seed: Iterable[E] = ()) -> None:
        self.name = name
        self._items: list[E] = [self._copy(e) for e in seed]
        ids = [e.id for e in self._items]
        if len(set(ids)) != len(ids):
            raise ValueError(f"{name} seed contains duplicate ids")
        # Every id ever held, removed ones included.
        self._issued: set[str] = set(ids)
        logger.info("EntityStore ready name=%s total=%d", name, len(self._items))

    @staticmethod
    def _copy(entity: E) -> E:
        return dataclasses.replace(entity)  # type: ignore[type-var]

    def _index_of(self, entity_id: str) -> int:
        for i, item in enumerate(self._items):
            if item.id == entity_id:
                return i
        return -1

    # ---- reads ----

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: Any) -> bool:
        return self._index_of(entity_id) != -1

    def __iter__(self) -> Iterator[E]:
        return iter(self.snapshot())

    def issued(self, entity_id: str) -> bool:
        """True if this id was ever held by the store (seeded, appended or since removed)."""
        return entity_id in self._issued

    def ids(self) -> list[str]:
        return [item.id for item in self._items]

    def snapshot(self) -> list[E]:
        return [self._copy(item) for item in self._items]

    def find(self, entity_id: str) -> E | None:
        idx = self._index_of(entity_id)
        return self._copy(self._items[idx]) if idx != -1 else None

    # ---- writes ----

    def append(self, entity: E) -> E:
        if entity.id in self._issued:
            raise ValueError(f"{self.name}: duplicate id {entity.id!r}")
        self._items.append(self._copy(entity))
        self._issued.add(entity.id)
        return self._copy(entity)

    def replace(self, entity_id: str, entity: E) -> bool:
        """Replace the record with this id in place (position is kept)."""
        idx = self._index_of(entity_id)
        if idx == -1:
            return False
        self._items[idx] = self._copy(entity)
        return True

    def remove(self, entity_id: str) -> bool:
        idx = self._index_of(entity_id)
        if idx == -1:
            return False
        del self._items[idx]
        return True
