# src/flowtask/lists/list_service.py

from __future__ import annotations

import dataclasses
import logging

from ..core.errors import NotFoundError
from ..core.fields import utc_now
from ..core.ports import Clock, IdFactory, Latency
from ..store.entity_store import EntityStore
from ..store.latency import FixedLatency
from ..tasks.task_service import new_id
from .list_models import ListDraft, ListPatch, TaskList

logger = logging.getLogger(__name__)


class ListService:
    """
    Async CRUD over the in-memory list store.

    Same contract as TaskService, except lists have no updated_at and
    task_count starts at 0 and is never touched afterwards.
    Deleting a list leaves tasks that reference it alone.
    """

    entity_name = "List"

    def __init__(
        self,
        store: EntityStore[TaskList],
        *,
        latency: Latency | None = None,
        clock: Clock = utc_now,
        id_factory: IdFactory = new_id,
    ) -> None:
        self._store = store
        self._latency = latency if latency is not None else FixedLatency()
        self._clock = clock
        self._new_id = id_factory

    def _allocate_id(self) -> str:
        list_id = self._new_id()
        while self._store.issued(list_id):
            logger.warning("List id collision id=%s, regenerating", list_id)
            list_id = self._new_id()
        return list_id

    async def get_all(self) -> list[TaskList]:
        await self._latency.wait()
        return self._store.snapshot()

    async def get_by_id(self, list_id: str) -> TaskList | None:
        await self._latency.wait()
        return self._store.find(list_id)

    async def create(self, draft: ListDraft) -> TaskList:
        await self._latency.wait()
        task_list = TaskList(
            id=self._allocate_id(),
            name=draft.name,
            color=draft.color,
            task_count=0,
            created_at=self._clock(),
        )
        created = self._store.append(task_list)
        logger.debug("List created id=%s name=%r", created.id, created.name)
        return created

    async def update(self, list_id: str, patch: ListPatch) -> TaskList:
        await self._latency.wait()
        current = self._store.find(list_id)
        if current is None:
            raise NotFoundError(self.entity_name, list_id)

        changes = patch.changes()
        updated = dataclasses.replace(current, **changes)
        self._store.replace(list_id, updated)
        logger.debug("List updated id=%s fields=%s", list_id, sorted(changes))
        return dataclasses.replace(updated)

    async def delete(self, list_id: str) -> bool:
        await self._latency.wait()
        if not self._store.remove(list_id):
            raise NotFoundError(self.entity_name, list_id)
        logger.debug("List deleted id=%s", list_id)
        return True
