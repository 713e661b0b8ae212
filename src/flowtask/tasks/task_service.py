# src/flowtask/tasks/task_service.py

from __future__ import annotations

import dataclasses
import logging
import uuid

from ..core.errors import NotFoundError
from ..core.fields import utc_now
from ..core.ports import Clock, IdFactory, Latency
from ..store.entity_store import EntityStore
from ..store.latency import FixedLatency
from .task_models import Priority, Task, TaskDraft, TaskPatch

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex


class TaskService:
    """
    Async CRUD over the in-memory task store.

    Contract:
    - every call awaits the latency strategy first, then touches the store
      without suspending again (so each call is atomic on the event loop)
    - returned tasks are copies; mutating them never affects the store
    - only update/delete can fail, with NotFoundError
    - no validation: an empty title is accepted here (the form checks it)
    """

    entity_name = "Task"

    def __init__(
        self,
        store: EntityStore[Task],
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
        task_id = self._new_id()
        while self._store.issued(task_id):
            logger.warning("Task id collision id=%s, regenerating", task_id)
            task_id = self._new_id()
        return task_id

    # ---- public API ----

    async def get_all(self) -> list[Task]:
        await self._latency.wait()
        return self._store.snapshot()

    async def get_by_id(self, task_id: str) -> Task | None:
        await self._latency.wait()
        return self._store.find(task_id)

    async def create(self, draft: TaskDraft) -> Task:
        await self._latency.wait()
        now = self._clock()
        task = Task(
            id=self._allocate_id(),
            title=draft.title,
            list_id=draft.list_id,
            description=draft.description,
            priority=Priority.from_raw(draft.priority),
            due_date=draft.due_date,
            completed=draft.completed,
            archived=draft.archived,
            created_at=now,
            updated_at=now,
        )
        created = self._store.append(task)
        logger.debug("Task created id=%s list_id=%s priority=%s", created.id, created.list_id, created.priority)
        return created

    async def update(self, task_id: str, patch: TaskPatch) -> Task:
        await self._latency.wait()
        current = self._store.find(task_id)
        if current is None:
            logger.debug("Task update miss id=%s", task_id)
            raise NotFoundError(self.entity_name, task_id)

        changes = patch.changes()
        if "priority" in changes:
            changes["priority"] = Priority.from_raw(changes["priority"])
        updated = dataclasses.replace(current, **changes, updated_at=self._clock())
        self._store.replace(task_id, updated)
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return dataclasses.replace(updated)

    async def delete(self, task_id: str) -> bool:
        await self._latency.wait()
        if not self._store.remove(task_id):
            logger.debug("Task delete miss id=%s", task_id)
            raise NotFoundError(self.entity_name, task_id)
        logger.debug("Task deleted id=%s", task_id)
        return True

    # ---- convenience ----

    async def set_completed(self, task_id: str, completed: bool) -> Task:
        return await self.update(task_id, TaskPatch(completed=bool(completed)))

    async def set_archived(self, task_id: str, archived: bool) -> Task:
        return await self.update(task_id, TaskPatch(archived=bool(archived)))
