# src/flowtask/views/actions.py

"""
User actions on top of the services.

Each action returns an ActionResult with a short user-facing message instead of
raising: domain failures (NotFoundError, ValidationError) are logged and reported,
and the store is left as it was. Unexpected exceptions still propagate.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from ..core.errors import FlowTaskError, ValidationError
from ..lists.list_models import ListDraft, ListPatch, TaskList
from ..lists.list_service import ListService
from ..tasks.task_models import Task
from ..tasks.task_service import TaskService
from .task_form import TaskForm

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ActionResult:
    ok: bool
    message: str
    item: Any | None = None


async def load_snapshot(tasks: TaskService, lists: ListService) -> tuple[list[Task], list[TaskList]]:
    """Fetch both collections concurrently (one latency wait, not two)."""
    all_tasks, all_lists = await asyncio.gather(tasks.get_all(), lists.get_all())
    return all_tasks, all_lists


async def submit_form(service: TaskService, form: TaskForm, *, editing_id: str | None = None) -> ActionResult:
    try:
        if editing_id is not None:
            task = await service.update(editing_id, form.to_patch())
            return ActionResult(True, "Task updated successfully", task)
        task = await service.create(form.to_draft())
        return ActionResult(True, "Task created successfully", task)
    except ValidationError as exc:
        return ActionResult(False, str(exc))
    except FlowTaskError:
        logger.warning("Failed to save task editing_id=%s", editing_id, exc_info=True)
        return ActionResult(False, "Failed to save task")


async def toggle_complete(service: TaskService, task: Task) -> ActionResult:
    try:
        updated = await service.set_completed(task.id, not task.completed)
    except FlowTaskError:
        logger.warning("Failed to toggle completion task_id=%s", task.id, exc_info=True)
        return ActionResult(False, "Failed to update task")
    return ActionResult(True, "Task completed!" if updated.completed else "Task marked incomplete", updated)


async def toggle_archive(service: TaskService, task: Task) -> ActionResult:
    try:
        updated = await service.set_archived(task.id, not task.archived)
    except FlowTaskError:
        logger.warning("Failed to toggle archive task_id=%s", task.id, exc_info=True)
        return ActionResult(False, "Failed to archive task")
    return ActionResult(True, "Task archived" if updated.archived else "Task restored", updated)


async def delete_task(service: TaskService, task_id: str) -> ActionResult:
    try:
        await service.delete(task_id)
    except FlowTaskError:
        logger.warning("Failed to delete task_id=%s", task_id, exc_info=True)
        return ActionResult(False, "Failed to delete task")
    return ActionResult(True, "Task deleted successfully")


async def create_list(service: ListService, name: str, color: str | None = None) -> ActionResult:
    name = (name or "").strip()
    if not name:
        return ActionResult(False, "List name is required")
    draft = ListDraft(name=name) if not color else ListDraft(name=name, color=color)
    created = await service.create(draft)
    return ActionResult(True, "List created successfully", created)


async def rename_list(service: ListService, list_id: str, name: str) -> ActionResult:
    name = (name or "").strip()
    if not name:
        return ActionResult(False, "List name is required")
    try:
        updated = await service.update(list_id, ListPatch(name=name))
    except FlowTaskError:
        logger.warning("Failed to rename list_id=%s", list_id, exc_info=True)
        return ActionResult(False, "Failed to update list")
    return ActionResult(True, "List updated successfully", updated)


async def delete_list(service: ListService, list_id: str) -> ActionResult:
    try:
        await service.delete(list_id)
    except FlowTaskError:
        logger.warning("Failed to delete list_id=%s", list_id, exc_info=True)
        return ActionResult(False, "Failed to delete list")
    return ActionResult(True, "List deleted successfully")
