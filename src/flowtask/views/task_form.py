# src/flowtask/views/task_form.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from ..core.errors import ValidationError
from ..lists.list_models import TaskList
from ..tasks.task_models import Priority, Task, TaskDraft, TaskPatch
from .task_view import ALL_LISTS

TITLE_REQUIRED = "Task title is required"


def default_list_id(selected_list: str, lists: Sequence[TaskList]) -> str:
    """Selected list, or the first list when viewing "all" (empty if there are none)."""
    if selected_list and selected_list != ALL_LISTS:
        return selected_list
    return lists[0].id if lists else ""


@dataclass(slots=True)
class TaskForm:
    """
    Editable task fields as a front end holds them.

    Title emptiness is checked here, at the caller boundary; the services
    accept whatever they are given.
    """

    title: str = ""
    description: str = ""
    list_id: str = ""
    priority: Priority = Priority.MEDIUM
    due_date: date | None = None

    @classmethod
    def blank(cls, selected_list: str, lists: Sequence[TaskList]) -> TaskForm:
        return cls(list_id=default_list_id(selected_list, lists))

    @classmethod
    def from_task(cls, task: Task) -> TaskForm:
        return cls(
            title=task.title or "",
            description=task.description or "",
            list_id=task.list_id or "",
            priority=task.priority or Priority.MEDIUM,
            due_date=task.due_date,
        )

    def validate(self) -> None:
        if not self.title.strip():
            raise ValidationError(TITLE_REQUIRED)

    def to_draft(self) -> TaskDraft:
        self.validate()
        return TaskDraft(
            title=self.title,
            list_id=self.list_id,
            description=self.description,
            priority=self.priority,
            due_date=self.due_date,
            completed=False,
            archived=False,
        )

    def to_patch(self) -> TaskPatch:
        self.validate()
        return TaskPatch(
            title=self.title,
            description=self.description,
            list_id=self.list_id,
            priority=self.priority,
            due_date=self.due_date,
        )
