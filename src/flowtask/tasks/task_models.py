# src/flowtask/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import date, datetime
from enum import StrEnum
from typing import Any

from ..core.fields import UNSET, format_date, format_datetime, parse_date, parse_datetime


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_raw(cls, raw: str | None) -> Priority:
        if not raw:
            return cls.MEDIUM
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.MEDIUM


def _flag(raw: Mapping[str, Any], key: str) -> bool:
    # JSON booleans only: the string "false" must not read as True.
    value = raw.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be a boolean, got {value!r}")
    return value


@dataclass(slots=True)
class Task:
    id: str
    title: str
    list_id: str

    description: str = ""
    priority: Priority = Priority.MEDIUM
    due_date: date | None = None

    completed: bool = False
    archived: bool = False

    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping with the camelCase keys used by the seed files."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "listId": self.list_id,
            "priority": self.priority.value,
            "dueDate": format_date(self.due_date),
            "completed": self.completed,
            "archived": self.archived,
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Task:
        return cls(
            id=str(raw["id"]),
            title=str(raw.get("title") or ""),
            list_id=str(raw.get("listId") or ""),
            description=str(raw.get("description") or ""),
            priority=Priority.from_raw(raw.get("priority")),
            due_date=parse_date(raw.get("dueDate")),
            completed=_flag(raw, "completed"),
            archived=_flag(raw, "archived"),
            created_at=parse_datetime(raw.get("createdAt")),
            updated_at=parse_datetime(raw.get("updatedAt")),
        )


@dataclass(slots=True)
class TaskDraft:
    """
    Caller-supplied fields for TaskService.create.

    The service adds id and timestamps only; completed/archived come from here.
    """

    title: str
    list_id: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    due_date: date | None = None
    completed: bool = False
    archived: bool = False


@dataclass(slots=True)
class TaskPatch:
    """
    Partial update for a task. Fields left as UNSET keep their stored value.

    due_date=None clears the due date; due_date=UNSET leaves it alone.
    """

    title: Any = UNSET
    description: Any = UNSET
    list_id: Any = UNSET
    priority: Any = UNSET
    due_date: Any = UNSET
    completed: Any = UNSET
    archived: Any = UNSET

    def changes(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}

    def is_empty(self) -> bool:
        return not self.changes()
