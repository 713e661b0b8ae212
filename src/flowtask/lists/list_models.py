# src/flowtask/lists/list_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from ..core.fields import UNSET, format_datetime, parse_datetime

DEFAULT_LIST_COLOR = "#5B4FE9"


@dataclass(slots=True)
class TaskList:
    id: str
    name: str
    color: str = DEFAULT_LIST_COLOR
    # Display-only: set to 0 on create, never recomputed. Live counts come from views.
    task_count: int = 0
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "taskCount": self.task_count,
            "createdAt": format_datetime(self.created_at),
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> TaskList:
        return cls(
            id=str(raw["id"]),
            name=str(raw.get("name") or ""),
            color=str(raw.get("color") or DEFAULT_LIST_COLOR),
            task_count=int(raw.get("taskCount") or 0),
            created_at=parse_datetime(raw.get("createdAt")),
        )


@dataclass(slots=True)
class ListDraft:
    name: str
    color: str = DEFAULT_LIST_COLOR


@dataclass(slots=True)
class ListPatch:
    name: Any = UNSET
    color: Any = UNSET

    def changes(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}

    def is_empty(self) -> bool:
        return not self.changes()
