# src/flowtask/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..lists.list_service import ListService
from ..tasks.task_service import TaskService
from ..views.task_view import TaskFilter


@dataclass
class AppState:
    """
    Everything a front end needs, wired once by the composition root.

    Services are owned here and passed explicitly; there is no module-level instance.
    """

    settings: Any
    tasks: TaskService
    lists: ListService

    view: TaskFilter = field(default_factory=TaskFilter)
