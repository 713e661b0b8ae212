# src/flowtask/views/task_view.py

"""
Derived view state over the task/list snapshots.

Everything here is pure: it takes the lists returned by the services and
computes what a front end shows (filtered tasks, progress, sidebar counts,
labels). Nothing in this module calls a service.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date

from ..lists.list_models import TaskList
from ..tasks.task_models import Task

ALL_LISTS = "all"
UNKNOWN_LIST_NAME = "Unknown List"
UNKNOWN_LIST_COLOR = "gray"


@dataclass(slots=True)
class TaskFilter:
    selected_list: str = ALL_LISTS
    show_archived: bool = False
    search_query: str = ""

    def select_list(self, list_id: str) -> None:
        """Picking a list (or "all") always leaves the archive view."""
        self.selected_list = list_id or ALL_LISTS
        self.show_archived = False

    def select_archived(self) -> None:
        self.show_archived = True


def matches(task: Task, flt: TaskFilter) -> bool:
    if flt.show_archived != task.archived:
        return False
    if flt.selected_list != ALL_LISTS and task.list_id != flt.selected_list:
        return False
    query = flt.search_query.lower()
    if query and query not in (task.title or "").lower() and query not in (task.description or "").lower():
        return False
    return True


def filter_tasks(tasks: Iterable[Task], flt: TaskFilter) -> list[Task]:
    return [t for t in tasks if matches(t, flt)]


@dataclass(frozen=True, slots=True)
class ProgressSummary:
    completed: int
    total: int
    rate: int  # percent, 0..100


def summarize(tasks: Sequence[Task]) -> ProgressSummary:
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    # Half rounds up (JS Math.round), not to even.
    rate = math.floor(completed * 100 / total + 0.5) if total else 0
    return ProgressSummary(completed=completed, total=total, rate=rate)


@dataclass(frozen=True, slots=True)
class SidebarCounts:
    all: int
    archived: int
    per_list: dict[str, int] = field(default_factory=dict)


def sidebar_counts(tasks: Sequence[Task], lists: Sequence[TaskList]) -> SidebarCounts:
    active = [t for t in tasks if not t.archived]
    per_list = {lst.id: sum(1 for t in active if t.list_id == lst.id) for lst in lists}
    return SidebarCounts(
        all=len(active),
        archived=len(tasks) - len(active),
        per_list=per_list,
    )


def _find_list(lists: Iterable[TaskList], list_id: str) -> TaskList | None:
    return next((lst for lst in lists if lst.id == list_id), None)


def list_name(lists: Iterable[TaskList], list_id: str) -> str:
    lst = _find_list(lists, list_id)
    return lst.name if lst is not None and lst.name else UNKNOWN_LIST_NAME


def list_color(lists: Iterable[TaskList], list_id: str) -> str:
    lst = _find_list(lists, list_id)
    return lst.color if lst is not None and lst.color else UNKNOWN_LIST_COLOR


def view_title(flt: TaskFilter, lists: Iterable[TaskList]) -> str:
    if flt.show_archived:
        return "Archived Tasks"
    if flt.selected_list == ALL_LISTS:
        return "All Tasks"
    return list_name(lists, flt.selected_list)


def count_label(n: int, search_query: str = "") -> str:
    label = f"{n} task{'' if n == 1 else 's'}"
    if search_query:
        label += f' matching "{search_query}"'
    return label


def format_due(value: date | None) -> str:
    if value is None:
        return ""
    return f"{value:%b} {value.day}"
