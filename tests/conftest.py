# tests/conftest.py

from __future__ import annotations

from datetime import UTC, date, datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from flowtask.cli.bootstrap import create_initial_state
from flowtask.core.state import AppState
from flowtask.lists.list_models import TaskList
from flowtask.lists.list_service import ListService
from flowtask.store.entity_store import EntityStore
from flowtask.store.latency import NoLatency
from flowtask.tasks.task_models import Priority, Task
from flowtask.tasks.task_service import TaskService

from .fakes import CounterIds, FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and .env files.
    """
    return SimpleNamespace(
        app_name="FlowTask",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        latency_ms=0,
        tasks_seed_path=None,
        lists_seed_path=None,
        console_enabled=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def ids() -> CounterIds:
    return CounterIds()


@pytest.fixture()
def seed_lists() -> list[TaskList]:
    created = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)
    return [
        TaskList(id="l1", name="Personal", color="#5B4FE9", created_at=created),
        TaskList(id="l2", name="Work", color="#FF6B6B", created_at=created),
    ]


@pytest.fixture()
def seed_tasks() -> list[Task]:
    created = datetime(2024, 1, 2, 9, 0, tzinfo=UTC)
    return [
        Task(
            id="1",
            title="Buy milk",
            list_id="l1",
            priority=Priority.LOW,
        ),
        Task(
            id="2",
            title="Write report",
            list_id="l2",
            description="Quarterly numbers for the board",
            priority=Priority.HIGH,
            due_date=date(2024, 1, 15),
            created_at=created,
            updated_at=created,
        ),
        Task(
            id="3",
            title="Old invoice",
            list_id="l2",
            completed=True,
            archived=True,
            created_at=created,
            updated_at=created,
        ),
    ]


@pytest.fixture()
def task_service(seed_tasks: list[Task], clock: FakeClock, ids: CounterIds) -> TaskService:
    return TaskService(EntityStore("tasks", seed_tasks), latency=NoLatency(), clock=clock, id_factory=ids)


@pytest.fixture()
def list_service(seed_lists: list[TaskList], clock: FakeClock, ids: CounterIds) -> ListService:
    return ListService(EntityStore("lists", seed_lists), latency=NoLatency(), clock=clock, id_factory=ids)


@pytest.fixture()
def state(settings: SimpleNamespace, task_service: TaskService, list_service: ListService) -> AppState:
    """AppState over the small fixture seeds (not the bundled dataset)."""
    return AppState(settings=settings, tasks=task_service, lists=list_service)


@pytest.fixture()
def bundled_state(settings: SimpleNamespace, clock: FakeClock, ids: CounterIds) -> AppState:
    """AppState built by the real composition root from the bundled seed files."""
    return create_initial_state(settings=settings, clock=clock, id_factory=ids)
