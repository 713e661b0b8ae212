# src/flowtask/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- loads the Task/List seed datasets,
- builds one EntityStore per entity type and the services over them,
- wires everything into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.fields import utc_now
from ..core.ports import Clock, IdFactory
from ..core.state import AppState
from ..lists.list_service import ListService
from ..store.entity_store import EntityStore
from ..store.latency import latency_from_ms
from ..store.seed import load_list_seed, load_task_seed
from ..tasks.task_service import TaskService, new_id

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    clock: Clock = utc_now,
    id_factory: IdFactory = new_id,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    latency = latency_from_ms(int(getattr(settings, "latency_ms", 0)))

    task_store = EntityStore("tasks", load_task_seed(getattr(settings, "tasks_seed_path", None)))
    list_store = EntityStore("lists", load_list_seed(getattr(settings, "lists_seed_path", None)))

    state = AppState(
        settings=settings,
        tasks=TaskService(task_store, latency=latency, clock=clock, id_factory=id_factory),
        lists=ListService(list_store, latency=latency, clock=clock, id_factory=id_factory),
    )
    logger.info(
        "State ready tasks=%d lists=%d latency_ms=%s",
        len(task_store),
        len(list_store),
        getattr(settings, "latency_ms", 0),
    )
    return state
