# src/flowtask/store/seed.py

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from importlib import resources
from pathlib import Path
from typing import Any, TypeVar

from ..core.errors import SeedError
from ..lists.list_models import TaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

T = TypeVar("T")

_PACKAGE_DATA = "flowtask.data"
TASKS_SEED_FILE = "tasks.json"
LISTS_SEED_FILE = "lists.json"


def _read_records(path: str | Path | None, default_name: str) -> list[dict[str, Any]]:
    if path is None:
        raw = resources.files(_PACKAGE_DATA).joinpath(default_name).read_text("utf-8")
        source = f"package:{default_name}"
    else:
        p = Path(path).expanduser()
        try:
            raw = p.read_text("utf-8")
        except OSError as exc:
            raise SeedError(f"cannot read seed file {p}: {exc}") from exc
        source = str(p)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SeedError(f"seed file {source} is not valid JSON: {exc}") from exc

    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise SeedError(f"seed file {source} must be a JSON array of objects")

    logger.debug("Seed loaded source=%s records=%d", source, len(data))
    return data


def _build(records: list[dict[str, Any]], factory: Callable[[Mapping[str, Any]], T], kind: str) -> list[T]:
    out: list[T] = []
    for i, rec in enumerate(records):
        if "id" not in rec:
            raise SeedError(f"{kind} seed record #{i} has no id")
        try:
            out.append(factory(rec))
        except (TypeError, ValueError) as exc:
            raise SeedError(f"{kind} seed record #{i} is malformed: {exc}") from exc
    return out


def load_task_seed(path: str | Path | None = None) -> list[Task]:
    return _build(_read_records(path, TASKS_SEED_FILE), Task.from_dict, "task")


def load_list_seed(path: str | Path | None = None) -> list[TaskList]:
    return _build(_read_records(path, LISTS_SEED_FILE), TaskList.from_dict, "list")
