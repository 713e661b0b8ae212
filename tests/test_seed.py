# tests/test_seed.py

from __future__ import annotations

import json
from datetime import UTC, date, datetime
from pathlib import Path

import pytest

from flowtask.core.errors import SeedError
from flowtask.store.seed import load_list_seed, load_task_seed
from flowtask.tasks.task_models import Priority


def test_bundled_seed_is_consistent() -> None:
    tasks = load_task_seed()
    lists = load_list_seed()

    assert tasks and lists
    assert len({t.id for t in tasks}) == len(tasks)
    assert len({lst.id for lst in lists}) == len(lists)
    list_ids = {lst.id for lst in lists}
    assert all(t.list_id in list_ids for t in tasks)
    assert all(lst.task_count == 0 for lst in lists)


def test_seed_from_path_parses_camel_case_records(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "1",
                    "title": "Buy milk",
                    "listId": "l1",
                    "priority": "low",
                    "dueDate": "2024-03-05T00:00:00.000Z",
                    "completed": False,
                    "archived": False,
                    "createdAt": "2024-03-01T08:30:00.000Z",
                },
                {"id": 2, "title": "No priority", "listId": "l1", "priority": "urgent"},
            ]
        ),
        "utf-8",
    )

    first, second = load_task_seed(path)

    assert first.list_id == "l1"
    assert first.priority is Priority.LOW
    assert first.due_date == date(2024, 3, 5)
    assert first.created_at == datetime(2024, 3, 1, 8, 30, tzinfo=UTC)
    assert first.updated_at is None
    assert first.description == ""

    assert second.id == "2"
    assert second.priority is Priority.MEDIUM


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"id": "1"}),
        json.dumps([1, 2]),
        json.dumps([{"title": "no id"}]),
        json.dumps([{"id": "1", "dueDate": "31/12/2024"}]),
        json.dumps([{"id": "1", "completed": "false"}]),
        json.dumps([{"id": "1", "archived": 1}]),
    ],
)
def test_malformed_seed_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(content, "utf-8")
    with pytest.raises(SeedError):
        load_task_seed(path)


def test_missing_seed_file_raises(tmp_path: Path) -> None:
    with pytest.raises(SeedError):
        load_list_seed(tmp_path / "nope.json")
