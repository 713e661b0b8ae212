# tests/test_entity_store.py

from __future__ import annotations

from dataclasses import replace

import pytest

from flowtask.store.entity_store import EntityStore
from flowtask.tasks.task_models import Task


def _task(task_id: str, title: str = "t") -> Task:
    return Task(id=task_id, title=title, list_id="l1")


def test_seed_is_copied() -> None:
    seed = [_task("a"), _task("b")]
    store = EntityStore("tasks", seed)

    seed[0].title = "changed after seeding"
    seed.append(_task("c"))

    assert store.ids() == ["a", "b"]
    found = store.find("a")
    assert found is not None
    assert found.title == "t"


def test_duplicate_seed_ids_are_rejected() -> None:
    with pytest.raises(ValueError):
        EntityStore("tasks", [_task("a"), _task("a")])


def test_replace_and_remove_keep_order() -> None:
    store = EntityStore("tasks", [_task("a"), _task("b"), _task("c")])

    assert store.replace("b", replace(_task("b"), title="B")) is True
    assert [t.title for t in store.snapshot()] == ["t", "B", "t"]

    assert store.remove("a") is True
    assert store.remove("a") is False
    assert store.replace("zzz", _task("zzz")) is False
    assert store.ids() == ["b", "c"]
    assert len(store) == 2
    assert "c" in store and "a" not in store


def test_append_rejects_duplicate_and_returns_copy() -> None:
    store = EntityStore("tasks", [_task("a")])
    added = store.append(_task("b"))
    added.title = "mutated"

    found = store.find("b")
    assert found is not None
    assert found.title == "t"

    with pytest.raises(ValueError):
        store.append(_task("a"))


def test_removed_id_stays_issued() -> None:
    store = EntityStore("tasks", [_task("a")])
    assert store.issued("a")
    assert not store.issued("b")

    store.append(_task("b"))
    store.remove("b")
    assert "b" not in store
    assert store.issued("b")

    with pytest.raises(ValueError):
        store.append(_task("b"))
