# tests/test_commands.py

from __future__ import annotations

import pytest

from flowtask.cli.commands import CommandRegistry, registry
from flowtask.core.state import AppState
from flowtask.tasks.task_models import Priority, TaskDraft


@pytest.mark.asyncio
async def test_command_registry_routes_handlers_and_aliases(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"a": 0, "b": 0}

    async def ha(state, args):
        called["a"] += 1
        return "a:" + ",".join(args)

    async def hb(state, args):
        called["b"] += 1
        return "b"

    reg.register("a", ha, "a")
    reg.register("b", hb, "b", aliases=["bee"])

    assert await reg.handle(state, '/a x "y z"') == "a:x,y z"
    assert await reg.handle(state, "/BEE") == "b"
    assert called == {"a": 1, "b": 1}


@pytest.mark.asyncio
async def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert await reg.handle(state, "hello") is None
    assert "Unknown command" in (await reg.handle(state, "/nope") or "")
    assert "Empty command" in (await reg.handle(state, "/") or "")
    assert "Could not parse" in (await reg.handle(state, '/a "unterminated') or "")


@pytest.mark.asyncio
async def test_add_uses_selected_list_and_options(state: AppState) -> None:
    state.view.select_list("l2")
    reply = await registry.handle(state, '/add "Send invoice" --priority high --due 2024-02-01 --desc "to ACME"')
    assert reply is not None and reply.startswith("Task created successfully")

    tasks = await state.tasks.get_all()
    task = tasks[-1]
    assert task.title == "Send invoice"
    assert task.list_id == "l2"
    assert task.priority is Priority.HIGH
    assert task.description == "to ACME"
    assert task.completed is False and task.archived is False


@pytest.mark.asyncio
async def test_add_without_title_is_rejected(state: AppState) -> None:
    assert await registry.handle(state, "/add --priority low") == "Task title is required"
    assert len(await state.tasks.get_all()) == 3


@pytest.mark.asyncio
async def test_add_reports_bad_options(state: AppState) -> None:
    assert "Invalid priority" in (await registry.handle(state, "/add x --priority urgent") or "")
    assert "Invalid due date" in (await registry.handle(state, "/add x --due tomorrow") or "")
    assert "Unknown option" in (await registry.handle(state, "/add x --colour red") or "")
    assert "No list with id" in (await registry.handle(state, "/add x --list zzz") or "")


@pytest.mark.asyncio
async def test_done_archive_and_views(state: AppState) -> None:
    assert await registry.handle(state, "/done 1") == "Task completed!"
    assert await registry.handle(state, "/archive 1") == "Task archived"

    active = await registry.handle(state, "/tasks")
    assert active is not None
    assert "All Tasks" in active and "Buy milk" not in active

    archived = await registry.handle(state, "/show archived")
    assert archived is not None
    assert "Archived Tasks" in archived
    assert "Buy milk" in archived and "Old invoice" in archived


@pytest.mark.asyncio
async def test_search_and_show_list(state: AppState) -> None:
    found = await registry.handle(state, "/search REPORT")
    assert found is not None
    assert '1 task matching "REPORT"' in found

    cleared = await registry.handle(state, "/search")
    assert cleared is not None and "2 tasks" in cleared

    personal = await registry.handle(state, "/show l1")
    assert personal is not None
    assert personal.splitlines()[0] == "Personal"


@pytest.mark.asyncio
async def test_delete_requires_confirmation(state: AppState) -> None:
    ask = await registry.handle(state, "/delete 2")
    assert ask is not None and "Are you sure" in ask
    assert await state.tasks.get_by_id("2") is not None

    assert await registry.handle(state, "/delete 2 --yes") == "Task deleted successfully"
    assert await state.tasks.get_by_id("2") is None
    assert await registry.handle(state, "/delete 2 --yes") == "No task with id 2"


@pytest.mark.asyncio
async def test_edit_changes_only_given_fields(state: AppState) -> None:
    assert await registry.handle(state, "/edit 2 --due none --priority low") == "Task updated successfully"
    task = await state.tasks.get_by_id("2")
    assert task is not None
    assert task.due_date is None
    assert task.priority is Priority.LOW
    assert task.title == "Write report"


@pytest.mark.asyncio
async def test_list_commands_and_dangling_tasks(state: AppState) -> None:
    created = await registry.handle(state, "/newlist Garden --color #00AA00")
    assert created is not None and created.startswith("List created successfully")

    assert await registry.handle(state, "/renamelist l1 Home") == "List updated successfully"

    state.view.select_list("l2")
    assert await registry.handle(state, "/rmlist l2") == "List deleted successfully"
    assert state.view.selected_list == "all"

    overview = await registry.handle(state, "/tasks")
    assert overview is not None and "Unknown List" in overview

    lists = await registry.handle(state, "/lists")
    assert lists is not None
    assert "Home (1)" in lists and "Garden (0)" in lists and "Archived (1)" in lists


@pytest.mark.asyncio
async def test_status_reports_progress(state: AppState) -> None:
    await registry.handle(state, "/done 2")
    status = await registry.handle(state, "/status")
    assert status is not None
    assert "1 of 2 (50%)" in status


@pytest.mark.asyncio
async def test_id_prefix_resolution(state: AppState) -> None:
    created = await state.tasks.create(TaskDraft(title="x", list_id="l1"))
    assert created.id == "new-1"
    assert await registry.handle(state, "/done new") == "Task completed!"
