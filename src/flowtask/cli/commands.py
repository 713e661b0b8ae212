# src/flowtask/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Awaitable, Callable
from datetime import date

from ..core.state import AppState
from ..lists.list_models import TaskList
from ..tasks.task_models import Priority, Task
from ..views import actions
from ..views.task_form import TaskForm
from ..views.task_view import (
    ALL_LISTS,
    count_label,
    filter_tasks,
    format_due,
    list_name,
    sidebar_counts,
    summarize,
    view_title,
)

CommandHandler = Callable[[AppState, list[str]], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as exc:
            return f"Could not parse command: {exc}"
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return await handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


class UsageError(Exception):
    pass


def _split_options(args: list[str], known: set[str]) -> tuple[list[str], dict[str, str]]:
    """Split ["buy", "milk", "--due", "2024-01-05"] into words and {"due": "..."}."""
    words: list[str] = []
    opts: dict[str, str] = {}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg.startswith("--"):
            key = arg[2:].lower()
            if key not in known:
                raise UsageError(f"Unknown option: {arg}")
            if key == "yes":
                opts[key] = "1"
                i += 1
                continue
            if i + 1 >= len(args):
                raise UsageError(f"Option {arg} needs a value")
            opts[key] = args[i + 1]
            i += 2
            continue
        words.append(arg)
        i += 1
    return words, opts


def _parse_priority(raw: str) -> Priority:
    try:
        return Priority(raw.strip().lower())
    except ValueError:
        raise UsageError(f"Invalid priority: {raw} (use low, medium or high)") from None


def _parse_due(raw: str) -> date | None:
    if raw.strip().lower() in ("", "none", "-"):
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        raise UsageError(f"Invalid due date: {raw} (expected YYYY-MM-DD)") from None


def _resolve(items: list, ref: str, kind: str):
    """Exact id, else a unique id prefix."""
    for item in items:
        if item.id == ref:
            return item
    hits = [item for item in items if item.id.startswith(ref)]
    if len(hits) == 1:
        return hits[0]
    if not hits:
        raise UsageError(f"No {kind} with id {ref}")
    raise UsageError(f"Ambiguous {kind} id {ref} ({len(hits)} matches)")


def _short(entity_id: str) -> str:
    return entity_id if len(entity_id) <= 8 else entity_id[:8]


def _render_task(task: Task, lists: list[TaskList]) -> str:
    mark = "x" if task.completed else " "
    meta = [list_name(lists, task.list_id), task.priority.value]
    if task.due_date:
        meta.append(format_due(task.due_date))
    line = f"[{mark}] {task.title}  ({' | '.join(meta)})  #{_short(task.id)}"
    if task.description:
        line += f"\n      {task.description}"
    return line


async def _render_view(state: AppState) -> str:
    all_tasks, lists = await actions.load_snapshot(state.tasks, state.lists)
    flt = state.view
    shown = filter_tasks(all_tasks, flt)

    lines = [view_title(flt, lists), count_label(len(shown), flt.search_query)]
    if not shown:
        if flt.show_archived:
            lines.append("No archived tasks. Archived tasks will appear here.")
        else:
            lines.append("No tasks yet. Create your first task with /add.")
    for task in shown:
        lines.append(_render_task(task, lists))
    return "\n".join(lines)


async def _apply_form_options(state: AppState, form: TaskForm, opts: dict[str, str]) -> None:
    if "title" in opts:
        form.title = opts["title"]
    if "desc" in opts:
        form.description = opts["desc"]
    if "priority" in opts:
        form.priority = _parse_priority(opts["priority"])
    if "due" in opts:
        form.due_date = _parse_due(opts["due"])
    if "list" in opts:
        lists = await state.lists.get_all()
        form.list_id = _resolve(lists, opts["list"], "list").id


# ---- commands ----


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_status(state: AppState, args: list[str]) -> str:
    all_tasks, lists = await actions.load_snapshot(state.tasks, state.lists)
    shown = filter_tasks(all_tasks, state.view)
    progress = summarize(shown)
    return (
        "Status:\n"
        f"  View: {view_title(state.view, lists)}\n"
        f"  Search: {state.view.search_query or '-'}\n"
        f"  Progress: {progress.completed} of {progress.total} ({progress.rate}%)\n"
        f"  Latency: {getattr(state.settings, 'latency_ms', 0)} ms"
    )


async def cmd_tasks(state: AppState, args: list[str]) -> str:
    return await _render_view(state)


async def cmd_lists(state: AppState, args: list[str]) -> str:
    all_tasks, lists = await actions.load_snapshot(state.tasks, state.lists)
    counts = sidebar_counts(all_tasks, lists)
    lines = [f"  All Tasks ({counts.all})"]
    for lst in lists:
        lines.append(f"  {lst.name} ({counts.per_list.get(lst.id, 0)})  #{_short(lst.id)}  {lst.color}")
    lines.append(f"  Archived ({counts.archived})")
    return "Lists:\n" + "\n".join(lines)


async def cmd_show(state: AppState, args: list[str]) -> str:
    """
    /show all       -> all active tasks
    /show archived  -> archived tasks
    /show <list-id> -> active tasks of one list
    """
    if not args:
        return "Usage: /show all | archived | <list-id>"
    target = args[0]
    if target.lower() == ALL_LISTS:
        state.view.select_list(ALL_LISTS)
    elif target.lower() == "archived":
        state.view.select_archived()
    else:
        lists = await state.lists.get_all()
        state.view.select_list(_resolve(lists, target, "list").id)
    return await _render_view(state)


async def cmd_search(state: AppState, args: list[str]) -> str:
    """/search text -> filter by title/description; /search -> clear."""
    state.view.search_query = " ".join(args).strip()
    return await _render_view(state)


async def cmd_add(state: AppState, args: list[str]) -> str:
    """/add <title> [--list ID] [--priority P] [--due YYYY-MM-DD] [--desc TEXT]"""
    words, opts = _split_options(args, {"list", "priority", "due", "desc"})
    lists = await state.lists.get_all()
    form = TaskForm.blank(state.view.selected_list, lists)
    form.title = " ".join(words)
    await _apply_form_options(state, form, opts)
    result = await actions.submit_form(state.tasks, form)
    if result.ok and result.item is not None:
        return f"{result.message}\n{_render_task(result.item, lists)}"
    return result.message


async def cmd_edit(state: AppState, args: list[str]) -> str:
    """/edit <id> [--title T] [--list ID] [--priority P] [--due YYYY-MM-DD|none] [--desc TEXT]"""
    words, opts = _split_options(args, {"title", "list", "priority", "due", "desc"})
    if len(words) != 1 or not opts:
        return "Usage: /edit <id> [--title T] [--list ID] [--priority P] [--due YYYY-MM-DD|none] [--desc TEXT]"
    task = _resolve(await state.tasks.get_all(), words[0], "task")
    form = TaskForm.from_task(task)
    await _apply_form_options(state, form, opts)
    result = await actions.submit_form(state.tasks, form, editing_id=task.id)
    return result.message


async def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <id>"
    task = _resolve(await state.tasks.get_all(), args[0], "task")
    return (await actions.toggle_complete(state.tasks, task)).message


async def cmd_archive(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /archive <id>"
    task = _resolve(await state.tasks.get_all(), args[0], "task")
    return (await actions.toggle_archive(state.tasks, task)).message


async def cmd_delete(state: AppState, args: list[str]) -> str:
    """/delete <id> --yes"""
    words, opts = _split_options(args, {"yes"})
    if len(words) != 1:
        return "Usage: /delete <id> --yes"
    task = _resolve(await state.tasks.get_all(), words[0], "task")
    if "yes" not in opts:
        return f'Are you sure you want to delete "{task.title}"? Repeat with --yes to confirm.'
    return (await actions.delete_task(state.tasks, task.id)).message


async def cmd_newlist(state: AppState, args: list[str]) -> str:
    """/newlist <name> [--color C]"""
    words, opts = _split_options(args, {"color"})
    result = await actions.create_list(state.lists, " ".join(words), opts.get("color"))
    if result.ok and result.item is not None:
        return f"{result.message} #{_short(result.item.id)}"
    return result.message


async def cmd_renamelist(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /renamelist <id> <name>"
    lst = _resolve(await state.lists.get_all(), args[0], "list")
    return (await actions.rename_list(state.lists, lst.id, " ".join(args[1:]))).message


async def cmd_rmlist(state: AppState, args: list[str]) -> str:
    """Tasks of a deleted list keep their list id and show as "Unknown List"."""
    if len(args) != 1:
        return "Usage: /rmlist <id>"
    lst = _resolve(await state.lists.get_all(), args[0], "list")
    result = await actions.delete_list(state.lists, lst.id)
    if result.ok and state.view.selected_list == lst.id:
        state.view.select_list(ALL_LISTS)
    return result.message


def _guard(handler: CommandHandler) -> CommandHandler:
    async def wrapped(state: AppState, args: list[str]) -> str:
        try:
            return await handler(state, args)
        except UsageError as exc:
            return str(exc)

    wrapped.__name__ = handler.__name__
    wrapped.__doc__ = handler.__doc__
    return wrapped


registry.register("help", _guard(cmd_help), "show this help", aliases=["h", "?"])
registry.register("status", _guard(cmd_status), "current view and progress")
registry.register("tasks", _guard(cmd_tasks), "list tasks in the current view", aliases=["ls"])
registry.register("lists", _guard(cmd_lists), "lists with live task counts")
registry.register("show", _guard(cmd_show), "switch view: all | archived | <list-id>")
registry.register("search", _guard(cmd_search), "filter by title/description (empty clears)")
registry.register("add", _guard(cmd_add), "add a task: <title> [--list] [--priority] [--due] [--desc]")
registry.register("edit", _guard(cmd_edit), "edit a task: <id> [--title] [--list] [--priority] [--due] [--desc]")
registry.register("done", _guard(cmd_done), "toggle completed: <id>")
registry.register("archive", _guard(cmd_archive), "toggle archived: <id>")
registry.register("delete", _guard(cmd_delete), "delete a task: <id> --yes", aliases=["rm"])
registry.register("newlist", _guard(cmd_newlist), "create a list: <name> [--color C]")
registry.register("renamelist", _guard(cmd_renamelist), "rename a list: <id> <name>")
registry.register("rmlist", _guard(cmd_rmlist), "delete a list: <id>")
