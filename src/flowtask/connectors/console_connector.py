# src/flowtask/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "flowtask> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


async def handle_line(state: AppState, line: str) -> str | None:
    """
    Run one console line. Returns the text to print (None for blank input).

    A failing command is logged and reported; it never ends the loop.
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = await command_registry.handle(state, line)
    except Exception:
        logger.exception("Command failed: %s", line)
        return "Command failed (see log for details)."

    if reply is None:
        return "Not a command. Use /help to list available commands."
    return reply


async def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "FlowTask"))
    logger.info("Console connector started.")
    _print_ts(f"[{app_name}] Type /help for commands, /tasks to see your tasks, /exit to quit.\n")

    while True:
        try:
            user_input = await asyncio.to_thread(input, PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = await handle_line(state, user_input)
        if reply:
            print(reply, flush=True)
