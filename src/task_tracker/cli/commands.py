# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_models import Task

Ask = Callable[[str], str]
MenuHandler = Callable[[AppState, Ask], str]

logger = logging.getLogger(__name__)

MENU_TITLE = "=== Task Manager CLI ==="

MSG_TASK_ADDED = "Task added."
MSG_INVALID_TITLE = "Invalid title."
MSG_NO_TASKS = "No tasks available."
MSG_TASK_COMPLETED = "Task completed."
MSG_TASK_DELETED = "Task deleted."
MSG_TASK_NOT_FOUND = "Task not found."
MSG_INVALID_OPTION = "Invalid option."
MSG_GOODBYE = "Goodbye!"

# Store ids start at 1, so this never matches a real task.
INVALID_TASK_ID = -1


@dataclass(frozen=True, slots=True)
class MenuReply:
    text: str
    stop: bool = False


@dataclass(frozen=True, slots=True)
class MenuOption:
    code: str
    label: str
    handler: MenuHandler
    stop: bool = False


class MenuRegistry:
    """Numbered menu used by the console loop (1. Add task, 2. List tasks, ...)."""

    def __init__(self, title: str = MENU_TITLE) -> None:
        self.title = title
        self._options: dict[str, MenuOption] = {}

    def register(
        self,
        code: str,
        label: str,
        handler: MenuHandler,
        *,
        stop: bool = False,
    ) -> None:
        self._options[code] = MenuOption(code=code, label=label, handler=handler, stop=stop)

    def handle(self, state: AppState, choice: str, ask: Ask) -> MenuReply:
        """
        Dispatch a raw menu choice like "1".
        Unknown choices produce the "Invalid option." reply.
        """
        option = self._options.get(choice.strip())
        if option is None:
            logger.debug("Unknown menu choice %r", choice)
            return MenuReply(MSG_INVALID_OPTION)

        return MenuReply(option.handler(state, ask), stop=option.stop)

    def build_menu(self) -> str:
        lines = ["", self.title]
        for option in self._options.values():
            lines.append(f"{option.code}. {option.label}")
        return "\n".join(lines)


def parse_task_id(raw: str) -> int:
    """Parse a user-typed id; anything unparseable becomes INVALID_TASK_ID."""
    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    # ASCII digits only: int() would also take "1_0" or non-Latin numerals.
    if not (digits.isascii() and digits.isdigit()):
        return INVALID_TASK_ID
    try:
        return int(text)
    except ValueError:
        return INVALID_TASK_ID


def format_task(task: Task, state: AppState) -> str:
    settings = state.settings
    icon = settings.completed_icon if task.is_completed else settings.pending_icon
    return f"{task.id} | {icon} {task.title}"


def cmd_add(state: AppState, ask: Ask) -> str:
    title = ask("Task title: ")
    task = state.task_store.add(title)
    return MSG_TASK_ADDED if task is not None else MSG_INVALID_TITLE


def cmd_list(state: AppState, ask: Ask) -> str:
    tasks = state.task_store.list()
    if not tasks:
        return MSG_NO_TASKS
    return "\n".join(format_task(t, state) for t in tasks)


def cmd_complete(state: AppState, ask: Ask) -> str:
    task_id = parse_task_id(ask("Task ID to complete: "))
    return MSG_TASK_COMPLETED if state.task_store.complete(task_id) else MSG_TASK_NOT_FOUND


def cmd_delete(state: AppState, ask: Ask) -> str:
    task_id = parse_task_id(ask("Task ID to delete: "))
    return MSG_TASK_DELETED if state.task_store.delete(task_id) else MSG_TASK_NOT_FOUND


def cmd_exit(state: AppState, ask: Ask) -> str:
    return MSG_GOODBYE


registry = MenuRegistry()

registry.register("1", "Add task", cmd_add)
registry.register("2", "List tasks", cmd_list)
registry.register("3", "Complete task", cmd_complete)
registry.register("4", "Delete task", cmd_delete)
registry.register("5", "Exit", cmd_exit, stop=True)
