# tests/conftest.py

from __future__ import annotations

import pytest

from task_tracker.config import DEFAULT_COMPLETED_ICON, DEFAULT_PENDING_ICON, Settings
from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings() -> Settings:
    """
    Explicit settings object.

    We build it directly rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return Settings(
        app_name="task-tracker-test",
        log_level="WARNING",
        log_file=None,
        pending_icon=DEFAULT_PENDING_ICON,
        completed_icon=DEFAULT_COMPLETED_ICON,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: Settings, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
