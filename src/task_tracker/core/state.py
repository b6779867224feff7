# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import Settings
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings are kept on the state so handlers never read global config.
    settings: Settings
    task_store: TaskStore = field(default_factory=TaskStore)
