# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - a task starts PENDING and can only move forward to COMPLETED
    - completing an already completed task is a no-op
    """

    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    status: TaskStatus = TaskStatus.PENDING

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED
