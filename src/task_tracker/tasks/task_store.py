# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import itertools
import logging

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    - tasks are kept in insertion order (stable listing)
    - ids come from a private counter starting at 1, so they are unique
      and always positive
    - nothing is persisted; the store lives as long as its owner
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)
        logger.debug("TaskStore ready total=%s", self.count_tasks())

    def __len__(self) -> int:
        return len(self._tasks)

    def count_tasks(self) -> int:
        return len(self._tasks)

    # ---- CRUD ----

    def add(self, title: str | None) -> Task | None:
        """
        Create a PENDING task from `title` (trimmed).

        Returns None for a blank title; nothing is added in that case.
        """
        clean = (title or "").strip()
        if not clean:
            logger.debug("Rejected blank task title.")
            return None

        task = Task(id=next(self._ids), title=clean)
        self._tasks.append(task)
        logger.debug("Added task id=%s title=%r", task.id, task.title)
        return task

    def list(self) -> list[Task]:
        """Current tasks in insertion order (new list, live Task records)."""
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def complete(self, task_id: int) -> bool:
        task = self.get(task_id)
        if task is None:
            logger.debug("complete: task id=%s not found", task_id)
            return False

        task.status = TaskStatus.COMPLETED
        logger.debug("Completed task id=%s", task_id)
        return True

    def delete(self, task_id: int) -> bool:
        """Remove every task with `task_id`; True if anything was removed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        removed = before - len(self._tasks)
        if removed:
            logger.debug("Deleted task id=%s (removed=%d)", task_id, removed)
        else:
            logger.debug("delete: task id=%s not found", task_id)
        return removed > 0
