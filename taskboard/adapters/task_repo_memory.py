from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from taskboard.domain.entities import Task
from taskboard.domain.ports import DuplicateTaskError, TaskId, TaskRepository
from taskboard.domain.state_flow import StateFlow


class InMemoryTaskRepository(TaskRepository):
    """Task repository backed by a ``StateFlow`` of immutable task lists.

    Every mutation publishes a new list; lists already handed out are never
    modified.
    """

    def __init__(self, initial_tasks: Optional[Iterable[Task]] = None) -> None:
        self._log = logging.getLogger(__name__)
        tasks = list(initial_tasks or [])
        ids = [task.id for task in tasks]
        if len(ids) != len(set(ids)):
            raise DuplicateTaskError(next(i for i in ids if ids.count(i) > 1))
        self._tasks: StateFlow[List[Task]] = StateFlow(tasks, name="tasks")

    def tasks(self) -> StateFlow[List[Task]]:
        return self._tasks

    def get_all_tasks(self) -> StateFlow[List[Task]]:
        return self._tasks

    def add_task(self, task: Task) -> None:
        def add(current: List[Task]) -> List[Task]:
            if any(existing.id == task.id for existing in current):
                raise DuplicateTaskError(task.id)
            return current + [task]

        self._tasks.update(add)
        self._log.debug("Added task %s", task)

    def update_task(self, task: Task) -> bool:
        if not self._contains(task.id):
            self._log.debug("Update ignored, no task with id %s", task.id)
            return False
        self._tasks.update(lambda current: [task if t.id == task.id else t for t in current])
        return True

    def delete_task(self, task_id: TaskId) -> bool:
        if not self._contains(task_id):
            self._log.debug("Delete ignored, no task with id %s", task_id)
            return False
        self._tasks.update(lambda current: [t for t in current if t.id != task_id])
        return True

    def toggle_task_completion(self, task_id: TaskId) -> bool:
        if not self._contains(task_id):
            self._log.debug("Toggle ignored, no task with id %s", task_id)
            return False
        self._tasks.update(lambda current: [t.toggled() if t.id == task_id else t for t in current])
        return True

    def _contains(self, task_id: TaskId) -> bool:
        return any(task.id == task_id for task in self._tasks.value)


__all__ = ["InMemoryTaskRepository"]
