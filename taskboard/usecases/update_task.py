from __future__ import annotations
from dataclasses import dataclass
from ..domain.entities import Task
from ..domain.ports import TaskRepository, UseCaseError
from .error_mapping import map_task_error


@dataclass
class UpdateTask:
    repository: TaskRepository

    def __call__(self, task: Task) -> bool:
        """Return False when no task with that id exists."""
        try:
            return bool(self.repository.update_task(task))
        except UseCaseError:
            raise
        except Exception as e:
            raise map_task_error(e, default_code="UPDATE_FAILED") from e
