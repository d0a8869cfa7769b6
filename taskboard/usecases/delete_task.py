from __future__ import annotations
from dataclasses import dataclass
from ..domain.ports import TaskId, TaskRepository, UseCaseError
from .error_mapping import map_task_error


@dataclass
class DeleteTask:
    repository: TaskRepository

    def __call__(self, task_id: TaskId) -> bool:
        """Return False when no task with that id exists."""
        try:
            return bool(self.repository.delete_task(task_id))
        except UseCaseError:
            raise
        except Exception as e:
            raise map_task_error(e, default_code="DELETE_FAILED") from e
