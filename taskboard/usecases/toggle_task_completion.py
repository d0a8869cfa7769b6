from __future__ import annotations
from dataclasses import dataclass
from ..domain.ports import TaskId, TaskRepository, UseCaseError
from .error_mapping import map_task_error


@dataclass
class ToggleTaskCompletion:
    repository: TaskRepository

    def __call__(self, task_id: TaskId) -> bool:
        """Return False when no task with that id exists."""
        try:
            return bool(self.repository.toggle_task_completion(task_id))
        except UseCaseError:
            raise
        except Exception as e:
            raise map_task_error(e, default_code="TOGGLE_FAILED") from e
