from __future__ import annotations
from dataclasses import dataclass
from ..domain.ports import TaskId, TaskRepository, UseCaseError
from .error_mapping import map_task_error


@dataclass
class GenerateTaskId:
    """Next free id: highest existing id plus one, or 1 for an empty list."""

    repository: TaskRepository

    def __call__(self) -> TaskId:
        try:
            tasks = self.repository.get_all_tasks().value
            return max((task.id for task in tasks), default=0) + 1
        except UseCaseError:
            raise
        except Exception as e:
            raise map_task_error(e, default_code="ID_FAILED") from e
