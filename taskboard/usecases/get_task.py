from __future__ import annotations
from dataclasses import dataclass
from ..domain.entities import Task
from ..domain.ports import TaskId, TaskNotFoundError, TaskRepository, UseCaseError
from .error_mapping import map_task_error


@dataclass
class GetTask:
    """Look up one task by id for the edit form."""

    repository: TaskRepository

    def __call__(self, task_id: TaskId) -> Task:
        try:
            for task in self.repository.get_all_tasks().value:
                if task.id == task_id:
                    return task
            raise TaskNotFoundError(task_id)
        except UseCaseError:
            raise
        except Exception as e:
            raise map_task_error(e, default_code="LOAD_FAILED") from e
