from __future__ import annotations
from dataclasses import dataclass
from ..domain.entities import Task
from ..domain.ports import TaskRepository, UseCaseError
from .error_mapping import map_task_error


@dataclass
class AddTask:
    repository: TaskRepository

    def __call__(self, task: Task) -> None:
        try:
            self.repository.add_task(task)
        except UseCaseError:
            raise
        except Exception as e:
            raise map_task_error(e, default_code="ADD_FAILED") from e
