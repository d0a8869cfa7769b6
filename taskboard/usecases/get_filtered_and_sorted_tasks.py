from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..domain.entities import Task
from ..domain.filters import TaskFilter, TaskSorter
from ..domain.ports import TaskRepository, UseCaseError
from ..domain.state_flow import StateFlow, map_flow
from .error_mapping import map_task_error


@dataclass
class GetFilteredAndSortedTasks:
    """Derive ``sorter(filter(tasks))`` from the repository task flow.

    The returned flow recomputes on every repository change. It must be
    closed by the caller when no longer needed.
    """

    repository: TaskRepository

    def __call__(
        self,
        task_filter: TaskFilter,
        sorter: TaskSorter,
        *,
        on_error: Optional[Callable[[Exception], List[Task]]] = None,
    ) -> StateFlow[List[Task]]:
        def derive(tasks: List[Task]) -> List[Task]:
            try:
                return sorter.sort(task_filter.apply(tasks))
            except UseCaseError:
                raise
            except Exception as e:
                raise map_task_error(e, default_code="LOAD_FAILED") from e

        try:
            source = self.repository.get_all_tasks()
        except Exception as e:
            raise map_task_error(e, default_code="LOAD_FAILED") from e
        return map_flow(
            source,
            derive,
            on_error=on_error,
            name=f"tasks[{task_filter.key},{sorter.key}]",
        )
