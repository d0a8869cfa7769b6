"""Immutable UI snapshot rendered by the task screen views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from taskboard.domain.entities import Task
from taskboard.domain.filters import (
    BY_DATE_ASCENDING,
    SHOW_ALL,
    SHOW_COMPLETED,
    TaskFilter,
    TaskSorter,
)
from .task_form_vm import TaskFormState


@dataclass(frozen=True)
class TaskRow:
    """Display row for one task card / table line."""

    task_id: int
    title: str
    description: str
    due_label: str
    status_label: str
    priority_label: str
    done: bool


def task_row(task: Task) -> TaskRow:
    return TaskRow(
        task_id=task.id,
        title=task.title,
        description=task.description,
        due_label=f"Due {task.due_date}",
        status_label="Done" if task.done else "Not done",
        priority_label=f"P{task.priority}",
        done=task.done,
    )


@dataclass(frozen=True)
class TaskUiState:
    """Snapshot of everything the task screen shows.

    ``tasks`` is already filtered and sorted for ``filter`` and ``sorter``.
    """

    tasks: Tuple[Task, ...] = ()
    filter: TaskFilter = SHOW_ALL
    sorter: TaskSorter = BY_DATE_ASCENDING
    actions_expanded: bool = False
    error: Optional[str] = None
    notice: Optional[str] = None
    form: Optional[TaskFormState] = None

    @property
    def filter_active(self) -> bool:
        return self.filter is not SHOW_ALL

    @property
    def show_completed(self) -> bool:
        return self.filter is SHOW_COMPLETED

    @property
    def filter_label(self) -> str:
        return "Filter: ON" if self.filter_active else "Filter: OFF"

    @property
    def sort_label(self) -> str:
        return f"Sort: {self.sorter.label}"

    @property
    def count_label(self) -> str:
        return f"Tasks: {len(self.tasks)}"

    def rows(self) -> List[TaskRow]:
        return [task_row(task) for task in self.tasks]


__all__ = ["TaskRow", "TaskUiState", "task_row"]
