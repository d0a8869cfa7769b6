from __future__ import annotations
from typing import Dict, List, Protocol

from .entities import Task
from .state_flow import StateFlow

TaskId = int


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class TaskRepositoryError(Exception):
    """Raised by repository adapters for rejected mutations."""


class DuplicateTaskError(TaskRepositoryError):
    def __init__(self, task_id: TaskId):
        super().__init__(f"Task id {task_id} already exists")
        self.task_id = task_id


class TaskNotFoundError(TaskRepositoryError):
    def __init__(self, task_id: TaskId):
        super().__init__(f"Task id {task_id} does not exist")
        self.task_id = task_id


# ---- Ports (Hexagonal boundaries) ----
class TaskRepository(Protocol):
    """Single source of truth for the task list.
    Unknown ids are ignored by update/delete/toggle, which return False then.
    """

    def tasks(self) -> StateFlow[List[Task]]: ...
    def get_all_tasks(self) -> StateFlow[List[Task]]: ...  # alias of tasks()
    def add_task(self, task: Task) -> None: ...  # DuplicateTaskError on id clash
    def update_task(self, task: Task) -> bool: ...
    def delete_task(self, task_id: TaskId) -> bool: ...
    def toggle_task_completion(self, task_id: TaskId) -> bool: ...


class SettingsStoragePort(Protocol):
    """Persistence for user preferences (never tasks)."""

    def save_user_prefs(self, prefs: Dict) -> None: ...
    def load_user_prefs(self) -> Dict: ...
