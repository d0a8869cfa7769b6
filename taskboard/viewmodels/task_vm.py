"""Task screen view model: derives ``TaskUiState`` and exposes commands.

Call context:
    ``TaskController`` builds one instance; the Tkinter app and the NiceGUI
    page subscribe to ``ui_state`` and forward user intents to the ``on_*``
    commands.

State derivation:
    filter + sorter --(flat_map_latest)--> filtered_tasks
    filtered_tasks + filter + sorter + flags --(combine)--> ui_state

Every command finishes synchronously, so ``ui_state.value`` already reflects
the new repository contents and selection when the command returns.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Tuple

from taskboard.domain.entities import Task
from taskboard.domain.filters import (
    BY_DATE_ASCENDING,
    SHOW_ALL,
    SHOW_COMPLETED,
    SHOW_INCOMPLETE,
    TaskFilter,
    TaskSorter,
    next_filter,
    toggled_sort_order,
)
from taskboard.domain.ports import TaskId, UseCaseError
from taskboard.domain.state_flow import (
    DerivedFlow,
    StateFlow,
    Unsubscribe,
    combine,
    flat_map_latest,
)
from ..usecases.add_task import AddTask
from ..usecases.delete_task import DeleteTask
from ..usecases.generate_task_id import GenerateTaskId
from ..usecases.get_filtered_and_sorted_tasks import GetFilteredAndSortedTasks
from ..usecases.get_task import GetTask
from ..usecases.toggle_task_completion import ToggleTaskCompletion
from ..usecases.update_task import UpdateTask
from .settings_vm import SettingsConfig
from .task_form_vm import TaskFormState, TaskFormVM
from .ui_state import TaskUiState


def _error_text(exc: Exception) -> str:
    if isinstance(exc, UseCaseError):
        return exc.message
    return str(exc) or type(exc).__name__


class TaskVM:
    """View model for the single task-list screen."""

    def __init__(
        self,
        *,
        get_filtered_and_sorted_tasks: GetFilteredAndSortedTasks,
        add_task: AddTask,
        update_task: UpdateTask,
        delete_task: DeleteTask,
        toggle_task_completion: ToggleTaskCompletion,
        generate_task_id: GenerateTaskId,
        get_task: Optional[GetTask] = None,
        defaults: Optional[SettingsConfig] = None,
        initial_filter: TaskFilter = SHOW_ALL,
        initial_sorter: TaskSorter = BY_DATE_ASCENDING,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self._get_filtered_and_sorted_tasks = get_filtered_and_sorted_tasks
        self._add_task = add_task
        self._update_task = update_task
        self._delete_task = delete_task
        self._toggle_task_completion = toggle_task_completion
        self._generate_task_id = generate_task_id
        self._get_task = get_task
        self.defaults = defaults or SettingsConfig()

        # UI controls (not derived from the repository)
        self._filter: StateFlow[TaskFilter] = StateFlow(initial_filter, name="filter")
        self._sorter: StateFlow[TaskSorter] = StateFlow(initial_sorter, name="sorter")
        self._actions_expanded: StateFlow[bool] = StateFlow(False, name="actions_expanded")
        self._error: StateFlow[Optional[str]] = StateFlow(None, name="error")
        self._notice: StateFlow[Optional[str]] = StateFlow(None, name="notice")
        self._form: StateFlow[Optional[TaskFormState]] = StateFlow(None, name="form")
        self._form_vm: Optional[TaskFormVM] = None
        self._form_revision = 0

        self._query: DerivedFlow[Tuple[TaskFilter, TaskSorter]] = combine(
            self._filter,
            self._sorter,
            transform=lambda task_filter, sorter: (task_filter, sorter),
            name="query",
        )
        self.filtered_tasks: DerivedFlow[List[Task]] = flat_map_latest(
            self._query,
            self._load_tasks,
            on_error=self._on_load_error,
            name="filtered_tasks",
        )

        # Derived UI state combining all sources
        self.ui_state: DerivedFlow[TaskUiState] = combine(
            self.filtered_tasks,
            self._filter,
            self._sorter,
            self._actions_expanded,
            self._error,
            self._notice,
            self._form,
            transform=self._compose_state,
            name="ui_state",
        )

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------
    @property
    def state(self) -> TaskUiState:
        return self.ui_state.value

    def subscribe(self, callback: Callable[[TaskUiState], None]) -> Unsubscribe:
        """Deliver the current state now and every later change."""
        return self.ui_state.subscribe(callback)

    def close(self) -> None:
        """Release all flow subscriptions; the last state stays readable."""
        self.ui_state.close()
        self.filtered_tasks.close()
        self._query.close()

    # ------------------------------------------------------------------
    # Task commands
    # ------------------------------------------------------------------
    def on_add_task(self, task: Task) -> bool:
        ok, _ = self._run("add", lambda: self._add_task(task))
        if not ok:
            return False
        self._log.info("Task added: %s", task)
        self._notice.set("Task added")
        return True

    def on_update_task(self, task: Task) -> bool:
        """Save ``task``; returns False (without a notice) when its id is gone."""
        return self._apply_update(task) is True

    def on_delete_task(self, task_id: TaskId) -> bool:
        ok, deleted = self._run("delete", lambda: self._delete_task(task_id))
        if not ok:
            return False
        if self._form_vm is not None and self._form_vm.task_id == task_id:
            self.on_cancel_form()
        if not deleted:
            self._log.debug("Delete ignored, task #%s is not listed", task_id)
            return False
        self._notice.set("Task deleted")
        return True

    def on_toggle_task_completion(self, task_id: TaskId) -> bool:
        ok, toggled = self._run("toggle", lambda: self._toggle_task_completion(task_id))
        return ok and bool(toggled)

    def next_task_id(self) -> TaskId:
        try:
            return self._generate_task_id()
        except UseCaseError as exc:
            self._report(f"Failed to generate ID: {_error_text(exc)}")
            return 1

    def on_quick_add(self) -> bool:
        """Add a placeholder task using the configured defaults."""
        task = Task(
            id=self.next_task_id(),
            title=self.defaults.default_title,
            description=self.defaults.default_description,
            priority=self.defaults.default_priority,
            due_date=self.defaults.default_due_date,
            done=False,
        )
        return self.on_add_task(task)

    # ------------------------------------------------------------------
    # Filter / sort
    # ------------------------------------------------------------------
    def on_toggle_sort_order(self) -> None:
        self._sorter.update(toggled_sort_order)

    def on_select_sorter(self, sorter: TaskSorter) -> None:
        self._sorter.set(sorter)

    def on_toggle_filter(self) -> None:
        self._filter.update(next_filter)

    def on_select_filter(self, task_filter: TaskFilter) -> None:
        self._filter.set(task_filter)

    def on_show_all_tasks(self) -> None:
        self._filter.set(SHOW_ALL)

    def on_show_completed_tasks(self) -> None:
        self._filter.set(SHOW_COMPLETED)

    def on_show_incomplete_tasks(self) -> None:
        self._filter.set(SHOW_INCOMPLETE)

    # ------------------------------------------------------------------
    # Transient flags
    # ------------------------------------------------------------------
    def on_toggle_actions_panel(self) -> None:
        self._actions_expanded.update(lambda expanded: not expanded)

    def on_dismiss_error(self) -> None:
        self._error.set(None)

    def on_dismiss_notice(self) -> None:
        self._notice.set(None)

    # ------------------------------------------------------------------
    # Inline add/edit form
    # ------------------------------------------------------------------
    def on_open_add_form(self) -> None:
        self._form_revision += 1
        self._form_vm = TaskFormVM.blank(
            priority=self.defaults.default_priority,
            due_date=self.defaults.default_due_date,
            revision=self._form_revision,
        )
        self._publish_form()

    def on_open_edit_form(self, task_id: TaskId) -> bool:
        if self._get_task is None:
            raise RuntimeError("TaskVM was built without a GetTask use case.")
        try:
            task = self._get_task(task_id)
        except UseCaseError as exc:
            self._report(f"Failed to load task: {_error_text(exc)}")
            return False
        self._form_revision += 1
        self._form_vm = TaskFormVM.from_task(task, revision=self._form_revision)
        self._publish_form()
        return True

    def on_form_change(self, field_id: str, value: Any) -> None:
        if self._form_vm is None:
            return
        self._form_vm.set_field(field_id, value)
        self._publish_form()

    def on_submit_form(self) -> bool:
        """Validate and save the open form; keeps the form open on failure."""
        form = self._form_vm
        if form is None:
            return False
        if form.validate():
            self._publish_form()
            return False
        if form.mode == "add":
            saved = self.on_add_task(form.to_task(self.next_task_id()))
        else:
            task = form.to_task(form.task_id)
            outcome = self._apply_update(task)
            if outcome is False:
                self._report(f"Failed to update task: Task #{task.id} not found.")
            saved = outcome is True
        if saved:
            self.on_cancel_form()
        return saved

    def on_cancel_form(self) -> None:
        self._form_vm = None
        self._form.set(None)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _load_tasks(self, query: Tuple[TaskFilter, TaskSorter]) -> StateFlow[List[Task]]:
        task_filter, sorter = query
        self._log.debug("Deriving task list for filter=%s sorter=%s", task_filter.key, sorter.key)
        return self._get_filtered_and_sorted_tasks(task_filter, sorter, on_error=self._on_load_error)

    def _on_load_error(self, exc: Exception) -> List[Task]:
        self._report(f"Failed to load tasks: {_error_text(exc)}")
        return []

    def _apply_update(self, task: Task) -> Optional[bool]:
        """``None`` when the use case failed, False when the id is unknown."""
        ok, updated = self._run("update", lambda: self._update_task(task))
        if not ok:
            return None
        if not updated:
            self._log.debug("Update ignored, task #%s is not listed", task.id)
            return False
        self._notice.set("Task updated")
        return True

    def _run(self, verb: str, action: Callable[[], Any]) -> Tuple[bool, Any]:
        try:
            result = action()
        except UseCaseError as exc:
            self._report(f"Failed to {verb} task: {_error_text(exc)}")
            return False, None
        return True, result

    def _report(self, message: str) -> None:
        self._log.warning(message)
        self._error.set(message)

    def _publish_form(self) -> None:
        self._form.set(self._form_vm.snapshot() if self._form_vm else None)

    @staticmethod
    def _compose_state(
        tasks: List[Task],
        task_filter: TaskFilter,
        sorter: TaskSorter,
        actions_expanded: bool,
        error: Optional[str],
        notice: Optional[str],
        form: Optional[TaskFormState],
    ) -> TaskUiState:
        return TaskUiState(
            tasks=tuple(tasks),
            filter=task_filter,
            sorter=sorter,
            actions_expanded=actions_expanded,
            error=error,
            notice=notice,
            form=form,
        )


__all__ = ["TaskVM"]
