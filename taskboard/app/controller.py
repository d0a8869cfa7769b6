"""Repository, use-case, and view-model wiring for the app runtimes.

This module owns construction of the in-memory repository and all task
use-cases from values in :class:`taskboard.viewmodels.settings_vm.SettingsVM`.
It has no widget-toolkit imports so both the Tkinter app and the NiceGUI
runtime (and tests) can use it.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..adapters.storage_local import StorageLocal
from ..adapters.task_repo_memory import InMemoryTaskRepository
from ..domain.ports import TaskRepository
from ..domain.sample_tasks import initial_tasks
from ..usecases.add_task import AddTask
from ..usecases.delete_task import DeleteTask
from ..usecases.generate_task_id import GenerateTaskId
from ..usecases.get_filtered_and_sorted_tasks import GetFilteredAndSortedTasks
from ..usecases.get_task import GetTask
from ..usecases.toggle_task_completion import ToggleTaskCompletion
from ..usecases.update_task import UpdateTask
from ..utils import logging as logging_utils
from ..viewmodels.settings_vm import SettingsVM
from ..viewmodels.task_vm import TaskVM

STORAGE_ROOT_ENV = "TASKBOARD_STORAGE_ROOT"


class TaskController:
    """Create and cache the repository, use-cases, and ``TaskVM``.

    Call chain:
        ``taskboard.app.main.App`` and ``taskboard.web_ui.main`` create one
        instance, call ``load_settings`` once, then bind views to ``task_vm``.
    """

    def __init__(
        self,
        settings_vm: Optional[SettingsVM] = None,
        *,
        storage: Optional[StorageLocal] = None,
        repository: Optional[TaskRepository] = None,
    ) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: Settings state; defaults are used when omitted.
            storage: Preferences storage; defaults to ``StorageLocal`` rooted
                at ``$TASKBOARD_STORAGE_ROOT`` (or the working directory).
            repository: Task repository override, mainly for tests.
        """
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm or SettingsVM()
        self.storage = storage or StorageLocal(root_dir=os.environ.get(STORAGE_ROOT_ENV) or ".")
        self._repository: Optional[TaskRepository] = repository
        self._task_vm: Optional[TaskVM] = None
        self.settings_vm.on_save = self.storage.save_user_prefs

    @property
    def repository(self) -> TaskRepository:
        if self._repository is None:
            seed = initial_tasks() if self.settings_vm.seed_sample_tasks else []
            self._repository = InMemoryTaskRepository(initial_tasks=seed)
            self._log.debug("Created in-memory repository with %d tasks", len(seed))
        return self._repository

    @property
    def task_vm(self) -> TaskVM:
        if self._task_vm is None:
            self._task_vm = self.build_task_vm()
        return self._task_vm

    def load_settings(self) -> bool:
        """Apply stored preferences; invalid files are logged and ignored.

        Returns:
            ``True`` when a stored preferences payload was applied.
        """
        try:
            payload = self.storage.load_user_prefs()
        except (OSError, ValueError) as exc:
            self._log.warning("Could not read user preferences: %s", exc)
            return False
        if not payload:
            return False
        try:
            self.settings_vm.apply_dict(payload)
        except ValueError as exc:
            self._log.warning("Ignoring invalid user preferences: %s", exc)
            return False
        logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)
        return True

    def save_settings(self) -> None:
        """Persist the current filter/sorter selection with the other settings."""
        if self._task_vm is not None:
            state = self._task_vm.state
            self.settings_vm.remember_view(state.filter, state.sorter)
        self.settings_vm.cmd_save()

    def build_task_vm(self) -> TaskVM:
        repository = self.repository
        return TaskVM(
            get_filtered_and_sorted_tasks=GetFilteredAndSortedTasks(repository),
            add_task=AddTask(repository),
            update_task=UpdateTask(repository),
            delete_task=DeleteTask(repository),
            toggle_task_completion=ToggleTaskCompletion(repository),
            generate_task_id=GenerateTaskId(repository),
            get_task=GetTask(repository),
            defaults=self.settings_vm.config,
            initial_filter=self.settings_vm.initial_filter,
            initial_sorter=self.settings_vm.initial_sorter,
        )

    def reset(self) -> None:
        """Drop the view model and repository; the next access rebuilds both."""
        if self._task_vm is not None:
            self._task_vm.close()
        self._task_vm = None
        self._repository = None


__all__ = ["STORAGE_ROOT_ENV", "TaskController"]
