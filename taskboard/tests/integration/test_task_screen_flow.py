from __future__ import annotations

from pathlib import Path
from typing import List

from taskboard.adapters.storage_local import StorageLocal
from taskboard.app.controller import TaskController
from taskboard.viewmodels.ui_state import TaskUiState


def test_task_screen_session(tmp_path: Path) -> None:
    """Drive one session the way the views do: render on every state."""
    controller = TaskController(storage=StorageLocal(root_dir=str(tmp_path)))
    controller.load_settings()
    vm = controller.task_vm
    rendered: List[TaskUiState] = []
    unsubscribe = vm.subscribe(rendered.append)

    # Quick add lands first in oldest-first order.
    vm.on_quick_add()
    assert rendered[-1].rows()[0].title == "New task"
    assert rendered[-1].rows()[0].due_label == "Due 15-01-2026"
    assert rendered[-1].count_label == "Tasks: 7"

    # Open the actions panel and narrow to incomplete work, newest first.
    vm.on_toggle_actions_panel()
    vm.on_toggle_filter()
    vm.on_toggle_sort_order()
    state = rendered[-1]
    assert state.actions_expanded is True
    assert state.filter_label == "Filter: ON"
    assert state.sort_label == "Sort: Newest first"
    assert [row.task_id for row in state.rows()] == [6, 5, 2, 3, 4, 7]

    # Completing a task removes it from the incomplete view.
    vm.on_toggle_task_completion(6)
    assert [row.task_id for row in rendered[-1].rows()] == [5, 2, 3, 4, 7]

    # Edit through the inline form.
    vm.on_open_edit_form(7)
    vm.on_form_change("title", "Plan sprint")
    vm.on_form_change("due_date", "01-01-2030")
    assert vm.on_submit_form() is True
    assert rendered[-1].rows()[0].title == "Plan sprint"

    # Persist the view and restore it in a fresh session.
    controller.save_settings()
    unsubscribe()
    controller.reset()

    restored = TaskController(storage=StorageLocal(root_dir=str(tmp_path)))
    assert restored.load_settings() is True
    state = restored.task_vm.state
    assert state.filter_label == "Filter: ON"
    assert state.sort_label == "Sort: Newest first"
    assert state.count_label == "Tasks: 5"
