# taskboard/app/main.py
from __future__ import annotations
import logging
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.actions_panel_view import ActionsPanelView
from .views.task_form_view import TaskFormView
from .views.task_list_view import TaskListView

# ---- Composition ----
from .controller import TaskController
from ..domain.filters import SORTERS, sorter_for_key
from ..domain.state_flow import Unsubscribe
from ..viewmodels.ui_state import TaskUiState
from ..utils import logging as logging_utils


class App:
    """Bootstrap: wire Views <-> TaskVM and render every state change."""

    def __init__(self, controller: Optional[TaskController] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.controller = controller or TaskController()
        self.controller.load_settings()
        self.vm = self.controller.task_vm

        self.win = MainWindowView(
            on_quick_add=self.vm.on_quick_add,
            on_open_add_form=self.vm.on_open_add_form,
            on_toggle_actions=self.vm.on_toggle_actions_panel,
            on_save_view=self._on_save_view,
            on_dismiss_message=self._on_dismiss_message,
        )

        # ---- Subviews (constructor callbacks) ----
        self.actions = ActionsPanelView(
            self.win.actions_host,
            sorter_choices=[(sorter.key, sorter.label) for sorter in SORTERS],
            on_toggle_sort=self.vm.on_toggle_sort_order,
            on_select_sorter=lambda key: self.vm.on_select_sorter(sorter_for_key(key)),
            on_toggle_filter=self.vm.on_toggle_filter,
            on_show_completed=self.vm.on_show_completed_tasks,
            on_show_incomplete=self.vm.on_show_incomplete_tasks,
            on_collapse=self.vm.on_toggle_actions_panel,
        )
        self.form = TaskFormView(
            self.win.form_host,
            on_change=self.vm.on_form_change,
            on_submit=self.vm.on_submit_form,
            on_cancel=self.vm.on_cancel_form,
        )
        self.task_list = TaskListView(
            self.win.list_host,
            on_toggle_done=self.vm.on_toggle_task_completion,
            on_edit=self.vm.on_open_edit_form,
            on_delete=self.vm.on_delete_task,
        )
        self.win.mount_task_list(self.task_list)

        self._unsubscribe: Optional[Unsubscribe] = self.vm.subscribe(self._render)
        self.win.protocol("WM_DELETE_WINDOW", self._on_close)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render(self, state: TaskUiState) -> None:
        self.win.set_actions_expanded(state.actions_expanded)
        if state.actions_expanded:
            if not self.actions.winfo_ismapped():
                self.win.mount_actions_panel(self.actions)
            self.actions.set_state(
                sort_label=state.sort_label,
                sorter_key=state.sorter.key,
                filter_label=state.filter_label,
                filter_active=state.filter_active,
                show_completed=state.show_completed,
            )
        else:
            self.actions.pack_forget()

        if state.form is not None:
            self.form.set_form(state.form)
            if not self.form.winfo_ismapped():
                self.win.mount_form_panel(self.form)
        else:
            self.form.clear()
            self.form.pack_forget()

        self.task_list.set_rows(state.rows(), state.count_label)

        if state.error:
            self.win.set_status_message(state.error, kind="error")
        elif state.notice:
            self.win.set_status_message(state.notice, kind="notice")
        else:
            self.win.set_status_message(f"{state.count_label} · {state.sort_label} · {state.filter_label}")

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------
    def _on_dismiss_message(self) -> None:
        if self.vm.state.error:
            self.vm.on_dismiss_error()
        else:
            self.vm.on_dismiss_notice()

    def _on_save_view(self) -> None:
        try:
            self.controller.save_settings()
        except OSError as exc:
            self._log.error("Saving preferences failed: %s", exc)
            self.win.set_status_message(f"Failed to save view: {exc}", kind="error")
            return
        self.win.set_status_message("View saved.", kind="notice")

    def _on_close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.vm.close()
        self.win.destroy()

    def run(self) -> None:
        self.win.mainloop()


def main() -> None:
    logging_utils.configure_root()
    App().run()


if __name__ == "__main__":
    main()
