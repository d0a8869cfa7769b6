"""NiceGUI entrypoint for the task manager web runtime."""

from __future__ import annotations

import argparse
import os
from typing import Any, Callable

from nicegui import ui

from taskboard.app.controller import TaskController
from taskboard.domain.filters import FILTERS, SORTERS, filter_for_key, sorter_for_key
from taskboard.utils import logging as logging_utils
from taskboard.viewmodels.task_vm import TaskVM
from taskboard.viewmodels.ui_state import TaskUiState


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --tb-card: rgba(255, 255, 255, 0.9);
  --tb-border: #c9d7e9;
  --tb-muted: #45556c;
}
body { background: linear-gradient(180deg, #edf4ff, #f9f1e8); }
.tb-page { max-width: 880px; margin: 0 auto; padding: 14px; animation: tb-in 300ms ease-out; }
.tb-card { background: var(--tb-card); border: 1px solid var(--tb-border); border-radius: 14px; }
.tb-done { color: var(--tb-muted); text-decoration: line-through; }
@keyframes tb-in {
  from { opacity: 0; transform: translateY(8px); }
  to { opacity: 1; transform: translateY(0px); }
}
</style>
        """
    )


def _build_ui(vm: TaskVM, controller: TaskController) -> None:
    """Register the NiceGUI page bound to one shared ``TaskVM``."""

    @ui.page("/")
    def index() -> None:
        def state() -> TaskUiState:
            return vm.state

        @ui.refreshable
        def render_header() -> None:
            with ui.row().classes("w-full justify-between items-center tb-card p-3 q-mb-sm"):
                ui.label("Task Manager").classes("text-h5")
                with ui.row().classes("q-gutter-sm"):
                    ui.button("New task", icon="add", on_click=lambda: invoke(vm.on_quick_add), color="primary")
                    ui.button("Add...", on_click=lambda: invoke(vm.on_open_add_form))
                    ui.button(
                        "Actions",
                        icon="expand_less" if state().actions_expanded else "expand_more",
                        on_click=lambda: invoke(vm.on_toggle_actions_panel),
                    ).props("flat")

        @ui.refreshable
        def render_actions() -> None:
            current = state()
            if not current.actions_expanded:
                return
            with ui.card().classes("w-full tb-card q-mb-sm"):
                with ui.row().classes("w-full q-gutter-sm"):
                    ui.button(
                        current.sort_label,
                        icon="arrow_upward" if current.sorter.key == "date_asc" else "arrow_downward",
                        on_click=lambda: invoke(vm.on_toggle_sort_order),
                    )
                    ui.button(current.filter_label, on_click=lambda: invoke(vm.on_toggle_filter))
                    ui.select(
                        {sorter.key: sorter.label for sorter in SORTERS},
                        value=current.sorter.key,
                        label="Order by",
                        on_change=lambda e: invoke(lambda: vm.on_select_sorter(sorter_for_key(str(e.value)))),
                    ).props("dense outlined")
                    ui.select(
                        {task_filter.key: task_filter.label for task_filter in FILTERS},
                        value=current.filter.key,
                        label="Show",
                        on_change=lambda e: invoke(lambda: vm.on_select_filter(filter_for_key(str(e.value)))),
                    ).props("dense outlined")
                    ui.button("Save view", on_click=save_view).props("flat")

        @ui.refreshable
        def render_form() -> None:
            form = state().form
            if form is None:
                return
            with ui.card().classes("w-full tb-card q-mb-sm"):
                ui.label(form.heading).classes("text-subtitle1")
                for field_id, label in (
                    ("title", "Title"),
                    ("description", "Description"),
                    ("priority", "Priority"),
                    ("due_date", "Due (DD-MM-YYYY)"),
                ):
                    field_input = ui.input(
                        label=label,
                        value=getattr(form, field_id),
                        on_change=lambda e, f=field_id: vm.on_form_change(f, e.value),
                    ).props("outlined dense").classes("w-full")
                    error = form.errors.get(field_id)
                    if error:
                        field_input.props(f'error error-message="{error}"')
                ui.checkbox("Done", value=form.done, on_change=lambda e: vm.on_form_change("done", bool(e.value)))
                with ui.row().classes("q-gutter-sm"):
                    ui.button("Save", on_click=lambda: invoke(vm.on_submit_form), color="primary")
                    ui.button("Cancel", on_click=lambda: invoke(vm.on_cancel_form)).props("flat")

        @ui.refreshable
        def render_tasks() -> None:
            current = state()
            ui.label(current.count_label).classes("text-subtitle1 q-my-sm")
            for row in current.rows():
                with ui.card().classes("w-full tb-card q-mb-xs"):
                    with ui.row().classes("w-full items-center justify-between no-wrap"):
                        with ui.column().classes("gap-0"):
                            ui.label(row.title).classes("text-subtitle1" + (" tb-done" if row.done else ""))
                            ui.label(row.description).classes("text-body2")
                            ui.label(f"{row.due_label} · {row.priority_label}").classes("text-caption")
                        with ui.row().classes("q-gutter-xs"):
                            ui.button(
                                row.status_label,
                                icon="check" if row.done else "close",
                                on_click=lambda _, t=row.task_id: invoke(lambda: vm.on_toggle_task_completion(t)),
                            ).props("outline")
                            ui.button(
                                icon="edit",
                                on_click=lambda _, t=row.task_id: invoke(lambda: vm.on_open_edit_form(t)),
                            ).props("flat round")
                            ui.button(
                                icon="delete",
                                on_click=lambda _, t=row.task_id: invoke(lambda: vm.on_delete_task(t)),
                                color="negative",
                            ).props("flat round")

        def show_messages() -> None:
            """Render the transient error/notice as toasts, then clear them."""
            current = state()
            if current.error:
                ui.notify(current.error, color="negative", close_button="OK")
                vm.on_dismiss_error()
            if current.notice:
                ui.notify(current.notice, color="positive")
                vm.on_dismiss_notice()

        def refresh_all() -> None:
            render_header.refresh()
            render_actions.refresh()
            render_form.refresh()
            render_tasks.refresh()

        def invoke(action: Callable[[], Any]) -> None:
            action()
            show_messages()
            refresh_all()

        def save_view() -> None:
            try:
                controller.save_settings()
            except OSError as exc:
                ui.notify(f"Failed to save view: {exc}", color="negative", close_button="OK")
                return
            ui.notify("View saved.", color="positive")

        with ui.column().classes("tb-page w-full"):
            render_header()
            render_actions()
            render_form()
            render_tasks()


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the task manager NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    logging_utils.configure_root()
    controller = TaskController()
    controller.load_settings()
    vm = controller.task_vm
    if args.smoke_test:
        print("web-smoke-ok", vm.state.count_label)
        return
    _install_theme()
    _build_ui(vm, controller)
    ui.run(
        host=args.host,
        port=args.port,
        title="Task Manager",
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("TASKBOARD_WEB_STORAGE_SECRET", "taskboard-web-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
