"""Task list view: table of task rows with toggle/edit/delete actions.

The list renders ``TaskRow`` DTOs and emits callbacks with the selected task
id to the app layer.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, List, Optional

from .theme import MUTED_FG


class TaskListView(ttk.Frame):
    """Table of tasks with a count header and a row action toolbar."""

    def __init__(
        self,
        parent,
        *,
        on_toggle_done: Optional[Callable[[int], None]] = None,
        on_edit: Optional[Callable[[int], None]] = None,
        on_delete: Optional[Callable[[int], None]] = None,
        **kwargs,
    ):
        super().__init__(parent, **kwargs)
        self.on_toggle_done = on_toggle_done
        self.on_edit = on_edit
        self.on_delete = on_delete

        header = ttk.Frame(self)
        header.pack(side=tk.TOP, fill=tk.X, pady=(0, 4))
        self._count_var = tk.StringVar(value="Tasks: 0")
        ttk.Label(header, textvariable=self._count_var, font=("TkDefaultFont", 11, "bold")).pack(side=tk.LEFT)

        self.btn_delete = ttk.Button(header, text="Delete", command=self._on_delete_click, state="disabled")
        self.btn_edit = ttk.Button(header, text="Edit", command=self._on_edit_click, state="disabled")
        self.btn_toggle = ttk.Button(header, text="Toggle done", command=self._on_toggle_click, state="disabled")
        self.btn_delete.pack(side=tk.RIGHT)
        self.btn_edit.pack(side=tk.RIGHT, padx=6)
        self.btn_toggle.pack(side=tk.RIGHT)

        columns = ("title", "description", "due", "priority", "status")
        self.tree = ttk.Treeview(self, columns=columns, show="headings", selectmode="browse", height=14)
        for column, heading, width, stretch in (
            ("title", "Title", 200, True),
            ("description", "Description", 220, True),
            ("due", "Due", 130, False),
            ("priority", "Priority", 70, False),
            ("status", "Status", 90, False),
        ):
            self.tree.heading(column, text=heading)
            self.tree.column(column, width=width, anchor=tk.W, stretch=stretch)
        self.tree.tag_configure("done", foreground=MUTED_FG)

        vsb = ttk.Scrollbar(self, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        vsb.pack(side=tk.RIGHT, fill=tk.Y)

        self.tree.bind("<<TreeviewSelect>>", lambda _e: self._update_buttons_state())
        self.tree.bind("<Double-1>", lambda _e: self._on_edit_click())
        self.tree.bind("<space>", lambda _e: self._on_toggle_click())
        self.tree.bind("<Delete>", lambda _e: self._on_delete_click())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_rows(self, rows: List, count_label: str) -> None:
        """Replace table rows, keeping the selection when the task is still listed."""
        selected = self.selected_task_id()
        self.tree.delete(*self.tree.get_children())
        for row in rows:
            self.tree.insert(
                "",
                tk.END,
                iid=str(row.task_id),
                values=(row.title, row.description, row.due_label, row.priority_label, row.status_label),
                tags=("done",) if row.done else (),
            )
        self._count_var.set(count_label)
        if selected is not None and self.tree.exists(str(selected)):
            self.tree.selection_set(str(selected))
        self._update_buttons_state()

    def selected_task_id(self) -> Optional[int]:
        selection = self.tree.selection()
        if not selection:
            return None
        return int(selection[0])

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _update_buttons_state(self) -> None:
        state = "normal" if self.selected_task_id() is not None else "disabled"
        for button in (self.btn_toggle, self.btn_edit, self.btn_delete):
            button.configure(state=state)

    def _on_toggle_click(self) -> None:
        task_id = self.selected_task_id()
        if task_id is not None and self.on_toggle_done:
            self.on_toggle_done(task_id)

    def _on_edit_click(self) -> None:
        task_id = self.selected_task_id()
        if task_id is not None and self.on_edit:
            self.on_edit(task_id)

    def _on_delete_click(self) -> None:
        task_id = self.selected_task_id()
        if task_id is not None and self.on_delete:
            self.on_delete(task_id)


__all__ = ["TaskListView"]
