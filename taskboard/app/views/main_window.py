"""
MainWindowView
---------------
Tkinter main window for the task manager. This file contains **only View
code**: no repository access, no filtering logic. It exposes callback hooks
that are connected to ``TaskVM`` commands by ``taskboard.app.main.App``.

Layout:
  * Toolbar with "New task", "Add...", "Actions" and "Save View"
  * Content area hosting the actions panel, the inline form and the list
  * Status bar showing the current error or notice with a dismiss button
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .theme import apply_modern_theme


class MainWindowView(tk.Tk):
    """Top-level application window.

    Child views (ActionsPanelView, TaskFormView, TaskListView) are created by
    the app and mounted into the host frames exposed here.
    """

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        on_quick_add: OnVoid = None,
        on_open_add_form: OnVoid = None,
        on_toggle_actions: OnVoid = None,
        on_save_view: OnVoid = None,
        on_dismiss_message: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title("Task Manager")
        self.geometry("860x640")
        self.minsize(640, 480)
        apply_modern_theme(self)

        self._on_quick_add = on_quick_add
        self._on_open_add_form = on_open_add_form
        self._on_toggle_actions = on_toggle_actions
        self._on_save_view = on_save_view
        self._on_dismiss_message = on_dismiss_message

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_toolbar(self)
        self._build_content(self)
        self._build_statusbar(self)

        self.bind("<Control-n>", lambda e: self._on_quick_add and self._on_quick_add())
        self.bind("<Control-Shift-N>", lambda e: self._on_open_add_form and self._on_open_add_form())
        self.bind("<Escape>", lambda e: self._on_dismiss_message and self._on_dismiss_message())

    # ------------------------------------------------------------------
    # Toolbar
    # ------------------------------------------------------------------
    def _build_toolbar(self, parent: tk.Widget) -> None:
        toolbar = ttk.Frame(parent)
        toolbar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))

        ttk.Label(toolbar, text="Task Manager", style="Title.TLabel").grid(row=0, column=0, padx=(0, 24))
        ttk.Button(toolbar, text="New task", style="Primary.TButton", command=self._on_quick_add).grid(
            row=0, column=1, padx=(0, 6)
        )
        ttk.Button(toolbar, text="Add...", command=self._on_open_add_form).grid(row=0, column=2, padx=6)
        self.btn_actions = ttk.Button(toolbar, text="Actions ▾", command=self._on_toggle_actions)
        self.btn_actions.grid(row=0, column=3, padx=6)
        ttk.Button(toolbar, text="Save View", command=self._on_save_view).grid(row=0, column=4, padx=(24, 0))

    # ------------------------------------------------------------------
    # Content hosts
    # ------------------------------------------------------------------
    def _build_content(self, parent: tk.Widget) -> None:
        content = ttk.Frame(parent)
        content.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)
        content.columnconfigure(0, weight=1)
        content.rowconfigure(2, weight=1)

        self.actions_host = ttk.Frame(content)
        self.actions_host.grid(row=0, column=0, sticky="ew")
        self.form_host = ttk.Frame(content)
        self.form_host.grid(row=1, column=0, sticky="ew")
        self.list_host = ttk.Frame(content)
        self.list_host.grid(row=2, column=0, sticky="nsew")
        self.list_host.rowconfigure(0, weight=1)
        self.list_host.columnconfigure(0, weight=1)

    def mount_actions_panel(self, widget: tk.Widget) -> None:
        widget.pack(in_=self.actions_host, fill="x", pady=(0, 6))

    def mount_form_panel(self, widget: tk.Widget) -> None:
        widget.pack(in_=self.form_host, fill="x", pady=(0, 6))

    def mount_task_list(self, widget: tk.Widget) -> None:
        widget.grid(in_=self.list_host, row=0, column=0, sticky="nsew")

    def set_actions_expanded(self, expanded: bool) -> None:
        self.btn_actions.configure(text="Actions ▴" if expanded else "Actions ▾")

    # ------------------------------------------------------------------
    # Status bar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        bar = ttk.Frame(parent)
        bar.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 8))
        bar.columnconfigure(0, weight=1)
        self._status_var = tk.StringVar(value="Ready.")
        self._status_label = ttk.Label(bar, textvariable=self._status_var, style="Subtle.TLabel")
        self._status_label.grid(row=0, column=0, sticky="w")
        self._btn_dismiss = ttk.Button(bar, text="Dismiss", command=self._on_dismiss_message)
        self._btn_dismiss.grid(row=0, column=1, sticky="e")
        self._btn_dismiss.grid_remove()

    def set_status_message(self, text: str, *, kind: str = "info") -> None:
        """Show ``text`` in the status bar; ``kind`` is info, notice or error."""
        style = {"error": "Error.TLabel", "notice": "Notice.TLabel"}.get(kind, "Subtle.TLabel")
        self._status_var.set(text)
        self._status_label.configure(style=style)
        if kind in ("error", "notice"):
            self._btn_dismiss.grid()
        else:
            self._btn_dismiss.grid_remove()
