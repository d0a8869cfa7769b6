"""Inline add/edit task form."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Dict, Optional

_TEXT_FIELDS = (
    ("title", "Title"),
    ("description", "Description"),
    ("priority", "Priority"),
    ("due_date", "Due (DD-MM-YYYY)"),
)


class TaskFormView(ttk.LabelFrame):
    """Entry widgets for one task; every keystroke goes to ``on_change``."""

    def __init__(
        self,
        parent,
        *,
        on_change: Optional[Callable[[str, Any], None]] = None,
        on_submit: Optional[Callable[[], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
        **kwargs,
    ):
        super().__init__(parent, text="New task", padding=8, **kwargs)
        self._on_change = on_change
        self._revision: Optional[int] = None
        self._syncing = False

        self.columnconfigure(1, weight=1)
        self._vars: Dict[str, tk.Variable] = {}
        self._error_labels: Dict[str, ttk.Label] = {}
        for row, (field_id, label) in enumerate(_TEXT_FIELDS):
            ttk.Label(self, text=label).grid(row=row, column=0, sticky="w", padx=(0, 8), pady=2)
            var = tk.StringVar()
            var.trace_add("write", lambda *_a, f=field_id: self._emit(f))
            entry = ttk.Entry(self, textvariable=var)
            entry.grid(row=row, column=1, sticky="ew", pady=2)
            entry.bind("<Return>", lambda _e: on_submit and on_submit())
            err = ttk.Label(self, text="", style="Error.TLabel")
            err.grid(row=row, column=2, sticky="w", padx=(8, 0))
            self._vars[field_id] = var
            self._error_labels[field_id] = err

        done_var = tk.BooleanVar(value=False)
        done_var.trace_add("write", lambda *_a: self._emit("done"))
        self._vars["done"] = done_var
        ttk.Checkbutton(self, text="Done", variable=done_var).grid(
            row=len(_TEXT_FIELDS), column=1, sticky="w", pady=2
        )

        buttons = ttk.Frame(self)
        buttons.grid(row=len(_TEXT_FIELDS) + 1, column=1, sticky="e", pady=(6, 0))
        ttk.Button(buttons, text="Cancel", command=on_cancel).pack(side=tk.RIGHT)
        ttk.Button(buttons, text="Save", style="Primary.TButton", command=on_submit).pack(side=tk.RIGHT, padx=6)

    def set_form(self, form) -> None:
        """Render a ``TaskFormState``.

        Field values are only pushed when a form is (re)opened, detected by
        ``form.revision``, so typing is not overwritten by its own echo.
        """
        if form.revision != self._revision:
            self._revision = form.revision
            self.configure(text=form.heading)
            self._syncing = True
            try:
                for field_id, _ in _TEXT_FIELDS:
                    self._vars[field_id].set(getattr(form, field_id))
                self._vars["done"].set(bool(form.done))
            finally:
                self._syncing = False
        for field_id, label in self._error_labels.items():
            label.configure(text=form.errors.get(field_id, ""))

    def clear(self) -> None:
        self._revision = None

    def _emit(self, field_id: str) -> None:
        if self._syncing or self._on_change is None:
            return
        self._on_change(field_id, self._vars[field_id].get())


__all__ = ["TaskFormView"]
