"""Collapsible actions panel: sort toggle, filter toggle, and filter chips."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence, Tuple


class ActionsPanelView(ttk.LabelFrame):
    """Buttons for sorting and filtering the task list.

    The panel never decides what a toggle means; it forwards clicks and
    renders the labels it is given.
    """

    def __init__(
        self,
        parent,
        *,
        sorter_choices: Sequence[Tuple[str, str]] = (),
        on_toggle_sort: Optional[Callable[[], None]] = None,
        on_select_sorter: Optional[Callable[[str], None]] = None,
        on_toggle_filter: Optional[Callable[[], None]] = None,
        on_show_completed: Optional[Callable[[], None]] = None,
        on_show_incomplete: Optional[Callable[[], None]] = None,
        on_collapse: Optional[Callable[[], None]] = None,
        **kwargs,
    ):
        """Build the panel.

        Args:
            parent: Host frame.
            sorter_choices: ``(key, label)`` pairs for the sorter picker.
        """
        super().__init__(parent, text="Actions", padding=8, **kwargs)
        self._on_select_sorter = on_select_sorter
        self._on_show_completed = on_show_completed
        self._on_show_incomplete = on_show_incomplete
        self._sorter_keys = [key for key, _ in sorter_choices]
        self._sorter_labels = [label for _, label in sorter_choices]

        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=1)

        self.btn_sort = ttk.Button(self, text="Sort", command=on_toggle_sort)
        self.btn_sort.grid(row=0, column=0, sticky="ew", padx=(0, 4), pady=2)
        self.btn_filter = ttk.Button(self, text="Filter: OFF", command=on_toggle_filter)
        self.btn_filter.grid(row=0, column=1, sticky="ew", padx=(4, 0), pady=2)
        ttk.Button(self, text="▴", width=3, command=on_collapse).grid(row=0, column=2, padx=(8, 0))

        picker = ttk.Frame(self)
        picker.grid(row=1, column=0, sticky="w", pady=(6, 0))
        ttk.Label(picker, text="Order by:").pack(side=tk.LEFT, padx=(0, 6))
        self._sorter_var = tk.StringVar()
        self.cmb_sorter = ttk.Combobox(
            picker, textvariable=self._sorter_var, values=self._sorter_labels, state="readonly", width=16
        )
        self.cmb_sorter.pack(side=tk.LEFT)
        self.cmb_sorter.bind("<<ComboboxSelected>>", self._on_sorter_picked)

        self._chips = ttk.Frame(self)
        self._chip_var = tk.StringVar(value="")
        ttk.Radiobutton(
            self._chips, text="Completed", value="completed", variable=self._chip_var, command=self._on_chip
        ).pack(side=tk.LEFT, padx=(0, 8))
        ttk.Radiobutton(
            self._chips, text="Incomplete", value="incomplete", variable=self._chip_var, command=self._on_chip
        ).pack(side=tk.LEFT)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_state(self, *, sort_label: str, sorter_key: str, filter_label: str,
                  filter_active: bool, show_completed: bool) -> None:
        self.btn_sort.configure(text=sort_label)
        self.btn_filter.configure(text=filter_label)
        if sorter_key in self._sorter_keys:
            self._sorter_var.set(self._sorter_labels[self._sorter_keys.index(sorter_key)])
        if filter_active:
            self._chip_var.set("completed" if show_completed else "incomplete")
            self._chips.grid(row=1, column=1, sticky="e", pady=(6, 0))
        else:
            self._chips.grid_remove()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_sorter_picked(self, _event=None) -> None:
        label = self._sorter_var.get()
        if label in self._sorter_labels and self._on_select_sorter:
            self._on_select_sorter(self._sorter_keys[self._sorter_labels.index(label)])

    def _on_chip(self) -> None:
        if self._chip_var.get() == "completed":
            if self._on_show_completed:
                self._on_show_completed()
        elif self._on_show_incomplete:
            self._on_show_incomplete()


__all__ = ["ActionsPanelView"]
