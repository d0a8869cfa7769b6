"""ttk styles for the task screen.

Views refer to styles by name (``Primary.TButton``, ``Error.TLabel``...) and
never set colors themselves.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Dict, Tuple

PALETTE: Dict[str, str] = {
    "window": "#f4f6fb",
    "surface": "#ffffff",
    "outline": "#d5dcea",
    "accent": "#3a5bd9",
    "accent_active": "#2c47b0",
    "hover": "#e8edfc",
    "heading": "#e6ebf7",
    "selected": "#d6e0fb",
    "text": "#1e2633",
}
ERROR_FG = "#b42318"
NOTICE_FG = "#0b7d6e"
MUTED_FG = "#6b7688"

_STYLES: Tuple[Tuple[str, Dict[str, Any]], ...] = (
    (".", {"background": PALETTE["window"], "foreground": PALETTE["text"]}),
    ("TLabelframe", {"background": PALETTE["window"], "bordercolor": PALETTE["outline"], "relief": "solid"}),
    ("TLabelframe.Label", {"background": PALETTE["window"], "font": ("TkDefaultFont", 10, "bold")}),
    ("Subtle.TLabel", {"foreground": MUTED_FG}),
    ("Title.TLabel", {"font": ("TkDefaultFont", 14, "bold")}),
    ("Error.TLabel", {"foreground": ERROR_FG}),
    ("Notice.TLabel", {"foreground": NOTICE_FG}),
    ("TButton", {"padding": (10, 5), "background": PALETTE["surface"], "bordercolor": PALETTE["outline"]}),
    ("Primary.TButton", {"background": PALETTE["accent"], "foreground": "#ffffff", "bordercolor": PALETTE["accent"]}),
    ("Treeview", {"rowheight": 26, "background": PALETTE["surface"], "fieldbackground": PALETTE["surface"]}),
    ("Treeview.Heading", {"background": PALETTE["heading"], "relief": "flat"}),
)


def apply_modern_theme(root: tk.Misc) -> None:
    """Switch to the ``clam`` theme and register the task screen styles."""
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")
    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=PALETTE["window"])

    for name, options in _STYLES:
        style.configure(name, **options)
    style.map("TButton", background=[("active", PALETTE["hover"])])
    style.map("Primary.TButton", background=[("active", PALETTE["accent_active"])])
    style.map("Treeview", background=[("selected", PALETTE["selected"])], foreground=[("selected", PALETTE["text"])])


__all__ = ["ERROR_FG", "MUTED_FG", "NOTICE_FG", "PALETTE", "apply_modern_theme"]
