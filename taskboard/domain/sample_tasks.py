"""Demo tasks used to seed the in-memory repository."""

from __future__ import annotations

from typing import List

from .entities import Task


def initial_tasks() -> List[Task]:
    return [
        Task(1, "ostoslista", "lista", 1, "12-12-2026", True),
        Task(2, "Työlista", "lista", 2, "30-12-2026", False),
        Task(3, "kotitehtävät", "tehtävä", 3, "14-12-2026", False),
        Task(4, "tiskaus", "tehtävä", 4, "12-12-2026", False),
        Task(5, "öljynvaihto", "huolto", 5, "12-12-2027", False),
        Task(6, "keittiön uusinta", "remontti", 6, "12-12-2028", False),
    ]


__all__ = ["initial_tasks"]
