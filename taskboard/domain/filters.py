"""Pluggable filter and sorter strategies for task lists.

Strategies are stateless singletons compared by identity. Every strategy
returns a new list and never mutates its input; sorts are stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Protocol, Tuple

from .entities import Task


class TaskFilter(Protocol):
    """Selects a subset of tasks by completion status."""

    key: str
    label: str

    def apply(self, tasks: Iterable[Task]) -> List[Task]: ...


class TaskSorter(Protocol):
    """Total order over tasks."""

    key: str
    label: str

    def sort(self, tasks: Iterable[Task]) -> List[Task]: ...


def to_sortable_date(text: str) -> str:
    """Convert ``DD-MM-YYYY`` to ``YYYY-MM-DD``; other shapes pass through."""
    parts = text.split("-")
    if len(parts) == 3:
        return f"{parts[2]}-{parts[1]}-{parts[0]}"
    return text


@dataclass(frozen=True)
class _PredicateFilter:
    key: str
    label: str
    predicate: Callable[[Task], bool]

    def apply(self, tasks: Iterable[Task]) -> List[Task]:
        return [task for task in tasks if self.predicate(task)]

    def __repr__(self) -> str:
        return f"TaskFilter({self.key})"


@dataclass(frozen=True)
class _KeySorter:
    key: str
    label: str
    sort_key: Callable[[Task], object]
    descending: bool = False

    def sort(self, tasks: Iterable[Task]) -> List[Task]:
        return sorted(tasks, key=self.sort_key, reverse=self.descending)

    def __repr__(self) -> str:
        return f"TaskSorter({self.key})"


SHOW_ALL = _PredicateFilter("all", "All", lambda task: True)
SHOW_COMPLETED = _PredicateFilter("completed", "Completed", lambda task: task.done)
SHOW_INCOMPLETE = _PredicateFilter("incomplete", "Incomplete", lambda task: not task.done)

BY_DATE_ASCENDING = _KeySorter("date_asc", "Oldest first", lambda task: to_sortable_date(task.due_date))
BY_DATE_DESCENDING = _KeySorter(
    "date_desc", "Newest first", lambda task: to_sortable_date(task.due_date), descending=True
)
BY_PRIORITY = _KeySorter("priority", "Priority", lambda task: task.priority)
BY_TITLE = _KeySorter("title", "Title", lambda task: task.title.lower())

FILTERS: Tuple[TaskFilter, ...] = (SHOW_ALL, SHOW_COMPLETED, SHOW_INCOMPLETE)
SORTERS: Tuple[TaskSorter, ...] = (BY_DATE_ASCENDING, BY_DATE_DESCENDING, BY_PRIORITY, BY_TITLE)

_FILTERS_BY_KEY: Dict[str, TaskFilter] = {f.key: f for f in FILTERS}
_SORTERS_BY_KEY: Dict[str, TaskSorter] = {s.key: s for s in SORTERS}

# ALL -> INCOMPLETE -> COMPLETED -> ALL
_FILTER_CYCLE: Dict[str, TaskFilter] = {
    SHOW_ALL.key: SHOW_INCOMPLETE,
    SHOW_INCOMPLETE.key: SHOW_COMPLETED,
    SHOW_COMPLETED.key: SHOW_ALL,
}


def filter_for_key(key: str) -> TaskFilter:
    try:
        return _FILTERS_BY_KEY[str(key).strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown task filter: {key!r}") from None


def sorter_for_key(key: str) -> TaskSorter:
    try:
        return _SORTERS_BY_KEY[str(key).strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown task sorter: {key!r}") from None


def next_filter(current: TaskFilter) -> TaskFilter:
    """Return the filter that follows ``current`` in the toggle cycle."""
    return _FILTER_CYCLE.get(current.key, SHOW_ALL)


def toggled_sort_order(current: TaskSorter) -> TaskSorter:
    """Flip date ordering; non-date sorters fall back to oldest first."""
    if current is BY_DATE_ASCENDING:
        return BY_DATE_DESCENDING
    return BY_DATE_ASCENDING


__all__ = [
    "BY_DATE_ASCENDING",
    "BY_DATE_DESCENDING",
    "BY_PRIORITY",
    "BY_TITLE",
    "FILTERS",
    "SHOW_ALL",
    "SHOW_COMPLETED",
    "SHOW_INCOMPLETE",
    "SORTERS",
    "TaskFilter",
    "TaskSorter",
    "filter_for_key",
    "next_filter",
    "sorter_for_key",
    "to_sortable_date",
    "toggled_sort_order",
]
