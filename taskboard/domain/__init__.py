"""Domain package exports for value objects, strategies, and ports."""

from .entities import Task, is_valid_due_date, parse_due_date
from .filters import (
    BY_DATE_ASCENDING,
    BY_DATE_DESCENDING,
    BY_PRIORITY,
    BY_TITLE,
    SHOW_ALL,
    SHOW_COMPLETED,
    SHOW_INCOMPLETE,
    TaskFilter,
    TaskSorter,
    filter_for_key,
    sorter_for_key,
)
from .ports import UseCaseError
from .state_flow import StateFlow, combine, flat_map_latest, map_flow

__all__ = [
    "BY_DATE_ASCENDING",
    "BY_DATE_DESCENDING",
    "BY_PRIORITY",
    "BY_TITLE",
    "SHOW_ALL",
    "SHOW_COMPLETED",
    "SHOW_INCOMPLETE",
    "StateFlow",
    "Task",
    "TaskFilter",
    "TaskSorter",
    "UseCaseError",
    "combine",
    "filter_for_key",
    "flat_map_latest",
    "is_valid_due_date",
    "map_flow",
    "parse_due_date",
    "sorter_for_key",
]
