from __future__ import annotations

import pytest

from taskboard.domain.entities import Task
from taskboard.domain.filters import (
    BY_DATE_ASCENDING,
    BY_DATE_DESCENDING,
    BY_PRIORITY,
    BY_TITLE,
    FILTERS,
    SHOW_ALL,
    SHOW_COMPLETED,
    SHOW_INCOMPLETE,
    SORTERS,
    filter_for_key,
    next_filter,
    sorter_for_key,
    to_sortable_date,
    toggled_sort_order,
)
from taskboard.domain.sample_tasks import initial_tasks


def _ids(tasks) -> list:
    return [task.id for task in tasks]


def test_to_sortable_date_reorders_parts() -> None:
    assert to_sortable_date("12-12-2026") == "2026-12-12"
    assert to_sortable_date("not a date") == "not a date"


def test_filters_select_by_completion() -> None:
    tasks = initial_tasks()

    assert _ids(SHOW_ALL.apply(tasks)) == [1, 2, 3, 4, 5, 6]
    assert _ids(SHOW_COMPLETED.apply(tasks)) == [1]
    assert _ids(SHOW_INCOMPLETE.apply(tasks)) == [2, 3, 4, 5, 6]


def test_filters_do_not_mutate_input() -> None:
    tasks = initial_tasks()
    before = list(tasks)

    result = SHOW_ALL.apply(tasks)

    assert tasks == before
    assert result is not tasks


def test_date_sorters_compare_calendar_order_and_are_stable() -> None:
    tasks = initial_tasks()

    # 1, 4 share 12-12-2026 and keep input order
    assert _ids(BY_DATE_ASCENDING.sort(tasks)) == [1, 4, 3, 2, 5, 6]
    assert _ids(BY_DATE_DESCENDING.sort(tasks)) == [6, 5, 2, 3, 1, 4]


def test_date_sort_crosses_month_boundaries() -> None:
    tasks = [
        Task(1, "late", "", 1, "01-02-2026"),
        Task(2, "early", "", 1, "31-01-2026"),
    ]

    assert _ids(BY_DATE_ASCENDING.sort(tasks)) == [2, 1]


def test_priority_and_title_sorters() -> None:
    tasks = [
        Task(1, "banana", "", 3, "01-01-2026"),
        Task(2, "Apple", "", 1, "01-01-2026"),
        Task(3, "cherry", "", 2, "01-01-2026"),
    ]

    assert _ids(BY_PRIORITY.sort(tasks)) == [2, 3, 1]
    assert _ids(BY_TITLE.sort(tasks)) == [2, 1, 3]


def test_sorters_return_empty_list_for_empty_input() -> None:
    for sorter in SORTERS:
        assert sorter.sort([]) == []


def test_lookup_by_key() -> None:
    assert filter_for_key(" Completed ") is SHOW_COMPLETED
    assert sorter_for_key("DATE_DESC") is BY_DATE_DESCENDING
    assert [f.key for f in FILTERS] == ["all", "completed", "incomplete"]

    with pytest.raises(ValueError):
        filter_for_key("nope")
    with pytest.raises(ValueError):
        sorter_for_key("nope")


def test_next_filter_cycles_all_incomplete_completed() -> None:
    assert next_filter(SHOW_ALL) is SHOW_INCOMPLETE
    assert next_filter(SHOW_INCOMPLETE) is SHOW_COMPLETED
    assert next_filter(SHOW_COMPLETED) is SHOW_ALL


def test_toggled_sort_order() -> None:
    assert toggled_sort_order(BY_DATE_ASCENDING) is BY_DATE_DESCENDING
    assert toggled_sort_order(BY_DATE_DESCENDING) is BY_DATE_ASCENDING
    assert toggled_sort_order(BY_PRIORITY) is BY_DATE_ASCENDING
    assert toggled_sort_order(BY_TITLE) is BY_DATE_ASCENDING
