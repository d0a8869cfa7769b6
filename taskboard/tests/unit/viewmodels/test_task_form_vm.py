from __future__ import annotations

import pytest

from taskboard.domain.entities import Task
from taskboard.viewmodels.task_form_vm import TaskFormVM


def test_blank_form_prefills_defaults() -> None:
    form = TaskFormVM.blank(priority=2, due_date="15-01-2026")
    state = form.snapshot()

    assert state.mode == "add"
    assert state.task_id is None
    assert (state.title, state.priority, state.due_date, state.done) == ("", "2", "15-01-2026", False)
    assert state.heading == "New task"


def test_from_task_copies_fields() -> None:
    form = TaskFormVM.from_task(Task(4, "tiskaus", "tehtävä", 4, "12-12-2026", True))
    state = form.snapshot()

    assert state.heading == "Edit task #4"
    assert (state.title, state.description, state.priority, state.done) == ("tiskaus", "tehtävä", "4", True)


def test_edit_mode_requires_task_id() -> None:
    with pytest.raises(ValueError):
        TaskFormVM(mode="edit")


def test_set_field_rejects_unknown_field() -> None:
    with pytest.raises(KeyError):
        TaskFormVM().set_field("owner", "me")


@pytest.mark.parametrize(
    "priority, message",
    [
        ("", "Priority must be a whole number."),
        ("1.5", "Priority must be a whole number."),
        ("-2", "Priority must be 1 or higher."),
    ],
)
def test_priority_validation(priority, message) -> None:
    form = TaskFormVM(fields={"title": "t", "priority": priority, "due_date": "01-01-2026"})

    assert form.validate() == {"priority": message}
    assert form.is_valid() is False


def test_to_task_strips_and_converts() -> None:
    form = TaskFormVM(
        fields={"title": " Read ", "description": " book ", "priority": " 2 ", "due_date": " 03-04-2026 ", "done": "true"}
    )

    task = form.to_task(11)

    assert task == Task(11, "Read", "book", 2, "03-04-2026", True)


def test_to_task_raises_when_invalid() -> None:
    form = TaskFormVM(fields={"priority": "1", "due_date": "01-01-2026"})

    with pytest.raises(ValueError) as excinfo:
        form.to_task(1)

    assert "title: Title is required." in str(excinfo.value)
    assert form.snapshot().errors == {"title": "Title is required."}
