from __future__ import annotations

from typing import List

import pytest

from taskboard.adapters.task_repo_memory import InMemoryTaskRepository
from taskboard.domain.entities import Task
from taskboard.domain.ports import DuplicateTaskError
from taskboard.domain.sample_tasks import initial_tasks


def _task(task_id: int, **overrides) -> Task:
    fields = dict(title=f"task {task_id}", description="", priority=1, due_date="01-01-2026", done=False)
    fields.update(overrides)
    return Task(task_id, **fields)


def test_seeded_repository_exposes_initial_tasks() -> None:
    repo = InMemoryTaskRepository(initial_tasks())

    assert [t.id for t in repo.tasks().value] == [1, 2, 3, 4, 5, 6]
    assert repo.get_all_tasks() is repo.tasks()


def test_duplicate_seed_ids_are_rejected() -> None:
    with pytest.raises(DuplicateTaskError) as excinfo:
        InMemoryTaskRepository([_task(1), _task(2), _task(1)])

    assert excinfo.value.task_id == 1


def test_add_appends_and_publishes_new_list() -> None:
    repo = InMemoryTaskRepository([_task(1)])
    snapshots: List[List[Task]] = []
    repo.tasks().subscribe(snapshots.append, emit_current=False)
    before = repo.tasks().value

    repo.add_task(_task(2))

    assert [t.id for t in repo.tasks().value] == [1, 2]
    assert [t.id for t in before] == [1]
    assert len(snapshots) == 1


def test_add_duplicate_id_raises_and_keeps_state() -> None:
    repo = InMemoryTaskRepository([_task(1)])

    with pytest.raises(DuplicateTaskError):
        repo.add_task(_task(1, title="other"))

    assert [t.title for t in repo.tasks().value] == ["task 1"]


def test_update_replaces_task_in_place() -> None:
    repo = InMemoryTaskRepository([_task(1), _task(2), _task(3)])

    repo.update_task(_task(2, title="renamed", priority=5))

    assert [t.id for t in repo.tasks().value] == [1, 2, 3]
    assert repo.tasks().value[1].title == "renamed"
    assert repo.tasks().value[1].priority == 5


def test_delete_and_toggle() -> None:
    repo = InMemoryTaskRepository([_task(1), _task(2)])

    repo.toggle_task_completion(2)
    assert repo.tasks().value[1].done is True
    repo.toggle_task_completion(2)
    assert repo.tasks().value[1].done is False

    repo.delete_task(1)
    assert [t.id for t in repo.tasks().value] == [2]


def test_unknown_ids_are_ignored_without_emitting() -> None:
    repo = InMemoryTaskRepository([_task(1)])
    snapshots: List[List[Task]] = []
    repo.tasks().subscribe(snapshots.append, emit_current=False)

    repo.update_task(_task(99))
    repo.delete_task(99)
    repo.toggle_task_completion(99)

    assert snapshots == []
    assert [t.id for t in repo.tasks().value] == [1]


def test_empty_repository() -> None:
    repo = InMemoryTaskRepository()

    assert repo.tasks().value == []
    repo.add_task(_task(1))
    assert len(repo.tasks().value) == 1


def test_mutations_report_whether_a_task_changed() -> None:
    repo = InMemoryTaskRepository([_task(1)])

    assert repo.update_task(_task(1, title="new")) is True
    assert repo.toggle_task_completion(1) is True
    assert repo.update_task(_task(2)) is False
    assert repo.toggle_task_completion(2) is False
    assert repo.delete_task(2) is False
    assert repo.delete_task(1) is True
