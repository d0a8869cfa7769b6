from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

import pytest

from taskboard.adapters.task_repo_memory import InMemoryTaskRepository
from taskboard.domain.entities import Task
from taskboard.domain.sample_tasks import initial_tasks
from taskboard.usecases.add_task import AddTask
from taskboard.usecases.delete_task import DeleteTask
from taskboard.usecases.generate_task_id import GenerateTaskId
from taskboard.usecases.get_filtered_and_sorted_tasks import GetFilteredAndSortedTasks
from taskboard.usecases.get_task import GetTask
from taskboard.usecases.toggle_task_completion import ToggleTaskCompletion
from taskboard.usecases.update_task import UpdateTask
from taskboard.viewmodels.task_vm import TaskVM


def build_task_vm(repository, **kwargs) -> TaskVM:
    return TaskVM(
        get_filtered_and_sorted_tasks=GetFilteredAndSortedTasks(repository),
        add_task=AddTask(repository),
        update_task=UpdateTask(repository),
        delete_task=DeleteTask(repository),
        toggle_task_completion=ToggleTaskCompletion(repository),
        generate_task_id=GenerateTaskId(repository),
        get_task=GetTask(repository),
        **kwargs,
    )


@pytest.fixture
def sample_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository(initial_tasks())


@pytest.fixture
def make_vm() -> Iterator[Callable[..., TaskVM]]:
    """Factory building a ``TaskVM`` over a fresh in-memory repository."""
    created = []

    def factory(tasks: Optional[Iterable[Task]] = None, *, repository=None, **kwargs) -> TaskVM:
        repo = repository if repository is not None else InMemoryTaskRepository(
            initial_tasks() if tasks is None else tasks
        )
        vm = build_task_vm(repo, **kwargs)
        created.append(vm)
        return vm

    yield factory
    for vm in created:
        vm.close()
