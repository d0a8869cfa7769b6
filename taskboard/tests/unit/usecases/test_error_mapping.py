from __future__ import annotations

from taskboard.domain.ports import DuplicateTaskError, TaskNotFoundError, UseCaseError
from taskboard.usecases.error_mapping import map_task_error


def test_usecase_error_passes_through() -> None:
    original = UseCaseError("ADD_FAILED", "nope")

    assert map_task_error(original, default_code="OTHER") is original


def test_duplicate_and_not_found_have_stable_codes() -> None:
    duplicate = map_task_error(DuplicateTaskError(3), default_code="ADD_FAILED")
    missing = map_task_error(TaskNotFoundError(9), default_code="LOAD_FAILED")

    assert (duplicate.code, duplicate.message) == ("DUPLICATE_ID", "Task #3 already exists.")
    assert (missing.code, missing.message) == ("TASK_NOT_FOUND", "Task #9 not found.")


def test_unknown_errors_use_default_code_and_message() -> None:
    err = map_task_error(RuntimeError("disk on fire"), default_code="UPDATE_FAILED")
    empty = map_task_error(RuntimeError(), default_code="DELETE_FAILED", default_message="Delete failed.")
    bare = map_task_error(KeyError(), default_code="TOGGLE_FAILED")

    assert (err.code, err.message) == ("UPDATE_FAILED", "disk on fire")
    assert (empty.code, empty.message) == ("DELETE_FAILED", "Delete failed.")
    assert (bare.code, bare.message) == ("TOGGLE_FAILED", "Unexpected error.")
