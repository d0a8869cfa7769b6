"""Translate repository errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from taskboard.domain.ports import (
    DuplicateTaskError,
    TaskNotFoundError,
    UseCaseError,
)


def map_task_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map repository exceptions to stable UseCaseError codes.

    ``UseCaseError`` instances pass through unchanged; unknown exceptions get
    ``default_code`` and their own text (or ``default_message`` when empty).
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, DuplicateTaskError):
        return UseCaseError("DUPLICATE_ID", f"Task #{exc.task_id} already exists.")
    if isinstance(exc, TaskNotFoundError):
        return UseCaseError("TASK_NOT_FOUND", f"Task #{exc.task_id} not found.")

    message = str(exc) or default_message or "Unexpected error."
    return UseCaseError(default_code, message)


__all__ = ["map_task_error"]
