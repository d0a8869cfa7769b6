"""Domain value objects shared across adapters, use-cases, and view models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

DUE_DATE_FORMAT = "%d-%m-%Y"


@dataclass(frozen=True)
class Task:
    """Single task record as shown in the task list."""

    id: int
    """Repository-wide identifier, unique within one repository."""

    title: str
    description: str

    priority: int
    """Lower numbers sort first."""

    due_date: str
    """Due date text, conventionally ``DD-MM-YYYY``."""

    done: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError("Task.id must be an integer.")
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise TypeError("Task.priority must be an integer.")
        for name in ("title", "description", "due_date"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"Task.{name} must be a string.")
        if not isinstance(self.done, bool):
            raise TypeError("Task.done must be a bool.")

    def toggled(self) -> "Task":
        """Return a copy with the completion flag flipped."""
        return replace(self, done=not self.done)

    def __str__(self) -> str:
        return f"#{self.id} {self.title}"


def parse_due_date(text: Optional[str]) -> date:
    """Parse a strict ``DD-MM-YYYY`` due date into a calendar date.

    Raises:
        ValueError: When the text is empty, malformed, or not a real date.
    """
    if not isinstance(text, str) or not text.strip():
        raise ValueError("Due date is required.")
    cleaned = text.strip()
    parts = cleaned.split("-")
    if len(parts) != 3 or [len(p) for p in parts] != [2, 2, 4] or not all(p.isdigit() for p in parts):
        raise ValueError("Due date must use DD-MM-YYYY.")
    try:
        return datetime.strptime(cleaned, DUE_DATE_FORMAT).date()
    except ValueError as exc:
        raise ValueError(f"Due date is not a valid date: {cleaned}") from exc


def is_valid_due_date(text: Optional[str]) -> bool:
    try:
        parse_due_date(text)
    except ValueError:
        return False
    return True


__all__ = ["DUE_DATE_FORMAT", "Task", "is_valid_due_date", "parse_due_date"]
