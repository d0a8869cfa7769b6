"""Inline add/edit form state and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Optional

from taskboard.domain.entities import Task, parse_due_date
from .settings_vm import as_bool

FormMode = Literal["add", "edit"]
FIELD_IDS = ("title", "description", "priority", "due_date", "done")


@dataclass(frozen=True)
class TaskFormState:
    """Read-only copy of the form published inside ``TaskUiState``."""

    mode: FormMode
    task_id: Optional[int]
    title: str = ""
    description: str = ""
    priority: str = ""
    due_date: str = ""
    done: bool = False
    errors: Mapping[str, str] = field(default_factory=dict)
    revision: int = 0
    """Bumped each time a form is opened; views reload their inputs when it changes."""

    @property
    def heading(self) -> str:
        return "New task" if self.mode == "add" else f"Edit task #{self.task_id}"


class TaskFormVM:
    """Holds raw form input; no I/O here."""

    def __init__(
        self,
        *,
        mode: FormMode = "add",
        task_id: Optional[int] = None,
        fields: Optional[Mapping[str, Any]] = None,
        revision: int = 0,
    ) -> None:
        if mode == "edit" and task_id is None:
            raise ValueError("Edit form requires a task id.")
        self.mode: FormMode = mode
        self.task_id = task_id
        self.revision = revision
        self.fields: Dict[str, Any] = {
            "title": "",
            "description": "",
            "priority": "",
            "due_date": "",
            "done": False,
        }
        self.errors: Dict[str, str] = {}
        for key, value in (fields or {}).items():
            self.set_field(key, value)

    @classmethod
    def blank(cls, *, priority: int = 1, due_date: str = "", revision: int = 0) -> "TaskFormVM":
        return cls(mode="add", fields={"priority": str(priority), "due_date": due_date}, revision=revision)

    @classmethod
    def from_task(cls, task: Task, *, revision: int = 0) -> "TaskFormVM":
        return cls(
            mode="edit",
            task_id=task.id,
            revision=revision,
            fields={
                "title": task.title,
                "description": task.description,
                "priority": str(task.priority),
                "due_date": task.due_date,
                "done": task.done,
            },
        )

    def set_field(self, field_id: str, value: Any) -> None:
        if field_id not in FIELD_IDS:
            raise KeyError(f"Unknown form field: {field_id}")
        if field_id == "done":
            self.fields["done"] = as_bool(value)
        else:
            self.fields[field_id] = "" if value is None else str(value)
        # Editing a field clears its stale error.
        self.errors.pop(field_id, None)

    def validate(self) -> Dict[str, str]:
        """Check all fields, store and return field -> message."""
        errors: Dict[str, str] = {}
        if not self.fields["title"].strip():
            errors["title"] = "Title is required."
        priority_text = self.fields["priority"].strip()
        try:
            priority = int(priority_text)
        except ValueError:
            errors["priority"] = "Priority must be a whole number."
        else:
            if priority < 1:
                errors["priority"] = "Priority must be 1 or higher."
        try:
            parse_due_date(self.fields["due_date"])
        except ValueError as exc:
            errors["due_date"] = str(exc)
        self.errors = errors
        return dict(errors)

    def is_valid(self) -> bool:
        return not self.validate()

    def to_task(self, task_id: int) -> Task:
        errors = self.validate()
        if errors:
            raise ValueError("; ".join(f"{key}: {msg}" for key, msg in sorted(errors.items())))
        return Task(
            id=task_id,
            title=self.fields["title"].strip(),
            description=self.fields["description"].strip(),
            priority=int(self.fields["priority"].strip()),
            due_date=self.fields["due_date"].strip(),
            done=bool(self.fields["done"]),
        )

    def snapshot(self) -> TaskFormState:
        return TaskFormState(
            mode=self.mode,
            task_id=self.task_id,
            title=self.fields["title"],
            description=self.fields["description"],
            priority=self.fields["priority"],
            due_date=self.fields["due_date"],
            done=bool(self.fields["done"]),
            errors=dict(self.errors),
            revision=self.revision,
        )


__all__ = ["FIELD_IDS", "FormMode", "TaskFormState", "TaskFormVM"]
