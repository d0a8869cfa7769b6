from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Callable, Dict, Mapping, Optional

from taskboard.domain.entities import is_valid_due_date
from taskboard.domain.filters import TaskFilter, TaskSorter, filter_for_key, sorter_for_key
from ..utils.logging import env_requests_debug

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})


@dataclass
class SettingsConfig:
    """Start-up preferences stored in ``user_prefs.json``."""

    initial_filter: str = "all"
    initial_sorter: str = "date_asc"
    seed_sample_tasks: bool = True
    default_title: str = "New task"
    default_description: str = "Description"
    default_priority: int = 1
    default_due_date: str = "15-01-2026"


CONFIG_KEYS = tuple(f.name for f in fields(SettingsConfig))


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_WORDS
    return bool(value)


def _text(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string.")
    return value.strip()


def _priority(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{key} must be an integer.")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{key} must be an integer.")
    try:
        number = int(value.strip()) if isinstance(value, str) else int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer.") from None
    if number < 1:
        raise ValueError(f"{key} must be 1 or higher.")
    return number


def _title(key: str, value: Any) -> str:
    text = _text(key, value)
    if not text:
        raise ValueError(f"{key} must not be empty.")
    return text


def _due_date(key: str, value: Any) -> str:
    text = _text(key, value)
    if not is_valid_due_date(text):
        raise ValueError(f"{key} must use DD-MM-YYYY.")
    return text


# Each coercer returns the stored value or raises ValueError.
_COERCERS: Dict[str, Callable[[str, Any], Any]] = {
    "initial_filter": lambda key, value: filter_for_key(_text(key, value)).key,
    "initial_sorter": lambda key, value: sorter_for_key(_text(key, value)).key,
    "seed_sample_tasks": lambda key, value: as_bool(value),
    "default_title": _title,
    "default_description": _text,
    "default_priority": _priority,
    "default_due_date": _due_date,
}


class SettingsVM:
    """Holds ``SettingsConfig`` plus the debug toggle; storage is injected via ``on_save``."""

    def __init__(
        self,
        *,
        config: Optional[SettingsConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or SettingsConfig()
        self.on_save = on_save
        self.debug_logging: bool = env_requests_debug()

    @property
    def initial_filter(self) -> TaskFilter:
        return filter_for_key(self.config.initial_filter)

    @property
    def initial_sorter(self) -> TaskSorter:
        return sorter_for_key(self.config.initial_sorter)

    @property
    def seed_sample_tasks(self) -> bool:
        return self.config.seed_sample_tasks

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Validate a flat preferences payload and apply it all-or-nothing.

        Raises:
            ValueError: For non-mapping payloads, unknown keys, or bad values.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")
        unknown = sorted(str(key) for key in payload if key not in CONFIG_KEYS and key != "debug_logging")
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(unknown)}")

        changes = {key: _COERCERS[key](key, payload[key]) for key in CONFIG_KEYS if key in payload}
        if changes:
            self.config = replace(self.config, **changes)
        if "debug_logging" in payload:
            self.debug_logging = as_bool(payload["debug_logging"])

    def to_dict(self) -> dict:
        return {**asdict(self.config), "debug_logging": bool(self.debug_logging)}

    def remember_view(self, task_filter: TaskFilter, sorter: TaskSorter) -> None:
        self.config = replace(self.config, initial_filter=task_filter.key, initial_sorter=sorter.key)

    def set_debug_logging(self, enabled: Any) -> None:
        self.debug_logging = as_bool(enabled)

    def cmd_save(self) -> None:
        if self.on_save:
            self.on_save(self.to_dict())


__all__ = ["CONFIG_KEYS", "SettingsConfig", "SettingsVM", "as_bool"]
