from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .sort_mode import DEFAULT_SORT_MODE, SortMode


SORT_MODE_KEY = "sort_mode"


@dataclass(frozen=True)
class StoreConfig:
    app_dir_name: str = ".lazyssh"
    filename: str = "settings.json"
    dir_mode: int = 0o750
    file_mode: int = 0o600
    default_sort_mode: SortMode = DEFAULT_SORT_MODE

    def settings_path(self, home: Path) -> Path:
        return Path(home) / self.app_dir_name / self.filename


@dataclass
class UISettings:
    """In-memory form of the preference document.

    ``sort_mode`` keeps the raw decoded value; validation happens where the
    value is read back. Keys this version does not model are kept in
    ``extra`` so a save does not drop them.
    """

    sort_mode: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UISettings:
        extra = dict(data)
        sort_mode = extra.pop(SORT_MODE_KEY, None)
        return cls(sort_mode=sort_mode, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        payload = dict(self.extra)
        if self.sort_mode not in (None, ""):
            payload[SORT_MODE_KEY] = self.sort_mode
        return payload
