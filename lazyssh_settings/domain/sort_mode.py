from __future__ import annotations

from enum import Enum
from typing import Any


class SortMode(str, Enum):
    ALIAS_ASC = "alias_asc"
    ALIAS_DESC = "alias_desc"
    LAST_SEEN_DESC = "last_seen_desc"
    LAST_SEEN_ASC = "last_seen_asc"

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return cls.parse(value) is not None

    @classmethod
    def parse(cls, value: Any) -> SortMode | None:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return _LABELS[self]

    def toggle_field(self) -> SortMode:
        return _TOGGLE_FIELD[self]

    def reverse(self) -> SortMode:
        return _REVERSE[self]


DEFAULT_SORT_MODE = SortMode.ALIAS_ASC

_LABELS: dict[SortMode, str] = {
    SortMode.ALIAS_ASC: "Alias ↑",
    SortMode.ALIAS_DESC: "Alias ↓",
    SortMode.LAST_SEEN_DESC: "Last SSH ↓",
    SortMode.LAST_SEEN_ASC: "Last SSH ↑",
}

_TOGGLE_FIELD: dict[SortMode, SortMode] = {
    SortMode.ALIAS_ASC: SortMode.LAST_SEEN_ASC,
    SortMode.ALIAS_DESC: SortMode.LAST_SEEN_DESC,
    SortMode.LAST_SEEN_DESC: SortMode.ALIAS_DESC,
    SortMode.LAST_SEEN_ASC: SortMode.ALIAS_ASC,
}

_REVERSE: dict[SortMode, SortMode] = {
    SortMode.ALIAS_ASC: SortMode.ALIAS_DESC,
    SortMode.ALIAS_DESC: SortMode.ALIAS_ASC,
    SortMode.LAST_SEEN_DESC: SortMode.LAST_SEEN_ASC,
    SortMode.LAST_SEEN_ASC: SortMode.LAST_SEEN_DESC,
}
