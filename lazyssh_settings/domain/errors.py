from __future__ import annotations

from pathlib import Path


class SettingsError(RuntimeError):
    pass


class SettingsUnavailableError(SettingsError):
    def __init__(self, message: str = "settings store is unavailable") -> None:
        super().__init__(message)


class MalformedSettingsError(SettingsError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Malformed settings file {path}: {reason}")
        self.path = path
        self.reason = reason
