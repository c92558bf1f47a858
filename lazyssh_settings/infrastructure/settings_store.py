from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import os
from pathlib import Path
from typing import Any

from lazyssh_settings.domain import (
    MalformedSettingsError,
    SettingsUnavailableError,
    SortMode,
    StoreConfig,
    UISettings,
)

from .storage_paths import HomeResolver, resolve_settings_path


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortModeResult:
    mode: SortMode
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SettingsStore:
    """Whole-document read-modify-write access to ``settings.json``.

    Nothing is cached: every load reads the file and every save reads it
    again before writing. Callers must serialize concurrent saves.
    """

    def __init__(self, path: Path, config: StoreConfig | None = None) -> None:
        self.path = Path(path)
        self.config = config or StoreConfig()

    @property
    def default_sort_mode(self) -> SortMode:
        return self.config.default_sort_mode

    def load_sort_mode(self) -> SortModeResult:
        try:
            document = self._read_document()
        except (OSError, MalformedSettingsError) as exc:
            return SortModeResult(mode=self.default_sort_mode, error=exc)

        mode = SortMode.parse(document.sort_mode)
        if mode is None:
            return SortModeResult(mode=self.default_sort_mode)
        return SortModeResult(mode=mode)

    def save_sort_mode(self, mode: SortMode) -> None:
        document = self._read_document()
        document.sort_mode = mode.value if isinstance(mode, SortMode) else mode
        self._write_document(document)

    def _read_document(self) -> UISettings:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return UISettings()
        except UnicodeDecodeError as exc:
            raise MalformedSettingsError(self.path, str(exc)) from exc

        if not raw:
            return UISettings()

        try:
            data: Any = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise MalformedSettingsError(self.path, str(exc) or type(exc).__name__) from exc
        if not isinstance(data, dict):
            raise MalformedSettingsError(self.path, "root is not a JSON object")

        document = UISettings.from_dict(data)
        if document.sort_mode is not None and not isinstance(document.sort_mode, str):
            raise MalformedSettingsError(self.path, "sort_mode is not a string")
        return document

    def _make_parent_dirs(self) -> None:
        missing: list[Path] = []
        parent = self.path.parent
        while not parent.exists() and parent != parent.parent:
            missing.append(parent)
            parent = parent.parent
        for directory in reversed(missing):
            directory.mkdir(mode=self.config.dir_mode, exist_ok=True)
        if not self.path.parent.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.path.parent}")

    def _write_document(self, document: UISettings) -> None:
        self._make_parent_dirs()
        text = json.dumps(document.to_dict(), ensure_ascii=False, indent=2, sort_keys=True) + "\n"

        tmp = self.path.with_name(self.path.name + ".tmp")
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.config.file_mode)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            # O_CREAT's mode does not apply to a leftover temp file
            os.chmod(tmp, self.config.file_mode)
            os.replace(tmp, self.path)
        except BaseException:
            if tmp.exists():
                tmp.unlink()
            raise


class UnavailableSettingsStore:
    """Stand-in used when no home directory could be resolved.

    Loads report the configured default together with a
    ``SettingsUnavailableError``; saves raise it without any I/O.
    """

    path = None

    def __init__(self, config: StoreConfig | None = None, reason: str = "") -> None:
        self.config = config or StoreConfig()
        self.reason = reason

    @property
    def default_sort_mode(self) -> SortMode:
        return self.config.default_sort_mode

    def _error(self) -> SettingsUnavailableError:
        if self.reason:
            return SettingsUnavailableError(f"settings store is unavailable: {self.reason}")
        return SettingsUnavailableError()

    def load_sort_mode(self) -> SortModeResult:
        return SortModeResult(mode=self.default_sort_mode, error=self._error())

    def save_sort_mode(self, mode: SortMode) -> None:
        raise self._error()


AnySettingsStore = SettingsStore | UnavailableSettingsStore


def create_settings_store(
    log: logging.Logger | None = None,
    config: StoreConfig | None = None,
    home_resolver: HomeResolver = Path.home,
) -> AnySettingsStore:
    log = log or logger
    config = config or StoreConfig()
    try:
        path = resolve_settings_path(config, home_resolver)
    except (RuntimeError, KeyError, OSError) as exc:
        log.warning("failed to determine home directory for settings: %s", exc, extra={"error": str(exc)})
        return UnavailableSettingsStore(config=config, reason=str(exc))
    return SettingsStore(path=path, config=config)
