from __future__ import annotations

import logging

from lazyssh_settings.domain import SortMode
from lazyssh_settings.infrastructure import AnySettingsStore


logger = logging.getLogger(__name__)


class SortPreference:
    """Current host-list ordering, backed by a settings store.

    Failures never escape: they are logged and handed back so the UI can
    show a status message while it keeps running with the in-memory value.
    """

    def __init__(self, store: AnySettingsStore, log: logging.Logger | None = None) -> None:
        self._store = store
        self._log = log or logger
        self._current = store.default_sort_mode

    @property
    def current(self) -> SortMode:
        return self._current

    def load(self) -> Exception | None:
        result = self._store.load_sort_mode()
        self._current = result.mode
        if result.error is not None:
            self._log.warning("failed to load sort mode: %s", result.error, extra={"error": str(result.error)})
        return result.error

    def set(self, mode: SortMode) -> Exception | None:
        self._current = mode
        try:
            self._store.save_sort_mode(mode)
        except (OSError, ValueError, TypeError, RuntimeError) as exc:
            self._log.warning("failed to save sort mode: %s", exc, extra={"error": str(exc)})
            return exc
        return None

    def toggle_field(self) -> Exception | None:
        return self.set(self._current.toggle_field())

    def reverse(self) -> Exception | None:
        return self.set(self._current.reverse())
