from .settings_store import (
    AnySettingsStore,
    SettingsStore,
    SortModeResult,
    UnavailableSettingsStore,
    create_settings_store,
)
from .storage_paths import resolve_settings_path

__all__ = [
    "AnySettingsStore",
    "SettingsStore",
    "SortModeResult",
    "UnavailableSettingsStore",
    "create_settings_store",
    "resolve_settings_path",
]
