from .errors import MalformedSettingsError, SettingsError, SettingsUnavailableError
from .models import SORT_MODE_KEY, StoreConfig, UISettings
from .sort_mode import DEFAULT_SORT_MODE, SortMode

__all__ = [
    "DEFAULT_SORT_MODE",
    "MalformedSettingsError",
    "SORT_MODE_KEY",
    "SettingsError",
    "SettingsUnavailableError",
    "SortMode",
    "StoreConfig",
    "UISettings",
]
