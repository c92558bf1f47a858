from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from lazyssh_settings.domain.models import StoreConfig


HomeResolver = Callable[[], Path]


def resolve_settings_path(config: StoreConfig, home_resolver: HomeResolver = Path.home) -> Path:
    """Return the absolute settings file path without touching the disk.

    Raises whatever ``home_resolver`` raises when no home directory can be
    determined (``RuntimeError`` or ``KeyError`` from ``Path.home``), and
    ``RuntimeError`` when it yields an empty path or a filesystem root.
    """
    raw = home_resolver()
    if not str(raw):
        raise RuntimeError("home directory is not set")
    home = Path(raw).expanduser()
    if home == Path(".") or home == Path(home.anchor):
        raise RuntimeError(f"home directory is not usable: {str(raw)!r}")
    return config.settings_path(home).absolute()
