"""Core clock widget services: redraw loop, state save/restore, settings, and logging."""

from .config import AppConfig, load_config, resolve_style, save_config
from .measure import MeasureMode, MeasureSpec, default_size, resolve_size
from .scheduler import REFRESH_PERIOD_MS, RedrawScheduler
from .state import PersistedConfig, restore_state, save_state
from .widget import ClockWidget

__all__ = [
    "AppConfig",
    "ClockWidget",
    "MeasureMode",
    "MeasureSpec",
    "PersistedConfig",
    "REFRESH_PERIOD_MS",
    "RedrawScheduler",
    "default_size",
    "load_config",
    "resolve_size",
    "resolve_style",
    "restore_state",
    "save_config",
    "save_state",
]
