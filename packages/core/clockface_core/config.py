"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from clockface_renderer.colors import parse_color
from clockface_renderer.models import ClockStyle
from clockface_renderer.themes import DEFAULT_THEME_NAME, get_theme

from .logging_setup import get_logger
from .measure import DEFAULT_SIZE_DP
from .scheduler import REFRESH_PERIOD_MS


CONFIG_VERSION = 1

logger = get_logger("config")


@dataclass
class WindowConfig:
    width: int = DEFAULT_SIZE_DP
    height: int = DEFAULT_SIZE_DP
    density: float = 1.0


@dataclass
class ClockConfig:
    refresh_ms: int = REFRESH_PERIOD_MS
    theme: str = DEFAULT_THEME_NAME


@dataclass
class StyleConfig:
    """Optional ``#AARRGGBB`` overrides applied on top of the theme."""

    ring: str | None = None
    hour_hand: str | None = None
    minute_hand: str | None = None
    second_hand: str | None = None
    dots: str | None = None
    text: str | None = None
    background: str | None = None


@dataclass
class StateConfig:
    saved: dict[str, Any] | None = None


@dataclass
class UiConfig:
    last_tab: int = 0


@dataclass
class LoggingConfig:
    keep_log_files: int = 7
    level: str = "INFO"


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    window: WindowConfig = field(default_factory=WindowConfig)
    clock: ClockConfig = field(default_factory=ClockConfig)
    style: StyleConfig = field(default_factory=StyleConfig)
    state: StateConfig = field(default_factory=StateConfig)
    ui: UiConfig = field(default_factory=UiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_path() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "ClockFace" / "config.json"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "ClockFace" / "config.json"
    return Path.home() / ".config" / "clockface" / "config.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_window(cfg: AppConfig) -> None:
    try:
        cfg.window.width = max(1, int(cfg.window.width))
        cfg.window.height = max(1, int(cfg.window.height))
    except (TypeError, ValueError):
        cfg.window = WindowConfig()
    try:
        density = float(cfg.window.density)
    except (TypeError, ValueError):
        density = 1.0
    cfg.window.density = density if density > 0 else 1.0


def _normalize_clock(cfg: AppConfig) -> None:
    try:
        refresh = int(cfg.clock.refresh_ms)
    except (TypeError, ValueError):
        refresh = REFRESH_PERIOD_MS
    cfg.clock.refresh_ms = max(50, min(2000, refresh))
    if not isinstance(cfg.clock.theme, str) or not cfg.clock.theme:
        cfg.clock.theme = DEFAULT_THEME_NAME


def _normalize_state(cfg: AppConfig) -> None:
    if cfg.state.saved is not None and not isinstance(cfg.state.saved, dict):
        cfg.state.saved = None


def _normalize_logging(cfg: AppConfig) -> None:
    if str(cfg.logging.level).upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        cfg.logging.level = "INFO"
    cfg.logging.level = str(cfg.logging.level).upper()


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning(f"unreadable config {path}: {exc}", extra={"event": "config_unreadable"})
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    # config_version is informational; every known section is merged as-is.
    cfg = AppConfig(
        config_version=CONFIG_VERSION,
        window=_merge(WindowConfig, raw.get("window", {})),
        clock=_merge(ClockConfig, raw.get("clock", {})),
        style=_merge(StyleConfig, raw.get("style", {})),
        state=_merge(StateConfig, raw.get("state", {})),
        ui=_merge(UiConfig, raw.get("ui", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )

    _normalize_window(cfg)
    _normalize_clock(cfg)
    _normalize_state(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def resolve_style(cfg: AppConfig) -> ClockStyle:
    style = get_theme(cfg.clock.theme)
    overrides: dict[str, int] = {}
    for f in fields(StyleConfig):
        value = getattr(cfg.style, f.name)
        if value is None:
            continue
        try:
            overrides[f.name] = parse_color(value)
        except ValueError:
            logger.warning(f"ignoring invalid {f.name} color {value!r}", extra={"event": "style_override_invalid"})
    return replace(style, **overrides)
