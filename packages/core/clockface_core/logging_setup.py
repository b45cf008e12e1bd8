"""JSON-lines logging for ClockFace and crash capture for the UI thread."""

from __future__ import annotations

import faulthandler
import json
import logging
import logging.handlers
import os
import platform
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, TextIO


_LOGGER_NAME = "clockface"
_LOG_FILE = "clockface.log"
_FAULT_FILE = "fault.log"


def _config_root() -> Path:
    if platform.system() == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "ClockFace"
    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "ClockFace"
    return Path.home() / ".config" / "clockface"


def log_dir() -> Path:
    path = _config_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra={"event": ...}`` becomes a field."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event is not None:
            payload["event"] = event
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(
    keep_files: int = 7,
    console: bool = True,
    level: str = "INFO",
    directory: Path | None = None,
) -> logging.Logger:
    """Attach the rotating JSON file handler (and a console handler) once."""
    root = logging.getLogger(_LOGGER_NAME)
    if root.handlers:
        return root

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str((directory or log_dir()) / _LOG_FILE),
        when="midnight",
        backupCount=max(2, keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)

    if console:
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
        root.addHandler(stream)

    root.info("logging configured", extra={"event": "logging_configured"})
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


@dataclass
class _CrashHooks:
    previous_excepthook: Callable[..., Any]
    fault_file: TextIO
    faulthandler_was_enabled: bool


_hooks: _CrashHooks | None = None


def install_crash_hooks(directory: Path | None = None) -> None:
    """Log uncaught exceptions and send native fault dumps to ``fault.log``.

    The clock runs on a single UI thread, so ``sys.excepthook`` covers every
    Python-level crash. The previous hook still runs afterwards. Installing
    twice is a no-op; ``remove_crash_hooks`` undoes it and closes the fault log.
    """
    global _hooks
    if _hooks is not None:
        return

    logger = get_logger()
    previous = sys.excepthook

    def _log_uncaught(exc_type, exc_value, exc_tb) -> None:
        if not issubclass(exc_type, KeyboardInterrupt):
            logger.critical(
                f"uncaught {exc_type.__name__}: {exc_value}",
                exc_info=(exc_type, exc_value, exc_tb),
                extra={"event": "uncaught_exception"},
            )
        previous(exc_type, exc_value, exc_tb)

    fault_file = ((directory or log_dir()) / _FAULT_FILE).open("a", encoding="utf-8")
    was_enabled = faulthandler.is_enabled()
    faulthandler.enable(file=fault_file, all_threads=False)
    sys.excepthook = _log_uncaught
    _hooks = _CrashHooks(previous, fault_file, was_enabled)
    logger.info("crash hooks installed", extra={"event": "crash_hooks_installed"})


def remove_crash_hooks() -> None:
    global _hooks
    if _hooks is None:
        return
    hooks, _hooks = _hooks, None

    sys.excepthook = hooks.previous_excepthook
    faulthandler.disable()
    hooks.fault_file.close()
    if hooks.faulthandler_was_enabled and sys.__stderr__ is not None:
        faulthandler.enable(file=sys.__stderr__)
