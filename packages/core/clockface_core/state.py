"""Save/restore of the widget's style colors across a host lifecycle boundary."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from clockface_renderer.models import ClockStyle

from .logging_setup import get_logger

BASE_STATE_KEY = "superState"

# Persisted key -> ClockStyle field, in persisted order.
STATE_KEYS: tuple[tuple[str, str], ...] = (
    ("ringColor", "ring"),
    ("textColor", "text"),
    ("dotsColor", "dots"),
    ("hourHandColor", "hour_hand"),
    ("minuteHandColor", "minute_hand"),
    ("secondHandColor", "second_hand"),
    ("backgroundColor", "background"),
)

logger = get_logger("state")


@dataclass(frozen=True)
class PersistedConfig:
    colors: dict[str, Any] = field(default_factory=dict)
    base_state: Any = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {BASE_STATE_KEY: self.base_state}
        for key, _ in STATE_KEYS:
            if key in self.colors:
                out[key] = self.colors[key]
        return out

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> PersistedConfig:
        colors = {key: raw[key] for key, _ in STATE_KEYS if key in raw}
        return cls(colors=colors, base_state=raw.get(BASE_STATE_KEY))


def save_state(style: ClockStyle, base_state: Any = None) -> PersistedConfig:
    colors = {key: getattr(style, attr) for key, attr in STATE_KEYS}
    return PersistedConfig(colors=colors, base_state=base_state)


def _is_color(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def restore_state(current: ClockStyle, config: PersistedConfig | Mapping[str, Any] | None) -> tuple[ClockStyle, Any]:
    """Return the restored style and the untouched base-state token.

    Missing or malformed fields keep their current value.
    """
    if config is None:
        return current, None
    if isinstance(config, Mapping):
        config = PersistedConfig.from_dict(config)
    if not isinstance(config, PersistedConfig):
        logger.warning(
            f"ignoring unrecognized saved state of type {type(config).__name__}",
            extra={"event": "restore_ignored"},
        )
        return current, None

    changes: dict[str, int] = {}
    for key, attr in STATE_KEYS:
        if key not in config.colors:
            continue
        value = config.colors[key]
        if _is_color(value):
            changes[attr] = value
        else:
            logger.debug(f"skipping malformed {key}={value!r}", extra={"event": "restore_field_skipped"})

    return replace(current, **changes), config.base_state
