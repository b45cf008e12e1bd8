"""Host-facing analog clock widget."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable

from clockface_renderer.compositor import ClockCompositor, TextMetrics
from clockface_renderer.models import ClockStyle, DrawPrimitive, TimeSample, ViewportState

from .logging_setup import get_logger
from .measure import MeasureSpec, default_size, resolve_size
from .scheduler import REFRESH_PERIOD_MS, PostDelayed, RedrawScheduler
from .state import PersistedConfig, restore_state, save_state

logger = get_logger("widget")


def _noop() -> None:
    return None


class ClockWidget:
    """Owns one viewport and one style; renders primitives on host request.

    Without ``post_delayed`` the widget renders on demand only and never
    schedules a follow-up frame.
    """

    def __init__(
        self,
        style: ClockStyle | None = None,
        post_delayed: PostDelayed | None = None,
        invalidate: Callable[[], None] | None = None,
        metrics: TextMetrics | None = None,
        refresh_ms: int = REFRESH_PERIOD_MS,
    ) -> None:
        self.style = style or ClockStyle()
        self.viewport = ViewportState.from_size(0, 0)
        self.compositor = ClockCompositor(metrics)
        self.scheduler: RedrawScheduler | None = None
        if post_delayed is not None:
            self.scheduler = RedrawScheduler(post_delayed, invalidate or _noop, period_ms=refresh_ms)
        self._rendering = False

    @property
    def is_attached(self) -> bool:
        return self.scheduler is not None and self.scheduler.attached

    def attach(self) -> None:
        if self.scheduler is not None:
            self.scheduler.attach()

    def detach(self) -> None:
        if self.scheduler is not None:
            self.scheduler.detach()

    def set_size(self, width: int, height: int) -> None:
        self.viewport = ViewportState.from_size(width, height)

    on_resize = set_size

    def measure(
        self,
        width_spec: MeasureSpec | None = None,
        height_spec: MeasureSpec | None = None,
        density: float = 1.0,
    ) -> tuple[int, int]:
        preferred = default_size(density)
        return (
            resolve_size(preferred, width_spec or MeasureSpec()),
            resolve_size(preferred, height_spec or MeasureSpec()),
        )

    def set_style(self, **colors: int) -> None:
        self.style = replace(self.style, **colors)

    def apply_style(self, style: ClockStyle) -> None:
        self.style = style

    def request_save(self, base_state: Any = None) -> PersistedConfig:
        return save_state(self.style, base_state)

    def request_restore(self, config: Any) -> Any:
        self.style, base_state = restore_state(self.style, config)
        if config is not None:
            logger.debug("widget state restored", extra={"event": "widget_restored"})
        return base_state

    def request_render(self, time: TimeSample | None = None) -> list[DrawPrimitive]:
        if self._rendering:
            raise RuntimeError("render requested while a render is in progress")
        self._rendering = True
        try:
            primitives = self.compositor.render(self.style, self.viewport, time)
        finally:
            self._rendering = False
        if self.scheduler is not None:
            self.scheduler.on_render_complete()
        return primitives
