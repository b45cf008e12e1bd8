"""Self-perpetuating redraw loop driven by the host's delayed-callback primitive."""

from __future__ import annotations

from typing import Any, Callable

from .logging_setup import get_logger

REFRESH_PERIOD_MS = 180

# (delay_ms, callback) -> anything; the callback runs later on the host UI thread.
PostDelayed = Callable[[int, Callable[[], None]], Any]

logger = get_logger("scheduler")


class RedrawScheduler:
    """Requests one follow-up render per completed render while attached.

    Every detach bumps a generation counter, so callbacks posted before it
    fire as no-ops. A pending request absorbs further completions, which
    keeps at most one render request outstanding.
    """

    def __init__(
        self,
        post_delayed: PostDelayed,
        invalidate: Callable[[], None],
        period_ms: int = REFRESH_PERIOD_MS,
    ) -> None:
        self.period_ms = period_ms
        self._post_delayed = post_delayed
        self._invalidate = invalidate
        self._attached = False
        self._pending = False
        self._generation = 0
        self.scheduled_count = 0

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def pending(self) -> bool:
        return self._pending

    def attach(self) -> None:
        if self._attached:
            return
        self._attached = True
        self._generation += 1
        logger.debug("redraw loop attached", extra={"event": "scheduler_attach"})

    def detach(self) -> None:
        if not self._attached:
            return
        self._attached = False
        self._pending = False
        self._generation += 1
        logger.debug("redraw loop detached", extra={"event": "scheduler_detach"})

    def on_render_complete(self) -> None:
        if not self._attached or self._pending:
            return
        self._pending = True
        self.scheduled_count += 1
        generation = self._generation
        self._post_delayed(self.period_ms, lambda: self._fire(generation))

    def _fire(self, generation: int) -> None:
        if generation != self._generation or not self._attached:
            return
        self._pending = False
        self._invalidate()
