"""Autoplay — timer-driven stepping through the current line."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from shogikif.replay.engine import ReplayEngine

_LOGGER = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 1500

PlayingCallback = Callable[[bool], None]


class Autoplay:
    """Steps *engine* forward on a repeating timer until the line ends.

    ``stop`` is synchronous: the timer is halted and the playing flag cleared,
    so a tick that was already queued on the event loop is ignored.
    """

    __slots__ = ("__weakref__", "_engine", "_timer", "_playing", "on_state_changed")

    def __init__(
        self,
        engine: ReplayEngine,
        *,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        parent: QObject | None = None,
    ) -> None:
        self._engine = engine
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_tick)
        self._playing = False
        self.on_state_changed: list[PlayingCallback] = []

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def set_interval(self, interval_ms: int) -> None:
        self._timer.setInterval(max(1, interval_ms))

    # ── Control ──────────────────────────────────────────────────────────

    def start(self) -> bool:
        """Begin playing. Returns False if already playing or at the end."""
        if self._playing:
            return False
        if self._engine.is_at_end:
            return False
        self._playing = True
        self._timer.start()
        _LOGGER.debug("Autoplay started (%d ms)", self._timer.interval())
        self._emit(True)
        return True

    def stop(self) -> None:
        self._timer.stop()
        if self._playing:
            self._playing = False
            _LOGGER.debug("Autoplay stopped")
            self._emit(False)

    def toggle(self) -> None:
        if self._playing:
            self.stop()
        else:
            self.start()

    # ── Internal ─────────────────────────────────────────────────────────

    def _on_tick(self) -> None:
        if not self._playing:
            return
        if self._engine.is_at_end:
            self.stop()
            return
        self._engine.step_forward()
        if self._engine.is_at_end:
            self.stop()

    def _emit(self, playing: bool) -> None:
        for cb in self.on_state_changed:
            cb(playing)
