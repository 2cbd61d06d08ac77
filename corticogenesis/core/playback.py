from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from corticogenesis.qt import QtCore
from corticogenesis.core.catalog import FIRST_STAGE, LAST_STAGE, Stage, stage
from corticogenesis.core.logging import get_logger

DEFAULT_INTERVAL_MS = 2000


def clamp_index(value: Any) -> int:
    """Slider/user value → stage index: nearest integer, clamped to [FIRST_STAGE, LAST_STAGE]."""
    if isinstance(value, bool):
        return FIRST_STAGE
    try:
        idx = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return FIRST_STAGE
    return max(FIRST_STAGE, min(LAST_STAGE, idx))


@dataclass(frozen=True)
class PlaybackState:
    """Immutable snapshot handed to render()."""
    stage_index: int = FIRST_STAGE
    is_playing: bool = False

    @property
    def stage(self) -> Stage:
        return stage(self.stage_index)


class PlaybackController(QtCore.QObject):
    """
    Owns the current stage index and the auto-advance timer.
    stage_index is the only mutable domain value; every widget reads it from here.
    Invariant: self.timer is not None  <=>  self.is_playing.
    """
    stageChanged = QtCore.Signal(int)        # new stage index
    playStateChanged = QtCore.Signal(bool)   # True if playing

    def __init__(self, interval_ms: int = DEFAULT_INTERVAL_MS, parent: Optional[QtCore.QObject] = None) -> None:
        super().__init__(parent)
        self._log = get_logger(__name__)
        self.interval_ms: int = max(1, int(interval_ms))

        self.stage_index: int = FIRST_STAGE
        self.is_playing: bool = False
        self.timer: Optional[QtCore.QTimer] = None

    # Scoped acquisition: leaving the block always releases the timer
    def __enter__(self) -> "PlaybackController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def state(self) -> PlaybackState:
        return PlaybackState(self.stage_index, self.is_playing)

    @property
    def current_stage(self) -> Stage:
        return stage(self.stage_index)

    @property
    def at_end(self) -> bool:
        return self.stage_index == LAST_STAGE

    # Transitions
    def advance(self) -> None:
        if self.stage_index < LAST_STAGE:
            self._set_index(self.stage_index + 1)

    def retreat(self) -> None:
        if self.stage_index > FIRST_STAGE:
            self._set_index(self.stage_index - 1)

    def jump_to_start(self) -> None:
        self._stop_playing()
        self._set_index(FIRST_STAGE)

    def jump_to_end(self) -> None:
        # Playback keeps running; the next tick performs the terminal stop.
        self._set_index(LAST_STAGE)

    def set_stage_index(self, value: Any) -> None:
        self._set_index(clamp_index(value))

    def toggle_play_pause(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def play(self) -> None:
        if self.is_playing:
            return
        self._log.info("play() from stage %d", self.stage_index)
        if self.at_end:
            self._set_index(FIRST_STAGE)
        self._start_timer()
        self.is_playing = True
        self.playStateChanged.emit(True)

    def pause(self) -> None:
        if not self.is_playing:
            return
        self._log.info("pause() at stage %d", self.stage_index)
        self._stop_playing()

    def shutdown(self) -> None:
        """Release the timer; called on view teardown."""
        if self.timer is not None or self.is_playing:
            self._log.info("shutdown(): releasing playback timer")
        self._stop_playing()

    # Internals
    @QtCore.Slot()
    def _on_tick(self) -> None:
        """Timer tick: advance one stage, or stop once the final stage is showing."""
        if self.at_end:
            self._log.info("Final stage reached, auto-play stopped")
            self._stop_playing()
        else:
            self.advance()

    def _start_timer(self) -> None:
        self._release_timer()
        timer = QtCore.QTimer(self)
        timer.setInterval(self.interval_ms)
        timer.timeout.connect(self._on_tick)
        timer.start()
        self.timer = timer
        self._log.debug("Timer started (%d ms)", self.interval_ms)

    def _release_timer(self) -> None:
        timer, self.timer = self.timer, None
        if timer is None:
            return
        timer.stop()
        timer.timeout.disconnect(self._on_tick)
        timer.deleteLater()
        self._log.debug("Timer released")

    def _stop_playing(self) -> None:
        self._release_timer()
        if self.is_playing:
            self.is_playing = False
            self.playStateChanged.emit(False)

    def _set_index(self, idx: int) -> None:
        if idx == self.stage_index:
            return
        self._log.debug("stage %d -> %d", self.stage_index, idx)
        self.stage_index = idx
        self.stageChanged.emit(idx)
