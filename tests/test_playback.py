"""
Unit tests for corticogenesis/core/playback.py: transitions, the auto-advance
timer lifecycle and scoped release of the timer.

Ticks are driven by calling the timer slot directly, except for one test that
lets a short real QTimer run the whole sequence.
"""

from __future__ import annotations

import pytest

from corticogenesis.core.catalog import FIRST_STAGE, LAST_STAGE
from corticogenesis.core.playback import PlaybackController, PlaybackState, clamp_index


@pytest.fixture
def pc():
    with PlaybackController(interval_ms=2000) as controller:
        yield controller


def _at(controller: PlaybackController, idx: int) -> PlaybackController:
    controller.set_stage_index(idx)
    assert controller.stage_index == idx
    return controller


# ── Stepping ─────────────────────────────────────────────────────────────────

class TestStepping:

    @pytest.mark.parametrize("i", range(9))
    def test_advance(self, pc, i):
        _at(pc, i).advance()
        assert pc.stage_index == min(i + 1, LAST_STAGE)

    @pytest.mark.parametrize("i", range(9))
    def test_retreat(self, pc, i):
        _at(pc, i).retreat()
        assert pc.stage_index == max(i - 1, FIRST_STAGE)

    def test_advance_is_idempotent_at_end(self, pc):
        _at(pc, LAST_STAGE)
        for _ in range(5):
            pc.advance()
        assert pc.stage_index == LAST_STAGE

    def test_advance_eight_times_reaches_end(self, pc):
        for _ in range(8):
            pc.advance()
        assert pc.stage_index == 8
        assert pc.at_end

    def test_jump_to_end(self, pc):
        pc.jump_to_end()
        assert pc.stage_index == LAST_STAGE

    def test_jump_to_end_keeps_playing(self, pc):
        pc.toggle_play_pause()
        pc.jump_to_end()
        assert pc.is_playing
        assert pc.timer is not None


class TestSetStageIndex:

    def test_slider_to_three_equals_three_advances(self, pc):
        other = PlaybackController()
        for _ in range(3):
            other.advance()
        pc.set_stage_index(3)
        assert pc.state() == other.state()
        assert pc.current_stage.title == "Stage 4: Inside-Out Layering (Layer VI)"

    @pytest.mark.parametrize("value,expected", [
        (-3, 0), (12, 8), (2.4, 2), (2.6, 3), (7.5, 8), ("5", 5), (None, 0), ("x", 0), (float("nan"), 0),
    ])
    def test_clamp_index(self, value, expected):
        assert clamp_index(value) == expected

    def test_change_signal_only_on_change(self, pc):
        seen = []
        pc.stageChanged.connect(seen.append)
        pc.set_stage_index(4)
        pc.set_stage_index(4)
        pc.retreat()
        assert seen == [4, 3]


# ── Play / pause ─────────────────────────────────────────────────────────────

class TestPlayPause:

    def test_toggle_starts_timer(self, pc):
        pc.toggle_play_pause()
        assert pc.is_playing
        assert pc.timer is not None
        assert pc.timer.isActive()
        assert pc.timer.interval() == 2000

    def test_toggle_again_stops_timer(self, pc):
        pc.toggle_play_pause()
        timer = pc.timer
        pc.toggle_play_pause()
        assert not pc.is_playing
        assert pc.timer is None
        assert not timer.isActive()

    def test_play_from_end_rewinds_before_first_tick(self, pc):
        _at(pc, LAST_STAGE)
        pc.toggle_play_pause()
        assert pc.stage_index == FIRST_STAGE
        assert pc.is_playing

    def test_restart_replaces_timer(self, pc):
        pc.play()
        first = pc.timer
        pc.pause()
        pc.play()
        assert pc.timer is not first
        assert not first.isActive()
        assert pc.timer.isActive()

    def test_play_twice_keeps_single_timer(self, pc):
        pc.play()
        first = pc.timer
        pc.play()
        assert pc.timer is first

    def test_jump_to_start_stops_playback(self, pc):
        _at(pc, 5).toggle_play_pause()
        pc.jump_to_start()
        assert pc.stage_index == 0
        assert not pc.is_playing
        assert pc.timer is None

    def test_play_state_signal(self, pc):
        seen = []
        pc.playStateChanged.connect(seen.append)
        pc.toggle_play_pause()
        pc.toggle_play_pause()
        pc.pause()
        assert seen == [True, False]


# ── Timer ticks ──────────────────────────────────────────────────────────────

class TestTicks:

    def test_tick_advances_exactly_one(self, pc):
        pc.play()
        pc._on_tick()
        assert pc.stage_index == 1
        assert pc.is_playing

    def test_tick_at_end_stops_without_advancing(self, pc):
        pc.play()
        pc.jump_to_end()
        pc._on_tick()
        assert pc.stage_index == LAST_STAGE
        assert not pc.is_playing
        assert pc.timer is None

    def test_tick_never_advances_and_stops_together(self, pc):
        pc.play()
        while pc.is_playing:
            before = pc.stage_index
            pc._on_tick()
            advanced = pc.stage_index == before + 1
            stopped = not pc.is_playing
            assert advanced != stopped
        assert pc.stage_index == LAST_STAGE

    def test_nine_ticks_from_start(self, pc):
        pc.toggle_play_pause()
        for _ in range(9):
            pc._on_tick()
        assert pc.stage_index == LAST_STAGE
        assert pc.is_playing is False
        assert pc.timer is None

    def test_real_timer_runs_to_end(self, wait_until):
        with PlaybackController(interval_ms=5) as fast:
            ticks = []
            fast.stageChanged.connect(ticks.append)
            fast.toggle_play_pause()
            assert wait_until(lambda: not fast.is_playing)
            assert fast.stage_index == LAST_STAGE
            assert fast.timer is None
            assert ticks == list(range(1, 9))


# ── Teardown ─────────────────────────────────────────────────────────────────

class TestTeardown:

    def test_shutdown_mid_playback_releases_timer(self, pc):
        _at(pc, 2).play()
        timer = pc.timer
        pc.shutdown()
        assert pc.timer is None
        assert not pc.is_playing
        assert not timer.isActive()
        assert pc.stage_index == 2

    def test_context_exit_on_error_releases_timer(self):
        controller = PlaybackController()
        with pytest.raises(RuntimeError):
            with controller:
                controller.toggle_play_pause()
                timer = controller.timer
                raise RuntimeError("view torn down")
        assert controller.timer is None
        assert not controller.is_playing
        assert not timer.isActive()

    def test_shutdown_is_safe_when_idle(self, pc):
        pc.shutdown()
        pc.shutdown()
        assert pc.timer is None


def test_state_snapshot():
    controller = PlaybackController()
    controller.set_stage_index(6)
    snap = controller.state()
    assert snap == PlaybackState(stage_index=6, is_playing=False)
    assert snap.stage.index == 6
    controller.advance()
    assert snap.stage_index == 6
