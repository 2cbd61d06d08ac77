"""
TransportBar: enabled states and the play/pause icon, including the text
glyph fallback used when qtawesome cannot build its icons.
"""

from __future__ import annotations

import logging

import pytest

from corticogenesis.core.render import TransportState
from corticogenesis.ui import transport_bar
from corticogenesis.ui.transport_bar import ICONS, TransportBar

_KEYS = ("jump_start", "step_back", "play", "step_forward", "jump_end")


def _state(playing: bool = False) -> TransportState:
    return TransportState(
        can_jump_start=False, can_step_back=False,
        can_step_forward=True, can_jump_end=True, is_playing=playing,
    )


@pytest.fixture
def broken_icons(monkeypatch):
    def _raise(*_args, **_kwargs):
        raise RuntimeError("icon font missing")
    monkeypatch.setattr(transport_bar.qta, "icon", _raise)


def test_apply_sets_enabled_states():
    bar = TransportBar()
    bar.apply(_state())
    assert tuple(b.isEnabled() for b in bar.buttons()) == (False, False, True, True, True)
    assert bar.play_icon == "play"
    bar.apply(_state(playing=True))
    assert bar.play_icon == "pause"
    bar.deleteLater()


class TestIconFallback:

    def test_text_glyphs_when_icons_fail(self, broken_icons, caplog):
        with caplog.at_level(logging.WARNING):
            bar = TransportBar()
        assert [b.text() for b in bar.buttons()] == [ICONS[k][1] for k in _KEYS]
        assert all(b.icon().isNull() for b in bar.buttons())
        assert any(r.levelno == logging.WARNING for r in caplog.records)
        bar.deleteLater()

    def test_play_glyph_follows_state(self, broken_icons):
        bar = TransportBar()
        bar.apply(_state(playing=True))
        assert bar.play_icon == "pause"
        assert bar.play_btn.text() == ICONS["pause"][1]
        bar.apply(_state(playing=False))
        assert bar.play_icon == "play"
        assert bar.play_btn.text() == ICONS["play"][1]
        bar.deleteLater()

    def test_icons_used_when_available(self):
        bar = TransportBar()
        assert all(b.text() == "" for b in bar.buttons())
        assert not bar.play_btn.icon().isNull()
        bar.deleteLater()
