from __future__ import annotations
from typing import Optional

from corticogenesis.qt import QtCore, QtGui, QtWidgets
from corticogenesis.core.logging import get_logger
from corticogenesis.core.render import TransportState
from corticogenesis.ui.theme import Theme
import qtawesome as qta

# (Font Awesome 5 solid icon, text fallback)
ICONS = {
    "jump_start": ("fa5s.step-backward", "⏮"),
    "step_back": ("fa5s.backward", "⏪"),
    "play": ("fa5s.play", "▶"),
    "pause": ("fa5s.pause", "⏸"),
    "step_forward": ("fa5s.forward", "⏩"),
    "jump_end": ("fa5s.step-forward", "⏭"),
}


class TransportBar(QtWidgets.QWidget):
    """Five transport buttons: start, back, play/pause, forward, end."""
    jumpStartRequested = QtCore.Signal()
    stepBackRequested = QtCore.Signal()
    playPauseRequested = QtCore.Signal()
    stepForwardRequested = QtCore.Signal()
    jumpEndRequested = QtCore.Signal()

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self._log = get_logger(__name__)
        self._icon_fallback = False
        self._play_icon = "play"

        self.jump_start_btn = QtWidgets.QToolButton(); self.jump_start_btn.setToolTip("Go to first stage")
        self.step_back_btn = QtWidgets.QToolButton(); self.step_back_btn.setToolTip("Previous stage")
        self.play_btn = QtWidgets.QToolButton(); self.play_btn.setToolTip("Play / pause")
        self.step_fwd_btn = QtWidgets.QToolButton(); self.step_fwd_btn.setToolTip("Next stage")
        self.jump_end_btn = QtWidgets.QToolButton(); self.jump_end_btn.setToolTip("Go to final stage")

        lay = QtWidgets.QHBoxLayout(self)
        lay.setContentsMargins(6, 6, 6, 6)
        lay.setSpacing(15)
        lay.addStretch(1)
        for b in self.buttons():
            b.setIconSize(QtCore.QSize(18, 18))
            b.setFixedSize(36, 36)
            b.setCursor(QtCore.Qt.PointingHandCursor)
            lay.addWidget(b)
        lay.addStretch(1)
        # Play/pause is the prominent control
        self.play_btn.setIconSize(QtCore.QSize(26, 26))
        self.play_btn.setFixedSize(48, 48)

        self.jump_start_btn.clicked.connect(self.jumpStartRequested)
        self.step_back_btn.clicked.connect(self.stepBackRequested)
        self.play_btn.clicked.connect(self.playPauseRequested)
        self.step_fwd_btn.clicked.connect(self.stepForwardRequested)
        self.jump_end_btn.clicked.connect(self.jumpEndRequested)

        self._update_icons()

    def buttons(self) -> tuple[QtWidgets.QToolButton, ...]:
        return (self.jump_start_btn, self.step_back_btn, self.play_btn, self.step_fwd_btn, self.jump_end_btn)

    @property
    def play_icon(self) -> str:
        return self._play_icon

    def apply(self, state: TransportState) -> None:
        self.jump_start_btn.setEnabled(state.can_jump_start)
        self.step_back_btn.setEnabled(state.can_step_back)
        self.play_btn.setEnabled(state.can_play_pause)
        self.step_fwd_btn.setEnabled(state.can_step_forward)
        self.jump_end_btn.setEnabled(state.can_jump_end)
        if state.play_icon != self._play_icon:
            self._play_icon = state.play_icon
            self._update_icons()

    def _update_icons(self) -> None:
        """Set icons using Font Awesome 5 (solid). Fallback to text if the icon font is unavailable."""
        slots = (
            (self.jump_start_btn, "jump_start"),
            (self.step_back_btn, "step_back"),
            (self.play_btn, self._play_icon),
            (self.step_fwd_btn, "step_forward"),
            (self.jump_end_btn, "jump_end"),
        )
        if not self._icon_fallback:
            try:
                icons = [
                    qta.icon(ICONS[key][0], color=Theme.icon_idle.name(), color_disabled=Theme.stroke.name())
                    for _, key in slots
                ]
            except Exception as ex:
                self._log.warning("qtawesome icons unavailable, using text glyphs: %s", ex)
                self._icon_fallback = True
            else:
                for (btn, _), icon in zip(slots, icons):
                    btn.setText("")
                    btn.setIcon(icon)
                return
        for btn, key in slots:
            btn.setIcon(QtGui.QIcon())
            btn.setText(ICONS[key][1])
