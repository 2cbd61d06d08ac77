from __future__ import annotations
from typing import Optional

from corticogenesis.qt import QtCore, QtGui, QtWidgets
from corticogenesis.core.logging import get_logger
from corticogenesis.core.playback import PlaybackController
from corticogenesis.core.render import StageFrame, render
from corticogenesis.ui.layer_stack import LayerStackView
from corticogenesis.ui.stage_slider import StageSlider
from corticogenesis.ui.transport_bar import TransportBar
from corticogenesis.ui.theme import Theme


class StageView(QtWidgets.QWidget):
    """
    Single-screen visualization:
      - header, stage title and description
      - stacked layer bands
      - stage slider + transport controls
    Re-renders from the controller's state after every controller signal.
    """
    frameRendered = QtCore.Signal(object)   # StageFrame

    def __init__(self, controller: PlaybackController, fade_ms: int = 800,
                 parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self._log = get_logger(__name__)
        self.controller = controller
        self.frame: Optional[StageFrame] = None

        # Text
        self.header_label = QtWidgets.QLabel()
        hf = self.header_label.font(); hf.setPointSizeF(hf.pointSizeF() * 2.0); hf.setBold(True)
        self.header_label.setFont(hf)
        self.header_label.setAlignment(QtCore.Qt.AlignCenter)
        self.header_label.setWordWrap(True)

        self.title_label = QtWidgets.QLabel()
        tf = self.title_label.font(); tf.setPointSizeF(tf.pointSizeF() * 1.4); tf.setWeight(QtGui.QFont.Weight.DemiBold)
        self.title_label.setFont(tf)
        self.title_label.setAlignment(QtCore.Qt.AlignCenter)
        self.title_label.setStyleSheet(f"color:{Theme.text_dim.name()};")

        self.description_label = QtWidgets.QLabel()
        self.description_label.setAlignment(QtCore.Qt.AlignHCenter | QtCore.Qt.AlignTop)
        self.description_label.setWordWrap(True)
        self.description_label.setFixedHeight(100)

        # Layers
        self.stack = LayerStackView(fade_ms, self)

        # Controls
        self.slider = StageSlider(self)
        self.transport = TransportBar(self)

        controls = QtWidgets.QFrame(self)
        controls.setObjectName("controls")
        controls.setStyleSheet(
            f"QFrame#controls {{ background:{Theme.panel.name()}; border:1px solid {Theme.stroke.name()};"
            " border-radius:12px; }"
        )
        c_lay = QtWidgets.QVBoxLayout(controls)
        c_lay.setContentsMargins(12, 12, 12, 6)
        c_lay.addWidget(self.slider)
        c_lay.addWidget(self.transport)

        content = QtWidgets.QWidget()
        root = QtWidgets.QVBoxLayout(content)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(20)
        root.addWidget(self.header_label)
        root.addWidget(self.title_label)
        root.addWidget(self.description_label)
        root.addWidget(self.stack)
        root.addWidget(controls)
        root.addStretch(1)

        scroll = QtWidgets.QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QtWidgets.QFrame.NoFrame)
        scroll.setWidget(content)
        outer = QtWidgets.QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(scroll)

        # Input → controller
        self.slider.valueChanged.connect(self.controller.set_stage_index)
        self.transport.jumpStartRequested.connect(self.controller.jump_to_start)
        self.transport.stepBackRequested.connect(self.controller.retreat)
        self.transport.playPauseRequested.connect(self.controller.toggle_play_pause)
        self.transport.stepForwardRequested.connect(self.controller.advance)
        self.transport.jumpEndRequested.connect(self.controller.jump_to_end)
        # Controller → redraw
        self.controller.stageChanged.connect(self.refresh)
        self.controller.playStateChanged.connect(self.refresh)

        self.refresh()

    def refresh(self, *_args) -> None:
        frame = render(self.controller.state())
        self._log.debug("render: %s playing=%s", frame.title, frame.transport.is_playing)
        self.header_label.setText(frame.header)
        self.title_label.setText(frame.title)
        self.description_label.setText(frame.description)
        if self.frame is None or frame.bands != self.frame.bands:
            self.stack.set_bands(frame.bands)
        self.slider.set_stage(frame.slider.value)
        self.transport.apply(frame.transport)
        self.frame = frame
        self.frameRendered.emit(frame)
