from __future__ import annotations
from typing import Optional
from corticogenesis.qt import QtCore, QtGui, QtWidgets
from corticogenesis.core.catalog import FIRST_STAGE, LAST_STAGE
from corticogenesis.ui.theme import Theme


class StageSlider(QtWidgets.QSlider):
    """
    QSlider over the stage indices. Draws one tick per stage (reached stages in
    the accent colour) and jumps straight to the nearest stage on click.
    """

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(QtCore.Qt.Orientation.Horizontal, parent)
        self.setMinimum(FIRST_STAGE)
        self.setMaximum(LAST_STAGE)
        self.setSingleStep(1)
        self.setPageStep(1)
        self.setTracking(True)
        self.setToolTip("Drag to choose a stage")

    def set_stage(self, index: int) -> None:
        """Mirror the controller without feeding valueChanged back into it."""
        if self.value() != index:
            self.blockSignals(True)
            self.setValue(index)
            self.blockSignals(False)
            self.update()

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        super().paintEvent(e)
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.Antialiasing, True)

        groove = self._groove_rect()
        span = max(1, self.maximum() - self.minimum())
        for i in range(self.minimum(), self.maximum() + 1):
            color = Theme.accent if i <= self.value() else Theme.stroke
            p.setPen(QtGui.QPen(color, 2))
            x = int(groove.left() + (i - self.minimum()) / span * groove.width())
            y1 = groove.center().y() + 6
            y2 = groove.center().y() + 10
            p.drawLine(x, y1, x, y2)
        p.end()

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self.setValue(self._pixel_pos_to_value(e.position().x()))
        super().mousePressEvent(e)

    def _groove_rect(self) -> QtCore.QRect:
        opt = QtWidgets.QStyleOptionSlider()
        self.initStyleOption(opt)
        return self.style().subControlRect(
            QtWidgets.QStyle.ComplexControl.CC_Slider, opt,
            QtWidgets.QStyle.SubControl.SC_SliderGroove, self,
        )

    def _pixel_pos_to_value(self, px: float) -> int:
        groove = self._groove_rect()
        if groove.width() <= 0:
            return self.value()
        ratio = (px - groove.left()) / groove.width()
        ratio = max(0.0, min(1.0, ratio))
        # Snap to the nearest stage rather than truncating
        return int(round(self.minimum() + ratio * (self.maximum() - self.minimum())))
