from __future__ import annotations
from typing import Optional

from corticogenesis.qt import QtCore, QtGui, QtWidgets
from corticogenesis.core.catalog import LayerDescriptor, LayerKind
from corticogenesis.ui.theme import Theme, BAND_HEIGHT_PX, BAND_RADIUS_PX, band_color


class LayerBand(QtWidgets.QWidget):
    """One labeled, colored rectangle of the cortex stack."""

    PAD_X = 12

    def __init__(self, kind: LayerKind, layer: LayerDescriptor, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.kind = kind
        self.layer = layer
        self.label_alignment = QtCore.Qt.AlignVCenter
        self.setFixedHeight(BAND_HEIGHT_PX)
        self.setSizePolicy(QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Fixed)
        self.setToolTip(layer.description)

        font = QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.SystemFont.FixedFont)
        font.setBold(True)
        font.setPointSizeF(max(8.0, font.pointSizeF() - 1))
        self.setFont(font)

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.Antialiasing, True)
        rect = QtCore.QRectF(self.rect()).adjusted(0, 0, 0, -2)

        # Drop shadow, offset 2px down
        shadow = QtGui.QPainterPath()
        shadow.addRoundedRect(rect.translated(0, 2), BAND_RADIUS_PX, BAND_RADIUS_PX)
        p.fillPath(shadow, Theme.band_shadow)

        body = QtGui.QPainterPath()
        body.addRoundedRect(rect, BAND_RADIUS_PX, BAND_RADIUS_PX)
        p.fillPath(body, band_color(self.layer))

        p.setPen(Theme.band_text)
        if self.label_alignment == QtCore.Qt.AlignTop:
            text_r = QtCore.QRectF(rect.left(), rect.top(), rect.width(), BAND_HEIGHT_PX)
        else:
            text_r = rect
        text_r = text_r.adjusted(self.PAD_X, 0, -self.PAD_X, 0).toRect()
        label = self.fontMetrics().elidedText(self.layer.name, QtCore.Qt.ElideRight, text_r.width())
        p.drawText(text_r, QtCore.Qt.AlignVCenter | QtCore.Qt.AlignLeft, label)
        p.end()


class PlateBlock(QtWidgets.QWidget):
    """
    Cortical plate backdrop. Its cortical layers are stacked against the bottom
    edge so new layers appear above the ones that formed earlier.
    """

    def __init__(self, layer: LayerDescriptor, height: int, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.kind = LayerKind.CORTICAL_PLATE
        self.layer = layer
        self.setFixedHeight(height)
        self.setToolTip(layer.description)

        self.backdrop = LayerBand(LayerKind.CORTICAL_PLATE, layer, self)
        self.backdrop.setFixedHeight(height)
        self.backdrop.label_alignment = QtCore.Qt.AlignTop

        self._inner = QtWidgets.QVBoxLayout()
        self._inner.setContentsMargins(4, 4, 4, 4)
        self._inner.setSpacing(4)
        self._inner.addStretch(1)

        grid = QtWidgets.QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.addWidget(self.backdrop, 0, 0)
        grid.addLayout(self._inner, 0, 0)

    def add_band(self, band: LayerBand) -> None:
        self._inner.addWidget(band)

    def bands(self) -> list[LayerBand]:
        out = []
        for i in range(self._inner.count()):
            w = self._inner.itemAt(i).widget()
            if isinstance(w, LayerBand):
                out.append(w)
        return out
