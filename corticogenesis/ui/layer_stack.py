from __future__ import annotations
from typing import Optional, Sequence

from corticogenesis.qt import QtCore, QtWidgets
from corticogenesis.core.catalog import LayerKind
from corticogenesis.core.logging import get_logger
from corticogenesis.core.render import Band
from corticogenesis.ui.layer_band import LayerBand, PlateBlock
from corticogenesis.ui.theme import (
    BAND_HEIGHT_PX, BAND_SPACING_PX, PLATE_HEIGHT_PX, STACK_MIN_HEIGHT_PX,
)


class LayerStackView(QtWidgets.QWidget):
    """
    Vertical stack of layer bands, rebuilt from a StageFrame's band tree.
    Bands that were not on screen for the previous frame fade in.
    """

    def __init__(self, fade_ms: int = 800, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self._log = get_logger(__name__)
        self.fade_ms = max(0, int(fade_ms))
        self._shown: frozenset[LayerKind] = frozenset()
        self._widgets: dict[LayerKind, QtWidgets.QWidget] = {}
        self._fades: list[QtCore.QPropertyAnimation] = []

        self.setMinimumHeight(BAND_HEIGHT_PX + STACK_MIN_HEIGHT_PX + BAND_SPACING_PX)
        self._layout = QtWidgets.QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(BAND_SPACING_PX)

    def set_bands(self, bands: Sequence[Band]) -> None:
        self._clear()
        for band in bands:
            if band.is_container:
                block = PlateBlock(band.layer, PLATE_HEIGHT_PX, self)
                for child in band.children:
                    w = LayerBand(child.kind, child.layer)
                    block.add_band(w)
                    self._widgets[child.kind] = w
                widget: QtWidgets.QWidget = block
            elif band.kind is LayerKind.PREPLATE:
                # Preplate occupies the slot the cortical plate will take after splitting
                widget = LayerBand(band.kind, band.layer, self)
                widget.setFixedHeight(PLATE_HEIGHT_PX + 2 * BAND_SPACING_PX)
            else:
                widget = LayerBand(band.kind, band.layer, self)
            self._widgets[band.kind] = widget
            self._layout.addWidget(widget)
        self._layout.addStretch(1)

        shown = frozenset(self._widgets)
        for kind in shown - self._shown:
            self._fade_in(self._widgets[kind])
        self._shown = shown

    def visible_kinds(self) -> frozenset[LayerKind]:
        return self._shown

    def band_widget(self, kind: LayerKind) -> Optional[QtWidgets.QWidget]:
        return self._widgets.get(kind)

    def _fade_in(self, w: QtWidgets.QWidget) -> None:
        if self.fade_ms <= 0:
            return
        fx = QtWidgets.QGraphicsOpacityEffect(w)
        w.setGraphicsEffect(fx)
        anim = QtCore.QPropertyAnimation(fx, b"opacity", self)
        anim.setDuration(self.fade_ms)
        anim.setStartValue(0.0)
        anim.setEndValue(1.0)
        anim.setEasingCurve(QtCore.QEasingCurve.InOutQuad)
        anim.finished.connect(lambda a=anim: self._drop_fade(a))
        self._fades.append(anim)
        anim.start()

    def _drop_fade(self, anim: QtCore.QPropertyAnimation) -> None:
        if anim in self._fades:
            self._fades.remove(anim)
            anim.deleteLater()

    def _clear(self) -> None:
        for anim in self._fades:
            anim.stop()
            anim.deleteLater()
        self._fades.clear()
        self._widgets.clear()
        while self._layout.count():
            item = self._layout.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()
