# corticogenesis/ui/theme.py
from corticogenesis.qt import QtGui, QtWidgets
from corticogenesis.core.catalog import LayerDescriptor

BAND_HEIGHT_PX = 40
BAND_RADIUS_PX = 8
BAND_SPACING_PX = 4
PLATE_HEIGHT_PX = 280
STACK_MIN_HEIGHT_PX = 330


class Theme:
    bg          = QtGui.QColor("#1f2124")
    panel       = QtGui.QColor("#26292e")
    panel_alt   = QtGui.QColor("#2c3036")
    stroke      = QtGui.QColor("#3a3f46")
    text        = QtGui.QColor("#d6d7d9")
    text_dim    = QtGui.QColor("#aab0b7")
    accent      = QtGui.QColor("#3fb6ff")
    icon_idle   = QtGui.QColor("#bfc5cc")
    band_text   = QtGui.QColor("#ffffff")
    band_shadow = QtGui.QColor(0, 0, 0, 51)   # black @ 20%


def band_color(layer: LayerDescriptor) -> QtGui.QColor:
    """Layer catalog colour with its opacity applied as alpha."""
    return QtGui.QColor(*layer.rgba)


def apply_fusion_theme(app: QtWidgets.QApplication) -> None:
    app.setStyle("Fusion")
    pal = QtGui.QPalette()
    pal.setColor(QtGui.QPalette.Window, Theme.bg)
    pal.setColor(QtGui.QPalette.Base, Theme.panel)
    pal.setColor(QtGui.QPalette.AlternateBase, Theme.panel_alt)
    pal.setColor(QtGui.QPalette.Text, Theme.text)
    pal.setColor(QtGui.QPalette.WindowText, Theme.text)
    pal.setColor(QtGui.QPalette.ButtonText, Theme.text)
    pal.setColor(QtGui.QPalette.Button, Theme.panel)
    pal.setColor(QtGui.QPalette.ToolTipBase, Theme.panel)
    pal.setColor(QtGui.QPalette.ToolTipText, Theme.text)
    pal.setColor(QtGui.QPalette.Highlight, Theme.accent)
    pal.setColor(QtGui.QPalette.HighlightedText, QtGui.QColor("#0c0d0e"))
    # Greyed-out transport buttons at the ends of the range
    pal.setColor(QtGui.QPalette.ColorGroup.Disabled, QtGui.QPalette.ColorRole.ButtonText, QtGui.QColor(127, 127, 127))
    pal.setColor(QtGui.QPalette.ColorGroup.Disabled, QtGui.QPalette.ColorRole.WindowText, QtGui.QColor(127, 127, 127))
    app.setPalette(pal)
