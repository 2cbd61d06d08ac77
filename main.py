# main.py
from __future__ import annotations
import sys
from corticogenesis.qt import QtWidgets
from app_config import ensure_app_dirs, apply_qsettings_org, banner
from corticogenesis.core.logging import setup_logging, resolve_level
from corticogenesis.ui.main_window import MainWindow
from corticogenesis.ui.theme import apply_fusion_theme


def main() -> int:
    ensure_app_dirs()
    apply_qsettings_org()
    logger = setup_logging(level=resolve_level())

    app = QtWidgets.QApplication(sys.argv)
    logger.info(banner())

    apply_fusion_theme(app)
    mw = MainWindow()
    mw.show()

    return app.exec()

if __name__ == "__main__":
    raise SystemExit(main())
