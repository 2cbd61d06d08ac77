# corticogenesis/ui/main_window.py
from __future__ import annotations
from corticogenesis.qt import QtCore, QtGui, QtWidgets
from corticogenesis.core.config import get_settings
from corticogenesis.core.logging import get_logger
from corticogenesis.core.playback import PlaybackController
from corticogenesis.ui.stage_view import StageView
from app_config import APP_NAME, DEFAULTS


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self):
        super().__init__()
        self._log = get_logger(__name__)
        self.setWindowTitle(APP_NAME)
        self.resize(720, 900)
        self.settings = get_settings()

        self.controller = PlaybackController(self.settings.get_int("playback/interval_ms"), self)
        self.view = StageView(self.controller, self.settings.get_int("ui/fade_ms"), self)
        self.setCentralWidget(self.view)

        self._build_menu()
        self._restore_state()

    def _build_menu(self):
        bar = self.menuBar()
        file_menu = bar.addMenu("&File")
        exit_act = QtGui.QAction("E&xit", self)
        exit_act.triggered.connect(self.close)
        file_menu.addAction(exit_act)

        # Playback menu doubles as the keyboard binding table for the five transport actions
        play_menu = bar.addMenu("&Playback")
        entries = (
            ("jump_start", "Go to &First Stage", self.controller.jump_to_start),
            ("step_back", "&Previous Stage", self.controller.retreat),
            ("play_pause", "Play / &Pause", self.controller.toggle_play_pause),
            ("step_forward", "&Next Stage", self.controller.advance),
            ("jump_end", "Go to &Final Stage", self.controller.jump_to_end),
        )
        self.actions_by_name: dict[str, QtGui.QAction] = {}
        for name, text, slot in entries:
            act = QtGui.QAction(text, self)
            act.setShortcut(QtGui.QKeySequence(self._hotkey(name)))
            act.setShortcutContext(QtCore.Qt.ShortcutContext.WindowShortcut)
            act.triggered.connect(slot)
            play_menu.addAction(act)
            self.addAction(act)
            self.actions_by_name[name] = act

        self.controller.stageChanged.connect(self._sync_actions)
        self.controller.playStateChanged.connect(self._sync_actions)
        self._sync_actions()

    def _hotkey(self, name: str) -> str:
        return str(self.settings.get(f"hotkeys/{name}", DEFAULTS["hotkeys"][name]))

    def _sync_actions(self, *_args) -> None:
        t = self.view.frame.transport
        self.actions_by_name["jump_start"].setEnabled(t.can_jump_start)
        self.actions_by_name["step_back"].setEnabled(t.can_step_back)
        self.actions_by_name["step_forward"].setEnabled(t.can_step_forward)
        self.actions_by_name["jump_end"].setEnabled(t.can_jump_end)
        self.actions_by_name["play_pause"].setText("&Pause" if t.is_playing else "&Play")

    def _restore_state(self):
        g = self.settings.get("ui/main_geometry")
        if isinstance(g, QtCore.QByteArray):
            self.restoreGeometry(g)

    def closeEvent(self, e: QtGui.QCloseEvent) -> None:
        self._log.info("Main window closing")
        self.controller.shutdown()
        self.settings.set("ui/main_geometry", self.saveGeometry())
        return super().closeEvent(e)
