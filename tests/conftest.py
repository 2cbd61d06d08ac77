"""
Shared fixtures: an offscreen QApplication and a throwaway config home so
QSettings and log files never touch the real user profile.
"""

from __future__ import annotations

import os
import tempfile

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ["XDG_CONFIG_HOME"] = tempfile.mkdtemp(prefix="corticogenesis-tests-")

import pytest

from corticogenesis.qt import QtCore, QtWidgets


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def process_events_until(predicate, timeout_ms: int = 5000) -> bool:
    """Spin the Qt event loop until predicate() is true or the timeout expires."""
    clock = QtCore.QElapsedTimer()
    clock.start()
    while not predicate():
        if clock.elapsed() > timeout_ms:
            return False
        QtCore.QCoreApplication.processEvents(QtCore.QEventLoop.AllEvents, 20)
        QtCore.QThread.msleep(1)
    return True


@pytest.fixture
def wait_until():
    return process_events_until
