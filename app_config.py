"""
Application configuration settings
This file centralises identity, paths, hotkeys and runtime defaults.
"""

from __future__ import annotations
import os
import platform
from pathlib import Path

# ───────────────────────────────────────────────────────────────────────────────
# Core identity
# ───────────────────────────────────────────────────────────────────────────────
APP_NAME = "Corticogenesis"
APP_VERSION = "0.1.0"
COMPANY_NAME = "Corticogenesis Visualization"

# Window header shown above the stage title
APP_HEADER = "Corticogenesis: Building the Cortex"

# Reverse-DNS App ID (used in QSettings/diagnostics)
APP_ID = "org.corticogenesis.visualization"

# Organization identifiers (for QSettings and folders)
ORG_NAME = "Corticogenesis Visualization"
ORG_DIRNAME = "CorticogenesisVisualization"  # filesystem safe (no spaces)
ORG_DOMAIN = "corticogenesis.org"

TAGLINE = "Watch the cortex build itself, one layer at a time."

# Build metadata (optional, read from the environment)
BUILD_COMMIT = os.getenv("CORTICOGENESIS_BUILD_COMMIT", "")[:7]
BUILD_CHANNEL = os.getenv("CORTICOGENESIS_BUILD_CHANNEL", "dev")  # dev/beta/stable

# Log level override, e.g. CORTICOGENESIS_LOG_LEVEL=DEBUG
LOG_LEVEL_ENV = "CORTICOGENESIS_LOG_LEVEL"


def version_string() -> str:
    """Human-friendly version string for logs."""
    meta = f"+{BUILD_COMMIT}" if BUILD_COMMIT else ""
    chan = f" ({BUILD_CHANNEL})" if BUILD_CHANNEL and BUILD_CHANNEL != "stable" else ""
    return f"{APP_VERSION}{meta}{chan}"


# ───────────────────────────────────────────────────────────────────────────────
# User data locations (settings, logs)
# ───────────────────────────────────────────────────────────────────────────────
def _appdata_base() -> Path:
    system = platform.system()
    if system == "Windows":
        base = os.getenv("APPDATA") or (Path.home() / "AppData" / "Roaming")
    elif system == "Darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
    return Path(base) / ORG_DIRNAME / APP_NAME


APPDATA_DIR = _appdata_base()
LOG_DIR = APPDATA_DIR / "logs"


def ensure_app_dirs() -> None:
    """Create required folders if they don't exist."""
    for p in (APPDATA_DIR, LOG_DIR):
        p.mkdir(parents=True, exist_ok=True)


# ───────────────────────────────────────────────────────────────────────────────
# QSettings bootstrap (call once during startup)
# ───────────────────────────────────────────────────────────────────────────────
def apply_qsettings_org() -> None:
    """
    Apply org/app metadata for QSettings. Call early in startup,
    before constructing your first QSettings instance.
    """
    from PySide6.QtCore import QCoreApplication
    QCoreApplication.setOrganizationName(ORG_NAME)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_NAME)


# ───────────────────────────────────────────────────────────────────────────────
# Defaults / UI hints (read by settings wrapper)
# Stage progress is never stored; only preferences and window geometry.
# ───────────────────────────────────────────────────────────────────────────────
DEFAULTS = {
    "playback": {
        "interval_ms": 2000,   # auto-advance period
    },
    "ui": {
        "fade_ms": 800,        # band fade-in duration
    },
    "hotkeys": {
        "jump_start": "Home",
        "step_back": "Left",
        "play_pause": "Space",
        "step_forward": "Right",
        "jump_end": "End",
    },
}


def banner() -> str:
    return (
        f"{APP_NAME} {version_string()}  •  {APP_ID}\n"
        f"{TAGLINE}\n"
        f"Data: {APPDATA_DIR}"
    )


if __name__ == "__main__":
    ensure_app_dirs()
    print(banner())
