# corticogenesis/core/config.py
from __future__ import annotations
from typing import Any
from PySide6.QtCore import QSettings
from app_config import apply_qsettings_org, DEFAULTS
from corticogenesis.core.logging import get_logger

_log = get_logger(__name__)


class Settings:
    """
    Thin wrapper over QSettings with defaults and simple dict-like get/set.
    Holds UI preferences and window geometry only; stage progress is never stored.
    """
    def __init__(self):
        apply_qsettings_org()
        self._qs = QSettings()

        # Prime defaults if key not present
        for group, values in DEFAULTS.items():
            for k, v in values.items() if isinstance(values, dict) else []:
                key = f"{group}/{k}"
                if not self._qs.contains(key):
                    self._qs.setValue(key, v)

    @staticmethod
    def default_for(key: str) -> Any:
        group, _, name = key.partition("/")
        values = DEFAULTS.get(group)
        return values.get(name) if isinstance(values, dict) else None

    def get(self, key: str, default: Any = None) -> Any:
        if default is None:
            default = self.default_for(key)
        val = self._qs.value(key, default)
        return val if val is not None else default

    def get_int(self, key: str) -> int:
        fallback = int(self.default_for(key) or 0)
        val = self.get(key, fallback)
        try:
            return int(val)
        except (TypeError, ValueError):
            _log.debug("Settings: %s=%r is not an int, using %d", key, val, fallback)
            return fallback

    def set(self, key: str, value: Any) -> None:
        self._qs.setValue(key, value)
        self._qs.sync()


def get_settings() -> Settings:
    return Settings()
