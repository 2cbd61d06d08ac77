from __future__ import annotations
import logging, logging.handlers
import os
from pathlib import Path
from typing import Optional
from app_config import APP_NAME, COMPANY_NAME, LOG_DIR, LOG_LEVEL_ENV

LOG_FILE = LOG_DIR / f"{APP_NAME.lower()}.log"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def resolve_level(default: int = logging.INFO) -> int:
    """Level from the environment override, else `default`."""
    name = (os.getenv(LOG_LEVEL_ENV) or "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> logging.Logger:
    logger = logging.getLogger()  # root
    logger.setLevel(level)

    # Clear duplicate handlers if reinit
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # Rotating file
    path = Path(log_file) if log_file is not None else LOG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.handlers.RotatingFileHandler(
        path, maxBytes=10_000_000, backupCount=5, encoding="utf-8"
    )
    fh.setFormatter(fmt)
    fh.setLevel(level)
    logger.addHandler(fh)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    ch.setLevel(level)
    logger.addHandler(ch)

    logger.info("%s logging initialised • %s • %s", APP_NAME, COMPANY_NAME, path)
    return logger

# Convenience helper so other modules consistently acquire loggers
def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a child logger of the root configured by setup_logging().
    Usage: from corticogenesis.core.logging import get_logger; log = get_logger(__name__)
    """
    return logging.getLogger(name or APP_NAME)
