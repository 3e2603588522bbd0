# File: doodle/utils/log.py
# Project: Doodle
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Logging centralizado (consola + archivo) y helpers.
# Notes: El core puro no configura logging; solo la app y los bindings.
from __future__ import annotations

import logging
import os
from pathlib import Path

from doodle.core.version import APP_SHORT

_LOGGER_CONFIGURED = False

LOG_FILE_NAME = f"{APP_SHORT}.log"


def setup_logging(log_dir: str | os.PathLike = "logs", level: int = logging.INFO) -> None:
    """Configure console + file logging once per process.

    If the log file cannot be opened the console handler still works.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    try:
        d = Path(log_dir)
        d.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(d / LOG_FILE_NAME, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    except OSError as e:
        logging.getLogger(__name__).warning("Could not open log file in %s: %s", log_dir, e)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
