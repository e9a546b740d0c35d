"""Utility helpers."""
from __future__ import annotations

import logging
import os
import shutil
import sys
import tempfile
from datetime import date
from typing import Optional

import structlog


def atomic_write(path: str, data: str) -> None:
    """Write data to path atomically, keeping the existing file's mode."""
    dir_path = os.path.dirname(path) or "."
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", delete=False, dir=dir_path
    ) as tf:
        temp_name = tf.name
        try:
            tf.write(data)
        except BaseException:
            tf.close()
            os.unlink(temp_name)
            raise
    try:
        if os.path.exists(path):
            shutil.copymode(path, temp_name)
        else:
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(temp_name, 0o666 & ~umask)
        os.replace(temp_name, path)
    except BaseException:
        os.unlink(temp_name)
        raise


def datestamp(day: Optional[date] = None) -> str:
    """Return ``day`` (default: today) as ``YYYY-MM-DD``."""
    return (day or date.today()).isoformat()


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog output to stderr, dropping events below ``level``."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
