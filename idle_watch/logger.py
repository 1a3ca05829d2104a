"""
Logging setup shared by the idle watch core and its host bindings.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
LOG_DIR = Path(os.environ.get("IDLE_WATCH_LOG_DIR", str(Path.home() / ".idle_watch")))
DEFAULT_LOG_PATH = LOG_DIR / "idle_watch.log"


def configure(log_path: Optional[Path] = None) -> None:
    """
    Configure loguru sinks for a standalone host process.

    Runs only once per process. A log directory that cannot be created
    leaves the console sink as the only output.
    """
    global _LOG_INITIALISED
    if _LOG_INITIALISED:
        return
    target = log_path or DEFAULT_LOG_PATH

    _logger.remove()
    if sys.stderr is not None:
        _logger.add(sys.stderr, level="INFO", enqueue=True)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        _logger.warning("Cannot create log directory {}: {}", target.parent, exc)
    else:
        _logger.add(
            target,
            level="DEBUG",
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
            enqueue=True,
            backtrace=True,
            diagnose=False,
        )
    _LOG_INITIALISED = True


def get_logger():
    """
    Return the shared logger instance.

    Sinks are left to the embedding host; only the demo host entry point
    calls ``configure``.
    """
    return _logger
