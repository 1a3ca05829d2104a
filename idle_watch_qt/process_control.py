"""
Deferred host shutdown for Qt applications.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QCoreApplication, QTimer

from idle_watch import logger as app_logger
from idle_watch.errors import ProcessControlError

_LOGGER = app_logger.get_logger()


class QtProcessControl:
    """
    Posts the exit to the event loop instead of quitting inline, so the
    handler that asked for it finishes before the application unwinds.
    """

    def __init__(self, app: Optional[QCoreApplication] = None) -> None:
        self._app = app
        self._requested_code: Optional[int] = None

    @property
    def requested_code(self) -> Optional[int]:
        return self._requested_code

    def request_exit(self, code: int) -> None:
        app = self._app or QCoreApplication.instance()
        if app is None:
            raise ProcessControlError("No running Qt application to close.")
        self._requested_code = code
        _LOGGER.info("Requesting application exit with code {}.", code)
        QTimer.singleShot(0, lambda: app.exit(code))
