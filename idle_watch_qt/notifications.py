"""
Notification sink routing idle watch messages to the log and the screen.
"""

from __future__ import annotations

from typing import Callable, Optional

from idle_watch import logger as app_logger
from idle_watch.plugin import PLUGIN_NAME
from idle_watch_qt.notification_popup import IdleWarningPopup

_LOGGER = app_logger.get_logger()


class QtNotificationSink:
    """
    Informational messages go to the log and, when given, a status callback
    such as ``QStatusBar.showMessage``. Warnings also raise the popup.
    """

    def __init__(
        self,
        *,
        status_callback: Optional[Callable[[str], None]] = None,
        popup: Optional[IdleWarningPopup] = None,
    ) -> None:
        self._status_callback = status_callback
        self._popup = popup

    @property
    def popup(self) -> IdleWarningPopup:
        if self._popup is None:
            self._popup = IdleWarningPopup()
        return self._popup

    def info(self, message: str) -> None:
        _LOGGER.info(message)
        if self._status_callback is not None:
            self._status_callback(message.splitlines()[0] if message else message)

    def warn(self, message: str) -> None:
        _LOGGER.warning(message)
        self.popup.show_message(PLUGIN_NAME, message)
