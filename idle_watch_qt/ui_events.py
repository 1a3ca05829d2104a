"""
Application-wide event filter reporting genuine user input as activity.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QCoreApplication, QEvent, QObject

from idle_watch.errors import RegistrationError
from idle_watch.interfaces import ActivityCallback

QUALIFYING_EVENTS = frozenset(
    {
        QEvent.Type.KeyPress,
        QEvent.Type.MouseButtonPress,
        QEvent.Type.MouseButtonDblClick,
        QEvent.Type.MouseMove,
        QEvent.Type.Wheel,
        QEvent.Type.TouchBegin,
        QEvent.Type.TouchUpdate,
        QEvent.Type.TabletPress,
    }
)


class QtUiEventSource(QObject):
    """
    Installs itself as an event filter on the running application. Paint,
    show and timer events never count; only keyboard, mouse, wheel, touch
    and tablet input does.
    """

    def __init__(self, app: Optional[QCoreApplication] = None) -> None:
        super().__init__()
        self._app = app
        self._installed_on: Optional[QCoreApplication] = None
        self._callback: Optional[ActivityCallback] = None

    def subscribe(self, callback: ActivityCallback) -> None:
        app = self._app or QCoreApplication.instance()
        if app is None:
            raise RegistrationError("No running Qt application to hook into.")
        if self._installed_on is not None:
            raise RegistrationError("UI event hook is already installed.")
        self._callback = callback
        app.installEventFilter(self)
        self._installed_on = app

    def unsubscribe(self) -> None:
        if self._installed_on is None:
            return
        self._installed_on.removeEventFilter(self)
        self._installed_on = None
        self._callback = None

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        if self._callback is not None and event.type() in QUALIFYING_EVENTS:
            self._callback()
        return False
