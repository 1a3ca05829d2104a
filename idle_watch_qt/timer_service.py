"""
QTimer-backed timer service running callbacks on the Qt main thread.
"""

from __future__ import annotations

from typing import Optional, Set

from PySide6.QtCore import QObject, QTimer

from idle_watch.interfaces import TickCallback


class QtTimerService(QObject):
    """
    Schedules repeating callbacks. A callback returning False stops its
    timer, the same as cancelling the handle.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._timers: Set[QTimer] = set()

    def schedule(self, interval: float, callback: TickCallback) -> QTimer:
        timer = QTimer(self)
        timer.setInterval(max(1, int(interval * 1000)))

        def _fire() -> None:
            if not callback():
                self.cancel(timer)

        timer.timeout.connect(_fire)  # type: ignore[arg-type]
        self._timers.add(timer)
        timer.start()
        return timer

    def cancel(self, handle: QTimer) -> None:
        if handle not in self._timers:
            return
        self._timers.discard(handle)
        handle.stop()

    @property
    def active_count(self) -> int:
        return len(self._timers)
