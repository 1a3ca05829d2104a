"""
Collaborator interfaces the idle watch core consumes from its host.

The core never talks to a concrete UI toolkit. Hosts hand in objects that
satisfy these protocols; ``idle_watch_qt`` ships the PySide6 versions.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Callable, Protocol

TickCallback = Callable[[], bool]
ActivityCallback = Callable[[], None]


class ClockSource(Protocol):
    def now(self) -> float:
        """Return a monotonic instant in seconds."""


class TimerService(Protocol):
    def schedule(self, interval: float, callback: TickCallback) -> Any:
        """
        Invoke ``callback`` every ``interval`` seconds until it returns False
        or the returned handle is cancelled.
        """

    def cancel(self, handle: Any) -> None:
        ...


class UiEventSource(Protocol):
    def subscribe(self, callback: ActivityCallback) -> None:
        """Deliver every qualifying UI interaction; raises RegistrationError."""

    def unsubscribe(self) -> None:
        ...


class NotificationSink(Protocol):
    def info(self, message: str) -> None:
        ...

    def warn(self, message: str) -> None:
        ...


class PersistenceService(Protocol):
    def has_open_state(self) -> bool:
        ...

    def snapshot(self, description: str) -> Path:
        """Write a durable snapshot; raises PersistenceError on failure."""

    def mark_disposable(self, path: Path) -> None:
        """Flag the session behind snapshot ``path`` as temporary."""


class ProcessControl(Protocol):
    def request_exit(self, code: int) -> None:
        """
        Ask the host to terminate once the current handler has returned;
        raises ProcessControlError when no shutdown can be scheduled.
        """


class MonotonicClock:
    """Default clock backed by ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic()
