"""
Periodic idle evaluation: warn once, then snapshot and exit.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from idle_watch import logger as app_logger
from idle_watch.activity_tracker import ActivityTracker
from idle_watch.durations import format_duration
from idle_watch.interfaces import ClockSource, MonotonicClock, NotificationSink
from idle_watch.settings import IdleThresholds
from idle_watch.terminal_action import TerminalAction, TerminalOutcome

_LOGGER = app_logger.get_logger()

TICK_INTERVAL_SECONDS = 1.0


class IdleState(Enum):
    ACTIVE = "Active"
    WARNED = "Warned"
    EXPIRED = "Expired"


class IdleStateMachine:
    """
    Driven by a timer firing every ``tick_interval`` seconds on the host's
    UI thread. ``tick`` returns False once the timer should stop.
    """

    def __init__(
        self,
        tracker: ActivityTracker,
        thresholds: IdleThresholds,
        notifier: NotificationSink,
        terminal_action: TerminalAction,
        *,
        clock: Optional[ClockSource] = None,
        tick_interval: float = TICK_INTERVAL_SECONDS,
    ) -> None:
        self._tracker = tracker
        self._thresholds = thresholds
        self._notifier = notifier
        self._terminal_action = terminal_action
        self._clock = clock or MonotonicClock()
        self._tick_interval = tick_interval
        self._warned_baseline: Optional[float] = None
        self._expired = False

    @property
    def thresholds(self) -> IdleThresholds:
        return self._thresholds

    @property
    def tick_interval(self) -> float:
        return self._tick_interval

    @property
    def expired(self) -> bool:
        return self._expired

    def state(self, now: Optional[float] = None) -> IdleState:
        if self._expired:
            return IdleState.EXPIRED
        idle = self._tracker.idle_duration(now if now is not None else self._clock.now())
        if idle >= self._thresholds.timeout_seconds:
            return IdleState.EXPIRED
        if idle >= self._thresholds.warning_seconds:
            return IdleState.WARNED
        return IdleState.ACTIVE

    def tick(self) -> bool:
        if self._expired:
            return False

        self._tracker.suppress()
        try:
            idle = self._tracker.idle_duration(self._clock.now())

            if idle >= self._thresholds.timeout_seconds:
                _LOGGER.info("Idle for {}; running terminal action.", format_duration(idle))
                outcome = self._terminal_action.run()
                if outcome is TerminalOutcome.EXITING:
                    self._expired = True
                    return False
                _LOGGER.warning("Terminal action aborted; idle detection stays armed.")
                return True

            if self._in_warning_band(idle) and self._warned_baseline != self._tracker.last_activity:
                self._warned_baseline = self._tracker.last_activity
                self._notifier.warn(self.warning_message())
            return True
        finally:
            self._tracker.release()

    def warning_message(self) -> str:
        warning = self._thresholds.warning_seconds
        remaining = self._thresholds.timeout_seconds - warning
        return (
            f"Idle Watch: ATTENTION! Your session has been idle for more than "
            f"{format_duration(warning)}.\n"
            "If you do not save your work, the application will create a snapshot "
            "and close without saving.\n"
            f"This will happen in {format_duration(remaining)}."
        )

    def _in_warning_band(self, idle: float) -> bool:
        warning = self._thresholds.warning_seconds
        return warning <= idle < warning + self._tick_interval
