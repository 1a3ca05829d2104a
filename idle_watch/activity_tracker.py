"""
Tracks the most recent genuine user interaction with the host UI.
"""

from __future__ import annotations

from typing import Optional

from idle_watch.interfaces import ClockSource, MonotonicClock


class ActivityTracker:
    """
    Holds the last-activity timestamp and the suppression flag that keeps
    the plugin's own UI side effects from counting as user activity.
    """

    def __init__(self, clock: Optional[ClockSource] = None) -> None:
        self._clock = clock or MonotonicClock()
        self._last_activity = self._clock.now()
        self._suppressed = False
        self._permanent = False

    @property
    def last_activity(self) -> float:
        return self._last_activity

    @property
    def suppressed(self) -> bool:
        return self._suppressed

    @property
    def permanently_suppressed(self) -> bool:
        return self._permanent

    def record_activity(self) -> bool:
        """Reset the idle clock unless suppressed. Returns whether it was reset."""
        if self._suppressed:
            return False
        self._last_activity = self._clock.now()
        return True

    def idle_duration(self, now: Optional[float] = None) -> float:
        if now is None:
            now = self._clock.now()
        return max(0.0, now - self._last_activity)

    def suppress(self, *, permanent: bool = False) -> None:
        self._suppressed = True
        if permanent:
            self._permanent = True

    def release(self) -> None:
        if self._permanent:
            return
        self._suppressed = False

    def rearm(self, now: Optional[float] = None) -> None:
        """Lift all suppression and start a fresh idle episode."""
        self._permanent = False
        self._suppressed = False
        self._last_activity = self._clock.now() if now is None else now
