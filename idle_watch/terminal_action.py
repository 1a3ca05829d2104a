"""
Snapshot-then-exit sequence run once the idle timeout has been reached.
"""

from __future__ import annotations

from enum import Enum

from idle_watch import logger as app_logger
from idle_watch.activity_tracker import ActivityTracker
from idle_watch.errors import PersistenceError, ProcessControlError
from idle_watch.interfaces import NotificationSink, PersistenceService, ProcessControl

_LOGGER = app_logger.get_logger()

SNAPSHOT_DESCRIPTION = "Idle Watch auto snapshot"


class TerminalOutcome(Enum):
    EXITING = "Exiting"
    ABORTED = "Aborted"


class TerminalAction:
    """
    Saves a snapshot of the host's working state and asks the host to quit.

    A failed snapshot aborts the sequence and leaves the host running with
    the idle clock re-armed; losing work is worse than an idle session.
    """

    def __init__(
        self,
        tracker: ActivityTracker,
        persistence: PersistenceService,
        notifier: NotificationSink,
        process_control: ProcessControl,
        *,
        exit_code: int = 0,
    ) -> None:
        self._tracker = tracker
        self._persistence = persistence
        self._notifier = notifier
        self._process_control = process_control
        self._exit_code = exit_code
        self._exit_requested = False

    @property
    def exit_requested(self) -> bool:
        return self._exit_requested

    def run(self) -> TerminalOutcome:
        if self._exit_requested:
            _LOGGER.debug("Exit already requested; ignoring repeated terminal action.")
            return TerminalOutcome.EXITING

        self._tracker.suppress(permanent=True)

        try:
            has_open_state = self._persistence.has_open_state()
            if has_open_state:
                self._notifier.info("Idle Watch: Saving snapshot...")
                snapshot_path = self._persistence.snapshot(SNAPSHOT_DESCRIPTION)
        except (PersistenceError, OSError) as exc:
            return self._abort(f"Could not take a snapshot: {exc}")

        if has_open_state:
            self._notifier.info(f"Idle Watch: Saved snapshot to: {snapshot_path}")
            try:
                self._persistence.mark_disposable(snapshot_path)
            except (PersistenceError, OSError) as exc:
                _LOGGER.warning("Could not mark session disposable: {}", exc)
        else:
            _LOGGER.info("No open working state; skipping snapshot.")

        self._notifier.info("Idle Watch: Closing the application...")
        try:
            self._process_control.request_exit(self._exit_code)
        except ProcessControlError as exc:
            return self._abort(f"Could not close the application: {exc}")
        self._exit_requested = True
        return TerminalOutcome.EXITING

    def _abort(self, reason: str) -> TerminalOutcome:
        _LOGGER.error("Terminal action aborted, staying open: {}", reason)
        self._notifier.warn(f"Idle Watch: {reason}")
        self._tracker.rearm()
        return TerminalOutcome.ABORTED
