"""
Plugin coordinator wiring the idle watch core to its host collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from idle_watch import __version__
from idle_watch import logger as app_logger
from idle_watch.activity_tracker import ActivityTracker
from idle_watch.durations import format_duration
from idle_watch.errors import RegistrationError
from idle_watch.idle_state_machine import TICK_INTERVAL_SECONDS, IdleStateMachine
from idle_watch.interfaces import (
    ClockSource,
    MonotonicClock,
    NotificationSink,
    PersistenceService,
    ProcessControl,
    TimerService,
    UiEventSource,
)
from idle_watch.settings import IdleThresholds, ThresholdSettingsManager
from idle_watch.terminal_action import TerminalAction

PLUGIN_NAME = "Idle Watch"
PLUGIN_COMMENT = "Prevent this application instance from idling too long"


@dataclass(frozen=True)
class AddonInfo:
    id: str
    name: str
    producer: str
    version: str


ADDON_INFO = AddonInfo(
    id="org.idlewatch.plugin",
    name=PLUGIN_NAME,
    producer="Idle Watch contributors",
    version=__version__,
)


class PluginStatus(Enum):
    KEEP = "Keep"
    SKIP = "Skip"


class IdleWatchPlugin:
    """Owns all idle watch state for one host process."""

    def __init__(
        self,
        *,
        timer_service: TimerService,
        ui_events: UiEventSource,
        notifier: NotificationSink,
        persistence: PersistenceService,
        process_control: ProcessControl,
        clock: Optional[ClockSource] = None,
        tick_interval: float = TICK_INTERVAL_SECONDS,
    ) -> None:
        self._logger = app_logger.get_logger()
        self._timer_service = timer_service
        self._ui_events = ui_events
        self._notifier = notifier
        self._persistence = persistence
        self._process_control = process_control
        self._clock = clock or MonotonicClock()
        self._tick_interval = tick_interval

        self._thresholds = IdleThresholds()
        self._tracker: Optional[ActivityTracker] = None
        self._state_machine: Optional[IdleStateMachine] = None
        self._timer_handle: Any = None
        self._subscribed = False

    @property
    def thresholds(self) -> IdleThresholds:
        return self._thresholds

    @property
    def tracker(self) -> Optional[ActivityTracker]:
        return self._tracker

    @property
    def state_machine(self) -> Optional[IdleStateMachine]:
        return self._state_machine

    @property
    def active(self) -> bool:
        return self._subscribed and self._timer_handle is not None

    def initialize(self, options: Optional[Mapping[str, str]] = None) -> PluginStatus:
        self._thresholds = ThresholdSettingsManager(options).read_thresholds()
        self._logger.info(
            "{} {} starting (warning after {}, timeout after {}).",
            ADDON_INFO.name,
            ADDON_INFO.version,
            format_duration(self._thresholds.warning_seconds),
            format_duration(self._thresholds.timeout_seconds),
        )

        self._tracker = ActivityTracker(self._clock)
        terminal_action = TerminalAction(
            self._tracker, self._persistence, self._notifier, self._process_control
        )
        self._state_machine = IdleStateMachine(
            self._tracker,
            self._thresholds,
            self._notifier,
            terminal_action,
            clock=self._clock,
            tick_interval=self._tick_interval,
        )

        try:
            self._ui_events.subscribe(self._on_ui_activity)
        except RegistrationError as exc:
            self._logger.error("Failed to register UI notifications, skipping plugin: {}", exc)
            return PluginStatus.SKIP
        self._subscribed = True

        self._timer_handle = self._timer_service.schedule(self._tick_interval, self._on_timer)
        return PluginStatus.KEEP

    def run(self) -> None:
        """Show what the plugin does; invoked from the host's plugin menu."""
        self._notifier.info(self.help_text())

    def help_text(self) -> str:
        return (
            "This plugin displays a notification if this application instance is idling "
            f"for more than {format_duration(self._thresholds.warning_seconds)}.\n"
            f"After {format_duration(self._thresholds.timeout_seconds)}, it will create a "
            "snapshot of your work and quit without saving.\n"
            f"{self.status_text()}"
        )

    def status_text(self) -> str:
        if self._state_machine is None or self._tracker is None:
            return "Idle watch is not running."
        state = self._state_machine.state()
        idle = self._tracker.idle_duration()
        return f"Current state: {state.value}, idle for {format_duration(idle)}."

    def terminate(self) -> None:
        if self._timer_handle is not None:
            self._timer_service.cancel(self._timer_handle)
            self._timer_handle = None
        if self._subscribed:
            self._ui_events.unsubscribe()
            self._subscribed = False
        self._logger.debug("{} terminated.", ADDON_INFO.name)

    def _on_ui_activity(self) -> None:
        if self._tracker is not None:
            self._tracker.record_activity()

    def _on_timer(self) -> bool:
        if self._state_machine is None:
            return False
        keep_ticking = self._state_machine.tick()
        if not keep_ticking:
            self._logger.info("Idle timer stopped.")
            self._timer_handle = None
        return keep_ticking
