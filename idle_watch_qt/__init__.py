"""
PySide6 bindings satisfying the idle watch collaborator interfaces.
"""

from .notifications import QtNotificationSink  # noqa: F401
from .process_control import QtProcessControl  # noqa: F401
from .timer_service import QtTimerService  # noqa: F401
from .ui_events import QtUiEventSource  # noqa: F401
