"""
Idle watch: warns about and ends host sessions left idle for too long.
"""

__version__ = "0.6.0"

__all__ = [
    "activity_tracker",
    "durations",
    "errors",
    "idle_state_machine",
    "interfaces",
    "logger",
    "plugin",
    "settings",
    "terminal_action",
]
