"""
Exception types raised at the idle watch collaborator seams.
"""

from __future__ import annotations


class IdleWatchError(Exception):
    """Base class for idle watch failures."""


class ConfigurationError(IdleWatchError, ValueError):
    """Raised when threshold settings are unparseable or inconsistent."""


class RegistrationError(IdleWatchError):
    """Raised when the UI activity hook cannot be installed."""


class PersistenceError(IdleWatchError):
    """Raised when the host fails to write a snapshot of its working state."""


class ProcessControlError(IdleWatchError):
    """Raised when the host cannot be asked to shut down."""
