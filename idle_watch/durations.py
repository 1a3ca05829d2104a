"""
Human-readable rendering of durations for user-facing messages.
"""

from __future__ import annotations


def format_duration(seconds: float) -> str:
    """
    Render a duration as hours, minutes and seconds, skipping zero parts.

    ``format_duration(5400)`` returns ``"1h 30m"``. Fractions of a second
    are dropped; a duration below one second renders as ``"0s"``.
    """
    total = max(0, int(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs:
        parts.append(f"{secs}s")
    return " ".join(parts) or "0s"
