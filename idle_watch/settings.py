"""
Threshold configuration for the idle watch plugin.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from idle_watch import logger as app_logger
from idle_watch.durations import format_duration
from idle_watch.errors import ConfigurationError

_LOGGER = app_logger.get_logger()

OPTION_PREFIX = "IdleWatch"
ENV_PREFIX = "IDLE_WATCH_"
DEFAULT_WARNING_SECONDS = 6 * 60 * 60
DEFAULT_TIMEOUT_SECONDS = 12 * 60 * 60


@dataclass(frozen=True)
class IdleThresholds:
    warning_seconds: int = DEFAULT_WARNING_SECONDS
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if self.warning_seconds <= 0 or self.timeout_seconds <= 0:
            raise ConfigurationError("Idle thresholds must be positive.")
        if self.warning_seconds >= self.timeout_seconds:
            raise ConfigurationError(
                f"Warning interval {self.warning_seconds}s must be shorter than "
                f"timeout {self.timeout_seconds}s."
            )

    @property
    def is_default(self) -> bool:
        return (
            self.warning_seconds == DEFAULT_WARNING_SECONDS
            and self.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
        )


class ThresholdSettingsManager:
    """Reads threshold options once at startup and falls back on bad data."""

    def __init__(
        self,
        options: Optional[Mapping[str, str]] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._options = options or {}
        self._environ = os.environ if environ is None else environ

    def read_thresholds(self) -> IdleThresholds:
        warning = self._read_seconds("WarningSeconds") or DEFAULT_WARNING_SECONDS
        timeout = self._read_seconds("TimeoutSeconds") or DEFAULT_TIMEOUT_SECONDS

        try:
            thresholds = IdleThresholds(warning_seconds=warning, timeout_seconds=timeout)
        except ConfigurationError:
            _LOGGER.warning("Timeout smaller or equal to warning interval, both ignored.")
            return IdleThresholds()

        if warning != DEFAULT_WARNING_SECONDS:
            _LOGGER.info(
                "Warning interval set to {} via plugin option.", format_duration(warning)
            )
        if timeout != DEFAULT_TIMEOUT_SECONDS:
            _LOGGER.info(
                "Timeout interval set to {} via plugin option.", format_duration(timeout)
            )
        return thresholds

    def _read_seconds(self, name: str) -> int:
        """Return the configured value, or 0 meaning "use the default"."""
        raw = self._read_raw(name)
        if raw is None:
            return 0
        try:
            return _parse_seconds(name, raw)
        except ConfigurationError as exc:
            _LOGGER.warning("{} Falling back to the default.", exc)
            return 0

    def _read_raw(self, name: str) -> Optional[str]:
        option = self._options.get(f"{OPTION_PREFIX}{name}")
        if option is not None:
            return option
        return self._environ.get(f"{ENV_PREFIX}{_env_suffix(name)}")


def _parse_seconds(name: str, raw: str) -> int:
    text = str(raw).strip()
    if not text:
        return 0
    try:
        value = int(text)
    except ValueError as exc:
        raise ConfigurationError(f"Option {name} has unparseable value {raw!r}.") from exc
    if value < 0:
        raise ConfigurationError(f"Option {name} must not be negative, got {value}.")
    return value


def _env_suffix(name: str) -> str:
    # "WarningSeconds" -> "WARNING_SECONDS"
    chunks = []
    for char in name:
        if char.isupper() and chunks:
            chunks.append("_")
        chunks.append(char.upper())
    return "".join(chunks)
