"""Tests for the shared loguru setup."""

from loguru import logger

from idle_watch import logger as app_logger
from idle_watch.settings import ThresholdSettingsManager


def test_get_logger_keeps_host_sinks() -> None:
    received = []
    sink_id = logger.add(lambda message: received.append(message.record["message"]), level="DEBUG")
    try:
        assert app_logger.get_logger() is logger
        ThresholdSettingsManager({"IdleWatchWarningSeconds": "later"}, environ={}).read_thresholds()
        assert any("unparseable" in message for message in received)
    finally:
        logger.remove(sink_id)


def test_configure_writes_log_file(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(app_logger, "_LOG_INITIALISED", False)
    target = tmp_path / "logs" / "idle_watch.log"
    app_logger.configure(target)
    try:
        logger.info("configured sink check")
        logger.complete()
        assert "configured sink check" in target.read_text(encoding="utf-8")
    finally:
        logger.remove()


def test_configure_runs_once(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(app_logger, "_LOG_INITIALISED", True)
    target = tmp_path / "unused" / "idle_watch.log"
    app_logger.configure(target)
    assert not target.parent.exists()
