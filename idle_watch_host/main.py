"""
Entry point for the idle watch scratchpad demo host.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, Mapping, Optional

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from idle_watch import logger as app_logger
from idle_watch.plugin import IdleWatchPlugin, PluginStatus
from idle_watch_host.scratchpad_window import APP_NAME, ScratchpadWindow
from idle_watch_host.snapshot_store import ScratchpadStore
from idle_watch_qt import QtNotificationSink, QtProcessControl, QtTimerService, QtUiEventSource

_LOGGER = app_logger.get_logger()

DEFAULT_SESSION_DIR = Path(
    os.environ.get(
        "IDLE_WATCH_SESSION_DIR",
        str(Path.home() / ".idle_watch" / "session"),
    )
)


def attach_plugin(
    app: QCoreApplication,
    window: ScratchpadWindow,
    store: ScratchpadStore,
    options: Optional[Mapping[str, str]] = None,
) -> IdleWatchPlugin:
    """Wire the idle watch plugin to the Qt application and the scratchpad."""
    plugin = IdleWatchPlugin(
        timer_service=QtTimerService(app),
        ui_events=QtUiEventSource(app),
        notifier=QtNotificationSink(status_callback=window.show_status),
        persistence=store,
        process_control=QtProcessControl(app),
    )
    if plugin.initialize(options) is PluginStatus.KEEP:
        window.set_plugin_runner(plugin.run)
    else:
        _LOGGER.warning("Idle watch disabled for this session.")
    return plugin


def finish_session(store: ScratchpadStore) -> None:
    """Save the working copy unless an idle snapshot made it disposable."""
    if not store.has_open_state():
        return
    if not store.disposable:
        store.save()
    store.close()


def run_application(argv: Iterable[str], session_dir: Path = DEFAULT_SESSION_DIR) -> int:
    """Run the host event loop with the idle watch plugin attached."""
    app_logger.configure()
    app = QApplication(list(argv))
    app.setApplicationName(APP_NAME)

    store = ScratchpadStore(session_dir)
    store.open()
    window = ScratchpadWindow(store)
    plugin = attach_plugin(app, window, store)

    window.show()
    exit_code = app.exec()

    plugin.terminate()
    finish_session(store)
    _LOGGER.info("{} exited with code {}.", APP_NAME, exit_code)
    return exit_code


def main() -> int:
    return run_application(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
