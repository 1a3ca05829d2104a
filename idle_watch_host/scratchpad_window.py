"""
Minimal editor window used as the demo host for the idle watch plugin.
"""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QMainWindow, QPlainTextEdit

from idle_watch.plugin import PLUGIN_NAME
from idle_watch_host.snapshot_store import ScratchpadStore

APP_NAME = "Idle Watch Scratchpad"


class ScratchpadWindow(QMainWindow):
    def __init__(self, store: ScratchpadStore) -> None:
        super().__init__()
        self._store = store
        self._plugin_runner: Optional[Callable[[], None]] = None
        self.setWindowTitle(APP_NAME)
        self.resize(720, 480)

        self._editor = QPlainTextEdit(self)
        self._editor.setPlainText(store.text)
        self._editor.textChanged.connect(self._on_text_changed)  # type: ignore[arg-type]
        self.setCentralWidget(self._editor)

        menu = self.menuBar().addMenu("Plugins")
        self._plugin_action = QAction(PLUGIN_NAME, self)
        self._plugin_action.setEnabled(False)
        self._plugin_action.triggered.connect(self._on_plugin_action)  # type: ignore[arg-type]
        menu.addAction(self._plugin_action)

        self.statusBar().showMessage("Ready")

    @property
    def plugin_action(self) -> QAction:
        return self._plugin_action

    def set_plugin_runner(self, runner: Callable[[], None]) -> None:
        self._plugin_runner = runner
        self._plugin_action.setEnabled(True)

    def show_status(self, message: str) -> None:
        self.statusBar().showMessage(message, 10000)

    def _on_text_changed(self) -> None:
        self._store.update(self._editor.toPlainText())

    def _on_plugin_action(self) -> None:
        if self._plugin_runner is not None:
            self._plugin_runner()

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        if self._store.has_open_state() and not self._store.disposable:
            self._store.save()
        super().closeEvent(event)
