"""Tests for the scratchpad demo host wiring."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from idle_watch_host.main import attach_plugin, finish_session  # noqa: E402
from idle_watch_host.scratchpad_window import ScratchpadWindow  # noqa: E402
from idle_watch_host.snapshot_store import ScratchpadStore  # noqa: E402

SHORT_OPTIONS = {"IdleWatchWarningSeconds": "3", "IdleWatchTimeoutSeconds": "5"}


@pytest.fixture(scope="module")
def qt_app():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def store(tmp_path) -> ScratchpadStore:
    store = ScratchpadStore(tmp_path / "session")
    store.open()
    return store


@pytest.fixture
def window(qt_app, store):
    window = ScratchpadWindow(store)
    yield window
    window.deleteLater()


def test_text_edits_flow_into_store(window, store) -> None:
    window.centralWidget().setPlainText("meeting notes")
    assert store.text == "meeting notes"


def test_close_saves_working_copy(window, store) -> None:
    window.centralWidget().setPlainText("keep me")
    window.show()
    window.close()
    assert store.working_path.read_text(encoding="utf-8") == "keep me"


def test_close_skips_save_for_disposable_session(window, store) -> None:
    window.centralWidget().setPlainText("already snapshotted")
    store.mark_disposable(store.snapshot("Idle Watch auto snapshot"))
    window.show()
    window.close()
    assert not store.working_path.exists()


def test_plugin_action_disabled_until_runner_set(window) -> None:
    assert not window.plugin_action.isEnabled()
    calls = []
    window.set_plugin_runner(lambda: calls.append(1))
    window.plugin_action.trigger()
    assert calls == [1]


def test_attach_plugin_wires_menu_and_status_bar(qt_app, window, store) -> None:
    plugin = attach_plugin(qt_app, window, store, SHORT_OPTIONS)
    try:
        assert plugin.active
        assert window.plugin_action.isEnabled()
        window.plugin_action.trigger()
        assert window.statusBar().currentMessage().startswith("This plugin displays a notification")
    finally:
        plugin.terminate()
    assert not plugin.active


class TestFinishSession:
    def test_saves_and_closes(self, store) -> None:
        store.update("draft")
        finish_session(store)
        assert store.working_path.read_text(encoding="utf-8") == "draft"
        assert not store.has_open_state()

    def test_disposable_session_is_discarded(self, store) -> None:
        store.update("draft")
        store.mark_disposable(store.snapshot("Idle Watch auto snapshot"))
        finish_session(store)
        assert not store.working_path.exists()
        assert not store.has_open_state()

    def test_closed_store_is_left_alone(self, tmp_path) -> None:
        store = ScratchpadStore(tmp_path / "never-opened")
        finish_session(store)
        assert not store.session_dir.exists()
