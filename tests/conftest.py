"""Pytest configuration and collaborator doubles for the idle watch tests."""

import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from idle_watch.errors import PersistenceError, RegistrationError


class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


class FakeTimerService:
    def __init__(self) -> None:
        self.scheduled = []
        self.cancelled = []
        self._callbacks = {}

    def schedule(self, interval, callback):
        handle = len(self.scheduled) + 1
        self.scheduled.append((handle, interval))
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle) -> None:
        self.cancelled.append(handle)
        self._callbacks.pop(handle, None)

    @property
    def active(self) -> bool:
        return bool(self._callbacks)

    def fire(self) -> bool:
        """Run every live callback once; a False result stops that timer."""
        keep_going = False
        for handle, callback in list(self._callbacks.items()):
            if callback():
                keep_going = True
            else:
                self._callbacks.pop(handle, None)
        return keep_going


class FakeUiEventSource:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.callback = None
        self.unsubscribed = False

    def subscribe(self, callback) -> None:
        if self.fail:
            raise RegistrationError("hook refused")
        self.callback = callback

    def unsubscribe(self) -> None:
        self.callback = None
        self.unsubscribed = True

    def emit(self) -> None:
        if self.callback is not None:
            self.callback()


class RecordingNotifier:
    def __init__(self) -> None:
        self.infos = []
        self.warnings = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


class FakePersistence:
    def __init__(self, open_state: bool = True, fail: bool = False) -> None:
        self.open_state = open_state
        self.fail = fail
        self.snapshots = []
        self.disposable = []

    def has_open_state(self) -> bool:
        return self.open_state

    def snapshot(self, description: str) -> Path:
        if self.fail:
            raise PersistenceError("disk full")
        path = Path(f"snapshot-{len(self.snapshots) + 1}.json")
        self.snapshots.append((description, path))
        return path

    def mark_disposable(self, path: Path) -> None:
        self.disposable.append(path)


class FakeProcessControl:
    def __init__(self) -> None:
        self.exit_codes = []

    def request_exit(self, code: int) -> None:
        self.exit_codes.append(code)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def timer_service() -> FakeTimerService:
    return FakeTimerService()


@pytest.fixture
def ui_events() -> FakeUiEventSource:
    return FakeUiEventSource()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def persistence() -> FakePersistence:
    return FakePersistence()


@pytest.fixture
def process_control() -> FakeProcessControl:
    return FakeProcessControl()


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    from idle_watch import logger as app_logger

    logger = app_logger.get_logger()
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
