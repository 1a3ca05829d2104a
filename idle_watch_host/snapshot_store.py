"""
File-backed working state for the scratchpad host.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from idle_watch import logger as app_logger
from idle_watch.errors import PersistenceError

_LOGGER = app_logger.get_logger()

WORKING_COPY_NAME = "working.txt"
SNAPSHOT_DIR_NAME = "snapshots"


class ScratchpadStore:
    """
    Keeps the scratchpad text in a working copy under ``session_dir`` and
    writes JSON snapshots next to it. A session marked disposable has its
    working copy removed on close; snapshots are always kept.
    """

    def __init__(self, session_dir: Path) -> None:
        self.session_dir = Path(session_dir)
        self.snapshot_dir = self.session_dir / SNAPSHOT_DIR_NAME
        self.working_path = self.session_dir / WORKING_COPY_NAME
        self._text: Optional[str] = None
        self._disposable = False

    @property
    def disposable(self) -> bool:
        return self._disposable

    @property
    def text(self) -> str:
        return self._text or ""

    def open(self) -> str:
        self.session_dir.mkdir(parents=True, exist_ok=True)
        try:
            self._text = self.working_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._text = ""
        _LOGGER.debug("Opened scratchpad session at {}", self.session_dir)
        return self._text

    def update(self, text: str) -> None:
        self._text = text

    def save(self) -> None:
        if self._text is None:
            return
        self.working_path.write_text(self._text, encoding="utf-8")

    def close(self) -> None:
        if self._text is None:
            return
        if self._disposable:
            _LOGGER.info("Session is disposable; removing working copy {}", self.working_path)
            self.working_path.unlink(missing_ok=True)
        self._text = None

    def has_open_state(self) -> bool:
        return self._text is not None

    def snapshot(self, description: str) -> Path:
        if self._text is None:
            raise PersistenceError("No scratchpad session is open.")
        created = datetime.now(timezone.utc)
        payload = {
            "description": description,
            "created": _iso_utc(created),
            "text": self._text,
        }
        target = self.snapshot_dir / f"snapshot-{created.strftime('%Y%m%dT%H%M%S%fZ')}.json"
        try:
            self.snapshot_dir.mkdir(parents=True, exist_ok=True)
            target.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Unable to write snapshot {target}: {exc}") from exc
        return target

    def mark_disposable(self, path: Path) -> None:
        _LOGGER.debug("Session backed up by {}; marking working copy disposable.", path)
        self._disposable = True


def _iso_utc(value: datetime) -> str:
    return value.astimezone(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")
