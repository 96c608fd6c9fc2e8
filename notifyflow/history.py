"""Record of pipeline stages each notification passed through."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from typing import Any

from notifyflow.producer import Notification


@dataclass(frozen=True)
class Entry:
    """One stage a notification passed, with an optional detail message."""

    stage: str
    notification: Notification
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form used for export."""
        return {
            "Stage": self.stage,
            "Notification": {
                "ID": self.notification.id,
                "Type": self.notification.type,
                "Message": self.notification.message,
            },
            "Message": self.message,
        }


def _encode(entries: list[Entry]) -> str:
    text = json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False)
    # Escape HTML-sensitive characters and line separators; these only
    # ever appear inside JSON strings.
    for char, escape in (
        ("&", "\\u0026"),
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escape)
    return text + "\n"


class Store:
    """Thread-safe, append-only list of history entries."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[Entry] = []

    def add(self, entry: Entry) -> None:
        """Append an entry."""
        with self._lock:
            self._items.append(entry)

    def all(self) -> list[Entry]:
        """Return a copy of all entries in insertion order."""
        with self._lock:
            return list(self._items)

    def export(self, file_path: str) -> None:
        """Write all entries to ``file_path`` as indented JSON."""
        with self._lock:
            payload = _encode(self._items)
            with open(file_path, "w", encoding="utf-8") as fh:
                fh.write(payload)


_global_store = Store()


def store_notification(notification: Notification, stage: str) -> None:
    """Record a notification at a stage in the shared store."""
    _global_store.add(Entry(stage=stage, notification=notification))


def get_all_history() -> list[Entry]:
    """Return all entries from the shared store."""
    return _global_store.all()


def export_to_file(file_path: str) -> None:
    """Write the shared store to ``file_path`` as indented JSON."""
    _global_store.export(file_path)