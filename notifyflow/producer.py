"""Notification record and the stage that emits the initial notifications."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable

from notifyflow.channel import Channel


@dataclass(frozen=True)
class Notification:
    """A notification to deliver over one transport."""

    id: int
    type: str
    message: str


DEFAULT_NOTIFICATIONS: tuple[Notification, ...] = (
    Notification(1, "Email", "Welcome email"),
    Notification(2, "SMS", "Your OTP code"),
    Notification(3, "Push", "Push hello"),
    Notification(4, "Webhook", "Webhook triggered"),
    Notification(5, "Unknown", "Oops!"),
)


def produce(
    errors: Channel[Exception],
    notifications: Iterable[Notification] | None = None,
) -> Channel[Notification]:
    """Emit notifications on a new channel from a background thread.

    Uses the built-in set when ``notifications`` is None. An empty set
    reports an error on ``errors`` and yields nothing.
    """
    items = list(DEFAULT_NOTIFICATIONS if notifications is None else notifications)
    out: Channel[Notification] = Channel()

    def run() -> None:
        try:
            if not items:
                errors.send(
                    ValueError("Producer error: no notifications to generate")
                )
                return
            for notification in items:
                out.send(notification)
        finally:
            out.close()

    threading.Thread(target=run, daemon=True).start()
    return out