"""Stage that validates and normalises notification messages."""

from __future__ import annotations

import dataclasses
import threading

from notifyflow.channel import Channel
from notifyflow.history import Entry
from notifyflow.producer import Notification


def process(
    notifications: Channel[Notification],
    errors: Channel[Exception],
    history: Channel[Entry],
) -> Channel[Notification]:
    """Trim, upper-case and tag each message; reject empty ones.

    Runs in a background thread and returns the output channel, which is
    closed once the input is exhausted.
    """
    out: Channel[Notification] = Channel()

    def run() -> None:
        try:
            for n in notifications:
                if n.message == "":
                    errors.send(
                        ValueError(f"empty message for notification ID: {n.id}")
                    )
                    continue
                processed = dataclasses.replace(
                    n, message="[Processed] " + n.message.strip().upper()
                )
                history.send(Entry("Processor", processed, "Processed successfully"))
                out.send(processed)
        finally:
            out.close()

    threading.Thread(target=run, daemon=True).start()
    return out