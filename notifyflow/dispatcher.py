"""Stage that routes notifications to per-transport channels."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from notifyflow import logger
from notifyflow.channel import Channel
from notifyflow.history import Entry
from notifyflow.producer import Notification


@dataclass(frozen=True)
class DispatchMap:
    """Output channels, one per supported notification type."""

    email: Channel[Notification] = field(default_factory=Channel)
    sms: Channel[Notification] = field(default_factory=Channel)
    webhook: Channel[Notification] = field(default_factory=Channel)
    push: Channel[Notification] = field(default_factory=Channel)


def route(
    notifications: Channel[Notification],
    errors: Channel[Exception],
    history: Channel[Entry],
) -> DispatchMap:
    """Send each notification to the channel for its type.

    Unsupported types are reported on ``errors`` and logged. All output
    channels are closed once the input is exhausted.
    """
    dispatch = DispatchMap()
    targets = {
        "Email": dispatch.email,
        "SMS": dispatch.sms,
        "Webhook": dispatch.webhook,
        "Push": dispatch.push,
    }

    def run() -> None:
        try:
            for n in notifications:
                target = targets.get(n.type)
                if target is not None:
                    target.send(n)
                    continue
                text = (
                    f"[Dispatcher Error] Unsupported notification type: "
                    f"{n.type}, ID: {n.id}"
                )
                errors.send(ValueError(text))
                logger.error(text)
        finally:
            for channel in targets.values():
                channel.close()

    threading.Thread(target=run, daemon=True).start()
    return dispatch