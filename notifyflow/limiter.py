"""Stage that paces notifications to at most one per interval."""

from __future__ import annotations

import math
import threading
import time

from notifyflow.channel import Channel
from notifyflow.history import Entry
from notifyflow.producer import Notification


def rate_limiter(
    notifications: Channel[Notification],
    interval: float,
    errors: Channel[Exception],
    history: Channel[Entry],
) -> Channel[Notification]:
    """Forward notifications, delaying those that arrive between ticks.

    A tick occurs every ``interval`` seconds and at most one is held
    pending. A notification arriving with no pending tick is reported on
    ``errors``, delayed by ``interval``, recorded in ``history`` and then
    forwarded anyway.
    """
    if interval <= 0:
        raise ValueError("interval must be positive")
    out: Channel[Notification] = Channel()

    def run() -> None:
        start = time.monotonic()
        next_tick = start + interval
        try:
            for n in notifications:
                now = time.monotonic()
                if now >= next_tick:
                    # Consume the pending tick; ticks missed meanwhile are dropped.
                    elapsed = now - start
                    next_tick = start + (math.floor(elapsed / interval) + 1) * interval
                    out.send(n)
                    continue
                errors.send(RuntimeError(f"rate limited notification ID: {n.id}"))
                time.sleep(interval)
                history.send(
                    Entry("Rate Limiter", n, f"Notification ID: {n.id} rate limited")
                )
                out.send(n)
        finally:
            out.close()

    threading.Thread(target=run, daemon=True).start()
    return out