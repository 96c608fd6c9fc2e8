"""Stages that deliver notifications over each supported transport."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

from notifyflow import history as history_store
from notifyflow import logger
from notifyflow.channel import Channel
from notifyflow.history import Entry
from notifyflow.producer import Notification


@dataclass(frozen=True)
class _Transport:
    """Wording and bookkeeping details for one delivery transport."""

    label: str
    log_name: str
    store_stage: str
    sent_log: str
    suffix: str


_EMAIL = _Transport("Email", "email", "email", "Email sent successfully", "")
_SMS = _Transport("SMS", "SMS", "sms", "SMS sent successfully", "\n")
_WEBHOOK = _Transport(
    "Webhook", "webhook", "webhook", "Webhook sent successfully", "\n"
)
_PUSH = _Transport(
    "Push", "push", "sender", "Push notification sent successfully", "\n"
)


def _start_sender(
    transport: _Transport,
    notifications: Channel[Notification],
    errors: Channel[Exception],
    history: Channel[Entry],
    delay: float,
) -> Channel[str]:
    if delay < 0:
        raise ValueError("delay must not be negative")
    out: Channel[str] = Channel()

    def run() -> None:
        try:
            for n in notifications:
                logger.info(f"Processing {transport.log_name} notification ID: {n.id}")
                if n.message == "":
                    errors.send(
                        ValueError(
                            f"[Sender Error] {transport.label} message is empty. "
                            f"ID: {n.id}"
                        )
                    )
                    continue
                time.sleep(delay)
                history_store.store_notification(n, transport.store_stage)
                msg = (
                    f"[{transport.label} Sent] ID: {n.id}, Message: {n.message}"
                    f"{transport.suffix}"
                )
                logger.info(f"{transport.sent_log}: {msg}")
                history.send(
                    Entry(
                        f"{transport.label} Sender",
                        n,
                        f"{transport.label} sent successfully",
                    )
                )
                out.send(msg)
        finally:
            out.close()

    threading.Thread(target=run, daemon=True).start()
    return out


def send_email(
    notifications: Channel[Notification],
    errors: Channel[Exception],
    history: Channel[Entry],
    delay: float = 1.0,
) -> Channel[str]:
    """Deliver e-mail notifications, yielding a result line for each."""
    return _start_sender(_EMAIL, notifications, errors, history, delay)


def send_sms(
    notifications: Channel[Notification],
    errors: Channel[Exception],
    history: Channel[Entry],
    delay: float = 0.5,
) -> Channel[str]:
    """Deliver SMS notifications, yielding a result line for each."""
    return _start_sender(_SMS, notifications, errors, history, delay)


def send_webhook(
    notifications: Channel[Notification],
    errors: Channel[Exception],
    history: Channel[Entry],
    delay: float = 2.0,
) -> Channel[str]:
    """Deliver webhook notifications, yielding a result line for each."""
    return _start_sender(_WEBHOOK, notifications, errors, history, delay)


def send_push(
    notifications: Channel[Notification],
    errors: Channel[Exception],
    history: Channel[Entry],
    delay: float = 2.0,
) -> Channel[str]:
    """Deliver push notifications, yielding a result line for each."""
    return _start_sender(_PUSH, notifications, errors, history, delay)