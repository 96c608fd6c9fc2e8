"""Command that runs the whole notification pipeline once."""

from __future__ import annotations

import argparse
import threading
import time
from typing import Sequence

from notifyflow import logger
from notifyflow.channel import Channel
from notifyflow.dispatcher import route
from notifyflow.history import Entry, Store, export_to_file
from notifyflow.limiter import rate_limiter
from notifyflow.processor import process
from notifyflow.producer import produce
from notifyflow.sender import send_email, send_push, send_sms, send_webhook


def print_results(tag: str, channel: Channel[str]) -> None:
    """Print every result line received from ``channel``."""
    for msg in channel:
        print(f"[{tag} Result] {msg}")


def print_error_results(tag: str, channel: Channel[Exception]) -> None:
    """Print every error received from ``channel``."""
    for err in channel:
        print(f"[{tag} Error] {err}")


def _positive(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="notifyflow", description="Run the notification pipeline."
    )
    parser.add_argument(
        "--timeout", type=_positive, default=10.0,
        help="seconds to wait for the pipeline before shutting down",
    )
    parser.add_argument(
        "--interval", type=_positive, default=0.5,
        help="rate limiter interval in seconds",
    )
    parser.add_argument(
        "--output", default="history.json", help="file the history is exported to"
    )
    return parser.parse_args(argv)


def _spawn(target, *args) -> threading.Thread:
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline, print results and export the history."""
    args = _parse_args(argv)
    logger.info("🚀 Start notification system...")

    errors: Channel[Exception] = Channel()
    history_ch: Channel[Entry] = Channel()
    store = Store()

    def record_history() -> None:
        try:
            for entry in history_ch:
                store.add(entry)
        finally:
            logger.info("History worker stopped")

    def handle_errors() -> None:
        try:
            print_error_results("Error", errors)
        finally:
            logger.info("Error handler stopped")

    background = [_spawn(record_history), _spawn(handle_errors)]

    notifications = produce(errors)
    processed = process(notifications, errors, history_ch)
    limited = rate_limiter(processed, args.interval, errors, history_ch)
    dispatch = route(limited, errors, history_ch)

    printers = [
        _spawn(print_results, "Email", send_email(dispatch.email, errors, history_ch)),
        _spawn(print_results, "SMS", send_sms(dispatch.sms, errors, history_ch)),
        _spawn(
            print_results, "Webhook", send_webhook(dispatch.webhook, errors, history_ch)
        ),
        _spawn(print_results, "Push", send_push(dispatch.push, errors, history_ch)),
    ]

    deadline = time.monotonic() + args.timeout
    try:
        for thread in printers:
            thread.join(max(0.0, deadline - time.monotonic()))
    except KeyboardInterrupt:
        logger.info("Context cancelled, shutting down...")
    else:
        if any(thread.is_alive() for thread in printers):
            logger.info("Timeout reached, shutting down...")
        else:
            logger.info("All notifications processed, shutting down...")

    errors.close()
    history_ch.close()

    try:
        export_to_file(args.output)
    except OSError as exc:
        logger.error(f"Error exporting history to file: {exc}")
    else:
        logger.info(f"History successfully exported to {args.output}")

    for thread in background:
        thread.join()
    logger.info("Notification system stopped.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())