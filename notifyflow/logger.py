"""Process-wide logger writing timestamped lines to standard output."""

from __future__ import annotations

import logging
import sys

_PREFIX = "NOTIFY-SYSTEM: "
_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class _StdoutHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stdout``."""

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value):
        # The target is always the live sys.stdout.
        pass


def _build_logger() -> logging.Logger:
    log = logging.getLogger("notifyflow")
    if not any(isinstance(h, _StdoutHandler) for h in log.handlers):
        handler = _StdoutHandler()
        handler.setFormatter(
            logging.Formatter(_PREFIX + "%(asctime)s %(message)s", _DATE_FORMAT)
        )
        log.addHandler(handler)
    log.setLevel(logging.INFO)
    log.propagate = False
    return log


_logger = _build_logger()


def info(msg: str) -> None:
    """Log an informational message."""
    _logger.info("INFO: " + msg)


def error(msg: str) -> None:
    """Log an error message."""
    _logger.error("ERROR: " + msg)


def fatal(msg: str) -> None:
    """Log a fatal message and terminate with exit status 1."""
    _logger.critical("FATAL: " + msg)
    raise SystemExit(1)