import re

import pytest

from notifyflow import logger

_STAMP = r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}"


def _normalise(out):
    return re.sub(_STAMP, "<stamp>", out)


def test_info_line_format(capsys):
    logger.info("hello")
    out = capsys.readouterr().out
    assert _normalise(out) == "NOTIFY-SYSTEM: <stamp> INFO: hello\n"


def test_error_line_format(capsys):
    logger.error("broken")
    out = capsys.readouterr().out
    assert _normalise(out) == "NOTIFY-SYSTEM: <stamp> ERROR: broken\n"


def test_fatal_logs_and_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        logger.fatal("boom")
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert out.startswith("NOTIFY-SYSTEM: ")
    assert out.rstrip("\n").endswith("FATAL: boom")


def test_each_call_is_one_line(capsys):
    logger.info("one")
    logger.error("two")
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("INFO: one")
    assert lines[1].endswith("ERROR: two")