"""Tests for the frame-stamped logger."""

import io
import re

from siv.logging import Logger


def test_log_line_format():
    stream = io.StringIO()
    logger = Logger(stream)
    for _ in range(3):
        logger.increment_frame()
    logger("[TEST] hello")
    assert re.fullmatch(r"\[\s*\d+\.\d{3}s F000003\] \[TEST\] hello\n", stream.getvalue())


def test_increment_frame():
    logger = Logger(io.StringIO())
    logger.increment_frame()
    logger.increment_frame()
    assert logger.frame == 2


def test_disabled_logger_is_silent():
    stream = io.StringIO()
    logger = Logger(stream)
    logger.enabled = False
    logger.log("nothing")
    assert stream.getvalue() == ""
