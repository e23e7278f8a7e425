"""Structured Logging — JSON formatter output."""

import json
import logging

from nestwell.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "nestwell.test", logging.ERROR, __file__, 1, "Corrupt column", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_formats_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "ERROR"
    assert log["logger"] == "nestwell.test"
    assert log["message"] == "Corrupt column"
    assert "timestamp" in log


def test_includes_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="CODEC_ERROR", column="tags", unrelated="x"),
    ))
    assert log["error_code"] == "CODEC_ERROR"
    assert log["column"] == "tags"
    assert "unrelated" not in log
