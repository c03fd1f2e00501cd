"""Structured Logging — JSON formatter fields and setup idempotence."""

import json
import sys
import logging

import pytest

from titleproxy.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="titleproxy.test", level=logging.INFO, pathname=__file__,
        lineno=1, msg="hello %s", args=("world",), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_contains_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "titleproxy.test"
    assert out["message"] == "hello world"
    assert "timestamp" in out


def test_json_surfaces_extra_fields_when_present():
    out = json.loads(JSONFormatter().format(
        _record(video_id="abc", error_code="VIDEO_NOT_FOUND", status_code=None),
    ))
    assert out["video_id"] == "abc"
    assert out["error_code"] == "VIDEO_NOT_FOUND"
    assert "status_code" not in out


def test_json_keeps_non_ascii():
    record = _record()
    record.msg = "日本語"
    record.args = ()
    assert "日本語" in JSONFormatter().format(record)


def test_json_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    out = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in out["exception"]


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging("DEBUG", "json")
    setup_logging("WARNING", "text")

    ours = [h for h in restore_root_logger.handlers if h.get_name() == "titleproxy"]
    assert len(ours) == 1
    assert not isinstance(ours[0].formatter, JSONFormatter)
    assert restore_root_logger.level == logging.WARNING


def test_setup_logging_unknown_level_defaults_to_info(restore_root_logger):
    setup_logging("LOUD", "json")
    assert restore_root_logger.level == logging.INFO
