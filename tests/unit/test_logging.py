from __future__ import annotations

import json
import logging
import sys

from student_manager.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_STUDENT_ID = 10
EXPECTED_ROWS = 3


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.student_id = EXPECTED_STUDENT_ID
    record.operation = "create student"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["student_id"] == EXPECTED_STUDENT_ID
    assert payload["operation"] == "create student"


def test_json_formatter_omits_builtin_record_attributes() -> None:
    payload = json.loads(_json_formatter(_record()))

    assert "lineno" not in payload
    assert "pathname" not in payload
    assert "msg" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"rows": EXPECTED_ROWS}

    payload = json.loads(_json_formatter(record))

    assert payload["rows"] == EXPECTED_ROWS
    assert "extra" not in payload


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise ValueError("bad input")
    except ValueError:
        record = logging.LogRecord("test.logger", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "ERROR"
    assert "ValueError: bad input" in payload["exc_info"]


def test_configure_logging_installs_requested_formatter() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(level="debug", json_logs=True)
        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

        configure_logging(level="WARNING", json_logs=False)
        assert root.level == logging.WARNING
        assert not any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_repository_log_fields_reach_json_output(repository, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="student_manager.infrastructure.student_repository")

    repository.delete(EXPECTED_STUDENT_ID)

    (record,) = [r for r in caplog.records if r.getMessage() == "Delete student"]
    payload = json.loads(_json_formatter(record))

    assert payload["logger"] == "student_manager.infrastructure.student_repository"
    assert payload["student_id"] == EXPECTED_STUDENT_ID
    assert payload["deleted"] is False
