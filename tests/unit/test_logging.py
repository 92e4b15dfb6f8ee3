from __future__ import annotations

import json
import logging

from user_pipeline.utils.logging import JsonFormatter, _json_formatter

EXPECTED_USERS = 10
EXPECTED_MATCHED = 3


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
    record.users = EXPECTED_USERS
    record.strategy = "channel"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["users"] == EXPECTED_USERS
    assert payload["strategy"] == "channel"
    assert "pathname" not in payload
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"matched": EXPECTED_MATCHED}

    payload = json.loads(_json_formatter(record))

    assert payload["matched"] == EXPECTED_MATCHED


def test_json_formatter_serializes_non_json_values() -> None:
    record = _record()
    record.path = object()

    payload = json.loads(JsonFormatter().format(record))

    assert payload["path"].startswith("<object object")


def test_logger_extra_fields_reach_json_output(capsys) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger = logging.getLogger("test.extra")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    try:
        logger.info("[DISPATCH] done", extra={"matched": EXPECTED_MATCHED})
    finally:
        logger.removeHandler(handler)

    line = capsys.readouterr().err.strip()
    payload = json.loads(line)
    assert payload["message"] == "[DISPATCH] done"
    assert payload["matched"] == EXPECTED_MATCHED
