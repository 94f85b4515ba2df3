import json
import logging
import sys

from token_uri.logging_conf import JsonFormatter, get_logger, setup_logging


def _record(msg, **extra):
    record = logging.LogRecord("token_uri", logging.INFO, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


def test_json_line_with_extras():
    line = JsonFormatter().format(_record("token_uri.rejected", reason="missing_argument"))
    payload = json.loads(line)
    assert payload["level"] == "INFO"
    assert payload["logger"] == "token_uri"
    assert payload["message"] == "token_uri.rejected"
    assert payload["reason"] == "missing_argument"
    assert "lineno" not in payload
    assert "\n" not in line


def test_dict_message_is_merged():
    payload = json.loads(JsonFormatter().format(_record({"event": "decoded", "text_chars": 7})))
    assert payload["event"] == "decoded"
    assert payload["text_chars"] == 7
    assert "message" not in payload


def test_extras_do_not_override_core_keys():
    payload = json.loads(JsonFormatter().format(_record("hello", level="bogus")))
    assert payload["level"] == "INFO"


def test_exception_info_is_attached():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "token_uri", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )
    payload = json.loads(JsonFormatter().format(record))
    assert "ValueError: boom" in payload["exc_info"]


def test_setup_logging_is_idempotent(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("debug")
    setup_logging("debug")

    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.stream is sys.stderr
    assert root.level == logging.DEBUG


def test_get_logger():
    assert get_logger("token_uri").name == "token_uri"
