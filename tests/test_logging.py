import json
import logging

from ripe_quote.core.logging import JsonFormatter, RequestIdFilter, request_id_ctx


def _record(msg="quote rejected", level=logging.WARNING):
    return logging.LogRecord("ripe_quote.errors", level, __file__, 1, msg, None, None)


def test_json_formatter_includes_request_id():
    record = _record()
    token = request_id_ctx.set("abc-123")
    try:
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx.reset(token)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["message"] == "quote rejected"
    assert payload["logger"] == "ripe_quote.errors"
    assert payload["request_id"] == "abc-123"


def test_request_id_defaults_to_dash():
    record = _record()
    RequestIdFilter().filter(record)
    assert json.loads(JsonFormatter().format(record))["request_id"] == "-"


def test_structured_quote_context():
    record = _record("quote computed", logging.DEBUG)
    record.quote = {"currency": "PHP", "amount": 1000.0}
    payload = json.loads(JsonFormatter().format(record))
    assert payload["quote"] == {"currency": "PHP", "amount": 1000.0}
