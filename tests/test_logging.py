import logging

from chatserver.config.logging_config import (
    RequestContextFilter,
    SafeFormatter,
    request_id_var,
    user_id_var,
)


def _record():
    return logging.LogRecord("chatserver.test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_adds_request_context():
    request_token = request_id_var.set("req-1")
    user_token = user_id_var.set("42")
    try:
        record = _record()
        assert RequestContextFilter().filter(record)
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)

    assert (record.request_id, record.user_id) == ("req-1", "42")


def test_formatter_fills_missing_context():
    formatter = SafeFormatter("[%(request_id)s] [user=%(user_id)s] %(message)s")
    assert formatter.format(_record()) == "[-] [user=-] hello"
