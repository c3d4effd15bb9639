"""
Unit tests for the logging setup and bearer token redaction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from product_api.app.core.logging_config import REDACTED, TokenRedactingFilter, setup_logging


def _record(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord("product_api.test", logging.INFO, __file__, 1, msg, args, None)


def test_filter_masks_bearer_token_in_arguments() -> None:
    record = _record("headers: %s", {"authorization": "Bearer aaa.bbb.ccc"})

    assert TokenRedactingFilter().filter(record) is True
    assert record.getMessage() == f"headers: {{'authorization': 'Bearer {REDACTED}'}}"
    assert "aaa.bbb.ccc" not in record.getMessage()


def test_filter_leaves_other_messages_untouched() -> None:
    record = _record("Updated product %s", 1)

    TokenRedactingFilter().filter(record)

    assert record.msg == "Updated product %s"
    assert record.args == (1,)


@contextmanager
def bare_root_logger() -> Iterator[logging.Logger]:
    """Temporarily detach every root handler, including pytest's capture handlers."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_writes_redacted_lines_to_file(tmp_path) -> None:
    logfile = tmp_path / "api.log"

    with bare_root_logger() as root:
        setup_logging("debug", str(logfile))
        logging.getLogger("product_api.test").info("got %s", "Bearer secret.token.value")
        for handler in root.handlers:
            handler.flush()
        level = root.level

    assert level == logging.DEBUG
    content = logfile.read_text(encoding="utf-8")
    assert f"got Bearer {REDACTED}" in content
    assert "secret.token.value" not in content


def test_setup_logging_runs_once() -> None:
    with bare_root_logger() as root:
        setup_logging("INFO")
        setup_logging("INFO")
        handler_count = len(root.handlers)

    assert handler_count == 1
