"""
Logging configuration for the Product API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Every handler masks bearer tokens, so an
``Authorization`` value that ends up in a log line (for example through
a debug dump of request headers) never reaches the log sink.
"""

import logging
import re
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_BEARER_RE = re.compile(r"(Bearer\s+)[A-Za-z0-9\-_=]+(\.[A-Za-z0-9\-_=]+)*")
REDACTED = "<redacted>"


class TokenRedactingFilter(logging.Filter):
    """Replace ``Bearer <token>`` occurrences in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _BEARER_RE.sub(lambda m: m.group(1) + REDACTED, message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def _make_handler(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    handler.addFilter(TokenRedactingFilter())
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to (``LOG_FILE``).  If omitted,
        only the console handler is attached.
    """
    root = logging.getLogger()
    if root.handlers:
        # create_app may run several times, e.g. once per test client
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root.addHandler(_make_handler(logging.StreamHandler(), formatter))
    if logfile:
        log_path = Path(logfile).resolve()
        root.addHandler(_make_handler(logging.FileHandler(log_path, encoding="utf-8"), formatter))
