"""Terminal logging with structured ``extra`` fields."""
import json
import logging
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord carries, plus the ones Formatter.format adds.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """
    Appends fields passed via ``extra=`` to the formatted line as JSON.

    ``logger.warning("Fetch failed", extra={"url": url})`` renders as
    ``... | Fetch failed | {"url": "..."}``.
    """

    def extra_fields(self, record: logging.LogRecord) -> dict:
        return {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        }

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = self.extra_fields(record)
        if not fields:
            return line
        return f"{line} | {json.dumps(fields, default=str, ensure_ascii=False)}"


class _CaseworkerHandler(logging.StreamHandler):
    """Marker class so repeated configuration finds the handler it installed."""


def configure_logging(
    level: str = "INFO",
    log_format: str = LOG_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Install the service's root handler, or update it if already installed.

    Handlers added by other code (pytest's capture, uvicorn) are left alone.

    Args:
        level: Root and handler level name, e.g. ``"DEBUG"``
        log_format: ``%``-style format for the line before the extra fields
        stream: Stream to write to, defaults to stderr

    Returns:
        The handler writing the service's log lines
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = next((h for h in root.handlers if isinstance(h, _CaseworkerHandler)), None)
    if handler is None:
        handler = _CaseworkerHandler(stream)
        root.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)
    handler.setLevel(level.upper())
    handler.setFormatter(ExtraFormatter(log_format))
    return handler
