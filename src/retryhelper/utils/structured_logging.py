r"""Structured logging utilities for retry events.

The retry loop attaches structured fields (``invocation_id``, ``attempt``,
``elapsed``) to the records it emits. They are ignored by ordinary
formatters and rendered as JSON by ``RetryLogFormatter``.

Example:
    Enable structured logging for retryhelper:

    ```python
    import logging
    from retryhelper.utils.structured_logging import RetryLogFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(RetryLogFormatter())

    logger = logging.getLogger("retryhelper")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```
"""

from __future__ import annotations

__all__ = ["RETRY_LOG_FIELDS", "RetryLogFormatter", "log_event"]

import json
import logging
import time
from typing import Any

# Fields the retry loop attaches to its log records
RETRY_LOG_FIELDS = ("invocation_id", "attempt", "elapsed")


class RetryLogFormatter(logging.Formatter):
    """JSON formatter for retry log records.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - invocation_id, attempt, elapsed: present when the record was
          emitted by the retry loop

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from retryhelper.utils.structured_logging import RetryLogFormatter, log_event
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(RetryLogFormatter())
        >>> logger = logging.getLogger("doctest_retry_formatter")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.DEBUG)
        >>> log_event(logger, logging.DEBUG, "Trying", attempt=1)
        >>> json.loads(stream.getvalue())["attempt"]
        1

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in RETRY_LOG_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format timestamp as ISO 8601 with millisecond precision."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_event(logger: logging.Logger, level: int, message: str, **fields: Any) -> None:
    """Log a message with structured retry fields.

    Args:
        logger: Logger to use.
        level: Log level (e.g., ``logging.DEBUG``).
        message: Log message.
        **fields: Structured fields attached to the record as ``extra``.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=fields)
