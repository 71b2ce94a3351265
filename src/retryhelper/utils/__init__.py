r"""Utility functions for callback normalization and structured logging."""

from __future__ import annotations

__all__ = [
    "RetryLogFormatter",
    "count_positional_args",
    "log_event",
    "normalize_callback",
    "normalize_predicate",
]

from retryhelper.utils.callbacks import (
    count_positional_args,
    normalize_callback,
    normalize_predicate,
)
from retryhelper.utils.structured_logging import RetryLogFormatter, log_event
