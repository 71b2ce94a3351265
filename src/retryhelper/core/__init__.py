r"""Shared defaults and validation for retry configuration."""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_TRY_COUNT",
    "DEFAULT_MAX_TRY_TIME",
    "DEFAULT_TRY_INTERVAL",
    "RetryDefaults",
    "to_seconds",
    "validate_exception_kind",
    "validate_retry_params",
]

from retryhelper.core.config import (
    DEFAULT_MAX_TRY_COUNT,
    DEFAULT_MAX_TRY_TIME,
    DEFAULT_TRY_INTERVAL,
    RetryDefaults,
)
from retryhelper.core.validation import (
    to_seconds,
    validate_exception_kind,
    validate_retry_params,
)
