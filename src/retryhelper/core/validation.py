r"""Parameter validation utilities for retry configuration.

This module provides validation functions for the stopping rules and the
try interval, and a helper to normalize durations to seconds.
"""

from __future__ import annotations

__all__ = ["to_seconds", "validate_exception_kind", "validate_retry_params"]

from datetime import timedelta
from typing import Any


def to_seconds(value: float | timedelta | None, name: str) -> float | None:
    """Convert a duration to seconds.

    Args:
        value: The duration in seconds, as a ``timedelta``, or ``None``.
        name: The parameter name, used in error messages.

    Returns:
        The duration in seconds, or ``None`` if ``value`` is ``None``.

    Raises:
        TypeError: If ``value`` is not a number, a ``timedelta`` or ``None``.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from retryhelper.core.validation import to_seconds
        >>> to_seconds(timedelta(milliseconds=250), "interval")
        0.25
        >>> to_seconds(2, "interval")
        2.0
        >>> to_seconds(None, "interval") is None
        True

        ```
    """
    if value is None:
        return None
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{name} must be a number of seconds or a timedelta, got {type(value).__name__}"
        raise TypeError(msg)
    return float(value)


def validate_retry_params(
    try_interval: float,
    max_try_count: int | None = None,
    max_try_time: float | None = None,
) -> None:
    """Validate retry parameters.

    Args:
        try_interval: Delay in seconds between two attempts. Must be >= 0.
        max_try_count: Maximum number of attempts, or ``None`` for no limit.
            Must be >= 0. A value of 0 still allows the first attempt.
        max_try_time: Maximum elapsed time in seconds, or ``None`` for no
            limit. Must be >= 0.

    Raises:
        TypeError: If ``try_interval`` is ``None`` or ``max_try_count`` is
            not an integer.
        ValueError: If any parameter is negative.

    Example:
        ```pycon
        >>> from retryhelper.core.validation import validate_retry_params
        >>> validate_retry_params(try_interval=0.5)
        >>> validate_retry_params(try_interval=0.5, max_try_count=3, max_try_time=10.0)
        >>> validate_retry_params(try_interval=-1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: try_interval must be >= 0, got -1.0

        ```
    """
    if try_interval is None:
        msg = "try_interval must be a number of seconds or a timedelta, got NoneType"
        raise TypeError(msg)
    if try_interval < 0:
        msg = f"try_interval must be >= 0, got {try_interval}"
        raise ValueError(msg)
    if max_try_count is not None:
        if isinstance(max_try_count, bool) or not isinstance(max_try_count, int):
            msg = f"max_try_count must be an int or None, got {type(max_try_count).__name__}"
            raise TypeError(msg)
        if max_try_count < 0:
            msg = f"max_try_count must be >= 0, got {max_try_count}"
            raise ValueError(msg)
    if max_try_time is not None and max_try_time < 0:
        msg = f"max_try_time must be >= 0, got {max_try_time}"
        raise ValueError(msg)


def validate_exception_kind(kind: Any) -> None:
    """Check that ``kind`` is an exception class or a tuple of them.

    Args:
        kind: The value passed as the expected exception kind.

    Raises:
        TypeError: If ``kind`` is not a subclass of ``Exception`` or a
            non-empty tuple of such subclasses.
    """
    kinds = kind if isinstance(kind, tuple) else (kind,)
    if not kinds or not all(isinstance(k, type) and issubclass(k, Exception) for k in kinds):
        msg = f"kind must be an Exception subclass or a tuple of them, got {kind!r}"
        raise TypeError(msg)
