r"""Configuration dataclass and defaults for RetryHelper.

This module provides the process-wide default constants and a
dataclass-based configuration object holding the defaults a
``RetryHelper`` applies to every task it creates.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_TRY_COUNT",
    "DEFAULT_MAX_TRY_TIME",
    "DEFAULT_TRY_INTERVAL",
    "RetryDefaults",
]

from dataclasses import dataclass, replace
from typing import Any

from retryhelper.core.validation import to_seconds, validate_retry_params

# Default delay in seconds between two attempts
DEFAULT_TRY_INTERVAL = 0.5

# No limit on the number of attempts by default
DEFAULT_MAX_TRY_COUNT: int | None = None

# No limit on the total elapsed time by default
DEFAULT_MAX_TRY_TIME: float | None = None


@dataclass(frozen=True)
class RetryDefaults:
    """Default stopping rules and interval for new retry tasks.

    ``max_try_count`` and ``max_try_time`` accept ``None`` for "unbounded".
    ``max_try_time`` and ``try_interval`` may be given as a
    ``datetime.timedelta``; they are stored in seconds.

    Args:
        try_interval: Delay in seconds between two attempts. Must be >= 0.
        max_try_count: Maximum number of attempts. Must be >= 0 if provided.
        max_try_time: Maximum elapsed time in seconds. Must be >= 0 if provided.

    Example:
        ```pycon
        >>> from retryhelper.core.config import RetryDefaults
        >>> defaults = RetryDefaults()
        >>> defaults.try_interval
        0.5
        >>> defaults = RetryDefaults(max_try_count=5)
        >>> merged = defaults.merge(max_try_count=10)
        >>> merged.max_try_count
        10
        >>> defaults.max_try_count  # Original unchanged
        5

        ```
    """

    try_interval: float = DEFAULT_TRY_INTERVAL
    max_try_count: int | None = DEFAULT_MAX_TRY_COUNT
    max_try_time: float | None = DEFAULT_MAX_TRY_TIME

    def __post_init__(self) -> None:
        # frozen dataclass: normalize durations through object.__setattr__
        object.__setattr__(self, "try_interval", to_seconds(self.try_interval, "try_interval"))
        object.__setattr__(self, "max_try_time", to_seconds(self.max_try_time, "max_try_time"))
        validate_retry_params(
            try_interval=self.try_interval,
            max_try_count=self.max_try_count,
            max_try_time=self.max_try_time,
        )

    def merge(self, **overrides: Any) -> RetryDefaults:
        """Create new defaults with the given parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ``RetryDefaults`` instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the defaults to a dictionary.

        Returns:
            Dictionary with the default parameters.

        Example:
            ```pycon
            >>> from retryhelper.core.config import RetryDefaults
            >>> RetryDefaults(max_try_count=3).to_dict()
            {'try_interval': 0.5, 'max_try_count': 3, 'max_try_time': None}

            ```
        """
        return {
            "try_interval": self.try_interval,
            "max_try_count": self.max_try_count,
            "max_try_time": self.max_try_time,
        }
