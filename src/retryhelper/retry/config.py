r"""Configuration dataclasses for retry behavior.

This module provides the immutable configuration objects for the retry
loop and its callback chains.
"""

from __future__ import annotations

__all__ = ["CallbackConfig", "Event", "RetryConfig"]

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from retryhelper.core.config import (
    DEFAULT_MAX_TRY_COUNT,
    DEFAULT_MAX_TRY_TIME,
    DEFAULT_TRY_INTERVAL,
)
from retryhelper.core.validation import to_seconds, validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable


class Event(Enum):
    """Retry lifecycle events that callbacks can observe."""

    SUCCESS = "on_success"
    FAILURE = "on_failure"
    TIMEOUT = "on_timeout"


@dataclass(frozen=True)
class CallbackConfig:
    """Callback chains for the retry lifecycle events.

    Each chain is a tuple of callbacks taking ``(result, count)``, kept in
    registration order.

    Attributes:
        on_success: Invoked once when the end condition is satisfied.
        on_failure: Invoked after each unsuccessful attempt that is
            followed by another attempt.
        on_timeout: Invoked once when a stopping rule ends the loop.
    """

    on_success: tuple[Callable[[Any, int], Any], ...] = ()
    on_failure: tuple[Callable[[Any, int], Any], ...] = ()
    on_timeout: tuple[Callable[[Any, int], Any], ...] = ()

    def get(self, event: Event) -> tuple[Callable[[Any, int], Any], ...]:
        """Return the callback chain registered for ``event``."""
        return getattr(self, event.value)

    def append(self, event: Event, callback: Callable[[Any, int], Any]) -> CallbackConfig:
        """Return a new configuration with ``callback`` appended to a chain.

        Args:
            event: The event whose chain receives the callback.
            callback: A callback taking ``(result, count)``.

        Returns:
            A new ``CallbackConfig``; the receiver is unchanged.

        Example:
            ```pycon
            >>> from retryhelper.retry.config import CallbackConfig, Event
            >>> config = CallbackConfig()
            >>> updated = config.append(Event.SUCCESS, print)
            >>> len(updated.on_success), len(config.on_success)
            (1, 0)

            ```
        """
        return replace(self, **{event.value: (*self.get(event), callback)})


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    Attributes:
        operation: Zero-argument callable performing one attempt.
        max_try_count: Maximum number of attempts, or ``None`` for no limit.
        max_try_time: Maximum elapsed time in seconds, or ``None`` for no limit.
        try_interval: Delay in seconds between two attempts.
        callbacks: The callback chains.
        logger: Logger receiving the trace of each invocation.
    """

    operation: Callable[[], Any]
    max_try_count: int | None = DEFAULT_MAX_TRY_COUNT
    max_try_time: float | None = DEFAULT_MAX_TRY_TIME
    try_interval: float = DEFAULT_TRY_INTERVAL
    callbacks: CallbackConfig = field(default_factory=CallbackConfig)
    logger: logging.Logger = field(default=logging.getLogger("retryhelper"))

    def __post_init__(self) -> None:
        if not callable(self.operation):
            msg = f"operation must be callable, got {type(self.operation).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "try_interval", to_seconds(self.try_interval, "try_interval"))
        object.__setattr__(self, "max_try_time", to_seconds(self.max_try_time, "max_try_time"))
        validate_retry_params(
            try_interval=self.try_interval,
            max_try_count=self.max_try_count,
            max_try_time=self.max_try_time,
        )
