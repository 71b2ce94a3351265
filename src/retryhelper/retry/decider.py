r"""Retry decision logic for the retry loop.

This module provides the RetryDecider class that encapsulates the two
decisions the loop delegates: whether an error raised by the operation
aborts the invocation, and whether a stopping rule forbids another attempt.
"""

from __future__ import annotations

__all__ = ["NON_RECOVERABLE_ERRORS", "RetryDecider", "StopReason"]

import logging
from enum import Enum
from typing import TYPE_CHECKING

from retryhelper.exceptions import RetryTimeoutError
from retryhelper.utils.structured_logging import log_event

if TYPE_CHECKING:
    from retryhelper.retry.config import RetryConfig
    from retryhelper.retry.state import ExecutionState

# Errors that are never retried, whatever the configured policy
NON_RECOVERABLE_ERRORS: tuple[type[Exception], ...] = (MemoryError, RecursionError, SystemError)


class StopReason(Enum):
    """Stopping rule that ended a retry invocation."""

    TIME_LIMIT = "time limit exceeded"
    COUNT_LIMIT = "attempt limit exceeded"


class RetryDecider:
    """Decides whether an error is fatal and whether to try again.

    Args:
        config: The retry configuration holding the stopping rules.
        retry_on_exception: Whether errors raised by the operation may be
            tolerated at all.
        expected_exception: Exception class, or tuple of classes, that is
            tolerated when ``retry_on_exception`` is set.
    """

    def __init__(
        self,
        config: RetryConfig,
        retry_on_exception: bool = False,
        expected_exception: type[Exception] | tuple[type[Exception], ...] = Exception,
    ) -> None:
        self.config = config
        self.retry_on_exception = retry_on_exception
        self.expected_exception = expected_exception

    def should_raise(self, exc: Exception, state: ExecutionState) -> bool:
        """Determine if an error raised by the operation is fatal.

        Args:
            exc: The error raised by the operation.
            state: The state of the running invocation.

        Returns:
            ``True`` if the error must propagate, ``False`` if it is
            tolerated and the loop may continue.
        """
        logger = self.config.logger
        name = type(exc).__name__
        if (
            isinstance(exc, NON_RECOVERABLE_ERRORS)
            or not self.retry_on_exception
            or not isinstance(exc, self.expected_exception)
        ):
            log_event(
                logger,
                logging.ERROR,
                f"{name} detected when trying; raising...",
                invocation_id=state.invocation_id,
                attempt=state.attempts_made + 1,
            )
            return True
        log_event(
            logger,
            logging.DEBUG,
            f"{name} detected when trying; continue trying...; details: {exc!r}",
            invocation_id=state.invocation_id,
            attempt=state.attempts_made + 1,
        )
        return False

    def stop_reason(self, state: ExecutionState) -> StopReason | None:
        """Check the stopping rules after an unsuccessful attempt.

        The time limit is checked before the attempt limit.

        Args:
            state: The state of the running invocation.

        Returns:
            The rule that forbids another attempt, or ``None`` if the loop
            may continue.
        """
        max_try_time = self.config.max_try_time
        if max_try_time is not None and state.elapsed >= max_try_time:
            return StopReason.TIME_LIMIT
        max_try_count = self.config.max_try_count
        if max_try_count is not None and state.attempts_made >= max_try_count:
            return StopReason.COUNT_LIMIT
        return None

    def timeout_error(self, reason: StopReason, state: ExecutionState) -> RetryTimeoutError:
        """Create the error raised when a stopping rule fires.

        Args:
            reason: The rule that fired.
            state: The state of the running invocation.

        Returns:
            The timeout error, chained to the last tolerated error if any.
        """
        if reason is StopReason.TIME_LIMIT:
            limit = self.config.max_try_time
            message = f"The maximum try time {limit}s for the operation has been exceeded."
        else:
            limit = self.config.max_try_count
            message = f"The maximum try count {limit} for the operation has been exceeded."
        return RetryTimeoutError(
            message,
            reason=reason,
            attempts=state.attempts_made,
            elapsed=state.elapsed,
            limit=limit,
            last_error=state.last_error,
        )
