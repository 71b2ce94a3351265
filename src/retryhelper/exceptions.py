r"""Exceptions raised by the retry loop."""

from __future__ import annotations

__all__ = ["RetryTimeoutError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from retryhelper.retry.decider import StopReason


class RetryTimeoutError(TimeoutError):
    """Raised when a stopping rule ends the retry loop before success.

    The tolerated error raised by the last attempt, if any, is available as
    ``last_error`` and is also chained as ``__cause__``. When the last
    attempt returned a value that did not satisfy the end condition, both
    are ``None``.

    Args:
        message: The error message.
        reason: The stopping rule that fired.
        attempts: Number of attempts made before stopping.
        elapsed: Seconds elapsed since the invocation began.
        limit: The configured limit that was reached.
        last_error: Tolerated error raised by the last attempt, if any.

    Example:
        ```pycon
        >>> from retryhelper.exceptions import RetryTimeoutError
        >>> from retryhelper.retry.decider import StopReason
        >>> error = RetryTimeoutError(
        ...     "The maximum try count 3 for the operation has been exceeded.",
        ...     reason=StopReason.COUNT_LIMIT,
        ...     attempts=3,
        ...     elapsed=1.0,
        ...     limit=3,
        ... )
        >>> error.attempts
        3
        >>> isinstance(error, TimeoutError)
        True

        ```
    """

    def __init__(
        self,
        message: str,
        reason: StopReason,
        attempts: int,
        elapsed: float,
        limit: float,
        last_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.attempts = attempts
        self.elapsed = elapsed
        self.limit = limit
        self.last_error = last_error
        if last_error is not None:
            self.__cause__ = last_error

    def __str__(self) -> str:
        return self.message
