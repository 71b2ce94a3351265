r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs the retry loop
by blocking the calling thread.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import inspect
import time
from typing import TYPE_CHECKING, Any

from retryhelper.retry.executor_core import resume_steps, retry_steps
from retryhelper.retry.steps import Sleep

if TYPE_CHECKING:
    from collections.abc import Callable

    from retryhelper.retry.config import RetryConfig
    from retryhelper.retry.decider import RetryDecider


class RetryExecutor:
    """Executes a retry invocation synchronously.

    The operation, the end condition and every callback are called
    directly, and the interval between attempts is waited with
    ``time.sleep``. They must not return awaitables; use
    ``AsyncRetryExecutor`` for coroutine functions.

    Attributes:
        config: The retry configuration.
        decider: Decides which errors are fatal and when to stop.

    Example:
        ```pycon
        >>> from retryhelper.retry import RetryConfig, RetryDecider, RetryExecutor
        >>> values = iter([0, 1, 2, 3])
        >>> config = RetryConfig(operation=lambda: next(values), try_interval=0.0)
        >>> executor = RetryExecutor(config, RetryDecider(config))
        >>> executor.execute(lambda value: value >= 2)
        2

        ```
    """

    def __init__(self, config: RetryConfig, decider: RetryDecider) -> None:
        self.config = config
        self.decider = decider

    def execute(self, end_condition: Callable[[Any], Any]) -> Any:
        """Run the retry loop until success or a terminal error.

        Args:
            end_condition: Predicate over the attempt's result.

        Returns:
            The result of the successful attempt.

        Raises:
            RetryTimeoutError: If a stopping rule ends the loop.
            TypeError: If a user function returns an awaitable.
        """
        steps = retry_steps(self.config, end_condition, self.decider)
        outcome: Any = None
        error: Exception | None = None
        try:
            while True:
                try:
                    step = resume_steps(steps, outcome, error)
                except StopIteration as exc:
                    if exc is error:
                        raise
                    return exc.value
                outcome, error = None, None

                if isinstance(step, Sleep):
                    time.sleep(step.seconds)
                    continue

                try:
                    outcome = step.func(*step.args)
                except Exception as exc:  # noqa: BLE001
                    error = exc
                    continue
                if inspect.isawaitable(outcome):
                    if inspect.iscoroutine(outcome):
                        outcome.close()
                    msg = (
                        f"{getattr(step.func, '__name__', step.func)!r} returned an awaitable; "
                        "use try_async() for asynchronous operations and callbacks"
                    )
                    raise TypeError(msg)
        finally:
            steps.close()
