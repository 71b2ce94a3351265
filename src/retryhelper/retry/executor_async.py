r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs the retry
loop cooperatively on an asyncio event loop.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import inspect
from typing import TYPE_CHECKING, Any

from retryhelper.retry.executor_core import resume_steps, retry_steps
from retryhelper.retry.steps import Sleep

if TYPE_CHECKING:
    from collections.abc import Callable

    from retryhelper.retry.config import RetryConfig
    from retryhelper.retry.decider import RetryDecider


class AsyncRetryExecutor:
    """Executes a retry invocation on an asyncio event loop.

    The operation, the end condition and every callback may be plain
    functions or coroutine functions; awaitable results are awaited before
    the loop resumes. The interval between attempts is waited with
    ``asyncio.sleep``, so other tasks run while the loop waits.

    Cancelling the task running ``execute`` raises
    ``asyncio.CancelledError`` at the current suspension point. It is
    never tolerated by the loop and propagates to the caller.

    Attributes:
        config: The retry configuration.
        decider: Decides which errors are fatal and when to stop.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retryhelper.retry import AsyncRetryExecutor, RetryConfig, RetryDecider
        >>> values = iter([0, 1, 2, 3])
        >>> async def read():
        ...     return next(values)
        ...
        >>> config = RetryConfig(operation=read, try_interval=0.0)
        >>> executor = AsyncRetryExecutor(config, RetryDecider(config))
        >>> asyncio.run(executor.execute(lambda value: value >= 2))
        2

        ```
    """

    def __init__(self, config: RetryConfig, decider: RetryDecider) -> None:
        self.config = config
        self.decider = decider

    async def execute(self, end_condition: Callable[[Any], Any]) -> Any:
        """Run the retry loop until success or a terminal error.

        Args:
            end_condition: Predicate over the attempt's result.

        Returns:
            The result of the successful attempt.

        Raises:
            RetryTimeoutError: If a stopping rule ends the loop.
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
                    await asyncio.sleep(step.seconds)
                    continue

                try:
                    outcome = step.func(*step.args)
                    if inspect.isawaitable(outcome):
                        outcome = await outcome
                except Exception as exc:  # noqa: BLE001
                    error = exc
        finally:
            steps.close()
