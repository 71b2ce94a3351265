r"""Immutable retry task builders.

A task wraps an operation together with its retry configuration. Every
``with_*`` and ``on_*`` method returns a new task and leaves the receiver
unchanged, so a task can be shared as a template across threads and
invocations. ``until`` and ``until_no_exception`` start an invocation.
"""

from __future__ import annotations

__all__ = ["AsyncRetryTask", "BaseRetryTask", "RetryTask"]

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from retryhelper.core.validation import to_seconds, validate_exception_kind
from retryhelper.retry.config import Event, RetryConfig
from retryhelper.retry.decider import RetryDecider
from retryhelper.retry.executor import RetryExecutor
from retryhelper.retry.executor_async import AsyncRetryExecutor
from retryhelper.utils.callbacks import normalize_callback, normalize_predicate

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta

T = TypeVar("T")
TaskT = TypeVar("TaskT", bound="BaseRetryTask")


def _always(result: Any) -> bool:  # noqa: ARG001
    return True


class BaseRetryTask(Generic[T]):
    """Base class implementing the configuration methods of a task.

    Args:
        config: The retry configuration of the task.
    """

    def __init__(self, config: RetryConfig) -> None:
        self._config = config

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(max_try_count={self._config.max_try_count}, "
            f"max_try_time={self._config.max_try_time}, "
            f"try_interval={self._config.try_interval})"
        )

    @property
    def config(self) -> RetryConfig:
        """The immutable retry configuration of the task."""
        return self._config

    def _derive(self: TaskT, **changes: Any) -> TaskT:
        return self.__class__(replace(self._config, **changes))

    def with_max_try_count(self: TaskT, max_try_count: int | None) -> TaskT:
        """Configure the maximum number of attempts.

        Args:
            max_try_count: The maximum number of attempts, or ``None`` for
                no limit. The first attempt is always made, even with 0.

        Returns:
            A new task with the limit changed.
        """
        return self._derive(max_try_count=max_try_count)

    def with_time_limit(self: TaskT, max_try_time: float | timedelta | None) -> TaskT:
        """Configure the maximum elapsed time.

        Args:
            max_try_time: The time limit in seconds or as a ``timedelta``,
                or ``None`` for no limit.

        Returns:
            A new task with the limit changed.
        """
        return self._derive(max_try_time=to_seconds(max_try_time, "max_try_time"))

    def with_try_interval(self: TaskT, try_interval: float | timedelta) -> TaskT:
        """Configure the delay between two attempts.

        Args:
            try_interval: The delay in seconds or as a ``timedelta``.

        Returns:
            A new task with the interval changed.
        """
        return self._derive(try_interval=to_seconds(try_interval, "try_interval"))

    def on_success(self: TaskT, callback: Callable[..., Any]) -> TaskT:
        """Add a callback invoked when the end condition is satisfied.

        The callback may take no argument, the result, or the result and
        the number of attempts including the successful one.

        Args:
            callback: The callback to append to the success chain.

        Returns:
            A new task with the callback registered.
        """
        return self._on(Event.SUCCESS, callback)

    def on_failure(self: TaskT, callback: Callable[..., Any]) -> TaskT:
        """Add a callback invoked after each failed attempt that is
        followed by another attempt.

        The callback may take no argument, the result of the failed
        attempt (``None`` if it raised), or the result and the number of
        attempts made so far.

        Args:
            callback: The callback to append to the failure chain.

        Returns:
            A new task with the callback registered.
        """
        return self._on(Event.FAILURE, callback)

    def on_timeout(self: TaskT, callback: Callable[..., Any]) -> TaskT:
        """Add a callback invoked when a stopping rule ends the loop.

        The callback may take no argument, the result of the last attempt
        (``None`` if it raised), or the result and the total number of
        attempts made.

        Args:
            callback: The callback to append to the timeout chain.

        Returns:
            A new task with the callback registered.
        """
        return self._on(Event.TIMEOUT, callback)

    def _on(self: TaskT, event: Event, callback: Callable[..., Any]) -> TaskT:
        callbacks = self._config.callbacks.append(event, normalize_callback(callback))
        return self._derive(callbacks=callbacks)


class RetryTask(BaseRetryTask[T]):
    r"""Retry task running the operation in the calling thread.

    Example:
        ```pycon
        >>> from retryhelper.retry import RetryConfig, RetryTask
        >>> values = iter(range(10))
        >>> task = RetryTask(RetryConfig(operation=lambda: next(values)))
        >>> task.with_try_interval(0).until(lambda value: value == 3)
        3

        ```
    """

    def until(self, end_condition: Callable[..., Any]) -> T:
        """Retry the operation until ``end_condition`` is satisfied.

        Any error raised by the operation propagates immediately.

        Args:
            end_condition: A predicate taking the result, or no argument.

        Returns:
            The result of the successful attempt.

        Raises:
            RetryTimeoutError: If a stopping rule ends the loop first.
        """
        return RetryExecutor(self._config, RetryDecider(self._config)).execute(
            normalize_predicate(end_condition)
        )

    def until_no_exception(
        self, kind: type[Exception] | tuple[type[Exception], ...] = Exception
    ) -> T:
        """Retry the operation until it returns without raising ``kind``.

        Errors of another kind propagate immediately.

        Args:
            kind: The exception class, or tuple of classes, to tolerate.
                Subclasses are tolerated too.

        Returns:
            The result of the first attempt that did not raise.

        Raises:
            RetryTimeoutError: If a stopping rule ends the loop first; the
                last tolerated error is its ``__cause__``.
            TypeError: If ``kind`` is not an exception class.
        """
        validate_exception_kind(kind)
        decider = RetryDecider(self._config, retry_on_exception=True, expected_exception=kind)
        return RetryExecutor(self._config, decider).execute(_always)


class AsyncRetryTask(BaseRetryTask[T]):
    r"""Retry task running on an asyncio event loop.

    The operation, the end condition and the callbacks may be plain
    functions or coroutine functions.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retryhelper.retry import AsyncRetryTask, RetryConfig
        >>> values = iter(range(10))
        >>> async def read():
        ...     return next(values)
        ...
        >>> task = AsyncRetryTask(RetryConfig(operation=read, try_interval=0))
        >>> asyncio.run(task.until(lambda value: value == 3))
        3

        ```
    """

    async def until(self, end_condition: Callable[..., Any]) -> T:
        """Retry the operation until ``end_condition`` is satisfied.

        Any error raised by the operation propagates immediately.

        Args:
            end_condition: A predicate taking the result, or no argument.
                It may be a coroutine function.

        Returns:
            The result of the successful attempt.

        Raises:
            RetryTimeoutError: If a stopping rule ends the loop first.
        """
        return await AsyncRetryExecutor(self._config, RetryDecider(self._config)).execute(
            normalize_predicate(end_condition)
        )

    async def until_no_exception(
        self, kind: type[Exception] | tuple[type[Exception], ...] = Exception
    ) -> T:
        """Retry the operation until it returns without raising ``kind``.

        Errors of another kind propagate immediately.

        Args:
            kind: The exception class, or tuple of classes, to tolerate.
                Subclasses are tolerated too.

        Returns:
            The result of the first attempt that did not raise.

        Raises:
            RetryTimeoutError: If a stopping rule ends the loop first; the
                last tolerated error is its ``__cause__``.
            TypeError: If ``kind`` is not an exception class.
        """
        validate_exception_kind(kind)
        decider = RetryDecider(self._config, retry_on_exception=True, expected_exception=kind)
        return await AsyncRetryExecutor(self._config, decider).execute(_always)
