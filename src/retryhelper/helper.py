r"""Entry points creating retry tasks from process-wide defaults.

This module provides the ``RetryHelper`` class, which applies a set of
default stopping rules and a logger to the tasks it creates, and the
``try_``/``try_async`` shortcuts bound to the shared default helper.
"""

from __future__ import annotations

__all__ = ["RetryHelper", "try_", "try_async"]

import logging
import threading
from typing import TYPE_CHECKING, Any, ClassVar

from retryhelper.core.config import RetryDefaults
from retryhelper.retry.config import RetryConfig
from retryhelper.retry.task import AsyncRetryTask, RetryTask

if TYPE_CHECKING:
    from collections.abc import Callable


class RetryHelper:
    """Creates retry tasks configured from a set of defaults.

    A helper holds no per-invocation state, so one instance can serve any
    number of threads and event loops.

    Args:
        defaults: Defaults applied to new tasks. Defaults to
            ``RetryDefaults()``.
        logger: Logger receiving the trace of each invocation. Defaults to
            the ``retryhelper`` logger.

    Example:
        ```pycon
        >>> from retryhelper import RetryHelper
        >>> from retryhelper.core import RetryDefaults
        >>> helper = RetryHelper(RetryDefaults(try_interval=0.0, max_try_count=5))
        >>> values = iter(range(10))
        >>> helper.try_(lambda: next(values)).until(lambda value: value == 2)
        2

        ```
    """

    _instance: ClassVar[RetryHelper | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        defaults: RetryDefaults | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.defaults = defaults if defaults is not None else RetryDefaults()
        self.logger = logger if logger is not None else logging.getLogger("retryhelper")

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(defaults={self.defaults}, logger={self.logger.name!r})"

    @classmethod
    def instance(cls) -> RetryHelper:
        """Return the shared helper, creating it on first use.

        Returns:
            The process-wide default ``RetryHelper``.
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def with_defaults(self, **overrides: Any) -> RetryHelper:
        """Return a new helper with some defaults overridden.

        Args:
            **overrides: ``try_interval``, ``max_try_count`` or
                ``max_try_time``. ``None`` values are ignored.

        Returns:
            A new ``RetryHelper`` sharing this helper's logger.
        """
        return self.__class__(self.defaults.merge(**overrides), logger=self.logger)

    def try_(self, operation: Callable[[], Any]) -> RetryTask:
        """Create a synchronous retry task for ``operation``.

        Args:
            operation: Zero-argument function performing one attempt.

        Returns:
            A ``RetryTask`` configured with this helper's defaults.
        """
        return RetryTask(self._make_config(operation))

    def try_async(self, operation: Callable[[], Any]) -> AsyncRetryTask:
        """Create an asynchronous retry task for ``operation``.

        Args:
            operation: Zero-argument function performing one attempt. It
                may be a plain function or a coroutine function.

        Returns:
            An ``AsyncRetryTask`` configured with this helper's defaults.
        """
        return AsyncRetryTask(self._make_config(operation))

    def _make_config(self, operation: Callable[[], Any]) -> RetryConfig:
        return RetryConfig(
            operation=operation,
            max_try_count=self.defaults.max_try_count,
            max_try_time=self.defaults.max_try_time,
            try_interval=self.defaults.try_interval,
            logger=self.logger,
        )


def try_(operation: Callable[[], Any]) -> RetryTask:
    """Create a synchronous retry task from the shared default helper.

    Args:
        operation: Zero-argument function performing one attempt.

    Returns:
        A ``RetryTask``.

    Example:
        ```pycon
        >>> import retryhelper
        >>> values = iter(range(10))
        >>> task = retryhelper.try_(lambda: next(values)).with_try_interval(0)
        >>> task.until(lambda value: value > 1)
        2

        ```
    """
    return RetryHelper.instance().try_(operation)


def try_async(operation: Callable[[], Any]) -> AsyncRetryTask:
    """Create an asynchronous retry task from the shared default helper.

    Args:
        operation: Zero-argument function performing one attempt. It may
            be a plain function or a coroutine function.

    Returns:
        An ``AsyncRetryTask``.
    """
    return RetryHelper.instance().try_async(operation)
