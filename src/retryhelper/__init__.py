r"""retryhelper - Retry an operation until a condition holds.

This package re-executes an operation that may fail or return an
unsatisfactory result, until a caller-supplied condition holds or a
stopping rule (maximum attempts, maximum elapsed time) is reached, waiting
a fixed interval between attempts and notifying callbacks on success,
failure and timeout.

Key Features:
    - Immutable, chainable task configuration safe to share across threads
    - Stopping rules on attempt count and elapsed time
    - Retry on any exception or only on selected exception types
    - Ordered on_success / on_failure / on_timeout callback chains
    - Identical semantics for blocking and asyncio execution

Example:
    ```pycon
    >>> import retryhelper
    >>> values = iter([False, False, True])
    >>> retryhelper.try_(lambda: next(values)).with_try_interval(0).until(lambda ok: ok)
    True
    >>> attempts = iter([ValueError("busy"), ValueError("busy"), "done"])
    >>> def operation():
    ...     value = next(attempts)
    ...     if isinstance(value, Exception):
    ...         raise value
    ...     return value
    ...
    >>> (
    ...     retryhelper.try_(operation)
    ...     .with_try_interval(0)
    ...     .with_max_try_count(5)
    ...     .until_no_exception(ValueError)
    ... )
    'done'

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryTask",
    "RetryHelper",
    "RetryTask",
    "RetryTimeoutError",
    "StopReason",
    "__version__",
    "try_",
    "try_async",
]

from importlib.metadata import PackageNotFoundError, version

from retryhelper.exceptions import RetryTimeoutError
from retryhelper.helper import RetryHelper, try_, try_async
from retryhelper.retry import AsyncRetryTask, RetryTask, StopReason

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
