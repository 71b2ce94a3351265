r"""Retry package implementing the retry loop and its building blocks.

The loop itself is written once in ``executor_core`` as a generator of
steps; the executors drive it either blocking or on an asyncio event loop.

Public API:
    - RetryConfig: Immutable configuration of a retry task
    - CallbackConfig: Immutable callback chains
    - Event: Lifecycle events observed by callbacks
    - RetryDecider: Exception classification and stopping rules
    - StopReason: Stopping rule that ended an invocation
    - CallbackManager: Sequential callback dispatch
    - ExecutionState: Per-invocation state
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
    - RetryTask: Synchronous task builder
    - AsyncRetryTask: Asynchronous task builder
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AsyncRetryTask",
    "BaseRetryTask",
    "CallbackConfig",
    "CallbackManager",
    "Event",
    "ExecutionState",
    "RetryConfig",
    "RetryDecider",
    "RetryExecutor",
    "RetryTask",
    "StopReason",
    "retry_steps",
]

from retryhelper.retry.config import CallbackConfig, Event, RetryConfig
from retryhelper.retry.decider import RetryDecider, StopReason
from retryhelper.retry.executor import RetryExecutor
from retryhelper.retry.executor_async import AsyncRetryExecutor
from retryhelper.retry.executor_core import retry_steps
from retryhelper.retry.manager import CallbackManager
from retryhelper.retry.state import ExecutionState
from retryhelper.retry.task import AsyncRetryTask, BaseRetryTask, RetryTask
