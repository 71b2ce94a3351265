r"""Callback manager for dispatching retry lifecycle events.

This module provides the CallbackManager class that turns the callback
chain of an event into a sequence of steps for the executor.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

from retryhelper.retry.steps import Call

if TYPE_CHECKING:
    from collections.abc import Generator

    from retryhelper.retry.config import CallbackConfig, Event


class CallbackManager:
    """Dispatches callbacks during the retry lifecycle.

    Callbacks of an event are dispatched strictly in registration order.
    Each one is yielded as its own ``Call`` step, so the executor runs it
    to completion (awaiting it if needed) before the next one starts. An
    error raised by a callback is thrown back at the ``yield`` and is not
    caught: the remaining callbacks are skipped and the error leaves the
    retry loop.

    Attributes:
        callbacks: Configuration containing the callback chains.
    """

    def __init__(self, callbacks: CallbackConfig) -> None:
        self.callbacks = callbacks

    def dispatch(self, event: Event, result: Any, count: int) -> Generator[Call, Any, None]:
        """Yield one step per callback registered for ``event``.

        Args:
            event: The lifecycle event.
            result: The result passed to each callback.
            count: The attempt count passed to each callback.
        """
        for callback in self.callbacks.get(event):
            yield Call(callback, (result, count))
