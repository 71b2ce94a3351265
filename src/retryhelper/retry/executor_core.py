r"""Retry loop shared by the synchronous and asynchronous executors.

The loop is written once, as a generator that yields ``Call`` and
``Sleep`` steps. ``RetryExecutor`` performs the steps by blocking the
calling thread and ``AsyncRetryExecutor`` performs them by awaiting, so
both variants share the same stopping rules and callback ordering.
"""

from __future__ import annotations

__all__ = ["resume_steps", "retry_steps"]

import logging
from typing import TYPE_CHECKING, Any

from retryhelper.retry.config import Event
from retryhelper.retry.manager import CallbackManager
from retryhelper.retry.state import ExecutionState
from retryhelper.retry.steps import Call, Sleep
from retryhelper.utils.structured_logging import log_event

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

    from retryhelper.retry.config import RetryConfig
    from retryhelper.retry.decider import RetryDecider
    from retryhelper.retry.steps import Step


def retry_steps(
    config: RetryConfig,
    end_condition: Callable[[Any], Any],
    decider: RetryDecider,
) -> Generator[Step, Any, Any]:
    """Run one retry invocation as a sequence of steps.

    The loop always makes a first attempt before checking any stopping
    rule. After each attempt:

    - an error raised by the operation is classified by ``decider``; a
      fatal error propagates unchanged and no callback fires,
    - a result satisfying ``end_condition`` fires ``on_success`` with the
      number of attempts including the successful one and is returned,
    - otherwise the stopping rules are checked; if one fires,
      ``on_timeout`` is dispatched and ``RetryTimeoutError`` is raised,
      else ``on_failure`` is dispatched and the loop sleeps
      ``try_interval`` before the next attempt.

    Errors raised by ``end_condition`` or by a callback are never caught.

    Args:
        config: The retry configuration.
        end_condition: Predicate over the attempt's result.
        decider: Decides which errors are fatal and when to stop.

    Returns:
        The result of the successful attempt, as the generator's return
        value.

    Raises:
        RetryTimeoutError: If a stopping rule ends the loop.
    """
    logger = config.logger
    callbacks = CallbackManager(config.callbacks)
    state = ExecutionState()
    log_event(
        logger,
        logging.DEBUG,
        f"Starting trying with max try time {config.max_try_time} "
        f"and max try count {config.max_try_count}.",
        invocation_id=state.invocation_id,
    )

    while True:
        log_event(
            logger,
            logging.DEBUG,
            f"Trying time {state.attempts_made}, elapsed time {state.elapsed:.3f}s.",
            invocation_id=state.invocation_id,
            attempt=state.attempts_made + 1,
            elapsed=state.elapsed,
        )
        try:
            result = yield Call(config.operation)
        except Exception as exc:
            if decider.should_raise(exc, state):
                raise
            state.attempts_made += 1
            state.record_error(exc)
        else:
            state.attempts_made += 1
            state.record_result(result)
            if (yield Call(end_condition, (result,))):
                log_event(
                    logger,
                    logging.DEBUG,
                    f"Trying succeeded after time {state.elapsed:.3f}s "
                    f"and total try count {state.attempts_made}.",
                    invocation_id=state.invocation_id,
                    attempt=state.attempts_made,
                    elapsed=state.elapsed,
                )
                yield from callbacks.dispatch(Event.SUCCESS, result, state.attempts_made)
                return result

        reason = decider.stop_reason(state)
        if reason is not None:
            log_event(
                logger,
                logging.DEBUG,
                f"Stopped trying after {state.attempts_made} attempts: {reason.value}.",
                invocation_id=state.invocation_id,
                attempt=state.attempts_made,
                elapsed=state.elapsed,
            )
            yield from callbacks.dispatch(Event.TIMEOUT, state.last_result, state.attempts_made)
            raise decider.timeout_error(reason, state) from state.last_error

        yield from callbacks.dispatch(Event.FAILURE, state.last_result, state.attempts_made)
        yield Sleep(config.try_interval)


def resume_steps(
    steps: Generator[Step, Any, Any], outcome: Any, error: Exception | None
) -> Step:
    """Resume the retry loop with the outcome of the previous step.

    A ``StopIteration`` raised by user code cannot leave a generator
    unchanged: Python wraps it in a ``RuntimeError`` (PEP 479). When that
    happens to the error thrown back into the loop, the original error is
    raised instead, so callers see the kind the user code raised.

    Args:
        steps: The generator returned by ``retry_steps``.
        outcome: The value produced by the previous step.
        error: The error raised by the previous step, if any.

    Returns:
        The next step.

    Raises:
        StopIteration: When the loop returns. ``exc.value`` holds the
            result; callers must tell it apart from ``error`` itself.
    """
    if error is None:
        return steps.send(outcome)
    try:
        return steps.throw(error)
    except RuntimeError as exc:
        if exc.__cause__ is not error:
            raise
    raise error
