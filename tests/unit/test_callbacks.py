r"""Unit tests for callback functionality."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, call

import pytest

import retryhelper
from retryhelper import RetryTimeoutError
from tests.helpers import ApplicationError, Generator

if TYPE_CHECKING:
    from collections.abc import Callable

#########################################
#     Tests for on_success callback     #
#########################################


def test_on_success_called_once_with_count(mock_sleep: Mock) -> None:
    """Test on_success receives the result and the count including the
    successful attempt."""
    on_success = Mock()
    generator = Generator(2)

    retryhelper.try_(generator.next).on_success(on_success).until(bool)

    on_success.assert_called_once_with(True, 3)


def test_on_success_zero_argument_callback(mock_sleep: Mock) -> None:
    """Test a zero-argument callback is called without arguments."""
    calls = []
    retryhelper.try_(lambda: True).on_success(lambda: calls.append("called")).until(bool)
    assert calls == ["called"]


def test_on_success_one_argument_callback(mock_sleep: Mock) -> None:
    """Test a one-argument callback receives the result only."""
    calls = []
    retryhelper.try_(lambda: 7).on_success(lambda result: calls.append(result)).until(bool)
    assert calls == [7]


def test_on_success_two_argument_callback(mock_sleep: Mock) -> None:
    """Test a two-argument callback receives the result and count."""
    calls = []

    def callback(result: int, count: int) -> None:
        calls.append((result, count))

    retryhelper.try_(lambda: 7).on_success(callback).until(bool)
    assert calls == [(7, 1)]


def test_on_success_varargs_callback(mock_sleep: Mock) -> None:
    """Test a callback taking *args receives both arguments."""
    calls = []
    retryhelper.try_(lambda: 7).on_success(lambda *args: calls.append(args)).until(bool)
    assert calls == [(7, 1)]


#########################################
#     Tests for on_failure callback     #
#########################################


def test_on_failure_called_between_attempts(mock_sleep: Mock) -> None:
    """Test on_failure fires after each failed attempt followed by
    another one."""
    on_failure = Mock()
    generator = Generator(3)

    retryhelper.try_(generator.next).on_failure(on_failure).until(bool)

    assert on_failure.call_args_list == [call(False, 1), call(False, 2), call(False, 3)]


def test_on_failure_not_called_on_last_attempt(mock_sleep: Mock) -> None:
    """Test on_failure does not fire for the attempt ending the loop."""
    on_failure, on_timeout = Mock(), Mock()
    task = (
        retryhelper.try_(lambda: False)
        .with_max_try_count(3)
        .on_failure(on_failure)
        .on_timeout(on_timeout)
    )

    with pytest.raises(RetryTimeoutError):
        task.until(bool)

    assert on_failure.call_args_list == [call(False, 1), call(False, 2)]
    on_timeout.assert_called_once_with(False, 3)


def test_on_failure_receives_none_for_errors(mock_sleep: Mock) -> None:
    """Test on_failure receives None when the attempt raised."""
    on_failure = Mock()
    generator = Generator(2, raises=True)

    retryhelper.try_(generator.next).on_failure(on_failure).until_no_exception(ApplicationError)

    assert on_failure.call_args_list == [call(None, 1), call(None, 2)]


def test_on_failure_called_before_sleep(mock_sleep: Mock) -> None:
    """Test on_failure completes before the wait between attempts."""
    events = []
    mock_sleep.side_effect = lambda seconds: events.append(("sleep", seconds))
    generator = Generator(1)

    (
        retryhelper.try_(generator.next)
        .with_try_interval(0.2)
        .on_failure(lambda result, count: events.append(("failure", count)))
        .until(bool)
    )

    assert events == [("failure", 1), ("sleep", 0.2)]


#########################################
#     Tests for on_timeout callback     #
#########################################


def test_on_timeout_all_callbacks_fire(mock_sleep: Mock) -> None:
    """Test every registered on_timeout callback fires once."""
    first, second = Mock(), Mock()
    task = retryhelper.try_(lambda: False).with_max_try_count(2).on_timeout(first).on_timeout(second)

    with pytest.raises(RetryTimeoutError):
        task.until(bool)

    first.assert_called_once_with(False, 2)
    second.assert_called_once_with(False, 2)


def test_on_timeout_receives_none_for_errors(mock_sleep: Mock) -> None:
    """Test on_timeout receives None when the last attempt raised."""
    on_timeout = Mock()
    task = (
        retryhelper.try_(Generator(10, raises=True).next)
        .with_max_try_count(2)
        .on_timeout(on_timeout)
    )

    with pytest.raises(RetryTimeoutError):
        task.until_no_exception(ApplicationError)

    on_timeout.assert_called_once_with(None, 2)


def test_on_timeout_runs_before_error(mock_sleep: Mock) -> None:
    """Test on_timeout runs before the timeout error propagates."""
    events = []
    task = (
        retryhelper.try_(lambda: False)
        .with_max_try_count(1)
        .on_timeout(lambda: events.append("timeout"))
    )

    with pytest.raises(RetryTimeoutError):
        try:
            task.until(bool)
        finally:
            events.append("raised")

    assert events == ["timeout", "raised"]


###################################
#     Tests for callback order    #
###################################


def test_callbacks_run_in_registration_order(mock_sleep: Mock) -> None:
    """Test callbacks of one event run in registration order."""
    order = []

    def recorder(event: str, name: str) -> Callable[[], None]:
        return lambda: order.append((event, name))

    task = retryhelper.try_(Generator(1).next)
    for name in ("a", "b", "c"):
        task = task.on_failure(recorder("failure", name)).on_success(recorder("success", name))

    task.until(bool)

    assert order == [
        ("failure", "a"),
        ("failure", "b"),
        ("failure", "c"),
        ("success", "a"),
        ("success", "b"),
        ("success", "c"),
    ]


def test_callback_error_aborts_chain(mock_sleep: Mock) -> None:
    """Test an error raised by a callback skips the remaining callbacks and
    propagates."""
    later = Mock()
    operation = Mock(return_value=False)
    task = (
        retryhelper.try_(operation)
        .with_max_try_count(5)
        .on_failure(Mock(side_effect=RuntimeError("callback failed")))
        .on_failure(later)
    )

    with pytest.raises(RuntimeError, match=r"callback failed"):
        task.until(bool)

    later.assert_not_called()
    operation.assert_called_once_with()
    mock_sleep.assert_not_called()


def test_callback_error_not_tolerated(mock_sleep: Mock) -> None:
    """Test a callback error is never treated as a tolerated error."""
    task = retryhelper.try_(lambda: True).on_success(Mock(side_effect=ApplicationError("cb")))

    with pytest.raises(ApplicationError, match=r"cb"):
        task.until_no_exception(ApplicationError)


def test_callback_not_called_on_fatal_error(mock_sleep: Mock) -> None:
    """Test no callback fires when the operation raises a fatal error."""
    on_success, on_failure, on_timeout = Mock(), Mock(), Mock()
    task = (
        retryhelper.try_(Mock(side_effect=ValueError("fatal")))
        .on_success(on_success)
        .on_failure(on_failure)
        .on_timeout(on_timeout)
    )

    with pytest.raises(ValueError, match=r"fatal"):
        task.until(bool)

    on_success.assert_not_called()
    on_failure.assert_not_called()
    on_timeout.assert_not_called()


def test_async_callback_rejected(mock_sleep: Mock) -> None:
    """Test a coroutine callback is rejected by the synchronous task."""

    async def callback() -> None:
        pass

    with pytest.raises(TypeError, match=r"use try_async\(\)"):
        retryhelper.try_(lambda: True).on_success(callback).until(bool)
