r"""Unit tests for retry configuration classes."""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError
from datetime import timedelta
from unittest.mock import Mock

import pytest

from retryhelper.core import DEFAULT_TRY_INTERVAL
from retryhelper.retry.config import CallbackConfig, Event, RetryConfig


def operation() -> bool:
    return True


####################################
#     Tests for CallbackConfig     #
####################################


def test_callback_config_defaults() -> None:
    """Test CallbackConfig starts with empty chains."""
    config = CallbackConfig()

    assert config.on_success == ()
    assert config.on_failure == ()
    assert config.on_timeout == ()


@pytest.mark.parametrize("event", list(Event))
def test_callback_config_append(event: Event) -> None:
    """Test append returns a new config with the callback added."""
    callback = Mock()
    config = CallbackConfig()
    updated = config.append(event, callback)

    assert updated.get(event) == (callback,)
    assert config.get(event) == ()
    for other in Event:
        if other is not event:
            assert updated.get(other) == ()


def test_callback_config_append_preserves_order() -> None:
    """Test repeated appends keep registration order."""
    first, second, third = Mock(), Mock(), Mock()
    config = (
        CallbackConfig()
        .append(Event.FAILURE, first)
        .append(Event.FAILURE, second)
        .append(Event.FAILURE, third)
    )

    assert config.on_failure == (first, second, third)


def test_callback_config_branches_do_not_alias() -> None:
    """Test two configs derived from the same parent are independent."""
    base = CallbackConfig().append(Event.SUCCESS, Mock())
    left = base.append(Event.SUCCESS, Mock(name="left"))
    right = base.append(Event.SUCCESS, Mock(name="right"))

    assert len(base.on_success) == 1
    assert left.on_success[:1] == right.on_success[:1] == base.on_success
    assert left.on_success[1] is not right.on_success[1]


#################################
#     Tests for RetryConfig     #
#################################


def test_retry_config_defaults() -> None:
    """Test RetryConfig default values."""
    config = RetryConfig(operation=operation)

    assert config.operation is operation
    assert config.max_try_count is None
    assert config.max_try_time is None
    assert config.try_interval == DEFAULT_TRY_INTERVAL
    assert config.callbacks == CallbackConfig()
    assert config.logger is logging.getLogger("retryhelper")


def test_retry_config_timedelta() -> None:
    """Test RetryConfig normalizes durations to seconds."""
    config = RetryConfig(
        operation=operation,
        try_interval=timedelta(milliseconds=500),
        max_try_time=timedelta(seconds=2),
    )

    assert config.try_interval == 0.5
    assert config.max_try_time == 2.0


def test_retry_config_operation_not_callable() -> None:
    """Test RetryConfig rejects a non-callable operation."""
    with pytest.raises(TypeError, match=r"operation must be callable"):
        RetryConfig(operation=42)  # type: ignore[arg-type]


def test_retry_config_invalid_interval() -> None:
    """Test RetryConfig validates the interval."""
    with pytest.raises(ValueError, match=r"try_interval must be >= 0"):
        RetryConfig(operation=operation, try_interval=-1)


def test_retry_config_frozen() -> None:
    """Test RetryConfig cannot be mutated."""
    config = RetryConfig(operation=operation)
    with pytest.raises(FrozenInstanceError):
        config.max_try_count = 2  # type: ignore[misc]
