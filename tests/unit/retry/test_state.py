r"""Unit tests for per-invocation execution state."""

from __future__ import annotations

from unittest.mock import patch

from retryhelper.retry.state import ExecutionState


def test_execution_state_defaults() -> None:
    """Test a new state starts with no attempt."""
    with patch("time.monotonic", return_value=42.0):
        state = ExecutionState()

    assert state.start_time == 42.0
    assert state.attempts_made == 0
    assert state.last_result is None
    assert state.last_error is None


def test_execution_state_unique_invocation_ids() -> None:
    """Test each state gets its own invocation id."""
    ids = {ExecutionState().invocation_id for _ in range(5)}
    assert len(ids) == 5


def test_execution_state_elapsed() -> None:
    """Test elapsed is measured on the monotonic clock."""
    state = ExecutionState(start_time=10.0)
    with patch("time.monotonic", return_value=12.5):
        assert state.elapsed == 2.5


def test_execution_state_record_result() -> None:
    """Test recording a result clears the previous error."""
    state = ExecutionState()
    state.record_error(ValueError("boom"))
    state.record_result("ok")

    assert state.last_result == "ok"
    assert state.last_error is None


def test_execution_state_record_error() -> None:
    """Test recording an error resets the last result."""
    state = ExecutionState()
    error = ValueError("boom")
    state.record_result("ok")
    state.record_error(error)

    assert state.last_result is None
    assert state.last_error is error
