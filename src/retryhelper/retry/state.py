r"""Per-invocation execution state of the retry loop."""

from __future__ import annotations

__all__ = ["ExecutionState"]

import itertools
import time
from dataclasses import dataclass, field
from typing import Any

_invocation_ids = itertools.count(1)


@dataclass
class ExecutionState:
    """Mutable state owned by a single retry invocation.

    A fresh instance is created every time ``until`` or
    ``until_no_exception`` starts, and is never stored on a task or a
    configuration, so concurrent invocations of the same task cannot
    observe each other's counters.

    Attributes:
        invocation_id: Process-unique identifier, used in log records.
        start_time: Value of ``time.monotonic()`` when the invocation began.
        attempts_made: Number of attempts completed so far.
        last_result: Result of the most recent attempt, or ``None`` if it
            raised a tolerated error.
        last_error: Tolerated error raised by the most recent attempt, if any.
    """

    invocation_id: int = field(default_factory=lambda: next(_invocation_ids))
    start_time: float = field(default_factory=lambda: time.monotonic())
    attempts_made: int = 0
    last_result: Any = None
    last_error: Exception | None = None

    @property
    def elapsed(self) -> float:
        """Seconds elapsed since the invocation began."""
        return time.monotonic() - self.start_time

    def record_result(self, result: Any) -> None:
        self.last_result = result
        self.last_error = None

    def record_error(self, error: Exception) -> None:
        self.last_result = None
        self.last_error = error
