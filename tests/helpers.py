r"""Shared test helpers.

This module contains the operation generators and the fake clock used
across the test suite.
"""

from __future__ import annotations

__all__ = ["ApplicationError", "FakeClock", "Generator", "OtherError"]


class ApplicationError(Exception):
    """Error raised by ``Generator`` for a failed attempt."""


class OtherError(Exception):
    """Error raised by ``Generator`` when alternating error kinds."""


class Generator:
    """Operation whose result becomes ``True`` after a number of calls.

    Args:
        true_after: Number of calls returning ``False`` (or raising)
            before the first ``True``.
        raises: If ``True``, failed calls raise instead of returning
            ``False``.
        alternate_errors: If ``True``, every even call raises
            ``OtherError`` instead of ``ApplicationError``.
    """

    def __init__(self, true_after: int, raises: bool = False, alternate_errors: bool = False) -> None:
        self.true_after = true_after
        self.raises = raises
        self.alternate_errors = alternate_errors
        self.calls = 0

    def next(self) -> bool:
        self.calls += 1
        result = self.calls > self.true_after
        if result or not self.raises:
            return result
        if self.alternate_errors and self.calls % 2 == 0:
            raise OtherError(f"call {self.calls}")
        raise ApplicationError(f"call {self.calls}")

    async def next_async(self) -> bool:
        return self.next()


class FakeClock:
    """Monotonic clock advanced only by ``sleep``.

    Attributes:
        now: The current fake time in seconds.
        sleeps: The durations passed to ``sleep``, in call order.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
