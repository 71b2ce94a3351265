r"""Step objects exchanged between the retry loop and its executors.

The retry loop never calls user code or sleeps by itself. It yields a
``Call`` or a ``Sleep`` and the executor performs it, blocking or awaiting
as appropriate, then resumes the loop with the outcome.
"""

from __future__ import annotations

__all__ = ["Call", "Sleep", "Step"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class Call:
    """Run a user function and send back its result.

    If the function raises, the executor throws the error into the loop.
    If it returns an awaitable, the async executor awaits it first.

    Attributes:
        func: The function to call.
        args: Positional arguments for ``func``.
    """

    func: Callable[..., Any]
    args: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Sleep:
    """Wait before the next attempt.

    Attributes:
        seconds: The delay in seconds.
    """

    seconds: float


Step = Union[Call, Sleep]
