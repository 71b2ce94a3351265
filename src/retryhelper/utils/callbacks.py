r"""Utilities to normalize user callbacks and predicates.

Callbacks may be registered with zero arguments, with the result only, or
with the result and the attempt count. Predicates passed to ``until`` may
take the result or nothing at all. These helpers wrap such callables so
the retry loop can always call them with the full argument list.
"""

from __future__ import annotations

__all__ = ["count_positional_args", "normalize_callback", "normalize_predicate"]

import functools
import inspect
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


def count_positional_args(func: Callable[..., Any], max_args: int) -> int:
    """Return how many positional arguments ``func`` should receive.

    Args:
        func: The callable to inspect.
        max_args: The number of arguments the caller can supply.

    Returns:
        A number between 0 and ``max_args``. Callables that accept
        ``*args`` or whose signature cannot be inspected receive
        ``max_args`` arguments.

    Example:
        ```pycon
        >>> from retryhelper.utils.callbacks import count_positional_args
        >>> count_positional_args(lambda: None, 2)
        0
        >>> count_positional_args(lambda result: None, 2)
        1
        >>> count_positional_args(lambda result, count, extra=None: None, 2)
        2
        >>> count_positional_args(print, 2)
        2

        ```
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return max_args

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return max_args
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return min(count, max_args)


def normalize_callback(callback: Callable[..., Any]) -> Callable[[Any, int], Any]:
    """Wrap a callback so it accepts ``(result, count)``.

    Args:
        callback: A callable taking ``()``, ``(result)`` or
            ``(result, count)``. It may return an awaitable.

    Returns:
        A callable taking ``(result, count)`` that forwards the arguments
        the original callback accepts and returns whatever it returns.

    Raises:
        TypeError: If ``callback`` is not callable.

    Example:
        ```pycon
        >>> from retryhelper.utils.callbacks import normalize_callback
        >>> cb = normalize_callback(lambda result: result * 2)
        >>> cb(21, 1)
        42

        ```
    """
    if not callable(callback):
        msg = f"callback must be callable, got {type(callback).__name__}"
        raise TypeError(msg)
    nargs = count_positional_args(callback, max_args=2)
    if nargs == 2:
        return callback

    @functools.wraps(callback)
    def wrapper(result: Any, count: int) -> Any:
        return callback(*(result, count)[:nargs])

    return wrapper


def normalize_predicate(predicate: Callable[..., Any]) -> Callable[[Any], Any]:
    """Wrap a predicate so it accepts the attempt's result.

    A zero-argument predicate is treated as an external condition that
    ignores the result.

    Args:
        predicate: A callable taking ``()`` or ``(result)``. It may return
            an awaitable.

    Returns:
        A callable taking ``(result)``.

    Raises:
        TypeError: If ``predicate`` is not callable.
    """
    if not callable(predicate):
        msg = f"predicate must be callable, got {type(predicate).__name__}"
        raise TypeError(msg)
    if count_positional_args(predicate, max_args=1) == 1:
        return predicate

    @functools.wraps(predicate)
    def wrapper(result: Any) -> Any:  # noqa: ARG001
        return predicate()

    return wrapper
