# ABOUTME: Best-effort wrapper for side operations that must never fail the caller
# ABOUTME: Failures are logged with their type and swallowed, the wrapped call returns None

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from meetup_members.utils.logging import get_logger

P = ParamSpec("P")
T = TypeVar("T")

logger = get_logger(__name__)


def best_effort(operation: str) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T | None]]]:
    """Run an async operation, logging and discarding any exception it raises.

    Args:
        operation: Name of the operation for log messages

    Returns:
        Decorator whose wrapped coroutine returns the result, or None on failure
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T | None]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T | None:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.warning(
                    f"Best-effort operation failed: {operation}",
                    operation=operation,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return None

        return wrapper

    return decorator
