# ABOUTME: structlog loggers for call sites, plus request timing and command context helpers
# ABOUTME: Events flow to loguru once configure_logging has run

import functools
import time
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

import structlog

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str = "meetup_members") -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named after the stdlib logger it writes through."""
    return structlog.get_logger(name)


def new_request_id() -> str:
    """Short random id that ties the start and end events of one request together."""
    return uuid.uuid4().hex[:8]


def _find_url(args: tuple, kwargs: dict) -> str | None:
    for value in (*args, *kwargs.values()):
        if isinstance(value, str) and value.startswith(("http://", "https://")):
            return value
    return None


def _elapsed_ms(started: float) -> int:
    return round((time.perf_counter() - started) * 1000)


def log_request(target: str) -> Callable[[F], F]:
    """Log the start, duration and outcome of an outbound request coroutine.

    The first ``http(s)://`` string among the call arguments is recorded as
    the request URL. Failures are logged at error level and re-raised.

    Args:
        target: Name of the remote site being requested
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            log = get_logger(func.__module__).bind(
                target=target, request_id=new_request_id(), url=_find_url(args, kwargs)
            )
            log.debug("Request started")
            started = time.perf_counter()

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                log.error("Request failed", elapsed_ms=_elapsed_ms(started), error=str(e), error_type=type(e).__name__)
                raise

            log.info("Request completed", elapsed_ms=_elapsed_ms(started))
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


@contextmanager
def command_context(command: str, **context) -> Iterator[structlog.stdlib.BoundLogger]:
    """Yield a logger bound to a CLI command run; an escaping exception is logged then re-raised."""
    log = get_logger("meetup_members.cli").bind(command=command, run_id=new_request_id(), **context)
    try:
        yield log
    except Exception as e:
        log.error("Command failed", error=str(e), error_type=type(e).__name__)
        raise
