"""Lightweight observability: request IDs and timing spans."""

import contextvars
import functools
import logging
import time
import uuid

logger = logging.getLogger(__name__)

# Context variable for request correlation
_request_id: contextvars.ContextVar[str] = contextvars.ContextVar(
    "request_id", default=""
)


def new_request_id() -> str:
    """Generate and set a new request ID for the current context."""
    rid = uuid.uuid4().hex[:12]
    _request_id.set(rid)
    return rid


def get_request_id() -> str:
    """Get the current request ID (empty string if none set)."""
    return _request_id.get()


def log_prefix() -> str:
    rid = _request_id.get()
    return f"[{rid}] " if rid else ""


def timed(func=None, *, level=logging.DEBUG):
    """Decorator that logs function execution time.

    Usage:
        @timed
        def web(self, query, **options): ...

        @timed(level=logging.INFO)
        def composite(self, query, sources, **options): ...

    Logs: [req_id] module.function took Xms
    """
    def decorator(fn):
        name = f"{fn.__module__}.{fn.__qualname__}"

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            prefix = log_prefix()
            start = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - start) * 1000
                logger.log(level, f"{prefix}{name} took {elapsed_ms:.0f}ms")
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
