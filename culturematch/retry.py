"""Backoff for the homepage fetch, the chat-completion call and Custom Search.

Server errors and dropped connections are worth another attempt. A 4xx
answer (bad key, exhausted quota, missing page) is not, so ``give_up``
lets a call site stop early and fall back to the static analysis.
"""
from __future__ import annotations

import functools
import random
import time
from typing import Any, Callable, Optional, Tuple, Type

from culturematch.log import get_logger

log = get_logger(__name__)

# Client errors that can clear up on their own.
_TRANSIENT_STATUS = frozenset({408, 425, 429})


def status_code(exc: BaseException) -> Optional[int]:
    """HTTP status carried by a requests or openai error, if any."""
    code = getattr(exc, "status_code", None)
    if code is None:
        code = getattr(getattr(exc, "response", None), "status_code", None)
    return code if isinstance(code, int) else None


def is_client_error(exc: BaseException) -> bool:
    code = status_code(exc)
    return code is not None and 400 <= code < 500 and code not in _TRANSIENT_STATUS


def backoff_delay(attempt: int, base_delay: float, max_delay: float, jitter: bool = True) -> float:
    delay = min(base_delay * 2 ** (attempt - 1), max_delay)
    return delay * (0.5 + random.random()) if jitter else delay


def retry(
    *,
    max_attempts: int = 2,
    base_delay: float = 1.0,
    max_delay: float = 10.0,
    jitter: bool = True,
    retryable: Tuple[Type[BaseException], ...] = (Exception,),
    give_up: Optional[Callable[[BaseException], bool]] = None,
) -> Callable:
    """Retry on *retryable* errors unless *give_up* says the error is final.

    The last error is re-raised so the caller's fallback takes over.
    """

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            attempt = 1
            while True:
                try:
                    return fn(*args, **kwargs)
                except retryable as exc:
                    if give_up is not None and give_up(exc):
                        log.warning("%s failed with a final error: %s", fn.__qualname__, exc)
                        raise
                    if attempt >= max_attempts:
                        log.error("%s failed after %d attempts: %s", fn.__qualname__, attempt, exc)
                        raise
                    delay = backoff_delay(attempt, base_delay, max_delay, jitter)
                    log.warning(
                        "%s attempt %d/%d failed (%s), retrying in %.1fs",
                        fn.__qualname__, attempt, max_attempts, exc, delay,
                    )
                    time.sleep(delay)
                    attempt += 1

        return wrapper

    return decorator
