"""Stage timing utilities.

Decorator that logs how long a pipeline stage took.
"""
from __future__ import annotations

import time
import logging
from functools import wraps
from typing import Callable, Any

logger = logging.getLogger("qrstamp.timing")


def timed(stage: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Log `stage=<stage> duration_ms=<n>` after each call, including failed ones."""
    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                duration_ms = int((time.perf_counter() - start) * 1000)
                logger.info("stage=%s duration_ms=%d", stage, duration_ms)
        return wrapper
    return decorator
