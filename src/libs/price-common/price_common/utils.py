# src/libs/price-common/price_common/utils.py
import functools
from typing import Any, Callable, Optional

from .monitoring import DB_OPERATION_LATENCY_SECONDS


def async_timed(repository: str, method: Optional[str] = None) -> Callable:
    """
    Times every call of an async repository method, failed calls included, in
    db_operation_latency_seconds{repository, method}. The method label
    defaults to the decorated function's name.
    """
    def decorator(func: Callable) -> Callable:
        latency = DB_OPERATION_LATENCY_SECONDS.labels(
            repository=repository, method=method or func.__name__
        )

        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            with latency.time():
                return await func(*args, **kwargs)
        return wrapper
    return decorator
