"""
Miscelaneous utilities.
"""

import time
from functools import wraps
from typing import Callable

from movies_api.logger import logger


def elapsed_ms(init: float) -> float:
    return 1000 * (time.perf_counter() - init)


def timed(func) -> Callable:
    @wraps(func)
    async def timed_func(*args, **kwargs):
        init = time.perf_counter()
        out = await func(*args, **kwargs)
        logger.info(f"{func.__name__} finished in {elapsed_ms(init):.2f} ms")
        return out
    return timed_func
