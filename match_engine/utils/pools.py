"""
Pool preconditions shared by the scorers.
"""

from typing import Iterable, List, TypeVar

from ..errors import PoolTooLargeError
from ..models.config import EngineConfig

T = TypeVar("T")


def checked_pool(items: Iterable[T], config: EngineConfig) -> List[T]:
    """
    Materialise a pool and enforce the size bound.

    A non-iterable raises TypeError; an oversized pool raises PoolTooLargeError.
    Pools are never truncated here; bounding them is the caller's job.
    """
    pool = list(items)
    if len(pool) > config.max_pool_size:
        raise PoolTooLargeError(len(pool), config.max_pool_size)
    return pool
