"""
Cold-start popularity ordering.

Used when a candidate has no application history: there is nothing to learn
from, so the most viewed (or most applied-to) positions are returned with a
fixed neutral score.
"""

import logging
from typing import List, Literal, Union

from .models.config import DEFAULT_CONFIG, EngineConfig
from .models.position import Internship, Job
from .models.scoring import ScoredResult, ScoringMethod

logger = logging.getLogger(__name__)

PopularityKey = Literal["views", "applications"]


def _popularity(position: Union[Job, Internship], key: PopularityKey) -> int:
    return position.views_count if key == "views" else position.applications_count


def popular_positions(
    pool: List[Union[Job, Internship]],
    limit: int,
    key: PopularityKey = "views",
    config: EngineConfig = DEFAULT_CONFIG,
    active_only: bool = True,
) -> List[ScoredResult]:
    """
    Top `limit` positions by popularity, descending (stable for equal counts).

    key="views" ranks by views_count, key="applications" by applications_count.
    """
    items = [p for p in pool if p.is_active] if active_only else list(pool)
    items.sort(key=lambda p: _popularity(p, key), reverse=True)
    logger.info(
        "[cold_start] POPULAR_FALLBACK key=%s pool=%s returned=%s",
        key, len(pool), min(limit, len(items)),
    )
    return [
        ScoredResult(
            item=p,
            score=config.popular_fallback_score,
            method=ScoringMethod.POPULAR,
        )
        for p in items[:limit]
    ]
