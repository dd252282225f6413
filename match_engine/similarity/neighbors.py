"""
Nearest-neighbour ranking: similar positions and centroid-based personalisation.

Both operations score every pool item against one query vector (a target
position, or the centroid profile of a candidate's history), sort by ascending
distance, and return the top k with a similarity percentage.
"""

import logging
from typing import Iterable, List, Optional, Set, Union

from ..cold_start import popular_positions
from ..features.extractor import FeatureVector, extract_features
from ..models.config import DEFAULT_CONFIG, EngineConfig
from ..models.position import Internship, Job
from ..models.scoring import ScoredResult, ScoringMethod
from ..utils.pools import checked_pool
from ..utils.scores import to_percent
from .distance import similarity_from_distance, skills_similarity, weighted_distance
from .profile import build_centroid_profile

logger = logging.getLogger(__name__)

PositionT = Union[Job, Internship]


def _rank_against(
    query: FeatureVector,
    pool: List[PositionT],
    k: int,
    config: EngineConfig,
) -> List[ScoredResult]:
    """
    Score pool items against the query vector; ascending distance, top k.

    Equal distances are ordered by higher skill overlap, then by pool order.
    """
    scored = []
    for item in pool:
        features = extract_features(item)
        distance = weighted_distance(query, features, config)
        scored.append((distance, -skills_similarity(query, features), item))
    scored.sort(key=lambda s: (s[0], s[1]))
    return [
        ScoredResult(
            item=item,
            score=to_percent(similarity_from_distance(distance)),
            rank=i + 1,
            method=ScoringMethod.KNN,
        )
        for i, (distance, _, item) in enumerate(scored[:k])
    ]


def nearest_neighbors(
    target: PositionT,
    pool: Iterable[PositionT],
    k: Optional[int] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[ScoredResult]:
    """
    Up to k positions from the pool closest to the target, never the target itself.

    score = round(100 / (1 + distance)).
    """
    items = checked_pool(pool, config)
    k = config.default_k if k is None else k
    others = [p for p in items if p.id != target.id]
    return _rank_against(extract_features(target), others, k, config)


def personalized_by_history(
    history: Iterable[PositionT],
    pool: Iterable[PositionT],
    k: Optional[int] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[ScoredResult]:
    """
    Rank pool positions by distance to the centroid profile of the history.

    Positions already in the history are excluded. An empty history falls back
    to the most viewed active positions.
    """
    history = list(history)
    items = checked_pool(pool, config)
    k = config.default_k if k is None else k

    profile = build_centroid_profile(history)
    if profile is None:
        logger.info("[cold_start] NO_HISTORY pool=%s, using popularity", len(items))
        return popular_positions(items, k, key="views", config=config)

    applied: Set[str] = {p.id for p in history}
    unseen = [p for p in items if p.id not in applied]
    return _rank_against(profile, unseen, k, config)
