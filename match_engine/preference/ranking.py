"""
Preference-based ranking: personalised positions and token-similar positions.
"""

import logging
from typing import Iterable, List, Union

from ..cold_start import popular_positions
from ..models.config import DEFAULT_CONFIG, EngineConfig
from ..models.position import Internship, Job
from ..models.scoring import ScoredResult, ScoringMethod
from ..utils.pools import checked_pool
from ..utils.scores import to_percent
from ..utils.similarity import jaccard_similarity
from .classifier import PreferenceClassifier

logger = logging.getLogger(__name__)

PositionT = Union[Job, Internship]


def _ranked(results: List[ScoredResult], limit: int) -> List[ScoredResult]:
    results.sort(key=lambda r: r.score, reverse=True)
    top = results[:limit]
    for i, r in enumerate(top):
        r.rank = i + 1
    return top


def personalized_ranking(
    applied_ids: Iterable[str],
    pool: Iterable[PositionT],
    limit: int = 10,
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[ScoredResult]:
    """
    Rank unseen pool positions by P(applied) from a freshly trained classifier.

    Empty history: most-applied positions with the neutral fallback score.
    """
    applied = list(dict.fromkeys(applied_ids))
    items = checked_pool(pool, config)
    if not applied:
        logger.info("[cold_start] NO_HISTORY pool=%s, using popularity", len(items))
        return popular_positions(
            items, limit, key="applications", config=config, active_only=False
        )

    classifier = PreferenceClassifier(config).train(applied, items)
    applied_set = set(applied)
    results = [
        ScoredResult(
            item=item,
            score=to_percent(classifier.predict(item)),
            method=ScoringMethod.NAIVE_BAYES,
        )
        for item in items
        if item.id not in applied_set
    ]
    return _ranked(results, limit)


def similar_items(
    target: PositionT,
    pool: Iterable[PositionT],
    limit: int = 5,
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[ScoredResult]:
    """Jaccard similarity of token sets, target excluded; no training involved."""
    items = checked_pool(pool, config)
    classifier = PreferenceClassifier(config)
    target_tokens = set(classifier.tokens(target))
    results = [
        ScoredResult(
            item=item,
            score=to_percent(jaccard_similarity(target_tokens, set(classifier.tokens(item)))),
            method=ScoringMethod.FEATURE_SIMILARITY,
        )
        for item in items
        if item.id != target.id
    ]
    return _ranked(results, limit)
