"""
Weighted distance between two feature vectors.

distance = Σ weight_d * distance_d over skills, compensation, location, category
and location mode; internships add a duration term. Every per-dimension distance
is in [0, 1], so the total is bounded by the weight sum.
"""

from ..features.extractor import FeatureVector
from ..models.config import DEFAULT_CONFIG, EngineConfig
from ..models.position import PositionKind
from ..utils.similarity import jaccard_similarity, label_mismatch


def compensation_distance(a: float, b: float) -> float:
    """Relative difference |a-b| / max(a, b, 1)."""
    return abs(a - b) / max(a, b, 1.0)


def duration_distance(a: float, b: float, span_months: float = 12.0) -> float:
    return min(1.0, abs(a - b) / max(span_months, 1.0))


def skills_similarity(a: FeatureVector, b: FeatureVector) -> float:
    return jaccard_similarity(a.skills, b.skills)


def weighted_distance(
    a: FeatureVector,
    b: FeatureVector,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """
    Weighted sum of per-dimension distances between two vectors.

    A position is at distance 0 from itself even when it has no skills. Two
    distinct positions with no skills still count as a full skills mismatch.
    """
    if a is b or (a.position_id and (a.kind, a.position_id) == (b.kind, b.position_id)):
        return 0.0
    w = config.similarity_weights
    distance = (
        w.skills * (1.0 - skills_similarity(a, b))
        + w.compensation * compensation_distance(a.compensation, b.compensation)
        + w.location * label_mismatch(a.location, b.location)
        + w.category * label_mismatch(a.category, b.category)
        + w.location_mode * label_mismatch(a.location_mode, b.location_mode)
    )
    if a.kind == PositionKind.INTERNSHIP and b.kind == PositionKind.INTERNSHIP:
        distance += w.duration * duration_distance(
            a.duration, b.duration, config.duration_span_months
        )
    return distance


def similarity_from_distance(distance: float) -> float:
    """Map a distance in [0, inf) to a similarity in (0, 1]."""
    return 1.0 / (1.0 + distance)
