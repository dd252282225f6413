"""
Centroid profile: a synthetic feature vector built from application history.

Aggregates every historically applied position into one query vector that is
then compared against the pool with the ordinary distance function.
"""

import logging
from typing import List, Optional, Union

import numpy as np

from ..features.extractor import FeatureVector, extract_features
from ..models.position import Internship, Job, LocationMode, PositionKind
from ..utils.scores import most_common

logger = logging.getLogger(__name__)


def _positive_mean(values: List[float]) -> float:
    positive = [v for v in values if v > 0]
    return float(np.mean(positive)) if positive else 0.0


def build_centroid_profile(
    history: List[Union[Job, Internship]],
    kind: Optional[PositionKind] = None,
) -> Optional[FeatureVector]:
    """
    Build the centroid profile for a history of applied positions.

    - skills: union across history, deduplicated
    - compensation / duration: arithmetic mean of the positive values
    - location, category, location mode: most frequent value; ties go to the
      value that appears first in history order

    Returns None for an empty history.
    """
    if not history:
        return None

    vectors = [extract_features(p) for p in history]
    profile_kind = kind or vectors[0].kind

    skills = frozenset().union(*(v.skills for v in vectors))
    profile = FeatureVector(
        kind=profile_kind,
        compensation=_positive_mean([v.compensation for v in vectors]),
        duration=_positive_mean([v.duration for v in vectors]),
        location=most_common(v.location for v in vectors),
        category=most_common(v.category for v in vectors),
        skills=skills,
        location_mode=most_common(
            (v.location_mode for v in vectors), default=LocationMode.ON_SITE.value
        ),
        experience_level=most_common(v.experience_level for v in vectors),
    )
    logger.debug(
        "[profile] CENTROID_BUILT history=%s skills=%s location=%s category=%s",
        len(history), len(skills), profile.location, profile.category,
    )
    return profile
