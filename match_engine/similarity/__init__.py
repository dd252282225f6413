"""
Similarity recommender: k-nearest neighbours over weighted feature distance.

Public API: nearest_neighbors, personalized_by_history.
- distance: per-dimension and weighted distances
- profile: centroid profile from application history
- neighbors: ranking orchestration
"""

from .distance import (
    compensation_distance,
    duration_distance,
    similarity_from_distance,
    weighted_distance,
)
from .neighbors import nearest_neighbors, personalized_by_history
from .profile import build_centroid_profile

__all__ = [
    "build_centroid_profile",
    "compensation_distance",
    "duration_distance",
    "nearest_neighbors",
    "personalized_by_history",
    "similarity_from_distance",
    "weighted_distance",
]
