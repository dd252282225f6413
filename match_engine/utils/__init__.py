"""Shared utilities for scoring and set similarity."""

from .pools import checked_pool
from .scores import clamp, most_common, round_half_up, to_percent
from .similarity import jaccard_similarity, label_mismatch, normalize_labels

__all__ = [
    "checked_pool",
    "clamp",
    "most_common",
    "round_half_up",
    "to_percent",
    "jaccard_similarity",
    "label_mismatch",
    "normalize_labels",
]
