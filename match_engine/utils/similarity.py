"""
Set similarity utilities: Jaccard similarity over case-insensitive labels.
"""

from typing import AbstractSet, Iterable


def normalize_labels(values: Iterable[str]) -> frozenset:
    """Lowercase, strip and deduplicate labels; empty strings are dropped."""
    return frozenset(v.strip().lower() for v in values if v and v.strip())


def jaccard_similarity(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """Intersection over union; 0.0 when either side is empty."""
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def label_mismatch(a: str, b: str) -> float:
    """0.0 if the labels are equal ignoring case, else 1.0."""
    return 0.0 if (a or "").strip().lower() == (b or "").strip().lower() else 1.0
