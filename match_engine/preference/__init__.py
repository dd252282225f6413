"""
Preference classifier: per-request naive Bayes over a candidate's own history.

Public API: PreferenceClassifier, personalized_ranking, similar_items.
"""

from .classifier import PreferenceClassifier
from .ranking import personalized_ranking, similar_items

__all__ = [
    "PreferenceClassifier",
    "personalized_ranking",
    "similar_items",
]
