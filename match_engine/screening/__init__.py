"""
Fit scorer: explainable candidate-vs-position scoring and applicant screening.

Public API: classify_candidate, screen_candidates.
- features: the five sub-feature scores
- decision: linear + RBF blend through a sigmoid
- bands: score bands, recommendations, strengths and gaps
"""

from .bands import classify_score
from .decision import decision_function, linear_score, rbf_kernel
from .features import extract_fit_features
from .screener import classify_candidate, screen_candidates, screening_stats

__all__ = [
    "classify_candidate",
    "classify_score",
    "decision_function",
    "extract_fit_features",
    "linear_score",
    "rbf_kernel",
    "screen_candidates",
    "screening_stats",
]
