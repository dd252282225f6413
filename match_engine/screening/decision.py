"""
Kernel-weighted decision function for the fit score.

combined = linear_share * linear + (1 - linear_share) * rbf
score    = sigmoid(steepness * (combined - midpoint))

linear is the weighted feature sum; rbf rewards closeness to an ideal all-1.0
candidate. All constants come from DecisionParams / FitWeights.
"""

import math
from typing import Dict

import numpy as np

from ..models.config import DEFAULT_CONFIG, EngineConfig
from .features import FEATURE_NAMES


def _feature_array(features: Dict[str, float]) -> np.ndarray:
    return np.array([features[name] for name in FEATURE_NAMES], dtype=float)


def linear_score(features: Dict[str, float], config: EngineConfig = DEFAULT_CONFIG) -> float:
    weights = config.fit_weights.as_dict()
    w = np.array([weights[name] for name in FEATURE_NAMES], dtype=float)
    return float(np.dot(_feature_array(features), w))


def rbf_kernel(features: Dict[str, float], gamma: float = 1.5) -> float:
    """exp(-gamma * ||features - ideal||^2) with ideal = all 1.0."""
    diff = _feature_array(features) - 1.0
    return float(np.exp(-gamma * np.sum(diff ** 2)))


def sigmoid(x: float, steepness: float = 8.0, midpoint: float = 0.5) -> float:
    z = -steepness * (x - midpoint)
    if z > 700:
        return 0.0
    return 1.0 / (1.0 + math.exp(z))


def decision_function(features: Dict[str, float], config: EngineConfig = DEFAULT_CONFIG) -> float:
    """Raw fit score in (0, 1)."""
    d = config.decision
    combined = (
        d.linear_share * linear_score(features, config)
        + (1.0 - d.linear_share) * rbf_kernel(features, d.rbf_gamma)
    )
    return sigmoid(combined, d.sigmoid_steepness, d.sigmoid_midpoint)
