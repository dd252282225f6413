"""
Engine configuration: distance weights, bucket thresholds and fit-scoring constants.

EngineConfig defaults are defined here. Callers may pass a dict (e.g. loaded from a
JSON config file); from_dict() merges it with these defaults.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, model_validator


def _check_sum(total: float, label: str) -> None:
    if abs(total - 1.0) > 0.01:
        raise ValueError(f"{label} weights must sum to 1.0, got {total}")


class SimilarityWeights(BaseModel):
    """
    Per-dimension weights for the nearest-neighbour distance.

    distance = Σ weight_d * distance_d; the five base weights sum to 1.0.
    The duration term is folded in on top of them for internships only.
    """

    skills: float = 0.40
    compensation: float = 0.30
    location: float = 0.15
    category: float = 0.10
    location_mode: float = 0.05
    duration: float = 0.10

    @model_validator(mode="after")
    def weights_sum_to_one(self):
        _check_sum(
            self.skills + self.compensation + self.location + self.category + self.location_mode,
            "Similarity",
        )
        return self


class FitWeights(BaseModel):
    """Linear weights for the fit scorer's five sub-features (sum to 1.0)."""

    skills: float = 0.40
    experience: float = 0.25
    education: float = 0.15
    location: float = 0.10
    history: float = 0.10

    @model_validator(mode="after")
    def weights_sum_to_one(self):
        _check_sum(
            self.skills + self.experience + self.education + self.location + self.history,
            "Fit",
        )
        return self

    def as_dict(self) -> Dict[str, float]:
        return self.model_dump()


class BucketThresholds(BaseModel):
    """
    Upper bounds for the ordinal buckets used by the preference classifier.

    Salary and stipend bounds are exclusive (value < bound); duration bounds are
    inclusive (months <= bound). Anything past the last bound is the top bucket.
    """

    salary: Tuple[float, float, float] = (300000, 600000, 1000000)
    stipend: Tuple[float, float, float] = (5000, 15000, 30000)
    duration_months: Tuple[float, float, float] = (2, 4, 6)

    @model_validator(mode="after")
    def thresholds_ascending(self):
        for name in ("salary", "stipend", "duration_months"):
            bounds = getattr(self, name)
            if list(bounds) != sorted(bounds):
                raise ValueError(f"{name} thresholds must be ascending, got {bounds}")
        return self


class DecisionParams(BaseModel):
    """
    Fit-scorer decision function constants.

    score = sigmoid(steepness * (linear_share * linear + (1 - linear_share) * rbf - midpoint))
    rbf = exp(-rbf_gamma * Σ(feature - 1)^2)
    """

    linear_share: float = 0.7
    rbf_gamma: float = 1.5
    sigmoid_steepness: float = 8.0
    sigmoid_midpoint: float = 0.5
    strength_threshold: float = 0.8
    gap_threshold: float = 0.6


class EngineConfig(BaseModel):
    """Configuration for the three scorers and the facade."""

    # -------------------------------------------------------------------------
    # Similarity recommender (k-nearest neighbours)
    # -------------------------------------------------------------------------

    similarity_weights: SimilarityWeights = SimilarityWeights()

    # Month span used to normalise the internship duration distance.
    duration_span_months: float = 12.0

    # Default number of neighbours when the caller passes no k.
    default_k: int = 5

    # -------------------------------------------------------------------------
    # Preference classifier (naive Bayes)
    # -------------------------------------------------------------------------

    buckets: BucketThresholds = BucketThresholds()

    # Score given to popularity fallback results (no history to learn from).
    popular_fallback_score: int = 50

    # -------------------------------------------------------------------------
    # Fit scorer
    # -------------------------------------------------------------------------

    fit_weights: FitWeights = FitWeights()
    decision: DecisionParams = DecisionParams()

    # Max bonus for listing more skills than the position requires, and its per-skill step.
    extra_skills_bonus_cap: float = 0.15
    extra_skills_bonus_step: float = 0.015
    # Penalty per required skill with neither an exact nor a partial match.
    missing_skill_penalty: float = 0.05

    # -------------------------------------------------------------------------
    # Pools
    # The recommenders reject pools larger than max_pool_size; the facade caps
    # what it fetches for them at the per-operation limits. Screening is unbounded.
    # -------------------------------------------------------------------------

    max_pool_size: int = 500
    similar_pool_limit: int = 100
    personalized_pool_limit: int = 200

    @model_validator(mode="after")
    def pool_limits_fit(self):
        if max(self.similar_pool_limit, self.personalized_pool_limit) > self.max_pool_size:
            raise ValueError("Pool limits must not exceed max_pool_size")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "EngineConfig":
        """Create config from a (possibly sectioned) dictionary, e.g. loaded from JSON."""
        flat = {}
        if "similarity" in config_dict:
            section = dict(config_dict["similarity"])
            if "weights" in section:
                flat["similarity_weights"] = section.pop("weights")
            flat.update(section)
        if "preference" in config_dict:
            section = dict(config_dict["preference"])
            if "buckets" in section:
                flat["buckets"] = section.pop("buckets")
            flat.update(section)
        if "screening" in config_dict:
            section = dict(config_dict["screening"])
            if "weights" in section:
                flat["fit_weights"] = section.pop("weights")
            if "decision" in section:
                flat["decision"] = section.pop("decision")
            flat.update(section)
        if "pools" in config_dict:
            flat.update(config_dict["pools"])
        allowed = set(cls.model_fields)
        flat.update({k: v for k, v in config_dict.items() if k in allowed})
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = EngineConfig()


def resolve_config(config: Optional["EngineConfig"]) -> "EngineConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG


def load_config(path: Union[Path, str, None]) -> EngineConfig:
    """Load an EngineConfig from a JSON file; None returns the defaults."""
    if path is None:
        return DEFAULT_CONFIG
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path) as f:
        return EngineConfig.from_dict(json.load(f))
