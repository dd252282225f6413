"""Data models for the matching engine."""

from .application import ApplicationRecord, applied_position_ids, ensure_applications
from .candidate import Candidate, Education, ensure_candidates
from .config import (
    DEFAULT_CONFIG,
    BucketThresholds,
    DecisionParams,
    EngineConfig,
    FitWeights,
    SimilarityWeights,
    load_config,
    resolve_config,
)
from .position import (
    Eligibility,
    Internship,
    Job,
    LocationMode,
    Position,
    PositionKind,
    SalaryRange,
    Stipend,
    ensure_position,
    ensure_positions,
)
from .scoring import (
    Explanation,
    FitBand,
    FitResult,
    PersonalizedResults,
    ScoredResult,
    ScoringMethod,
    ScreeningReport,
    ScreeningStats,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ApplicationRecord",
    "BucketThresholds",
    "Candidate",
    "DecisionParams",
    "Education",
    "Eligibility",
    "EngineConfig",
    "Explanation",
    "FitBand",
    "FitResult",
    "FitWeights",
    "Internship",
    "Job",
    "LocationMode",
    "PersonalizedResults",
    "Position",
    "PositionKind",
    "SalaryRange",
    "ScoredResult",
    "ScoringMethod",
    "ScreeningReport",
    "ScreeningStats",
    "SimilarityWeights",
    "Stipend",
    "applied_position_ids",
    "ensure_applications",
    "ensure_candidates",
    "ensure_position",
    "ensure_positions",
    "load_config",
    "resolve_config",
]
