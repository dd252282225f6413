"""
Position/candidate matching engine

Single entry point for the package:
- models/: positions, candidates, applications, results, EngineConfig
- features/: feature vectors and classifier tokens
- similarity/: k-nearest-neighbour recommender
- preference/: per-request naive Bayes preference classifier
- screening/: explainable candidate fit scorer
- engine: MatchEngine facade over the position, candidate and application stores
"""

from .engine import MatchEngine
from .errors import (
    CandidateNotFoundError,
    MatchEngineError,
    NotFoundError,
    PoolTooLargeError,
    PositionNotFoundError,
    PreconditionError,
    UntrainedModelError,
)
from .features import FeatureVector, extract_features, tokenize
from .models import (
    DEFAULT_CONFIG,
    ApplicationRecord,
    Candidate,
    EngineConfig,
    FitBand,
    FitResult,
    Internship,
    Job,
    LocationMode,
    PersonalizedResults,
    PositionKind,
    ScoredResult,
    ScreeningReport,
    load_config,
)
from .preference import PreferenceClassifier, personalized_ranking, similar_items
from .screening import classify_candidate, screen_candidates
from .similarity import nearest_neighbors, personalized_by_history, weighted_distance
from .stores import InMemoryApplicationStore, InMemoryCandidateStore, InMemoryPositionStore

__all__ = [
    "DEFAULT_CONFIG",
    "ApplicationRecord",
    "Candidate",
    "CandidateNotFoundError",
    "EngineConfig",
    "FeatureVector",
    "FitBand",
    "FitResult",
    "InMemoryApplicationStore",
    "InMemoryCandidateStore",
    "InMemoryPositionStore",
    "Internship",
    "Job",
    "LocationMode",
    "MatchEngine",
    "MatchEngineError",
    "NotFoundError",
    "PersonalizedResults",
    "PoolTooLargeError",
    "PositionKind",
    "PositionNotFoundError",
    "PreconditionError",
    "PreferenceClassifier",
    "ScoredResult",
    "ScreeningReport",
    "UntrainedModelError",
    "classify_candidate",
    "extract_features",
    "load_config",
    "nearest_neighbors",
    "personalized_by_history",
    "personalized_ranking",
    "screen_candidates",
    "similar_items",
    "tokenize",
    "weighted_distance",
]
