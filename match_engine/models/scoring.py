"""
Result models: the only artifacts handed back to the caller.

Constructed fresh on every call; scores are integers in 0-100.
"""

from enum import Enum
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .candidate import Candidate
from .position import Internship, Job


class ScoringMethod(str, Enum):
    KNN = "knn"
    NAIVE_BAYES = "naive_bayes"
    FEATURE_SIMILARITY = "feature_similarity"
    POPULAR = "popular"
    FIT = "fit"


class FitBand(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    BELOW_AVERAGE = "below-average"
    POOR = "poor"


class Explanation(BaseModel):
    strengths: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)


class ScoredResult(BaseModel):
    """A position or candidate with its score for one request."""

    item: Union[Job, Internship, Candidate]
    score: int = Field(ge=0, le=100)
    rank: Optional[int] = None
    method: ScoringMethod
    explanation: Optional[Explanation] = None


class FitResult(ScoredResult):
    """A candidate's fit for one position, with band and sub-feature breakdown."""

    method: ScoringMethod = ScoringMethod.FIT
    raw_score: float
    band: FitBand
    confidence: str
    badge: str
    recommendation: str
    feature_scores: Dict[str, int] = Field(default_factory=dict)


class ScreeningStats(BaseModel):
    total: int = 0
    excellent: int = 0
    good: int = 0
    average: int = 0
    below_average: int = 0
    poor: int = 0
    average_score: int = 0


class ScreeningReport(BaseModel):
    candidates: List[FitResult]
    stats: ScreeningStats


class PersonalizedResults(BaseModel):
    results: List[ScoredResult]
    based_on: Literal["application_history", "popular"]
