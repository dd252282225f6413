"""
Candidate screening: score one pair, or rank every applicant to a position.

Each candidate is scored independently; there is no normalisation across the
applicant pool, so a candidate's score does not depend on who else applied.
"""

import logging
from typing import Iterable, List, Union

from ..models.candidate import Candidate
from ..models.config import DEFAULT_CONFIG, EngineConfig
from ..models.position import Internship, Job
from ..models.scoring import Explanation, FitBand, FitResult, ScreeningReport, ScreeningStats
from ..utils.scores import round_half_up, to_percent
from .bands import classify_score, explain
from .decision import decision_function
from .features import extract_fit_features, match_skills

logger = logging.getLogger(__name__)


def classify_candidate(
    candidate: Candidate,
    position: Union[Job, Internship],
    config: EngineConfig = DEFAULT_CONFIG,
) -> FitResult:
    """Explainable 0-100 fit score for one candidate against one position."""
    features = extract_fit_features(candidate, position, config)
    raw = decision_function(features, config)
    score = to_percent(raw)
    info = classify_score(score)
    _, _, missing = match_skills(candidate.skills, position.skills)
    strengths, gaps = explain(features, missing, config)
    return FitResult(
        item=candidate,
        score=score,
        raw_score=raw,
        band=info.band,
        confidence=info.confidence,
        badge=info.badge,
        recommendation=info.recommendation,
        feature_scores={name: to_percent(value) for name, value in features.items()},
        explanation=Explanation(strengths=strengths, gaps=gaps),
    )


def screening_stats(results: List[FitResult]) -> ScreeningStats:
    counts = {band: 0 for band in FitBand}
    for r in results:
        counts[r.band] += 1
    average = sum(r.score for r in results) / len(results) if results else 0.0
    return ScreeningStats(
        total=len(results),
        excellent=counts[FitBand.EXCELLENT],
        good=counts[FitBand.GOOD],
        average=counts[FitBand.AVERAGE],
        below_average=counts[FitBand.BELOW_AVERAGE],
        poor=counts[FitBand.POOR],
        average_score=round_half_up(average),
    )


def screen_candidates(
    candidates: Iterable[Candidate],
    position: Union[Job, Internship],
    config: EngineConfig = DEFAULT_CONFIG,
) -> ScreeningReport:
    """
    Score every candidate, sort by score descending and assign ranks 1..N.

    Equal scores keep their input order. The applicant pool is not size-bounded:
    every applicant is screened.
    """
    pool = list(candidates)
    results = [classify_candidate(c, position, config) for c in pool]
    results.sort(key=lambda r: r.score, reverse=True)
    for i, r in enumerate(results):
        r.rank = i + 1
    stats = screening_stats(results)
    logger.info(
        "[screening] SCREENED position=%s total=%s average_score=%s",
        position.id, stats.total, stats.average_score,
    )
    return ScreeningReport(candidates=results, stats=stats)
