"""
Matching engine facade.

Resolves ids through the stores, bounds the pools it fetches, and hands the
records to the three scorers:
- similar_to: nearest neighbours (or token similarity) of one position
- personalized_for: ranking from a candidate's application history
- screen: rank every applicant to one position
- classify_single: fit preview for one candidate / position pair

The facade holds only the stores and the config; every call builds and
discards its own working state.
"""

import logging
from typing import List, Literal, Optional, Union

from .errors import CandidateNotFoundError, PositionNotFoundError
from .models.application import applied_position_ids
from .models.candidate import Candidate
from .models.config import EngineConfig, resolve_config
from .models.position import Internship, Job, PositionKind
from .models.scoring import FitResult, PersonalizedResults, ScoredResult, ScreeningReport
from .preference import personalized_ranking, similar_items
from .screening import classify_candidate, screen_candidates
from .similarity import nearest_neighbors, personalized_by_history
from .stores import ApplicationStore, CandidateStore, PositionStore

logger = logging.getLogger(__name__)

SimilarMethod = Literal["knn", "feature_similarity"]
PersonalizedMethod = Literal["knn", "naive_bayes"]


class MatchEngine:
    """Stateless entry point used by the API layer."""

    def __init__(
        self,
        positions: PositionStore,
        candidates: CandidateStore,
        applications: ApplicationStore,
        config: Optional[EngineConfig] = None,
    ):
        self.positions = positions
        self.candidates = candidates
        self.applications = applications
        self.config = resolve_config(config)

    def _position(self, position_id: str, kind: PositionKind) -> Union[Job, Internship]:
        position = self.positions.get_position(position_id, kind)
        if position is None:
            raise PositionNotFoundError(position_id, PositionKind(kind).value)
        return position

    def _candidate(self, candidate_id: str) -> Candidate:
        candidate = self.candidates.get_candidate(candidate_id)
        if candidate is None:
            raise CandidateNotFoundError(candidate_id)
        return candidate

    def similar_to(
        self,
        target_id: str,
        mode: PositionKind = PositionKind.JOB,
        limit: int = 5,
        method: SimilarMethod = "knn",
    ) -> List[ScoredResult]:
        """Positions most similar to target_id among active positions of the same kind."""
        target = self._position(target_id, mode)
        pool = self.positions.list_positions(
            mode, active_only=True, limit=self.config.similar_pool_limit, exclude_ids=[target_id]
        )
        if method == "feature_similarity":
            return similar_items(target, pool, limit, self.config)
        return nearest_neighbors(target, pool, limit, self.config)

    def personalized_for(
        self,
        candidate_id: str,
        mode: PositionKind = PositionKind.JOB,
        limit: int = 10,
        method: PersonalizedMethod = "knn",
    ) -> PersonalizedResults:
        """
        Personalised ranking from the candidate's application history.

        based_on is "popular" when the candidate has not applied to anything yet.
        """
        self._candidate(candidate_id)
        history_ids = applied_position_ids(
            self.applications.applications_for_candidate(candidate_id, mode)
        )
        pool = self.positions.list_positions(
            mode, active_only=True, limit=self.config.personalized_pool_limit
        )
        logger.info(
            "[personalized] candidate=%s mode=%s method=%s history=%s pool=%s",
            candidate_id, PositionKind(mode).value, method, len(history_ids), len(pool),
        )

        if method == "naive_bayes":
            results = personalized_ranking(history_ids, pool, limit, self.config)
        else:
            history = [
                p for p in (self.positions.get_position(pid, mode) for pid in history_ids)
                if p is not None
            ]
            results = personalized_by_history(history, pool, limit, self.config)
            history_ids = [p.id for p in history]
        based_on = "application_history" if history_ids else "popular"
        return PersonalizedResults(results=results, based_on=based_on)

    def screen(self, position_id: str, mode: PositionKind = PositionKind.JOB) -> ScreeningReport:
        """Rank every candidate who applied to position_id."""
        position = self._position(position_id, mode)
        applicant_ids = list(dict.fromkeys(
            a.candidate_id for a in self.applications.applications_for_position(position_id, mode)
        ))
        applicants = self.candidates.get_candidates(applicant_ids)
        if len(applicants) < len(applicant_ids):
            logger.warning(
                "[screening] APPLICANTS_MISSING position=%s applications=%s resolved=%s",
                position_id, len(applicant_ids), len(applicants),
            )
        return screen_candidates(applicants, position, self.config)

    def classify_single(
        self,
        candidate_id: str,
        position_id: str,
        mode: PositionKind = PositionKind.JOB,
    ) -> FitResult:
        """Fit preview for one pair; same scoring as screen()."""
        return classify_candidate(
            self._candidate(candidate_id), self._position(position_id, mode), self.config
        )
