"""
Naive Bayes preference classifier over categorical position tokens.

Models "would this candidate apply?" as a binary event, trained from one
candidate's own history against the current pool. A classifier instance holds
the probability tables for exactly one request and is discarded afterwards.
"""

import logging
import math
from collections import Counter
from typing import Dict, Iterable, List, Set, Union

import numpy as np

from ..errors import UntrainedModelError
from ..features.tokens import tokenize
from ..models.config import DEFAULT_CONFIG, EngineConfig
from ..models.position import Internship, Job

logger = logging.getLogger(__name__)

APPLIED = "applied"
NOT_APPLIED = "not_applied"


def _log(p: float) -> float:
    return math.log(p) if p > 0 else -math.inf


class PreferenceClassifier:
    """
    Two-class (applied / not applied) naive Bayes with Laplace smoothing.

    P(token | class) = (count(token, class) + 1) / (tokens_in_class + |V|)
    where V is the token vocabulary observed across the whole pool.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self.config = config
        self.class_priors: Dict[str, float] = {}
        self.token_probabilities: Dict[str, Dict[str, float]] = {}
        self.vocabulary: Set[str] = set()
        self._trained = False

    @property
    def is_trained(self) -> bool:
        return self._trained

    def tokens(self, position: Union[Job, Internship]) -> List[str]:
        return tokenize(position, self.config.buckets)

    def train(
        self,
        applied_ids: Iterable[str],
        pool: List[Union[Job, Internship]],
    ) -> "PreferenceClassifier":
        """
        Fit priors and smoothed token probabilities.

        Pool items whose id is in applied_ids form the "applied" class; the rest
        form "not applied". Priors are the class fractions of the pool.
        """
        applied_set = set(applied_ids)
        counts = {APPLIED: Counter(), NOT_APPLIED: Counter()}
        class_sizes = {APPLIED: 0, NOT_APPLIED: 0}

        for item in pool:
            label = APPLIED if item.id in applied_set else NOT_APPLIED
            class_sizes[label] += 1
            counts[label].update(self.tokens(item))

        total = len(pool)
        if total:
            self.class_priors = {c: n / total for c, n in class_sizes.items()}
        else:
            self.class_priors = {APPLIED: 0.5, NOT_APPLIED: 0.5}

        self.vocabulary = set(counts[APPLIED]) | set(counts[NOT_APPLIED])
        v = len(self.vocabulary)
        self.token_probabilities = {}
        for label, counter in counts.items():
            denominator = sum(counter.values()) + v
            self.token_probabilities[label] = {
                token: (counter[token] + 1) / denominator for token in self.vocabulary
            }

        self._trained = True
        logger.debug(
            "[naive_bayes] TRAINED pool=%s applied=%s vocabulary=%s",
            total, class_sizes[APPLIED], v,
        )
        return self

    def log_likelihoods(self, position: Union[Job, Internship]) -> np.ndarray:
        """[log P(applied, tokens), log P(not applied, tokens)]; unseen tokens are skipped."""
        if not self._trained:
            raise UntrainedModelError("PreferenceClassifier must be trained before predicting")
        logs = []
        for label in (APPLIED, NOT_APPLIED):
            table = self.token_probabilities[label]
            total = _log(self.class_priors[label])
            for token in self.tokens(position):
                p = table.get(token)
                if p is not None:
                    total += math.log(p)
            logs.append(total)
        return np.array(logs, dtype=float)

    def predict(self, position: Union[Job, Internship]) -> float:
        """P(applied | position) in [0, 1]."""
        logs = self.log_likelihoods(position)
        max_log = logs.max()
        if not np.isfinite(max_log):
            return 0.0
        probs = np.exp(logs - max_log)
        return float(probs[0] / probs.sum())
