"""
Categorical tokenisation for the preference classifier.

Continuous compensation and duration are collapsed into four ordinal buckets so
that a handful of applications is enough to learn from them.
"""

from typing import List, Sequence, Union

from ..models.config import BucketThresholds, DEFAULT_CONFIG
from ..models.position import Internship, Job

COMPENSATION_BUCKETS = ("low", "medium", "high", "very-high")
DURATION_BUCKETS = ("short", "medium", "long", "very-long")


def _bucket(value: float, bounds: Sequence[float], labels: Sequence[str], inclusive: bool) -> str:
    for bound, label in zip(bounds, labels):
        if (value <= bound) if inclusive else (value < bound):
            return label
    return labels[-1]


def salary_bucket(salary: float, buckets: BucketThresholds = DEFAULT_CONFIG.buckets) -> str:
    return _bucket(salary, buckets.salary, COMPENSATION_BUCKETS, inclusive=False)


def stipend_bucket(stipend: float, buckets: BucketThresholds = DEFAULT_CONFIG.buckets) -> str:
    return _bucket(stipend, buckets.stipend, COMPENSATION_BUCKETS, inclusive=False)


def duration_bucket(months: float, buckets: BucketThresholds = DEFAULT_CONFIG.buckets) -> str:
    return _bucket(months, buckets.duration_months, DURATION_BUCKETS, inclusive=True)


def _job_tokens(job: Job, buckets: BucketThresholds) -> List[str]:
    tokens = []
    if job.job_type:
        tokens.append(f"type:{job.job_type.lower()}")
    if job.salary and job.salary.min:
        tokens.append(f"salary:{salary_bucket(job.salary.min, buckets)}")
    return tokens


def _internship_tokens(internship: Internship, buckets: BucketThresholds) -> List[str]:
    tokens = []
    if internship.duration:
        tokens.append(f"duration:{duration_bucket(internship.duration, buckets)}")
    if internship.is_unpaid:
        tokens.append("stipend:unpaid")
    elif internship.stipend and internship.stipend.amount:
        tokens.append(f"stipend:{stipend_bucket(internship.stipend.amount, buckets)}")
    return tokens


_KIND_TOKENS = {
    "job": _job_tokens,
    "internship": _internship_tokens,
}


def tokenize(
    position: Union[Job, Internship],
    buckets: BucketThresholds = DEFAULT_CONFIG.buckets,
) -> List[str]:
    """
    Feature tokens for a position, e.g. ["skill:python", "location:pune", "salary:medium"].

    Salary is bucketed on the published minimum. An unpaid internship always
    yields "stipend:unpaid", never an amount bucket.
    """
    tokens = [f"skill:{s.strip().lower()}" for s in position.skills]
    if position.location:
        tokens.append(f"location:{position.location.strip().lower()}")
    tokens.append(f"location_mode:{position.location_mode.value}")
    tokens.extend(_KIND_TOKENS[position.kind](position, buckets))
    return tokens
