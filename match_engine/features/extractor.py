"""
Feature extraction: position or candidate record -> FeatureVector.

Shared by the similarity recommender (distance over vectors) and the centroid
profile. Missing numeric fields become 0 and missing labels become empty; an
incomplete record is still scoreable, it just matches less.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from ..models.candidate import Candidate
from ..models.position import Internship, Job, LocationMode, PositionKind
from ..utils.similarity import normalize_labels


class FeatureVector(BaseModel):
    """
    Normalised representation of one position (or a synthesised profile).

    position_id: empty for candidates and synthesised profiles.

    compensation: salary midpoint or stipend amount (compared relatively, so
    the raw magnitude is kept). duration: months, internships only.
    Labels are lowercased so comparisons are case-insensitive.
    """

    model_config = ConfigDict(frozen=True)

    position_id: str = ""
    kind: PositionKind = PositionKind.JOB
    compensation: float = 0.0
    duration: float = 0.0
    location: str = ""
    category: str = ""
    skills: frozenset = frozenset()
    location_mode: str = LocationMode.ON_SITE.value
    experience_level: str = ""


def experience_bucket(label: Optional[str]) -> str:
    """Collapse free-form experience labels into entry / mid / senior / executive."""
    lvl = (label or "").strip().lower()
    if not lvl:
        return ""
    if "entry" in lvl or "fresher" in lvl:
        return "entry"
    if "mid" in lvl:
        return "mid"
    if "senior" in lvl:
        return "senior"
    if "executive" in lvl:
        return "executive"
    return lvl


def extract_features(position: Union[Job, Internship]) -> FeatureVector:
    """Feature vector for a job or internship."""
    return FeatureVector(
        position_id=position.id,
        kind=PositionKind(position.kind),
        compensation=max(0.0, float(position.compensation_magnitude() or 0.0)),
        duration=max(0.0, float(position.duration_months() or 0.0)),
        location=(position.location or "").strip().lower(),
        category=(position.category or "").strip().lower(),
        skills=normalize_labels(position.skills),
        location_mode=position.location_mode.value,
        experience_level=experience_bucket(position.experience_requirement()),
    )


def extract_candidate_features(
    candidate: Candidate,
    kind: PositionKind = PositionKind.JOB,
) -> FeatureVector:
    """Feature vector for a candidate; position-only dimensions stay at their defaults."""
    return FeatureVector(
        kind=kind,
        location=(candidate.location or "").strip().lower(),
        skills=normalize_labels(candidate.skills),
        experience_level=experience_bucket(candidate.experience),
    )
