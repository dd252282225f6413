"""
Fit sub-features: five independent scores in [0, 1] for one candidate/position pair.

skills, experience, education, location, history (profile completeness).
"""

from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..features.extractor import extract_candidate_features
from ..models.candidate import Candidate
from ..models.config import DEFAULT_CONFIG, EngineConfig
from ..models.position import Internship, Job, LocationMode
from ..utils.scores import clamp
from ..utils.similarity import normalize_labels

FEATURE_NAMES = ("skills", "experience", "education", "location", "history")

# Year-equivalents for experience and academic-year labels.
EXPERIENCE_YEARS: Dict[str, float] = {
    "fresher": 0,
    "entry": 0,
    "0-1": 0.5,
    "1-2": 1.5,
    "2-3": 2.5,
    "3-5": 4,
    "5-7": 6,
    "7-10": 8.5,
    "10+": 12,
    "senior": 8,
    "mid": 4,
    "executive": 10,
    "1st year": 0,
    "2nd year": 1,
    "3rd year": 2,
    "4th year": 3,
    "final year": 3.5,
    "recent graduate": 0.5,
}

# Ordinal education levels, matched by substring against degree text.
EDUCATION_LEVELS: Dict[str, int] = {
    "high school": 1,
    "12th": 1,
    "diploma": 2,
    "bachelor": 3,
    "graduation": 3,
    "btech": 3,
    "bsc": 3,
    "bca": 3,
    "master": 4,
    "post-graduation": 4,
    "mtech": 4,
    "msc": 4,
    "mca": 4,
    "mba": 4,
    "phd": 5,
    "doctorate": 5,
}


def match_skills(
    candidate_skills: Iterable[str],
    required_skills: Iterable[str],
) -> Tuple[List[str], List[str], List[str]]:
    """
    Split required skills into (exact, partial, missing).

    Partial means one skill name contains the other, e.g. "react" / "react native".
    """
    user = normalize_labels(candidate_skills)
    exact, partial, missing = [], [], []
    for req in sorted(normalize_labels(required_skills)):
        if req in user:
            exact.append(req)
        elif any(req in u or u in req for u in user):
            partial.append(req)
        else:
            missing.append(req)
    return exact, partial, missing


def skills_score(
    candidate: Candidate,
    position: Union[Job, Internship],
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    required = normalize_labels(position.skills)
    if not required:
        return 1.0
    user = extract_candidate_features(candidate).skills
    if not user:
        return 0.0

    exact, partial, missing = match_skills(user, required)
    n = len(required)
    basic = len(exact) / n + 0.5 * len(partial) / n
    bonus = max(0.0, min(config.extra_skills_bonus_cap, (len(user) - n) * config.extra_skills_bonus_step))
    penalty = len(missing) * config.missing_skill_penalty
    return clamp(basic + bonus - penalty)


def experience_years(label: Optional[str]) -> float:
    """Year-equivalent for a label; unknown labels count as 0."""
    return EXPERIENCE_YEARS.get((label or "").strip().lower(), 0)


def experience_score(candidate_label: Optional[str], required_label: Optional[str]) -> float:
    """
    Compare candidate experience to the requirement.

    Exact 1.0; modestly more experienced 0.95-0.98; over-qualified 0.75-0.85;
    under-qualified graded from 0.90 down to a 0.15 floor by years ratio.
    """
    if not required_label:
        return 1.0
    if not candidate_label:
        return 0.0

    user = experience_years(candidate_label)
    req = experience_years(required_label)
    if user == req:
        return 1.0
    if user > req:
        if user <= req * 1.2:
            return 0.98
        if user <= req * 1.5:
            return 0.95
        if user > req * 2:
            return 0.75
        return 0.85

    ratio = user / (req or 1)
    if ratio >= 0.8:
        return 0.90
    if ratio >= 0.7:
        return 0.80
    if ratio >= 0.6:
        return 0.65
    if ratio >= 0.5:
        return 0.50
    if ratio >= 0.3:
        return 0.35
    return max(0.15, ratio * 0.5)


def education_level(text: str) -> int:
    text = (text or "").lower()
    return max((lvl for key, lvl in EDUCATION_LEVELS.items() if key in text), default=0)


def education_score(degrees: List[str], requirements: List[str]) -> float:
    if not requirements:
        return 1.0
    if not degrees:
        return 0.5
    if any("any" in (r or "").lower() for r in requirements):
        return 1.0

    user = max(education_level(d) for d in degrees)
    req = max(education_level(r) for r in requirements)
    if user >= req:
        return 1.0
    if user == 0:
        return 0.4
    return max(0.5, user / req)


def location_score(
    candidate_location: Optional[str],
    position_location: Optional[str],
    mode: LocationMode,
) -> float:
    if mode.location_independent:
        return 1.0
    user = (candidate_location or "").strip().lower()
    job = (position_location or "").strip().lower()
    if not user or not job:
        return 0.7
    if user == job:
        return 1.0
    if user in job or job in user:
        return 0.9
    return 0.4


def history_score(candidate: Candidate) -> float:
    """
    Profile completeness stand-in for behavioural history.

    Base 0.7, +0.1 each for skills, education and a bio/summary.
    """
    score = 0.7
    if candidate.skills:
        score += 0.1
    if candidate.education:
        score += 0.1
    if candidate.has_statement:
        score += 0.1
    return min(1.0, score)


def extract_fit_features(
    candidate: Candidate,
    position: Union[Job, Internship],
    config: EngineConfig = DEFAULT_CONFIG,
) -> Dict[str, float]:
    """All five sub-features for one pair, keyed by FEATURE_NAMES."""
    return {
        "skills": skills_score(candidate, position, config),
        "experience": experience_score(candidate.experience, position.experience_requirement()),
        "education": education_score(
            [e.degree for e in candidate.education], position.education_requirement()
        ),
        "location": location_score(candidate.location, position.location, position.location_mode),
        "history": history_score(candidate),
    }
