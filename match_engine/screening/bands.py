"""
Fit bands and explanations.

Maps a 0-100 score to a band with its confidence, badge and hiring
recommendation, and turns sub-feature scores into strengths and gaps.
"""

from typing import Dict, List, NamedTuple, Tuple

from ..models.config import DEFAULT_CONFIG, EngineConfig
from ..models.scoring import FitBand


class BandInfo(NamedTuple):
    band: FitBand
    confidence: str
    badge: str
    recommendation: str


# Lower score bound (inclusive) for each band, highest first.
BANDS: Tuple[Tuple[int, BandInfo], ...] = (
    (85, BandInfo(FitBand.EXCELLENT, "high", "Excellent Fit",
                  "Strongly recommended - Schedule interview immediately")),
    (70, BandInfo(FitBand.GOOD, "high", "Good Fit",
                  "Recommended - Good candidate worth interviewing")),
    (55, BandInfo(FitBand.AVERAGE, "medium", "Average Fit",
                  "Consider - Review profile carefully before decision")),
    (40, BandInfo(FitBand.BELOW_AVERAGE, "medium", "Below Average",
                  "Weak candidate - Consider only if few applicants")),
    (0, BandInfo(FitBand.POOR, "low", "Poor Fit",
                 "Not recommended - Skills and experience gap too large")),
)

# (strength text, gap text); None means the feature never reports that side.
_EXPLANATIONS = {
    "skills": ("Strong skill match", "Missing key skills"),
    "experience": ("Relevant experience", "Limited experience"),
    "education": ("Educational qualifications met", "Education requirements not fully met"),
    "location": ("Location compatible", None),
}


def classify_score(score: int) -> BandInfo:
    for lower, info in BANDS:
        if score >= lower:
            return info
    return BANDS[-1][1]


def explain(
    features: Dict[str, float],
    missing_skills: List[str],
    config: EngineConfig = DEFAULT_CONFIG,
) -> Tuple[List[str], List[str]]:
    """
    Strengths (feature >= strength threshold) and gaps (feature < gap threshold).

    Required skills with no exact or partial match are listed as an extra gap.
    """
    d = config.decision
    strengths, gaps = [], []
    for name, (strength, gap) in _EXPLANATIONS.items():
        value = features[name]
        if value >= d.strength_threshold:
            strengths.append(strength)
        elif value < d.gap_threshold and gap:
            gaps.append(gap)
    if missing_skills:
        gaps.append("Missing required skills: " + ", ".join(missing_skills))
    return strengths, gaps
