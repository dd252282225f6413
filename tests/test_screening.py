"""
Fit Scorer Tests

Candidate vs position scoring: five sub-features, the linear + RBF decision
function, score bands, and explanations.

Reference pair:
---------------
- candidate: skills {python, sql}, experience "2-3", degree "bachelor", Bangalore
- position:  skills {python, sql, docker}, experience "2-3", "bachelor",
  Bangalore, on-site
- expected:  skills 2/3 - 0.05 missing penalty, everything else matches

Run:
----
    pytest tests/test_screening.py -v
"""

import pytest

from match_engine.models import Candidate, EngineConfig, FitBand, LocationMode, ensure_position
from match_engine.screening import (
    classify_candidate,
    classify_score,
    decision_function,
    extract_fit_features,
    screen_candidates,
)
from match_engine.screening.features import (
    education_score,
    experience_score,
    location_score,
    match_skills,
)

DOCKER_JOB = {
    "id": "job_docker",
    "skills": ["python", "sql", "docker"],
    "experience_level": "2-3",
    "education": ["bachelor"],
    "location": "Bangalore",
    "location_mode": "on-site",
}


@pytest.fixture
def docker_job():
    return ensure_position(DOCKER_JOB)


class TestReferencePair:
    """The documented candidate/position pair."""

    def test_sub_features(self, candidates, docker_job):
        features = extract_fit_features(candidates["cand_match"], docker_job)
        assert 0.5 <= features["skills"] <= 0.7
        assert features["experience"] == 1.0
        assert features["education"] == 1.0
        assert features["location"] == 1.0

    def test_band_and_explanation(self, candidates, docker_job):
        result = classify_candidate(candidates["cand_match"], docker_job)
        assert result.band in (FitBand.GOOD, FitBand.EXCELLENT)
        assert "Missing required skills: docker" in result.explanation.gaps
        assert "Relevant experience" in result.explanation.strengths
        assert "Educational qualifications met" in result.explanation.strengths
        assert "Location compatible" in result.explanation.strengths
        assert result.feature_scores["skills"] == 62

    def test_result_fields_consistent(self, candidates, docker_job):
        result = classify_candidate(candidates["cand_match"], docker_job)
        info = classify_score(result.score)
        assert result.badge == info.badge
        assert result.recommendation == info.recommendation
        assert result.confidence == info.confidence
        assert 0.0 < result.raw_score < 1.0
        assert result.item.id == "cand_match"


class TestSubFeatures:
    """Individual sub-feature scores."""

    def test_match_skills_partial(self):
        exact, partial, missing = match_skills(["React Native", "SQL"], ["react", "sql", "go"])
        assert exact == ["sql"]
        assert partial == ["react"]
        assert missing == ["go"]

    def test_no_required_skills(self, candidates):
        position = ensure_position({"id": "p"})
        assert extract_fit_features(candidates["cand_weak"], position)["skills"] == 1.0

    def test_candidate_without_skills(self, docker_job):
        features = extract_fit_features(Candidate(id="c"), docker_job)
        assert features["skills"] == 0.0

    @pytest.mark.parametrize("user,required,expected", [
        ("2-3", None, 1.0),
        (None, "2-3", 0.0),
        ("2-3", "2-3", 1.0),
        ("3-5", "2-3", 0.85),
        ("10+", "2-3", 0.75),
        ("1-2", "2-3", 0.65),
        ("fresher", "2-3", 0.15),
    ])
    def test_experience_score(self, user, required, expected):
        assert experience_score(user, required) == pytest.approx(expected)

    @pytest.mark.parametrize("degrees,required,expected", [
        (["bachelor"], [], 1.0),
        ([], ["bachelor"], 0.5),
        (["diploma"], ["any graduate"], 1.0),
        (["M.Tech / mtech"], ["bachelor"], 1.0),
        (["Some course"], ["bachelor"], 0.4),
        (["diploma"], ["master"], 0.5),
    ])
    def test_education_score(self, degrees, required, expected):
        assert education_score(degrees, required) == pytest.approx(expected)

    @pytest.mark.parametrize("user,job,mode,expected", [
        ("Pune", "Bangalore", LocationMode.REMOTE, 1.0),
        ("Pune", "Bangalore", LocationMode.HYBRID, 1.0),
        (None, "Bangalore", LocationMode.ON_SITE, 0.7),
        ("bangalore", "Bangalore", LocationMode.ON_SITE, 1.0),
        ("Bangalore", "Bangalore Urban", LocationMode.ON_SITE, 0.9),
        ("Pune", "Bangalore", LocationMode.ON_SITE, 0.4),
    ])
    def test_location_score(self, user, job, mode, expected):
        assert location_score(user, job, mode) == pytest.approx(expected)

    def test_history_score_counts_profile_sections(self, candidates, docker_job):
        assert extract_fit_features(candidates["cand_strong"], docker_job)["history"] == pytest.approx(1.0)
        assert extract_fit_features(candidates["cand_match"], docker_job)["history"] == pytest.approx(0.9)
        assert extract_fit_features(Candidate(id="c"), docker_job)["history"] == pytest.approx(0.7)


class TestDecisionFunction:
    """Linear + RBF blend through a sigmoid."""

    BASE = {"skills": 0.5, "experience": 0.7, "education": 0.6, "location": 0.9, "history": 0.8}

    @pytest.mark.parametrize("feature", ["skills", "experience", "education", "location", "history"])
    def test_monotonic_in_each_feature(self, feature):
        previous = -1.0
        for step in range(11):
            features = dict(self.BASE, **{feature: step / 10})
            score = decision_function(features)
            assert score >= previous
            previous = score

    def test_perfect_candidate(self):
        features = {name: 1.0 for name in self.BASE}
        assert decision_function(features) == pytest.approx(0.982, abs=1e-3)

    def test_bounds(self):
        zero = {name: 0.0 for name in self.BASE}
        assert 0.0 < decision_function(zero) < 0.05


class TestBands:
    """Score -> band mapping."""

    @pytest.mark.parametrize("score,band", [
        (100, FitBand.EXCELLENT),
        (85, FitBand.EXCELLENT),
        (84, FitBand.GOOD),
        (70, FitBand.GOOD),
        (69, FitBand.AVERAGE),
        (55, FitBand.AVERAGE),
        (54, FitBand.BELOW_AVERAGE),
        (40, FitBand.BELOW_AVERAGE),
        (39, FitBand.POOR),
        (0, FitBand.POOR),
    ])
    def test_thresholds(self, score, band):
        assert classify_score(score).band == band

    def test_poor_recommendation(self):
        info = classify_score(10)
        assert info.badge == "Poor Fit"
        assert info.confidence == "low"


class TestScreenCandidates:
    """Ranking every applicant."""

    def test_ranks_are_permutation(self, candidates, job_by_id):
        report = screen_candidates(list(candidates.values()), job_by_id["job_py_blr"])
        assert sorted(r.rank for r in report.candidates) == list(range(1, len(candidates) + 1))
        scores = [r.score for r in report.candidates]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self, candidates, job_by_id):
        base = candidates["cand_match"]
        pool = [base.model_copy(update={"id": f"twin_{i}"}) for i in range(3)]
        report = screen_candidates(pool, job_by_id["job_py_blr"])
        assert [r.item.id for r in report.candidates] == ["twin_0", "twin_1", "twin_2"]
        assert [r.rank for r in report.candidates] == [1, 2, 3]

    def test_stats(self, candidates, job_by_id):
        report = screen_candidates(list(candidates.values()), job_by_id["job_py_blr"])
        stats = report.stats
        assert stats.total == len(candidates)
        assert (
            stats.excellent + stats.good + stats.average + stats.below_average + stats.poor
            == stats.total
        )
        expected_avg = sum(r.score for r in report.candidates) / stats.total
        assert abs(stats.average_score - expected_avg) <= 0.5

    def test_empty_pool(self, job_by_id):
        report = screen_candidates([], job_by_id["job_py_blr"])
        assert report.candidates == []
        assert report.stats.total == 0
        assert report.stats.average_score == 0

    def test_scores_independent_of_pool(self, candidates, job_by_id):
        job = job_by_id["job_py_blr"]
        alone = screen_candidates([candidates["cand_match"]], job).candidates[0].score
        together = screen_candidates(list(candidates.values()), job)
        match = next(r for r in together.candidates if r.item.id == "cand_match")
        assert match.score == alone

    def test_applicant_pool_not_bounded(self, candidates, job_by_id):
        config = EngineConfig(max_pool_size=2, similar_pool_limit=2, personalized_pool_limit=2)
        report = screen_candidates(list(candidates.values()), job_by_id["job_py_blr"], config)
        assert report.stats.total == len(candidates)
