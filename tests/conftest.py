"""Shared fixtures: small job/internship catalogues, candidates and histories."""

import pytest

from match_engine import (
    InMemoryApplicationStore,
    InMemoryCandidateStore,
    InMemoryPositionStore,
    MatchEngine,
)
from match_engine.models import Candidate, ensure_positions

JOBS = [
    {
        "id": "job_py_blr",
        "title": "Backend Developer",
        "skills": ["Python", "Django", "SQL"],
        "location": "Bangalore",
        "category": "Engineering",
        "location_mode": "on-site",
        "salary": {"min": 600000, "max": 900000},
        "experience_level": "2-3",
        "education": ["bachelor"],
        "views_count": 40,
        "applications_count": 12,
    },
    {
        "id": "job_py_blr_2",
        "title": "Python Engineer",
        "skills": ["python", "flask", "sql"],
        "location": "bangalore",
        "category": "engineering",
        "location_mode": "on-site",
        "salary": {"min": 650000, "max": 850000},
        "views_count": 10,
        "applications_count": 3,
    },
    {
        "id": "job_java_pune",
        "title": "Java Developer",
        "skills": ["Java", "Spring"],
        "location": "Pune",
        "category": "Engineering",
        "location_mode": "hybrid",
        "salary": {"min": 500000, "max": 700000},
        "views_count": 90,
        "applications_count": 30,
    },
    {
        "id": "job_design_remote",
        "title": "UI Designer",
        "skills": ["Figma", "Sketch"],
        "location": "Mumbai",
        "category": "Design",
        "location_mode": "remote",
        "salary": {"min": 300000, "max": 400000},
        "views_count": 70,
        "applications_count": 5,
    },
    {
        "id": "job_closed",
        "title": "Closed Role",
        "skills": ["Python"],
        "location": "Bangalore",
        "category": "Engineering",
        "status": "closed",
        "views_count": 1000,
    },
]

INTERNSHIPS = [
    {
        "id": "int_ml",
        "title": "ML Intern",
        "skills": ["Python", "Pandas"],
        "location": "Delhi",
        "category": "Data",
        "locationType": "remote",
        "stipend": {"amount": 15000},
        "duration": 3,
        "eligibility": {"year_of_study": "3rd year", "education": ["btech"]},
    },
    {
        "id": "int_ml_long",
        "title": "ML Research Intern",
        "skills": ["Python", "Pandas"],
        "location": "Delhi",
        "category": "Data",
        "locationType": "remote",
        "stipend": {"amount": 15000},
        "duration": 9,
    },
    {
        "id": "int_unpaid",
        "title": "NGO Intern",
        "skills": ["Writing"],
        "location": "Chennai",
        "category": "Content",
        "is_unpaid": True,
        "stipend": {"amount": 2000},
        "duration": 2,
    },
]

CANDIDATES = [
    {
        "id": "cand_match",
        "name": "Asha",
        "skills": ["python", "sql"],
        "experience": "2-3",
        "education": [{"degree": "bachelor"}],
        "location": "Bangalore",
    },
    {
        "id": "cand_strong",
        "name": "Ravi",
        "skills": ["Python", "Django", "SQL", "Docker", "AWS"],
        "experience": "2-3",
        "education": [{"degree": "Bachelor of Technology"}],
        "location": "Bangalore",
        "bio": "Backend engineer",
    },
    {
        "id": "cand_weak",
        "name": "Kiran",
        "skills": ["Photoshop"],
        "experience": "fresher",
        "education": [],
        "location": "Kolkata",
    },
    {"id": "cand_new", "name": "Meera", "skills": ["Java"]},
]

APPLICATIONS = [
    {"candidate_id": "cand_match", "position_id": "job_py_blr", "applied_at": "2026-01-02", "kind": "job"},
    {"candidate_id": "cand_strong", "position_id": "job_py_blr", "applied_at": "2026-01-01", "kind": "job"},
    {"candidate_id": "cand_weak", "position_id": "job_py_blr", "applied_at": "2026-01-03", "kind": "job"},
    {"candidate_id": "cand_match", "position_id": "int_ml", "applied_at": "2026-02-01", "kind": "internship"},
]


@pytest.fixture
def jobs():
    return ensure_positions(JOBS, "job")


@pytest.fixture
def internships():
    return ensure_positions(INTERNSHIPS, "internship")


@pytest.fixture
def job_by_id(jobs):
    return {j.id: j for j in jobs}


@pytest.fixture
def candidates():
    return {c["id"]: Candidate.model_validate(c) for c in CANDIDATES}


@pytest.fixture
def engine():
    positions = [dict(j, kind="job") for j in JOBS] + [dict(i, kind="internship") for i in INTERNSHIPS]
    return MatchEngine(
        positions=InMemoryPositionStore(positions),
        candidates=InMemoryCandidateStore(CANDIDATES),
        applications=InMemoryApplicationStore(APPLICATIONS),
    )


@pytest.fixture
def raw_records():
    """Store-shaped dicts, for building engines with modified data."""
    return {
        "positions": JOBS + [dict(i, kind="internship") for i in INTERNSHIPS],
        "candidates": CANDIDATES,
        "applications": APPLICATIONS,
    }
