"""
Candidate model: an applicant profile matched against positions.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Education(BaseModel):
    model_config = ConfigDict(extra="allow")

    degree: str = ""
    institution: str = ""


class Candidate(BaseModel):
    """
    Applicant profile.

    experience: a label such as "2-3", "senior" or "final year".
    bio / summary: either counts as a completed profile statement.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    title: str = ""
    skills: List[str] = Field(default_factory=list)
    experience: Optional[str] = None
    education: List[Education] = Field(default_factory=list)
    location: Optional[str] = None
    bio: Optional[str] = None
    summary: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def _skills_list(cls, value):
        if value is None:
            return []
        return [s for s in value if isinstance(s, str) and s.strip()]

    @field_validator("education", mode="before")
    @classmethod
    def _education_list(cls, value):
        if value is None:
            return []
        return [{"degree": e} if isinstance(e, str) else e for e in value]

    @property
    def has_statement(self) -> bool:
        return bool((self.bio or "").strip() or (self.summary or "").strip())


def ensure_candidates(
    items: List[Union[Dict[str, Any], "Candidate"]],
) -> List["Candidate"]:
    """Convert list of dicts or Candidates to list of Candidate models."""
    return [
        Candidate.model_validate(c) if isinstance(c, dict) else c
        for c in items
    ]
