"""
Position models: a tagged variant of Job and Internship postings.

Both kinds share skills, location, category and location mode; they differ in how
compensation, duration and eligibility are expressed. Scorers go through the
capability methods (compensation_magnitude, duration_months, ...) instead of
branching on the kind.
"""

import logging
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator

logger = logging.getLogger(__name__)


class PositionKind(str, Enum):
    JOB = "job"
    INTERNSHIP = "internship"


class LocationMode(str, Enum):
    ON_SITE = "on-site"
    REMOTE = "remote"
    HYBRID = "hybrid"

    @classmethod
    def parse(cls, value: Any) -> "LocationMode":
        """Lenient parse; empty or unrecognised values are treated as on-site."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.REMOTE if value else cls.ON_SITE
        text = str(value or "").strip().lower().replace("_", "-")
        if text in _LOCATION_MODE_ALIASES:
            return _LOCATION_MODE_ALIASES[text]
        if text:
            logger.debug("[position] UNKNOWN_LOCATION_MODE value=%s treated as on-site", value)
        return cls.ON_SITE

    @property
    def location_independent(self) -> bool:
        return self is not LocationMode.ON_SITE


_LOCATION_MODE_ALIASES = {
    "on-site": LocationMode.ON_SITE,
    "onsite": LocationMode.ON_SITE,
    "on site": LocationMode.ON_SITE,
    "office": LocationMode.ON_SITE,
    "in-office": LocationMode.ON_SITE,
    "remote": LocationMode.REMOTE,
    "work from home": LocationMode.REMOTE,
    "wfh": LocationMode.REMOTE,
    "hybrid": LocationMode.HYBRID,
}


class SalaryRange(BaseModel):
    min: float = 0
    max: float = 0

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


class Stipend(BaseModel):
    amount: float = 0
    period: str = "month"


class Eligibility(BaseModel):
    """Internship eligibility: academic year and accepted education."""

    year_of_study: Optional[str] = None
    education: List[str] = Field(default_factory=list)


class _PositionBase(BaseModel):
    """
    Fields shared by jobs and internships.

    All fields except id are optional so partial store records remain scoreable.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    title: str = ""
    skills: List[str] = Field(default_factory=list)
    location: str = ""
    category: str = ""
    location_mode: LocationMode = Field(
        default=LocationMode.ON_SITE,
        validation_alias=AliasChoices("location_mode", "locationType", "remote"),
    )
    status: str = "active"
    views_count: int = 0
    applications_count: int = 0

    @field_validator("location_mode", mode="before")
    @classmethod
    def _parse_location_mode(cls, value):
        return LocationMode.parse(value)

    @field_validator("skills", mode="before")
    @classmethod
    def _skills_list(cls, value):
        if value is None:
            return []
        return [s for s in value if isinstance(s, str) and s.strip()]

    @field_validator("title", "location", "category", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return value or ""

    @property
    def is_active(self) -> bool:
        return self.status == "active"


class Job(_PositionBase):
    kind: Literal["job"] = "job"
    salary: Optional[SalaryRange] = None
    experience_level: Optional[str] = None
    education: List[str] = Field(default_factory=list)
    job_type: str = ""

    def compensation_magnitude(self) -> float:
        """Salary midpoint, 0 when no salary is published."""
        return self.salary.midpoint if self.salary else 0.0

    def duration_months(self) -> Optional[float]:
        return None

    def experience_requirement(self) -> Optional[str]:
        return self.experience_level

    def education_requirement(self) -> List[str]:
        return self.education


class Internship(_PositionBase):
    kind: Literal["internship"] = "internship"
    stipend: Optional[Stipend] = None
    is_unpaid: bool = False
    duration: Optional[float] = None
    eligibility: Optional[Eligibility] = None

    def compensation_magnitude(self) -> float:
        """Stipend amount; unpaid internships are 0."""
        if self.is_unpaid or not self.stipend:
            return 0.0
        return self.stipend.amount

    def duration_months(self) -> Optional[float]:
        return self.duration or 0.0

    def experience_requirement(self) -> Optional[str]:
        return self.eligibility.year_of_study if self.eligibility else None

    def education_requirement(self) -> List[str]:
        return self.eligibility.education if self.eligibility else []


Position = Annotated[Union[Job, Internship], Field(discriminator="kind")]

_position_adapter = TypeAdapter(Position)


def ensure_position(
    item: Union[Dict[str, Any], Job, Internship],
    kind: Union[PositionKind, str, None] = None,
) -> Union[Job, Internship]:
    """
    Convert a dict to a Job or Internship.

    When the dict carries no "kind" tag, the given kind (default job) is applied.
    """
    if not isinstance(item, dict):
        return item
    if "kind" not in item:
        item = {**item, "kind": PositionKind(kind or PositionKind.JOB).value}
    return _position_adapter.validate_python(item)


def ensure_positions(
    items: List[Union[Dict[str, Any], Job, Internship]],
    kind: Union[PositionKind, str, None] = None,
) -> List[Union[Job, Internship]]:
    """Convert list of dicts or positions to list of position models."""
    return [ensure_position(item, kind) for item in items]
