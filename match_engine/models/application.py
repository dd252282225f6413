"""
Application model: one candidate applying to one position.

Read-only history; used to build a candidate's implicit preference profile.
Built from store dicts via ApplicationRecord.model_validate(d) or ensure_applications().
"""

from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict

from .position import PositionKind


class ApplicationRecord(BaseModel):
    """
    A single application.

    applied_at: ISO timestamp string; sort key, newest first.
    kind: whether position_id refers to a job or an internship.
    """

    model_config = ConfigDict(extra="allow")

    candidate_id: str
    position_id: str
    applied_at: str = ""
    kind: PositionKind = PositionKind.JOB


def ensure_applications(
    items: List[Union[Dict, "ApplicationRecord"]],
) -> List["ApplicationRecord"]:
    """Convert list of dicts or ApplicationRecords to list of ApplicationRecord models."""
    return [
        ApplicationRecord.model_validate(a) if isinstance(a, dict) else a
        for a in items
    ]


def applied_position_ids(applications: List[ApplicationRecord]) -> List[str]:
    """Position ids in history order, deduplicated."""
    seen = set()
    ids = []
    for app in applications:
        if app.position_id and app.position_id not in seen:
            seen.add(app.position_id)
            ids.append(app.position_id)
    return ids
