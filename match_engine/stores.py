"""
Store abstractions for positions, candidates and application history.

The engine only reads from stores. Implementations: in-memory (tests, embedding
in another service) with JSON-file constructors for local runs.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

from .models.application import ApplicationRecord, ensure_applications
from .models.candidate import Candidate, ensure_candidates
from .models.position import Internship, Job, PositionKind, ensure_positions

PositionT = Union[Job, Internship]


def _load_json_list(path: Union[Path, str]) -> List[Dict[str, Any]]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    with open(path) as f:
        return json.load(f)


class PositionStore(Protocol):
    """Protocol for position (job / internship) lookup."""

    def get_position(self, position_id: str, kind: PositionKind) -> Optional[PositionT]:
        """One position of the given kind by id, or None."""
        ...

    def list_positions(
        self,
        kind: PositionKind,
        active_only: bool = True,
        limit: Optional[int] = None,
        exclude_ids: Optional[List[str]] = None,
    ) -> List[PositionT]:
        """Positions of one kind, optionally active only, capped at limit."""
        ...


class CandidateStore(Protocol):
    def get_candidate(self, candidate_id: str) -> Optional[Candidate]:
        ...

    def get_candidates(self, candidate_ids: List[str]) -> List[Candidate]:
        """Candidates in the order of candidate_ids; unknown ids are skipped."""
        ...


class ApplicationStore(Protocol):
    def applications_for_candidate(
        self, candidate_id: str, kind: PositionKind
    ) -> List[ApplicationRecord]:
        """A candidate's applications of one kind, newest first."""
        ...

    def applications_for_position(
        self, position_id: str, kind: PositionKind
    ) -> List[ApplicationRecord]:
        """Applications to one position, oldest first."""
        ...


class InMemoryPositionStore:
    """Position store over a list of jobs and internships."""

    def __init__(self, positions: List[Union[Dict[str, Any], PositionT]]):
        self._positions = ensure_positions(positions)
        self._by_key = {(p.kind, p.id): p for p in self._positions}

    @classmethod
    def from_json(cls, path: Union[Path, str]) -> "InMemoryPositionStore":
        return cls(_load_json_list(path))

    def get_position(self, position_id: str, kind: PositionKind) -> Optional[PositionT]:
        return self._by_key.get((PositionKind(kind).value, position_id))

    def list_positions(
        self,
        kind: PositionKind,
        active_only: bool = True,
        limit: Optional[int] = None,
        exclude_ids: Optional[List[str]] = None,
    ) -> List[PositionT]:
        kind_value = PositionKind(kind).value
        excluded = set(exclude_ids or [])
        positions = [
            p for p in self._positions
            if p.kind == kind_value
            and (p.is_active or not active_only)
            and p.id not in excluded
        ]
        if limit is not None:
            positions = positions[:limit]
        return positions


class InMemoryCandidateStore:
    def __init__(self, candidates: List[Union[Dict[str, Any], Candidate]]):
        self._by_id = {c.id: c for c in ensure_candidates(candidates)}

    @classmethod
    def from_json(cls, path: Union[Path, str]) -> "InMemoryCandidateStore":
        return cls(_load_json_list(path))

    def get_candidate(self, candidate_id: str) -> Optional[Candidate]:
        return self._by_id.get(candidate_id)

    def get_candidates(self, candidate_ids: List[str]) -> List[Candidate]:
        return [self._by_id[cid] for cid in candidate_ids if cid in self._by_id]


class InMemoryApplicationStore:
    def __init__(self, applications: List[Union[Dict[str, Any], ApplicationRecord]]):
        self._applications = ensure_applications(applications)

    @classmethod
    def from_json(cls, path: Union[Path, str]) -> "InMemoryApplicationStore":
        return cls(_load_json_list(path))

    def applications_for_candidate(
        self, candidate_id: str, kind: PositionKind
    ) -> List[ApplicationRecord]:
        kind = PositionKind(kind)
        apps = [
            a for a in self._applications
            if a.candidate_id == candidate_id and a.kind == kind
        ]
        return sorted(apps, key=lambda a: a.applied_at, reverse=True)

    def applications_for_position(
        self, position_id: str, kind: PositionKind
    ) -> List[ApplicationRecord]:
        kind = PositionKind(kind)
        apps = [
            a for a in self._applications
            if a.position_id == position_id and a.kind == kind
        ]
        return sorted(apps, key=lambda a: a.applied_at)
