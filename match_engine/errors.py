"""
Error taxonomy for the matching engine.

NotFound errors are surfaced to the caller. Precondition errors are programming
errors (untrained classifier, oversized pool) and fail fast. Empty pools and
empty histories are never errors; they degrade to documented fallbacks.
"""


class MatchEngineError(Exception):
    """Base class for all matching engine errors."""


class NotFoundError(MatchEngineError, LookupError):
    """An id did not resolve in the backing store."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class PositionNotFoundError(NotFoundError):
    def __init__(self, position_id: str, kind: str = "position"):
        super().__init__(kind.capitalize(), position_id)


class CandidateNotFoundError(NotFoundError):
    def __init__(self, candidate_id: str):
        super().__init__("Candidate", candidate_id)


class PreconditionError(MatchEngineError):
    """A caller broke a hard precondition of a scorer."""


class UntrainedModelError(PreconditionError):
    """predict() was called on a classifier that has not been trained."""


class PoolTooLargeError(PreconditionError):
    """Input pool exceeds the configured maximum; callers must bound pools themselves."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Pool of {size} items exceeds max_pool_size={limit}")
