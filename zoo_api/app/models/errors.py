"""
Domain errors.

Services raise these (or a plain ``ValueError`` for malformed input) and
the endpoint layer translates them into HTTP responses.  Both kinds are
synchronous and recoverable by the caller.
"""


class ZooError(Exception):
    """Base class for all domain errors."""


class NotFoundError(ZooError, LookupError):
    """Raised when an entity with the requested identifier does not exist."""

    def __init__(self, kind: str, entity_id) -> None:
        super().__init__(f"{kind} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class CapacityExceeded(ZooError):
    """Raised when an animal is added to an enclosure that is already full.

    Retrying without first freeing a place fails identically.
    """

    def __init__(self, enclosure_id, capacity: int) -> None:
        super().__init__(f"Enclosure {enclosure_id} is full (capacity {capacity})")
        self.enclosure_id = enclosure_id
        self.capacity = capacity
