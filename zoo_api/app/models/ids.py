"""Identifier factory shared by all entities."""

import uuid


def new_id() -> uuid.UUID:
    """Return a fresh random identifier for an entity."""
    return uuid.uuid4()
