"""
Pydantic schema definitions for API payloads.

Each domain (enclosures, animals, feedings, events) defines its own
Pydantic models for request and response bodies.  Schemas are separated
from the domain entities in ``models`` to decouple API representation
from the domain rules.
"""
