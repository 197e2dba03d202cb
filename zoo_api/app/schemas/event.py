"""Pydantic schema for domain events published by the services."""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel


class DomainEventRead(BaseModel):
    name: str
    payload: Dict[str, Any]
    occurred_at: datetime

    model_config = {
        "from_attributes": True,
    }
