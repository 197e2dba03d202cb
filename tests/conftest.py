"""Pytest configuration and fixtures for zoo_api tests."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from zoo_api.app.core.store import ZooStore
from zoo_api.app.main import create_app
from zoo_api.app.models import Animal, Enclosure, EnclosureType, Gender, new_id


@pytest.fixture
def store():
    """Empty in-memory store."""
    return ZooStore()


@pytest.fixture
def make_animal():
    """Factory for animals that are not yet housed anywhere."""

    def _make(name: str = "Simba", species: str = "Lion") -> Animal:
        return Animal(
            id=new_id(),
            species=species,
            name=name,
            birth_date=date(2021, 6, 1),
            gender=Gender.MALE,
            favorite_food="Meat",
        )

    return _make


@pytest.fixture
def make_enclosure():
    """Factory for empty carnivore enclosures."""

    def _make(capacity: int = 2, area_m2: float = 100.0, enclosure_type=EnclosureType.CARNIVORE) -> Enclosure:
        return Enclosure(new_id(), enclosure_type, area_m2, capacity)

    return _make


@pytest.fixture
def client(store):
    """Test client bound to an unseeded application using ``store``."""
    app = create_app(store=store, seed=False)
    with TestClient(app) as test_client:
        yield test_client
