"""Tests for the Animal, FeedingSchedule and DomainEvent entities."""

from datetime import date, datetime

import pytest

from zoo_api.app.models import Animal, AnimalStatus, DomainEvent, FeedingSchedule, Gender, new_id


class TestAnimal:

    def test_defaults(self, make_animal):
        animal = make_animal()
        assert animal.status is AnimalStatus.HEALTHY
        assert animal.enclosure_id is None
        assert animal.fed_count == 0
        assert animal.last_fed_at is None

    def test_enums_are_coerced(self):
        animal = Animal(
            id=new_id(),
            species="Zebra",
            name="Marty",
            birth_date=date(2019, 3, 4),
            gender="female",
            favorite_food="Grass",
            status="sick",
        )
        assert animal.gender is Gender.FEMALE
        assert animal.status is AnimalStatus.SICK
        assert not animal.is_healthy

    def test_name_required(self):
        with pytest.raises(ValueError):
            Animal(
                id=new_id(),
                species="Zebra",
                name="",
                birth_date=date(2019, 3, 4),
                gender=Gender.MALE,
                favorite_food="Grass",
            )

    def test_feed_records_time_and_count(self, make_animal):
        animal = make_animal()
        fed_at = datetime(2025, 1, 1, 9, 0)
        animal.feed(fed_at)
        animal.feed(fed_at)
        assert animal.fed_count == 2
        assert animal.last_fed_at == fed_at

    def test_heal_and_sick(self, make_animal):
        animal = make_animal()
        animal.mark_sick()
        assert animal.status is AnimalStatus.SICK
        animal.heal()
        assert animal.is_healthy

    def test_move_to_only_changes_back_reference(self, make_animal, make_enclosure):
        animal = make_animal()
        enclosure = make_enclosure()
        animal.move_to(enclosure.id)
        assert animal.enclosure_id == enclosure.id
        assert enclosure.animals == ()


class TestFeedingSchedule:

    def _feeding(self):
        return FeedingSchedule(
            id=new_id(),
            animal_id=new_id(),
            feeding_time=datetime(2025, 1, 1, 9, 0),
            food_type="Meat",
        )

    def test_mark_done_once(self):
        feeding = self._feeding()
        feeding.mark_done()
        assert feeding.is_done
        with pytest.raises(ValueError, match="already"):
            feeding.mark_done()

    def test_reschedule_pending(self):
        feeding = self._feeding()
        new_time = datetime(2025, 1, 1, 12, 0)
        feeding.reschedule(new_time)
        assert feeding.feeding_time == new_time

    def test_reschedule_done_is_rejected(self):
        feeding = self._feeding()
        feeding.mark_done()
        with pytest.raises(ValueError):
            feeding.reschedule(datetime(2025, 1, 2, 9, 0))


def test_domain_event_to_dict():
    event = DomainEvent(name="animal_moved", payload={"animal_id": "x"})
    data = event.to_dict()
    assert data["name"] == "animal_moved"
    assert data["payload"] == {"animal_id": "x"}
    assert isinstance(data["occurred_at"], datetime)
