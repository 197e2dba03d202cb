"""Tests for the Enclosure entity and its capacity invariant."""

import random
import threading

import pytest

from zoo_api.app.models import CapacityExceeded, Enclosure, EnclosureType, new_id


class TestEnclosureConstruction:
    """Test cases for creating enclosures."""

    def test_new_enclosure_is_empty(self, make_enclosure):
        enclosure = make_enclosure(capacity=3, area_m2=250.5)

        assert enclosure.animals == ()
        assert enclosure.capacity == 3
        assert enclosure.area_m2 == 250.5
        assert enclosure.type is EnclosureType.CARNIVORE
        assert enclosure.can_add()

    def test_type_is_coerced_from_string(self):
        enclosure = Enclosure(new_id(), "aviary", 40, 5)
        assert enclosure.type is EnclosureType.AVIARY

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_non_positive_capacity_is_rejected(self, capacity):
        with pytest.raises(ValueError, match="Capacity must be positive"):
            Enclosure(new_id(), EnclosureType.HERBIVORE, 100, capacity)

    def test_fractional_capacity_is_rejected(self):
        with pytest.raises(ValueError, match="integer"):
            Enclosure(new_id(), EnclosureType.HERBIVORE, 100, 2.5)

    @pytest.mark.parametrize("area", [0, -10.0])
    def test_non_positive_area_is_rejected(self, area):
        with pytest.raises(ValueError, match="Area must be positive"):
            Enclosure(new_id(), EnclosureType.HERBIVORE, area, 2)

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValueError):
            Enclosure(new_id(), "swamp", 100, 2)


class TestEnclosureResidents:
    """Test cases for adding and removing animals."""

    def test_fill_to_capacity_then_reject(self, make_enclosure, make_animal):
        enclosure = make_enclosure(capacity=2)
        a, b, c = make_animal("A"), make_animal("B"), make_animal("C")

        enclosure.add_animal(a)
        assert enclosure.animals == (a.id,)
        assert enclosure.can_add()

        enclosure.add_animal(b)
        assert enclosure.animals == (a.id, b.id)
        assert not enclosure.can_add()

        with pytest.raises(CapacityExceeded) as exc_info:
            enclosure.add_animal(c)
        assert exc_info.value.capacity == 2
        assert exc_info.value.enclosure_id == enclosure.id
        assert enclosure.animals == (a.id, b.id)

    def test_failed_add_is_repeatable(self, make_enclosure, make_animal):
        enclosure = make_enclosure(capacity=1)
        enclosure.add_animal(make_animal("A"))
        late = make_animal("Late")

        for _ in range(3):
            with pytest.raises(CapacityExceeded):
                enclosure.add_animal(late)
        assert len(enclosure.animals) == 1

    def test_remove_then_remove_again(self, make_enclosure, make_animal):
        enclosure = make_enclosure(capacity=2)
        a, b = make_animal("A"), make_animal("B")
        enclosure.add_animal(a)
        enclosure.add_animal(b)

        enclosure.remove_animal(a)
        assert enclosure.animals == (b.id,)
        assert enclosure.can_add()

        enclosure.remove_animal(a)
        assert enclosure.animals == (b.id,)

    def test_remove_unknown_animal_is_noop(self, make_enclosure, make_animal):
        enclosure = make_enclosure()
        enclosure.add_animal(make_animal("A"))
        before = enclosure.animals

        enclosure.remove_animal(make_animal("Stranger"))

        assert enclosure.animals == before

    def test_adding_resident_twice_keeps_one_entry(self, make_enclosure, make_animal):
        enclosure = make_enclosure(capacity=3)
        a = make_animal("A")
        enclosure.add_animal(a)
        enclosure.add_animal(a)
        assert enclosure.animals == (a.id,)

    def test_add_does_not_touch_back_reference(self, make_enclosure, make_animal):
        enclosure = make_enclosure()
        animal = make_animal()
        enclosure.add_animal(animal)
        assert animal.enclosure_id is None

    def test_animals_view_is_a_snapshot(self, make_enclosure, make_animal):
        enclosure = make_enclosure()
        view = enclosure.animals
        enclosure.add_animal(make_animal())
        assert view == ()

    def test_clean_has_no_effect(self, make_enclosure, make_animal):
        enclosure = make_enclosure()
        enclosure.add_animal(make_animal())
        before = enclosure.to_dict()

        enclosure.clean()

        assert enclosure.to_dict() == before

    def test_random_operations_keep_count_within_bounds(self, make_enclosure, make_animal):
        rng = random.Random(1234)
        enclosure = make_enclosure(capacity=3)
        pool = [make_animal(f"A{i}") for i in range(6)]

        for _ in range(300):
            animal = rng.choice(pool)
            if rng.random() < 0.6:
                expected_ok = enclosure.can_add()
                try:
                    enclosure.add_animal(animal)
                    assert expected_ok
                except CapacityExceeded:
                    assert not expected_ok
            else:
                enclosure.remove_animal(animal)
            count = len(enclosure.animals)
            assert 0 <= count <= enclosure.capacity
            assert enclosure.can_add() == (count < enclosure.capacity)

    def test_to_dict(self, make_enclosure, make_animal):
        enclosure = make_enclosure(capacity=2)
        animal = make_animal()
        enclosure.add_animal(animal)

        data = enclosure.to_dict()

        assert data["id"] == enclosure.id
        assert data["animals"] == [animal.id]
        assert data["free_places"] == 1
        assert data["type"] is EnclosureType.CARNIVORE


class TestEnclosureConcurrency:
    """Concurrent adds must never overfill an enclosure."""

    def test_two_racing_adds_into_single_place(self, make_enclosure, make_animal):
        for _ in range(50):
            enclosure = make_enclosure(capacity=1)
            barrier = threading.Barrier(2)
            results = []

            def add(animal):
                barrier.wait()
                try:
                    enclosure.add_animal(animal)
                    results.append("ok")
                except CapacityExceeded:
                    results.append("full")

            threads = [threading.Thread(target=add, args=(make_animal(n),)) for n in ("A", "B")]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

            assert sorted(results) == ["full", "ok"]
            assert len(enclosure.animals) == 1

    def test_many_threads_fill_exactly_to_capacity(self, make_enclosure, make_animal):
        enclosure = make_enclosure(capacity=5)
        animals = [make_animal(f"A{i}") for i in range(20)]
        failures = []
        lock = threading.Lock()

        def add(animal):
            try:
                enclosure.add_animal(animal)
            except CapacityExceeded:
                with lock:
                    failures.append(animal)

        threads = [threading.Thread(target=add, args=(a,)) for a in animals]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(enclosure.animals) == 5
        assert len(failures) == 15
