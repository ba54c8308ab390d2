"""
Animal API: In-Memory Store Unit Tests
======================================

What:  Tests for InMemoryAnimalStore: the record contract, auto-assigned ids,
       and behavior under concurrent callers.
How:   Pure in-process tests; no HTTP involved.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from animal_api.exceptions import ConflictError, NotFoundError
from animal_api.schemas.animal import Animal
from animal_api.services.memory_store import InMemoryAnimalStore


def make_animal(animal_id=101, name="panda", animal_class="mammal", legs=4):
    return Animal(id=animal_id, name=name, animal_class=animal_class, legs=legs)


class TestStoreReads:
    """get_all / get_by_id / count."""

    def setup_method(self):
        self.store = InMemoryAnimalStore()

    def test_get_all_empty_store_raises_not_found(self):
        """An empty store is an error, not an empty list."""
        with pytest.raises(NotFoundError, match="No animals found"):
            self.store.get_all()

    def test_get_all_returns_exactly_created_records(self):
        """After creates, get_all holds those records and nothing else, ordered by id."""
        created = [make_animal(7, "owl", "bird", 2), make_animal(3, "frog", "amphibian", 4)]
        for animal in created:
            self.store.create(animal)

        result = self.store.get_all()

        assert [a.id for a in result] == [3, 7]
        assert set(result) == set(created)

    def test_get_by_id_missing_raises_not_found(self):
        with pytest.raises(NotFoundError, match="'999'"):
            self.store.get_by_id(999)

    def test_count_tracks_records(self):
        assert self.store.count() == 0
        self.store.create(make_animal(1))
        self.store.create(make_animal(2))
        assert self.store.count() == 2


class TestStoreCreate:
    """create() with explicit and auto-assigned ids."""

    def setup_method(self):
        self.store = InMemoryAnimalStore()

    def test_create_then_get_returns_record(self):
        animal = make_animal()
        self.store.create(animal)
        assert self.store.get_by_id(101) == animal

    def test_create_returns_stored_record(self):
        stored = self.store.create(make_animal())
        assert stored.id == 101
        assert stored.name == "panda"

    def test_create_duplicate_id_raises_conflict(self):
        """Second create with the same id is rejected and the first record survives."""
        self.store.create(make_animal(name="panda"))

        with pytest.raises(ConflictError, match="already exists"):
            self.store.create(make_animal(name="red panda"))

        assert self.store.get_by_id(101).name == "panda"

    def test_create_zero_id_assigns_incrementing_ids(self):
        first = self.store.create(make_animal(0, "ant", "insect", 6))
        second = self.store.create(make_animal(0, "bee", "insect", 6))

        assert first.id == 1
        assert second.id == 2
        assert self.store.get_by_id(2).name == "bee"

    def test_create_zero_id_skips_taken_ids(self):
        """Auto-assigned ids never overwrite an explicitly created record."""
        self.store.create(make_animal(1, "lion", "mammal", 4))
        self.store.create(make_animal(2, "eagle", "bird", 2))

        assigned = self.store.create(make_animal(0, "ant", "insect", 6))

        assert assigned.id == 3
        assert self.store.get_by_id(1).name == "lion"
        assert self.store.count() == 3


class TestStoreUpdateUpsert:
    """update() never creates; upsert() always succeeds."""

    def setup_method(self):
        self.store = InMemoryAnimalStore()

    def test_update_absent_raises_not_found_and_leaves_store_unchanged(self):
        self.store.create(make_animal(1, "lion", "mammal", 4))

        with pytest.raises(NotFoundError):
            self.store.update(55, make_animal(55, "bear", "mammal", 4))

        assert self.store.count() == 1
        with pytest.raises(NotFoundError):
            self.store.get_by_id(55)

    def test_update_forces_path_id(self):
        self.store.create(make_animal(55, "grizzly bear", "mammal", 4))

        stored = self.store.update(55, make_animal(999, "black bear", "mammal", 4))

        assert stored.id == 55
        assert self.store.get_by_id(55).name == "black bear"
        with pytest.raises(NotFoundError):
            self.store.get_by_id(999)

    def test_upsert_inserts_when_absent(self):
        stored = self.store.upsert(55, make_animal(0, "grizzly bear", "mammal", 4))

        assert stored.id == 55
        assert self.store.get_by_id(55) == make_animal(55, "grizzly bear", "mammal", 4)

    def test_upsert_overwrites_when_present(self):
        self.store.upsert(55, make_animal(55, "grizzly bear", "mammal", 4))
        self.store.upsert(55, make_animal(12, "black bear", "mammal", 4))

        assert self.store.get_by_id(55) == make_animal(55, "black bear", "mammal", 4)
        assert self.store.count() == 1

    def test_upsert_does_not_disturb_auto_ids(self):
        """An upserted id is skipped by later auto-assignment."""
        self.store.upsert(1, make_animal(1, "lion", "mammal", 4))

        assigned = self.store.create(make_animal(0, "ant", "insect", 6))

        assert assigned.id == 2


class TestStoreDelete:

    def setup_method(self):
        self.store = InMemoryAnimalStore()

    def test_delete_then_get_raises_not_found(self):
        self.store.create(make_animal())
        self.store.delete(101)

        with pytest.raises(NotFoundError):
            self.store.get_by_id(101)
        assert self.store.count() == 0

    def test_delete_missing_raises_not_found(self):
        with pytest.raises(NotFoundError):
            self.store.delete(101)


class TestStoreConcurrency:
    """All operations serialize on one lock."""

    def test_concurrent_auto_id_creates_get_unique_ids(self):
        store = InMemoryAnimalStore()

        def create_batch(worker: int):
            return [
                store.create(make_animal(0, f"ant-{worker}-{i}", "insect", 6)).id
                for i in range(50)
            ]

        with ThreadPoolExecutor(max_workers=8) as pool:
            batches = list(pool.map(create_batch, range(8)))

        ids = [animal_id for batch in batches for animal_id in batch]
        assert len(ids) == 400
        assert len(set(ids)) == 400
        assert store.count() == 400

    def test_concurrent_duplicate_creates_admit_exactly_one(self):
        store = InMemoryAnimalStore()

        def try_create(i: int) -> bool:
            try:
                store.create(make_animal(7, f"owl-{i}", "bird", 2))
            except ConflictError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(try_create, range(32)))

        assert results.count(True) == 1
        assert store.count() == 1
