"""
Animal API: In-Memory Record Store
==================================

What:  AnimalStore backed by a dict and a single threading.Lock.
How:   Every public method takes the lock for its whole body, reads and
       writes alike. There is no reader/writer split and no operation
       acquires the lock twice, so callers see each operation as atomic.
Who:   Created by create_app() and shared by all requests of that app.

Lifetime:
    Records live as long as the process. Nothing is written to disk.

Thread Safety:
    The store can be reached from the event loop and from worker threads
    (FastAPI's thread pool, or any thread holding the instance), so a
    threading.Lock guards the map rather than an asyncio one. Operations
    never block on I/O while holding it.
"""

import logging
import threading
from typing import Dict, List

from animal_api.exceptions import ConflictError, NotFoundError
from animal_api.schemas.animal import Animal
from animal_api.services.store_base import AnimalStore

logger = logging.getLogger(__name__)


class InMemoryAnimalStore(AnimalStore):
    """
    Volatile AnimalStore implementation.

    Auto-assigned ids:
        create() with id 0 takes the next value of an internal counter
        starting at 1. Ids already taken by explicit creates or upserts are
        skipped, so an assigned id never overwrites an existing record.
    """

    def __init__(self) -> None:
        self._animals: Dict[int, Animal] = {}
        self._lock = threading.Lock()
        self._next_id = 1

    def get_all(self) -> List[Animal]:
        with self._lock:
            if not self._animals:
                raise NotFoundError(resource="animal", message="No animals found")
            return [self._animals[key] for key in sorted(self._animals)]

    def get_by_id(self, animal_id: int) -> Animal:
        with self._lock:
            animal = self._animals.get(animal_id)
            if animal is None:
                raise NotFoundError(resource="animal", resource_id=str(animal_id))
            return animal

    def create(self, animal: Animal) -> Animal:
        with self._lock:
            if animal.id == 0:
                animal = animal.with_id(self._allocate_id())
            elif animal.id in self._animals:
                raise ConflictError(resource="animal", resource_id=str(animal.id))

            self._animals[animal.id] = animal
            logger.debug("Created animal %d (%s)", animal.id, animal.name)
            return animal

    def update(self, animal_id: int, animal: Animal) -> Animal:
        with self._lock:
            if animal_id not in self._animals:
                raise NotFoundError(resource="animal", resource_id=str(animal_id))

            animal = animal.with_id(animal_id)
            self._animals[animal_id] = animal
            logger.debug("Updated animal %d", animal_id)
            return animal

    def upsert(self, animal_id: int, animal: Animal) -> Animal:
        with self._lock:
            animal = animal.with_id(animal_id)
            self._animals[animal_id] = animal
            logger.debug("Upserted animal %d", animal_id)
            return animal

    def delete(self, animal_id: int) -> None:
        with self._lock:
            if animal_id not in self._animals:
                raise NotFoundError(resource="animal", resource_id=str(animal_id))
            del self._animals[animal_id]
            logger.debug("Deleted animal %d", animal_id)

    def count(self) -> int:
        with self._lock:
            return len(self._animals)

    def _allocate_id(self) -> int:
        # Caller holds the lock.
        while self._next_id in self._animals:
            self._next_id += 1
        animal_id = self._next_id
        self._next_id += 1
        return animal_id
