"""
Animal API: Abstract Record Store Interface
===========================================

What:  Abstract base class defining the contract for animal record storage.
Note:  AnimalService and the routes depend on this interface only, so a store
       instance can be constructed per app (or per test) and injected.
How:   Concrete implementations inherit from AnimalStore and implement every
       operation. InMemoryAnimalStore is the only implementation.

Contract (all implementations):
    - Each operation is atomic: callers never observe a partial read or write.
    - No two stored records share an id.
    - Records going in and coming out are immutable `Animal` instances.
    - Failures are reported by raising NotFoundError / ConflictError,
      never by returning None or a flag.
"""

from abc import ABC, abstractmethod
from typing import List

from animal_api.schemas.animal import Animal


class AnimalStore(ABC):
    """Keyed collection of animal records."""

    @abstractmethod
    def get_all(self) -> List[Animal]:
        """
        Return every stored record, ordered by id.

        Raises:
            NotFoundError: The store is empty. An empty store is reported as
                an error, not as an empty list.
        """
        ...

    @abstractmethod
    def get_by_id(self, animal_id: int) -> Animal:
        """
        Return the record stored under `animal_id`.

        Raises:
            NotFoundError: No record has this id.
        """
        ...

    @abstractmethod
    def create(self, animal: Animal) -> Animal:
        """
        Insert a new record and return it as stored.

        An id of 0 means "unset": the store assigns the next free
        auto-incrementing id instead of rejecting the record.

        Raises:
            ConflictError: A record with the same (non-zero) id exists.
        """
        ...

    @abstractmethod
    def update(self, animal_id: int, animal: Animal) -> Animal:
        """
        Replace the record stored under `animal_id`. Never creates.

        The stored record's id is forced to `animal_id`.

        Raises:
            NotFoundError: No record has this id.
        """
        ...

    @abstractmethod
    def upsert(self, animal_id: int, animal: Animal) -> Animal:
        """Insert or overwrite the record under `animal_id`. Always succeeds."""
        ...

    @abstractmethod
    def delete(self, animal_id: int) -> None:
        """
        Remove the record stored under `animal_id`.

        Raises:
            NotFoundError: No record has this id.
        """
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""
        ...
