"""
Animal API: Animal Service (Request-to-Operation Mapping)
=========================================================

What:  Decides which store operation each API call runs and how its outcome
       is reported.
Note:  The store only knows single atomic operations. The create/update/upsert
       disambiguation and the existence pre-checks live here, independent of
       HTTP, so they can be tested without a client.
Who:   Called by the route handlers in routes/animals.py.

Decision table:
    list     → store.get_all()                      (empty store → NotFoundError)
    get      → store.get_by_id(id)                  (miss → NotFoundError)
    create   → id == 0          → ValidationError
               get_by_id hit    → ConflictError
               else             → store.create()
    put      → get_by_id hit    → store.update()    (created=False)
               get_by_id miss   → store.upsert()    (created=True)
    delete   → store.delete(id)                     (miss → NotFoundError)

Error Handling Strategy:
    The pre-check makes the follow-up store call expected to succeed. When it
    still fails (another request changed the record in between), the failure
    is wrapped in StoreError and surfaces as a 500; it is never reported as the
    store's own 404/409.
"""

import logging
from typing import List, Tuple

from animal_api.exceptions import (
    AnimalAPIError,
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from animal_api.schemas.animal import Animal, AnimalPayload
from animal_api.services.store_base import AnimalStore

logger = logging.getLogger(__name__)


class AnimalService:
    """
    Business logic layer for animal operations.

    Holds a reference to the store it operates on; one service per store.
    """

    def __init__(self, store: AnimalStore) -> None:
        self.store = store

    def list_animals(self) -> List[Animal]:
        return self.store.get_all()

    def get_animal(self, animal_id: int) -> Animal:
        return self.store.get_by_id(animal_id)

    def create_animal(self, payload: AnimalPayload) -> Animal:
        """
        Create a record from a POST body.

        Raises:
            ValidationError: The body has no id (or id 0).
            ConflictError:   A record with this id already exists.
            StoreError:      The store rejected the insert after the pre-check.
        """
        if payload.id == 0:
            raise ValidationError(message="Animal ID is required for creation", field="id")

        if self._exists(payload.id):
            raise ConflictError(resource="animal", resource_id=str(payload.id))

        try:
            animal = self.store.create(payload.to_animal())
        except AnimalAPIError as e:
            raise self._store_failure("create", payload.id, e) from e

        logger.info("Animal %d created (%s)", animal.id, animal.name)
        return animal

    def put_animal(self, animal_id: int, payload: AnimalPayload) -> Tuple[Animal, bool]:
        """
        Update the record at `animal_id`, or create it when absent.

        The id in the body is discarded; `animal_id` from the path wins.

        Returns:
            (record, created); created is True when the upsert branch ran.

        Raises:
            StoreError: The store rejected the write after the pre-check.
        """
        animal = payload.to_animal(animal_id)

        if self._exists(animal_id):
            try:
                stored = self.store.update(animal_id, animal)
            except AnimalAPIError as e:
                raise self._store_failure("update", animal_id, e) from e
            logger.info("Animal %d updated", animal_id)
            return stored, False

        try:
            stored = self.store.upsert(animal_id, animal)
        except AnimalAPIError as e:
            raise self._store_failure("upsert", animal_id, e) from e
        logger.info("Animal %d created via PUT", animal_id)
        return stored, True

    def delete_animal(self, animal_id: int) -> None:
        self.store.delete(animal_id)
        logger.info("Animal %d deleted", animal_id)

    def _exists(self, animal_id: int) -> bool:
        try:
            self.store.get_by_id(animal_id)
        except NotFoundError:
            return False
        return True

    @staticmethod
    def _store_failure(operation: str, animal_id: int, error: AnimalAPIError) -> StoreError:
        logger.error(
            "Store %s of animal %d failed after pre-check: %s",
            operation,
            animal_id,
            error.message,
        )
        return StoreError(
            context={
                "operation": operation,
                "animal_id": animal_id,
                "original_error": type(error).__name__,
            },
        )
