"""
Animal API: Startup Seed Data
=============================

What:  The three records every fresh server starts with.
When:  Inserted by the application lifespan before the first request,
       unless SEED_ON_STARTUP is false.
"""

import logging
from typing import Tuple

from animal_api.exceptions import ConflictError
from animal_api.schemas.animal import Animal
from animal_api.services.store_base import AnimalStore

logger = logging.getLogger(__name__)

SEED_ANIMALS: Tuple[Animal, ...] = (
    Animal(id=1, name="lion", animal_class="mammal", legs=4),
    Animal(id=2, name="eagle", animal_class="bird", legs=2),
    Animal(id=3, name="snake", animal_class="reptile", legs=0),
)


def seed_store(store: AnimalStore) -> int:
    """
    Insert the seed records through the store's normal create path.

    Seeds whose id is already taken are left alone, so seeding a store twice
    does not fail. Returns the number of records inserted.
    """
    inserted = 0
    for animal in SEED_ANIMALS:
        try:
            store.create(animal)
        except ConflictError:
            logger.debug("Seed animal %d already present, skipping", animal.id)
            continue
        inserted += 1
    logger.info("Seeded %d animal(s)", inserted)
    return inserted
