"""
Animal API: FastAPI Dependencies
================================

What:  Hands the app's store (and a service bound to it) to route handlers.
How:   create_app() attaches one store to `app.state.store`; these functions
       read it back from the request, so each app instance (and each test
       app) has its own isolated store. parse_animal_id validates the
       {animal_id} path segment for the GET, PUT and DELETE routes.

Usage in routes:
    async def list_animals(service: AnimalService = Depends(get_animal_service)):
        ...
"""

from fastapi import Depends, Path, Request

from animal_api.services.animal_service import AnimalService
from animal_api.services.store_base import AnimalStore


def get_store(request: Request) -> AnimalStore:
    """Returns the store owned by the application handling this request."""
    return request.app.state.store


def get_animal_service(store: AnimalStore = Depends(get_store)) -> AnimalService:
    return AnimalService(store)


# Optional sign and ASCII digits only. Rejects "1.0", " 1", "1_0" and "0x1",
# which a lax int coercion would otherwise accept or reinterpret.
ANIMAL_ID_PATTERN = r"^[+-]?[0-9]+$"


def parse_animal_id(
    animal_id: str = Path(..., pattern=ANIMAL_ID_PATTERN, description="Animal ID"),
) -> int:
    """Path id as an int. A non-matching id is a RequestValidationError (400)."""
    return int(animal_id)
