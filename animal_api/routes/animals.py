"""
Animal API: Animal Route Handlers
=================================

What:  The five /animals endpoints (mounted under the versioned API prefix).
How:   Path ids go through parse_animal_id (sign and digits only) and
       bodies through AnimalPayload; parse failures become 400 via the
       RequestValidationError handler in main.py. Handlers call AnimalService
       and pick the success status; every failure is an exception mapped by
       the global handlers.

Route Inventory:
    GET    /animals        → 200 list         | 404 store empty
    GET    /animals/{id}   → 200 record       | 400 bad id, 404 missing
    POST   /animals        → 201 record       | 400 bad body/no id, 409 duplicate
    PUT    /animals/{id}   → 200 / 201 record | 400 bad id/body
    DELETE /animals/{id}   → 204 empty        | 400 bad id, 404 missing
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from animal_api.dependencies import get_animal_service, parse_animal_id
from animal_api.schemas.animal import Animal, AnimalPayload, ErrorResponse
from animal_api.services.animal_service import AnimalService

router = APIRouter(prefix="/animals", tags=["Animals"])

_BAD_REQUEST = {400: {"description": "Invalid id or request body", "model": ErrorResponse}}
_NOT_FOUND = {404: {"description": "Animal not found", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[Animal],
    responses={**_NOT_FOUND},
    summary="List all animals",
    description="Returns every stored animal ordered by id. An empty store answers 404.",
)
async def list_animals(
    service: AnimalService = Depends(get_animal_service),
) -> List[Animal]:
    return service.list_animals()


@router.get(
    "/{animal_id}",
    response_model=Animal,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Get a single animal by ID",
)
async def get_animal(
    animal_id: int = Depends(parse_animal_id),
    service: AnimalService = Depends(get_animal_service),
) -> Animal:
    return service.get_animal(animal_id)


@router.post(
    "",
    response_model=Animal,
    status_code=status.HTTP_201_CREATED,
    responses={
        **_BAD_REQUEST,
        409: {"description": "An animal with this id already exists", "model": ErrorResponse},
    },
    summary="Create an animal",
    description="The body must carry a non-zero id. Duplicate ids are rejected with 409.",
)
async def create_animal(
    payload: AnimalPayload,
    service: AnimalService = Depends(get_animal_service),
) -> Animal:
    return service.create_animal(payload)


@router.put(
    "/{animal_id}",
    response_model=Animal,
    responses={
        **_BAD_REQUEST,
        201: {"description": "Animal did not exist and was created", "model": Animal},
    },
    summary="Update an animal, creating it if absent",
    description=(
        "The id in the path is authoritative; any id in the body is ignored. "
        "Answers 200 when an existing animal was replaced and 201 when it was created."
    ),
)
async def put_animal(
    payload: AnimalPayload,
    response: Response,
    animal_id: int = Depends(parse_animal_id),
    service: AnimalService = Depends(get_animal_service),
) -> Animal:
    animal, created = service.put_animal(animal_id, payload)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return animal


@router.delete(
    "/{animal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Delete an animal",
)
async def delete_animal(
    animal_id: int = Depends(parse_animal_id),
    service: AnimalService = Depends(get_animal_service),
) -> Response:
    service.delete_animal(animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
