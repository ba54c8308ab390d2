"""
Animal API: Pydantic Record/Request/Response Schemas
====================================================

What:  Pydantic models defining the animal record and the API contract.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate the OpenAPI documentation.

JSON shape of a record:
    {"id": 101, "name": "panda", "class": "mammal", "legs": 4}

`class` is a Python keyword, so the attribute is `animal_class` and the JSON
key is carried as an alias. Responses are serialized by alias (FastAPI default).
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr


# ══════════════════════════════════════════════════════════════════════════
# Record: what the store holds and the API returns
# ══════════════════════════════════════════════════════════════════════════


class Animal(BaseModel):
    """
    A single animal record.

    Frozen: the store hands out the same instances it keeps, so records must
    not be mutated in place. Use `with_id()` to get a copy under another id.
    """
    id: int = Field(description="Unique record identifier")
    name: str = Field(description="Common name, e.g. 'lion'")
    animal_class: str = Field(alias="class", description="Biological class, e.g. 'mammal'")
    legs: int = Field(ge=0, description="Number of legs (non-negative)")

    model_config = {"frozen": True, "populate_by_name": True}

    def with_id(self, animal_id: int) -> "Animal":
        """Returns a copy of this record keyed by `animal_id`."""
        if animal_id == self.id:
            return self
        return self.model_copy(update={"id": animal_id})


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class AnimalPayload(BaseModel):
    """
    Request body for POST /v1/animals and PUT /v1/animals/{id}.

    Presence and type checks only:
        - name, class, legs are required
        - id is optional; 0 means "unset" (POST rejects it, PUT ignores it)
        - strict types: "4" is not a valid legs value, true is not a valid id
        - unknown keys are ignored
    """
    id: StrictInt = Field(default=0, description="Record id (required for POST, ignored by PUT)")
    name: StrictStr = Field(description="Common name")
    animal_class: StrictStr = Field(alias="class", description="Biological class")
    legs: StrictInt = Field(ge=0, description="Number of legs (non-negative)")

    model_config = {"populate_by_name": True}

    def to_animal(self, animal_id: Optional[int] = None) -> Animal:
        """Builds the record; `animal_id` overrides the id from the body."""
        return Animal(
            id=self.id if animal_id is None else animal_id,
            name=self.name,
            animal_class=self.animal_class,
            legs=self.legs,
        )


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "conflict",
            "message": "animal with ID '101' already exists",
            "details": null,
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    animals: int = Field(description="Number of records currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")
