from animal_api.schemas.animal import (
    Animal,
    AnimalPayload,
    ErrorResponse,
    HealthResponse,
)

__all__ = ["Animal", "AnimalPayload", "ErrorResponse", "HealthResponse"]
