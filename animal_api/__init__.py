"""
Animal API: Application Package Initializer
===========================================

What: Marks the `animal_api` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     AnimalService (Business Logic)  │  ← create/update/upsert decisions
    ├─────────────────────────────────────┤
    │        AnimalStore (In-Memory)      │  ← locked keyed collection
    ├─────────────────────────────────────┤
    │         Schemas (Pydantic)          │  ← record + request body contracts
    └─────────────────────────────────────┘

    Routes translate HTTP into service calls; the service owns every decision
    about which store operation runs; the store owns the records and the lock.
"""

__version__ = "1.0.0"
