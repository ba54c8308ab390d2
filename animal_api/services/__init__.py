"""
Animal API: Services Layer
==========================

What:  Business logic and storage, sitting below the HTTP routes.

Service Inventory:
    - AnimalStore (abstract): Interface for keyed animal record storage
    - InMemoryAnimalStore: Dict + lock implementation (the only one)
    - AnimalService: Maps API operations onto store calls
    - seed_store: Inserts the lion/eagle/snake startup records
"""
