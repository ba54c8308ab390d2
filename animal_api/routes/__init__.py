"""
Animal API: API Routes Package
==============================

Route Inventory:
    - animals.py: /v1/animals and /v1/animals/{id} (list, get, create, put, delete)
    - health.py:  GET /health                     (service health check)

Routes stay thin: parse the request, call AnimalService, pick the status code.
"""
