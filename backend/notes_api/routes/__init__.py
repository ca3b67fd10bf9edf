"""
Notes API - Routes Package
===========================

Route Inventory:
    - notes.py:   POST/GET /notes, GET/PUT/DELETE /notes/{id}
    - health.py:  GET /health (service health check)

Routes stay thin: they resolve dependencies, call the note service and pick
the success status code. Validation and store access live in services.
"""
