"""
Notes API - Services Package
=============================

Service Inventory:
    - note_service.py: create/get/list/update/delete notes against an injected
      NotesRepository, raising ValidationError, NotFoundError or StoreError.
"""
