"""
Notes API - Application Package
================================

A note-taking HTTP API: create, read, update, delete and list text notes.

Layers:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Request Handling)    │  ← Validation, error translation
    ├─────────────────────────────────────┤
    │    Repository (Persistence Gateway) │  ← NotesRepository interface
    ├─────────────────────────────────────┤
    │        Database (SQLAlchemy)        │  ← Engine, model, migrations
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
