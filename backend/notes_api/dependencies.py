"""FastAPI dependencies resolving the per-process resources created at startup."""

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from notes_api.repository import NotesRepository


def get_notes_repository(request: Request) -> NotesRepository:
    """
    Return the repository the lifespan handler stored on app.state.

    Tests replace this dependency through app.dependency_overrides.
    """
    return request.app.state.notes_repository


def get_engine(request: Request) -> AsyncEngine:
    return request.app.state.engine
