"""
Notes API - Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── memory_repository:  In-memory NotesRepository (no database needed)
    ├── failing_repository: Repository whose every call raises a store error
    ├── sqlite_engine:      Async engine on a temporary SQLite file with the schema created
    ├── sqlite_repository:  SqlAlchemyNotesRepository on that engine
    ├── test_app:           Fresh FastAPI app wired to memory_repository
    └── test_client:        HTTPX AsyncClient talking to test_app
"""

import os
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional
from unittest.mock import AsyncMock

# Override settings BEFORE any application import creates the settings object
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DOCS_ENABLED"] = "true"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from notes_api.database import build_engine, build_session_factory, create_schema
from notes_api.dependencies import get_notes_repository
from notes_api.identifiers import NoteId
from notes_api.repository import NoteRecord, NotesRepository, SqlAlchemyNotesRepository


class InMemoryNotesRepository(NotesRepository):
    """Dict-backed repository; insertion order is its native order."""

    def __init__(self):
        self.notes: Dict[NoteId, NoteRecord] = {}

    async def create(self, title: str, text: str) -> NoteRecord:
        record = NoteRecord(id=NoteId.generate(), title=title, text=text)
        self.notes[record.id] = record
        return record

    async def get_by_id(self, note_id: NoteId) -> Optional[NoteRecord]:
        return self.notes.get(note_id)

    async def list_all(self) -> List[NoteRecord]:
        return list(self.notes.values())

    async def update_by_id(
        self, note_id: NoteId, title: str, text: str, updated_at: datetime
    ) -> bool:
        existing = self.notes.get(note_id)
        if existing is None:
            return False
        self.notes[note_id] = replace(existing, title=title, text=text, updated_at=updated_at)
        return True

    async def delete_by_id(self, note_id: NoteId) -> bool:
        return self.notes.pop(note_id, None) is not None


@pytest.fixture
def memory_repository():
    return InMemoryNotesRepository()


@pytest.fixture
def failing_repository():
    """
    A repository mock whose every operation fails like a lost connection.

    Spec'd on NotesRepository so tests can also assert which calls were made.
    """
    repo = AsyncMock(spec=NotesRepository)
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    for name in ("create", "get_by_id", "list_all", "update_by_id", "delete_by_id"):
        getattr(repo, name).side_effect = error
    return repo


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}")
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def sqlite_repository(sqlite_engine):
    return SqlAlchemyNotesRepository(build_session_factory(sqlite_engine))


@pytest.fixture
def test_app(memory_repository):
    """
    A fresh app whose handlers use memory_repository.

    The lifespan handler does not run under ASGITransport, so no database
    connection is attempted.
    """
    from notes_api.main import create_app

    app = create_app()
    app.dependency_overrides[get_notes_repository] = lambda: memory_repository
    return app


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed directly to test_app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
