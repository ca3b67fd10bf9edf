"""
Notes API - Notes Repository (Persistence Gateway)
===================================================

What:  The create / get-by-id / list / update-by-id / delete-by-id interface
       over the notes collection, plus its async SQLAlchemy implementation.
Why:   Handlers receive the repository as an explicit dependency, so tests
       can substitute an in-memory implementation and the storage engine can
       change without touching request handling.
How:   NotesRepository is an abstract base class. SqlAlchemyNotesRepository
       opens one session per call from a shared session factory; the engine
       behind it owns connection pooling.

Error policy:
    Repositories raise whatever the underlying driver raises. Translating
    failures into StoreError is the note service's job, because the client
    message depends on the operation.
"""

import abc
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notes_api.identifiers import NoteId
from notes_api.models.note import Note


@dataclass(frozen=True)
class NoteRecord:
    """A note as read from the store."""

    id: NoteId
    title: str
    text: str
    updated_at: Optional[datetime] = None


class NotesRepository(abc.ABC):
    """Persistence gateway for notes."""

    @abc.abstractmethod
    async def create(self, title: str, text: str) -> NoteRecord:
        """Insert a note and return it with its store-assigned id."""

    @abc.abstractmethod
    async def get_by_id(self, note_id: NoteId) -> Optional[NoteRecord]:
        """Return the note with this id, or None."""

    @abc.abstractmethod
    async def list_all(self) -> List[NoteRecord]:
        """Return every note in store-native order."""

    @abc.abstractmethod
    async def update_by_id(
        self, note_id: NoteId, title: str, text: str, updated_at: datetime
    ) -> bool:
        """Overwrite title, text and updated_at; return False when no note matched."""

    @abc.abstractmethod
    async def delete_by_id(self, note_id: NoteId) -> bool:
        """Delete the note; return False when nothing was deleted."""


def _to_record(note: Note) -> NoteRecord:
    updated_at = note.updated_at
    # Timestamps are written in UTC; SQLite hands them back without tzinfo
    if updated_at is not None and updated_at.tzinfo is None:
        updated_at = updated_at.replace(tzinfo=timezone.utc)
    return NoteRecord(
        id=NoteId(note.id),
        title=note.title,
        text=note.text,
        updated_at=updated_at,
    )


class SqlAlchemyNotesRepository(NotesRepository):
    """
    NotesRepository backed by the `notes` table.

    Each method runs in its own short session and commits before returning.
    Updates are a single UPDATE statement, so concurrent updates to the same
    note are last-write-wins and never mix fields from two requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create(self, title: str, text: str) -> NoteRecord:
        async with self._session_factory() as session:
            # updated_at set explicitly so reading it after commit needs no reload
            note = Note(title=title, text=text, updated_at=None)
            session.add(note)
            await session.commit()
            return _to_record(note)

    async def get_by_id(self, note_id: NoteId) -> Optional[NoteRecord]:
        async with self._session_factory() as session:
            result = await session.execute(select(Note).where(Note.id == note_id.value))
            note = result.scalar_one_or_none()
            return _to_record(note) if note is not None else None

    async def list_all(self) -> List[NoteRecord]:
        async with self._session_factory() as session:
            result = await session.execute(select(Note))
            return [_to_record(note) for note in result.scalars().all()]

    async def update_by_id(
        self, note_id: NoteId, title: str, text: str, updated_at: datetime
    ) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(
                update(Note)
                .where(Note.id == note_id.value)
                .values(title=title, text=text, updated_at=updated_at)
            )
            await session.commit()
            return result.rowcount > 0

    async def delete_by_id(self, note_id: NoteId) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(delete(Note).where(Note.id == note_id.value))
            await session.commit()
            return result.rowcount > 0
