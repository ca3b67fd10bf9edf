"""
Notes API - SQLAlchemy Repository Tests
========================================

What:  Runs SqlAlchemyNotesRepository against a temporary SQLite database
       (aiosqlite) to check the real SQL paths.
"""

from datetime import datetime, timezone

import pytest

from notes_api.identifiers import NoteId


class TestSqlAlchemyNotesRepository:

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, sqlite_repository):
        record = await sqlite_repository.create(title="T", text="B")

        assert isinstance(record.id, NoteId)
        assert record.title == "T"
        assert record.text == "B"
        assert record.updated_at is None

    @pytest.mark.asyncio
    async def test_get_by_id(self, sqlite_repository):
        created = await sqlite_repository.create(title="T", text="B")

        fetched = await sqlite_repository.get_by_id(created.id)

        assert fetched == created

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, sqlite_repository):
        assert await sqlite_repository.get_by_id(NoteId.generate()) is None

    @pytest.mark.asyncio
    async def test_list_all(self, sqlite_repository):
        assert await sqlite_repository.list_all() == []

        ids = {(await sqlite_repository.create(title=f"T{i}", text="B")).id for i in range(3)}

        records = await sqlite_repository.list_all()
        assert {record.id for record in records} == ids

    @pytest.mark.asyncio
    async def test_update_by_id(self, sqlite_repository):
        created = await sqlite_repository.create(title="A", text="B")
        stamp = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        matched = await sqlite_repository.update_by_id(created.id, title="C", text="D", updated_at=stamp)

        assert matched is True
        fetched = await sqlite_repository.get_by_id(created.id)
        assert fetched.id == created.id
        assert (fetched.title, fetched.text) == ("C", "D")
        assert fetched.updated_at == stamp
        assert fetched.updated_at.tzinfo == timezone.utc

    @pytest.mark.asyncio
    async def test_update_by_id_missing(self, sqlite_repository):
        matched = await sqlite_repository.update_by_id(
            NoteId.generate(), title="C", text="D", updated_at=datetime.now(timezone.utc)
        )
        assert matched is False

    @pytest.mark.asyncio
    async def test_update_leaves_other_notes_alone(self, sqlite_repository):
        first = await sqlite_repository.create(title="A", text="B")
        second = await sqlite_repository.create(title="X", text="Y")

        await sqlite_repository.update_by_id(
            first.id, title="C", text="D", updated_at=datetime.now(timezone.utc)
        )

        assert await sqlite_repository.get_by_id(second.id) == second

    @pytest.mark.asyncio
    async def test_delete_by_id(self, sqlite_repository):
        created = await sqlite_repository.create(title="A", text="B")

        assert await sqlite_repository.delete_by_id(created.id) is True
        assert await sqlite_repository.delete_by_id(created.id) is False
        assert await sqlite_repository.get_by_id(created.id) is None
