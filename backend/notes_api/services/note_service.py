"""
Notes API - Note Service (Request Handling Logic)
==================================================

What:  The five note operations: create, get, list, update, delete.
Why:   Keeps validation, store access and error translation independent of
       HTTP. Routes only pick status codes and serialize.
How:   Every operation is a single validate → call repository → shape result
       pass. No retries.
Who:   Called by route handlers with the repository injected per request.

Error Handling Strategy:
    - Malformed ids and missing fields raise ValidationError before the
      repository is touched.
    - A well-formed id that matches nothing raises NotFoundError.
    - Any exception from the repository is logged and re-raised as StoreError
      carrying the operation's client message. Only create exposes the
      underlying failure text (as `details`).
"""

import logging
from datetime import datetime, timezone
from typing import Any, List

from notes_api.exceptions import NotFoundError, StoreError, ValidationError
from notes_api.identifiers import NoteId
from notes_api.repository import NoteRecord, NotesRepository
from notes_api.schemas.note import (
    NoteCreatedResponse,
    NoteDeletedResponse,
    NoteResponse,
    NoteUpdatedResponse,
)

logger = logging.getLogger(__name__)


def _decode_id(raw_id: str) -> NoteId:
    note_id = NoteId.parse(raw_id)
    if note_id is None:
        raise ValidationError(message="Invalid note ID", field="id")
    return note_id


def _is_text(value: Any) -> bool:
    # Numbers, lists and objects count as missing, like absent or empty fields
    return isinstance(value, str) and value != ""


def _to_response(record: NoteRecord) -> NoteResponse:
    return NoteResponse(
        id=str(record.id),
        title=record.title,
        text=record.text,
        updated_at=record.updated_at,
    )


class NoteService:
    """
    Stateless note operations.

    The repository is passed to each call rather than held, so one service
    instance serves every request regardless of which store backs it.
    """

    async def create_note(
        self,
        repository: NotesRepository,
        title: Any,
        body: Any,
    ) -> NoteCreatedResponse:
        """
        Store a new note.

        Raises:
            ValidationError: title or body missing, empty or not a string (→ 400)
            StoreError: insert failed (→ 500, with details)
        """
        if not _is_text(title) or not _is_text(body):
            raise ValidationError(message="Both 'title' and 'body' are required")

        try:
            record = await repository.create(title=title, text=body)
        except Exception as e:
            logger.error("DB insert error: %s", str(e), exc_info=True)
            raise StoreError(
                message="Failed to save note",
                details=str(e),
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Note created: %s", record.id)
        return NoteCreatedResponse(id=str(record.id), title=record.title, text=record.text)

    async def get_note(self, repository: NotesRepository, raw_id: str) -> NoteResponse:
        """
        Fetch one note by its id string.

        Raises:
            ValidationError: malformed id (→ 400)
            NotFoundError: no note with that id (→ 404)
            StoreError: query failed (→ 500)
        """
        note_id = _decode_id(raw_id)

        try:
            record = await repository.get_by_id(note_id)
        except Exception as e:
            logger.error("Fetch by ID error for %s: %s", note_id, str(e), exc_info=True)
            raise StoreError(message="Server error", context={"note_id": str(note_id)}) from e

        if record is None:
            raise NotFoundError(resource_id=str(note_id))
        return _to_response(record)

    async def list_notes(self, repository: NotesRepository) -> List[NoteResponse]:
        """Return every note in store order; an empty store gives an empty list."""
        try:
            records = await repository.list_all()
        except Exception as e:
            logger.error("Fetch all error: %s", str(e), exc_info=True)
            raise StoreError(message="Failed to fetch notes") from e

        return [_to_response(record) for record in records]

    async def update_note(
        self,
        repository: NotesRepository,
        raw_id: str,
        title: Any,
        body: Any,
    ) -> NoteUpdatedResponse:
        """
        Overwrite a note's title and text and stamp updatedAt.

        The id is validated before the body. The response echoes the id string
        exactly as the caller sent it; the stored note is not re-read.

        Raises:
            ValidationError: malformed id, or title/body missing, empty or
                not a string (→ 400)
            NotFoundError: no note matched (→ 404)
            StoreError: update failed (→ 500)
        """
        note_id = _decode_id(raw_id)

        if not _is_text(title) or not _is_text(body):
            raise ValidationError(message="Title and body are required")

        updated_at = datetime.now(timezone.utc)
        try:
            matched = await repository.update_by_id(
                note_id, title=title, text=body, updated_at=updated_at
            )
        except Exception as e:
            logger.error("Update error for %s: %s", note_id, str(e), exc_info=True)
            raise StoreError(message="Failed to update note", context={"note_id": str(note_id)}) from e

        if not matched:
            raise NotFoundError(resource_id=str(note_id))

        logger.info("Note updated: %s", note_id)
        return NoteUpdatedResponse(id=raw_id, title=title, text=body, updated_at=updated_at)

    async def delete_note(self, repository: NotesRepository, raw_id: str) -> NoteDeletedResponse:
        """
        Delete a note. Not idempotent: a second delete of the same id is a 404.

        Raises:
            ValidationError: malformed id (→ 400)
            NotFoundError: nothing deleted (→ 404)
            StoreError: delete failed (→ 500)
        """
        note_id = _decode_id(raw_id)

        try:
            deleted = await repository.delete_by_id(note_id)
        except Exception as e:
            logger.error("Delete error for %s: %s", note_id, str(e), exc_info=True)
            raise StoreError(message="Failed to delete note", context={"note_id": str(note_id)}) from e

        if not deleted:
            raise NotFoundError(resource_id=str(note_id))

        logger.info("Note deleted: %s", note_id)
        return NoteDeletedResponse(id=raw_id)


# Stateless, so one shared instance is enough
note_service = NoteService()
