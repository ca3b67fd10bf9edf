"""
Notes API - Notes Route Handlers
=================================

What:  CRUD endpoints for notes.
How:   Each handler takes the injected repository, delegates to NoteService
       and returns the response model with the endpoint's success status.
       Failures propagate as NotesApiError subclasses and are turned into
       JSON errors by the global exception handlers.

Routes:
    POST   /notes        → 201  create
    GET    /notes        → 200  list all
    GET    /notes/{id}   → 200  get one
    PUT    /notes/{id}   → 200  update
    DELETE /notes/{id}   → 200  delete
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from notes_api.dependencies import get_notes_repository
from notes_api.repository import NotesRepository
from notes_api.schemas.note import (
    ErrorResponse,
    NoteCreatedResponse,
    NoteDeletedResponse,
    NoteInput,
    NoteResponse,
    NoteUpdatedResponse,
)
from notes_api.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])

_INVALID_ID = {"description": "Invalid note ID", "model": ErrorResponse}
_NOT_FOUND = {"description": "Note not found", "model": ErrorResponse}


@router.post(
    "",
    status_code=201,
    response_model=NoteCreatedResponse,
    responses={
        400: {"description": "Both 'title' and 'body' are required", "model": ErrorResponse},
        500: {"description": "Failed to save note", "model": ErrorResponse},
    },
    summary="Create a new note",
    description="Adds a new note to the database with a title and body.",
)
async def create_note(
    payload: Optional[NoteInput] = None,
    repository: NotesRepository = Depends(get_notes_repository),
) -> NoteCreatedResponse:
    # A missing body is reported the same way as missing fields
    payload = payload or NoteInput()
    return await note_service.create_note(repository, title=payload.title, body=payload.body)


@router.get(
    "",
    response_model=List[NoteResponse],
    response_model_exclude_none=True,
    responses={500: {"description": "Failed to fetch notes", "model": ErrorResponse}},
    summary="Get all notes",
    description="Returns a list of all notes stored in the database.",
)
async def list_notes(
    repository: NotesRepository = Depends(get_notes_repository),
) -> List[NoteResponse]:
    return await note_service.list_notes(repository)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    response_model_exclude_none=True,
    responses={
        400: _INVALID_ID,
        404: _NOT_FOUND,
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
    description="Returns a note by its ID.",
)
async def get_note(
    note_id: str,
    repository: NotesRepository = Depends(get_notes_repository),
) -> NoteResponse:
    return await note_service.get_note(repository, note_id)


@router.put(
    "/{note_id}",
    response_model=NoteUpdatedResponse,
    responses={
        400: {"description": "Invalid ID, or title and body are required", "model": ErrorResponse},
        404: _NOT_FOUND,
        500: {"description": "Failed to update note", "model": ErrorResponse},
    },
    summary="Update a note by ID",
    description="Updates an existing note's title and body.",
)
async def update_note(
    note_id: str,
    payload: Optional[NoteInput] = None,
    repository: NotesRepository = Depends(get_notes_repository),
) -> NoteUpdatedResponse:
    payload = payload or NoteInput()
    return await note_service.update_note(
        repository, note_id, title=payload.title, body=payload.body
    )


@router.delete(
    "/{note_id}",
    response_model=NoteDeletedResponse,
    responses={
        400: _INVALID_ID,
        404: _NOT_FOUND,
        500: {"description": "Failed to delete note", "model": ErrorResponse},
    },
    summary="Delete a note by ID",
    description="Removes a note from the database by its ID.",
)
async def delete_note(
    note_id: str,
    repository: NotesRepository = Depends(get_notes_repository),
) -> NoteDeletedResponse:
    return await note_service.delete_note(repository, note_id)
