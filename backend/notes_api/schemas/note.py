"""
Notes API - Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the wire contract of the notes endpoints.
Why:   Automatic serialization and OpenAPI generation. Required-field checks
       are done by the note service, not here, so that a missing or
       non-string title or body yields the API's own 400 message instead of
       FastAPI's 422.
Who:   Used by route handlers as request bodies and response models.

Field naming:
    Clients send the note content as "body"; the API returns it as "text".
    Timestamps go out as "updatedAt". The Python attributes stay snake_case
    and the aliases carry the wire names.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteInput(BaseModel):
    """
    Body of POST /notes and PUT /notes/{id}.

    Fields accept any JSON value: the note service rejects missing, empty or
    non-string values with the operation's own message, after the path id
    has been checked.
    """

    title: Optional[Any] = Field(
        default=None,
        description="The title of the note",
        examples=["My Important Note"],
    )
    body: Optional[Any] = Field(
        default=None,
        description="The main content of the note",
        examples=["This is the content of my note. It can be anything!"],
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  A stored note.
    Who:   Returned by GET /notes/{id} and as items of GET /notes.

    updatedAt is omitted until the note has been updated once.
    """

    id: str = Field(description="The auto-generated ID of the note")
    title: str = Field(description="The title of the note")
    text: str = Field(description="The body/content of the note")
    updated_at: Optional[datetime] = Field(
        default=None,
        alias="updatedAt",
        description="When the note was last updated",
    )

    model_config = {"populate_by_name": True}


class NoteCreatedResponse(BaseModel):
    id: str = Field(description="The auto-generated ID of the new note")
    title: str
    text: str
    message: str = Field(default="Note created successfully")


class NoteUpdatedResponse(BaseModel):
    id: str = Field(description="The note ID as supplied in the request path")
    title: str
    text: str
    updated_at: datetime = Field(alias="updatedAt")
    message: str = Field(default="Note updated successfully")

    model_config = {"populate_by_name": True}


class NoteDeletedResponse(BaseModel):
    message: str = Field(default="Note deleted successfully")
    id: str


# ══════════════════════════════════════════════════════════════════════════
# Error / Operational Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body shared by every endpoint.

    Example:
        {"error": "Failed to save note", "details": "connection refused"}
    """

    error: str = Field(description="Human-readable error description")
    details: Optional[str] = Field(
        default=None,
        description="Underlying failure detail (note creation only)",
    )


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
