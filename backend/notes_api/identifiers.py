"""
Notes API - Note Identifier Codec
==================================

What:  Converts the string ids clients put in URL paths into the store's
       native identifier (a UUID) and back.
Why:   Route handlers never see the database's id type, so swapping the
       storage engine only touches this module and the repository.
How:   NoteId.parse() accepts only the canonical 36-character hyphenated hex
       form and returns None for anything else; it never raises.
"""

import re
import uuid
from typing import Optional

_CANONICAL_UUID = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


class NoteId:
    """Opaque, immutable identifier of a stored note."""

    __slots__ = ("_value",)

    def __init__(self, value: uuid.UUID):
        self._value = value

    @classmethod
    def parse(cls, raw: str) -> Optional["NoteId"]:
        """Return a NoteId for a well-formed id string, or None."""
        # uuid.UUID() alone also accepts braces, urn: prefixes and bare hex
        if not isinstance(raw, str) or not _CANONICAL_UUID.match(raw):
            return None
        return cls(uuid.UUID(raw))

    @classmethod
    def generate(cls) -> "NoteId":
        return cls(uuid.uuid4())

    @property
    def value(self) -> uuid.UUID:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"NoteId('{self._value}')"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoteId) and other._value == self._value

    def __hash__(self) -> int:
        return hash(self._value)
