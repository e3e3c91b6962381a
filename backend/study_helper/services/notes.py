"""Notes service: input validation in front of the note store."""

import re

from study_helper.models.note import NOTE_TYPES
from study_helper.schemas.note import NoteRecord
from study_helper.services.store import NoteStore, ValidationError

_INVALID_TYPE_MESSAGE = "Invalid note type. Must be one of: " + ", ".join(NOTE_TYPES)
_NOTE_ID_RE = re.compile(r"[1-9][0-9]*")
_MAX_NOTE_ID = 2**63 - 1


def parse_note_id(raw: str) -> int:
    """Parse a path segment into a note id; raise ValidationError if it is not a positive integer."""
    if not isinstance(raw, str) or not _NOTE_ID_RE.fullmatch(raw):
        raise ValidationError("Valid note ID is required")
    note_id = int(raw)
    # SQLite INTEGER is a signed 64-bit value.
    if note_id > _MAX_NOTE_ID:
        raise ValidationError("Valid note ID is required")
    return note_id


def _check_type(note_type: str) -> None:
    if note_type not in NOTE_TYPES:
        raise ValidationError(_INVALID_TYPE_MESSAGE)


class NotesService:
    def __init__(self, store: NoteStore) -> None:
        self._store = store

    def save_manual_note(
        self,
        content: str | None,
        note_type: str = "notes",
        original_text: str | None = None,
        language: str | None = None,
    ) -> NoteRecord:
        """Validate and persist a note submitted directly by the user."""
        if not content or not content.strip():
            raise ValidationError("Note content is required")
        _check_type(note_type)
        return self._store.create(content, note_type, original_text, language)

    def list_notes(self) -> list[NoteRecord]:
        return self._store.list_all()

    def list_by_type(self, note_type: str) -> list[NoteRecord]:
        _check_type(note_type)
        return [n for n in self._store.list_all() if n.type == note_type]

    def get_note(self, note_id: int) -> NoteRecord:
        return self._store.get_by_id(note_id)

    def delete_note(self, note_id: int) -> dict[str, int | bool]:
        return self._store.delete_by_id(note_id)
