"""Pydantic schemas for Note endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NoteCreateRequest(BaseModel):
    # Content and type are validated by NotesService so errors carry its messages.
    content: str | None = None
    type: str = "notes"
    original_text: str | None = Field(default=None, alias="originalText")
    language: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class NoteRecord(BaseModel):
    """A stored note; field names mirror the ``notes`` column names."""

    id: int
    title: str | None
    content: str
    type: str
    original_text: str | None
    language: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NoteResponse(BaseModel):
    success: bool = True
    data: NoteRecord


class NoteListResponse(BaseModel):
    success: bool = True
    data: list[NoteRecord]
    count: int
    type: str | None = None


class DeletedNote(BaseModel):
    id: int
    deleted: bool


class DeleteNoteResponse(BaseModel):
    success: bool = True
    data: DeletedNote
