"""Notes API router."""

import logging

from fastapi import APIRouter, Depends

from study_helper.api.deps import get_notes_service
from study_helper.schemas.note import (
    DeletedNote,
    DeleteNoteResponse,
    NoteCreateRequest,
    NoteListResponse,
    NoteResponse,
)
from study_helper.services.notes import NotesService, parse_note_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def list_notes(svc: NotesService = Depends(get_notes_service)) -> NoteListResponse:
    notes = svc.list_notes()
    return NoteListResponse(data=notes, count=len(notes))


@router.post("", status_code=201)
def save_note(
    body: NoteCreateRequest,
    svc: NotesService = Depends(get_notes_service),
) -> NoteResponse:
    logger.info("saving %s note", body.type)
    note = svc.save_manual_note(body.content, body.type, body.original_text, body.language)
    return NoteResponse(data=note)


@router.get("/type/{note_type}")
def list_notes_by_type(
    note_type: str,
    svc: NotesService = Depends(get_notes_service),
) -> NoteListResponse:
    notes = svc.list_by_type(note_type)
    return NoteListResponse(data=notes, count=len(notes), type=note_type)


@router.get("/{note_id}")
def get_note(
    note_id: str,
    svc: NotesService = Depends(get_notes_service),
) -> NoteResponse:
    return NoteResponse(data=svc.get_note(parse_note_id(note_id)))


@router.delete("/{note_id}")
def delete_note(
    note_id: str,
    svc: NotesService = Depends(get_notes_service),
) -> DeleteNoteResponse:
    logger.info("deleting note %s", note_id)
    result = svc.delete_note(parse_note_id(note_id))
    return DeleteNoteResponse(data=DeletedNote.model_validate(result))
