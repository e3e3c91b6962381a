"""FastAPI dependencies that hand out the objects owned by the application."""

from fastapi import Depends, Request

from study_helper.services.gemini import GeminiService
from study_helper.services.notes import NotesService
from study_helper.services.pdf_parser import PdfParser
from study_helper.services.store import NoteStore
from study_helper.services.study import StudyAssistant


def get_store(request: Request) -> NoteStore:
    store: NoteStore = request.app.state.store
    return store


def get_gateway(request: Request) -> GeminiService:
    gateway: GeminiService = request.app.state.gateway
    return gateway


def get_notes_service(store: NoteStore = Depends(get_store)) -> NotesService:
    return NotesService(store)


def get_assistant(
    gateway: GeminiService = Depends(get_gateway),
    store: NoteStore = Depends(get_store),
) -> StudyAssistant:
    return StudyAssistant(gateway, store)


def get_pdf_parser() -> PdfParser:
    return PdfParser()
