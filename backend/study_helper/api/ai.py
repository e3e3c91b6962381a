"""Gemini-backed study endpoints: summaries, translations and revision notes."""

from fastapi import APIRouter, Depends, HTTPException

from study_helper.api.deps import get_assistant
from study_helper.schemas.ai import (
    RevisionNotesResponse,
    SummarizeRequest,
    SummaryResponse,
    TextRequest,
    TranslateRequest,
    TranslationResponse,
)
from study_helper.services.gemini import UpstreamError
from study_helper.services.study import StudyAssistant

router = APIRouter()


def upstream_failure(exc: UpstreamError, fallback: str) -> HTTPException:
    """Build the HTTP error for a failed Gemini call.

    Auth, quota and configuration failures keep their own message; anything
    else is reported with the flow-specific *fallback*.
    """
    detail = str(exc) if type(exc) is not UpstreamError else fallback
    return HTTPException(status_code=exc.status_code, detail=detail)


@router.post("/summarize")
def summarize(
    body: SummarizeRequest,
    assistant: StudyAssistant = Depends(get_assistant),
) -> SummaryResponse:
    try:
        result = assistant.summarize(body.text, body.depth, body.selected_notes)
    except UpstreamError as exc:
        raise upstream_failure(exc, "Failed to summarize text. Please try again.") from exc
    return SummaryResponse(data=result)


@router.post("/translate")
def translate(
    body: TranslateRequest,
    assistant: StudyAssistant = Depends(get_assistant),
) -> TranslationResponse:
    try:
        result = assistant.translate(body.text, body.language)
    except UpstreamError as exc:
        raise upstream_failure(exc, "Failed to translate text. Please try again.") from exc
    return TranslationResponse(data=result)


@router.post("/revision-notes")
def revision_notes(
    body: TextRequest,
    assistant: StudyAssistant = Depends(get_assistant),
) -> RevisionNotesResponse:
    try:
        result = assistant.revision_notes(body.text)
    except UpstreamError as exc:
        raise upstream_failure(exc, "Failed to generate revision notes. Please try again.") from exc
    return RevisionNotesResponse(data=result)
