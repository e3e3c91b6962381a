"""Topic research and YouTube summary endpoints."""

from fastapi import APIRouter, Depends

from study_helper.api.ai import upstream_failure
from study_helper.api.deps import get_assistant
from study_helper.schemas.ai import (
    ResearchRequest,
    ResearchResponse,
    VideoSummaryResponse,
    YoutubeSummaryRequest,
)
from study_helper.services.gemini import UpstreamError
from study_helper.services.study import StudyAssistant

router = APIRouter()


@router.post("")
def research(
    body: ResearchRequest,
    assistant: StudyAssistant = Depends(get_assistant),
) -> ResearchResponse:
    try:
        result = assistant.research(body.topic, body.depth)
    except UpstreamError as exc:
        raise upstream_failure(exc, "Failed to complete research. Please try again.") from exc
    return ResearchResponse(data=result)


@router.post("/youtube-summary")
def youtube_summary(
    body: YoutubeSummaryRequest,
    assistant: StudyAssistant = Depends(get_assistant),
) -> VideoSummaryResponse:
    try:
        result = assistant.youtube_summary(body.url)
    except UpstreamError as exc:
        raise upstream_failure(exc, "Failed to summarize video. Please try again.") from exc
    return VideoSummaryResponse(data=result)
