"""Pydantic schemas for the AI, file and research endpoints.

Request and result fields use camelCase on the wire to match the browser UI.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from study_helper.services.prompts import ResearchDepth, SummaryDepth


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SelectedNote(CamelModel):
    title: str | None = None
    content: str = ""
    type: str | None = None


class SummarizeRequest(CamelModel):
    text: str | None = None
    depth: SummaryDepth = "detailed"
    selected_notes: list[SelectedNote] = []


class TranslateRequest(CamelModel):
    text: str | None = None
    language: str | None = None


class TextRequest(CamelModel):
    text: str | None = None


class ResearchRequest(CamelModel):
    topic: str | None = None
    depth: ResearchDepth = "medium"


class YoutubeSummaryRequest(CamelModel):
    url: str | None = None


class MindMap(BaseModel):
    nodes: list[dict[str, Any]]
    edges: list[dict[str, Any]]


class Source(CamelModel):
    title: str
    url: str
    type: Literal["academic", "educational", "reference"]


class SummaryResult(CamelModel):
    summary: str
    note_id: int
    type: str = "summary"


class TranslationResult(CamelModel):
    translation: str
    original_text: str
    language: str
    note_id: int
    type: str = "translation"


class RevisionNotesResult(CamelModel):
    revision_notes: str
    note_id: int
    type: str = "notes"


class MindMapResult(CamelModel):
    mind_map: MindMap
    note_id: int
    type: str = "mindmap"


class ResearchResult(CamelModel):
    research: str
    sources: list[Source]
    note_id: int


class VideoSummaryResult(CamelModel):
    summary: str
    video_id: str
    note_id: int


class ExtractedFile(CamelModel):
    extracted_text: str
    original_filename: str
    file_type: str
    text_length: int


class SummaryResponse(CamelModel):
    success: bool = True
    data: SummaryResult


class TranslationResponse(CamelModel):
    success: bool = True
    data: TranslationResult


class RevisionNotesResponse(CamelModel):
    success: bool = True
    data: RevisionNotesResult


class MindMapResponse(CamelModel):
    success: bool = True
    data: MindMapResult


class ResearchResponse(CamelModel):
    success: bool = True
    data: ResearchResult


class VideoSummaryResponse(CamelModel):
    success: bool = True
    data: VideoSummaryResult


class ExtractedFileResponse(CamelModel):
    success: bool = True
    data: ExtractedFile


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
