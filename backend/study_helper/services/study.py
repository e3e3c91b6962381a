"""Study flows: prompt the model and save its cleaned reply as a note."""

import logging

from study_helper.schemas.ai import (
    MindMapResult,
    ResearchResult,
    RevisionNotesResult,
    SelectedNote,
    SummaryResult,
    TranslationResult,
    VideoSummaryResult,
)
from study_helper.services import prompts
from study_helper.services.gemini import GeminiService
from study_helper.services.mindmap import FALLBACK_MIND_MAP, parse_mind_map
from study_helper.services.prompts import ResearchDepth, SummaryDepth
from study_helper.services.research import extract_video_id, suggest_sources
from study_helper.services.store import NoteStore, ValidationError
from study_helper.services.text import clean_title, strip_markdown

logger = logging.getLogger(__name__)

_TITLE_EXCERPT_CHARS = 300


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


class StudyAssistant:
    """Runs each study flow against the Gemini gateway and persists its output."""

    def __init__(self, gateway: GeminiService, store: NoteStore) -> None:
        self._gateway = gateway
        self._store = store

    def _title(self, kind: str, excerpt: str, context: str = "") -> str:
        return clean_title(self._gateway.generate(prompts.title_prompt(kind, excerpt, context)))

    def summarize(
        self,
        text: str | None,
        depth: SummaryDepth = "detailed",
        selected_notes: list[SelectedNote] | None = None,
    ) -> SummaryResult:
        selected_notes = selected_notes or []
        if _is_blank(text) and not selected_notes:
            raise ValidationError("Text input or selected notes are required for summarization")

        context = ""
        if selected_notes:
            context = "\n\nPrevious Notes Context:\n"
            for i, note in enumerate(selected_notes, start=1):
                context += f"\n--- Note {i}: {note.title} ({note.type}) ---\n{note.content}\n"

        logger.info("generating %s summary", depth)
        summary = strip_markdown(self._gateway.generate(prompts.summary_prompt((text or "") + context, depth)))
        based_on = f"Based on {len(selected_notes)} previous note(s)" if selected_notes else ""
        title = self._title("educational summary", f"Summary: {summary[:_TITLE_EXCERPT_CHARS]}", based_on)

        original_text = text or "\n\n".join(f"{n.title}: {n.content}" for n in selected_notes)
        note = self._store.create(summary, "summary", original_text, None, title)
        return SummaryResult(summary=summary, note_id=note.id)

    def translate(self, text: str | None, language: str | None) -> TranslationResult:
        if _is_blank(text):
            raise ValidationError("Text input is required for translation")
        if _is_blank(language):
            raise ValidationError("Target language is required for translation")
        assert text is not None and language is not None

        logger.info("translating text to %s", language)
        translation = strip_markdown(self._gateway.generate(prompts.translation_prompt(text, language)))
        title = self._title(
            f"{language} translation", f"Translation: {translation[:_TITLE_EXCERPT_CHARS]}"
        )
        note = self._store.create(translation, "translation", text, language, title)
        return TranslationResult(
            translation=translation, original_text=text, language=language, note_id=note.id
        )

    def revision_notes(self, text: str | None) -> RevisionNotesResult:
        if _is_blank(text):
            raise ValidationError("Text input is required for revision notes generation")
        assert text is not None

        logger.info("generating revision notes")
        notes = strip_markdown(self._gateway.generate(prompts.revision_notes_prompt(text)))
        title = self._title("revision notes", f"Notes: {notes[:_TITLE_EXCERPT_CHARS]}")
        note = self._store.create(notes, "notes", text, None, title)
        return RevisionNotesResult(revision_notes=notes, note_id=note.id)

    def mind_map(self, text: str | None) -> MindMapResult:
        if _is_blank(text):
            raise ValidationError("Text input is required for mind map generation")
        assert text is not None

        logger.info("generating mind map structure")
        raw = self._gateway.generate(prompts.mind_map_prompt(text))
        try:
            mind_map = parse_mind_map(raw)
        except ValueError as exc:
            logger.warning("falling back to default mind map: %s", exc)
            mind_map = FALLBACK_MIND_MAP.model_copy(deep=True)
            title = f"Mind Map - {text[:30]}..."
        else:
            title = self._title("mind map", f"Topic: {text[:200]}")

        note = self._store.create(mind_map.model_dump_json(), "mindmap", text, None, title)
        return MindMapResult(mind_map=mind_map, note_id=note.id)

    def research(self, topic: str | None, depth: ResearchDepth = "medium") -> ResearchResult:
        if _is_blank(topic):
            raise ValidationError("Research topic is required")
        assert topic is not None

        logger.info("starting %s research on %r", depth, topic)
        report = strip_markdown(self._gateway.generate(prompts.research_prompt(topic, depth)))
        sources = suggest_sources(topic, depth)
        title = self._title("research report", f"Topic: {topic}\nResearch: {report[:200]}")
        note = self._store.create(report, "notes", topic, None, title)
        return ResearchResult(research=report, sources=sources, note_id=note.id)

    def youtube_summary(self, url: str | None) -> VideoSummaryResult:
        if _is_blank(url):
            raise ValidationError("YouTube URL is required")
        assert url is not None
        video_id = extract_video_id(url)
        if video_id is None:
            raise ValidationError("Invalid YouTube URL")

        logger.info("summarizing YouTube video %s", video_id)
        summary = strip_markdown(
            self._gateway.generate(
                prompts.video_summary_prompt(),
                video_url=f"https://www.youtube.com/watch?v={video_id}",
            )
        )
        title = self._title("YouTube video summary", f"Video Summary: {summary[:200]}")
        note = self._store.create(summary, "notes", url, None, title)
        return VideoSummaryResult(summary=summary, video_id=video_id, note_id=note.id)
