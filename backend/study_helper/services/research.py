"""Research helpers: suggested sources and YouTube URL parsing."""

import re

from study_helper.schemas.ai import Source
from study_helper.services.prompts import ResearchDepth

_SOURCE_COUNTS: dict[str, int] = {"light": 3, "medium": 8, "deep": 15}

_YOUTUBE_ID_PATTERNS = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/embed/([^&\n?#]+)"),
    re.compile(r"youtube\.com/v/([^&\n?#]+)"),
)


def suggest_sources(topic: str, depth: ResearchDepth) -> list[Source]:
    """Return reading suggestions for *topic*, more of them for deeper research."""
    count = _SOURCE_COUNTS.get(depth, _SOURCE_COUNTS["medium"])
    slug = re.sub(r"\s+", "-", topic.lower())
    sources: list[Source] = []
    for i in range(count):
        if i < 2:
            kind = "academic"
        elif i < 5:
            kind = "educational"
        else:
            kind = "reference"
        sources.append(
            Source(
                title=f"{topic} - Educational Resource {i + 1}",
                url=f"https://example-education-site.com/{slug}-{i + 1}",
                type=kind,
            )
        )
    return sources


def extract_video_id(url: str) -> str | None:
    """Extract the video id from watch, short, embed or /v/ YouTube URLs."""
    for pattern in _YOUTUBE_ID_PATTERNS:
        m = pattern.search(url)
        if m:
            return m.group(1)
    return None
