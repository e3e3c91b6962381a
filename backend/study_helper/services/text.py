"""Plain-text clean-up for model output."""

import re

_MARKDOWN_CHARS = str.maketrans("", "", "*_#")
_WHITESPACE_RE = re.compile(r"\s+")
_FENCE_START_RE = re.compile(r"^```(?:json)?\s*")
_FENCE_END_RE = re.compile(r"\s*```$")


def strip_markdown(text: str) -> str:
    """Remove ``*``, ``_`` and ``#`` characters and collapse whitespace runs to one space."""
    return _WHITESPACE_RE.sub(" ", text.translate(_MARKDOWN_CHARS)).strip()


def clean_title(text: str) -> str:
    return text.strip().replace('"', "").replace("'", "")


def extract_json_object(raw: str) -> str:
    """Return the outermost ``{...}`` span of *raw*, after dropping code fences."""
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE_END_RE.sub("", _FENCE_START_RE.sub("", cleaned))
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        cleaned = cleaned[start : end + 1]
    return cleaned
