"""Gemini gateway: sends a prompt to the model and returns its text reply."""

import logging

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from study_helper.config import settings

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Raised when the Gemini call fails; carries the HTTP status to report."""

    status_code = 500


class GatewayNotConfiguredError(UpstreamError):
    status_code = 500

    def __init__(self) -> None:
        super().__init__(
            "Gemini API key not configured. Please set GEMINI_API_KEY in your environment variables."
        )


class UpstreamAuthError(UpstreamError):
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid Gemini API key. Please check your configuration.")


class QuotaExceededError(UpstreamError):
    status_code = 402

    def __init__(self) -> None:
        super().__init__("Gemini API quota exceeded. Please check your billing.")


def _classify(exc: Exception) -> UpstreamError:
    """Map a client library failure onto the upstream error taxonomy."""
    message = str(exc)
    code = exc.code if isinstance(exc, genai_errors.APIError) else None
    if code in (401, 403) or "API key" in message:
        return UpstreamAuthError()
    if code == 429 or "quota" in message.lower():
        return QuotaExceededError()
    return UpstreamError(message or type(exc).__name__)


class GeminiService:
    """Calls the Gemini API with a text prompt."""

    def __init__(self, api_key: str | None = None, model_name: str | None = None) -> None:
        self._api_key = settings.gemini_api_key if api_key is None else api_key
        self._model_name = model_name or settings.gemini_model
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        if not self._api_key:
            raise GatewayNotConfiguredError()
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def generate(self, prompt: str, video_url: str | None = None) -> str:
        """Send *prompt* (optionally with a YouTube video attached) and return the reply text.

        Raises GatewayNotConfiguredError if no API key is set and an
        UpstreamError subclass for any failure of the call itself.
        """
        client = self._get_client()
        contents: list[genai_types.Part | str] = []
        if video_url:
            contents.append(genai_types.Part(file_data=genai_types.FileData(file_uri=video_url)))
        contents.append(prompt)

        logger.info("sending prompt (%d chars) to Gemini model %s", len(prompt), self._model_name)
        try:
            response = client.models.generate_content(model=self._model_name, contents=contents)
        except Exception as exc:
            logger.error("Gemini request failed: %s", exc)
            raise _classify(exc) from exc

        reply = response.text
        if not reply:
            raise UpstreamError("Gemini returned an empty response")
        logger.info("Gemini response received (%d chars)", len(reply))
        return reply
