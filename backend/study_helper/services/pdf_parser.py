"""Uploaded file checks and PDF text extraction."""

import io
from pathlib import PurePath

import pdfplumber

_ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".pdf"}
_ALLOWED_MIME_SUBTYPES = {"jpeg", "jpg", "png", "gif", "pdf"}


def is_allowed_upload(filename: str, content_type: str) -> bool:
    """Return True for PDF and common image files, judged by extension and MIME type."""
    extension = PurePath(filename).suffix.lower()
    subtype = content_type.split("/")[-1].lower()
    return extension in _ALLOWED_EXTENSIONS and subtype in _ALLOWED_MIME_SUBTYPES


def is_pdf(content_type: str) -> bool:
    return content_type == "application/pdf"


def is_image(content_type: str) -> bool:
    return content_type.startswith("image/")


class PdfParser:
    """Extract plain text from PDF bytes."""

    def extract_text(self, pdf_bytes: bytes) -> str:
        """Return the text of every page joined by newlines.

        Raises ValueError if the bytes cannot be read as a PDF.
        """
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ValueError(f"Could not read PDF: {exc}") from exc
        return "\n".join(pages)
