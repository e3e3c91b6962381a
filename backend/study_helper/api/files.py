"""File upload and mind map endpoints."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from study_helper.api.ai import upstream_failure
from study_helper.api.deps import get_assistant, get_pdf_parser
from study_helper.config import MAX_UPLOAD_BYTES
from study_helper.schemas.ai import ExtractedFile, ExtractedFileResponse, MindMapResponse, TextRequest
from study_helper.services.gemini import UpstreamError
from study_helper.services.pdf_parser import PdfParser, is_allowed_upload, is_image, is_pdf
from study_helper.services.store import ValidationError
from study_helper.services.study import StudyAssistant

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload")
def upload_file(
    file: UploadFile | None = File(default=None),
    parser: PdfParser = Depends(get_pdf_parser),
) -> ExtractedFileResponse:
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")
    content_type = file.content_type or ""
    if not is_allowed_upload(file.filename, content_type):
        raise ValidationError("Only PDF and image files are allowed!")

    payload = file.file.read(MAX_UPLOAD_BYTES + 1)
    if len(payload) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large. The limit is 10MB.")
    logger.info("processing uploaded file %s (%d bytes)", file.filename, len(payload))

    if is_image(content_type):
        raise HTTPException(
            status_code=501,
            detail=(
                "Image text extraction is not available in this version. "
                "Please use PDF files instead."
            ),
        )
    if not is_pdf(content_type):
        raise ValidationError("Only PDF and image files are allowed!")

    try:
        text = parser.extract_text(payload)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    if not text.strip():
        raise ValidationError(
            "No text could be extracted from the PDF. The PDF might be image-based or corrupted."
        )

    return ExtractedFileResponse(
        data=ExtractedFile(
            extracted_text=text,
            original_filename=file.filename,
            file_type=content_type,
            text_length=len(text),
        )
    )


@router.post("/mindmap")
def generate_mind_map(
    body: TextRequest,
    assistant: StudyAssistant = Depends(get_assistant),
) -> MindMapResponse:
    try:
        result = assistant.mind_map(body.text)
    except UpstreamError as exc:
        raise upstream_failure(exc, "Failed to generate mind map. Please try again.") from exc
    return MindMapResponse(data=result)
