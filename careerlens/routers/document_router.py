"""Document router - resume upload to plain text."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from careerlens.errors import ExtractionError
from careerlens.models.response_models import FailureEnvelope, ParsedDocument
from careerlens.services.document_extraction import (
    read_pdf,
    read_upload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["documents"])


@router.post(
    "/parse-resume",
    response_model=ParsedDocument,
    responses={400: {"model": FailureEnvelope}},
)
async def parse_resume(request: Request) -> ParsedDocument:
    """Extract the text of an uploaded PDF resume (multipart field ``file``)."""
    form = await request.form()
    buffer = await read_upload(form)
    text, pages = read_pdf(buffer)
    if not text.strip():
        raise ExtractionError(
            "No text content found in PDF",
            details=(
                "The PDF may contain only images (scanned document) or be corrupted. "
                "Try converting to DOCX or TXT format."
            ),
        )
    logger.info("Parsed resume: %d characters over %d pages", len(text), pages)
    return ParsedDocument(text=text, pages=pages)
