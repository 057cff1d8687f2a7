"""Plain-text extraction from uploaded PDF documents."""

from __future__ import annotations

import base64
import binascii
import io
import logging

from pypdf import PdfReader
from starlette.datastructures import FormData, UploadFile

from careerlens.errors import ContractValidationError, ExtractionError, MissingFileError
from careerlens.models.learning_models import DATA_URI_PATTERN

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "file"


def _open(buffer: bytes) -> PdfReader:
    if not buffer:
        raise ExtractionError("Failed to parse PDF file", details="The uploaded file is empty.")
    try:
        return PdfReader(io.BytesIO(buffer))
    except Exception as exc:
        logger.error("PDF parse error: %s", exc)
        raise ExtractionError("Failed to parse PDF file", details=str(exc)) from exc


def read_pdf(buffer: bytes) -> tuple[str, int]:
    """Return the text of every page in ``buffer`` and the page count.

    Pages are joined by blank lines. Raises ``ExtractionError`` if the buffer
    is not a readable PDF; nothing is returned unless every page was read.
    """
    reader = _open(buffer)
    try:
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as exc:
        logger.error("PDF text extraction failed: %s", exc)
        raise ExtractionError("Failed to parse PDF file", details=str(exc)) from exc
    return "\n\n".join(text for text in pages if text), len(pages)


def extract_text_from_bytes(buffer: bytes) -> str:
    return read_pdf(buffer)[0]


async def read_upload(form: FormData, field: str = UPLOAD_FIELD) -> bytes:
    """Return the raw bytes of the named file field of a multipart form."""
    upload = form.get(field)
    if not isinstance(upload, UploadFile):
        raise MissingFileError("No file provided")
    logger.info("File received: %s (%s)", upload.filename, upload.content_type)
    return await upload.read()


async def extract_text_from_upload(form: FormData, field: str = UPLOAD_FIELD) -> str:
    """Extract text from the file field of a multipart submission."""
    return extract_text_from_bytes(await read_upload(form, field))


def decode_data_uri(uri: str) -> tuple[str, bytes]:
    """Split a ``data:<mime>;base64,<payload>`` string into (mime, bytes)."""
    match = DATA_URI_PATTERN.match(uri)
    if not match:
        raise ContractValidationError("Invalid data URI")
    try:
        payload = base64.b64decode("".join(match.group("payload").split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ContractValidationError("Invalid base64 payload in data URI") from exc
    return match.group("mime"), payload
