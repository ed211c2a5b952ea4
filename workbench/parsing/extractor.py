"""Uploaded file to text conversion.

Word documents are read with python-docx, textual media types are decoded
directly, and anything else becomes a short base64 preview tagged with the
filename. Extraction is best effort and never raises to the caller.
"""

import base64
import io
import logging
from typing import Protocol

import docx

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
DOCX_EXTENSION = ".docx"
PREVIEW_LENGTH = 100
EXTRACTION_FAILED = "[Could not extract text from file]"


class DocumentReader(Protocol):
    """Extracts raw text from word-processor document bytes."""

    def extract_raw_text(self, data: bytes) -> str: ...


class DocxReader:
    """DocumentReader backed by python-docx."""

    def extract_raw_text(self, data: bytes) -> str:
        document = docx.Document(io.BytesIO(data))
        return "\n".join(p.text for p in document.paragraphs)


def _data_url(content_type: str | None, data: bytes) -> str:
    media_type = content_type or "application/octet-stream"
    return f"data:{media_type};base64,{base64.b64encode(data).decode('ascii')}"


class TextExtractor:
    """Converts an uploaded file into text for the input buffer."""

    def __init__(self, reader: DocumentReader | None = None) -> None:
        """Initialize the extractor.

        Args:
            reader: Word document reader. Defaults to python-docx.
        """
        self._reader = reader or DocxReader()

    def extract(self, filename: str, content_type: str | None, data: bytes) -> str:
        """Extract text from an uploaded file.

        Args:
            filename: Name of the uploaded file.
            content_type: Declared media type, if known.
            data: Raw file bytes.

        Returns:
            Extracted text, a failure placeholder for unreadable documents,
            or a tagged base64 preview for other binary content.
        """
        if filename.lower().endswith(DOCX_EXTENSION):
            try:
                return self._reader.extract_raw_text(data)
            except Exception as e:
                logger.warning(f"Error extracting text from {filename}: {e}")
                return EXTRACTION_FAILED

        if content_type and content_type.startswith("text/"):
            return data.decode("utf-8", errors="replace")

        preview = _data_url(content_type, data)[:PREVIEW_LENGTH]
        return f"[File Uploaded: {filename}, Base64: {preview}...]"
