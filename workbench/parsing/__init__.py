"""File to text extraction for the input buffer.

Responsibilities:
    - Raw text extraction from .docx documents with python-docx
    - Direct decoding of textual media types
    - Tagged base64 previews for other binary uploads

The document reader is pluggable so tests and alternative parsers can
replace python-docx.
"""

from workbench.parsing.extractor import (
    EXTRACTION_FAILED,
    DocumentReader,
    DocxReader,
    TextExtractor,
)

__all__ = ["EXTRACTION_FAILED", "DocumentReader", "DocxReader", "TextExtractor"]
