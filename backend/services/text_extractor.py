"""Plain-text extraction from uploaded resume documents.

Runs before analysis; the analyzer itself only ever sees text.
"""

import io
import logging
from abc import ABC, abstractmethod

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)


class TextExtractionError(Exception):
    """Base class for document extraction failures."""


class UnsupportedFormatError(TextExtractionError):
    """The document is neither a PDF nor a DOCX file."""


class ExtractionError(TextExtractionError):
    """The document could not be read by its format library."""


class TextExtractor(ABC):
    """Extracts plain text from one document format."""

    name: str = ""
    media_types: frozenset[str] = frozenset()
    extensions: tuple[str, ...] = ()

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Return the document's text."""

    def accepts(self, filename: str | None = None, content_type: str | None = None) -> bool:
        if content_type and content_type.split(";")[0].strip().lower() in self.media_types:
            return True
        return bool(filename) and filename.lower().endswith(self.extensions)


class PdfTextExtractor(TextExtractor):
    name = "pdf"
    media_types = frozenset({"application/pdf"})
    extensions = (".pdf",)

    def extract(self, content: bytes) -> str:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
        return "\n".join(pages).strip()


class DocxTextExtractor(TextExtractor):
    name = "docx"
    media_types = frozenset({
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    })
    extensions = (".docx",)

    def extract(self, content: bytes) -> str:
        doc = Document(io.BytesIO(content))
        return "\n".join(p.text for p in doc.paragraphs).strip()


EXTRACTORS: tuple[TextExtractor, ...] = (PdfTextExtractor(), DocxTextExtractor())


def get_extractor(filename: str | None = None, content_type: str | None = None) -> TextExtractor:
    """Pick an extractor by MIME type first, then by file extension."""
    for extractor in EXTRACTORS:
        if extractor.accepts(content_type=content_type):
            return extractor
    for extractor in EXTRACTORS:
        if extractor.accepts(filename=filename):
            return extractor
    raise UnsupportedFormatError(
        f"Unsupported document type: {content_type or filename or 'unknown'}"
    )


def extract_text(
    content: bytes, filename: str | None = None, content_type: str | None = None
) -> str:
    """Extract text from a PDF or DOCX document."""
    extractor = get_extractor(filename, content_type)
    try:
        return extractor.extract(content)
    except Exception as e:
        logger.warning("Failed to extract %s text from %s: %s", extractor.name, filename, e)
        raise ExtractionError(f"Could not parse {extractor.name.upper()} file") from e
