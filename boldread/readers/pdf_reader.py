"""
PDF text extraction using PyMuPDF (fitz).

Produces one RawPage of plain text per source page. Structure, fonts and
positions in the source are ignored: the text is reflowed from scratch
downstream.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import fitz  # PyMuPDF
from langdetect import DetectorFactory
from langdetect import detect as langdetect_detect
from langdetect.lang_detect_exception import LangDetectException

from boldread.exceptions import ExtractionError
from boldread.models import RawPage

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

# Make language detection deterministic
DetectorFactory.seed = 0

# Minimum text needed for a meaningful language guess
MIN_LANGUAGE_SAMPLE = 20


def detect_language(text: str) -> str | None:
    """Guess the dominant language code of text, or None if unsure."""
    sample = text.strip()[:5000]
    if len(sample) < MIN_LANGUAGE_SAMPLE:
        return None
    try:
        return langdetect_detect(sample)
    except LangDetectException:
        return None


@dataclass
class RawDocument:
    """Raw extracted text of an uploaded document.

    Created once per upload and treated as immutable; everything else is
    derived from it.
    """

    source_path: Path | None
    page_count: int
    pages: list[RawPage]
    metadata: dict[str, str | None]
    language: str | None = None

    _text_cache: str | None = field(default=None, repr=False)

    @property
    def text(self) -> str:
        """Full document text, pages separated by blank lines (cached)."""
        if self._text_cache is None:
            self._text_cache = "\n\n".join(page.text for page in self.pages if page.text)
        return self._text_cache

    @property
    def is_blank(self) -> bool:
        """True if no page yielded any text (e.g. a scanned document)."""
        return not any(page.text for page in self.pages)


class PDFReader:
    """Extracts page text from PDFs using PyMuPDF.

    Usage:
        reader = PDFReader()
        raw = reader.read("/path/to/file.pdf")
        raw = reader.read_bytes(uploaded_bytes)
    """

    def __init__(self, *, guess_language: bool = True):
        """Initialize the PDF reader.

        Args:
            guess_language: Whether to guess the document language.
        """
        self.guess_language = guess_language

    def read(self, path: str | Path) -> RawDocument:
        """Read a PDF file from disk.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ExtractionError: If file is not a readable PDF.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"PDF not found: {path}")
        return self.read_bytes(path.read_bytes(), source_path=path)

    def read_bytes(self, data: bytes, *, source_path: Path | None = None) -> RawDocument:
        """Read a PDF from memory.

        Args:
            data: Raw document bytes.
            source_path: Original location, if any (informational).

        Returns:
            RawDocument with one RawPage per source page.

        Raises:
            ExtractionError: If the bytes are malformed or encrypted.
        """
        if not data:
            raise ExtractionError("Empty document")

        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise ExtractionError(f"Failed to open PDF: {e}") from e

        try:
            if doc.needs_pass:
                raise ExtractionError("PDF is encrypted")

            try:
                pages = list(self._extract_pages(doc))
            except Exception as e:
                raise ExtractionError(f"Failed to extract text: {e}") from e

            raw = RawDocument(
                source_path=source_path,
                page_count=len(doc),
                pages=pages,
                metadata=self._extract_metadata(doc),
            )
        finally:
            doc.close()

        if self.guess_language:
            raw.language = detect_language(raw.text)

        if raw.is_blank:
            logger.warning("No extractable text in %s", source_path or "upload")
        logger.info("Extracted %d pages (%d chars)", raw.page_count, len(raw.text))
        return raw

    def _extract_pages(self, doc: fitz.Document) -> Iterator[RawPage]:
        """Extract plain text from each page."""
        for page_idx in range(len(doc)):
            page = doc[page_idx]
            yield RawPage(index=page_idx, text=page.get_text("text").strip())

    def _extract_metadata(self, doc: fitz.Document) -> dict[str, str | None]:
        """Extract PDF metadata."""
        meta = doc.metadata or {}
        return {
            "title": meta.get("title") or None,
            "author": meta.get("author") or None,
            "producer": meta.get("producer") or None,
        }
