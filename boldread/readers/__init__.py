"""PDF reading module (PyMuPDF)."""

from boldread.readers.pdf_reader import (
    PDFReader,
    RawDocument,
    detect_language,
)

__all__ = [
    "PDFReader",
    "RawDocument",
    "detect_language",
]
