"""
Document conversion entry points.

This module provides the one-shot `convert()` function and upload helpers
that sit in front of DocumentSession:
- validate_upload / detect_format (what the upload surface accepts)
- open_upload (validated bytes -> DocumentSession)
- convert (path -> bolded PDF bytes in one call)
"""

from __future__ import annotations

import logging
from pathlib import Path

from boldread.config import SessionConfig
from boldread.exceptions import DocumentTooLargeError, UnsupportedFormatError
from boldread.models import ExportResult
from boldread.session import DocumentSession

logger = logging.getLogger(__name__)

# Extensions recognised by detect_format; only PDF can be extracted
EXTENSION_FORMATS = {
    ".pdf": "pdf",
    ".doc": "doc",
    ".docx": "docx",
}

PDF_MAGIC = b"%PDF"


def format_size(num_bytes: int) -> str:
    """Human-readable size: "10MB", "1.5MB", "512KB", "100 bytes"."""
    for unit, factor in (("MB", 1024 * 1024), ("KB", 1024)):
        if num_bytes >= factor:
            value = f"{num_bytes / factor:.1f}".removesuffix(".0")
            return f"{value}{unit}"
    return f"{num_bytes} bytes"


def supported_formats() -> list[str]:
    """Return list of currently supported input formats."""
    return ["pdf"]


def detect_format(source: str | Path | bytes) -> str:
    """
    Detect document format from file extension or magic bytes.

    Args:
        source: Path to a document, or its raw bytes.

    Returns:
        Format string: "pdf", "doc", "docx".

    Raises:
        UnsupportedFormatError: If the format cannot be detected.
    """
    if isinstance(source, bytes):
        if source.startswith(PDF_MAGIC):
            return "pdf"
        raise UnsupportedFormatError("Cannot detect format: missing %PDF header")

    path = Path(source)
    ext = path.suffix.lower()
    if ext in EXTENSION_FORMATS:
        return EXTENSION_FORMATS[ext]

    # Try magic bytes for PDF
    try:
        with open(path, "rb") as f:
            if f.read(8).startswith(PDF_MAGIC):
                return "pdf"
    except OSError:
        pass

    raise UnsupportedFormatError(f"Cannot detect format for: {path}")


def validate_upload(
    filename: str,
    size: int,
    max_bytes: int | None = None,
) -> str:
    """
    Check an upload before reading it.

    Args:
        filename: Name of the uploaded file (only the extension is used).
        size: Upload size in bytes.
        max_bytes: Size limit; defaults to SessionConfig's limit.

    Returns:
        The detected format ("pdf").

    Raises:
        UnsupportedFormatError: If the extension is not a supported format.
        DocumentTooLargeError: If the upload exceeds max_bytes.
    """
    max_bytes = max_bytes if max_bytes is not None else SessionConfig().max_upload_bytes
    ext = Path(filename).suffix.lower()
    fmt = EXTENSION_FORMATS.get(ext)

    if fmt not in supported_formats():
        allowed = ", ".join(f".{f}" for f in supported_formats())
        raise UnsupportedFormatError(
            f"Invalid file type {ext or filename!r}. Please upload {allowed} files only."
        )
    if size > max_bytes:
        raise DocumentTooLargeError(
            f"File is too large ({format_size(size)}). Maximum size is {format_size(max_bytes)}."
        )
    return fmt


def open_upload(
    filename: str,
    data: bytes,
    config: SessionConfig | None = None,
) -> DocumentSession:
    """
    Validate uploaded bytes and open a session on them.

    Raises:
        UnsupportedFormatError: Wrong extension.
        DocumentTooLargeError: Too many bytes.
        ExtractionError: Malformed or encrypted PDF.
    """
    config = config or SessionConfig()
    validate_upload(filename, len(data), config.max_upload_bytes)
    logger.info("Opening upload %s (%d bytes)", filename, len(data))
    return DocumentSession.from_bytes(data, config)


def convert(
    source: str | Path,
    config: SessionConfig | None = None,
) -> ExportResult:
    """
    Convert a PDF into a bolded excerpt PDF in one call.

    Picks an excerpt (use config.seed for a reproducible choice), applies
    the bolding rule and renders the result.

    Args:
        source: Path to a PDF file.
        config: Session configuration (uses defaults if None).

    Returns:
        ExportResult with the new PDF's bytes.

    Raises:
        FileNotFoundError: If source doesn't exist.
        UnsupportedFormatError: If source is not a PDF.
        ExtractionError: If the PDF cannot be read.
        EmptyDocumentError: If no paragraphs were found.
        RenderError: If rendering fails.

    Example:
        >>> result = convert("essay.pdf", SessionConfig(seed=1))
        >>> result.save("essay-bold.pdf")
    """
    source = Path(source)
    if not source.exists():
        raise FileNotFoundError(f"Source file not found: {source}")

    fmt = detect_format(source)
    if fmt not in supported_formats():
        raise UnsupportedFormatError(
            f"Format '{fmt}' not supported. Currently only PDF is supported."
        )

    session = DocumentSession.from_path(source, config)
    return session.export()
