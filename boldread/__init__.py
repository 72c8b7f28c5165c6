"""
BoldRead: partially-bolded reading excerpts from PDF documents.

Upload a PDF, preview an excerpt with the first letters of every word in
bold, tune the bolding and typography, and export a new PDF that
reproduces exactly the previewed bolding.

Example:
    >>> import boldread
    >>> session = boldread.DocumentSession.from_path("essay.pdf")
    >>> print(session.preview().to_markdown())
    >>> session.update_settings(bolding=boldread.BoldingConfig.from_strength(2))
    >>> session.export().save("essay-bold.pdf")
"""

from boldread.config import (
    LETTER,
    BoldingConfig,
    LayoutConfig,
    PageGeometry,
    SessionConfig,
)
from boldread.convert import (
    convert,
    detect_format,
    open_upload,
    supported_formats,
    validate_upload,
)
from boldread.exceptions import (
    BoldReadError,
    ConfigurationError,
    DocumentTooLargeError,
    EmptyDocumentError,
    ExportCancelledError,
    ExtractionError,
    RenderError,
    SessionBusyError,
    UnsupportedFormatError,
)
from boldread.layout.bolding import split_word
from boldread.models import (
    BoldSplit,
    DrawInstruction,
    Excerpt,
    ExportResult,
    Font,
    Line,
    Page,
    Paragraph,
    RawPage,
    TextRun,
)
from boldread.preview import Preview, build_preview
from boldread.session import DocumentSession

__version__ = "0.1.0"
__all__ = [
    # Main API
    "DocumentSession",
    "convert",
    "open_upload",
    "validate_upload",
    "detect_format",
    "supported_formats",
    "split_word",
    "build_preview",
    # Configuration
    "BoldingConfig",
    "LayoutConfig",
    "PageGeometry",
    "SessionConfig",
    "LETTER",
    # Models
    "RawPage",
    "Paragraph",
    "Excerpt",
    "BoldSplit",
    "TextRun",
    "Line",
    "Page",
    "Font",
    "DrawInstruction",
    "ExportResult",
    "Preview",
    # Exceptions
    "BoldReadError",
    "UnsupportedFormatError",
    "DocumentTooLargeError",
    "ExtractionError",
    "EmptyDocumentError",
    "RenderError",
    "ExportCancelledError",
    "SessionBusyError",
    "ConfigurationError",
]
