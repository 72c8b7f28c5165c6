"""
Exception classes for BoldRead.

All BoldRead exceptions inherit from BoldReadError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     result = boldread.convert("file.pdf")
    ... except boldread.EmptyDocumentError:
    ...     print("Nothing to show")
    ... except boldread.BoldReadError as e:
    ...     print(f"BoldRead error: {e}")
"""


class BoldReadError(Exception):
    """
    Base exception for all BoldRead errors.

    Catch this to handle any BoldRead-specific error.
    """

    pass


class UnsupportedFormatError(BoldReadError):
    """
    Raised when an upload is not a supported document format.

    Example:
        >>> validate_upload("notes.docx", 1024)
        UnsupportedFormatError: Invalid file type '.docx'. Supported: .pdf
    """

    pass


class DocumentTooLargeError(BoldReadError):
    """Raised when an upload exceeds the configured size limit."""

    pass


class ExtractionError(BoldReadError):
    """
    Raised when text extraction fails.

    Malformed, truncated or password-protected PDFs end up here.
    Fatal to the current operation; never retried.
    """

    pass


class EmptyDocumentError(BoldReadError):
    """
    Raised when segmentation leaves no paragraphs.

    Hosts should show a "nothing to show" state rather than an error page.
    """

    pass


class RenderError(BoldReadError):
    """
    Raised when the rendering service fails during draw or serialize.

    Fatal to the export; the session's preview state is left untouched.
    """

    pass


class ExportCancelledError(BoldReadError):
    """Raised when the host cancels an export before serialization."""

    pass


class SessionBusyError(BoldReadError):
    """Raised when an export or regeneration is already running for a session."""

    pass


class ConfigurationError(BoldReadError, ValueError):
    """
    Raised for invalid configuration.

    Example:
        >>> LayoutConfig(font_size=40)
        ConfigurationError: font_size must be between 12 and 24, got 40
    """

    pass
