"""
Normalizers for extracted text.

- normalize: strip unsupported characters, keep accents and basic punctuation
- rejoin_line_breaks: undo end-of-line hyphenation
- collapse_whitespace: single-space a span of text
"""

from boldread.normalizers.text import (
    ALLOWED_PUNCTUATION,
    collapse_whitespace,
    normalize,
    rejoin_line_breaks,
)

__all__ = [
    "normalize",
    "rejoin_line_breaks",
    "collapse_whitespace",
    "ALLOWED_PUNCTUATION",
]
