"""
Text cleanup for extracted page text.

normalize() keeps letters of any script (accented forms included), digits,
whitespace and a small set of punctuation. Everything else is dropped.
Combining marks survive only when they follow a kept letter or another
kept mark, so orphaned diacritics never end up at the start of a word.

The function is idempotent: normalize(normalize(x)) == normalize(x).
"""

from __future__ import annotations

import logging
import re
import unicodedata

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

ALLOWED_PUNCTUATION = frozenset(".,!?¡¿;:'\"()-")

# Hyphen at end of line followed by a lowercase continuation: "exam-\nple"
HYPHEN_BREAK_PATTERN = re.compile(r"(\w)-[ \t]*\n[ \t]*(?=[^\W\d_])")

WHITESPACE_RUN = re.compile(r"\s+")


# =============================================================================
# NORMALIZATION
# =============================================================================


def _is_letter(char: str) -> bool:
    return unicodedata.category(char).startswith("L")


def _is_mark(char: str) -> bool:
    return unicodedata.category(char).startswith("M")


def _is_kept_base(char: str) -> bool:
    return (
        _is_letter(char)
        or unicodedata.category(char) == "Nd"
        or char.isspace()
        or char in ALLOWED_PUNCTUATION
    )


def normalize(raw: str) -> str:
    """
    Strip unsupported characters and trim surrounding whitespace.

    Text is first composed to NFC so accented letters count as single
    characters wherever a precomposed form exists.

    Args:
        raw: Text as returned by the extraction service.

    Returns:
        Cleaned text; empty string if nothing survives.

    Example:
        >>> normalize("  Café — «olé»  №5 ")
        'Café  olé  5'
    """
    if not raw:
        return ""

    composed = unicodedata.normalize("NFC", raw)
    kept: list[str] = []
    for char in composed:
        if _is_mark(char):
            if kept and (_is_letter(kept[-1]) or _is_mark(kept[-1])):
                kept.append(char)
        elif _is_kept_base(char):
            kept.append(char)

    # Removing characters can leave a mark that NFC would now compose
    return unicodedata.normalize("NFC", "".join(kept)).strip()


def rejoin_line_breaks(text: str) -> str:
    """
    Rejoin words hyphenated across a line break.

    Only a hyphen directly before a newline and followed by a letter is
    treated as a line-break hyphen. Dashes inside a line are left alone.

    Example:
        >>> rejoin_line_breaks("an exam-\\nple of it")
        'an example of it'
    """
    joined, count = HYPHEN_BREAK_PATTERN.subn(r"\1", text)
    if count:
        logger.debug("Rejoined %d line-break hyphenations", count)
    return joined


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with a single space and trim."""
    return WHITESPACE_RUN.sub(" ", text).strip()
