"""
Paragraph segmentation.

Extracted PDF text carries no reliable paragraph structure, so paragraphs
are recovered with a sentence-boundary heuristic: split wherever a period
is followed by whitespace, then keep only fragments long enough to read
as a paragraph.

This is a heuristic, not a grammatical parser. Abbreviations ("e.g. ")
and decimals followed by a space split too; that behaviour is kept as is.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from boldread.models import Paragraph
from boldread.normalizers.text import collapse_whitespace, normalize, rejoin_line_breaks

if TYPE_CHECKING:
    from boldread.readers.pdf_reader import RawDocument

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 80

# The period stays with the preceding fragment
BOUNDARY_PATTERN = re.compile(r"(?<=\.)\s+")


def segment(full_text: str, min_length: int = DEFAULT_MIN_LENGTH) -> list[Paragraph]:
    """
    Split normalized text into paragraphs.

    Args:
        full_text: Normalized document text.
        min_length: Fragments shorter than this (after trimming) are dropped.

    Returns:
        Paragraphs in source order, indexed from 0.

    Example:
        >>> text = "The quick brown fox jumps. Readability depends on content."
        >>> [p.text for p in segment(text, min_length=20)]
        ['The quick brown fox jumps.', 'Readability depends on content.']
    """
    paragraphs: list[Paragraph] = []
    dropped = 0

    for fragment in BOUNDARY_PATTERN.split(full_text):
        text = collapse_whitespace(fragment)
        if not text or len(text) < min_length:
            dropped += 1
            continue
        paragraphs.append(Paragraph(index=len(paragraphs), text=text))

    logger.debug("Segmented %d paragraphs (%d fragments dropped)", len(paragraphs), dropped)
    return paragraphs


def prepare_text(raw: RawDocument, *, rejoin_hyphenation: bool = True) -> str:
    """Join page texts and normalize the result for segmentation."""
    text = raw.text
    if rejoin_hyphenation:
        text = rejoin_line_breaks(text)
    return normalize(text)


def build_paragraph_pool(
    raw: RawDocument,
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    rejoin_hyphenation: bool = True,
) -> tuple[Paragraph, ...]:
    """Run normalization and segmentation over a whole extracted document."""
    text = prepare_text(raw, rejoin_hyphenation=rejoin_hyphenation)
    pool = tuple(segment(text, min_length=min_length))
    logger.info(
        "Paragraph pool: %d paragraphs from %d pages (%d chars)",
        len(pool),
        len(raw.pages),
        len(text),
    )
    return pool
