"""
Paragraph extraction and excerpt selection.

Pipeline:
1. prepare_text: join pages, rejoin hyphenation, normalize
2. segment: split at ". " boundaries, drop short fragments
3. select_excerpt / ExcerptSelector: pick a 3-5 paragraph window
"""

from boldread.extractors.excerpt import (
    DEFAULT_COUNT_RANGE,
    ExcerptSelector,
    select_excerpt,
)
from boldread.extractors.paragraphs import (
    DEFAULT_MIN_LENGTH,
    build_paragraph_pool,
    prepare_text,
    segment,
)

__all__ = [
    # Segmentation
    "segment",
    "prepare_text",
    "build_paragraph_pool",
    "DEFAULT_MIN_LENGTH",
    # Selection
    "select_excerpt",
    "ExcerptSelector",
    "DEFAULT_COUNT_RANGE",
]
