"""
The bolding rule.

A single pure function decides how many leading characters of a word are
bold. Both the preview projection and the export path call split_word(),
so what the reader sees is exactly what gets exported.
"""

from __future__ import annotations

from boldread.config import BoldingConfig
from boldread.models import BoldSplit
from boldread.normalizers.text import normalize

# Word length tier boundaries
SHORT_WORD_MAX = 3
MEDIUM_WORD_MAX = 6


def bold_length(length: int, cfg: BoldingConfig) -> int:
    """Number of bold characters for a word of the given length."""
    if length > MEDIUM_WORD_MAX:
        chosen = cfg.long_words
    elif length > SHORT_WORD_MAX:
        chosen = cfg.medium_words
    else:
        chosen = cfg.short_words
    return min(chosen, length)


def split_word(word: str, cfg: BoldingConfig) -> BoldSplit:
    """
    Split a word into its bold prefix and regular remainder.

    The word is cleaned with normalize() first; tiers are chosen on the
    cleaned length, so ``bold + regular == normalize(word)`` always holds.

    Example:
        >>> split_word("jumps", BoldingConfig(1, 2, 3))
        BoldSplit(bold='ju', regular='mps')
    """
    cleaned = normalize(word)
    if not cleaned:
        return BoldSplit("", "")

    n = bold_length(len(cleaned), cfg)
    return BoldSplit(cleaned[:n], cleaned[n:])


def split_text(text: str, cfg: BoldingConfig) -> list[BoldSplit]:
    """Apply split_word() to every whitespace-delimited word of text."""
    splits = (split_word(word, cfg) for word in text.split())
    return [s for s in splits if s.text]
