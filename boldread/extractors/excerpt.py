"""
Excerpt selection.

An excerpt is a contiguous window of 3-5 paragraphs drawn from the
document's paragraph pool. Randomness comes from an injected
``random.Random`` so selection is reproducible under a fixed seed.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from boldread.models import Excerpt, Paragraph

logger = logging.getLogger(__name__)

DEFAULT_COUNT_RANGE = (3, 5)


def select_excerpt(
    paragraphs: Sequence[Paragraph],
    count_range: tuple[int, int] = DEFAULT_COUNT_RANGE,
    *,
    rng: random.Random | None = None,
    start_hint: int | None = None,
) -> Excerpt:
    """
    Choose a contiguous window of paragraphs.

    The window size is drawn uniformly from ``count_range`` (inclusive),
    then the start index uniformly from every position where the window
    fits. When fewer paragraphs are available than requested, the whole
    pool is returned.

    Args:
        paragraphs: The document's paragraph pool, in source order.
        count_range: Inclusive (low, high) bounds on the window size.
        rng: Random source. A fresh unseeded generator is used if omitted.
        start_hint: Use this start index instead of a random one. Clamped
            to the valid range.

    Returns:
        Excerpt slice; the pool itself is never modified.
    """
    low, high = count_range
    if low < 1 or high < low:
        raise ValueError(f"count_range must satisfy 1 <= low <= high, got {count_range!r}")

    rng = rng or random.Random()
    count = rng.randint(low, high)

    if len(paragraphs) <= count:
        return Excerpt(paragraphs=tuple(paragraphs), start=0)

    last_start = len(paragraphs) - count
    if start_hint is not None:
        start = min(max(start_hint, 0), last_start)
    else:
        start = rng.randint(0, last_start)

    excerpt = Excerpt(paragraphs=tuple(paragraphs[start : start + count]), start=start)
    logger.debug("Selected paragraphs [%d, %d) of %d", start, start + count, len(paragraphs))
    return excerpt


class ExcerptSelector:
    """
    Re-invocable excerpt selector bound to one random source.

    Each call to select() may return a different window from the same
    pool; that is how "generate new text" works.

    Example:
        >>> selector = ExcerptSelector(seed=42)
        >>> first = selector.select(pool)
        >>> second = selector.select(pool)  # usually a different window
    """

    def __init__(
        self,
        count_range: tuple[int, int] = DEFAULT_COUNT_RANGE,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize the selector.

        Args:
            count_range: Inclusive bounds on excerpt size.
            seed: Seed for a private generator (ignored if rng is given).
            rng: Explicit random source.
        """
        self.count_range = count_range
        self.rng = rng or random.Random(seed)

    def select(
        self,
        paragraphs: Sequence[Paragraph],
        start_hint: int | None = None,
    ) -> Excerpt:
        """Select an excerpt using this selector's random source."""
        return select_excerpt(
            paragraphs,
            self.count_range,
            rng=self.rng,
            start_hint=start_hint,
        )
