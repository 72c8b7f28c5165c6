"""
Preview projection.

Builds the on-screen view of an excerpt: every word split with the same
split_word() the export uses, grouped by paragraph. Rendering to Markdown
or HTML is left to the caller.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Literal

from boldread.config import BoldingConfig, LayoutConfig
from boldread.layout.bolding import split_text
from boldread.models import BoldSplit, Excerpt

logger = logging.getLogger(__name__)

PreviewMode = Literal["excerpt", "full"]

# Short-preview window: cut at the first period in this range
PREVIEW_MIN_CHARS = 150
PREVIEW_MAX_CHARS = 200
ELLIPSIS = "..."


def find_cutoff(
    text: str,
    min_length: int = PREVIEW_MIN_CHARS,
    max_length: int = PREVIEW_MAX_CHARS,
) -> int:
    """
    Position to cut text for a short preview.

    Returns len(text) if the text already fits, else one past the first
    period found between min_length and max_length, else max_length.
    """
    if len(text) <= max_length:
        return len(text)
    for i in range(min_length, max_length + 1):
        if text[i] == ".":
            return i + 1
    return max_length


@dataclass(frozen=True)
class Preview:
    """Bolded words of an excerpt, grouped by paragraph."""

    paragraphs: tuple[tuple[BoldSplit, ...], ...]
    mode: PreviewMode = "excerpt"
    truncated: bool = False

    @property
    def is_empty(self) -> bool:
        return not any(self.paragraphs)

    @property
    def text(self) -> str:
        """Plain text of the preview, without bolding."""
        body = "\n\n".join(" ".join(s.text for s in para) for para in self.paragraphs)
        return body + ELLIPSIS if self.truncated else body

    def to_markdown(self) -> str:
        """Render with ``**bold**`` prefixes."""
        body = "\n\n".join(
            " ".join(f"**{s.bold}**{s.regular}" if s.bold else s.regular for s in para)
            for para in self.paragraphs
        )
        return body + ELLIPSIS if self.truncated else body

    def to_html(self, layout: LayoutConfig | None = None) -> str:
        """Render as HTML paragraphs with ``<b>`` prefixes."""
        layout = layout or LayoutConfig()
        parts = []
        for i, para in enumerate(self.paragraphs):
            words = " ".join(
                f"<b>{html.escape(s.bold)}</b>{html.escape(s.regular)}" for s in para
            )
            if self.truncated and i == len(self.paragraphs) - 1:
                words += ELLIPSIS
            parts.append(f"<p>{words}</p>")
        style = f"font-size:{layout.font_size}px;line-height:{layout.line_spacing}"
        return f'<div style="{style}">' + "".join(parts) + "</div>"


def build_preview(
    excerpt: Excerpt,
    cfg: BoldingConfig,
    mode: PreviewMode = "excerpt",
) -> Preview:
    """
    Project an excerpt into its bolded preview.

    Args:
        excerpt: Paragraph window to show.
        cfg: Bolding tiers; the same rule the export applies.
        mode: "excerpt" cuts the text to a short teaser; "full" shows all.

    Returns:
        Preview with one tuple of BoldSplit per (possibly truncated) paragraph.
    """
    if mode not in ("excerpt", "full"):
        raise ValueError(f"mode must be 'excerpt' or 'full', got {mode!r}")

    texts = [p.text for p in excerpt]
    truncated = False

    if mode == "excerpt":
        joined = " ".join(texts)
        budget = find_cutoff(joined)
        truncated = budget < len(joined)
        kept = []
        for text in texts:
            if budget <= 0:
                break
            kept.append(text[:budget])
            budget -= len(text) + 1  # +1 for the joining space
        texts = kept

    paragraphs = tuple(tuple(split_text(text, cfg)) for text in texts)
    logger.debug("Preview: %d paragraphs (mode=%s, truncated=%s)", len(paragraphs), mode, truncated)
    return Preview(paragraphs=paragraphs, mode=mode, truncated=truncated)
