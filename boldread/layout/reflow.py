"""
Line reflow.

Packs bolded words into lines that fit the page content width, using real
glyph widths from the rendering service rather than character counts.

Each word becomes one or two TextRuns (bold prefix, regular remainder).
The word's final run also carries the separating space: it is measured as
``text + " "`` in that run's font, so the widths used here are exactly
the widths the renderer will advance by.

Packing is greedy and word-atomic: a word goes on the current line if the
line width plus the word width stays within the content width, otherwise
the line is sealed and the word starts the next one. A word wider than
the content width gets a line of its own and overflows; words are never
hyphenated or split.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from itertools import groupby

from boldread.config import LETTER, BoldingConfig, LayoutConfig, PageGeometry
from boldread.layout.bolding import split_word
from boldread.models import BoldSplit, Line, Paragraph, TextRun

logger = logging.getLogger(__name__)

# measure(text, is_bold, font_size) -> width in points
MeasureFn = Callable[[str, bool, float], float]


def word_runs(split: BoldSplit, measure: MeasureFn, font_size: float) -> tuple[TextRun, ...]:
    """Turn one bolded word into measured runs, separator on the last run."""
    parts = [(split.bold, True), (split.regular, False)]
    parts = [(text, is_bold) for text, is_bold in parts if text]

    runs = []
    for i, (text, is_bold) in enumerate(parts):
        ends_word = i == len(parts) - 1
        draw_text = text + " " if ends_word else text
        width = measure(draw_text, is_bold, font_size)
        if width < 0:
            raise ValueError(f"measure returned negative width {width} for {draw_text!r}")
        runs.append(TextRun(text=text, is_bold=is_bold, width=width, ends_word=ends_word))
    return tuple(runs)


class LineReflowEngine:
    """
    Greedy line packer for bolded text.

    Attributes:
        measure: Width measurement callable (usually FitzRenderer.measure).
        geometry: Page geometry; only content_width is used here.

    Example:
        >>> engine = LineReflowEngine(renderer.measure)
        >>> lines = engine.reflow(excerpt, BoldingConfig(), LayoutConfig())
        >>> all(line.width <= LETTER.content_width for line in lines)
        True
    """

    def __init__(self, measure: MeasureFn, geometry: PageGeometry = LETTER):
        self.measure = measure
        self.geometry = geometry

    @property
    def content_width(self) -> float:
        return self.geometry.content_width

    def reflow(
        self,
        paragraphs: Iterable[Paragraph],
        cfg: BoldingConfig,
        layout: LayoutConfig,
    ) -> list[Line]:
        """
        Reflow paragraphs into lines.

        The last line of every paragraph that is followed by another
        paragraph has ends_paragraph=True so the paginator can add the
        paragraph gap.

        Returns:
            Lines in reading order. Use group_by_paragraph() to regroup.
        """
        paragraphs = list(paragraphs)
        lines: list[Line] = []

        for position, paragraph in enumerate(paragraphs):
            para_lines = self.reflow_paragraph(paragraph, cfg, layout)
            if para_lines and position < len(paragraphs) - 1:
                last = para_lines[-1]
                para_lines[-1] = Line(
                    runs=last.runs,
                    paragraph_index=last.paragraph_index,
                    ends_paragraph=True,
                )
            lines.extend(para_lines)

        logger.debug("Reflowed %d paragraphs into %d lines", len(paragraphs), len(lines))
        return lines

    def reflow_paragraph(
        self,
        paragraph: Paragraph,
        cfg: BoldingConfig,
        layout: LayoutConfig,
    ) -> list[Line]:
        """Reflow a single paragraph. Independent of every other paragraph."""
        lines: list[Line] = []
        current: list[TextRun] = []
        current_width = 0.0

        for word in paragraph.words:
            split = split_word(word, cfg)
            if not split.text:
                continue
            runs = word_runs(split, self.measure, layout.font_size)
            width = sum(run.width for run in runs)

            if current and current_width + width > self.content_width:
                lines.append(Line(runs=tuple(current), paragraph_index=paragraph.index))
                current = []
                current_width = 0.0

            if not current and width > self.content_width:
                logger.warning(
                    "Word %r (%.1fpt) is wider than the content width (%.1fpt)",
                    split.text,
                    width,
                    self.content_width,
                )

            current.extend(runs)
            current_width += width

        if current:
            lines.append(Line(runs=tuple(current), paragraph_index=paragraph.index))
        return lines


def reflow(
    paragraphs: Iterable[Paragraph],
    cfg: BoldingConfig,
    layout: LayoutConfig,
    measure: MeasureFn,
    geometry: PageGeometry = LETTER,
) -> list[Line]:
    """Functional wrapper around LineReflowEngine.reflow()."""
    return LineReflowEngine(measure, geometry).reflow(paragraphs, cfg, layout)


def group_by_paragraph(lines: Iterable[Line]) -> list[list[Line]]:
    """Group consecutive lines by their paragraph index."""
    return [list(group) for _, group in groupby(lines, key=lambda line: line.paragraph_index)]
