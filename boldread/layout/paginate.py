"""
Pagination.

Assigns reflowed lines to fixed-size pages and gives each line its
baseline. Coordinates are bottom-up, PDF style: the cursor starts at
``height - margin`` on a fresh page and moves down by one advance per line.

Boundary convention: a line stays on the current page when
``y - advance >= margin`` (landing exactly on the margin is allowed).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from boldread.config import LETTER, LayoutConfig, PageGeometry
from boldread.models import Line, Page

logger = logging.getLogger(__name__)


def line_advance(line: Line, layout: LayoutConfig) -> float:
    """Vertical advance after a line; paragraph-ending lines get the paragraph gap."""
    return layout.paragraph_gap if line.ends_paragraph else layout.line_advance


class Paginator:
    """
    Splits a line stream into pages.

    Every line lands on exactly one page, in order. An empty line stream
    still produces one (empty) page.

    Example:
        >>> pages = Paginator().paginate(lines, LayoutConfig(font_size=16))
        >>> sum(len(p.lines) for p in pages) == len(lines)
        True
    """

    def __init__(self, geometry: PageGeometry = LETTER):
        self.geometry = geometry

    def paginate(self, lines: Iterable[Line], layout: LayoutConfig) -> list[Page]:
        """
        Assign lines to pages.

        Args:
            lines: Lines from the reflow engine, in reading order.
            layout: Typography settings that determine the advances.

        Returns:
            Pages numbered from 0, each holding lines with baselines set.
        """
        margin = self.geometry.margin
        pages: list[Page] = []
        current: list[Line] = []
        y = self.geometry.top

        for line in lines:
            advance = line_advance(line, layout)
            if current and y - advance < margin:
                pages.append(Page(number=len(pages), lines=tuple(current)))
                current = []
                y = self.geometry.top

            current.append(replace(line, baseline=y))
            y -= advance

        pages.append(Page(number=len(pages), lines=tuple(current)))

        logger.debug(
            "Paginated %d lines onto %d pages",
            sum(len(page.lines) for page in pages),
            len(pages),
        )
        return pages


def paginate(
    lines: Iterable[Line],
    layout: LayoutConfig,
    geometry: PageGeometry = LETTER,
) -> list[Page]:
    """Functional wrapper around Paginator.paginate()."""
    return Paginator(geometry).paginate(lines, layout)
