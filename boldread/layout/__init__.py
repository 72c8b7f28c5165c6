"""
Bolding, line reflow and pagination.

All three stages are pure: the same inputs always give the same lines
and page assignments.
"""

from boldread.layout.bolding import bold_length, split_text, split_word
from boldread.layout.paginate import Paginator, line_advance, paginate
from boldread.layout.reflow import (
    LineReflowEngine,
    MeasureFn,
    group_by_paragraph,
    reflow,
    word_runs,
)

__all__ = [
    # Bolding
    "split_word",
    "split_text",
    "bold_length",
    # Reflow
    "LineReflowEngine",
    "MeasureFn",
    "reflow",
    "word_runs",
    "group_by_paragraph",
    # Pagination
    "Paginator",
    "paginate",
    "line_advance",
]
