"""
Data models for BoldRead.

Everything downstream of RawPage is a pure projection and can be
recomputed at will. All models are immutable; stages return new
objects rather than editing their inputs.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Font(str, Enum):
    """Font selection for a text run."""

    REGULAR = "regular"
    BOLD = "bold"


# ═══════════════════════════════════════════════════════════════════════════════
# Text
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class RawPage:
    """Plain text extracted from one source page."""

    index: int  # 0-based page index
    text: str


@dataclass(frozen=True)
class Paragraph:
    """A normalized, trimmed paragraph of at least min_length characters."""

    index: int  # Position in the document's paragraph pool
    text: str

    @property
    def words(self) -> list[str]:
        """Whitespace-delimited words."""
        return self.text.split()


@dataclass(frozen=True)
class Excerpt:
    """
    A contiguous window of paragraphs from the document's pool.

    Example:
        >>> excerpt = select_excerpt(paragraphs, rng=random.Random(1))
        >>> 3 <= len(excerpt) <= 5
        True
    """

    paragraphs: tuple[Paragraph, ...] = ()
    start: int = 0

    def __len__(self) -> int:
        return len(self.paragraphs)

    def __iter__(self) -> Iterator[Paragraph]:
        return iter(self.paragraphs)

    @property
    def text(self) -> str:
        """Paragraph texts joined by single spaces."""
        return " ".join(p.text for p in self.paragraphs)

    @property
    def is_empty(self) -> bool:
        return not self.paragraphs


@dataclass(frozen=True)
class BoldSplit:
    """One word split into its bold prefix and regular remainder."""

    bold: str
    regular: str

    @property
    def text(self) -> str:
        """The whole word."""
        return self.bold + self.regular


# ═══════════════════════════════════════════════════════════════════════════════
# Layout
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class TextRun:
    """
    A styled span with its measured width.

    The last run of every word carries the word separator: it is measured
    and drawn as ``text + " "`` in the run's own font, so the gap on the
    page is exactly the width that was used for line packing.
    """

    text: str
    is_bold: bool
    width: float
    ends_word: bool = False

    @property
    def font(self) -> Font:
        return Font.BOLD if self.is_bold else Font.REGULAR

    @property
    def draw_text(self) -> str:
        """Text as measured and drawn, including the trailing separator."""
        return self.text + " " if self.ends_word else self.text


@dataclass(frozen=True)
class Line:
    """
    A sequence of runs that fits within the page content width.

    Words are packed whole: a word's bold and regular runs always share a
    line. The one exception to the width bound is a line holding exactly
    one word that is itself wider than the content width; that line may
    carry two runs (bold prefix and remainder) and overflows the margin.
    """

    runs: tuple[TextRun, ...]
    paragraph_index: int
    ends_paragraph: bool = False  # Followed by a paragraph gap
    baseline: float | None = None  # Assigned by the paginator

    @property
    def width(self) -> float:
        """Total measured width, separators included."""
        return sum(run.width for run in self.runs)

    @property
    def words(self) -> list[str]:
        """Reassemble the words on this line from their runs."""
        words = []
        current = ""
        for run in self.runs:
            current += run.text
            if run.ends_word:
                words.append(current)
                current = ""
        if current:
            words.append(current)
        return words

    @property
    def text(self) -> str:
        return " ".join(self.words)


@dataclass(frozen=True)
class Page:
    """A fixed-size output page holding positioned lines."""

    number: int  # 0-based
    lines: tuple[Line, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class DrawInstruction:
    """One draw call for the rendering service."""

    page_number: int
    text: str
    font: Font
    x: float
    y: float  # Baseline, bottom-up coordinates
    size: float


@dataclass
class ExportResult:
    """Output of a completed export."""

    pdf_bytes: bytes
    page_count: int
    instruction_count: int
    processing_log: list[str] = field(default_factory=list)

    def save(self, path: str | Path) -> None:
        """
        Write the exported PDF to disk.

        Args:
            path: Output file path
        """
        Path(path).write_bytes(self.pdf_bytes)
