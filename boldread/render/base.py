"""
Rendering service contract.

The engine never writes the PDF container itself. It talks to a rendering
service through four calls: measure_width, add_page, draw_text and
serialize. close() releases it whether or not it serialized.

measure() adapts measure_width to the reflow engine's
(text, is_bold, size) signature using the same font mapping that draw
calls use, so measured and drawn widths cannot diverge.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from boldread.models import Font


class RenderingService(ABC):
    """Abstract base for PDF rendering backends."""

    name: str = "base"

    @abstractmethod
    def measure_width(self, text: str, font: Font, size: float) -> float:
        """Advance width of text in the given font, in points."""
        pass

    @abstractmethod
    def add_page(self, width: float, height: float) -> Any:
        """Append a blank page and return a handle for draw_text()."""
        pass

    @abstractmethod
    def draw_text(
        self,
        page: Any,
        text: str,
        font: Font,
        size: float,
        x: float,
        y: float,
    ) -> None:
        """Draw text with its baseline at (x, y), bottom-up coordinates."""
        pass

    @abstractmethod
    def serialize(self) -> bytes:
        """Finish the document and return its bytes. Called once per export."""
        pass

    def close(self) -> None:
        """Release backend resources. Safe to call more than once."""

    def measure(self, text: str, is_bold: bool, size: float) -> float:
        """Width callable in the form the reflow engine expects."""
        return self.measure_width(text, Font.BOLD if is_bold else Font.REGULAR, size)
