"""
Rendering service backed by PyMuPDF (fitz).

Text is set in Noto Sans (``notos`` regular, ``notosbo`` bold) from the
pymupdf-fonts package, so every letter the normalizer keeps (Latin
Extended, Greek, Cyrillic) is drawn with a real glyph. Both fonts are
registered on each page and widths come from the same fitz.Font objects
that supply the embedded font buffers.

PyMuPDF places y=0 at the top of the page while the engine works
bottom-up, so draw_text() flips the baseline: ``y_fitz = height - y``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import fitz  # PyMuPDF

from boldread.exceptions import RenderError
from boldread.models import Font
from boldread.render.base import RenderingService

logger = logging.getLogger(__name__)

FONT_NAMES: dict[Font, str] = {
    Font.REGULAR: "notos",
    Font.BOLD: "notosbo",
}


@lru_cache(maxsize=None)
def load_font(font: Font) -> fitz.Font:
    """Load (once per process) the fitz.Font used for a run style."""
    code = FONT_NAMES[font]
    try:
        return fitz.Font(code)
    except Exception as e:
        raise RenderError(f"Cannot load font {code!r} (is pymupdf-fonts installed?): {e}") from e


class FitzRenderer(RenderingService):
    """
    Builds a new PDF with PyMuPDF.

    One renderer produces one document. serialize() closes it; close()
    releases it without output (after a cancel or a failure).

    Example:
        >>> renderer = FitzRenderer()
        >>> page = renderer.add_page(612, 792)
        >>> renderer.draw_text(page, "Łódź ", Font.BOLD, 16, 50, 742)
        >>> pdf_bytes = renderer.serialize()
    """

    name = "pymupdf"

    def __init__(self, *, deflate: bool = True):
        """
        Initialize the renderer.

        Args:
            deflate: Compress content streams in the output.
        """
        self.deflate = deflate
        self._fonts = {font: load_font(font) for font in Font}
        self._doc = fitz.open()
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def measure_width(self, text: str, font: Font, size: float) -> float:
        return self._fonts[font].text_length(text, fontsize=size)

    def add_page(self, width: float, height: float) -> fitz.Page:
        self._check_open()
        page = self._doc.new_page(width=width, height=height)
        for font, fitz_font in self._fonts.items():
            page.insert_font(fontname=FONT_NAMES[font], fontbuffer=fitz_font.buffer)
        return page

    def draw_text(
        self,
        page: fitz.Page,
        text: str,
        font: Font,
        size: float,
        x: float,
        y: float,
    ) -> None:
        self._check_open()
        point = fitz.Point(x, page.rect.height - y)
        page.insert_text(point, text, fontname=FONT_NAMES[font], fontsize=size)

    def serialize(self) -> bytes:
        self._check_open()
        try:
            data = self._doc.tobytes(garbage=3, deflate=self.deflate)
        finally:
            self.close()
        logger.debug("Serialized PDF: %d bytes", len(data))
        return data

    def close(self) -> None:
        if not self._closed:
            self._doc.close()
            self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise RenderError("Renderer already closed; create a new FitzRenderer")
