"""
Rendering: draw instructions and the PyMuPDF backend.
"""

from boldread.render.base import RenderingService
from boldread.render.dispatcher import RenderDispatcher, build_instructions
from boldread.render.fitz_backend import FONT_NAMES, FitzRenderer

__all__ = [
    "RenderingService",
    "RenderDispatcher",
    "build_instructions",
    "FitzRenderer",
    "FONT_NAMES",
]
