"""
Render dispatch.

Walks paginated lines, turns every TextRun into a draw instruction and
replays the instructions against a rendering service. Bytes are handed
to the download sink only after the whole document has been serialized,
so a cancelled or failed export never delivers partial output.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence

from boldread.config import LETTER, LayoutConfig, PageGeometry
from boldread.exceptions import BoldReadError, ExportCancelledError, RenderError
from boldread.models import DrawInstruction, Page
from boldread.render.base import RenderingService

logger = logging.getLogger(__name__)

DownloadSink = Callable[[bytes], None]


def build_instructions(
    pages: Iterable[Page],
    layout: LayoutConfig,
    geometry: PageGeometry = LETTER,
) -> list[DrawInstruction]:
    """
    Compute draw instructions for paginated lines.

    x starts at the left margin and advances by each run's measured width;
    y is the line's baseline as assigned by the paginator.
    """
    instructions = []
    for page in pages:
        for line in page.lines:
            if line.baseline is None:
                raise ValueError(f"Line on page {page.number} has no baseline; paginate first")
            x = geometry.margin
            for run in line.runs:
                instructions.append(
                    DrawInstruction(
                        page_number=page.number,
                        text=run.draw_text,
                        font=run.font,
                        x=x,
                        y=line.baseline,
                        size=layout.font_size,
                    )
                )
                x += run.width
    return instructions


class RenderDispatcher:
    """
    Drives a RenderingService from paginated output.

    Attributes:
        backend: Rendering service that receives the draw calls.
        geometry: Page geometry used for page size and left margin.
    """

    def __init__(self, backend: RenderingService, geometry: PageGeometry = LETTER):
        self.backend = backend
        self.geometry = geometry

    def render(self, pages: Sequence[Page], layout: LayoutConfig) -> list[DrawInstruction]:
        """Draw instructions for pages, without touching the backend."""
        return build_instructions(pages, layout, self.geometry)

    def dispatch(
        self,
        pages: Sequence[Page],
        layout: LayoutConfig,
        *,
        instructions: Sequence[DrawInstruction] | None = None,
        download: DownloadSink | None = None,
        cancel_event: threading.Event | None = None,
    ) -> bytes:
        """
        Render pages through the backend and serialize exactly once.

        The backend is closed before returning, on success or failure.

        Args:
            pages: Output of the paginator.
            layout: Typography settings (font size).
            instructions: Output of render() for these pages, if already built.
            download: Called with the final bytes after serialization.
            cancel_event: Checked between pages and before serializing.

        Returns:
            The serialized document bytes.

        Raises:
            ExportCancelledError: If cancel_event was set before serialization.
            RenderError: If the backend fails. Never retried.
        """
        if instructions is None:
            instructions = self.render(pages, layout)
        by_page: dict[int, list[DrawInstruction]] = defaultdict(list)
        for instruction in instructions:
            by_page[instruction.page_number].append(instruction)

        try:
            for page in pages:
                self._check_cancelled(cancel_event)
                handle = self.backend.add_page(self.geometry.width, self.geometry.height)
                for ins in by_page[page.number]:
                    self.backend.draw_text(handle, ins.text, ins.font, ins.size, ins.x, ins.y)

            self._check_cancelled(cancel_event)
            data = self.backend.serialize()
        except BoldReadError:
            raise
        except Exception as e:
            raise RenderError(f"Rendering failed: {e}") from e
        finally:
            self.backend.close()

        logger.info(
            "Rendered %d pages, %d draw calls, %d bytes",
            len(pages),
            len(instructions),
            len(data),
        )

        if download is not None:
            download(data)
        return data

    @staticmethod
    def _check_cancelled(cancel_event: threading.Event | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise ExportCancelledError("Export cancelled before serialization")
