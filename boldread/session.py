"""
Document session.

Owns everything derived from one uploaded document: the paragraph pool,
the currently displayed excerpt and the reader's settings. Only one
export or regeneration may run at a time per session; a second request
while one is active is rejected with SessionBusyError rather than
interleaved.

The excerpt and settings are immutable values replaced wholesale, so a
reader of ``session.excerpt`` never sees a half-updated state.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from boldread.config import BoldingConfig, LayoutConfig, SessionConfig
from boldread.exceptions import EmptyDocumentError, SessionBusyError
from boldread.extractors.excerpt import ExcerptSelector
from boldread.extractors.paragraphs import build_paragraph_pool
from boldread.layout.paginate import Paginator
from boldread.layout.reflow import LineReflowEngine, MeasureFn
from boldread.models import Excerpt, ExportResult, Page, Paragraph
from boldread.preview import Preview, PreviewMode, build_preview
from boldread.readers.pdf_reader import PDFReader, RawDocument
from boldread.render.base import RenderingService
from boldread.render.dispatcher import DownloadSink, RenderDispatcher
from boldread.render.fitz_backend import FitzRenderer

logger = logging.getLogger(__name__)


@dataclass
class LayoutResult:
    """Reflowed and paginated excerpt, ready for dispatch."""

    excerpt: Excerpt
    pages: list[Page]
    line_count: int
    processing_log: list[str] = field(default_factory=list)


class DocumentSession:
    """
    Reading session for one uploaded document.

    Example:
        >>> session = DocumentSession.from_path("essay.pdf", SessionConfig(seed=3))
        >>> print(session.preview().to_markdown())
        >>> session.regenerate()
        >>> result = session.export()
        >>> result.save("essay-bold.pdf")
    """

    def __init__(
        self,
        raw: RawDocument,
        config: SessionConfig | None = None,
        *,
        renderer_factory: Callable[[], RenderingService] = FitzRenderer,
    ):
        """
        Build the paragraph pool and pick the first excerpt.

        Args:
            raw: Extracted document text.
            config: Session settings (defaults if None).
            renderer_factory: Creates a fresh rendering service per export.
        """
        self.raw = raw
        self.config = config or SessionConfig()
        self.renderer_factory = renderer_factory
        self.processing_log: list[str] = []

        self._lock = threading.Lock()
        self._selector = ExcerptSelector(self.config.excerpt_range, seed=self.config.seed)
        self._paragraphs = build_paragraph_pool(
            raw,
            min_length=self.config.min_paragraph_length,
            rejoin_hyphenation=self.config.rejoin_hyphenation,
        )
        self.processing_log.append(
            f"Segmented {len(self._paragraphs)} paragraphs from {raw.page_count} pages"
        )

        if self._paragraphs:
            self._excerpt = self._selector.select(self._paragraphs)
            self.processing_log.append(self._describe(self._excerpt))
        else:
            self._excerpt = Excerpt()
            self.processing_log.append("No paragraphs found; nothing to show")
            logger.warning(
                "Document has no paragraphs of >= %d chars", self.config.min_paragraph_length
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        config: SessionConfig | None = None,
        *,
        reader: PDFReader | None = None,
        **kwargs,
    ) -> DocumentSession:
        """Extract an in-memory PDF and open a session on it."""
        raw = (reader or PDFReader()).read_bytes(data)
        return cls(raw, config, **kwargs)

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        config: SessionConfig | None = None,
        *,
        reader: PDFReader | None = None,
        **kwargs,
    ) -> DocumentSession:
        """Extract a PDF file and open a session on it."""
        raw = (reader or PDFReader()).read(path)
        return cls(raw, config, **kwargs)

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def paragraphs(self) -> tuple[Paragraph, ...]:
        return self._paragraphs

    @property
    def excerpt(self) -> Excerpt:
        return self._excerpt

    @property
    def is_empty(self) -> bool:
        """True when the document produced no paragraphs."""
        return not self._paragraphs

    @property
    def is_busy(self) -> bool:
        return self._lock.locked()

    def update_settings(
        self,
        *,
        bolding: BoldingConfig | None = None,
        layout: LayoutConfig | None = None,
    ) -> SessionConfig:
        """Replace bolding and/or layout settings."""
        self.config = self.config.with_settings(bolding=bolding, layout=layout)
        return self.config

    def reset_settings(self) -> SessionConfig:
        """Restore default bolding and layout settings."""
        self.config = self.config.reset()
        return self.config

    # ─────────────────────────────────────────────────────────────────────────
    # Operations
    # ─────────────────────────────────────────────────────────────────────────

    def preview(self, mode: PreviewMode = "excerpt") -> Preview:
        """Bolded view of the current excerpt. Empty for an empty document."""
        return build_preview(self._excerpt, self.config.bolding, mode)

    def regenerate(self, start_hint: int | None = None) -> Excerpt:
        """
        Pick a new excerpt from the same paragraph pool ("generate new text").

        Raises:
            EmptyDocumentError: If the document has no paragraphs.
            SessionBusyError: If an export or regeneration is in flight.
        """
        with self._exclusive("regenerate"):
            self._require_paragraphs()
            excerpt = self._selector.select(self._paragraphs, start_hint=start_hint)
            self._excerpt = excerpt
            self.processing_log.append(self._describe(excerpt))
            return excerpt

    def layout(self, measure: MeasureFn, config: SessionConfig | None = None) -> LayoutResult:
        """Reflow and paginate the current excerpt with the given measurer."""
        excerpt = self._excerpt
        config = config or self.config
        engine = LineReflowEngine(measure, config.geometry)
        lines = engine.reflow(excerpt, config.bolding, config.layout)
        pages = Paginator(config.geometry).paginate(lines, config.layout)
        return LayoutResult(
            excerpt=excerpt,
            pages=pages,
            line_count=len(lines),
            processing_log=[f"Reflowed {len(lines)} lines onto {len(pages)} pages"],
        )

    def export(
        self,
        *,
        download: DownloadSink | None = None,
        cancel_event: threading.Event | None = None,
    ) -> ExportResult:
        """
        Render the current excerpt to a new PDF.

        Args:
            download: Receives the PDF bytes once serialization succeeded.
            cancel_event: Set it to abandon the export; nothing is delivered.

        Raises:
            EmptyDocumentError: If the document has no paragraphs.
            SessionBusyError: If an export or regeneration is in flight.
            RenderError: If the rendering service fails.
            ExportCancelledError: If cancelled before serialization.
        """
        with self._exclusive("export"):
            self._require_paragraphs()
            config = self.config
            renderer = self.renderer_factory()
            try:
                laid_out = self.layout(renderer.measure, config)
                dispatcher = RenderDispatcher(renderer, config.geometry)
                instructions = dispatcher.render(laid_out.pages, config.layout)
                data = dispatcher.dispatch(
                    laid_out.pages,
                    config.layout,
                    instructions=instructions,
                    download=download,
                    cancel_event=cancel_event,
                )
            finally:
                renderer.close()

            log = [self._describe(laid_out.excerpt), *laid_out.processing_log]
            log.append(f"Rendered {len(instructions)} text runs, {len(data)} bytes")
            self.processing_log.extend(log)
            return ExportResult(
                pdf_bytes=data,
                page_count=len(laid_out.pages),
                instruction_count=len(instructions),
                processing_log=log,
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    @contextmanager
    def _exclusive(self, operation: str) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            raise SessionBusyError(f"Cannot {operation}: another operation is in progress")
        try:
            yield
        finally:
            self._lock.release()

    def _require_paragraphs(self) -> None:
        if not self._paragraphs:
            raise EmptyDocumentError(
                f"No paragraphs of at least {self.config.min_paragraph_length} characters"
            )

    def _describe(self, excerpt: Excerpt) -> str:
        return (
            f"Excerpt: paragraphs {excerpt.start}-{excerpt.start + len(excerpt) - 1} "
            f"of {len(self._paragraphs)}"
        )
