"""
Configuration for BoldRead sessions and exports.

All configuration is in-memory and session-scoped. There is no file or
environment based configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from boldread.exceptions import ConfigurationError

# Host-facing limits
MIN_BOLD_LENGTH = 1
MAX_BOLD_LENGTH = 5
MIN_FONT_SIZE = 12
MAX_FONT_SIZE = 24
MIN_LINE_SPACING = 1.0
MAX_LINE_SPACING = 3.0

# Paragraph gap relative to a regular line advance
PARAGRAPH_GAP_FACTOR = 1.5

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class BoldingConfig:
    """
    Bold-prefix lengths for the three word-length tiers.

    Tiers: words of length <= 3 use short_words, length 4-6 use
    medium_words, longer words use long_words. Values are not required
    to be non-decreasing.

    Example:
        >>> BoldingConfig.from_strength(2)
        BoldingConfig(short_words=2, medium_words=3, long_words=4)
    """

    short_words: int = 1
    medium_words: int = 2
    long_words: int = 3

    def __post_init__(self):
        """Validate configuration."""
        for name in ("short_words", "medium_words", "long_words"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be an int, got {value!r}")
            if not MIN_BOLD_LENGTH <= value <= MAX_BOLD_LENGTH:
                raise ConfigurationError(
                    f"{name} must be between {MIN_BOLD_LENGTH} and {MAX_BOLD_LENGTH}, "
                    f"got {value}"
                )

    @classmethod
    def from_strength(cls, strength: int) -> BoldingConfig:
        """Build tiers from the single "bolding strength" slider value."""
        if not MIN_BOLD_LENGTH <= strength <= MAX_BOLD_LENGTH:
            raise ConfigurationError(
                f"strength must be between {MIN_BOLD_LENGTH} and {MAX_BOLD_LENGTH}, "
                f"got {strength}"
            )
        return cls(
            short_words=strength,
            medium_words=min(strength + 1, 3),
            long_words=min(strength + 2, 5),
        )


@dataclass(frozen=True)
class LayoutConfig:
    """
    Typography settings for export.

    Attributes:
        font_size: Glyph size in points (12-24).
        line_spacing: Multiplier applied to font_size for line advance (1.0-3.0).
    """

    font_size: float = 16
    line_spacing: float = 1.5

    def __post_init__(self):
        """Validate configuration."""
        if not MIN_FONT_SIZE <= self.font_size <= MAX_FONT_SIZE:
            raise ConfigurationError(
                f"font_size must be between {MIN_FONT_SIZE} and {MAX_FONT_SIZE}, "
                f"got {self.font_size}"
            )
        if not MIN_LINE_SPACING <= self.line_spacing <= MAX_LINE_SPACING:
            raise ConfigurationError(
                f"line_spacing must be between {MIN_LINE_SPACING} and {MAX_LINE_SPACING}, "
                f"got {self.line_spacing}"
            )

    @property
    def line_advance(self) -> float:
        """Vertical advance between lines of the same paragraph."""
        return self.font_size * self.line_spacing

    @property
    def paragraph_gap(self) -> float:
        """Vertical advance after the last line of a paragraph."""
        return self.line_advance * PARAGRAPH_GAP_FACTOR


@dataclass(frozen=True)
class PageGeometry:
    """Fixed page size and margins, in PDF points."""

    width: float = 612
    height: float = 792
    margin: float = 50

    def __post_init__(self):
        """Validate configuration."""
        if self.margin < 0:
            raise ConfigurationError(f"margin must be >= 0, got {self.margin}")
        if self.width <= 2 * self.margin or self.height <= 2 * self.margin:
            raise ConfigurationError(
                f"page {self.width}x{self.height} leaves no room inside margin {self.margin}"
            )

    @property
    def content_width(self) -> float:
        """Usable width between the left and right margins."""
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        """Baseline of the first line on a fresh page (bottom-up coordinates)."""
        return self.height - self.margin


LETTER = PageGeometry()


@dataclass(frozen=True)
class SessionConfig:
    """
    Everything a document session needs.

    All options have sensible defaults matching the reading app's
    initial state. Create a config only if you need to customize behavior.

    Example:
        >>> config = SessionConfig(layout=LayoutConfig(font_size=18), seed=7)
        >>> session = DocumentSession.from_path("book.pdf", config)
    """

    bolding: BoldingConfig = field(default_factory=BoldingConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    geometry: PageGeometry = LETTER

    # Segmentation
    min_paragraph_length: int = 80
    rejoin_hyphenation: bool = True

    # Excerpt selection
    excerpt_range: tuple[int, int] = (3, 5)
    seed: int | None = None  # None = OS randomness

    # Uploads
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES

    def __post_init__(self):
        """Validate configuration."""
        if self.min_paragraph_length < 0:
            raise ConfigurationError(
                f"min_paragraph_length must be >= 0, got {self.min_paragraph_length}"
            )
        low, high = self.excerpt_range
        if low < 1 or high < low:
            raise ConfigurationError(
                f"excerpt_range must satisfy 1 <= low <= high, got {self.excerpt_range!r}"
            )
        if self.max_upload_bytes <= 0:
            raise ConfigurationError(
                f"max_upload_bytes must be positive, got {self.max_upload_bytes}"
            )

    def with_settings(
        self,
        *,
        bolding: BoldingConfig | None = None,
        layout: LayoutConfig | None = None,
    ) -> SessionConfig:
        """Return a copy with new bolding and/or layout settings."""
        return replace(
            self,
            bolding=bolding if bolding is not None else self.bolding,
            layout=layout if layout is not None else self.layout,
        )

    def reset(self) -> SessionConfig:
        """Return a copy with bolding and layout restored to defaults."""
        return replace(self, bolding=BoldingConfig(), layout=LayoutConfig())
