"""
Basic tests for BoldRead package structure.

These tests verify the public API is importable and
basic configuration works correctly.
"""

import pytest


class TestImports:
    """Test that the public API is importable."""

    def test_import_package(self):
        """Can import the main package."""
        import boldread

        assert boldread.__version__ == "0.1.0"

    def test_import_entry_points(self):
        """Can import the main entry points."""
        from boldread import DocumentSession, convert, open_upload

        assert callable(convert)
        assert callable(open_upload)
        assert hasattr(DocumentSession, "export")

    def test_import_exceptions(self):
        """All exceptions share one base class."""
        from boldread import (
            BoldReadError,
            ConfigurationError,
            DocumentTooLargeError,
            EmptyDocumentError,
            ExportCancelledError,
            ExtractionError,
            RenderError,
            SessionBusyError,
            UnsupportedFormatError,
        )

        for exc in (
            ConfigurationError,
            DocumentTooLargeError,
            EmptyDocumentError,
            ExportCancelledError,
            ExtractionError,
            RenderError,
            SessionBusyError,
            UnsupportedFormatError,
        ):
            assert issubclass(exc, BoldReadError)

    def test_configuration_error_is_value_error(self):
        from boldread import ConfigurationError

        assert issubclass(ConfigurationError, ValueError)


class TestBoldingConfig:
    """Test BoldingConfig behavior."""

    def test_defaults(self):
        from boldread import BoldingConfig

        cfg = BoldingConfig()
        assert (cfg.short_words, cfg.medium_words, cfg.long_words) == (1, 2, 3)

    def test_non_decreasing_not_enforced(self):
        from boldread import BoldingConfig

        cfg = BoldingConfig(short_words=5, medium_words=1, long_words=2)
        assert cfg.short_words == 5

    @pytest.mark.parametrize("value", [0, 6, -1])
    def test_out_of_range_rejected(self, value):
        from boldread import BoldingConfig

        with pytest.raises(ValueError, match="medium_words"):
            BoldingConfig(medium_words=value)

    def test_non_int_rejected(self):
        from boldread import BoldingConfig, ConfigurationError

        with pytest.raises(ConfigurationError):
            BoldingConfig(long_words=2.5)

    @pytest.mark.parametrize(
        "strength,expected",
        [
            (1, (1, 2, 3)),
            (2, (2, 3, 4)),
            (3, (3, 3, 5)),
            (5, (5, 3, 5)),
        ],
    )
    def test_from_strength(self, strength, expected):
        """The single slider maps to {n, min(n+1, 3), min(n+2, 5)}."""
        from boldread import BoldingConfig

        cfg = BoldingConfig.from_strength(strength)
        assert (cfg.short_words, cfg.medium_words, cfg.long_words) == expected

    def test_from_strength_out_of_range(self):
        from boldread import BoldingConfig

        with pytest.raises(ValueError, match="strength"):
            BoldingConfig.from_strength(6)


class TestLayoutConfig:
    """Test LayoutConfig behavior."""

    def test_defaults(self):
        from boldread import LayoutConfig

        layout = LayoutConfig()
        assert layout.font_size == 16
        assert layout.line_spacing == 1.5

    def test_advances(self):
        from boldread import LayoutConfig

        layout = LayoutConfig(font_size=20, line_spacing=2.0)
        assert layout.line_advance == 40
        assert layout.paragraph_gap == 60

    @pytest.mark.parametrize("size", [11, 25, -12])
    def test_invalid_font_size(self, size):
        from boldread import LayoutConfig

        with pytest.raises(ValueError, match="font_size"):
            LayoutConfig(font_size=size)

    @pytest.mark.parametrize("spacing", [0.9, 3.1])
    def test_invalid_line_spacing(self, spacing):
        from boldread import LayoutConfig

        with pytest.raises(ValueError, match="line_spacing"):
            LayoutConfig(line_spacing=spacing)


class TestPageGeometry:
    def test_letter(self):
        from boldread import LETTER

        assert (LETTER.width, LETTER.height, LETTER.margin) == (612, 792, 50)
        assert LETTER.content_width == 512
        assert LETTER.top == 742

    def test_margin_too_large(self):
        from boldread import PageGeometry

        with pytest.raises(ValueError):
            PageGeometry(width=100, height=100, margin=50)


class TestSessionConfig:
    def test_defaults(self):
        from boldread import SessionConfig

        config = SessionConfig()
        assert config.min_paragraph_length == 80
        assert config.excerpt_range == (3, 5)
        assert config.seed is None
        assert config.max_upload_bytes == 10 * 1024 * 1024

    def test_invalid_excerpt_range(self):
        from boldread import SessionConfig

        with pytest.raises(ValueError, match="excerpt_range"):
            SessionConfig(excerpt_range=(5, 3))

    def test_with_settings_and_reset(self):
        from boldread import BoldingConfig, LayoutConfig, SessionConfig

        config = SessionConfig(seed=1).with_settings(
            bolding=BoldingConfig(2, 3, 4),
            layout=LayoutConfig(font_size=20),
        )
        assert config.bolding.long_words == 4
        assert config.layout.font_size == 20
        assert config.seed == 1

        reset = config.reset()
        assert reset.bolding == BoldingConfig()
        assert reset.layout == LayoutConfig()
        assert reset.seed == 1


class TestSupportedFormats:
    def test_supported_formats(self):
        from boldread import supported_formats

        assert supported_formats() == ["pdf"]
