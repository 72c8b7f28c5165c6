"""Tests for the line reflow engine."""

from unittest.mock import MagicMock

import pytest

from boldread.config import LETTER, BoldingConfig, LayoutConfig, PageGeometry
from boldread.layout import LineReflowEngine, group_by_paragraph, reflow, word_runs
from boldread.models import BoldSplit, Paragraph

BOLDING = BoldingConfig(1, 2, 3)
ALL_BOLD = BoldingConfig(5, 5, 5)
LAYOUT = LayoutConfig(font_size=16, line_spacing=1.5)


def fixed_measure(text, is_bold, size):
    return len(text) * 6.0


def table_measure(widths: dict[str, float]):
    """Measure from a lookup table keyed by drawn text."""
    return lambda text, is_bold, size: widths[text]


@pytest.fixture
def sample_paragraphs(sample_sentences) -> list[Paragraph]:
    return [Paragraph(index=i, text=s) for i, s in enumerate(sample_sentences[:3])]


class TestWordRuns:
    """Test word_runs()."""

    def test_bold_and_regular(self):
        runs = word_runs(BoldSplit("ju", "mps"), fixed_measure, 16)
        assert [(r.text, r.is_bold, r.ends_word) for r in runs] == [
            ("ju", True, False),
            ("mps", False, True),
        ]
        assert runs[0].width == 12
        assert runs[1].width == 24  # "mps " includes the separator

    def test_fully_bold_word_carries_separator(self):
        runs = word_runs(BoldSplit("fox", ""), fixed_measure, 16)
        assert len(runs) == 1
        assert runs[0].is_bold and runs[0].ends_word
        assert runs[0].draw_text == "fox "
        assert runs[0].width == 24

    def test_measure_called_with_drawn_text_and_font(self):
        measure = MagicMock(return_value=10.0)
        word_runs(BoldSplit("ju", "mps"), measure, 18)
        assert measure.call_args_list[0].args == ("ju", True, 18)
        assert measure.call_args_list[1].args == ("mps ", False, 18)

    def test_negative_width_is_a_programming_error(self):
        with pytest.raises(ValueError, match="negative width"):
            word_runs(BoldSplit("a", ""), lambda *_: -1.0, 16)


class TestPacking:
    """Greedy, word-atomic line packing."""

    def test_scenario_run_moves_to_new_line(self):
        """Line at 510 plus a 5-wide word exceeds 512 and wraps."""
        measure = table_measure({"A ": 510.0, "b ": 5.0})
        lines = reflow([Paragraph(0, "A b")], ALL_BOLD, LAYOUT, measure)
        assert LETTER.content_width == 512
        assert [line.text for line in lines] == ["A", "b"]

    def test_exact_fit_stays_on_line(self):
        measure = table_measure({"A ": 507.0, "b ": 5.0})
        lines = reflow([Paragraph(0, "A b")], ALL_BOLD, LAYOUT, measure)
        assert [line.text for line in lines] == ["A b"]
        assert lines[0].width == 512

    def test_lines_fit_content_width(self, sample_paragraphs):
        lines = reflow(sample_paragraphs, BOLDING, LAYOUT, fixed_measure)
        assert len(lines) > len(sample_paragraphs)
        for line in lines:
            assert line.width <= LETTER.content_width

    def test_narrow_geometry_wraps_more(self, sample_paragraphs):
        narrow = PageGeometry(width=300, height=792, margin=50)
        wide_lines = reflow(sample_paragraphs, BOLDING, LAYOUT, fixed_measure)
        narrow_lines = reflow(sample_paragraphs, BOLDING, LAYOUT, fixed_measure, narrow)
        assert len(narrow_lines) > len(wide_lines)
        assert all(line.width <= 200 for line in narrow_lines)

    def test_oversized_word_gets_own_line(self):
        long_word = "x" * 100  # 606pt with separator
        text = f"before {long_word} after"
        lines = reflow([Paragraph(0, text)], BOLDING, LAYOUT, fixed_measure)
        assert [line.text for line in lines] == ["before", long_word, "after"]
        assert lines[1].width > LETTER.content_width
        assert len(lines[1].words) == 1

    def test_only_single_word_lines_overflow(self):
        text = " ".join(["short", "x" * 100, "words", "y" * 120, "end"])
        lines = reflow([Paragraph(0, text)], BOLDING, LAYOUT, fixed_measure)
        overflowing = [line for line in lines if line.width > LETTER.content_width]
        assert len(overflowing) == 2
        for line in overflowing:
            assert len(line.words) == 1
            assert len(line.runs) == 2
            assert [run.is_bold for run in line.runs] == [True, False]

    def test_words_never_split_across_lines(self, sample_paragraphs):
        lines = reflow(sample_paragraphs, BOLDING, LAYOUT, fixed_measure)
        for line in lines:
            assert line.runs[-1].ends_word

    def test_runs_alternate_bold_then_regular(self):
        lines = reflow([Paragraph(0, "jumps fox")], BOLDING, LAYOUT, fixed_measure)
        runs = lines[0].runs
        assert [(r.text, r.is_bold) for r in runs] == [
            ("ju", True),
            ("mps", False),
            ("f", True),
            ("ox", False),
        ]

    def test_round_trip_text(self, sample_paragraphs):
        lines = reflow(sample_paragraphs, BOLDING, LAYOUT, fixed_measure)
        rebuilt = " ".join(line.text for line in lines)
        assert rebuilt == " ".join(p.text for p in sample_paragraphs)

    def test_deterministic(self, sample_paragraphs):
        a = reflow(sample_paragraphs, BOLDING, LAYOUT, fixed_measure)
        b = reflow(sample_paragraphs, BOLDING, LAYOUT, fixed_measure)
        assert a == b

    def test_font_size_passed_to_measure(self):
        measure = MagicMock(return_value=1.0)
        reflow([Paragraph(0, "hello")], BOLDING, LayoutConfig(font_size=22), measure)
        assert all(call.args[2] == 22 for call in measure.call_args_list)


class TestParagraphBoundaries:
    """Paragraph markers for the paginator."""

    def test_last_line_of_each_paragraph_marked(self, sample_paragraphs):
        lines = reflow(sample_paragraphs, BOLDING, LAYOUT, fixed_measure)
        groups = group_by_paragraph(lines)
        assert len(groups) == 3
        for group in groups[:-1]:
            assert group[-1].ends_paragraph
            assert not any(line.ends_paragraph for line in group[:-1])
        assert not any(line.ends_paragraph for line in groups[-1])

    def test_paragraph_index_preserved(self):
        paras = [Paragraph(7, "first one."), Paragraph(8, "second one.")]
        lines = reflow(paras, BOLDING, LAYOUT, fixed_measure)
        assert [line.paragraph_index for line in lines] == [7, 8]
        assert lines[0].ends_paragraph and not lines[1].ends_paragraph

    def test_empty_input(self):
        assert reflow([], BOLDING, LAYOUT, fixed_measure) == []

    def test_lines_have_no_baseline_yet(self, sample_paragraphs):
        lines = reflow(sample_paragraphs, BOLDING, LAYOUT, fixed_measure)
        assert all(line.baseline is None for line in lines)


class TestEngine:
    def test_engine_uses_geometry(self):
        engine = LineReflowEngine(fixed_measure, PageGeometry(width=400, height=600, margin=20))
        assert engine.content_width == 360

    def test_reflow_paragraph_independent(self, sample_paragraphs):
        engine = LineReflowEngine(fixed_measure)
        together = engine.reflow(sample_paragraphs, BOLDING, LAYOUT)
        separately = [
            line
            for p in sample_paragraphs
            for line in engine.reflow_paragraph(p, BOLDING, LAYOUT)
        ]
        assert [line.runs for line in together] == [line.runs for line in separately]
