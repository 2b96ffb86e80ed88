"""
Unit tests for layout inspection helpers

Tests line spans, measurement and adjusted widths.
"""
import pytest

from parbreak.items import Box, Glue, Penalty
from parbreak.layout import Breakpoint, FitnessClass, layout_paragraph
from parbreak.utils import adjusted_width, line_spans, measure_line, next_line_start

pytestmark = pytest.mark.unit


ITEMS = [
    Box(3), Glue(1, 1, 0.5), Box(2), Glue(1, 1, 0.5), Glue(1, 1, 0.5),
    Penalty(0, 100), Box(4), Penalty(1, 50, flagged=True), Box(2), Penalty.forced(),
]


class TestNextLineStart:

    def test_skips_glue_and_penalties(self):
        assert next_line_start(ITEMS, 3) == 6

    def test_stops_at_box(self):
        assert next_line_start(ITEMS, 1) == 2

    def test_stops_at_forced_break(self):
        items = [Box(1), Glue(1, 1, 0), Penalty.forced()]
        assert next_line_start(items, 1) == 2

    def test_end_of_paragraph(self):
        assert next_line_start(ITEMS, 9) == len(ITEMS)


class TestMeasureLine:

    def test_glue_and_boxes(self):
        assert measure_line(ITEMS, 0, 3) == (6.0, 1.0, 0.5)

    def test_penalty_width_added_at_break(self):
        assert measure_line(ITEMS, 6, 7) == (5.0, 0.0, 0.0)


def test_line_spans():
    breakpoints = [
        Breakpoint(3, 1, 0.0, FitnessClass.DECENT),
        Breakpoint(9, 2, 0.0, FitnessClass.DECENT),
    ]
    assert line_spans(ITEMS, breakpoints) == [(0, 3), (6, 9)]


class TestAdjustedWidth:

    def test_stretched(self):
        bp = Breakpoint(3, 1, 2.0, FitnessClass.VERY_LOOSE)
        assert adjusted_width(ITEMS, 0, bp) == pytest.approx(8.0)

    def test_shrunk(self):
        bp = Breakpoint(3, 1, -1.0, FitnessClass.TIGHT)
        assert adjusted_width(ITEMS, 0, bp) == pytest.approx(5.5)

    def test_laid_out_lines_fill_width(self, tokenizer):
        items = tokenizer("a bb ccc dddd eeeee ffffff ggggggg")
        breakpoints = layout_paragraph(items, 12)
        for (start, _), bp in zip(line_spans(items, breakpoints), breakpoints):
            if abs(bp.adjustment_ratio) <= 1:
                assert adjusted_width(items, start, bp) == pytest.approx(12.0)


class TestGlueWidth:

    def test_stretch(self):
        bp = Breakpoint(0, 1, 0.5, FitnessClass.DECENT)
        assert bp.glue_width(2.0, 1.0, 0.5) == 2.5
        assert bp.is_stretched

    def test_shrink(self):
        bp = Breakpoint(0, 1, -0.5, FitnessClass.DECENT)
        assert bp.glue_width(2.0, 1.0, 0.5) == 1.75

    def test_exact(self):
        bp = Breakpoint(0, 1, 0.0, FitnessClass.DECENT)
        assert bp.glue_width(2.0, 1.0, 0.5) == 2.0

    def test_rigid_glue_with_infinite_ratio(self):
        bp = Breakpoint(0, 1, float('inf'), FitnessClass.VERY_LOOSE)
        assert bp.glue_width(2.0, 0.0, 0.0) == 2.0


@pytest.mark.parametrize("ratio,expected", [
    (-float('inf'), FitnessClass.TIGHT),
    (-0.51, FitnessClass.TIGHT),
    (-0.5, FitnessClass.DECENT),
    (0.5, FitnessClass.DECENT),
    (0.51, FitnessClass.LOOSE),
    (1.0, FitnessClass.LOOSE),
    (1.01, FitnessClass.VERY_LOOSE),
    (float('inf'), FitnessClass.VERY_LOOSE),
])
def test_fitness_class_from_ratio(ratio, expected):
    assert FitnessClass.from_ratio(ratio) == expected
