"""Tests for column-indexed lane colors."""

import pytest
from PySide6.QtGui import QColor

from lanegraph.constants import DEFAULT_PALETTE
from lanegraph.graph.colors import LANE_COLORS, get_lane_color, get_segment_color, make_palette
from lanegraph.graph.types import LineKind, LineSegment


class TestLaneColors:
    def test_default_palette(self):
        assert len(LANE_COLORS) == len(DEFAULT_PALETTE)
        assert get_lane_color(0) == QColor("#4CAF50")
        assert get_lane_color(1).name() == "#2196f3"

    def test_wraps_by_column(self):
        assert get_lane_color(len(LANE_COLORS)) == get_lane_color(0)
        assert get_lane_color(len(LANE_COLORS) * 3 + 2) == get_lane_color(2)

    def test_custom_palette(self):
        palette = make_palette(["#000000", "#ffffff"])

        assert get_lane_color(0, palette).name() == "#000000"
        assert get_lane_color(3, palette).name() == "#ffffff"


class TestSegmentColors:
    def test_merge_uses_target_column(self):
        merge = LineSegment(0, 2, True, LineKind.TO_PARENT)

        assert get_segment_color(merge) == get_lane_color(2)

    def test_convergence_uses_source_column(self):
        converge = LineSegment(3, 1, False, LineKind.TO_PARENT)

        assert get_segment_color(converge) == get_lane_color(3)

    def test_pass_through(self):
        line = LineSegment(4, 4, False, LineKind.PASS_THROUGH)

        assert get_segment_color(line) == get_lane_color(4)


class TestMakePalette:
    def test_invalid_color(self):
        with pytest.raises(ValueError, match="not-a-color"):
            make_palette(["#4CAF50", "not-a-color"])

    def test_empty(self):
        with pytest.raises(ValueError):
            make_palette([])
