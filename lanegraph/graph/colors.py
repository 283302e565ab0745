"""Lane colors for the commit graph.

Colors are a function of column index only. A branch whose lane is released
and later reissued at a different column changes color; renderers rely on
this staying a pure function of the column.
"""

from collections.abc import Sequence

from PySide6.QtGui import QColor

from lanegraph.constants import DEFAULT_PALETTE
from lanegraph.graph.types import LineSegment


def make_palette(hex_colors: Sequence[str]) -> list[QColor]:
    """Build a palette from color strings (e.g. '#4CAF50')."""
    if not hex_colors:
        raise ValueError("Palette needs at least one color")

    palette: list[QColor] = []
    for name in hex_colors:
        color = QColor(name)
        if not color.isValid():
            raise ValueError(f"Invalid palette color: {name!r}")
        palette.append(color)
    return palette


# Colors for different columns (branches)
LANE_COLORS = make_palette(DEFAULT_PALETTE)


def get_lane_color(column: int, palette: Sequence[QColor] | None = None) -> QColor:
    """Get color for a lane/column."""
    colors = palette or LANE_COLORS
    return colors[column % len(colors)]


def get_segment_color(segment: LineSegment, palette: Sequence[QColor] | None = None) -> QColor:
    """Get color for a line segment.

    Merge lines take the color of the lane they lead into (the merged
    branch). Everything else is drawn in the color of its starting column.
    """
    column = segment.to_column if segment.is_merge else segment.from_column
    return get_lane_color(column, palette)
