"""Field-space geometry helpers.

All values are in field units (pixels of the drawing surface).
Origin (0, 0) is the top-left corner of the field; +Y points down the page.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from playbook.core.enums import SegmentCommand

if TYPE_CHECKING:
    from playbook.core.models.route import PathSegment


# Heuristic used when a zone is dragged out from a route's last point.
# The rectangle sits mostly above its anchor.
ZONE_VERTICAL_FACTOR = 1.1


@dataclass(frozen=True, slots=True)
class Rect:
    """Immutable axis-aligned rectangle (top-left origin)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


def snap_to(grid_size: float, value: float, threshold: float) -> float:
    """
    Snap a value onto a grid line if it is close enough.

    Args:
        grid_size: Spacing of the grid
        value: Coordinate to snap
        threshold: Maximum distance to the nearest grid line

    Returns:
        The nearest multiple of grid_size when it is within threshold,
        otherwise value unchanged.

    Examples:
        snap_to(25, 98, 10) -> 100
        snap_to(25, 112, 10) -> 112 (12 from 100, 13 from 125)
    """
    if grid_size <= 0:
        return value
    remainder = value % grid_size
    if remainder <= threshold:
        return value - remainder
    if grid_size - remainder <= threshold:
        return value - remainder + grid_size
    return value


def manhattan(ax: float, ay: float, bx: float, by: float) -> float:
    """Taxicab distance between two points."""
    return abs(ax - bx) + abs(ay - by)


def nearest_segment_index(segments: Sequence[PathSegment], x: float, y: float) -> int:
    """
    Pick the drawn segment closest to a point.

    Only LineTo segments (index >= 1) are candidates. Scores are the
    Manhattan distance to the segment's point; on a tie the later index
    wins. With no LineTo segment, returns len(segments) so that the caller
    appends a new segment instead.
    """
    best_index = len(segments)
    best_score = math.inf
    for index in range(1, len(segments)):
        segment = segments[index]
        if segment.command != SegmentCommand.LINE_TO:
            continue
        score = manhattan(x, y, segment.x, segment.y)
        if score <= best_score:
            best_score = score
            best_index = index
    return best_index


def zone_from_drag(anchor_x: float, anchor_y: float, dx: float, dy: float) -> Rect:
    """
    Derive a zone rectangle from a drag relative to an anchor point.

    Size comes from the absolute drag deltas. The rectangle is centred on
    the anchor horizontally and pushed upwards vertically.
    """
    width = abs(dx)
    height = abs(dy)
    return Rect(
        x=anchor_x - width / 2,
        y=anchor_y - height / ZONE_VERTICAL_FACTOR,
        width=width,
        height=height,
    )


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def distance_to_segment(
    px: float, py: float, ax: float, ay: float, bx: float, by: float
) -> float:
    """Euclidean distance from point P to the line segment AB."""
    abx = bx - ax
    aby = by - ay
    length_sq = abx * abx + aby * aby
    if length_sq < 0.0001:
        return math.hypot(px - ax, py - ay)
    t = ((px - ax) * abx + (py - ay) * aby) / length_sq
    t = clamp(t, 0.0, 1.0)
    return math.hypot(px - (ax + abx * t), py - (ay + aby * t))
