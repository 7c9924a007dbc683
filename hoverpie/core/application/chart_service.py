"""
Service for pie chart geometry.

- Accumulation of fractions into contiguous angle spans
- Bounds testing (Euclidean and the legacy atan2-ratio test)
- Wedge lookup by angle
- Polar angle of a cursor sample
- Mapping of widget pointer positions onto the chart center
"""

import logging
import math
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from hoverpie.core.domain.models import AngleSpan, CursorSample, HitResult, Slice

logger = logging.getLogger(__name__)

FULL_TURN = 360.0

class BoundsMode(Enum):
    """Which radial test decides whether the cursor is over the chart."""

    EUCLIDEAN = "euclidean"
    LEGACY = "legacy"

def compute_spans(slices: Iterable[Slice]) -> List[AngleSpan]:
    """
    Converts ordered slices into contiguous angle spans.

    No validation is done: zero or negative fractions give empty or
    backwards wedges, and fractions summing below 1 leave a gap at the end.
    """
    spans = []
    start_angle = 0.0

    for item in slices:
        end_angle = start_angle + FULL_TURN * item.fraction
        spans.append(AngleSpan(item.label, start_angle, end_angle))
        start_angle = end_angle

    return spans

def total_sweep(spans: Sequence[AngleSpan]) -> float:
    """Returns the angle covered by all spans together."""
    if not spans:
        return 0.0
    return spans[-1].end_angle

def is_inside_bounds(x: float, y: float, radius: float) -> bool:
    """Checks whether a point relative to the center lies within the circle."""
    return math.hypot(x, y) <= radius

def is_inside_bounds_legacy(x: float, y: float, radius: float) -> bool:
    """
    Reproduces the original ratio test: outside when y / sin(atan2(y, x)) > radius.

    On the horizontal axis sin(theta) is 0 (x >= 0) or a tiny float (x < 0).
    IEEE division yields NaN or 0 there, neither compares greater than the
    radius, so every point with y == 0 counts as inside.
    """
    sine = math.sin(math.atan2(y, x))

    if sine == 0.0:
        return True

    return not (y / sine > radius)

def bounds_test_for(mode: BoundsMode) -> Callable[[float, float, float], bool]:
    """Returns the bounds test function for a mode."""
    if mode is BoundsMode.LEGACY:
        return is_inside_bounds_legacy
    return is_inside_bounds

def find_active_index(spans: Sequence[AngleSpan], angle: float) -> int:
    """Returns the index of the first span ending after angle, or -1."""
    for index, span in enumerate(spans):
        if span.end_angle > angle:
            return index

    return -1

def polar_angle(x: float, y: float) -> float:
    """
    Returns the clockwise angle from 3 o'clock in [0, 360).

    The sign flip turns the counterclockwise math angle into the
    clockwise sweep used by compute_spans.
    """
    raw_angle = -math.degrees(math.atan2(y, x))

    if raw_angle < 0:
        raw_angle += FULL_TURN

    # tiny negative raw angles round up to a full turn
    if raw_angle >= FULL_TURN:
        return 0.0

    return raw_angle

def cursor_from_pointer(
    pointer_x: float, pointer_y: float, width: float, height: float
) -> Tuple[CursorSample, float]:
    """
    Maps a widget pointer position onto the chart.

    The chart is a circle of diameter min(width, height) centered in the
    layout. Widget coordinates have y pointing down.

    Returns:
        Tuple of the cursor sample (y up) and the chart radius
    """
    diameter = min(width, height)

    center_x = pointer_x - width / 2
    center_y = -(pointer_y - height / 2)

    return CursorSample(center_x, center_y), diameter / 2

def hit_test(
    spans: Sequence[AngleSpan],
    sample: CursorSample,
    radius: float,
    mode: BoundsMode = BoundsMode.EUCLIDEAN,
    angle: Optional[float] = None,
) -> HitResult:
    """
    Combines the bounds test and the wedge lookup for one sample.

    angle is the sample's polar angle when the caller already has it.
    """
    inside = bounds_test_for(mode)(sample.x, sample.y, radius)
    if angle is None:
        angle = polar_angle(sample.x, sample.y)
    index = find_active_index(spans, angle)

    logger.debug(
        f"Hit test at ({sample.x:.1f}, {sample.y:.1f}): "
        f"angle={angle:.2f}, inside={inside}, index={index}"
    )

    return HitResult(inside_bounds=inside, active_index=index)
