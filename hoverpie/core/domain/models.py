"""
Domain models for hoverpie.

These models represent the chart's data and do not depend on PyQt or matplotlib.
They contain only data; the geometry lives in the chart service.
"""

from dataclasses import dataclass, field

@dataclass(frozen=True)
class Slice:
    """One labeled proportion of a pie chart."""

    label: str
    fraction: float

@dataclass(frozen=True)
class AngleSpan:
    """Angular extent of a wedge, in degrees clockwise from 3 o'clock."""

    label: str
    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

@dataclass(frozen=True)
class CursorSample:
    """Pointer position relative to the chart center, y axis pointing up."""

    x: float
    y: float

@dataclass(frozen=True)
class HitResult:
    """Outcome of hit-testing one cursor sample."""

    inside_bounds: bool = False
    active_index: int = -1

    @property
    def tooltip_visible(self) -> bool:
        return self.inside_bounds and self.active_index != -1

@dataclass(frozen=True)
class HoverState:
    """
    Hover state owned by one chart instance.

    pointer_x / pointer_y are the last pointer position in widget
    coordinates (origin top-left, y down); angle is the last polar angle.
    """

    pointer_x: float = 0.0
    pointer_y: float = 0.0
    angle: float = 0.0
    hit: HitResult = field(default_factory=HitResult)
    overlay_shown: bool = False
