"""
hoverpie - interactive pie chart widget.

The geometry in hoverpie.core has no GUI dependencies;
hoverpie.ui renders it with PyQt6 and matplotlib.
"""

__version__ = "1.0.0"

from .core.application.chart_service import (
    BoundsMode,
    compute_spans,
    find_active_index,
    hit_test,
    is_inside_bounds,
    is_inside_bounds_legacy,
    polar_angle,
)
from .core.domain.models import AngleSpan, CursorSample, HitResult, HoverState, Slice

__all__ = [
    "AngleSpan",
    "BoundsMode",
    "CursorSample",
    "HitResult",
    "HoverState",
    "Slice",
    "compute_spans",
    "find_active_index",
    "hit_test",
    "is_inside_bounds",
    "is_inside_bounds_legacy",
    "polar_angle",
]
