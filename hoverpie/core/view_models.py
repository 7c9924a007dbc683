"""
ViewModels for the pie chart.

These classes contain only data for display in UI,
without any toolkit objects.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from hoverpie.core.colors import ColorPolicy, HueColorPolicy
from hoverpie.core.domain.models import AngleSpan, HoverState

@dataclass
class WedgeViewModel:
    """One wedge ready for drawing."""

    index: int
    label: str
    start_angle: float
    end_angle: float
    color: str
    active: bool = False
    inset: float = 0.0

@dataclass
class TooltipViewModel:
    """Tooltip text and its position in widget coordinates."""

    text: str
    x: float
    y: float

@dataclass
class ChartViewModel:
    """ViewModel for the pie chart widget."""

    wedges: List[WedgeViewModel] = field(default_factory=list)
    tooltip: Optional[TooltipViewModel] = None

    @property
    def active_wedge(self) -> Optional[WedgeViewModel]:
        for wedge in self.wedges:
            if wedge.active:
                return wedge
        return None

def build_view_model(
    spans: Sequence[AngleSpan],
    state: HoverState,
    color_policy: Optional[ColorPolicy] = None,
    highlight_enabled: bool = True,
    inset: float = 0.0,
) -> ChartViewModel:
    """Builds the declarative rendering description for one frame."""
    color_policy = color_policy or HueColorPolicy()
    active_index = state.hit.active_index if state.overlay_shown else -1

    wedges = [
        WedgeViewModel(
            index=index,
            label=span.label,
            start_angle=span.start_angle,
            end_angle=span.end_angle,
            color=color_policy(index, span),
            active=highlight_enabled and index == active_index,
            inset=inset,
        )
        for index, span in enumerate(spans)
    ]

    tooltip = None
    if 0 <= active_index < len(spans):
        tooltip = TooltipViewModel(
            text=spans[active_index].label,
            x=state.pointer_x,
            y=state.pointer_y,
        )

    return ChartViewModel(wedges=wedges, tooltip=tooltip)
