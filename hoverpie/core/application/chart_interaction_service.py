"""
Service for handling pie chart interactions.

- Pure transitions of the hover state on pointer events
- Ownership of the current spans and hover state
- Notification of subscribers when the state changes
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from hoverpie.core.application.chart_service import (
    BoundsMode,
    compute_spans,
    cursor_from_pointer,
    hit_test,
    polar_angle,
)
from hoverpie.core.domain.models import AngleSpan, HoverState, Slice

logger = logging.getLogger(__name__)

def on_pointer_move(
    state: HoverState,
    spans: Sequence[AngleSpan],
    pointer_x: float,
    pointer_y: float,
    width: float,
    height: float,
    mode: BoundsMode = BoundsMode.EUCLIDEAN,
) -> HoverState:
    """Returns the state after the pointer moved to (pointer_x, pointer_y)."""
    sample, radius = cursor_from_pointer(pointer_x, pointer_y, width, height)
    angle = polar_angle(sample.x, sample.y)
    hit = hit_test(spans, sample, radius, mode, angle=angle)

    return replace(
        state,
        pointer_x=pointer_x,
        pointer_y=pointer_y,
        angle=angle,
        hit=hit,
        overlay_shown=hit.tooltip_visible,
    )

def on_pointer_exit(state: HoverState) -> HoverState:
    """Returns the state after the pointer left the chart."""
    return replace(state, overlay_shown=False)

class ChartInteractionService:
    """Service for handling chart interactions."""

    def __init__(self, bounds_mode: BoundsMode = BoundsMode.EUCLIDEAN):
        self._bounds_mode = bounds_mode
        self._spans: List[AngleSpan] = []
        self._state = HoverState()
        self._state_callbacks: List[Callable[[HoverState], None]] = []

    @property
    def spans(self) -> List[AngleSpan]:
        return list(self._spans)

    @property
    def state(self) -> HoverState:
        return self._state

    @property
    def bounds_mode(self) -> BoundsMode:
        return self._bounds_mode

    def set_slices(self, slices: Sequence[Slice]):
        """Recomputes spans for a new dataset and hides the tooltip."""
        self._spans = compute_spans(slices)
        logger.debug(f"Chart data set: {len(self._spans)} spans")
        self._apply(on_pointer_exit(self._state))

    def add_state_callback(self, callback: Callable[[HoverState], None]):
        """Adds callback for state changes."""
        self._state_callbacks.append(callback)

    def remove_state_callback(self, callback: Callable[[HoverState], None]):
        """Removes a previously added callback."""
        if callback in self._state_callbacks:
            self._state_callbacks.remove(callback)

    def handle_mouse_move(
        self, x: float, y: float, width: float, height: float
    ) -> Optional[str]:
        """
        Handles mouse movement over chart.

        Args:
            x: Pointer X in widget coordinates
            y: Pointer Y in widget coordinates (y down)
            width: Current layout width
            height: Current layout height

        Returns:
            Optional[str]: Tooltip text or None
        """
        new_state = on_pointer_move(
            self._state, self._spans, x, y, width, height, self._bounds_mode
        )
        self._apply(new_state)
        return self.tooltip_text()

    def handle_mouse_leave(self):
        """Handles mouse leaving chart area."""
        self._apply(on_pointer_exit(self._state))

    def tooltip_text(self) -> Optional[str]:
        """Returns the label of the hovered wedge while the tooltip is shown."""
        if not self._state.overlay_shown:
            return None
        return self._spans[self._state.hit.active_index].label

    def _apply(self, new_state: HoverState):
        if new_state == self._state:
            return

        self._state = new_state

        for callback in list(self._state_callbacks):
            try:
                callback(new_state)
            except Exception as e:
                logger.error(f"Error in state callback: {e}", exc_info=True)
