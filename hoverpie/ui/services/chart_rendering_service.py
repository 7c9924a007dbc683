"""
Service for rendering the pie chart.

Responsible for matplotlib wedges, highlight and shadow.
Works on any matplotlib axes, so it can be driven without Qt.
"""

import logging
from typing import List, Optional

from matplotlib import patheffects
from matplotlib.axes import Axes
from matplotlib.patches import Wedge

from hoverpie.core.view_models import ChartViewModel, WedgeViewModel

logger = logging.getLogger(__name__)

class ChartRenderingService:
    """Service for rendering the pie chart."""

    def __init__(self, axes: Optional[Axes] = None):
        self.axes = axes

        self.CHART_RADIUS = 1.0
        self.AXES_LIMIT = 1.0
        self.BASE_ZORDER = 1
        self.ACTIVE_ZORDER = 10
        self.EDGE_WIDTH = 1.0
        self.SHADOW_ALPHA = 0.4
        self.SHADOW_OFFSET = (2, -2)

    def attach(self, axes: Axes):
        """Sets the axes to draw on."""
        self.axes = axes
        self._prepare_axes()

    def render(
        self,
        view_model: ChartViewModel,
        background: str = "#ffffff",
        edge_color: str = "#ffffff",
        shadow_color: str = "#000000",
    ) -> List[Wedge]:
        """
        Redraws all wedges of the view model.

        Wedges with a non-positive sweep are not drawn.

        Returns:
            List of wedge patches added to the axes
        """
        if self.axes is None:
            return []

        self.axes.clear()
        self._prepare_axes()
        self.axes.figure.patch.set_facecolor(background)

        patches = []
        for wedge in view_model.wedges:
            if wedge.end_angle - wedge.start_angle <= 0:
                continue
            patches.append(self._render_wedge(wedge, edge_color, shadow_color))

        logger.debug(f"Rendered {len(patches)} of {len(view_model.wedges)} wedges")
        return patches

    def _render_wedge(
        self, wedge: WedgeViewModel, edge_color: str, shadow_color: str
    ) -> Wedge:
        """Renders one wedge, clockwise from 3 o'clock."""

        patch = Wedge(
            (0.0, 0.0),
            self.CHART_RADIUS - wedge.inset,
            -wedge.end_angle,
            -wedge.start_angle,
            facecolor=wedge.color,
            edgecolor=edge_color,
            linewidth=self.EDGE_WIDTH,
            zorder=self.ACTIVE_ZORDER if wedge.active else self.BASE_ZORDER,
            label=wedge.label,
        )

        if wedge.active:
            patch.set_path_effects(
                [
                    patheffects.SimplePatchShadow(
                        offset=self.SHADOW_OFFSET,
                        shadow_rgbFace=shadow_color,
                        alpha=self.SHADOW_ALPHA,
                    ),
                    patheffects.Normal(),
                ]
            )

        self.axes.add_patch(patch)
        return patch

    def _prepare_axes(self):
        self.axes.set_aspect("equal", anchor="C")
        self.axes.set_xlim(-self.AXES_LIMIT, self.AXES_LIMIT)
        self.axes.set_ylim(-self.AXES_LIMIT, self.AXES_LIMIT)
        self.axes.format_coord = lambda x, y: ""
        self.axes.axis("off")

    def clear_chart(self):
        """Clears chart."""
        if self.axes is not None:
            self.axes.clear()
            self._prepare_axes()
