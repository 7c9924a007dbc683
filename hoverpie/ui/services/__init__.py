"""Services for the pie chart widget."""

from hoverpie.ui.services.chart_rendering_service import ChartRenderingService

__all__ = [
    "ChartRenderingService",
]
