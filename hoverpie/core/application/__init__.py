"""Application services for the pie chart."""

from hoverpie.core.application.chart_interaction_service import ChartInteractionService

__all__ = [
    "ChartInteractionService",
]
