from hoverpie.ui.widgets.pie_chart_widget import PieChartWidget

__all__ = ["PieChartWidget"]
