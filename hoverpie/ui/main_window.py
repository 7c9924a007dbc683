from typing import Optional, Sequence

from PyQt6.QtWidgets import QMainWindow, QWidget

from hoverpie.core.domain.models import Slice
from hoverpie.core.settings import ChartSettings
from hoverpie.ui.theme import ThemeManager
from hoverpie.ui.widgets.pie_chart_widget import PieChartWidget

class PieChartWindow(QMainWindow):
    """Top-level window hosting a single pie chart."""

    def __init__(
        self,
        slices: Sequence[Slice],
        settings: ChartSettings,
        theme_manager: Optional[ThemeManager] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.setWindowTitle("hoverpie")
        self.resize(480, 480)

        self.chart = PieChartWidget(
            slices,
            settings=settings,
            theme_manager=theme_manager,
            parent=self,
        )
        self.setCentralWidget(self.chart)
