import logging
from typing import Optional, Sequence

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtWidgets import QLabel, QSizePolicy, QVBoxLayout, QWidget

from hoverpie.core.application.chart_interaction_service import ChartInteractionService
from hoverpie.core.colors import ColorPolicy
from hoverpie.core.domain.models import HoverState, Slice
from hoverpie.core.settings import ChartSettings
from hoverpie.core.view_models import ChartViewModel, build_view_model
from hoverpie.ui.services.chart_rendering_service import ChartRenderingService
from hoverpie.ui.theme import ThemeManager

logger = logging.getLogger(__name__)

TOOLTIP_OFFSET = QPoint(15, 10)

class PieChartWidget(QWidget):
    """
    Interactive pie chart.

    Hovering a wedge raises it with a shadow and shows its label in a
    tooltip that follows the pointer. Leaving the chart hides the tooltip.
    """

    def __init__(
        self,
        slices: Sequence[Slice] = (),
        color_policy: Optional[ColorPolicy] = None,
        settings: Optional[ChartSettings] = None,
        theme_manager: Optional[ThemeManager] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.settings = settings or ChartSettings()
        self.color_policy = color_policy or self.settings.build_color_policy()
        self.theme_manager = theme_manager or ThemeManager.get_instance()

        self.interaction = ChartInteractionService(self.settings.bounds_mode)
        self.rendering = ChartRenderingService()
        self.view_model = ChartViewModel()
        self._drawn_active_index: Optional[int] = None
        self._last_gui_pos: Optional[QPoint] = None

        self.setMinimumSize(200, 200)
        self.setMouseTracking(True)

        self._setup_ui()
        self._connect_signals()
        self.set_slices(slices)

    def set_slices(self, slices: Sequence[Slice]):
        """Replaces the dataset and redraws the chart."""
        self.interaction.set_slices(list(slices))
        self._refresh(force_redraw=True)

    def handle_pointer_move(
        self,
        x: float,
        y: float,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ):
        """
        Feeds a pointer position in canvas pixels (origin top-left).

        Width and height default to the current figure size.
        """
        if width is None or height is None:
            width = self.figure.bbox.width
            height = self.figure.bbox.height

        self.interaction.handle_mouse_move(x, y, width, height)

    def handle_pointer_exit(self):
        self.interaction.handle_mouse_leave()

    def on_motion(self, event):
        if event.x is None or event.y is None:
            return

        if event.guiEvent is not None:
            self._last_gui_pos = event.guiEvent.position().toPoint()

        height = self.figure.bbox.height
        self.handle_pointer_move(event.x, height - event.y, self.figure.bbox.width, height)

    def on_figure_leave(self, event):
        self.handle_pointer_exit()

    def _on_state_changed(self, state: HoverState):
        self._refresh()

    def _refresh(self, force_redraw: bool = False):
        self.view_model = build_view_model(
            self.interaction.spans,
            self.interaction.state,
            self.color_policy,
            highlight_enabled=self.settings.highlight_enabled,
            inset=self.settings.inset,
        )

        active = self.view_model.active_wedge
        active_index = active.index if active else -1

        if force_redraw or active_index != self._drawn_active_index:
            self._redraw()
            self._drawn_active_index = active_index

        self._update_tooltip()

    def _redraw(self):
        self.rendering.render(
            self.view_model,
            background=self.theme_manager.get_hex("chart.background"),
            edge_color=self.theme_manager.get_hex("chart.edge"),
            shadow_color=self.theme_manager.get_hex("chart.shadow"),
        )
        self.canvas.draw_idle()

    def _update_tooltip(self):
        tooltip = self.view_model.tooltip
        if tooltip is None:
            self.tooltip_widget.hide()
            return

        self.tooltip_widget.setText(tooltip.text)
        self.tooltip_widget.adjustSize()

        if self._last_gui_pos is not None:
            local_pos = self._last_gui_pos
        else:
            ratio = self.canvas.device_pixel_ratio or 1
            local_pos = QPoint(int(tooltip.x / ratio), int(tooltip.y / ratio))

        self.tooltip_widget.move(self.canvas.mapToGlobal(local_pos) + TOOLTIP_OFFSET)
        self.tooltip_widget.show()

    def _apply_theme(self):
        self.tooltip_widget.setStyleSheet(self.theme_manager.tooltip_stylesheet())
        self._refresh(force_redraw=True)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.figure = Figure()
        self.canvas = FigureCanvas(self.figure)
        self.canvas.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.canvas.setMinimumSize(0, 0)
        self.ax = self.figure.add_axes([0, 0, 1, 1], frameon=False)
        self.rendering.attach(self.ax)
        layout.addWidget(self.canvas)

        self.tooltip_widget = QLabel(self, Qt.WindowType.ToolTip)
        self.tooltip_widget.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.tooltip_widget.setStyleSheet(self.theme_manager.tooltip_stylesheet())
        self.tooltip_widget.hide()

    def _connect_signals(self):
        self.interaction.add_state_callback(self._on_state_changed)
        self.theme_manager.theme_changed.connect(self._apply_theme)
        self.canvas.mpl_connect("motion_notify_event", self.on_motion)
        self.canvas.mpl_connect("figure_leave_event", self.on_figure_leave)
