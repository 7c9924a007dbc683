import pytest

pytest.importorskip("PyQt6.QtWidgets")

from hoverpie.core.colors import PaletteColorPolicy
from hoverpie.core.domain.models import Slice
from hoverpie.core.settings import ChartSettings
from hoverpie.ui.theme import ThemeManager
from hoverpie.ui.widgets.pie_chart_widget import PieChartWidget

@pytest.fixture
def widget(qapp, quarter_slices):
    chart = PieChartWidget(
        quarter_slices,
        color_policy=PaletteColorPolicy(["#123456"]),
        settings=ChartSettings(),
        theme_manager=ThemeManager(),
    )
    yield chart
    chart.tooltip_widget.hide()
    chart.deleteLater()

def test_initial_render(widget):
    assert [w.label for w in widget.view_model.wedges] == ["A", "B", "C"]
    assert len(widget.ax.patches) == 3
    assert widget.tooltip_widget.isHidden()

def test_hover_shows_tooltip(widget):
    widget.handle_pointer_move(50.0, 100.0, 200.0, 200.0)

    assert widget.view_model.tooltip.text == "B"
    assert widget.view_model.active_wedge.index == 1
    assert widget.tooltip_widget.text() == "B"
    assert not widget.tooltip_widget.isHidden()

def test_hover_outside_hides_tooltip(widget):
    widget.handle_pointer_move(50.0, 100.0, 200.0, 200.0)
    widget.handle_pointer_move(1.0, 1.0, 200.0, 200.0)

    assert widget.view_model.tooltip is None
    assert widget.tooltip_widget.isHidden()

def test_exit_hides_tooltip(widget):
    widget.handle_pointer_move(100.0, 50.0, 200.0, 200.0)
    widget.handle_pointer_exit()

    assert widget.view_model.tooltip is None
    assert widget.tooltip_widget.isHidden()

def test_set_slices(widget):
    widget.set_slices([Slice("only", 0.3)])

    assert len(widget.view_model.wedges) == 1
    assert len(widget.ax.patches) == 1

    widget.handle_pointer_move(50.0, 100.0, 200.0, 200.0)
    assert widget.view_model.tooltip is None

def test_theme_switch_recolors_background(widget):
    widget.theme_manager.set_theme("dark")

    assert widget.figure.patch.get_facecolor()[:3] == pytest.approx((0x20 / 255,) * 3)
