from hoverpie.core.colors import PaletteColorPolicy
from hoverpie.core.domain.models import HitResult, HoverState
from hoverpie.core.view_models import build_view_model

PALETTE = PaletteColorPolicy(["#111111", "#222222", "#333333"])

def hovering(index, inside=True, shown=True):
    return HoverState(
        pointer_x=12.0,
        pointer_y=34.0,
        hit=HitResult(inside_bounds=inside, active_index=index),
        overlay_shown=shown,
    )

def test_idle_chart(quarter_spans):
    view_model = build_view_model(quarter_spans, HoverState(), PALETTE)

    assert [w.label for w in view_model.wedges] == ["A", "B", "C"]
    assert [w.color for w in view_model.wedges] == ["#111111", "#222222", "#333333"]
    assert not any(w.active for w in view_model.wedges)
    assert view_model.tooltip is None
    assert view_model.active_wedge is None

def test_hovered_wedge(quarter_spans):
    view_model = build_view_model(quarter_spans, hovering(1), PALETTE)

    assert view_model.active_wedge.label == "B"
    assert view_model.tooltip.text == "B"
    assert (view_model.tooltip.x, view_model.tooltip.y) == (12.0, 34.0)

def test_hidden_overlay_has_no_tooltip(quarter_spans):
    view_model = build_view_model(quarter_spans, hovering(1, shown=False), PALETTE)

    assert view_model.tooltip is None
    assert view_model.active_wedge is None

def test_highlight_disabled_keeps_tooltip(quarter_spans):
    view_model = build_view_model(
        quarter_spans, hovering(2), PALETTE, highlight_enabled=False
    )

    assert view_model.active_wedge is None
    assert view_model.tooltip.text == "C"

def test_inset_and_default_colors(quarter_spans):
    view_model = build_view_model(quarter_spans, HoverState(), inset=0.1)

    assert all(w.inset == 0.1 for w in view_model.wedges)
    assert all(w.color.startswith("#") for w in view_model.wedges)

def test_empty_chart():
    view_model = build_view_model([], hovering(0))

    assert view_model.wedges == []
    assert view_model.tooltip is None
