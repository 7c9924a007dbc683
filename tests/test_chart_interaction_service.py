import logging

import pytest

from hoverpie.core.application.chart_interaction_service import (
    ChartInteractionService,
    on_pointer_exit,
    on_pointer_move,
)
from hoverpie.core.application.chart_service import BoundsMode, compute_spans
from hoverpie.core.domain.models import HitResult, HoverState, Slice

LAYOUT = (200.0, 200.0)

@pytest.mark.parametrize(
    "pointer, expected_index",
    [
        ((150.0, 100.0), 0),
        ((100.0, 150.0), 0),
        ((50.0, 100.0), 1),
        ((100.0, 50.0), 2),
    ],
)
def test_pointer_move_selects_wedge(quarter_spans, pointer, expected_index):
    state = on_pointer_move(HoverState(), quarter_spans, *pointer, *LAYOUT)

    assert state.hit == HitResult(inside_bounds=True, active_index=expected_index)
    assert state.overlay_shown
    assert (state.pointer_x, state.pointer_y) == pointer

def test_pointer_move_outside_hides_overlay(quarter_spans):
    state = on_pointer_move(HoverState(), quarter_spans, 199.0, 199.0, *LAYOUT)

    assert not state.hit.inside_bounds
    assert state.hit.active_index == 0
    assert not state.overlay_shown
    assert state.angle == pytest.approx(45.0)

def test_pointer_move_over_gap_hides_overlay():
    spans = compute_spans([Slice("A", 0.3)])

    state = on_pointer_move(HoverState(), spans, 50.0, 100.0, *LAYOUT)

    assert state.hit.inside_bounds
    assert state.hit.active_index == -1
    assert not state.overlay_shown

def test_legacy_bounds_on_horizontal_axis(quarter_spans):
    euclidean = on_pointer_move(HoverState(), quarter_spans, 390.0, 100.0, 400.0, 200.0)
    legacy = on_pointer_move(
        HoverState(), quarter_spans, 390.0, 100.0, 400.0, 200.0, BoundsMode.LEGACY
    )

    assert not euclidean.overlay_shown
    assert legacy.overlay_shown

def test_angle_and_index_come_from_one_computation(quarter_spans, monkeypatch):
    from hoverpie.core.application import chart_interaction_service, chart_service

    def unexpected(x, y):
        raise AssertionError("angle computed twice")

    monkeypatch.setattr(chart_interaction_service, "polar_angle", lambda x, y: 200.0)
    monkeypatch.setattr(chart_service, "polar_angle", unexpected)

    state = on_pointer_move(HoverState(), quarter_spans, 150.0, 100.0, *LAYOUT)

    assert state.angle == 200.0
    assert state.hit.active_index == 1

def test_pointer_exit_keeps_position(quarter_spans):
    state = on_pointer_move(HoverState(), quarter_spans, 150.0, 100.0, *LAYOUT)
    exited = on_pointer_exit(state)

    assert not exited.overlay_shown
    assert exited.pointer_x == state.pointer_x
    assert exited.hit == state.hit

class TestChartInteractionService:
    def test_tooltip_text(self, quarter_slices):
        service = ChartInteractionService()
        service.set_slices(quarter_slices)

        assert service.handle_mouse_move(50.0, 100.0, *LAYOUT) == "B"
        assert service.tooltip_text() == "B"

        service.handle_mouse_leave()
        assert service.tooltip_text() is None

    def test_callbacks_only_on_change(self, quarter_slices):
        service = ChartInteractionService()
        service.set_slices(quarter_slices)
        states = []
        service.add_state_callback(states.append)

        service.handle_mouse_move(150.0, 100.0, *LAYOUT)
        service.handle_mouse_move(150.0, 100.0, *LAYOUT)
        service.handle_mouse_leave()
        service.handle_mouse_leave()

        assert len(states) == 2
        assert states[0].overlay_shown
        assert not states[1].overlay_shown

    def test_remove_callback(self, quarter_slices):
        service = ChartInteractionService()
        service.set_slices(quarter_slices)
        states = []
        service.add_state_callback(states.append)
        service.remove_state_callback(states.append)

        service.handle_mouse_move(150.0, 100.0, *LAYOUT)

        assert states == []

    def test_failing_callback_is_logged(self, quarter_slices, caplog):
        service = ChartInteractionService()
        service.set_slices(quarter_slices)
        states = []

        def broken(state):
            raise RuntimeError("boom")

        service.add_state_callback(broken)
        service.add_state_callback(states.append)

        with caplog.at_level(logging.ERROR):
            service.handle_mouse_move(150.0, 100.0, *LAYOUT)

        assert len(states) == 1
        assert "boom" in caplog.text

    def test_new_data_hides_tooltip(self, quarter_slices):
        service = ChartInteractionService()
        service.set_slices(quarter_slices)
        service.handle_mouse_move(100.0, 50.0, *LAYOUT)
        assert service.tooltip_text() == "C"

        service.set_slices([Slice("only", 0.5)])

        assert service.tooltip_text() is None
        assert len(service.spans) == 1
