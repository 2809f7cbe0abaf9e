"""Tests for the ModeController authoring state machine."""
from __future__ import annotations

import itertools
import json
import logging

import numpy as np
import pytest

from overlay_engine import (
    EditorMode,
    ModeController,
    Point,
    Polygon,
    Polyline,
    Rejection,
    SelectionRegistry,
    ShapeType,
)


def _add_all(controller, points):
    for point in points:
        controller.add_point(point)


# ─────────────────────────────────────────────────────────
# Session lifecycle
# ─────────────────────────────────────────────────────────


class TestStartAuthoring:
    def test_starts_idle(self, controller):
        assert controller.mode is EditorMode.IDLE
        assert controller.shape_type is None
        assert controller.staged_points == ()

    def test_modes_per_shape_type(self, controller):
        controller.start_authoring(ShapeType.CIRCLE)
        assert controller.mode is EditorMode.PLACING
        controller.start_authoring(ShapeType.POLYGON)
        assert controller.mode is EditorMode.COLLECTING
        controller.start_authoring(ShapeType.POLYLINE)
        assert controller.mode is EditorMode.COLLECTING

    def test_accepts_string_shape_type(self, controller):
        controller.start_authoring("polyline")
        assert controller.shape_type is ShapeType.POLYLINE

    def test_reentry_restarts_buffer(self, controller, triangle):
        controller.start_authoring(ShapeType.POLYGON)
        _add_all(controller, triangle[:2])
        controller.start_authoring(ShapeType.POLYGON)
        assert controller.staging_count == 0

    def test_switching_type_discards_points(self, controller, triangle):
        controller.start_authoring(ShapeType.POLYGON)
        _add_all(controller, triangle)
        controller.start_authoring(ShapeType.POLYLINE)
        assert controller.shape_type is ShapeType.POLYLINE
        assert controller.staged_points == ()
        assert len(controller.store) == 0

    def test_polygon_instructions(self, controller):
        outcome = controller.start_authoring(ShapeType.POLYGON)
        assert "at least 3 points" in outcome.message


class TestAddPoint:
    def test_ignored_while_idle(self, controller, store):
        outcome = controller.add_point(Point(24.7, 46.6))
        assert not outcome
        assert outcome.reason is Rejection.NOT_AUTHORING
        assert len(store) == 0
        assert controller.mode is EditorMode.IDLE

    def test_collecting_keeps_order(self, controller, triangle):
        controller.start_authoring(ShapeType.POLYLINE)
        _add_all(controller, triangle)
        assert controller.staged_points == tuple(triangle)

    def test_count_message(self, controller, triangle):
        controller.start_authoring(ShapeType.POLYGON)
        controller.add_point(triangle[0])
        outcome = controller.add_point(triangle[1])
        assert outcome.message == "2 points added"


class TestCirclePlacement:
    def test_click_commits_circle(self, controller, store):
        controller.start_authoring(ShapeType.CIRCLE)
        outcome = controller.add_point(Point(24.7136, 46.6753))

        assert outcome
        assert outcome.shape.radius == 2000
        assert outcome.shape.color == "#007bff"
        assert outcome.measurements["radius"] == "2km"
        assert store.list(ShapeType.CIRCLE) == (outcome.shape,)
        assert controller.mode is EditorMode.IDLE

    def test_default_ids_are_sequential(self, controller):
        ids = []
        for lat in (24.70, 24.71):
            controller.start_authoring(ShapeType.CIRCLE)
            ids.append(controller.add_point(Point(lat, 46.6)).shape.id)
        assert ids == ["circle-1", "circle-2"]

    def test_custom_id_factory(self, store, config):
        sequence = itertools.count(100)
        controller = ModeController(
            store, config, id_factory=lambda shape_type: f"{shape_type.value}#{next(sequence)}",
        )
        controller.start_authoring(ShapeType.CIRCLE)
        assert controller.add_point(Point(24.7, 46.6)).shape.id == "circle#100"

    def test_uses_current_presets(self, controller):
        controller.set_radius(4500)
        controller.set_color("#DC3545")
        controller.start_authoring(ShapeType.CIRCLE)
        circle = controller.add_point(Point(24.7, 46.6)).shape
        assert circle.radius == 4500
        assert circle.color == "#dc3545"


# ─────────────────────────────────────────────────────────
# finish / cancel / clear_all
# ─────────────────────────────────────────────────────────


class TestFinish:
    def test_polygon_with_two_points_rejected(self, controller, store, triangle):
        controller.start_authoring(ShapeType.POLYGON)
        _add_all(controller, triangle[:2])

        outcome = controller.finish()

        assert not outcome
        assert outcome.reason is Rejection.INSUFFICIENT_POINTS
        assert outcome.message == "A polygon needs at least 3 points!"
        assert controller.mode is EditorMode.COLLECTING
        assert controller.staged_points == tuple(triangle[:2])
        assert len(store) == 0

    def test_polygon_with_three_points_commits(self, controller, store, triangle):
        controller.start_authoring(ShapeType.POLYGON)
        _add_all(controller, triangle)
        assert controller.can_finish

        outcome = controller.finish()

        assert outcome
        assert isinstance(outcome.shape, Polygon)
        assert outcome.shape.paths == tuple(triangle)
        assert outcome.shape.fill_color == "#ff6b6b"
        assert outcome.shape.stroke_color == "#ff0000"
        assert outcome.measurements["points"] == "3"
        assert store.list(ShapeType.POLYGON) == (outcome.shape,)
        assert controller.mode is EditorMode.IDLE
        assert controller.staging_count == 0

    def test_polyline_without_points_rejected(self, controller):
        controller.start_authoring(ShapeType.POLYLINE)
        outcome = controller.finish()
        assert outcome.reason is Rejection.INSUFFICIENT_POINTS
        assert controller.mode is EditorMode.COLLECTING

    def test_single_point_polyline_commits(self, controller, store):
        controller.start_authoring(ShapeType.POLYLINE)
        controller.add_point(Point(24.7, 46.6))
        outcome = controller.finish()

        assert isinstance(outcome.shape, Polyline)
        assert not outcome.shape.is_complete
        assert outcome.measurements == {"points": "1", "length": "0 m"}
        assert store.count(ShapeType.POLYLINE) == 1

    def test_finish_while_idle(self, controller):
        assert controller.finish().reason is Rejection.NOT_COLLECTING

    def test_finish_while_placing(self, controller):
        controller.start_authoring(ShapeType.CIRCLE)
        assert controller.finish().reason is Rejection.NOT_COLLECTING
        assert controller.mode is EditorMode.PLACING


class TestCancel:
    def test_discards_buffer(self, controller, store, triangle):
        controller.start_authoring(ShapeType.POLYGON)
        _add_all(controller, triangle)

        assert controller.cancel()
        assert controller.mode is EditorMode.IDLE
        assert controller.staged_points == ()
        assert len(store) == 0

    def test_cancel_while_idle(self, controller):
        assert controller.cancel()
        assert controller.mode is EditorMode.IDLE


class TestClearAll:
    def test_removes_every_circle(self, controller, store):
        selection = SelectionRegistry()
        for lat in (24.70, 24.71, 24.72):
            controller.start_authoring(ShapeType.CIRCLE)
            controller.add_point(Point(lat, 46.6))
        selection.select("circle-2")

        outcome = controller.clear_all(ShapeType.CIRCLE)

        assert outcome.message == "Removed 3 circle shapes"
        assert store.list(ShapeType.CIRCLE) == ()
        assert selection.resolve(store) is None

    def test_staging_untouched(self, controller, triangle):
        controller.start_authoring(ShapeType.POLYGON)
        _add_all(controller, triangle[:2])
        controller.clear_all(ShapeType.POLYGON)
        assert controller.staging_count == 2


# ─────────────────────────────────────────────────────────
# Presets
# ─────────────────────────────────────────────────────────


class TestSetRadius:
    def test_in_range(self, controller):
        outcome = controller.set_radius(3500)
        assert outcome.message == "Radius: 3.5km"
        assert controller.presets.circle_radius == 3500

    def test_clamped_to_maximum(self, controller):
        assert controller.set_radius(50000)
        assert controller.presets.circle_radius == 10000

    def test_clamped_to_minimum(self, controller):
        assert controller.set_radius(100)
        assert controller.presets.circle_radius == 500

    @pytest.mark.parametrize("radius", [0, -250, float("nan")])
    def test_invalid_radius_falls_back_to_minimum(self, controller, radius):
        outcome = controller.set_radius(radius)
        assert outcome.reason is Rejection.INVALID_RADIUS
        assert controller.presets.circle_radius == 500

    def test_bool_is_not_a_radius(self, controller):
        outcome = controller.set_radius(True)
        assert outcome.reason is Rejection.INVALID_RADIUS
        assert controller.presets.circle_radius == 500

    @pytest.mark.parametrize("radius", [np.int64(4500), np.float64(4500.0)])
    def test_numpy_scalars_accepted(self, controller, radius):
        assert controller.set_radius(radius)
        assert controller.presets.circle_radius == 4500


class TestSetColor:
    def test_palette_color_any_case(self, controller):
        outcome = controller.set_color("#28A745")
        assert outcome.message == "Color: Green"
        assert controller.presets.circle_color == "#28a745"

    def test_polygon_fill_and_polyline(self, controller):
        controller.set_color("#6f42c1", ShapeType.POLYGON)
        controller.set_color("#20c997", ShapeType.POLYLINE)
        assert controller.presets.polygon_fill_color == "#6f42c1"
        assert controller.presets.polyline_color == "#20c997"

    def test_stroke_color(self, controller):
        assert controller.set_stroke_color("#fd7e14")
        assert controller.presets.polygon_stroke_color == "#fd7e14"

    @pytest.mark.parametrize("color", ["#123456", "not-a-color"])
    def test_outside_palette_rejected(self, controller, color):
        outcome = controller.set_color(color)
        assert outcome.reason is Rejection.INVALID_COLOR
        assert controller.presets.circle_color == "#007bff"

    def test_reset_restores_presets(self, controller):
        controller.set_radius(8000)
        controller.set_color("#e83e8c")
        controller.start_authoring(ShapeType.POLYGON)
        controller.reset()
        assert controller.mode is EditorMode.IDLE
        assert controller.presets.circle_radius == 2000
        assert controller.presets.circle_color == "#007bff"


class TestLogging:
    def test_commit_is_logged_as_json(self, controller, caplog, triangle):
        controller.start_authoring(ShapeType.POLYGON)
        _add_all(controller, triangle)

        with caplog.at_level(logging.INFO, logger="overlay_engine.authoring"):
            controller.finish()

        events = [
            json.loads(r.getMessage())["event"]
            for r in caplog.records
            if r.name == "overlay_engine.authoring"
        ]
        assert "shape.committed" in events
