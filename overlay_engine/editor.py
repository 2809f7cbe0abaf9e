"""
Geometry Editor
===============

Bounded Context: Orchestration of the editing engine for one map page.

Design:
- Facade: wires store, selection, authoring, circle editing, animation
- Single Responsibility: delegation only, no geometry of its own
- Two stores: `store` holds authored shapes (clearable), `catalog` holds
  the configured display-only coverage areas and zones
- view() returns an immutable snapshot for the presentation layer

Usage:
    editor = GeometryEditor(EngineConfig.default())

    editor.start_authoring(ShapeType.CIRCLE)
    editor.on_map_click({"lat": 24.71, "lng": 46.67})   # commits a circle

    editor.select("wifi-1")
    editor.selected_shape()          # CoverageArea(...)

    view = editor.view()
    view.total_circle_area           # "12.57"
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from overlay_engine.animation import PathAnimator
from overlay_engine.authoring import CircleEditor, EditorMode, ModeController, Outcome
from overlay_engine.authoring.controller import IdFactory
from overlay_engine.config import EngineConfig
from overlay_engine.geometry.shapes import (
    Circle,
    CoverageArea,
    Point,
    Polygon,
    Polyline,
    Shape,
    ShapeType,
    Zone,
)
from overlay_engine.logging import LogEvent, StructuredLogger, create_logger
from overlay_engine.measurement import MeasurementEngine
from overlay_engine.state import SelectionRegistry, ShapeStore


@dataclass(frozen=True)
class EditorView:
    """
    Immutable snapshot of everything the host renders.

    Value object; rebuilt on every view() call.
    """

    mode: EditorMode
    shape_type: Optional[ShapeType]
    staged_points: Tuple[Point, ...]
    staging_count: int
    can_finish: bool
    instructions: str
    circles: Tuple[Circle, ...]
    polygons: Tuple[Polygon, ...]
    polylines: Tuple[Polyline, ...]
    coverage_areas: Tuple[CoverageArea, ...]
    zones: Tuple[Zone, ...]
    total_circle_area: str
    selected_id: Optional[str]
    editing_mode: EditorMode
    editable_circle: Dict[str, Any]
    animated_path: Tuple[Point, ...]
    animation_progress: str
    is_animating: bool

    def __str__(self) -> str:
        return (
            f"mode={self.mode.value} staged={self.staging_count} "
            f"circles={len(self.circles)} polygons={len(self.polygons)} "
            f"polylines={len(self.polylines)} selected={self.selected_id}"
        )


class GeometryEditor:
    """
    One editing engine instance per map page.

    Every mutating method returns an Outcome; none raises for user input.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        id_factory: Optional[IdFactory] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            config: Engine presets (default: EngineConfig.default())
            id_factory: Id generator for committed shapes
            logger: Shared structured logger; one per component otherwise
        """
        self.config = config or EngineConfig.default()
        level = self.config.logging_level

        def component_logger(component: str) -> StructuredLogger:
            return logger or create_logger(component, level=level)

        self._logger = component_logger("editor")

        self.store = ShapeStore()
        self.catalog = ShapeStore()
        self._load_catalog()

        self.selection = SelectionRegistry(logger=component_logger("selection"))
        self.controller = ModeController(
            self.store,
            self.config,
            id_factory=id_factory,
            logger=component_logger("authoring"),
        )
        self.circle_editor = CircleEditor(
            self.config.editable_circle,
            logger=component_logger("circle_editor"),
        )
        self.animator = PathAnimator(
            self.config.animation.path,
            tick_interval_ms=self.config.animation.tick_interval_ms,
            logger=component_logger("animation"),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path, **kwargs) -> "GeometryEditor":
        config = EngineConfig.from_yaml(yaml_path)
        editor = cls(config, **kwargs)
        editor._logger.info(
            event=LogEvent.CONFIG_LOADED,
            message=f"Editor configured from {yaml_path}",
            metadata={
                'palette': len(config.palette),
                'coverage_areas': len(config.coverage_areas),
                'zones': len(config.zones),
            },
        )
        return editor

    def _load_catalog(self) -> None:
        for area in self.config.coverage_areas:
            self.catalog.add(area)
        for zone in self.config.zones:
            self.catalog.add(zone)

    # ===== Authoring =====

    @property
    def mode(self) -> EditorMode:
        return self.controller.mode

    def start_authoring(self, shape_type: ShapeType) -> Outcome:
        return self.controller.start_authoring(shape_type)

    def add_point(self, point: Point) -> Outcome:
        return self.controller.add_point(point)

    def on_map_click(self, event: Mapping[str, Any]) -> Outcome:
        """Route a {lat, lng} position event from the map surface."""
        return self.controller.add_point(Point.from_dict(event))

    def finish(self) -> Outcome:
        return self.controller.finish()

    def cancel(self) -> Outcome:
        return self.controller.cancel()

    def clear_all(self, shape_type: ShapeType) -> Outcome:
        return self.controller.clear_all(shape_type)

    def set_radius(self, meters: float) -> Outcome:
        return self.controller.set_radius(meters)

    def set_color(self, color: str, shape_type: ShapeType = ShapeType.CIRCLE) -> Outcome:
        return self.controller.set_color(color, shape_type)

    # ===== Selection =====

    def select(self, shape_id: str) -> Outcome:
        """Make `shape_id` the active shape; re-selecting keeps it active."""
        self.selection.select(shape_id)
        return Outcome.ok(message=f"Selected {shape_id}")

    def clear_selection(self) -> Outcome:
        self.selection.clear()
        return Outcome.ok()

    def selected_shape(self) -> Optional[Shape]:
        """Selected shape from the authored store, else the catalog."""
        if self.selection.selected_id in self.store:
            return self.selection.resolve(self.store)
        return self.selection.resolve(self.catalog)

    def selection_details(self) -> Optional[Dict[str, str]]:
        """Display strings for the selected shape, None if nothing resolves."""
        shape = self.selected_shape()
        if shape is None:
            return None

        details = {"id": shape.id, "type": shape.shape_type.value}
        details.update(MeasurementEngine.measure(shape))
        match shape:
            case CoverageArea(name=name, description=description, category=category):
                details.update(name=name, description=description, category=category)
            case Zone(name=name, description=description):
                details.update(name=name, description=description)
        return details

    # ===== Editable circle =====

    def toggle_editing(self) -> Outcome:
        return self.circle_editor.toggle_editing()

    def drag_center(self, point: Point) -> Outcome:
        return self.circle_editor.drag_center(point)

    def drag_edge(self, point: Point) -> Outcome:
        return self.circle_editor.drag_edge(point)

    # ===== Presentation =====

    def total_circle_area(self) -> str:
        circles = self.store.list(ShapeType.CIRCLE)
        return MeasurementEngine.format_area(MeasurementEngine.total_area(circles))

    def view(self) -> EditorView:
        return EditorView(
            mode=self.controller.mode,
            shape_type=self.controller.shape_type,
            staged_points=self.controller.staged_points,
            staging_count=self.controller.staging_count,
            can_finish=self.controller.can_finish,
            instructions=self.controller.instructions,
            circles=self.store.list(ShapeType.CIRCLE),
            polygons=self.store.list(ShapeType.POLYGON),
            polylines=self.store.list(ShapeType.POLYLINE),
            coverage_areas=self.config.coverage_areas,
            zones=self.config.zones,
            total_circle_area=self.total_circle_area(),
            selected_id=self.selection.selected_id,
            editing_mode=self.circle_editor.mode,
            editable_circle=self.circle_editor.circle.to_dict(),
            animated_path=self.animator.animated_path,
            animation_progress=self.animator.progress,
            is_animating=self.animator.is_animating,
        )

    def reset(self) -> None:
        """Restore the configured initial state (example switched)."""
        self.store.clear()
        self.selection.clear()
        self.controller.reset()
        self.circle_editor.reset()
        self.animator.reset()
        self._logger.info(
            event=LogEvent.EDITOR_RESET,
            message="Editor reset to configured state",
        )

    def __repr__(self) -> str:
        return f"GeometryEditor({self.view()})"
