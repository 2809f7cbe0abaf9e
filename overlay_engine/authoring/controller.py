"""
ModeController - authoring state machine for circles, polygons, polylines.

Bounded Context: Interactive shape authoring from map click events.

States:
    IDLE        no session; point events are ignored
    PLACING     circle session; the next point commits a circle
    COLLECTING  polygon/polyline session; points accumulate until finish()

Transitions:
    start_authoring(t)   any   -> PLACING | COLLECTING   (buffer restarted)
    add_point(p)         PLACING -> IDLE (commit) | COLLECTING -> COLLECTING
    finish()             COLLECTING -> IDLE (commit) | unchanged if invalid
    cancel()             any   -> IDLE (buffer discarded)

The mode is derived from the staging buffer (None means IDLE), so the
machine cannot hold more than one buffer.

Threading:
    Single consumer; each call runs to completion before the next event.
"""

import itertools
import math
from typing import Callable, Optional, Tuple

from overlay_engine.authoring.staging import (
    CircleStaging,
    EditorMode,
    Outcome,
    PolygonStaging,
    PolylineStaging,
    Rejection,
    StagingBuffer,
    StylePresets,
    new_staging,
)
from overlay_engine.config import EngineConfig
from overlay_engine.geometry.shapes import (
    Circle,
    Point,
    Polygon,
    Polyline,
    Shape,
    ShapeType,
    is_real_number,
)
from overlay_engine.logging import LogEvent, StructuredLogger, create_logger
from overlay_engine.measurement import MeasurementEngine
from overlay_engine.state.store import ShapeStore

IdFactory = Callable[[ShapeType], str]


class ModeController:
    """
    Authoring lifecycle per shape type.

    Usage:
        controller = ModeController(store, EngineConfig.default())

        controller.start_authoring(ShapeType.POLYGON)
        controller.add_point(Point(24.72, 46.67))
        controller.add_point(Point(24.73, 46.67))
        controller.add_point(Point(24.73, 46.69))
        outcome = controller.finish()      # commits, mode -> IDLE
        outcome.shape                      # Polygon(...)
        outcome.measurements               # {"points": "3", "perimeter": ..., "area": ...}
    """

    def __init__(
        self,
        store: ShapeStore,
        config: EngineConfig,
        id_factory: Optional[IdFactory] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            store: Destination of committed shapes
            config: Presets (palette, radius range, default colors)
            id_factory: Id generator for committed shapes
                        (default: "<shape_type>-<n>")
            logger: Structured logger (default: component "authoring")
        """
        self.store = store
        self.config = config
        self._logger = logger or create_logger("authoring")

        self._sequence = itertools.count(1)
        self._id_factory = id_factory or self._default_id

        self._staging: Optional[StagingBuffer] = None
        self._presets = StylePresets.from_config(config)

    def _default_id(self, shape_type: ShapeType) -> str:
        return f"{shape_type.value}-{next(self._sequence)}"

    # ===== Observable state =====

    @property
    def mode(self) -> EditorMode:
        match self._staging:
            case None:
                return EditorMode.IDLE
            case CircleStaging():
                return EditorMode.PLACING
            case PolygonStaging() | PolylineStaging():
                return EditorMode.COLLECTING

    @property
    def shape_type(self) -> Optional[ShapeType]:
        """Type being authored, None when idle."""
        return None if self._staging is None else self._staging.shape_type

    @property
    def staged_points(self) -> Tuple[Point, ...]:
        match self._staging:
            case PolygonStaging(points=points) | PolylineStaging(points=points):
                return tuple(points)
            case _:
                return ()

    @property
    def staging_count(self) -> int:
        return len(self.staged_points)

    @property
    def presets(self) -> StylePresets:
        return self._presets

    @property
    def can_finish(self) -> bool:
        """Whether finish() would commit (drives the Finish button)."""
        match self._staging:
            case PolygonStaging(points=points):
                return len(points) >= self.config.min_polygon_points
            case PolylineStaging(points=points):
                return len(points) >= 1
            case _:
                return False

    @property
    def instructions(self) -> str:
        """Instructional text for the current state."""
        match self._staging:
            case None:
                return 'Configure your settings and click "Start" to add shapes to the map'
            case CircleStaging():
                return "Click on the map to place a circle"
            case PolygonStaging():
                return (
                    "Click on the map to add points to your polygon. "
                    f"You need at least {self.config.min_polygon_points} points."
                )
            case PolylineStaging():
                return "Click on the map to add points to your path"

    # ===== Transitions =====

    def start_authoring(self, shape_type: ShapeType) -> Outcome:
        """
        Begin a session; any previous buffer is discarded (restart, never
        resume).
        """
        shape_type = ShapeType(shape_type)
        discarded = self.staging_count if self._staging is not None else None

        self._staging = new_staging(shape_type)

        self._logger.info(
            event=LogEvent.AUTHORING_STARTED,
            message=f"Started {shape_type.value} authoring",
            metadata={
                'shape_type': shape_type.value,
                'mode': self.mode.value,
                'discarded_points': discarded,
            },
        )
        return Outcome.ok(message=self.instructions)

    def add_point(self, point: Point) -> Outcome:
        match self._staging:
            case None:
                self._logger.debug(
                    event=LogEvent.AUTHORING_POINT_IGNORED,
                    message="Point ignored while idle",
                    metadata={'point': point.to_dict()},
                )
                return Outcome.rejected(Rejection.NOT_AUTHORING, self.instructions)

            case CircleStaging():
                circle = Circle(
                    id=self._id_factory(ShapeType.CIRCLE),
                    center=point,
                    radius=self._presets.circle_radius,
                    color=self._presets.circle_color,
                )
                return self._commit(circle)

            case PolygonStaging(points=points) | PolylineStaging(points=points):
                points.append(point)
                self._logger.debug(
                    event=LogEvent.AUTHORING_POINT_ADDED,
                    message=f"{len(points)} points added",
                    metadata={
                        'shape_type': self._staging.shape_type.value,
                        'point': point.to_dict(),
                        'count': len(points),
                    },
                )
                return Outcome.ok(message=f"{len(points)} points added")

    def finish(self) -> Outcome:
        """
        Commit the collected buffer.

        Rejected (buffer and mode unchanged) when not collecting, or when a
        polygon has fewer than min_polygon_points / a polyline has no point.
        """
        match self._staging:
            case PolygonStaging(points=points) if len(points) < self.config.min_polygon_points:
                return self._reject_finish(
                    Rejection.INSUFFICIENT_POINTS,
                    f"A polygon needs at least {self.config.min_polygon_points} points!",
                )
            case PolygonStaging(points=points):
                shape = Polygon(
                    id=self._id_factory(ShapeType.POLYGON),
                    paths=tuple(points),
                    fill_color=self._presets.polygon_fill_color,
                    stroke_color=self._presets.polygon_stroke_color,
                )
            case PolylineStaging(points=points) if not points:
                return self._reject_finish(
                    Rejection.INSUFFICIENT_POINTS,
                    "A path needs at least 1 point!",
                )
            case PolylineStaging(points=points):
                shape = Polyline(
                    id=self._id_factory(ShapeType.POLYLINE),
                    path=tuple(points),
                    color=self._presets.polyline_color,
                )
            case _:
                return self._reject_finish(
                    Rejection.NOT_COLLECTING,
                    "Nothing to finish: start building a polygon or path first",
                )

        return self._commit(shape)

    def cancel(self) -> Outcome:
        """Discard the buffer without committing. Always accepted."""
        if self._staging is not None:
            self._logger.info(
                event=LogEvent.AUTHORING_CANCELLED,
                message=f"Cancelled {self._staging.shape_type.value} authoring",
                metadata={
                    'shape_type': self._staging.shape_type.value,
                    'discarded_points': self.staging_count,
                },
            )
        self._staging = None
        return Outcome.ok(message=self.instructions)

    def clear_all(self, shape_type: ShapeType) -> Outcome:
        """Remove every committed shape of a type; staging is untouched."""
        shape_type = ShapeType(shape_type)
        removed = self.store.remove_all(shape_type)
        self._logger.info(
            event=LogEvent.SHAPE_CLEARED,
            message=f"Cleared {removed} {shape_type.value} shapes",
            metadata={'shape_type': shape_type.value, 'removed': removed},
        )
        return Outcome.ok(message=f"Removed {removed} {shape_type.value} shapes")

    # ===== Presets =====

    def set_radius(self, meters: float) -> Outcome:
        """
        Set the radius of the next circle.

        Values outside the configured range are clamped into it; a
        non-positive (or non-finite) request is rejected and the preset
        falls back to the range minimum.
        """
        radius_range = self.config.circle_radius

        if not is_real_number(meters) or not math.isfinite(meters) or meters <= 0:
            self._presets.circle_radius = radius_range.minimum
            self._logger.warning(
                event=LogEvent.PRESET_REJECTED,
                message=f"Invalid radius {meters}, using {radius_range.minimum}",
                metadata={'requested': str(meters), 'applied': radius_range.minimum},
            )
            return Outcome.rejected(
                Rejection.INVALID_RADIUS,
                f"Radius must be > 0, using "
                f"{MeasurementEngine.format_length(radius_range.minimum)}",
            )

        applied = radius_range.clamp(meters)
        self._presets.circle_radius = applied
        self._logger.info(
            event=LogEvent.PRESET_CHANGED,
            message=f"Circle radius set to {applied}",
            metadata={'requested': meters, 'applied': applied},
        )
        return Outcome.ok(message=f"Radius: {MeasurementEngine.format_length(applied)}")

    def set_color(self, color: str, shape_type: ShapeType = ShapeType.CIRCLE) -> Outcome:
        """
        Pick a palette color: circle color, polygon fill or polyline color.
        """
        entry = self.config.find_color(color)
        if entry is None:
            return self._reject_color(color)

        shape_type = ShapeType(shape_type)
        match shape_type:
            case ShapeType.CIRCLE:
                self._presets.circle_color = entry.value
            case ShapeType.POLYGON:
                self._presets.polygon_fill_color = entry.value
            case ShapeType.POLYLINE:
                self._presets.polyline_color = entry.value

        self._logger.info(
            event=LogEvent.PRESET_CHANGED,
            message=f"{shape_type.value} color set to {entry.name}",
            metadata={'shape_type': shape_type.value, 'color': entry.value},
        )
        return Outcome.ok(message=f"Color: {entry.name}")

    def set_stroke_color(self, color: str) -> Outcome:
        """Pick the polygon stroke color from the palette."""
        entry = self.config.find_color(color)
        if entry is None:
            return self._reject_color(color)

        self._presets.polygon_stroke_color = entry.value
        self._logger.info(
            event=LogEvent.PRESET_CHANGED,
            message=f"polygon stroke color set to {entry.name}",
            metadata={'color': entry.value},
        )
        return Outcome.ok(message=f"Stroke: {entry.name}")

    def reset(self) -> None:
        """Back to IDLE with the configured presets."""
        self._staging = None
        self._presets = StylePresets.from_config(self.config)

    # ===== Internals =====

    def _commit(self, shape: Shape) -> Outcome:
        measurements = MeasurementEngine.measure(shape)
        self.store.add(shape)
        self._staging = None

        self._logger.info(
            event=LogEvent.SHAPE_COMMITTED,
            message=f"Committed {shape.shape_type.value} {shape.id}",
            metadata={
                'shape_id': shape.id,
                'shape_type': shape.shape_type.value,
                'measurements': measurements,
            },
        )
        return Outcome.ok(
            message=f"Added {shape.shape_type.value} {shape.id}",
            shape=shape,
            measurements=measurements,
        )

    def _reject_finish(self, reason: Rejection, message: str) -> Outcome:
        self._logger.warning(
            event=LogEvent.SHAPE_COMMIT_REJECTED,
            message=message,
            metadata={
                'reason': reason.value,
                'mode': self.mode.value,
                'staged_points': self.staging_count,
            },
        )
        return Outcome.rejected(reason, message)

    def _reject_color(self, color: str) -> Outcome:
        self._logger.warning(
            event=LogEvent.PRESET_REJECTED,
            message=f"Color {color!r} is not in the palette",
            metadata={'requested': str(color)},
        )
        return Outcome.rejected(
            Rejection.INVALID_COLOR,
            f"Pick one of: {', '.join(c.name for c in self.config.palette)}",
        )

    def __repr__(self) -> str:
        return f"ModeController(mode={self.mode.value}, staged={self.staging_count})"
