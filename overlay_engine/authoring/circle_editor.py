"""
CircleEditor - drag editing of the single EditableCircle.

Independent sub-machine: the editability toggle does not interact with
ModeController's authoring states.

    IDLE <-- stop_editing / start_editing --> EDITING

While EDITING:
- drag_center(p)  moves the center, radius unchanged
- drag_edge(p)    radius = haversine distance(center, p), no snapping

Radius updates <= 0 are ignored (INVALID_RADIUS); the circle keeps its
previous radius.
"""

import math
from typing import Dict, Optional

from overlay_engine.authoring.staging import EditorMode, Outcome, Rejection
from overlay_engine.config import CircleEditorConfig
from overlay_engine.geometry.distance import haversine_distance
from overlay_engine.geometry.shapes import EditableCircle, Point
from overlay_engine.logging import LogEvent, StructuredLogger, create_logger
from overlay_engine.measurement import MeasurementEngine


class CircleEditor:
    """
    Owns the EditableCircle and its editability flag.

    Usage:
        editor = CircleEditor(config.editable_circle)
        editor.start_editing()
        editor.drag_edge(Point(24.72, 46.68))   # radius follows the edge
        editor.measurements()                   # {"radius": "...", "area": ...}
    """

    def __init__(
        self,
        config: CircleEditorConfig,
        logger: Optional[StructuredLogger] = None,
    ):
        self.config = config
        self._logger = logger or create_logger("circle_editor")
        self._circle = EditableCircle(center=config.center, radius=config.radius)
        self._editable = False

    @property
    def circle(self) -> EditableCircle:
        return self._circle

    @property
    def is_editable(self) -> bool:
        return self._editable

    @property
    def mode(self) -> EditorMode:
        return EditorMode.EDITING if self._editable else EditorMode.IDLE

    def start_editing(self) -> Outcome:
        return self._set_editable(True)

    def stop_editing(self) -> Outcome:
        return self._set_editable(False)

    def toggle_editing(self) -> Outcome:
        return self._set_editable(not self._editable)

    def drag_center(self, point: Point) -> Outcome:
        """Move the circle; only while editable."""
        if not self._editable:
            return self._reject(Rejection.NOT_EDITABLE, "Enable editing to move the circle")

        self._circle.center = point
        self._logger.debug(
            event=LogEvent.CIRCLE_MOVED,
            message="Editable circle moved",
            metadata={'center': point.to_dict()},
        )
        return Outcome.ok(message=MeasurementEngine.format_point(point))

    def drag_edge(self, point: Point) -> Outcome:
        """Resize so the circle edge passes through `point`."""
        if not self._editable:
            return self._reject(Rejection.NOT_EDITABLE, "Enable editing to resize the circle")

        return self._apply_radius(haversine_distance(self._circle.center, point))

    def set_radius(self, meters: float) -> Outcome:
        """Programmatic radius update (not gated by editability)."""
        return self._apply_radius(meters)

    def measurements(self) -> Dict[str, str]:
        radius = self._circle.radius
        return {
            "radius": MeasurementEngine.format_distance(radius),
            "area": MeasurementEngine.format_area(MeasurementEngine.circle_area(radius)),
            "center": MeasurementEngine.format_point(self._circle.center),
        }

    def reset(self) -> None:
        """Restore the configured circle and disable editing."""
        self._circle = EditableCircle(center=self.config.center, radius=self.config.radius)
        self._editable = False

    def _apply_radius(self, meters: float) -> Outcome:
        if not math.isfinite(meters) or meters <= 0:
            return self._reject(
                Rejection.INVALID_RADIUS,
                f"Radius must be > 0, keeping "
                f"{MeasurementEngine.format_distance(self._circle.radius)}",
            )

        self._circle.radius = meters
        self._logger.debug(
            event=LogEvent.CIRCLE_RESIZED,
            message="Editable circle resized",
            metadata={'radius': meters},
        )
        return Outcome.ok(message=f"Radius: {MeasurementEngine.format_distance(meters)}")

    def _set_editable(self, editable: bool) -> Outcome:
        changed = editable != self._editable
        self._editable = editable
        if changed:
            self._logger.info(
                event=LogEvent.EDITING_TOGGLED,
                message=f"Editing {'enabled' if editable else 'disabled'}",
                metadata={'editable': editable},
            )
        return Outcome.ok(message="Drag the circle or its edge" if editable else "")

    def _reject(self, reason: Rejection, message: str) -> Outcome:
        self._logger.warning(
            event=LogEvent.CIRCLE_REJECTED,
            message=message,
            metadata={'reason': reason.value},
        )
        return Outcome.rejected(reason, message)

    def __repr__(self) -> str:
        return (
            f"CircleEditor(editable={self._editable}, "
            f"radius={self._circle.radius:.2f})"
        )
