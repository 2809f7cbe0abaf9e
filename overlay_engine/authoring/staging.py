"""
Staging Types
=============

Types shared by the authoring state machines.

- EditorMode: observable mode of a machine
- Rejection / Outcome: result of every transition (never an exception)
- CircleStaging | PolygonStaging | PolylineStaging: tagged union of the
  in-progress buffer, dispatched with `match`
- StylePresets: color/radius picks applied to the next committed shape
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from overlay_engine.config import EngineConfig
from overlay_engine.geometry.shapes import Point, Shape, ShapeType


class EditorMode(str, Enum):
    IDLE = "idle"
    COLLECTING = "collecting"
    PLACING = "placing"
    EDITING = "editing"


class Rejection(str, Enum):
    """Why a transition was refused. All of them are recoverable."""

    NOT_AUTHORING = "not_authoring"
    NOT_COLLECTING = "not_collecting"
    INSUFFICIENT_POINTS = "insufficient_points"
    INVALID_RADIUS = "invalid_radius"
    INVALID_COLOR = "invalid_color"
    NOT_EDITABLE = "not_editable"
    EMPTY_PATH = "empty_path"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a transition.

    Truthy when accepted. A rejected outcome carries the reason and the
    instructional message the host shows instead of an error dialog.
    """

    accepted: bool
    reason: Optional[Rejection] = None
    message: str = ""
    shape: Optional[Shape] = None
    measurements: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def ok(
        cls,
        message: str = "",
        shape: Optional[Shape] = None,
        measurements: Optional[Dict[str, str]] = None,
    ) -> "Outcome":
        return cls(
            accepted=True,
            message=message,
            shape=shape,
            measurements=dict(measurements or {}),
        )

    @classmethod
    def rejected(cls, reason: Rejection, message: str) -> "Outcome":
        return cls(accepted=False, reason=reason, message=message)

    def __bool__(self) -> bool:
        return self.accepted


@dataclass
class CircleStaging:
    """Circle placement: no buffer, the first click commits."""

    shape_type = ShapeType.CIRCLE


@dataclass
class PolygonStaging:
    points: List[Point] = field(default_factory=list)

    shape_type = ShapeType.POLYGON


@dataclass
class PolylineStaging:
    points: List[Point] = field(default_factory=list)

    shape_type = ShapeType.POLYLINE


StagingBuffer = Union[CircleStaging, PolygonStaging, PolylineStaging]


def new_staging(shape_type: ShapeType) -> StagingBuffer:
    """Empty staging buffer for a shape type."""
    match ShapeType(shape_type):
        case ShapeType.CIRCLE:
            return CircleStaging()
        case ShapeType.POLYGON:
            return PolygonStaging()
        case ShapeType.POLYLINE:
            return PolylineStaging()


@dataclass
class StylePresets:
    """Currently selected presets; read at commit time."""

    circle_radius: float
    circle_color: str
    polygon_fill_color: str
    polygon_stroke_color: str
    polyline_color: str

    @classmethod
    def from_config(cls, config: EngineConfig) -> "StylePresets":
        return cls(
            circle_radius=config.circle_radius.default,
            circle_color=config.circle_color,
            polygon_fill_color=config.polygon_fill_color,
            polygon_stroke_color=config.polygon_stroke_color,
            polyline_color=config.polyline_color,
        )
