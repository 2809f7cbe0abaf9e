"""
Geometric Shapes Module
=======================

Map overlay geometry - immutable value objects.

Design:
- Frozen dataclasses, validated in __post_init__ (fail fast)
- Coordinates are latitude/longitude degrees; only finiteness is checked
- Serialization: to_dict() / from_dict() for JSON export
- EditableCircle is the single mutable shape (drag target)
"""

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union


def is_real_number(value: Any) -> bool:
    """Real scalar (int, float, numpy scalars), never a bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class ShapeType(str, Enum):
    """Kinds of authored overlays."""

    CIRCLE = "circle"
    POLYGON = "polygon"
    POLYLINE = "polyline"


@dataclass(frozen=True)
class Point:
    """
    Immutable latitude/longitude pair.

    Out-of-range degrees (e.g. lat=120) are accepted; only NaN and
    infinities are rejected.

    Example:
        >>> Point(lat=24.7136, lng=46.6753).to_dict()
        {'lat': 24.7136, 'lng': 46.6753}
    """

    lat: float
    lng: float

    def __post_init__(self):
        for name in ("lat", "lng"):
            value = getattr(self, name)
            if not is_real_number(value):
                raise TypeError(f"Point.{name} must be a number, got {type(value).__name__}")
            if not math.isfinite(value):
                raise ValueError(f"Point.{name} must be finite, got {value}")

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        """
        Deserialize from a {lat, lng} mapping.

        Raises:
            ValueError: If keys are missing or values are not numeric
        """
        try:
            return cls(lat=float(data["lat"]), lng=float(data["lng"]))
        except KeyError as e:
            raise ValueError(f"Missing required Point field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Point data: {e}")


def _as_path(points, owner: str) -> Tuple[Point, ...]:
    path = tuple(points)
    for point in path:
        if not isinstance(point, Point):
            raise TypeError(f"{owner} path entries must be Point, got {type(point).__name__}")
    return path


@dataclass(frozen=True)
class Circle:
    """
    Immutable circle overlay.

    Attributes:
        id: Caller-supplied identifier
        center: Circle center
        radius: Radius in meters (> 0)
        color: Hex color string
    """

    id: str
    center: Point
    radius: float
    color: str

    shape_type = ShapeType.CIRCLE

    def __post_init__(self):
        if not self.id:
            raise ValueError("Circle id cannot be empty")
        if not isinstance(self.center, Point):
            raise TypeError(f"Circle center must be Point, got {type(self.center).__name__}")
        if not math.isfinite(self.radius) or self.radius <= 0:
            raise ValueError(f"Circle radius must be > 0, got {self.radius}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "center": self.center.to_dict(),
            "radius": self.radius,
            "color": self.color,
        }


@dataclass(frozen=True)
class CoverageArea(Circle):
    """
    Display-only circle with descriptive metadata.

    Selectable for highlighting, never produced by authoring.
    """

    name: str = ""
    description: str = ""
    category: str = ""
    icon: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "icon": self.icon,
        })
        return data


@dataclass(frozen=True)
class Polygon:
    """
    Immutable polygon overlay.

    Attributes:
        id: Caller-supplied identifier
        paths: Outer ring, >= 3 points, insertion order significant
        fill_color: Hex fill color
        stroke_color: Hex stroke color
        holes: Inner rings; opposite winding is the caller's responsibility
    """

    id: str
    paths: Tuple[Point, ...]
    fill_color: str
    stroke_color: str
    holes: Tuple[Tuple[Point, ...], ...] = ()

    shape_type = ShapeType.POLYGON

    def __post_init__(self):
        if not self.id:
            raise ValueError("Polygon id cannot be empty")
        paths = _as_path(self.paths, "Polygon")
        if len(paths) < 3:
            raise ValueError(f"Polygon must have at least 3 points, got {len(paths)}")
        holes = tuple(_as_path(ring, "Polygon hole") for ring in self.holes)
        object.__setattr__(self, "paths", paths)
        object.__setattr__(self, "holes", holes)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "paths": [p.to_dict() for p in self.paths],
            "fill_color": self.fill_color,
            "stroke_color": self.stroke_color,
        }
        if self.holes:
            data["holes"] = [[p.to_dict() for p in ring] for ring in self.holes]
        return data


@dataclass(frozen=True)
class Zone(Polygon):
    """Named, selectable polygon (display-only, like CoverageArea)."""

    name: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({"name": self.name, "description": self.description})
        return data


@dataclass(frozen=True)
class Polyline:
    """
    Immutable polyline overlay.

    A stored polyline has at least one point; it only draws a visible
    segment once it has two (see is_complete).
    """

    id: str
    path: Tuple[Point, ...]
    color: str

    shape_type = ShapeType.POLYLINE

    def __post_init__(self):
        if not self.id:
            raise ValueError("Polyline id cannot be empty")
        path = _as_path(self.path, "Polyline")
        if len(path) < 1:
            raise ValueError("Polyline must have at least 1 point")
        object.__setattr__(self, "path", path)

    @property
    def is_complete(self) -> bool:
        return len(self.path) >= 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "path": [p.to_dict() for p in self.path],
            "color": self.color,
        }


Shape = Union[Circle, Polygon, Polyline]


@dataclass
class EditableCircle:
    """
    The single mutable circle of the editing example.

    Mutated only through CircleEditor (drag-move, drag-resize).
    Radius is kept > 0 by the editor; construction validates it too.
    """

    center: Point
    radius: float

    def __post_init__(self):
        if not math.isfinite(self.radius) or self.radius <= 0:
            raise ValueError(f"EditableCircle radius must be > 0, got {self.radius}")

    def to_dict(self) -> Dict[str, Any]:
        return {"center": self.center.to_dict(), "radius": self.radius}
