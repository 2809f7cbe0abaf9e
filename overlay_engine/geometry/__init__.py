"""
Geometry Layer
==============

Bounded Context: Map overlay shapes and spherical distances.

Responsibilities:
- Shape representation (immutable value objects)
- Haversine distances along paths
- NO authoring state, NO selection, NO formatting
"""

from overlay_engine.geometry.shapes import (
    ShapeType,
    Point,
    Circle,
    CoverageArea,
    Polygon,
    Zone,
    Polyline,
    Shape,
    EditableCircle,
)
from overlay_engine.geometry.distance import (
    EARTH_RADIUS_METERS,
    haversine_distance,
    ring_area,
    segment_lengths,
)

__all__ = [
    "ShapeType",
    "Point",
    "Circle",
    "CoverageArea",
    "Polygon",
    "Zone",
    "Polyline",
    "Shape",
    "EditableCircle",
    "EARTH_RADIUS_METERS",
    "haversine_distance",
    "ring_area",
    "segment_lengths",
]
