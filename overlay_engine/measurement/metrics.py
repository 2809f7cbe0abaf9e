"""
Measurement Module
==================

Stateless derivations of human-facing metrics from committed geometry.

Design:
- All methods are static (no instance state)
- Deterministic, side-effect free
- Never reads authoring state: input is already-committed geometry
- Two length renderings:
    format_length    slider/preset values, shortest form (1.5km, 500m, 2km)
    format_distance  measured values, whole meters or 2-decimal km (5.44 km)
"""

import math
from typing import Dict, Iterable, Sequence

import numpy as np

from overlay_engine.geometry.distance import ring_area, segment_lengths
from overlay_engine.geometry.shapes import Circle, Point, Polygon, Polyline, Shape


def _plain_number(value: float) -> str:
    """Shortest decimal rendering; integral values lose the trailing .0"""
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class MeasurementEngine:
    """
    Area, length and coordinate metrics for map overlays.

    Usage:
        MeasurementEngine.circle_area(1000)                 # 3.14159...
        MeasurementEngine.format_area(3.14159)              # "3.14"
        MeasurementEngine.format_length(1500)               # "1.5km"
        MeasurementEngine.format_distance(5437.74)          # "5.44 km"
        MeasurementEngine.format_coordinate(24.7136)        # "24.713600"
    """

    @staticmethod
    def circle_area(radius_meters: float) -> float:
        """
        Area of a circle in square kilometers (unrounded).

        Strictly increasing in radius for radius > 0.
        """
        return math.pi * (radius_meters / 1000) ** 2

    @staticmethod
    def total_area(circles: Iterable[Circle]) -> float:
        """
        Sum of the displayed circle areas in km².

        Each area is rounded to 2 decimals before summing, so the total
        matches the per-circle figures shown next to it. Overlapping
        circles are summed as if disjoint (no geometric union).
        """
        radii = np.array([c.radius for c in circles], dtype=float)
        if radii.size == 0:
            return 0.0
        return float(np.sum(np.round(np.pi * (radii / 1000) ** 2, 2)))

    @staticmethod
    def format_area(km2: float) -> str:
        """Area for display, fixed to 2 decimals."""
        return f"{km2:.2f}"

    @staticmethod
    def format_length(meters: float) -> str:
        """
        Length for display.

        Returns:
            "{m}m" below 1000 meters, "{m/1000}km" otherwise
        """
        if meters < 1000:
            return f"{_plain_number(meters)}m"
        return f"{_plain_number(meters / 1000)}km"

    @staticmethod
    def format_distance(meters: float) -> str:
        """
        Measured distance (radius, perimeter, path length) for display.

        Returns:
            "{m} m" rounded to whole meters below 1000 meters,
            "{km:.2f} km" otherwise
        """
        if meters < 1000:
            return f"{_round_half_up(meters)} m"
        return f"{meters / 1000:.2f} km"

    @staticmethod
    def format_square_meters(m2: float) -> str:
        """
        Polygon area for display: m² below one hectare, hectares below
        one km², km² above.
        """
        if m2 < 10_000:
            return f"{_round_half_up(m2)} m²"
        if m2 < 1_000_000:
            return f"{m2 / 10_000:.2f} ha"
        return f"{m2 / 1_000_000:.2f} km²"

    @staticmethod
    def format_coordinate(value: float) -> str:
        """Coordinate fixed to 6 decimals."""
        return f"{value:.6f}"

    @staticmethod
    def format_point(point: Point) -> str:
        return (
            f"{MeasurementEngine.format_coordinate(point.lat)}, "
            f"{MeasurementEngine.format_coordinate(point.lng)}"
        )

    @staticmethod
    def path_length(points: Sequence[Point]) -> float:
        """Length of an open path in meters."""
        return float(np.sum(segment_lengths(points)))

    @staticmethod
    def perimeter(points: Sequence[Point]) -> float:
        """Length of a closed ring in meters (last point joins the first)."""
        return float(np.sum(segment_lengths(points, closed=True)))

    @staticmethod
    def polygon_area(points: Sequence[Point]) -> float:
        """Enclosed area of a ring in square meters (0.0 for < 3 points)."""
        return ring_area(points)

    @staticmethod
    def measure(shape: Shape) -> Dict[str, str]:
        """
        Display strings for a committed shape.

        Returns:
            circle:   radius, area (km²), center
            polygon:  points, perimeter, area
            polyline: points, length
        """
        match shape:
            case Circle(center=center, radius=radius):
                return {
                    "radius": MeasurementEngine.format_length(radius),
                    "area": MeasurementEngine.format_area(MeasurementEngine.circle_area(radius)),
                    "center": MeasurementEngine.format_point(center),
                }
            case Polygon(paths=paths):
                return {
                    "points": str(len(paths)),
                    "perimeter": MeasurementEngine.format_distance(MeasurementEngine.perimeter(paths)),
                    "area": MeasurementEngine.format_square_meters(MeasurementEngine.polygon_area(paths)),
                }
            case Polyline(path=path):
                return {
                    "points": str(len(path)),
                    "length": MeasurementEngine.format_distance(MeasurementEngine.path_length(path)),
                }
            case _:
                raise TypeError(f"Cannot measure {type(shape).__name__}")
