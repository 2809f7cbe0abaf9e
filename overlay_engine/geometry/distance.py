"""
Spherical Distance Module
=========================

Haversine distances between map points and areas of closed rings.

Design:
- Pure functions (no state)
- numpy vectorised for paths (one pass over all segments)
- Spherical Earth; accurate enough for on-screen measurement, not surveying
"""

import numpy as np
from typing import Sequence

from overlay_engine.geometry.shapes import Point

EARTH_RADIUS_METERS = 6371000.0


def _as_radians(points: Sequence[Point]) -> np.ndarray:
    """Nx2 array of (lat, lng) in radians."""
    return np.radians(np.array([[p.lat, p.lng] for p in points], dtype=float))


def haversine_distance(a: Point, b: Point) -> float:
    """
    Great-circle distance between two points.

    Returns:
        Distance in meters (0.0 for identical points)
    """
    lat1, lng1 = np.radians(a.lat), np.radians(a.lng)
    lat2, lng2 = np.radians(b.lat), np.radians(b.lng)

    dlat = lat2 - lat1
    dlng = lng2 - lng1

    h = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlng / 2) ** 2
    c = 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))
    return float(EARTH_RADIUS_METERS * c)


def segment_lengths(points: Sequence[Point], closed: bool = False) -> np.ndarray:
    """
    Length of every consecutive segment of a path.

    Args:
        points: Ordered path
        closed: Also include the closing segment (last -> first)

    Returns:
        Array of segment lengths in meters (empty for < 2 points)
    """
    if len(points) < 2:
        return np.array([], dtype=float)

    coords = _as_radians(points)
    if closed:
        coords = np.vstack([coords, coords[:1]])

    lat1, lng1 = coords[:-1, 0], coords[:-1, 1]
    lat2, lng2 = coords[1:, 0], coords[1:, 1]

    h = np.sin((lat2 - lat1) / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin((lng2 - lng1) / 2) ** 2
    c = 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))
    return EARTH_RADIUS_METERS * c


def ring_area(points: Sequence[Point]) -> float:
    """
    Area enclosed by a closed ring on the sphere.

    Sums (lng2 - lng1) * (2 + sin(lat1) + sin(lat2)) over every edge,
    closing edge included, then scales by R^2 / 2. Exact for rings whose
    edges follow parallels and meridians, approximate otherwise.

    Returns:
        Area in square meters, independent of winding (0.0 for < 3 points)
    """
    if len(points) < 3:
        return 0.0

    coords = _as_radians(points)
    lat, lng = coords[:, 0], coords[:, 1]
    lat_next, lng_next = np.roll(lat, -1), np.roll(lng, -1)

    total = np.sum((lng_next - lng) * (2 + np.sin(lat) + np.sin(lat_next)))
    return float(abs(total) * EARTH_RADIUS_METERS ** 2 / 2)
