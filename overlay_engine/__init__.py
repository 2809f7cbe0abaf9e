"""
Overlay Engine v1.0
===================

Bounded Context: Interactive authoring of map overlays (circles, polygons,
polylines) for the map component guide.

Design Philosophy:
- Separation of Concerns: Geometry, Measurement, State, Authoring separated
- UI-agnostic: the host routes clicks/drags in and renders view() out
- Rejected transitions are values (Outcome), never crashes
- Configuration passed explicitly, never global

Architecture:

    overlay_engine/
    ├── geometry/          # Pure geometry (immutable value objects)
    │   ├── shapes.py      # Point, Circle, Polygon, Polyline, Zone, ...
    │   └── distance.py    # Haversine distances
    │
    ├── measurement/       # Derived metrics (stateless)
    │   └── metrics.py     # MeasurementEngine
    │
    ├── state/             # Committed shapes & selection (stateful)
    │   ├── store.py       # ShapeStore
    │   └── selection.py   # SelectionRegistry
    │
    ├── authoring/         # State machines (stateful)
    │   ├── staging.py     # EditorMode, Outcome, staging tagged union
    │   ├── controller.py  # ModeController
    │   └── circle_editor.py  # CircleEditor
    │
    ├── animation.py       # PathAnimator
    ├── config.py          # EngineConfig (YAML)
    └── editor.py          # GeometryEditor (orchestration)

Usage:

    from overlay_engine import GeometryEditor, ShapeType, Point

    editor = GeometryEditor()
    editor.start_authoring(ShapeType.POLYGON)
    for lat, lng in [(24.72, 46.67), (24.73, 46.67), (24.73, 46.69)]:
        editor.add_point(Point(lat, lng))
    outcome = editor.finish()
    outcome.measurements      # {"points": "3", "perimeter": "5.44 km", "area": "1.12 km²"}
"""

# Geometry Layer (immutable)
from overlay_engine.geometry import (
    ShapeType,
    Point,
    Circle,
    CoverageArea,
    Polygon,
    Zone,
    Polyline,
    EditableCircle,
)

# Measurement Layer (stateless)
from overlay_engine.measurement import MeasurementEngine

# State Layer (stateful)
from overlay_engine.state import ShapeStore, SelectionRegistry

# Authoring Layer (state machines)
from overlay_engine.authoring import (
    EditorMode,
    Rejection,
    Outcome,
    ModeController,
    CircleEditor,
)

# Configuration & orchestration
from overlay_engine.config import EngineConfig
from overlay_engine.animation import PathAnimator
from overlay_engine.editor import GeometryEditor, EditorView

__all__ = [
    # Geometry
    "ShapeType",
    "Point",
    "Circle",
    "CoverageArea",
    "Polygon",
    "Zone",
    "Polyline",
    "EditableCircle",
    # Measurement
    "MeasurementEngine",
    # State
    "ShapeStore",
    "SelectionRegistry",
    # Authoring
    "EditorMode",
    "Rejection",
    "Outcome",
    "ModeController",
    "CircleEditor",
    # Orchestration
    "EngineConfig",
    "PathAnimator",
    "GeometryEditor",
    "EditorView",
]

__version__ = "1.0.0"
