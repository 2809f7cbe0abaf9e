"""
Authoring Layer
===============

Bounded Context: Interactive creation and editing of overlays (stateful).

- staging.py        EditorMode, Outcome/Rejection, staging tagged union
- controller.py     ModeController (Idle / Placing / Collecting)
- circle_editor.py  CircleEditor (EditableCircle drag sub-machine)
"""

from overlay_engine.authoring.staging import (
    EditorMode,
    Rejection,
    Outcome,
    CircleStaging,
    PolygonStaging,
    PolylineStaging,
    StagingBuffer,
    StylePresets,
)
from overlay_engine.authoring.controller import ModeController
from overlay_engine.authoring.circle_editor import CircleEditor

__all__ = [
    "EditorMode",
    "Rejection",
    "Outcome",
    "CircleStaging",
    "PolygonStaging",
    "PolylineStaging",
    "StagingBuffer",
    "StylePresets",
    "ModeController",
    "CircleEditor",
]
