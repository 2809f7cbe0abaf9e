"""
Measurement Layer
=================

Bounded Context: Derived metrics (area, length, coordinates).

Pure functions only; consumed by the authoring commit step and by
display layers.
"""

from overlay_engine.measurement.metrics import MeasurementEngine

__all__ = [
    "MeasurementEngine",
]
