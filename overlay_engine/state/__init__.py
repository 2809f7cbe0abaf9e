"""
State Layer
===========

Bounded Context: Committed shapes and the active selection (stateful).

- store.py      ShapeStore (ordered collections per shape type)
- selection.py  SelectionRegistry (single active id, stale-safe)
"""

from overlay_engine.state.store import ShapeStore
from overlay_engine.state.selection import SelectionRegistry

__all__ = [
    "ShapeStore",
    "SelectionRegistry",
]
