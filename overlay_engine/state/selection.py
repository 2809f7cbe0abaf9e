"""
Selection Registry
==================

Tracks the single active shape or zone for highlighting and detail display.

Semantics:
- select(id) always sets the id; re-selecting the active id keeps it
  selected (no toggle)
- resolve() never raises: an id missing from the store reads as no
  selection
"""

from typing import Optional

from overlay_engine.geometry.shapes import Shape
from overlay_engine.logging import LogEvent, StructuredLogger, create_logger
from overlay_engine.state.store import ShapeStore


class SelectionRegistry:
    """
    Holds `selected_id`, resolved lazily against a ShapeStore.

    Usage:
        selection = SelectionRegistry()
        selection.select("wifi-1")
        shape = selection.resolve(store)   # None if "wifi-1" is gone
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._selected_id: Optional[str] = None
        self._logger = logger or create_logger("selection")

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def select(self, shape_id: str) -> None:
        self._selected_id = shape_id
        self._logger.info(
            event=LogEvent.SELECTION_CHANGED,
            message=f"Selected {shape_id}",
            metadata={'selected_id': shape_id},
        )

    def clear(self) -> None:
        if self._selected_id is not None:
            self._logger.info(
                event=LogEvent.SELECTION_CLEARED,
                message="Selection cleared",
                metadata={'previous_id': self._selected_id},
            )
        self._selected_id = None

    def is_selected(self, shape_id: str) -> bool:
        return self._selected_id is not None and self._selected_id == shape_id

    def resolve(self, store: ShapeStore) -> Optional[Shape]:
        """
        Look up the selected shape.

        Returns:
            The shape, or None when nothing is selected or the id is stale
        """
        if self._selected_id is None:
            return None

        shape = store.get(self._selected_id)
        if shape is None:
            self._logger.debug(
                event=LogEvent.SELECTION_STALE,
                message=f"Selected id {self._selected_id} not in store",
                metadata={'selected_id': self._selected_id},
            )
        return shape

    def __repr__(self) -> str:
        return f"SelectionRegistry(selected_id={self._selected_id!r})"
