"""
Shape Store - authoritative collection of committed overlays.

Keeps one insertion-ordered collection per ShapeType. Insertion order is
the display numbering ("Circle 1", "Circle 2", ...).

Semantics:
- add() with an id already present (in any collection) overwrites it
- No limit on shape count
- Process-lifetime only (no persistence)

Threading:
- Not synchronized; the engine runs on a single-consumer event loop
"""

from typing import Dict, Iterator, Optional, Tuple

from overlay_engine.geometry.shapes import Shape, ShapeType


class ShapeStore:
    """
    Ordered shape collections keyed by id.

    Usage:
        store = ShapeStore()
        store.add(Circle(id="c1", center=Point(24.7, 46.6), radius=500, color="#007bff"))
        store.list(ShapeType.CIRCLE)   # (Circle(...),)
        store.get("c1")                # Circle(...)
        store.remove_all(ShapeType.CIRCLE)
    """

    def __init__(self):
        self._collections: Dict[ShapeType, Dict[str, Shape]] = {
            shape_type: {} for shape_type in ShapeType
        }

    def add(self, shape: Shape) -> None:
        """
        Add (or overwrite) a shape.

        An id reused across types moves the shape to its new collection.
        """
        shape_type = ShapeType(shape.shape_type)
        for other_type, collection in self._collections.items():
            if other_type is not shape_type:
                collection.pop(shape.id, None)
        self._collections[shape_type][shape.id] = shape

    def remove_all(self, shape_type: ShapeType) -> int:
        """
        Empty the collection for one shape type.

        Returns:
            Number of shapes removed
        """
        collection = self._collections[ShapeType(shape_type)]
        removed = len(collection)
        collection.clear()
        return removed

    def list(self, shape_type: ShapeType) -> Tuple[Shape, ...]:
        """Snapshot of one collection in insertion order."""
        return tuple(self._collections[ShapeType(shape_type)].values())

    def get(self, shape_id: str) -> Optional[Shape]:
        for collection in self._collections.values():
            if shape_id in collection:
                return collection[shape_id]
        return None

    def count(self, shape_type: ShapeType) -> int:
        return len(self._collections[ShapeType(shape_type)])

    def clear(self) -> None:
        """Empty every collection."""
        for collection in self._collections.values():
            collection.clear()

    def __contains__(self, shape_id: object) -> bool:
        return any(shape_id in collection for collection in self._collections.values())

    def __len__(self) -> int:
        return sum(len(collection) for collection in self._collections.values())

    def __iter__(self) -> Iterator[Shape]:
        for collection in self._collections.values():
            yield from collection.values()

    def __repr__(self) -> str:
        counts = ", ".join(f"{t.value}={len(c)}" for t, c in self._collections.items())
        return f"ShapeStore({counts})"
