"""
Editor command bindings.

Maps the discrete actions of the builder controls onto a GeometryEditor.
Handlers accept the (optional) command payload; payload keys:

    start            {"shape_type": "circle" | "polygon" | "polyline"}
    add_point        {"lat": float, "lng": float}
    clear            {"shape_type": ...}
    select           {"id": str}
    drag_center      {"lat": float, "lng": float}
    drag_edge        {"lat": float, "lng": float}
    set_radius       {"radius": float}
    set_color        {"color": "#rrggbb", "shape_type": ... (default circle)}
"""

from typing import Any, Dict, Optional

from overlay_engine import GeometryEditor, MeasurementEngine, Outcome, Point, ShapeType

from .registry import CommandRegistry


def _require(command_data: Optional[Dict[str, Any]], *keys: str) -> Dict[str, Any]:
    if command_data is None:
        raise ValueError(f"Missing payload, expected keys: {', '.join(keys)}")
    missing = [key for key in keys if key not in command_data]
    if missing:
        raise ValueError(f"Missing payload keys: {', '.join(missing)}")
    return command_data


class EditorCommandHandlers:
    """Payload-level adapters around GeometryEditor."""

    def __init__(self, editor: GeometryEditor):
        self.editor = editor

    def start(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        data = _require(command_data, "shape_type")
        return self.editor.start_authoring(ShapeType(data["shape_type"]))

    def add_point(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        return self.editor.on_map_click(_require(command_data, "lat", "lng"))

    def finish(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        return self.editor.finish()

    def cancel(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        return self.editor.cancel()

    def clear(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        data = _require(command_data, "shape_type")
        return self.editor.clear_all(ShapeType(data["shape_type"]))

    def select(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        data = _require(command_data, "id")
        return self.editor.select(str(data["id"]))

    def deselect(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        return self.editor.clear_selection()

    def toggle_edit(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        return self.editor.toggle_editing()

    def drag_center(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        return self.editor.drag_center(Point.from_dict(_require(command_data, "lat", "lng")))

    def drag_edge(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        return self.editor.drag_edge(Point.from_dict(_require(command_data, "lat", "lng")))

    def set_radius(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        data = _require(command_data, "radius")
        return self.editor.set_radius(float(data["radius"]))

    def set_color(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        data = _require(command_data, "color")
        shape_type = ShapeType(data.get("shape_type", ShapeType.CIRCLE.value))
        return self.editor.set_color(data["color"], shape_type)

    def start_animation(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        return self.editor.animator.start()

    def tick(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        point = self.editor.animator.tick()
        measurements = {}
        if point is not None:
            measurements["point"] = MeasurementEngine.format_point(point)
        return Outcome.ok(
            message=f"Progress: {self.editor.animator.progress}",
            measurements=measurements,
        )

    def reset_animation(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        self.editor.animator.reset()
        return Outcome.ok(message=f"Progress: {self.editor.animator.progress}")

    def reset(self, command_data: Optional[Dict[str, Any]] = None) -> Outcome:
        self.editor.reset()
        return Outcome.ok()


def register_editor_commands(
    registry: CommandRegistry,
    editor: GeometryEditor,
) -> EditorCommandHandlers:
    """
    Register every builder action of `editor` on `registry`.

    Returns:
        The handler object (kept alive by the registry anyway)
    """
    handlers = EditorCommandHandlers(editor)

    registry.register('start', handlers.start, "Start authoring a shape type (restarts the buffer)")
    registry.register('add_point', handlers.add_point, "Route a map click position")
    registry.register('finish', handlers.finish, "Commit the polygon/path being built")
    registry.register('cancel', handlers.cancel, "Discard the shape being built")
    registry.register('clear', handlers.clear, "Remove every committed shape of a type")
    registry.register('select', handlers.select, "Highlight a shape or zone by id")
    registry.register('deselect', handlers.deselect, "Clear the selection")
    registry.register('toggle_edit', handlers.toggle_edit, "Toggle editable circle dragging")
    registry.register('drag_center', handlers.drag_center, "Move the editable circle")
    registry.register('drag_edge', handlers.drag_edge, "Resize the editable circle from its edge")
    registry.register('set_radius', handlers.set_radius, "Radius of the next circle (meters)")
    registry.register('set_color', handlers.set_color, "Palette color of the next shape")
    registry.register('start_animation', handlers.start_animation, "Start the path animation")
    registry.register('tick', handlers.tick, "Advance the path animation by one point")
    registry.register('reset_animation', handlers.reset_animation, "Clear the path animation")
    registry.register('reset', handlers.reset, "Restore the configured initial state")

    return handlers
