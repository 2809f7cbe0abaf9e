"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for the geometry editing engine.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (component.action)
- Searchable in log aggregators

Event Naming Convention:
    <component>.<action>

    component: authoring, shape, selection, circle, editing, animation,
               config, command
    action: started, committed, rejected, changed, ...
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - authoring.*: ModeController lifecycle
    - shape.*: ShapeStore mutations
    - selection.*: SelectionRegistry changes
    - circle.* / editing.*: EditableCircle sub-machine
    - animation.*: PathAnimator playback
    - config.* / command.*: ambient infrastructure
    """

    # ========== Authoring Events ==========
    AUTHORING_STARTED = "authoring.started"
    """A new authoring session began (buffer reset)."""

    AUTHORING_POINT_ADDED = "authoring.point_added"
    """A point was appended to the staging buffer."""

    AUTHORING_POINT_IGNORED = "authoring.point_ignored"
    """A point arrived while no session was active."""

    AUTHORING_CANCELLED = "authoring.cancelled"
    """Staging buffer discarded without commit."""

    PRESET_CHANGED = "authoring.preset_changed"
    """Radius or color preset updated."""

    PRESET_REJECTED = "authoring.preset_rejected"
    """Radius or color preset request rejected or clamped."""

    # ========== Shape Events ==========
    SHAPE_COMMITTED = "shape.committed"
    """A finalized shape was pushed into the store."""

    SHAPE_COMMIT_REJECTED = "shape.commit_rejected"
    """finish() refused (insufficient points, wrong mode)."""

    SHAPE_CLEARED = "shape.cleared"
    """All shapes of one type removed."""

    # ========== Selection Events ==========
    SELECTION_CHANGED = "selection.changed"
    """A shape or zone became the active selection."""

    SELECTION_CLEARED = "selection.cleared"
    """Selection reset to none."""

    SELECTION_STALE = "selection.stale"
    """Selected id no longer present in the store."""

    # ========== Editable Circle Events ==========
    EDITING_TOGGLED = "editing.toggled"
    """Editability flag of the editable circle flipped."""

    CIRCLE_MOVED = "circle.moved"
    """Editable circle center dragged."""

    CIRCLE_RESIZED = "circle.resized"
    """Editable circle radius changed."""

    CIRCLE_REJECTED = "circle.rejected"
    """Editable circle update refused."""

    # ========== Animation Events ==========
    ANIMATION_STARTED = "animation.started"
    """Path playback started."""

    ANIMATION_FINISHED = "animation.finished"
    """Every point of the path has been revealed."""

    ANIMATION_RESET = "animation.reset"
    """Path playback cleared."""

    # ========== Infrastructure Events ==========
    CONFIG_LOADED = "config.loaded"
    """Engine configuration loaded."""

    EDITOR_RESET = "editor.reset"
    """Whole editor restored to its initial state."""

    COMMAND_EXECUTED = "command.executed"
    """Named UI action dispatched."""

    COMMAND_UNAVAILABLE = "command.unavailable"
    """Unknown UI action requested."""

    COMMAND_REJECTED = "command.rejected"
    """Payload malformed, undecodable or carrying invalid values."""


# Event categories for filtering
AUTHORING_EVENTS = {
    LogEvent.AUTHORING_STARTED,
    LogEvent.AUTHORING_POINT_ADDED,
    LogEvent.AUTHORING_POINT_IGNORED,
    LogEvent.AUTHORING_CANCELLED,
    LogEvent.PRESET_CHANGED,
    LogEvent.PRESET_REJECTED,
}

SHAPE_EVENTS = {
    LogEvent.SHAPE_COMMITTED,
    LogEvent.SHAPE_COMMIT_REJECTED,
    LogEvent.SHAPE_CLEARED,
}

SELECTION_EVENTS = {
    LogEvent.SELECTION_CHANGED,
    LogEvent.SELECTION_CLEARED,
    LogEvent.SELECTION_STALE,
}

CIRCLE_EVENTS = {
    LogEvent.EDITING_TOGGLED,
    LogEvent.CIRCLE_MOVED,
    LogEvent.CIRCLE_RESIZED,
    LogEvent.CIRCLE_REJECTED,
}

COMMAND_EVENTS = {
    LogEvent.COMMAND_EXECUTED,
    LogEvent.COMMAND_UNAVAILABLE,
    LogEvent.COMMAND_REJECTED,
}
