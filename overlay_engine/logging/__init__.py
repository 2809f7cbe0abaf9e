"""
Structured Logging for the Overlay Engine
=========================================

JSON lines for authoring, selection, editing and command events, one
logger per engine component under the "overlay_engine." namespace.

    LogEvent                  typed event names
    *_EVENTS                  category sets for filtering
    StructuredLogger          component-bound JSON logger
    create_logger             factory used by every component

Example:
    >>> from overlay_engine.logging import create_logger, LogEvent
    >>> logger = create_logger("selection")
    >>> logger.info(
    ...     event=LogEvent.SELECTION_CHANGED,
    ...     message="Selected wifi-1",
    ...     metadata={'selected_id': 'wifi-1'}
    ... )
"""

from .events import (
    AUTHORING_EVENTS,
    CIRCLE_EVENTS,
    COMMAND_EVENTS,
    LogEvent,
    SELECTION_EVENTS,
    SHAPE_EVENTS,
)
from .structured import JSONFormatter, StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'AUTHORING_EVENTS',
    'SHAPE_EVENTS',
    'SELECTION_EVENTS',
    'CIRCLE_EVENTS',
    'COMMAND_EVENTS',
    'JSONFormatter',
    'StructuredLogger',
    'create_logger',
]
