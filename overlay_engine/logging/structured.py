"""
Structured JSON Logger
======================

Bounded Context: Observability of the editing engine

Every engine component (authoring, selection, circle_editor, animation,
editor, control) owns one StructuredLogger and reports its transitions as
typed LogEvents rendered to one JSON object per line.

Design:
- Level check first: per-point DEBUG chatter costs nothing when filtered
- Metadata is made JSON-safe before rendering (enums by value, shapes
  and points via to_dict, anything else via str)
- Loggers live under the "overlay_engine." namespace so hosts can route
  or silence the whole engine at once

Example:
    >>> logger = StructuredLogger(component="authoring")
    >>> logger.info(
    ...     event=LogEvent.SHAPE_COMMITTED,
    ...     message="Committed polygon polygon-1",
    ...     metadata={'shape_id': 'polygon-1', 'shape_type': ShapeType.POLYGON}
    ... )

Output:
    {"timestamp": "2025-10-24T15:30:45.123456+00:00", "level": "INFO",
     "component": "authoring", "event": "shape.committed",
     "message": "Committed polygon polygon-1",
     "metadata": {"shape_id": "polygon-1", "shape_type": "polygon"}}
"""

import json
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from .events import LogEvent

LOGGER_NAMESPACE = "overlay_engine"


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(v) for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class StructuredLogger:
    """
    Component-bound JSON logger.

    Attributes:
        component: Engine component name ("authoring", "selection", ...)
        logger: Underlying stdlib logger (overlay_engine.<component>)
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        self.component = component
        self.logger_name = logger_name or f"{LOGGER_NAMESPACE}.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _emit(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return

        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': LogEvent(event).value,
            'message': message,
        }
        if metadata:
            entry['metadata'] = _jsonable(metadata)
        if exc_info is not None:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info),
            }

        self.logger.log(
            level,
            json.dumps(entry, default=str),
            exc_info=exc_info if level >= logging.ERROR else None,
        )

    def debug(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """Per-point and per-drag events."""
        self._emit(logging.DEBUG, event, message, metadata)

    def info(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """Session lifecycle: started, committed, cleared, selected."""
        self._emit(logging.INFO, event, message, metadata)

    def warning(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """
        Rejected transitions.

        They are recoverable and reach the user as instructional text, so
        they never log at ERROR.
        """
        self._emit(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """Host input that could not be decoded at all."""
        self._emit(logging.ERROR, event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def __repr__(self) -> str:
        return (
            f"StructuredLogger(component={self.component!r}, "
            f"level={logging.getLevelName(self.logger.level)})"
        )


class JSONFormatter(logging.Formatter):
    """Emits the pre-rendered JSON line unchanged."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(component: str, level: int = logging.INFO) -> StructuredLogger:
    """
    Logger for one engine component.

    Example:
        >>> logger = create_logger("selection", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
