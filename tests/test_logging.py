"""Tests for the structured JSON logger."""
from __future__ import annotations

import json
import logging

from overlay_engine import Point, ShapeType
from overlay_engine.logging import SELECTION_EVENTS, LogEvent, StructuredLogger

LOGGER_NAME = "overlay_engine.tests.structured"


def _entries(caplog):
    return [json.loads(r.getMessage()) for r in caplog.records if r.name == LOGGER_NAME]


class TestStructuredLogger:
    def test_entry_shape(self, caplog):
        logger = StructuredLogger("authoring", logger_name=LOGGER_NAME)
        logger.info(
            event=LogEvent.SHAPE_COMMITTED,
            message="Committed polygon",
            metadata={"shape_id": "polygon-1"},
        )

        entry = _entries(caplog)[-1]
        assert entry["level"] == "INFO"
        assert entry["component"] == "authoring"
        assert entry["event"] == "shape.committed"
        assert entry["metadata"] == {"shape_id": "polygon-1"}
        assert "timestamp" in entry

    def test_debug_filtered_at_info(self, caplog):
        logger = StructuredLogger("authoring", logger_name=LOGGER_NAME)
        logger.debug(event=LogEvent.AUTHORING_POINT_ADDED, message="1 points added")
        assert _entries(caplog) == []

    def test_set_level(self, caplog):
        logger = StructuredLogger("authoring", logger_name=LOGGER_NAME)
        logger.set_level(logging.DEBUG)
        logger.debug(event=LogEvent.AUTHORING_POINT_ADDED, message="1 points added")
        assert _entries(caplog)[-1]["level"] == "DEBUG"

    def test_error_carries_exception(self, caplog):
        logger = StructuredLogger("control", logger_name=LOGGER_NAME)
        logger.error(
            event=LogEvent.COMMAND_REJECTED,
            message="Error decoding payload",
            exc_info=ValueError("bad json"),
        )
        entry = _entries(caplog)[-1]
        assert entry["exception"] == {"type": "ValueError", "message": "bad json"}

    def test_metadata_made_json_safe(self, caplog):
        logger = StructuredLogger("authoring", logger_name=LOGGER_NAME)
        logger.info(
            event=LogEvent.AUTHORING_POINT_ADDED,
            message="1 points added",
            metadata={"shape_type": ShapeType.POLYGON, "points": (Point(24.7, 46.6),)},
        )
        assert _entries(caplog)[-1]["metadata"] == {
            "shape_type": "polygon",
            "points": [{"lat": 24.7, "lng": 46.6}],
        }

    def test_non_serializable_metadata(self, caplog):
        logger = StructuredLogger("authoring", logger_name=LOGGER_NAME)
        logger.warning(
            event=LogEvent.PRESET_REJECTED,
            message="Invalid radius",
            metadata={"requested": object()},
        )
        assert _entries(caplog)[-1]["metadata"]["requested"].startswith("<object")


class TestEventTaxonomy:
    def test_dotted_names(self):
        for event in LogEvent:
            component, _, action = event.value.partition(".")
            assert component and action

    def test_categories(self):
        assert LogEvent.SELECTION_STALE in SELECTION_EVENTS
