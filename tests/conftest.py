"""Shared fixtures for the overlay engine tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from overlay_engine import EngineConfig, GeometryEditor, Point, ShapeStore
from overlay_engine.authoring import ModeController

PRESETS_YAML = Path(__file__).resolve().parent.parent / "config" / "guide_presets.yaml"


@pytest.fixture
def presets_yaml() -> Path:
    return PRESETS_YAML


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig.default()


@pytest.fixture
def store() -> ShapeStore:
    return ShapeStore()


@pytest.fixture
def controller(store, config) -> ModeController:
    return ModeController(store, config)


@pytest.fixture
def editor(config) -> GeometryEditor:
    return GeometryEditor(config)


@pytest.fixture
def triangle() -> list[Point]:
    return [Point(24.72, 46.67), Point(24.73, 46.67), Point(24.73, 46.69)]
