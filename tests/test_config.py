"""Tests for EngineConfig defaults, validation and YAML loading."""
from __future__ import annotations

import logging

import pytest

from overlay_engine import EngineConfig
from overlay_engine.config import PaletteColor, RadiusRange, normalize_hex


class TestNormalizeHex:
    def test_lowercases(self):
        assert normalize_hex("#FF6B6B") == "#ff6b6b"

    def test_strips_whitespace(self):
        assert normalize_hex("  #007BFF ") == "#007bff"

    def test_invalid(self):
        with pytest.raises(ValueError):
            normalize_hex("#zzzzzz")

    def test_not_a_string(self):
        with pytest.raises(ValueError):
            normalize_hex(0x007BFF)


class TestRadiusRange:
    def test_clamp(self):
        radius_range = RadiusRange(minimum=500, maximum=10000, step=500, default=2000)
        assert radius_range.clamp(20) == 500
        assert radius_range.clamp(12000) == 10000
        assert radius_range.clamp(4200) == 4200
        assert radius_range.contains(500)
        assert not radius_range.contains(10001)

    @pytest.mark.parametrize("kwargs", [
        dict(minimum=0, maximum=100, step=10, default=50),
        dict(minimum=500, maximum=100, step=10, default=200),
        dict(minimum=500, maximum=1000, step=0, default=600),
        dict(minimum=500, maximum=1000, step=100, default=2000),
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            RadiusRange(**kwargs)


class TestDefaults:
    def test_radius_slider(self, config):
        assert config.circle_radius == RadiusRange(500, 10000, 500, 2000)

    def test_palette(self, config):
        assert len(config.palette) == 8
        assert config.palette[0] == PaletteColor("Blue", "#007bff")
        assert "#e83e8c" in config.palette_values

    def test_builder_colors(self, config):
        assert config.circle_color == "#007bff"
        assert config.polygon_fill_color == "#ff6b6b"
        assert config.polygon_stroke_color == "#ff0000"
        assert config.polyline_color == "#ff6b6b"

    def test_catalogs(self, config):
        assert [a.id for a in config.coverage_areas] == [
            "wifi-1", "delivery-1", "service-1", "emergency-1",
        ]
        assert [z.id for z in config.zones] == ["business", "residential", "historical"]

    def test_editable_circle(self, config):
        assert config.editable_circle.radius == 3000
        assert config.editable_circle.center.to_dict() == {"lat": 24.7136, "lng": 46.6753}

    def test_animation(self, config):
        assert len(config.animation.path) == 7
        assert config.animation.tick_interval_ms == 800

    def test_logging_level(self, config):
        assert config.logging_level == logging.INFO


class TestValidation:
    def test_empty_palette(self):
        with pytest.raises(ValueError, match="palette"):
            EngineConfig(palette=())

    def test_min_polygon_points(self):
        with pytest.raises(ValueError):
            EngineConfig(min_polygon_points=2)

    def test_log_level(self):
        with pytest.raises(ValueError, match="log_level"):
            EngineConfig(log_level="LOUD")

    def test_invalid_default_color(self):
        with pytest.raises(ValueError):
            EngineConfig(circle_color="blue-ish")

    def test_duplicate_catalog_ids(self, config):
        with pytest.raises(ValueError, match="Duplicate"):
            EngineConfig(coverage_areas=config.coverage_areas[:1] * 2)


class TestFindColor:
    def test_any_spelling(self, config):
        assert config.find_color("#007BFF").name == "Blue"

    def test_absent(self, config):
        assert config.find_color("#123456") is None

    def test_malformed(self, config):
        assert config.find_color("nope") is None


class TestFromYaml:
    def test_shipped_presets_match_defaults(self, presets_yaml):
        assert EngineConfig.from_yaml(presets_yaml) == EngineConfig.default()

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "engine.yaml"
        path.write_text("circle_color: '#28A745'\nlog_level: debug\n")

        config = EngineConfig.from_yaml(path)

        assert config.circle_color == "#28a745"
        assert config.logging_level == logging.DEBUG
        assert len(config.zones) == 3

    def test_empty_file(self, tmp_path):
        path = tmp_path / "engine.yaml"
        path.write_text("")
        assert EngineConfig.from_yaml(path) == EngineConfig.default()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            EngineConfig.from_yaml(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "engine.yaml"
        path.write_text("palette: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            EngineConfig.from_yaml(path)

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "engine.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError, match="mapping"):
            EngineConfig.from_yaml(path)

    def test_missing_section_key(self, tmp_path):
        path = tmp_path / "engine.yaml"
        path.write_text("zones:\n  - id: lonely\n")
        with pytest.raises(ValueError, match="Invalid engine config"):
            EngineConfig.from_yaml(path)

    def test_invalid_radius_range(self, tmp_path):
        path = tmp_path / "engine.yaml"
        path.write_text(
            "circle_radius: {minimum: 500, maximum: 100, step: 500, default: 2000}\n"
        )
        with pytest.raises(ValueError):
            EngineConfig.from_yaml(path)
