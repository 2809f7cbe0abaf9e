"""
Configuration schema for the geometry editing engine.

Presets the host UI binds its controls to: color palette, radius slider
ranges, the editable circle, display-only catalogs (coverage areas, zones)
and the animated path. Passed explicitly to the engine at construction;
nothing here is read as ambient global state.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import supervision as sv
import yaml

from overlay_engine.geometry.shapes import CoverageArea, Point, Zone

logger = logging.getLogger(__name__)


def normalize_hex(value: str) -> str:
    """
    Canonical "#rrggbb" form of a hex color.

    Raises:
        ValueError: If value is not a valid hex color
    """
    if not isinstance(value, str):
        raise ValueError(f"Color must be a hex string, got {type(value).__name__}")
    return sv.Color.from_hex(value.strip()).as_hex()


@dataclass(frozen=True)
class PaletteColor:
    """Named palette entry (value normalized to lowercase #rrggbb)."""

    name: str
    value: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Palette color name cannot be empty")
        object.__setattr__(self, "value", normalize_hex(self.value))


@dataclass(frozen=True)
class RadiusRange:
    """
    Slider bounds for a radius preset (meters).

    Invariants:
        - 0 < minimum <= default <= maximum
        - step > 0
    """

    minimum: float
    maximum: float
    step: float
    default: float

    def __post_init__(self):
        if self.minimum <= 0:
            raise ValueError(f"minimum must be > 0, got {self.minimum}")
        if self.maximum < self.minimum:
            raise ValueError(
                f"maximum must be >= minimum, got {self.maximum} < {self.minimum}"
            )
        if self.step <= 0:
            raise ValueError(f"step must be > 0, got {self.step}")
        if not self.minimum <= self.default <= self.maximum:
            raise ValueError(
                f"default must be in [{self.minimum}, {self.maximum}], got {self.default}"
            )

    def clamp(self, value: float) -> float:
        return min(max(value, self.minimum), self.maximum)

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


@dataclass(frozen=True)
class CircleEditorConfig:
    """Initial state of the editable circle."""

    center: Point
    radius: float = 3000

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"Editable circle radius must be > 0, got {self.radius}")


@dataclass(frozen=True)
class AnimationConfig:
    """Animated polyline playback."""

    path: Tuple[Point, ...] = ()
    tick_interval_ms: int = 800

    def __post_init__(self):
        object.__setattr__(self, "path", tuple(self.path))
        if self.tick_interval_ms <= 0:
            raise ValueError(
                f"tick_interval_ms must be > 0, got {self.tick_interval_ms}"
            )


DEFAULT_CENTER = Point(lat=24.7136, lng=46.6753)

RIYADH_LOCATIONS = {
    "KINGDOM_CENTRE": Point(lat=24.7136, lng=46.6753),
    "AL_FAISALIAH_TOWER": Point(lat=24.6877, lng=46.6857),
    "MASMAK_FORTRESS": Point(lat=24.6308, lng=46.7073),
    "NATIONAL_MUSEUM": Point(lat=24.6465, lng=46.7169),
}


def _default_palette() -> Tuple[PaletteColor, ...]:
    return (
        PaletteColor("Blue", "#007bff"),
        PaletteColor("Green", "#28a745"),
        PaletteColor("Yellow", "#ffc107"),
        PaletteColor("Red", "#dc3545"),
        PaletteColor("Purple", "#6f42c1"),
        PaletteColor("Teal", "#20c997"),
        PaletteColor("Orange", "#fd7e14"),
        PaletteColor("Pink", "#e83e8c"),
    )


def _default_coverage_areas() -> Tuple[CoverageArea, ...]:
    return (
        CoverageArea(
            id="wifi-1", center=RIYADH_LOCATIONS["KINGDOM_CENTRE"], radius=500,
            color="#007bff", name="WiFi Hotspot",
            description="High-speed internet access point", category="wifi", icon="📶",
        ),
        CoverageArea(
            id="delivery-1", center=RIYADH_LOCATIONS["AL_FAISALIAH_TOWER"], radius=3000,
            color="#28a745", name="Delivery Zone",
            description="Fast delivery service coverage area", category="delivery", icon="🚚",
        ),
        CoverageArea(
            id="service-1", center=RIYADH_LOCATIONS["MASMAK_FORTRESS"], radius=2000,
            color="#ffc107", name="Service Area",
            description="Technical support and maintenance zone", category="service", icon="🔧",
        ),
        CoverageArea(
            id="emergency-1", center=RIYADH_LOCATIONS["NATIONAL_MUSEUM"], radius=4000,
            color="#dc3545", name="Emergency Zone",
            description="Emergency response coverage area", category="emergency", icon="🚨",
        ),
    )


def _rectangle(south: float, west: float, north: float, east: float) -> Tuple[Point, ...]:
    return (
        Point(south, west),
        Point(north, west),
        Point(north, east),
        Point(south, east),
    )


def _default_zones() -> Tuple[Zone, ...]:
    return (
        Zone(
            id="business", paths=_rectangle(24.7200, 46.6700, 24.7300, 46.6900),
            fill_color="#007bff", stroke_color="#0056b3",
            name="Business District", description="Main business area",
        ),
        Zone(
            id="residential", paths=_rectangle(24.6800, 46.6500, 24.7000, 46.6700),
            fill_color="#28a745", stroke_color="#1e7e34",
            name="Residential Area", description="Residential neighborhoods",
        ),
        Zone(
            id="historical", paths=_rectangle(24.6200, 46.7000, 24.6500, 46.7300),
            fill_color="#ffc107", stroke_color="#e0a800",
            name="Historical District", description="Historic landmarks",
        ),
    )


def _default_animation() -> AnimationConfig:
    return AnimationConfig(
        path=(
            DEFAULT_CENTER,
            Point(24.7100, 46.6800),
            Point(24.7050, 46.6850),
            Point(24.7000, 46.6900),
            Point(24.6950, 46.6920),
            Point(24.6900, 46.6940),
            Point(24.6877, 46.6857),
        ),
        tick_interval_ms=800,
    )


@dataclass(frozen=True)
class EngineConfig:
    """
    Main configuration for the editing engine.

    Immutable after construction (frozen dataclass). Default colors are
    normalized; only user picks (set_color) must come from the palette.
    """

    palette: Tuple[PaletteColor, ...] = field(default_factory=_default_palette)
    circle_radius: RadiusRange = field(
        default_factory=lambda: RadiusRange(minimum=500, maximum=10000, step=500, default=2000)
    )
    circle_color: str = "#007bff"
    polygon_fill_color: str = "#ff6b6b"
    polygon_stroke_color: str = "#ff0000"
    polyline_color: str = "#ff6b6b"
    min_polygon_points: int = 3
    editable_circle: CircleEditorConfig = field(
        default_factory=lambda: CircleEditorConfig(center=DEFAULT_CENTER, radius=3000)
    )
    coverage_areas: Tuple[CoverageArea, ...] = field(default_factory=_default_coverage_areas)
    zones: Tuple[Zone, ...] = field(default_factory=_default_zones)
    animation: AnimationConfig = field(default_factory=_default_animation)
    log_level: str = "INFO"

    def __post_init__(self):
        palette = tuple(self.palette)
        if not palette:
            raise ValueError("palette cannot be empty")
        object.__setattr__(self, "palette", palette)

        for name in ("circle_color", "polygon_fill_color", "polygon_stroke_color", "polyline_color"):
            object.__setattr__(self, name, normalize_hex(getattr(self, name)))

        if self.min_polygon_points < 3:
            raise ValueError(
                f"min_polygon_points must be >= 3, got {self.min_polygon_points}"
            )

        object.__setattr__(self, "coverage_areas", tuple(self.coverage_areas))
        object.__setattr__(self, "zones", tuple(self.zones))

        ids = [area.id for area in self.coverage_areas] + [zone.id for zone in self.zones]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate catalog ids: {duplicates}")

        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of DEBUG, INFO, WARNING, ERROR"
            )

    @property
    def palette_values(self) -> Tuple[str, ...]:
        return tuple(color.value for color in self.palette)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())

    def find_color(self, value: str) -> Optional[PaletteColor]:
        """Palette entry for a color value (any hex spelling), None if absent."""
        try:
            normalized = normalize_hex(value)
        except ValueError:
            return None
        for color in self.palette:
            if color.value == normalized:
                return color
        return None

    @classmethod
    def default(cls) -> "EngineConfig":
        """Presets of the component guide pages."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """
        Build configuration from a plain mapping (parsed YAML).

        Omitted sections keep their defaults.
        """
        data = data or {}
        kwargs: Dict[str, Any] = {}

        if "palette" in data:
            kwargs["palette"] = tuple(
                PaletteColor(name=c["name"], value=c["value"]) for c in data["palette"]
            )

        if "circle_radius" in data:
            kwargs["circle_radius"] = RadiusRange(**data["circle_radius"])

        for key in (
            "circle_color",
            "polygon_fill_color",
            "polygon_stroke_color",
            "polyline_color",
            "min_polygon_points",
            "log_level",
        ):
            if key in data:
                kwargs[key] = data[key]

        if "editable_circle" in data:
            circle_data = data["editable_circle"]
            kwargs["editable_circle"] = CircleEditorConfig(
                center=Point.from_dict(circle_data["center"]),
                radius=circle_data.get("radius", 3000),
            )

        if "coverage_areas" in data:
            kwargs["coverage_areas"] = tuple(
                CoverageArea(
                    id=a["id"],
                    center=Point.from_dict(a["center"]),
                    radius=a["radius"],
                    color=normalize_hex(a["color"]),
                    name=a.get("name", ""),
                    description=a.get("description", ""),
                    category=a.get("category", ""),
                    icon=a.get("icon", ""),
                )
                for a in data["coverage_areas"]
            )

        if "zones" in data:
            kwargs["zones"] = tuple(
                Zone(
                    id=z["id"],
                    paths=tuple(Point.from_dict(p) for p in z["paths"]),
                    fill_color=normalize_hex(z["fill_color"]),
                    stroke_color=normalize_hex(z["stroke_color"]),
                    name=z.get("name", ""),
                    description=z.get("description", ""),
                )
                for z in data["zones"]
            )

        if "animation" in data:
            animation_data = data["animation"]
            kwargs["animation"] = AnimationConfig(
                path=tuple(Point.from_dict(p) for p in animation_data.get("path", [])),
                tick_interval_ms=animation_data.get("tick_interval_ms", 800),
            )

        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "EngineConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            palette:
              - {name: Blue, value: "#007bff"}
              - {name: Green, value: "#28a745"}
            circle_radius: {minimum: 500, maximum: 10000, step: 500, default: 2000}
            circle_color: "#007bff"
            editable_circle:
              center: {lat: 24.7136, lng: 46.6753}
              radius: 3000
            zones:
              - id: business
                name: Business District
                fill_color: "#007bff"
                stroke_color: "#0056b3"
                paths:
                  - {lat: 24.72, lng: 46.67}
                  - {lat: 24.73, lng: 46.67}
                  - {lat: 24.73, lng: 46.69}

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If YAML is invalid or a section fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}")

        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        try:
            config = cls.from_dict(data or {})
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid engine config in {path}: {e}")

        logger.info(
            "Loaded engine config from %s (%d palette colors, %d coverage areas, %d zones)",
            path, len(config.palette), len(config.coverage_areas), len(config.zones),
        )
        return config
