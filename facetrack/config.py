"""
Tracker Configuration
=====================

Validated configuration for face association and track lifecycle.

Supports preset configs (default/responsive/stable) and custom values
loaded from JSON. All fields are validated with meaningful error messages.

Time values share one unit with the cycle clock (milliseconds by default).
"""

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be read or written."""


@dataclass
class DistanceConfig:
    """Weights of the detection-to-track dissimilarity score."""

    time_weight: float = 0.1
    """Multiplier for time since the track was last matched."""

    area_weight: float = 0.002
    """Multiplier for the difference in rectangle area."""

    use_size_factor: bool = True
    """Divide positional offsets by detection area / size_factor."""

    size_factor: float = 10000.0
    """Area normalization divisor (larger faces tolerate larger shifts)."""

    allow_all_distances: bool = False
    """Match the nearest track no matter how far away it is."""

    distance_threshold: float = 200.0
    """Distances at or above this never match (unless allow_all_distances)."""

    def __post_init__(self):
        if self.time_weight < 0:
            raise ValueError(f"time_weight must be >= 0, got {self.time_weight}")
        if self.area_weight < 0:
            raise ValueError(f"area_weight must be >= 0, got {self.area_weight}")
        if self.size_factor <= 0:
            raise ValueError(f"size_factor must be > 0, got {self.size_factor}")
        if self.distance_threshold <= 0:
            raise ValueError(f"distance_threshold must be > 0, got {self.distance_threshold}")


@dataclass
class LifecycleConfig:
    """Track expiry and display limits."""

    age_limit: float = 2000.0
    """Tracks unmatched for longer than this are deleted."""

    show_age_limit: float = 1000.0
    """Tracks unmatched for longer than this are hidden from queries."""

    def __post_init__(self):
        if self.age_limit < 0:
            raise ValueError(f"age_limit must be >= 0, got {self.age_limit}")
        if self.show_age_limit < 0:
            raise ValueError(f"show_age_limit must be >= 0, got {self.show_age_limit}")
        if self.show_age_limit > self.age_limit:
            logger.warning(
                f"show_age_limit ({self.show_age_limit}) exceeds age_limit ({self.age_limit}); "
                f"tracks are deleted before they would be hidden"
            )


@dataclass
class CountingConfig:
    """Hysteresis for the face count."""

    freshman_window: float = 10.0
    """A briefly lost track still counts within this window..."""

    freshman_min_matches: int = 10
    """...if it was matched more than this many times."""

    veteran_window: float = 1500.0
    """A lost long-lived track still counts within this window..."""

    veteran_min_age: float = 3000.0
    """...if it has existed for longer than this."""

    def __post_init__(self):
        if self.freshman_window < 0 or self.veteran_window < 0:
            raise ValueError("counting windows must be >= 0")
        if self.freshman_min_matches < 0:
            raise ValueError(f"freshman_min_matches must be >= 0, got {self.freshman_min_matches}")
        if self.veteran_min_age < 0:
            raise ValueError(f"veteran_min_age must be >= 0, got {self.veteran_min_age}")


@dataclass
class ColorConfig:
    """Identity color generation."""

    background_color: Tuple[int, int, int] = (190, 190, 190)
    """RGB color the identity colors must stand out from."""

    required_color_distance: int = 90
    """Minimum Euclidean RGB distance from the background."""

    max_attempts: int = 10000
    """Resampling cap before giving up."""

    seed: Optional[int] = None
    """Random seed for reproducible colors."""

    def __post_init__(self):
        self.background_color = tuple(int(c) for c in self.background_color)
        if len(self.background_color) != 3:
            raise ValueError(f"background_color must have 3 channels, got {self.background_color}")
        if any(not (0 <= c <= 255) for c in self.background_color):
            raise ValueError(f"background_color channels must be in [0, 255], got {self.background_color}")
        if self.required_color_distance < 0:
            raise ValueError(f"required_color_distance must be >= 0, got {self.required_color_distance}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")


@dataclass
class TrackerConfig:
    """Complete face tracker configuration."""

    distance: DistanceConfig = field(default_factory=DistanceConfig)
    lifecycle: LifecycleConfig = field(default_factory=LifecycleConfig)
    counting: CountingConfig = field(default_factory=CountingConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)

    def __post_init__(self):
        logger.debug(
            f"TrackerConfig validated: age_limit={self.lifecycle.age_limit}, "
            f"threshold={self.distance.distance_threshold}, "
            f"size_factor={self.distance.size_factor if self.distance.use_size_factor else 'off'}"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["colors"]["background_color"] = list(self.colors.background_color)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrackerConfig":
        """Build from nested dicts, ignoring unknown keys."""
        sections = {
            "distance": DistanceConfig,
            "lifecycle": LifecycleConfig,
            "counting": CountingConfig,
            "colors": ColorConfig,
        }
        kwargs = {}
        for name, section_cls in sections.items():
            raw = data.get(name) or {}
            if not isinstance(raw, dict):
                raise ConfigError(f"Config section '{name}' must be an object, got {type(raw).__name__}")
            known = {f.name for f in fields(section_cls)}
            kwargs[name] = section_cls(**{k: v for k, v in raw.items() if k in known})
        return cls(**kwargs)


def get_default_config() -> TrackerConfig:
    """
    Default mode: the tuned values for a webcam at ~15-30 fps
    """
    return TrackerConfig()


def get_responsive_config() -> TrackerConfig:
    """
    Responsive mode: forget lost faces quickly

    Use for crowded or fast-moving scenes where stale identities cause swaps
    """
    return TrackerConfig(
        distance=DistanceConfig(time_weight=0.2, distance_threshold=150.0),
        lifecycle=LifecycleConfig(age_limit=800.0, show_age_limit=400.0),
        counting=CountingConfig(veteran_window=600.0, veteran_min_age=2000.0),
    )


def get_stable_config() -> TrackerConfig:
    """
    Stable mode: hold identities through longer occlusions

    Use for static cameras with few, slow-moving faces
    """
    return TrackerConfig(
        distance=DistanceConfig(time_weight=0.05, distance_threshold=250.0),
        lifecycle=LifecycleConfig(age_limit=5000.0, show_age_limit=2000.0),
        counting=CountingConfig(veteran_window=3000.0),
    )


PRESETS = {
    "default": get_default_config,
    "responsive": get_responsive_config,
    "stable": get_stable_config,
}


def get_preset(name: str) -> TrackerConfig:
    try:
        return PRESETS[name]()
    except KeyError:
        raise ValueError(f"Unknown preset '{name}'. Must be one of {sorted(PRESETS)}") from None


def load_config(path: Path) -> TrackerConfig:
    """Load a TrackerConfig from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Configuration file at {path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration file at {path} must contain a JSON object")
    try:
        return TrackerConfig.from_dict(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc


def save_config(config: TrackerConfig, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2, sort_keys=True), encoding="utf-8")
