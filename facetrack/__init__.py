"""facetrack: stable identities for per-frame face detections."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("facetrack")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from facetrack.colors import ColorAllocationError, ColorAllocator
from facetrack.config import (
    ColorConfig,
    ConfigError,
    CountingConfig,
    DistanceConfig,
    LifecycleConfig,
    TrackerConfig,
    get_default_config,
    get_responsive_config,
    get_stable_config,
    load_config,
    save_config,
)
from facetrack.distance import DistanceMetric
from facetrack.engine import AssociationEngine, CycleResult
from facetrack.face_logger import FaceLogger
from facetrack.file_io import DetectionCycle, DetectionLogError, load_detection_log, save_detection_log
from facetrack.geometry import Point, Rect, centroid
from facetrack.track_store import TrackStore
from facetrack.types import Color, Track
from facetrack.visibility import VisibilityPolicy

__all__ = [
    # Version
    "__version__",
    # Geometry & types
    "Point",
    "Rect",
    "centroid",
    "Color",
    "Track",
    # Config
    "TrackerConfig",
    "DistanceConfig",
    "LifecycleConfig",
    "CountingConfig",
    "ColorConfig",
    "ConfigError",
    "get_default_config",
    "get_responsive_config",
    "get_stable_config",
    "load_config",
    "save_config",
    # Tracking
    "DistanceMetric",
    "TrackStore",
    "AssociationEngine",
    "CycleResult",
    "VisibilityPolicy",
    "ColorAllocator",
    "ColorAllocationError",
    "FaceLogger",
    # Detection logs
    "DetectionCycle",
    "DetectionLogError",
    "load_detection_log",
    "save_detection_log",
]
