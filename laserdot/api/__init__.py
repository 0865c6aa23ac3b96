from .config import LaserDotConfig
from .errors import ConfigError, DimensionMismatchError, LaserDotError
from .frame_data import DetectionResult, FrameResult, Point, Region, RegionSet

__all__ = [
    "LaserDotConfig",
    "LaserDotError",
    "ConfigError",
    "DimensionMismatchError",
    "Point",
    "Region",
    "RegionSet",
    "DetectionResult",
    "FrameResult",
]
