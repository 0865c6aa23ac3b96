from __future__ import annotations
from dataclasses import dataclass, fields, replace as _replace
from typing import Optional, Tuple

from .errors import ConfigError

# BGR plane index for each trackable colour
CHANNELS = {"blue": 0, "green": 1, "red": 2}
SELECTION_POLICIES = ("largest", "first")


@dataclass(frozen=True)
class LaserDotConfig:
    # capture
    cam_index: int = 0
    frame_size: Tuple[int, int] = (800, 600)  # (w, h)
    fps: int = 30

    # detection
    channel: str = "red"
    threshold: int = 240
    blur_ksize: int = 5
    blur_sigma: float = 1.0
    mask_level: int = 127  # re-threshold after blur
    connectivity: int = 8
    selection: str = "largest"

    # annotation / display path
    marker_radius: int = 20
    marker_color: Tuple[int, int, int] = (255, 255, 255)
    canny_low: float = 100.0
    canny_high: float = 100.0
    flip_input: Optional[int] = None  # cv2.flip code
    flip_display: Optional[int] = None

    # loop
    stats_every: int = 30
    workers: int = 4

    def __post_init__(self):
        # YAML and callers hand in lists; keep tuples so comparisons hold
        for name in ("frame_size", "marker_color"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @property
    def width(self) -> int:
        return int(self.frame_size[0])

    @property
    def height(self) -> int:
        return int(self.frame_size[1])

    @property
    def channel_index(self) -> int:
        return CHANNELS[self.channel]

    def replace(self, **overrides) -> "LaserDotConfig":
        """Return a validated copy with `overrides` applied (None values are ignored)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
        if "frame_size" in changes:
            changes["frame_size"] = tuple(int(v) for v in changes["frame_size"])
        if "marker_color" in changes:
            changes["marker_color"] = tuple(int(v) for v in changes["marker_color"])
        return _replace(self, **changes).validate()

    def validate(self) -> "LaserDotConfig":
        if len(self.frame_size) != 2 or self.width <= 0 or self.height <= 0:
            raise ConfigError(f"frame_size must be two positive ints, got {self.frame_size!r}")
        if self.channel not in CHANNELS:
            raise ConfigError(f"channel must be one of {sorted(CHANNELS)}, got {self.channel!r}")
        if not 0 <= self.threshold <= 255:
            raise ConfigError(f"threshold must be within 0..255, got {self.threshold}")
        if not 0 <= self.mask_level <= 255:
            raise ConfigError(f"mask_level must be within 0..255, got {self.mask_level}")
        if self.blur_ksize <= 0 or self.blur_ksize % 2 == 0:
            raise ConfigError(f"blur_ksize must be a positive odd int, got {self.blur_ksize}")
        if self.blur_sigma < 0:
            raise ConfigError(f"blur_sigma must be >= 0, got {self.blur_sigma}")
        if self.connectivity not in (4, 8):
            raise ConfigError(f"connectivity must be 4 or 8, got {self.connectivity}")
        if self.selection not in SELECTION_POLICIES:
            raise ConfigError(f"selection must be one of {SELECTION_POLICIES}, got {self.selection!r}")
        if self.marker_radius <= 0:
            raise ConfigError(f"marker_radius must be positive, got {self.marker_radius}")
        if len(self.marker_color) != 3:
            raise ConfigError(f"marker_color must have 3 components, got {self.marker_color!r}")
        for name in ("flip_input", "flip_display"):
            code = getattr(self, name)
            if code is not None and code not in (-1, 0, 1):
                raise ConfigError(f"{name} must be None, -1, 0 or 1, got {code!r}")
        if self.stats_every < 0:
            raise ConfigError(f"stats_every must be >= 0, got {self.stats_every}")
        if self.workers < 1:
            raise ConfigError(f"workers must be >= 1, got {self.workers}")
        return self
