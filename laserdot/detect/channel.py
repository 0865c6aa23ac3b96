from __future__ import annotations
from typing import Optional

import cv2
import numpy as np

from laserdot.api.config import CHANNELS
from laserdot.api.errors import ConfigError, DimensionMismatchError, check_shape


def extract_channel(frame: np.ndarray, channel: str = "red", out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Pull one colour plane out of a BGR frame.
    Returns a (H, W) uint8 plane, written into `out` when given.
    """
    if channel not in CHANNELS:
        raise ConfigError(f"Unknown channel {channel!r}")
    if getattr(frame, "ndim", None) != 3 or frame.shape[2] != 3:
        shape = getattr(frame, "shape", None)
        raise DimensionMismatchError(f"frame: expected (H, W, 3), got {shape}")
    if frame.dtype != np.uint8:
        raise DimensionMismatchError(f"frame: expected dtype uint8, got {frame.dtype}")

    h, w = frame.shape[:2]
    if out is None:
        return cv2.extractChannel(frame, CHANNELS[channel])
    check_shape("channel plane", out, (h, w), np.uint8)
    cv2.extractChannel(frame, CHANNELS[channel], dst=out)
    return out
