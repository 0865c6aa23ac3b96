from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from laserdot.api.errors import DimensionMismatchError, check_shape


@dataclass
class FrameBuffers:
    """
    Scratch arrays for one frame size. The caller allocates them once and
    passes them to every pipeline run; the pipeline keeps no buffers itself.
    """
    frame: np.ndarray  # (H, W, 3) working copy of the input
    plane: np.ndarray  # (H, W) tracked channel
    mask: np.ndarray   # (H, W) blob mask
    edges: np.ndarray  # (H, W) canny output
    rgba: np.ndarray   # (H, W, 4) edges for display
    source: np.ndarray  # (H, W, 3) input converted from texture pixels

    @classmethod
    def allocate(cls, width: int, height: int) -> "FrameBuffers":
        if width <= 0 or height <= 0:
            raise DimensionMismatchError(f"Cannot allocate buffers for {width}x{height}")
        return cls(
            frame=np.zeros((height, width, 3), dtype=np.uint8),
            plane=np.zeros((height, width), dtype=np.uint8),
            mask=np.zeros((height, width), dtype=np.uint8),
            edges=np.zeros((height, width), dtype=np.uint8),
            rgba=np.zeros((height, width, 4), dtype=np.uint8),
            source=np.zeros((height, width, 3), dtype=np.uint8),
        )

    @property
    def size(self):
        h, w = self.plane.shape
        return w, h

    def check(self, frame: np.ndarray) -> None:
        check_shape("frame", frame, self.frame.shape, np.uint8)
