from __future__ import annotations
from typing import Optional

import cv2
import numpy as np

from laserdot.api.errors import DimensionMismatchError, check_shape


def isolate_blobs(
    plane: np.ndarray,
    threshold: int = 240,
    ksize: int = 5,
    sigma: float = 1.0,
    mask_level: int = 127,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Channel plane -> binary mask of bright, compact spots.

    Pixels >= threshold become 255, the rest 0. The mask is blurred so that
    near-adjacent pixels merge and lone noise pixels fade, then cut again at
    `mask_level` so the result only ever holds 0 or 255.
    """
    if getattr(plane, "ndim", None) != 2:
        raise DimensionMismatchError(f"plane: expected (H, W), got {getattr(plane, 'shape', None)}")
    if plane.dtype != np.uint8:
        raise DimensionMismatchError(f"plane: expected dtype uint8, got {plane.dtype}")
    if out is None:
        out = np.empty_like(plane)
    else:
        check_shape("mask", out, plane.shape, np.uint8)

    cv2.inRange(plane, int(threshold), 255, dst=out)
    cv2.GaussianBlur(out, (ksize, ksize), sigma, dst=out)
    cv2.threshold(out, int(mask_level), 255, cv2.THRESH_BINARY, dst=out)
    return out
