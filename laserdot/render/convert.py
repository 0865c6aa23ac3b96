from __future__ import annotations
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

import cv2
import numpy as np

from laserdot.api.errors import DimensionMismatchError, check_shape


def row_ranges(height: int, parts: int) -> List[Tuple[int, int]]:
    """Split [0, height) into at most `parts` contiguous, disjoint row ranges."""
    parts = max(1, min(int(parts), height))
    step, extra = divmod(height, parts)
    out, start = [], 0
    for i in range(parts):
        stop = start + step + (1 if i < extra else 0)
        out.append((start, stop))
        start = stop
    return out


def _for_rows(
    height: int, workers: int, fn: Callable[[int, int], None], pool: Optional[Executor] = None
) -> None:
    ranges = row_ranges(height, workers)
    if len(ranges) == 1:
        fn(*ranges[0])
        return
    # each worker owns its rows; list() re-raises worker errors here
    if pool is not None:
        list(pool.map(lambda r: fn(*r), ranges))
        return
    with ThreadPoolExecutor(max_workers=len(ranges)) as own:
        list(own.map(lambda r: fn(*r), ranges))


def rgba_to_bgr(
    pixels: np.ndarray, width: int, height: int, out: Optional[np.ndarray] = None, workers: int = 4,
    pool: Optional[Executor] = None,
) -> np.ndarray:
    """Texture pixels (RGBA, row-major, flat or (H, W, 4)) -> (H, W, 3) BGR frame."""
    pixels = np.asarray(pixels)
    if pixels.dtype != np.uint8:
        raise DimensionMismatchError(f"pixels: expected dtype uint8, got {pixels.dtype}")
    if pixels.size != width * height * 4:
        raise DimensionMismatchError(
            f"pixels: expected {width}x{height}x4 = {width * height * 4} values, got {pixels.size}")
    src = np.ascontiguousarray(pixels).reshape(height, width, 4)

    if out is None:
        out = np.empty((height, width, 3), dtype=np.uint8)
    else:
        check_shape("frame", out, (height, width, 3), np.uint8)

    def work(r0: int, r1: int) -> None:
        out[r0:r1] = src[r0:r1, :, 2::-1]

    _for_rows(height, workers, work, pool)
    return out


def gray_to_rgba(
    plane: np.ndarray, out: Optional[np.ndarray] = None, workers: int = 4, alpha: int = 0,
    pool: Optional[Executor] = None,
) -> np.ndarray:
    """(H, W) single channel -> (H, W, 4) with r = g = b = value."""
    if getattr(plane, "ndim", None) != 2 or plane.dtype != np.uint8:
        raise DimensionMismatchError(
            f"plane: expected (H, W) uint8, got {getattr(plane, 'shape', None)} {getattr(plane, 'dtype', None)}")
    h, w = plane.shape
    if out is None:
        out = np.empty((h, w, 4), dtype=np.uint8)
    else:
        check_shape("rgba", out, (h, w, 4), np.uint8)

    def work(r0: int, r1: int) -> None:
        out[r0:r1, :, :3] = plane[r0:r1, :, None]
        out[r0:r1, :, 3] = alpha

    _for_rows(h, workers, work, pool)
    return out


def bgr_to_rgb(frame_bgr: np.ndarray) -> np.ndarray:
    return cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
