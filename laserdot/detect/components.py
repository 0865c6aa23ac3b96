from __future__ import annotations

import cv2
import numpy as np

from laserdot.api.errors import DimensionMismatchError
from laserdot.api.frame_data import Point, Region, RegionSet


def label_regions(mask: np.ndarray, connectivity: int = 8) -> RegionSet:
    """Label the non-zero pixels of `mask` into connected regions."""
    if getattr(mask, "ndim", None) != 2 or mask.dtype != np.uint8:
        raise DimensionMismatchError(
            f"mask: expected (H, W) uint8, got {getattr(mask, 'shape', None)} {getattr(mask, 'dtype', None)}")

    num, _, stats, centroids = cv2.connectedComponentsWithStats(mask, connectivity=connectivity)
    regions = []
    for label in range(num):
        x, y, w, h, area = (int(v) for v in stats[label, :5])
        cx, cy = float(centroids[label][0]), float(centroids[label][1])
        regions.append(Region(
            label=label,
            area=area,
            bbox=(x, y, w, h),
            centroid=Point(cx, cy),
            is_background=(label == 0),
        ))
    return RegionSet(tuple(regions))
