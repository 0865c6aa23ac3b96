from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_int(self) -> Tuple[int, int]:
        return int(round(self.x)), int(round(self.y))


@dataclass(frozen=True)
class Region:
    label: int
    area: int
    bbox: Tuple[int, int, int, int]  # x, y, w, h
    centroid: Point
    is_background: bool = False


@dataclass(frozen=True)
class RegionSet:
    """
    Connected regions of one binary mask. Label 0 is always present and
    tagged as background; everything else is a detection candidate.
    """
    regions: Tuple[Region, ...]

    @property
    def background(self) -> Region:
        for r in self.regions:
            if r.is_background:
                return r
        raise LookupError("region set has no background region")

    @property
    def foreground(self) -> List[Region]:
        return [r for r in self.regions if not r.is_background]

    def __len__(self) -> int:
        return len(self.regions)


@dataclass(frozen=True)
class DetectionResult:
    point: Optional[Point]
    radius: int

    @property
    def detected(self) -> bool:
        return self.point is not None


@dataclass
class FrameResult:
    detection: DetectionResult
    regions: RegionSet
    # (H, W) uint8 annotated edge image and (H, W, 3) annotated BGR preview
    edges: np.ndarray
    preview: np.ndarray
    # edges as a 4-channel display buffer
    edges_rgba: np.ndarray
