from __future__ import annotations
from typing import Optional

from laserdot.api.errors import ConfigError
from laserdot.api.frame_data import Point, RegionSet


def select_centroid(regions: RegionSet, policy: str = "largest") -> Optional[Point]:
    """
    Pick the laser dot out of a region set.

    largest: foreground region with the most pixels, ties go to the lowest label.
    first:   whatever region got label 1, i.e. first in raster order.
    """
    fg = regions.foreground
    if not fg:
        return None
    if policy == "largest":
        best = max(fg, key=lambda r: (r.area, -r.label))
    elif policy == "first":
        best = min(fg, key=lambda r: r.label)
    else:
        raise ConfigError(f"Unknown selection policy {policy!r}")
    return best.centroid
