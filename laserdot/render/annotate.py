from __future__ import annotations
from typing import Tuple

import cv2
import numpy as np

from laserdot.api.frame_data import DetectionResult


def annotate(
    detection: DetectionResult,
    color_canvas: np.ndarray,
    gray_canvas: np.ndarray,
    color: Tuple[int, int, int] = (255, 255, 255),
) -> None:
    """Ring the detected dot on both canvases. Nothing happens without a detection."""
    if not detection.detected:
        return
    center = detection.point.as_int()
    # single-channel canvas only takes the first component
    cv2.circle(color_canvas, center, detection.radius, color, 1)
    cv2.circle(gray_canvas, center, detection.radius, int(color[0]), 1)
