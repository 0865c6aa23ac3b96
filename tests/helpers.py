from __future__ import annotations

import cv2
import numpy as np


def dark_frame(w=800, h=600):
    return np.zeros((h, w, 3), dtype=np.uint8)


def spot(frame, center, radius, value=255, channel=2):
    """Filled disc of `value` in one BGR channel."""
    plane = np.ascontiguousarray(frame[:, :, channel])
    cv2.circle(plane, center, radius, value, -1)
    frame[:, :, channel] = plane
    return frame
