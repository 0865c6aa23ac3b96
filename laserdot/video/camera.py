from __future__ import annotations
import logging
import sys
from typing import Optional, Tuple

import cv2

log = logging.getLogger(__name__)


class Camera:
    """
    OpenCV capture device that always hands out frames of `target_size`.
    """

    def __init__(self, index: int, target_size: Tuple[int, int], fps: int = 30):
        self.index = index
        self.target_size = (int(target_size[0]), int(target_size[1]))
        self.fps = fps
        self.cap: Optional[cv2.VideoCapture] = None

    def open(self) -> bool:
        backend = cv2.CAP_DSHOW if sys.platform.startswith("win") else 0
        self.cap = cv2.VideoCapture(self.index, backend)
        w, h = self.target_size
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, w)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, h)
        self.cap.set(cv2.CAP_PROP_FPS, self.fps)
        if not self.cap.isOpened():
            log.warning("camera %d could not be opened", self.index)
            return False
        log.info("camera %d opened, requested %dx%d @ %d fps", self.index, w, h, self.fps)
        return True

    @property
    def is_playing(self) -> bool:
        return self.cap is not None and self.cap.isOpened()

    def read(self):
        if self.cap is None:
            return False, None
        ok, frame = self.cap.read()
        if not ok or frame is None:
            return False, None
        w, h = self.target_size
        if frame.shape[1] != w or frame.shape[0] != h:
            frame = cv2.resize(frame, (w, h), interpolation=cv2.INTER_AREA)
        return True, frame

    def close(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None
