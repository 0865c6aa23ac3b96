from __future__ import annotations
import logging
from typing import Tuple

import cv2
import numpy as np
import pygame

from laserdot.render.convert import bgr_to_rgb

log = logging.getLogger(__name__)

BG_COLOR = (12, 14, 18)


class TextureWindow:
    """
    pygame window with two panels: the raw preview on the left and the
    processed edge image on the right.
    """

    def __init__(self, frame_size: Tuple[int, int], caption: str = "laserdot"):
        self.frame_size = (int(frame_size[0]), int(frame_size[1]))
        w, h = self.frame_size
        pygame.init()
        pygame.display.set_caption(caption)
        self.screen = pygame.display.set_mode((w * 2, h))
        self.clock = pygame.time.Clock()
        self.screen.fill(BG_COLOR)

    def poll(self) -> bool:
        """Pump window events. False once the user asked to quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    def show(self, preview_bgr: np.ndarray, edges_rgba: np.ndarray) -> None:
        w, h = self.frame_size
        rgb = np.ascontiguousarray(bgr_to_rgb(preview_bgr))
        left = pygame.image.frombuffer(rgb.tobytes(), (w, h), "RGB")
        # alpha byte is ignored, the edge buffer is opaque on screen
        right = pygame.image.frombuffer(np.ascontiguousarray(edges_rgba).tobytes(), (w, h), "RGBX")
        self.screen.blit(left, (0, 0))
        self.screen.blit(right, (w, 0))
        pygame.display.flip()

    def tick(self, fps: int) -> int:
        return self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()


class PreviewWindows:
    """OpenCV debug windows mirroring what the pygame panels show."""

    COLOR_WINDOW = "SuperLaserDetect"
    EDGES_WINDOW = "Processed WebCam"

    def __init__(self, frame_size: Tuple[int, int]):
        w, h = frame_size
        for name in (self.COLOR_WINDOW, self.EDGES_WINDOW):
            cv2.namedWindow(name, cv2.WINDOW_NORMAL)
            cv2.resizeWindow(name, w // 2, h // 2)

    def show(self, preview_bgr: np.ndarray, edges: np.ndarray) -> None:
        cv2.imshow(self.COLOR_WINDOW, preview_bgr)
        cv2.imshow(self.EDGES_WINDOW, edges)
        cv2.waitKey(1)

    def teardown(self) -> None:
        try:
            cv2.destroyAllWindows()
        except cv2.error as e:
            log.debug("destroyAllWindows failed: %s", e)
