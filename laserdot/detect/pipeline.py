from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

import cv2
import numpy as np

from laserdot.api.config import LaserDotConfig
from laserdot.api.errors import DimensionMismatchError, check_shape
from laserdot.api.frame_data import DetectionResult, FrameResult, RegionSet
from laserdot.detect.blob import isolate_blobs
from laserdot.detect.buffers import FrameBuffers
from laserdot.detect.channel import extract_channel
from laserdot.detect.components import label_regions
from laserdot.detect.selector import select_centroid
from laserdot.render.annotate import annotate
from laserdot.render.convert import gray_to_rgba, rgba_to_bgr

log = logging.getLogger(__name__)


def detect(
    frame: np.ndarray, cfg: LaserDotConfig, buffers: Optional[FrameBuffers] = None
) -> Tuple[DetectionResult, RegionSet]:
    """
    Channel -> blob mask -> labelled regions -> one point (or none).
    """
    if buffers is None:
        check_shape("frame", frame, (cfg.height, cfg.width, 3), np.uint8)
        plane_out = mask_out = None
    else:
        buffers.check(frame)
        plane_out, mask_out = buffers.plane, buffers.mask

    plane = extract_channel(frame, cfg.channel, out=plane_out)
    mask = isolate_blobs(plane, cfg.threshold, cfg.blur_ksize, cfg.blur_sigma, cfg.mask_level, out=mask_out)
    regions = label_regions(mask, cfg.connectivity)
    point = select_centroid(regions, cfg.selection)
    return DetectionResult(point=point, radius=cfg.marker_radius), regions


class LaserDotPipeline:
    """
    One frame in, one FrameResult out. Holds the config and the thread pool
    for pixel conversion, no frame data, so a caller-owned loop decides when
    frames are processed and which scratch buffers get reused.
    """

    def __init__(self, cfg: LaserDotConfig):
        self.cfg = cfg.validate()
        self.pool: Optional[ThreadPoolExecutor] = None
        if cfg.workers > 1:
            self.pool = ThreadPoolExecutor(max_workers=cfg.workers, thread_name_prefix="laserdot-rows")

    def __enter__(self) -> "LaserDotPipeline":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        if self.pool is not None:
            self.pool.shutdown(wait=True)
            self.pool = None

    def new_buffers(self) -> FrameBuffers:
        return FrameBuffers.allocate(self.cfg.width, self.cfg.height)

    def _buffers_for(self, buffers: Optional[FrameBuffers]) -> FrameBuffers:
        cfg = self.cfg
        if buffers is None:
            return self.new_buffers()
        if buffers.size != (cfg.width, cfg.height):
            raise DimensionMismatchError(
                f"buffers are {buffers.size[0]}x{buffers.size[1]}, config wants {cfg.width}x{cfg.height}")
        return buffers

    def process_frame(self, frame: np.ndarray, buffers: Optional[FrameBuffers] = None) -> FrameResult:
        cfg = self.cfg
        buffers = self._buffers_for(buffers)
        buffers.check(frame)

        # never touch the caller's frame
        work = buffers.frame
        if cfg.flip_input is not None:
            cv2.flip(frame, cfg.flip_input, dst=work)
        else:
            np.copyto(work, frame)

        cv2.Canny(work, cfg.canny_low, cfg.canny_high, edges=buffers.edges)

        detection, regions = detect(work, cfg, buffers)
        if detection.detected:
            log.debug("laser at (%.1f, %.1f) among %d region(s)",
                      detection.point.x, detection.point.y, len(regions.foreground))

        annotate(detection, work, buffers.edges, color=cfg.marker_color)

        if cfg.flip_display is not None:
            cv2.flip(work, cfg.flip_display, dst=work)
            cv2.flip(buffers.edges, cfg.flip_display, dst=buffers.edges)

        gray_to_rgba(buffers.edges, out=buffers.rgba, workers=cfg.workers, pool=self.pool)
        return FrameResult(
            detection=detection,
            regions=regions,
            edges=buffers.edges,
            preview=work,
            edges_rgba=buffers.rgba,
        )

    def process_rgba(self, pixels: np.ndarray, buffers: Optional[FrameBuffers] = None) -> FrameResult:
        """Same as process_frame for texture-style RGBA pixels (flat or (H, W, 4))."""
        buffers = self._buffers_for(buffers)
        frame = rgba_to_bgr(
            pixels, self.cfg.width, self.cfg.height,
            out=buffers.source, workers=self.cfg.workers, pool=self.pool,
        )
        return self.process_frame(frame, buffers)
