from __future__ import annotations
import logging
from typing import Optional

from laserdot.api.config import LaserDotConfig
from laserdot.api.frame_data import FrameResult
from laserdot.app.context import FrameCounters
from laserdot.detect.buffers import FrameBuffers
from laserdot.detect.pipeline import LaserDotPipeline
from laserdot.video.camera import Camera

log = logging.getLogger(__name__)


def step(
    pipeline: LaserDotPipeline, source, buffers: FrameBuffers, counters: FrameCounters
) -> Optional[FrameResult]:
    """
    One loop cycle. Returns None when the source had nothing to give; the
    caller keeps showing whatever it showed last.
    """
    counters.updates += 1
    result = None

    if not source.is_playing:
        log.warning("Can't find camera!")
    else:
        ok, frame = source.read()
        if ok:
            counters.textures += 1
            result = pipeline.process_frame(frame, buffers)

    every = pipeline.cfg.stats_every
    if every and counters.updates % every == 0:
        log.info(counters.summary())
    return result


def run(cfg: LaserDotConfig, show_preview: bool = False, max_cycles: Optional[int] = None) -> FrameCounters:
    # imported here so the rest of the package works without a display
    from laserdot.render.display import PreviewWindows, TextureWindow

    pipeline = LaserDotPipeline(cfg)
    buffers = pipeline.new_buffers()
    counters = FrameCounters()

    cam = Camera(index=cfg.cam_index, target_size=cfg.frame_size, fps=cfg.fps)
    cam.open()

    window = TextureWindow(cfg.frame_size, caption=f"laserdot - camera {cfg.cam_index}")
    preview = PreviewWindows(cfg.frame_size) if show_preview else None

    try:
        while window.poll():
            window.tick(cfg.fps)
            result = step(pipeline, cam, buffers, counters)
            if result is not None:
                window.show(result.preview, result.edges_rgba)
                if preview is not None:
                    preview.show(result.preview, result.edges)
                counters.displays += 1
            if max_cycles is not None and counters.updates >= max_cycles:
                break
    finally:
        cam.close()
        pipeline.close()
        if preview is not None:
            preview.teardown()
        window.close()
        log.info("stopped. %s", counters.summary())
    return counters
