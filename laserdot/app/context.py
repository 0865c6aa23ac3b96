from __future__ import annotations
from dataclasses import dataclass


@dataclass
class FrameCounters:
    updates: int = 0   # loop cycles
    textures: int = 0  # cycles that got a new frame
    displays: int = 0  # frames handed to the display

    def summary(self) -> str:
        return f"Frame count: {self.updates}, Texture count: {self.textures}, Display count: {self.displays}"
