"""
Base renderer class defining the interface for image renderers.
"""

import cairo
import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

from config.render_config import SegmentRenderConfig


class Renderer(ABC):
    def __init__(self, config: SegmentRenderConfig):
        self.config = config

    def _create_surface(self) -> Tuple[cairo.ImageSurface, cairo.Context]:
        surface = cairo.ImageSurface(
            cairo.FORMAT_ARGB32,
            self.config.output_width,
            self.config.output_height
        )
        ctx = cairo.Context(surface)

        if getattr(self.config, 'antialiasing', True):
            ctx.set_antialias(cairo.ANTIALIAS_BEST)

        r, g, b, a = self.config.background_color
        ctx.set_source_rgba(r, g, b, a)
        ctx.paint()

        return surface, ctx

    def _surface_to_numpy(self, surface: cairo.ImageSurface) -> np.ndarray:
        surface.flush()
        buf = surface.get_data()
        arr = np.ndarray(
            shape=(self.config.output_height, surface.get_stride() // 4, 4),
            dtype=np.uint8,
            buffer=buf
        )[:, :self.config.output_width]
        # Cairo stores BGRA on little-endian machines
        return arr[:, :, [2, 1, 0, 3]].copy()

    @abstractmethod
    def render_frame(self, *args, **kwargs) -> np.ndarray:
        pass

    @abstractmethod
    def render_animation(self, *args, **kwargs):
        pass
