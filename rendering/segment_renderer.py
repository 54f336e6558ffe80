"""
Segment renderer using Cairo.
Projects segment snapshots orthographically onto the x-y plane.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import cairo
import imageio
import numpy as np
from tqdm import tqdm

from config.render_config import SegmentRenderConfig
from .base import Renderer

Bounds = Tuple[float, float, float, float]


def compute_bounds(frames: List[Dict[str, Any]]) -> Optional[Bounds]:
    """(min_x, min_y, max_x, max_y) over every segment of every frame."""
    points = [
        p
        for frame in frames
        for s in frame['segments']
        for p in (s['start'][:2], s['end'][:2])
    ]
    if not points:
        return None
    arr = np.asarray(points, dtype=float)
    min_x, min_y = arr.min(axis=0)
    max_x, max_y = arr.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


class SegmentRenderer(Renderer):
    def __init__(self, config: SegmentRenderConfig = None):
        super().__init__(config or SegmentRenderConfig())

    def _transform(self, bounds: Bounds):
        """Return a function mapping turtle (x, y) to pixel coordinates, and the scale."""
        min_x, min_y, max_x, max_y = bounds
        w = self.config.output_width
        h = self.config.output_height
        usable_w = w * (1 - 2 * self.config.margin)
        usable_h = h * (1 - 2 * self.config.margin)

        span = max(max_x - min_x, max_y - min_y, 1e-9)
        scale = min(usable_w, usable_h) / span
        cx = (min_x + max_x) / 2
        cy = (min_y + max_y) / 2

        def to_px(x: float, y: float) -> Tuple[float, float]:
            px = w / 2 + (x - cx) * scale
            if self.config.flip_y:
                py = h / 2 - (y - cy) * scale
            else:
                py = h / 2 + (y - cy) * scale
            return px, py

        return to_px, scale

    def _draw_segments(self, ctx: cairo.Context, segments: List[Dict], bounds: Bounds):
        r1, g1, b1, a1 = self.config.branch_color
        r2, g2, b2, a2 = self.config.branch_color_end

        ctx.set_line_cap(cairo.LINE_CAP_ROUND)
        ctx.set_line_join(cairo.LINE_JOIN_ROUND)

        to_px, scale = self._transform(bounds)
        max_gen = max((s.get('generation', 0) for s in segments), default=0)

        for segment in segments:
            t = segment.get('generation', 0) / max_gen if max_gen > 0 else 0
            ctx.set_source_rgba(
                r1 + (r2 - r1) * t,
                g1 + (g2 - g1) * t,
                b1 + (b2 - b1) * t,
                a1 + (a2 - a1) * t
            )

            width = segment['thickness'] * self.config.width_scale
            if not self.config.pixel_widths:
                width *= scale
            ctx.set_line_width(max(width, self.config.min_width))

            sx, sy = to_px(*segment['start'][:2])
            ex, ey = to_px(*segment['end'][:2])
            ctx.move_to(sx, sy)
            ctx.line_to(ex, ey)
            ctx.stroke()

    def render_frame(self, frame: Dict[str, Any], bounds: Optional[Bounds] = None) -> np.ndarray:
        surface, ctx = self._create_surface()

        if bounds is None:
            bounds = compute_bounds([frame])
        if bounds is not None:
            self._draw_segments(ctx, frame['segments'], bounds)

        return self._surface_to_numpy(surface)

    def save_frame(self, frame: Dict[str, Any], output_path: str):
        image = self.render_frame(frame)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.imwrite(output_path, image)

    def render_animation(self, frames: List[Dict[str, Any]], output_path: str,
                         fps: int = 2, hold_last: int = 3):
        """
        Render one image per collected frame. Bounds are computed over all
        frames so the view does not jump while growing.
        """
        bounds = compute_bounds(frames)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        images = [
            self.render_frame(frame, bounds=bounds)
            for frame in tqdm(frames, desc="Rendering frames")
        ]
        if images:
            images.extend([images[-1]] * hold_last)

        imageio.mimsave(output_path, images, duration=1000 / fps)
        print(f"  Saved animation: {output_path}")
        return images
