"""
Configuration for rendering and the interactive viewers.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class SegmentRenderConfig:
    output_width: int = 512
    output_height: int = 512
    background_color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)

    branch_color: Tuple[float, float, float, float] = (0.55, 0.27, 0.07, 1.0)
    branch_color_end: Tuple[float, float, float, float] = (0.10, 0.60, 0.30, 1.0)
    width_scale: float = 1.0      # multiplier applied to segment thickness
    pixel_widths: bool = False    # thickness is already in pixels, not world units
    min_width: float = 0.5

    margin: float = 0.05          # fraction of the output size left empty around the geometry
    flip_y: bool = True           # turtle y is up, image rows grow downwards

    antialiasing: bool = True


@dataclass
class ViewerConfig:
    figsize: Tuple[int, int] = (8, 8)
    background_color: str = 'black'
    branch_color: str = '#8b4513'
    line_color: str = '#00ff00'
    width_scale: float = 100.0    # points of line width per unit of thickness

    elevation: float = 15.0
    azimuth: float = -60.0
    interval: int = 16            # milliseconds between frames (about 60 fps)
    view_extent: float = 6.0      # half size of the visible cube


@dataclass
class SphereConfig:
    radius: float = 3.0
    resolution: int = 64
    color: str = '#00FF83'
    light_direction: Tuple[float, float, float] = (10.0, 10.0, 10.0)
    ambient: float = 0.3

    auto_rotate: bool = True
    rotate_speed: float = 0.5     # degrees of azimuth per frame
