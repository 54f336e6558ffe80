"""
Scene adapter drawing segments and branches into a matplotlib 3D axes.
"""

from typing import Optional

from mpl_toolkits.mplot3d import Axes3D

from config.render_config import ViewerConfig
from .adapter import SceneAdapter


class MatplotlibSceneAdapter(SceneAdapter):
    """
    Each primitive is one Line3D artist. Turtle space has y up while
    matplotlib's 3D axes have z up, so y and z are swapped on the way in.
    """

    def __init__(self, ax: Axes3D, color: str = '#8b4513', config: Optional[ViewerConfig] = None):
        self.ax = ax
        self.color = color
        self.config = config or ViewerConfig()

    def materialize(self, item):
        start = item.start_pos if hasattr(item, 'start_pos') else item.start
        end = item.end_pos if hasattr(item, 'end_pos') else item.end
        width = max(item.thickness * self.config.width_scale, 0.5)

        line, = self.ax.plot(
            [start.x, end.x], [start.z, end.z], [start.y, end.y],
            color=self.color,
            linewidth=width,
            solid_capstyle='round'
        )
        return line

    def dispose(self, handle):
        handle.remove()
