"""
Rotating sphere viewer.

A lit sphere that slowly turns on its own; drag with the mouse to orbit.
"""

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import to_rgb

from config import SphereConfig, ViewerConfig
from logging_config import setup_logging
from rendering import FrameDriver


def sphere_mesh(radius: float, resolution: int):
    """Grid of points on a sphere, returned as (x, y, z) arrays."""
    u = np.linspace(0, 2 * np.pi, resolution)
    v = np.linspace(0, np.pi, resolution)
    x = radius * np.outer(np.cos(u), np.sin(v))
    y = radius * np.outer(np.sin(u), np.sin(v))
    z = radius * np.outer(np.ones_like(u), np.cos(v))
    return x, y, z


def shade(x, y, z, color: str, light_direction, ambient: float) -> np.ndarray:
    """Lambert shading plus an ambient term, per vertex RGBA."""
    normals = np.stack([x, y, z], axis=-1)
    normals /= np.linalg.norm(normals, axis=-1, keepdims=True)
    light = np.asarray(light_direction, dtype=float)
    light /= np.linalg.norm(light)

    diffuse = np.clip(normals @ light, 0.0, 1.0)
    intensity = np.clip(ambient + (1 - ambient) * diffuse, 0.0, 1.0)

    rgb = np.asarray(to_rgb(color))
    colors = np.ones(x.shape + (4,))
    colors[..., :3] = intensity[..., None] * rgb
    return colors


def main():
    setup_logging()

    config = SphereConfig()
    view = ViewerConfig(elevation=17.0)

    fig = plt.figure(figsize=view.figsize, facecolor=view.background_color)
    ax = fig.add_subplot(projection='3d', facecolor=view.background_color)
    ax.set_axis_off()
    ax.set_box_aspect((1, 1, 1))

    x, y, z = sphere_mesh(config.radius, config.resolution)
    colors = shade(x, y, z, config.color, config.light_direction, config.ambient)
    ax.plot_surface(x, y, z, facecolors=colors, rstride=1, cstride=1,
                    linewidth=0, antialiased=True, shade=False)
    ax.view_init(elev=view.elevation, azim=view.azimuth)

    def tick():
        if config.auto_rotate:
            ax.view_init(elev=ax.elev, azim=ax.azim + config.rotate_speed)

    driver = FrameDriver(tick, fig=fig, interval=view.interval)
    anim = driver.start()
    plt.show()
    return anim


if __name__ == '__main__':
    main()
