"""
2D L-system plant demo.

The plant is redrawn from scratch every frame until max_iterations is reached.

Run:
    python main_plant.py [--preset sprout|bush|weed|fern]
"""

import argparse

import matplotlib.pyplot as plt

from config import PlantConfig, PLANT_PRESETS, ViewerConfig, plant_preset
from logging_config import setup_logging
from lsystem import Plant
from lsystem.visualization import segments_to_array, set_equal_limits
from rendering import FrameDriver, MatplotlibSceneAdapter


def main():
    parser = argparse.ArgumentParser(description="Growing 2D L-system plant")
    parser.add_argument('--preset', choices=sorted(PLANT_PRESETS),
                        help="named plant; default is the S -> F[+F][-F] sprout lying along +x")
    args = parser.parse_args()

    setup_logging()

    config = plant_preset(args.preset) if args.preset else PlantConfig()
    view = ViewerConfig(width_scale=1.0)

    fig = plt.figure(figsize=view.figsize, facecolor=view.background_color)
    ax = fig.add_subplot(projection='3d', facecolor=view.background_color)
    ax.set_axis_off()
    # Look straight at the z=0 plane of the turtle
    ax.view_init(elev=0, azim=-90)

    plant = Plant(config, adapter=MatplotlibSceneAdapter(ax, color=view.line_color, config=view))

    def on_frame(frame):
        lines = segments_to_array(plant.segments)
        if len(lines):
            set_equal_limits(ax, lines.reshape(-1, 3)[:, [0, 2, 1]])

    print(f"Growing plant: {plant.grammar}")
    driver = FrameDriver(plant.tick, fig=fig, interval=view.interval, on_frame=on_frame)
    anim = driver.start()
    plt.show()
    return anim


if __name__ == '__main__':
    main()
