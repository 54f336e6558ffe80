"""
Growing 3D tree demo.

The L-system F -> F[+F][-F][^F][&F] is rewritten once per frame; existing
branches keep growing while new ones sprout. Drag with the mouse to orbit.

Run:
    python main_tree.py [--config tree.json] [--iterations N]
"""

import argparse
from dataclasses import replace

import matplotlib.pyplot as plt

from config import TreeConfig, ViewerConfig, load_config
from logging_config import setup_logging
from lsystem import Tree
from rendering import FrameDriver, MatplotlibSceneAdapter


def main():
    parser = argparse.ArgumentParser(description="Growing L-system tree")
    parser.add_argument('--config', help="JSON file with TreeConfig fields")
    parser.add_argument('--iterations', type=int, help="override max_iterations")
    args = parser.parse_args()

    setup_logging()

    config = load_config(args.config, kind='tree') if args.config else TreeConfig()
    if args.iterations is not None:
        config = replace(config, max_iterations=args.iterations)
    view = ViewerConfig()

    fig = plt.figure(figsize=view.figsize, facecolor=view.background_color)
    ax = fig.add_subplot(projection='3d', facecolor=view.background_color)
    ax.set_axis_off()
    ax.view_init(elev=view.elevation, azim=view.azimuth)
    extent = view.view_extent
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_zlim(0, 2 * extent)

    tree = Tree(config, adapter=MatplotlibSceneAdapter(ax, color=view.branch_color, config=view))
    title = ax.set_title('Iteration: 0', color='white')

    def on_frame(frame):
        title.set_text(f"Iteration: {tree.iteration}  Branches: {len(tree.branches)}")

    print(f"Growing tree: {tree.grammar}")
    driver = FrameDriver(tree.tick, fig=fig, interval=view.interval, on_frame=on_frame)
    anim = driver.start()
    plt.show()
    return anim


if __name__ == '__main__':
    main()
