"""
Visualization utilities for L-system geometry.
"""

from collections import Counter
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from .turtle import Segment


def segments_to_array(segments: List[Segment]) -> np.ndarray:
    """(n, 2, 3) array of segment endpoints."""
    if not segments:
        return np.empty((0, 2, 3))
    return np.array([[s.start.to_tuple(), s.end.to_tuple()] for s in segments])


def set_equal_limits(ax, points: np.ndarray, margin: float = 0.1):
    """Fit a cube around points so the geometry is not distorted."""
    if len(points) == 0:
        return
    lo = points.min(axis=0)
    hi = points.max(axis=0)
    center = (lo + hi) / 2
    half = max(float((hi - lo).max()) / 2, 1e-3) * (1 + margin)
    ax.set_xlim(center[0] - half, center[0] + half)
    ax.set_ylim(center[1] - half, center[1] + half)
    ax.set_zlim(center[2] - half, center[2] + half)


def visualize_segments(
    segments: List[Segment],
    color: str = 'saddlebrown',
    width_scale: float = 100.0,
    figsize: Tuple[int, int] = (10, 10),
    save_path: Optional[str] = None,
    show: bool = True
):
    """Static 3D plot of a list of segments, line width following thickness."""
    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(projection='3d')

    lines = segments_to_array(segments)
    if len(lines):
        widths = [max(s.thickness * width_scale, 0.5) for s in segments]
        # y is up in turtle space, z is up in matplotlib
        collection = Line3DCollection(lines[:, :, [0, 2, 1]], colors=color, linewidths=widths)
        ax.add_collection3d(collection)
        set_equal_limits(ax, lines.reshape(-1, 3)[:, [0, 2, 1]])

    ax.set_axis_off()
    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor='white', edgecolor='none')
        print(f"Saved visualization to {save_path}")

    if show:
        plt.show()
    return fig, ax


def plot_growth_statistics(tree, save_path: Optional[str] = None, show: bool = True):
    """Plot statistics about a grown tree's retained branches."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    branch_lengths = [b.length for b in tree.branches]
    axes[0].hist(branch_lengths, bins=30, color='saddlebrown', edgecolor='black')
    axes[0].set_xlabel('Branch Length')
    axes[0].set_ylabel('Count')
    axes[0].set_title('Branch Length Distribution')

    births = Counter(b.generation for b in tree.branches)
    generations = list(range(1, tree.iteration + 1))
    axes[1].bar(generations, [births.get(g, 0) for g in generations],
                color='forestgreen', edgecolor='black')
    axes[1].set_xlabel('Generation')
    axes[1].set_ylabel('New Branches')
    axes[1].set_title('Branches Created per Generation')

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved statistics to {save_path}")

    if show:
        plt.show()
    return fig, axes
