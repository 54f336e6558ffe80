"""
Rendering module: scene adapters, the frame driver, and Cairo export of
grown geometry.
"""

from config.render_config import SegmentRenderConfig, ViewerConfig, SphereConfig
from .adapter import SceneAdapter, RecordingSceneAdapter
from .mpl_adapter import MatplotlibSceneAdapter
from .driver import FrameDriver
from .segment_renderer import SegmentRenderer, compute_bounds
from .exporters import (
    snapshot,
    collect_growth_frames,
    export_growth_data,
    load_growth_data
)
