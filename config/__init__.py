"""
Configuration module.
"""

from .lsystem_config import TreeConfig, PlantConfig
from .render_config import SegmentRenderConfig, ViewerConfig, SphereConfig
from .presets import PLANT_PRESETS, plant_preset, load_config, save_config

__all__ = [
    'TreeConfig',
    'PlantConfig',
    'SegmentRenderConfig',
    'ViewerConfig',
    'SphereConfig',
    'PLANT_PRESETS',
    'plant_preset',
    'load_config',
    'save_config'
]
