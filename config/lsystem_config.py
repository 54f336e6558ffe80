"""
Configuration for the L-system engines.

All values are fixed at construction; degenerate geometry parameters are
rejected before an engine can be built.
"""

from dataclasses import dataclass, field
from typing import Dict

import numpy as np

from lsystem.errors import require


def _validate_common(config):
    require(isinstance(config.axiom, str) and len(config.axiom) > 0,
            "axiom must be a non-empty string")
    for key, repl in config.rules.items():
        require(isinstance(key, str) and len(key) == 1,
                f"rule key must be a single symbol: {key!r}")
        require(isinstance(repl, str), f"replacement for '{key}' must be a string")
    require(isinstance(config.max_iterations, int) and not isinstance(config.max_iterations, bool),
            "max_iterations must be an integer")
    require(config.max_iterations >= 0, "max_iterations must be >= 0")
    require(bool(np.isfinite(config.angle)), "angle must be finite")
    require(len(config.draw_symbols) > 0, "draw_symbols must not be empty")


@dataclass
class TreeConfig:
    axiom: str = 'F'
    rules: Dict[str, str] = field(default_factory=lambda: {'F': 'F[+F][-F][^F][&F]'})

    branch_length: float = 0.5        # length of a freshly created branch
    branch_thickness: float = 0.02
    growth_factor: float = 1.5        # > 1, applied to every branch once per tick
    angle: float = np.pi / 6          # 30 degrees
    max_iterations: int = 5

    draw_symbols: str = 'F'

    def __post_init__(self):
        _validate_common(self)
        require(self.branch_length > 0, "branch_length must be > 0")
        require(self.branch_thickness > 0, "branch_thickness must be > 0")
        require(self.growth_factor > 1, "growth_factor must be > 1")


@dataclass
class PlantConfig:
    axiom: str = 'S'
    rules: Dict[str, str] = field(default_factory=lambda: {'S': 'F[+F][-F]', 'F': 'FF'})

    segment_length: float = 2.0
    line_width: float = 1.0
    angle: float = np.radians(25)
    start_heading: float = 0.0        # radians, 0 = along +x
    max_iterations: int = 5

    draw_symbols: str = 'F'
    # Treat a ']' without matching '[' as a no-op instead of an error
    lenient_brackets: bool = False

    def __post_init__(self):
        _validate_common(self)
        require(self.segment_length > 0, "segment_length must be > 0")
        require(self.line_width > 0, "line_width must be > 0")
        require(bool(np.isfinite(self.start_heading)), "start_heading must be finite")
