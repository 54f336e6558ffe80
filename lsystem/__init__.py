"""
L-system grammar engine, turtle interpreter and growth model for
procedurally grown plants and trees.

Based on: "The Algorithmic Beauty of Plants"
by Prusinkiewicz and Lindenmayer (1990).
"""

from .errors import LSystemError, ConfigError, UnbalancedBranchError
from .vector import Vector3D
from .grammar import Grammar, advance, parse_rules
from .turtle import Segment, TurtleState, TurtleTrace, PlanarTurtle, SpatialTurtle
from .branch import Branch
from .tree import Tree
from .plant import Plant
from .visualization import visualize_segments, plot_growth_statistics

__all__ = [
    'LSystemError',
    'ConfigError',
    'UnbalancedBranchError',
    'Vector3D',
    'Grammar',
    'advance',
    'parse_rules',
    'Segment',
    'TurtleState',
    'TurtleTrace',
    'PlanarTurtle',
    'SpatialTurtle',
    'Branch',
    'Tree',
    'Plant',
    'visualize_segments',
    'plot_growth_statistics'
]
