"""
Tree class - 3D growing tree with retained branches.

Each tick the sentence is rewritten once and re-interpreted. Branches that
did not exist in the previous generation are appended to the retained set,
then every retained branch grows by the growth factor and is re-materialized.
Retained branches are never removed or recreated, only their visuals are.
"""

import logging
from typing import Dict, List

from .branch import Branch
from .engine import GrowthEngine
from .grammar import Grammar
from .turtle import Segment, SpatialTurtle

logger = logging.getLogger(__name__)

KEY_DIGITS = 6


def branch_key(segment: Segment) -> tuple:
    """
    Geometric identity of a branch: where it starts and where it points.

    Rewriting F into F[...] re-emits every existing branch at the same place,
    so a segment whose key is already retained is the same branch.
    """
    return (segment.start.rounded(KEY_DIGITS), segment.direction.rounded(KEY_DIGITS))


class Tree(GrowthEngine):
    def __init__(self, config, adapter=None):
        self.config = config
        grammar = Grammar(config.axiom, config.rules)
        turtle = SpatialTurtle(
            angle=config.angle,
            length=config.branch_length,
            thickness=config.branch_thickness,
            draw_symbols=config.draw_symbols,
        )
        super().__init__(grammar, turtle, config.max_iterations, adapter)
        self.growth_factor = config.growth_factor

        self.branches: List[Branch] = []
        self._by_key: Dict[tuple, Branch] = {}

    def _commit(self, segments: List[Segment]):
        new_branches = self._discover(segments)
        self.branches.extend(new_branches)

        for branch in self.branches:
            branch.grow(self.growth_factor)

        logger.debug("Iteration %d: %d new branches, %d total",
                     self.iteration, len(new_branches), len(self.branches))

    def _discover(self, segments: List[Segment]) -> List[Branch]:
        new_branches = []
        for segment in segments:
            key = branch_key(segment)
            if key in self._by_key:
                continue
            branch = Branch.from_segment(segment, key=key, generation=self.iteration)
            self._by_key[key] = branch
            new_branches.append(branch)
        return new_branches

    def materialize(self):
        if self.adapter is None:
            return

        self.adapter.begin_frame()
        for branch in self.branches:
            if not branch.needs_rebuild:
                continue
            if branch.handle is not None:
                self.adapter.dispose(branch.handle)
            branch.handle = self.adapter.materialize(branch)
            branch.stale = False
        self.adapter.end_frame()

    def dispose(self):
        for branch in self.branches:
            if branch.handle is not None and self.adapter is not None:
                self.adapter.dispose(branch.handle)
            branch.handle = None
            branch.stale = True

    @property
    def segments(self) -> List[Segment]:
        return [b.to_segment() for b in self.branches]

    @property
    def newest_branches(self) -> List[Branch]:
        return [b for b in self.branches if b.generation == self.iteration]
