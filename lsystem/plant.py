"""
Plant class - 2D L-system plant drawn as transient line segments.

The whole display is rebuilt on every tick: handles from the previous pass
are disposed and the new segments are materialized in interpretation order.
"""

from typing import Any, List

from .engine import GrowthEngine
from .grammar import Grammar
from .turtle import PlanarTurtle, Segment


class Plant(GrowthEngine):
    def __init__(self, config, adapter=None):
        self.config = config
        grammar = Grammar(config.axiom, config.rules)
        turtle = PlanarTurtle(
            angle=config.angle,
            length=config.segment_length,
            thickness=config.line_width,
            draw_symbols=config.draw_symbols,
            lenient_brackets=config.lenient_brackets,
            start_heading=config.start_heading,
        )
        super().__init__(grammar, turtle, config.max_iterations, adapter)

        self._segments: List[Segment] = []
        self._handles: List[Any] = []

    def _commit(self, segments: List[Segment]):
        self._segments = segments

    def materialize(self):
        if self.adapter is None:
            return

        self.adapter.begin_frame()
        self.dispose()
        self._handles = [self.adapter.materialize(s) for s in self._segments]
        self.adapter.end_frame()

    def dispose(self):
        if self.adapter is not None:
            for handle in self._handles:
                self.adapter.dispose(handle)
        self._handles = []

    @property
    def segments(self) -> List[Segment]:
        return list(self._segments)
