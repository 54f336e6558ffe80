"""
Base class for tick-driven L-system engines.

An engine owns all of its mutable state (sentence, iteration counter,
materialized handles). A frame driver calls tick() once per display refresh;
the engine rewrites exactly one generation per tick until max_iterations is
reached, after which tick() is a no-op.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .errors import LSystemError
from .grammar import Grammar
from .turtle import Segment, Turtle

logger = logging.getLogger(__name__)


class GrowthEngine(ABC):
    def __init__(self, grammar: Grammar, turtle: Turtle, max_iterations: int, adapter=None):
        self.grammar = grammar
        self.turtle = turtle
        self.max_iterations = max_iterations
        self.adapter = adapter

        self.sentence = grammar.axiom
        self.iteration = 0
        self.error: Optional[LSystemError] = None

    @property
    def halted(self) -> bool:
        return self.error is not None

    @property
    def is_inert(self) -> bool:
        return self.halted or self.iteration >= self.max_iterations

    def tick(self) -> bool:
        """
        Advance one generation and refresh the scene.
        Returns True if the engine advanced, False if it is inert.
        """
        if self.is_inert:
            return False

        try:
            sentence = self.grammar.advance(self.sentence)
            segments = self.turtle.interpret(sentence)
        except LSystemError as e:
            self._halt(e)
            return False

        # Nothing is committed until interpretation succeeded
        self.sentence = sentence
        self.iteration += 1
        self._commit(segments)
        self.materialize()
        return True

    grow_tree = tick

    def grow(self, callback: Optional[Callable[['GrowthEngine', int], None]] = None) -> int:
        """
        Tick until the engine becomes inert.
        Optional callback is called after each iteration with (engine, iteration).
        Returns the number of iterations performed.
        """
        while self.tick():
            if callback:
                callback(self, self.iteration)
            logger.debug("Iteration %d: %d symbols", self.iteration, len(self.sentence))

        logger.info("Growth finished after %d iterations (%d segments)",
                    self.iteration, len(self.segments))
        return self.iteration

    def _halt(self, error: LSystemError):
        self.error = error
        logger.error("Halting %s at iteration %d: %s",
                     type(self).__name__, self.iteration, error)

    @property
    @abstractmethod
    def segments(self) -> List[Segment]:
        """Geometry currently on display, in materialization order."""
        pass

    @abstractmethod
    def _commit(self, segments: List[Segment]):
        pass

    @abstractmethod
    def materialize(self):
        pass

    @abstractmethod
    def dispose(self):
        """Release every handle still owned by the engine."""
        pass
