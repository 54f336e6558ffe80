"""
Turtle interpretation of L-system sentences.

Character        Meaning
   F             Move forward by segment length drawing a segment
   +             Turn clockwise by the turning angle (around z)
   -             Turn counter-clockwise by the turning angle (around z)
   ^             Pitch up by the turning angle (around x, spatial only)
   &             Pitch down by the turning angle (around x, spatial only)
   [             Push current cursor state onto the stack
   ]             Pop cursor state from the stack

Every other character is ignored.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List

import numpy as np

from .errors import UnbalancedBranchError, require
from .vector import Vector3D, ORIGIN, UP, X_AXIS, Z_AXIS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    start: Vector3D
    direction: Vector3D
    length: float
    thickness: float

    @property
    def end(self) -> Vector3D:
        return self.start + self.direction * self.length

    def to_dict(self) -> dict:
        return {
            'start': list(self.start.to_tuple()),
            'end': list(self.end.to_tuple()),
            'length': self.length,
            'thickness': self.thickness,
        }


@dataclass
class TurtleState:
    position: Vector3D
    orientation: Any  # heading in radians (planar) or unit Vector3D (spatial)

    def copy(self) -> 'TurtleState':
        orientation = self.orientation
        if isinstance(orientation, Vector3D):
            orientation = orientation.copy()
        return TurtleState(self.position.copy(), orientation)


@dataclass
class TurtleTrace:
    """Result of one interpretation pass plus stack bookkeeping."""
    segments: List[Segment] = field(default_factory=list)
    max_depth: int = 0
    final_depth: int = 0
    ignored_pops: int = 0


class Turtle(ABC):
    def __init__(
            self,
            angle: float,
            length: float,
            thickness: float = 1.0,
            draw_symbols: str = "F",
            lenient_brackets: bool = False,
    ):
        require(np.isfinite(angle), "angle must be finite")
        require(length > 0, "segment length must be > 0")
        require(thickness > 0, "segment thickness must be > 0")
        require(len(draw_symbols) > 0, "at least one draw symbol is required")

        self.angle = float(angle)
        self.length = float(length)
        self.thickness = float(thickness)
        self.draw_symbols = frozenset(draw_symbols)
        # A stray ']' is an error unless leniency was asked for explicitly
        self.lenient_brackets = lenient_brackets

    @abstractmethod
    def initial_state(self) -> TurtleState:
        pass

    @abstractmethod
    def heading_vector(self, orientation) -> Vector3D:
        pass

    @abstractmethod
    def rotate(self, orientation, symbol: str):
        """Return the rotated orientation, or None if symbol is not a rotation."""
        pass

    def interpret(self, sentence: str) -> List[Segment]:
        return self.interpret_traced(sentence).segments

    def interpret_traced(self, sentence: str) -> TurtleTrace:
        trace = TurtleTrace()
        state = self.initial_state()
        stack: List[TurtleState] = []

        for i, c in enumerate(sentence):
            if c in self.draw_symbols:
                direction = self.heading_vector(state.orientation)
                segment = Segment(state.position.copy(), direction, self.length, self.thickness)
                trace.segments.append(segment)
                state.position = segment.end
            elif c == '[':
                stack.append(state.copy())
                trace.max_depth = max(trace.max_depth, len(stack))
            elif c == ']':
                if stack:
                    state = stack.pop()
                elif self.lenient_brackets:
                    logger.debug("Ignoring unmatched ']' at position %d", i)
                    trace.ignored_pops += 1
                else:
                    raise UnbalancedBranchError(i)
            else:
                rotated = self.rotate(state.orientation, c)
                if rotated is not None:
                    state.orientation = rotated

        trace.final_depth = len(stack)
        return trace


class PlanarTurtle(Turtle):
    """2D turtle in the z=0 plane, orientation kept as a heading angle."""

    def __init__(self, angle: float, length: float, thickness: float = 1.0,
                 draw_symbols: str = "F", lenient_brackets: bool = False,
                 start_heading: float = 0.0):
        super().__init__(angle, length, thickness, draw_symbols, lenient_brackets)
        self.start_heading = float(start_heading)

    def initial_state(self) -> TurtleState:
        return TurtleState(ORIGIN.copy(), self.start_heading)

    def heading_vector(self, orientation: float) -> Vector3D:
        return Vector3D(np.cos(orientation), np.sin(orientation), 0.0)

    def rotate(self, orientation: float, symbol: str):
        if symbol == '+':
            return orientation - self.angle
        if symbol == '-':
            return orientation + self.angle
        return None


class SpatialTurtle(Turtle):
    """3D turtle, orientation kept as a unit direction vector starting up (+y)."""

    primary_axis = Z_AXIS
    secondary_axis = X_AXIS

    def initial_state(self) -> TurtleState:
        return TurtleState(ORIGIN.copy(), UP.copy())

    def heading_vector(self, orientation: Vector3D) -> Vector3D:
        return orientation.copy()

    def rotate(self, orientation: Vector3D, symbol: str):
        if symbol == '+':
            axis, angle = self.primary_axis, -self.angle
        elif symbol == '-':
            axis, angle = self.primary_axis, self.angle
        elif symbol == '^':
            axis, angle = self.secondary_axis, self.angle
        elif symbol == '&':
            axis, angle = self.secondary_axis, -self.angle
        else:
            return None
        return orientation.rotate_about(axis, angle).normalize()
