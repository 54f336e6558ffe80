"""
Branch class - a retained segment of the growing tree that keeps its identity
across generations so it can be grown in place.
"""

from typing import Any, Optional

from .turtle import Segment
from .vector import Vector3D


class Branch:
    __slots__ = ('start_pos', 'direction', 'length', 'thickness', 'key',
                 'generation', 'handle', 'stale')

    def __init__(self, start_pos: Vector3D, direction: Vector3D, length: float,
                 thickness: float, key: Optional[tuple] = None, generation: int = 0):
        self.start_pos = start_pos.copy()
        self.direction = direction.copy()
        self.length = length
        self.thickness = thickness
        self.key = key
        self.generation = generation
        self.handle: Any = None  # renderer primitive currently owned
        self.stale = True

    @classmethod
    def from_segment(cls, segment: Segment, key: Optional[tuple] = None,
                     generation: int = 0) -> 'Branch':
        return cls(segment.start, segment.direction, segment.length,
                   segment.thickness, key=key, generation=generation)

    @property
    def end_pos(self) -> Vector3D:
        return self.start_pos + self.direction * self.length

    @property
    def mid_pos(self) -> Vector3D:
        return self.start_pos + self.direction * (self.length / 2)

    @property
    def needs_rebuild(self) -> bool:
        return self.stale or self.handle is None

    def grow(self, factor: float) -> 'Branch':
        """Scale length and thickness by factor. Compounds on every call."""
        self.length *= factor
        self.thickness *= factor
        self.stale = True
        return self

    def to_segment(self) -> Segment:
        return Segment(self.start_pos.copy(), self.direction.copy(), self.length, self.thickness)

    def to_dict(self) -> dict:
        return {
            'start': list(self.start_pos.to_tuple()),
            'end': list(self.end_pos.to_tuple()),
            'length': self.length,
            'thickness': self.thickness,
            'generation': self.generation,
        }

    def __repr__(self) -> str:
        return f"Branch({self.start_pos} -> {self.end_pos}, thickness={self.thickness:.3f})"
