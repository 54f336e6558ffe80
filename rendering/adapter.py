"""
Scene adapter interface - the boundary between the engines and a display graph.

Engines never touch a scene directly: they hand segments or branches to
materialize() and get back an opaque handle, which they later pass to
dispose() before rebuilding the same geometry.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


class SceneAdapter(ABC):
    @abstractmethod
    def materialize(self, item) -> Any:
        """Create a primitive for a Segment or Branch and return its handle."""
        pass

    @abstractmethod
    def dispose(self, handle: Any):
        pass

    def begin_frame(self):
        pass

    def end_frame(self):
        pass


class RecordingSceneAdapter(SceneAdapter):
    """
    Headless adapter that keeps the live primitives in memory.

    Handles are increasing integers. Disposing an unknown or already disposed
    handle raises KeyError so that leaks and double frees show up in tests.
    """

    def __init__(self):
        self.live: Dict[int, dict] = {}
        self.materialized = 0
        self.disposed = 0
        self.frames = 0
        self._next_handle = 0

    def materialize(self, item) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self.live[handle] = item.to_dict()
        self.materialized += 1
        return handle

    def dispose(self, handle: int):
        if handle not in self.live:
            raise KeyError(f"handle {handle} is not live")
        del self.live[handle]
        self.disposed += 1

    def end_frame(self):
        self.frames += 1
        logger.debug("Frame %d: %d live primitives", self.frames, len(self.live))

    def snapshot(self) -> List[dict]:
        """Live primitives in materialization order."""
        return [self.live[h] for h in sorted(self.live)]
