"""
Frame driver - invokes a tick callback once per display refresh.

Interactive use goes through matplotlib's FuncAnimation; headless use
(exports, tests) calls run() which performs the same per-frame sequence.
"""

from typing import Callable, Optional

from matplotlib.animation import FuncAnimation


class FrameDriver:
    def __init__(
        self,
        tick: Callable[[], object],
        fig=None,
        interval: int = 16,
        on_frame: Optional[Callable[[int], None]] = None
    ):
        self.tick = tick
        self.fig = fig
        self.interval = interval
        self.on_frame = on_frame
        self.frame = 0
        self.animation: Optional[FuncAnimation] = None

    def _update(self, frame: int):
        self.frame = frame
        self.tick()
        if self.on_frame:
            self.on_frame(frame)
        return []

    def run(self, frames: int) -> int:
        """Drive a fixed number of frames without a display."""
        for frame in range(frames):
            self._update(frame)
        return frames

    def start(self) -> FuncAnimation:
        if self.fig is None:
            raise ValueError("an interactive driver needs a figure")

        # Keep a reference: matplotlib stops animations that get garbage collected
        self.animation = FuncAnimation(
            self.fig, self._update,
            interval=self.interval,
            blit=False,
            cache_frame_data=False
        )
        return self.animation
