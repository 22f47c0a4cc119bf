#!/usr/bin/env python3

import time
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

import numpy as np

from plasma_frames.config.render_config import RenderConfig, DEFAULT_CONFIG
from plasma_frames.patterns.plasma import Plasma, phase

logger = logging.getLogger(__name__)

# (frame_index, width, raw_rgb_bytes); the bytes are only valid during the call
FrameSink = Callable[[int, int, memoryview], None]


@dataclass
class Frame:
    """Represents a single rendered frame of the animation"""

    index: int
    width: int
    height: int
    time: float
    data: bytes


class FrameGenerator:
    """Renders the plasma animation frame by frame into a reused RGB buffer"""

    def __init__(
        self, config: RenderConfig = DEFAULT_CONFIG, workers: Optional[int] = None
    ):
        self.config = config
        self.width = config.width
        self.height = config.height
        self.frame_count = config.frames
        self.workers = workers if workers is not None else config.workers
        if min(self.width, self.height, self.frame_count, self.workers) < 1:
            raise ValueError(
                f"Invalid render size {self.width}x{self.height}, "
                f"{self.frame_count} frames, {self.workers} workers"
            )

        self.plasma = Plasma(config)

        # RGB buffer reused every frame
        self.buffer = bytearray(config.frame_size)
        self._pixels = np.frombuffer(self.buffer, dtype=np.uint8).reshape(
            self.height, self.width, 3
        )

        # Performance tracking
        self.frame_times: List[float] = []

    def frame_time(self, frame: int) -> np.float32:
        return phase(frame, self.frame_count)

    def _bands(self) -> List[Tuple[int, int]]:
        """Split rows into one contiguous band per worker"""
        count = min(self.workers, self.height)
        step, extra = divmod(self.height, count)
        bands = []
        y0 = 0
        for i in range(count):
            y1 = y0 + step + (1 if i < extra else 0)
            bands.append((y0, y1))
            y0 = y1
        return bands

    def _render_band(self, t, y0: int, y1: int):
        self._pixels[y0:y1] = self.plasma.render_band(t, y0, y1)

    def render_frame(
        self, frame: int, executor: Optional[ThreadPoolExecutor] = None
    ) -> bytearray:
        """Overwrite the buffer with every pixel of one frame"""
        t = self.frame_time(frame)
        if executor is None:
            for y0, y1 in self._bands():
                self._render_band(t, y0, y1)
        else:
            # Bands write disjoint rows; join them all before handing off
            futures = [
                executor.submit(self._render_band, t, y0, y1)
                for y0, y1 in self._bands()
            ]
            for future in futures:
                future.result()
        return self.buffer

    def generate(self, write_frame: FrameSink) -> int:
        """Render every frame in order and hand each one to write_frame

        The sink receives a read-only view of the shared buffer. The view is
        released when the sink returns, so a sink that needs the pixels
        later must copy them.
        """
        executor = self._executor()
        started = time.perf_counter()
        try:
            for frame in range(self.frame_count):
                frame_start = time.perf_counter()
                self.render_frame(frame, executor)
                elapsed = time.perf_counter() - frame_start
                self.frame_times.append(elapsed)
                logger.debug(f"Rendered frame {frame} in {elapsed * 1000:.1f}ms")

                view = memoryview(self.buffer).toreadonly()
                try:
                    write_frame(frame, self.width, view)
                finally:
                    view.release()
        finally:
            if executor is not None:
                executor.shutdown(wait=True)

        total = time.perf_counter() - started
        logger.info(
            f"Generated {self.frame_count} frames of {self.width}x{self.height} "
            f"in {total:.2f}s ({self.workers} worker(s))"
        )
        return self.frame_count

    def frames(self) -> Iterator[Frame]:
        """Yield each frame as an independent copy of the buffer"""
        executor = self._executor()
        try:
            for frame in range(self.frame_count):
                self.render_frame(frame, executor)
                yield Frame(
                    index=frame,
                    width=self.width,
                    height=self.height,
                    time=float(self.frame_time(frame)),
                    data=bytes(self.buffer),
                )
        finally:
            if executor is not None:
                executor.shutdown(wait=True)

    def _executor(self) -> Optional[ThreadPoolExecutor]:
        if self.workers > 1:
            return ThreadPoolExecutor(max_workers=self.workers)
        return None


def generate_frames(
    write_frame: FrameSink, config: RenderConfig = DEFAULT_CONFIG
) -> int:
    """Render the whole animation described by config into write_frame"""
    return FrameGenerator(config).generate(write_frame)
