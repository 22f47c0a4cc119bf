from plasma_frames.core.frame_generator import (
    Frame,
    FrameGenerator,
    FrameSink,
    generate_frames,
)

__all__ = ["Frame", "FrameGenerator", "FrameSink", "generate_frames"]
