"""Procedural plasma animation renderer"""

from plasma_frames.config.render_config import RenderConfig, DEFAULT_CONFIG
from plasma_frames.core.frame_generator import Frame, FrameGenerator, generate_frames
from plasma_frames.errors import PlasmaError, ConfigError, FrameWriteError
from plasma_frames.vecmath.vector import Vec2, Vec4

__all__ = [
    "RenderConfig",
    "DEFAULT_CONFIG",
    "Frame",
    "FrameGenerator",
    "generate_frames",
    "PlasmaError",
    "ConfigError",
    "FrameWriteError",
    "Vec2",
    "Vec4",
]
