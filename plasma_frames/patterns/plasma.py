import math
from typing import Tuple

import numpy as np

from plasma_frames.config.render_config import RenderConfig
from plasma_frames.vecmath.vector import F32, Vec2, Vec4

ITERATIONS = 8

# Per-channel weight of p.y in the final envelope (R, G, B, unused)
CHANNEL_TILT = Vec4(-1.0, 1.0, 2.0, 0.0)


def phase(frame: int, frames: int) -> np.float32:
    """Time value for a frame; frame 0 and frame `frames` share a phase"""
    return F32(frame) / F32(frames) * F32(2.0) * F32(math.pi)


def ring(p: Vec2) -> Vec2:
    """Radial ring term; sees p only through dot(p, p)"""
    return Vec2() + (F32(4.0) - F32(4.0) * np.abs(F32(0.7) - p.dot(p)))


def envelope(l: Vec2, p: Vec2) -> Vec4:
    return (l.x - F32(4.0) - p.y * CHANNEL_TILT).exp() * 5.0


def color_field(fc: Vec2, r: Vec2, t) -> Vec4:
    """Evaluate the plasma field at pixel coordinate fc for time t

    Returns the tanh-shaped color vector. Channels x, y, z are R, G, B;
    w is accumulated alongside them and carries no color.
    """
    p = (fc * 2.0 - r) / r.y
    l = ring(p)

    v = p * l
    o = Vec4()
    for iy in range(1, ITERATIONS + 1):
        iyf = F32(iy)
        v += (v.yx() * iyf + Vec2(0.0, iyf) + t).cos() / iyf + 0.7
        o += (v.xyyx().sin() + 1.0) * np.abs(v.x - v.y)

    return (envelope(l, p) / o).tanh()


def to_byte(channel) -> np.ndarray:
    """Clamp to [0, 1], scale to 255 and truncate toward zero"""
    c = np.clip(np.asarray(channel, dtype=F32), F32(0.0), F32(1.0))
    c = np.nan_to_num(c, nan=0.0)
    return (c * F32(255.0)).astype(np.uint8)


class Plasma:
    """The plasma color field bound to one output resolution"""

    def __init__(self, config: RenderConfig):
        self.width = config.width
        self.height = config.height
        self.resolution = Vec2(float(self.width), float(self.height))
        self._xs = np.arange(self.width, dtype=F32)

    def render_band(self, t, y0: int, y1: int) -> np.ndarray:
        """Render rows [y0, y1) as a (rows, width, 3) uint8 array"""
        ys = np.arange(y0, y1, dtype=F32)
        xs, ys = np.meshgrid(self._xs, ys)
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            o = color_field(Vec2(xs, ys), self.resolution, t)
            return np.stack([to_byte(o.x), to_byte(o.y), to_byte(o.z)], axis=-1)

    def render_pixel(self, x: int, y: int, t) -> Tuple[int, int, int]:
        """Render a single pixel with scalar arithmetic"""
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            o = color_field(Vec2(float(x), float(y)), self.resolution, t)
            return (int(to_byte(o.x)), int(to_byte(o.y)), int(to_byte(o.z)))
