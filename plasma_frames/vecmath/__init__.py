from plasma_frames.vecmath.vector import F32, Vec2, Vec4, dot, f32

__all__ = ["F32", "Vec2", "Vec4", "dot", "f32"]
