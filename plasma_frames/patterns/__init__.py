"""
The plasma color field.

`color_field` is the per-pixel formula; `Plasma` binds it to a resolution
and renders rows or single pixels into RGB8.
"""

from plasma_frames.patterns.plasma import Plasma, color_field, phase, to_byte

__all__ = ["Plasma", "color_field", "phase", "to_byte"]
