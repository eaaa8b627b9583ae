"""
Utility functions for game mechanics
"""

from __future__ import annotations


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def circle_rect_collide(cx: float, cy: float, radius: float,
                        rx: float, ry: float, rw: float, rh: float) -> bool:
    """Check if a circle overlaps an axis-aligned rectangle."""
    # Find closest point on rect to circle center
    closest_x = clamp(cx, rx, rx + rw)
    closest_y = clamp(cy, ry, ry + rh)
    dx = cx - closest_x
    dy = cy - closest_y
    return (dx * dx + dy * dy) < (radius * radius)
