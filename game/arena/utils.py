"""
Utility functions for game mechanics
"""

from __future__ import annotations
import colorsys
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def normalize(x: float, y: float, eps: float = 1e-8) -> Tuple[float, float]:
    """Normalize a vector to unit length"""
    l = math.hypot(x, y)
    if l < eps:
        return 0.0, 0.0
    return x / l, y / l


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap (touching edges do not count)"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) < (rr * rr)


def box_overlap(cx, cy, half, left, top, right, bottom) -> bool:
    """Check if a square centred at (cx, cy) overlaps the box [left, right] x [top, bottom]"""
    return (cx + half > left and cx - half < right and
            cy + half > top and cy - half < bottom)


def hsl_color(hue: float, saturation: float = 1.0, lightness: float = 0.5) -> Tuple[int, int, int]:
    """Convert an HSL colour (hue in degrees) to an RGB tuple"""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness, saturation)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
