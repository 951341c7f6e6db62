"""
Player vs hazard overlap tests
"""

from __future__ import annotations
import math

from .config import HITBOX_BUFFER
from .entities import Player, Hazard, SlashHazard, BigProjectile, HomingProjectile, AreaTrap
from .utils import box_overlap, circle_collide


def collides(player: Player, hazard: Hazard) -> bool:
    """Return True if the hazard is lethal and overlaps the player.

    Boundaries are strict everywhere: shapes that only touch do not collide.
    Slashes in their warning phase and traps that have not armed yet never
    collide, whatever their geometry.
    """
    if isinstance(hazard, SlashHazard):
        return _slash_collides(player, hazard)
    if isinstance(hazard, (BigProjectile, HomingProjectile)):
        return circle_collide(player.x, player.y, player.half,
                              hazard.x, hazard.y, hazard.radius)
    if isinstance(hazard, AreaTrap):
        if not hazard.active:
            return False
        return box_overlap(player.x, player.y, player.half,
                           hazard.x, hazard.y,
                           hazard.x + hazard.size, hazard.y + hazard.size)
    raise TypeError(f"Unknown hazard type: {type(hazard).__name__}")


def _slash_collides(player: Player, slash: SlashHazard) -> bool:
    if slash.warning:
        return False

    if not slash.is_diagonal:
        b = HITBOX_BUFFER
        return box_overlap(player.x, player.y, player.half,
                           slash.x - b, slash.y - b,
                           slash.x + slash.width + b, slash.y + slash.height + b)

    # Diagonal bands are approximated by a circle around the unrotated centre
    cx, cy = slash.center
    return math.hypot(player.x - cx, player.y - cy) < slash.thickness


def first_collision(player: Player, hazards):
    """Return the first hazard hitting the player, or None"""
    for hazard in hazards:
        if collides(player, hazard):
            return hazard
    return None
