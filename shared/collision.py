# shared/collision.py
"""
Ball against the arena rim.

Detection is sampled once per tick on the ball's new position; a ball fast
enough to jump past the rim between two samples is not caught.
"""
import enum
import logging
import math
from typing import Iterable, Optional

from pygame.math import Vector2 as Vec2

from shared.entities import Arena, Ball, Paddle
from shared.geometry import normalize_angle, radians_to_degrees

logger = logging.getLogger(__name__)


class Contact(enum.Enum):
    NONE = "none"
    HIT = "hit"
    ESCAPE = "escape"
    DEGENERATE = "degenerate"   # ball sits on the center, nothing to reflect off


def reflect(velocity: Vec2, normal: Vec2) -> Vec2:
    """Mirror `velocity` about a unit `normal`; the magnitude is unchanged."""
    dot = velocity.dot(normal)
    return velocity - normal * (2 * dot)


def inward_normal(arena: Arena, position: Vec2) -> Optional[Vec2]:
    center_to_ball = position - arena.center
    length = center_to_ball.length()
    if length == 0:
        return None
    return -center_to_ball / length


def contact_angle(arena: Arena, position: Vec2) -> float:
    return normalize_angle(radians_to_degrees(
        math.atan2(position.y - arena.center.y, position.x - arena.center.x)
    ))


def advance_ball(arena: Arena, ball: Ball, paddles: Iterable[Paddle], margin: float) -> Contact:
    ball.pos += ball.vel

    dist = ball.distance_from(arena.center)
    if dist + ball.radius < arena.radius:
        return Contact.NONE

    angle = contact_angle(arena, ball.pos)

    hit = False
    for p in paddles:
        if p.covers(angle):
            hit = True

    if not hit:
        logger.debug("ball escaped at %.1f deg", angle)
        return Contact.ESCAPE

    nrm = inward_normal(arena, ball.pos)
    if nrm is None:
        return Contact.DEGENERATE

    ball.vel = reflect(ball.vel, nrm)
    # back inside along the same radial line
    ball.pos = arena.center - nrm * (arena.radius - ball.radius - margin)
    logger.debug("paddle hit at %.1f deg", angle)
    return Contact.HIT
