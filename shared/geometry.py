# shared/geometry.py
"""
Angular helpers for the circular arena.

Angles are in degrees with 0 along +x. Screen y grows downward, so positive
angles turn clockwise on screen. Everything else in the engine relies on
this convention.
"""
import math
from typing import List, Tuple

Point = Tuple[float, float]


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def radians_to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def normalize_angle(angle: float) -> float:
    """Map any finite degree value into [0, 360)."""
    angle = math.fmod(angle, 360.0)
    if angle < 0:
        angle += 360.0
    # fmod of a tiny negative value can round back up to exactly 360
    if angle >= 360.0:
        angle -= 360.0
    return angle


def point_on_circle(center: Point, radius: float, angle: float) -> Point:
    rad = degrees_to_radians(angle)
    cx, cy = center
    return cx + radius * math.cos(rad), cy + radius * math.sin(rad)


def angle_in_arc_range(angle: float, start: float, end: float) -> bool:
    """
    Membership test for the arc running clockwise from `start` to `end`.
    All three values must already be normalized; an arc with start > end
    wraps through 0.
    """
    if start > end:
        return angle >= start or angle <= end
    return start <= angle <= end


def arc_points(center: Point, radius: float, start: float, end: float, segments: int = 12) -> List[Point]:
    """Polyline along the arc from `start` to `end`, clockwise, unnormalized input allowed."""
    if end < start:
        end += 360.0
    segments = max(1, int(segments))
    step = (end - start) / segments
    return [point_on_circle(center, radius, start + i * step) for i in range(segments + 1)]
