# shared/entities.py
from dataclasses import dataclass, field
from typing import Tuple

from pygame.math import Vector2 as Vec2

from shared.constants import CENTER, WHITE, YELLOW
from shared.game_config import CFG
from shared.geometry import angle_in_arc_range, normalize_angle

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Arena:
    center: Vec2 = field(default_factory=lambda: Vec2(CENTER))
    radius: float = CFG.arena_radius
    color: Color = WHITE

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"arena radius must be positive, got {self.radius}")


@dataclass
class Paddle:
    angle: float                       # degrees, kept in [0, 360)
    color: Color
    half_width: float = CFG.half_width

    def __post_init__(self):
        self.angle = normalize_angle(self.angle)

    @property
    def start(self) -> float:
        return normalize_angle(self.angle - self.half_width)

    @property
    def end(self) -> float:
        return normalize_angle(self.angle + self.half_width)

    def rotate(self, delta: float):
        self.angle = normalize_angle(self.angle + delta)

    def covers(self, angle: float) -> bool:
        return angle_in_arc_range(angle, self.start, self.end)


@dataclass
class Ball:
    pos: Vec2
    vel: Vec2
    radius: float = CFG.ball_radius
    color: Color = YELLOW

    @property
    def speed(self) -> float:
        return self.vel.length()

    def distance_from(self, point: Vec2) -> float:
        return (self.pos - point).length()
