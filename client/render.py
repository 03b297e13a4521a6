# client/render.py
import pygame
from pygame.math import Vector2 as Vec2

from shared.constants import BLACK
from shared.geometry import arc_points
from shared.session import GameSession


class PygameCanvas:
    """The four draw commands the game needs, on top of a pygame surface."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def clear(self, color):
        self.surface.fill(color)

    def stroke_circle(self, center, radius, color, width):
        pygame.draw.circle(self.surface, color, (int(center[0]), int(center[1])), int(radius), int(width))

    def stroke_arc(self, center, radius, start, end, color, width):
        # filled band between radius -/+ width/2; thick draw.arc and draw.lines leave gaps
        c = (center[0], center[1])
        outer = arc_points(c, radius + width / 2, start, end)
        inner = arc_points(c, radius - width / 2, start, end)
        pygame.draw.polygon(self.surface, color, outer + inner[::-1])

    def fill_disk(self, center, radius, color):
        pygame.draw.circle(self.surface, color, (int(center[0]), int(center[1])), int(radius))


def draw_session(canvas, session: GameSession):
    cfg = session.cfg
    arena = session.arena
    center = Vec2(arena.center)

    canvas.clear(BLACK)
    canvas.stroke_circle(center, arena.radius, arena.color, cfg.border_width)

    for p in session.paddles:
        canvas.stroke_arc(center, arena.radius, p.angle - p.half_width, p.angle + p.half_width,
                          p.color, cfg.paddle_thickness)

    b = session.ball
    canvas.fill_disk(b.pos, b.radius, b.color)
