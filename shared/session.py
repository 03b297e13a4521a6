# shared/session.py
import enum
import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, Optional

from pygame.math import Vector2 as Vec2

from shared.collision import Contact, advance_ball
from shared.constants import BLUE, RED
from shared.entities import Arena, Ball, Paddle
from shared.game_config import CFG, ArenaConfig
from shared.geometry import degrees_to_radians

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "GAME OVER! Press SPACE to restart"


class SessionState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass
class InputState:
    """Held control keys, written by the host between ticks."""
    p1_negative: bool = False
    p1_positive: bool = False
    p2_negative: bool = False
    p2_positive: bool = False

    # edge-triggered: set once per press, cleared by the tick that reads it
    start_requested: bool = False

    def request_start(self):
        self.start_requested = True

    def consume_start(self) -> bool:
        requested = self.start_requested
        self.start_requested = False
        return requested

    def release_all(self):
        self.p1_negative = self.p1_positive = False
        self.p2_negative = self.p2_positive = False


def random_angle() -> float:
    return random.random() * 360


class GameSession:
    """
    One game: arena, two paddles, a ball and the idle/running/ended machine.

    Only this class changes `state`. The collision step reports an escape and
    the session turns that into the Running -> Ended transition.
    """

    def __init__(
        self,
        cfg: ArenaConfig = CFG,
        angle_source: Callable[[], float] = random_angle,
        notify: Optional[Callable[[str], None]] = None,
        arena: Optional[Arena] = None,
    ):
        self.cfg = cfg.validate()
        self.arena = arena or Arena(radius=cfg.arena_radius)
        self.angle_source = angle_source
        self.notify = notify

        self.paddles = [
            Paddle(cfg.paddle1_angle, RED, cfg.half_width),
            Paddle(cfg.paddle2_angle, BLUE, cfg.half_width),
        ]
        self.ball = Ball(Vec2(self.arena.center), Vec2(0, 0), cfg.ball_radius)

        self.state = SessionState.IDLE
        self.message: Optional[str] = None

        # the ball is placed and aimed before the first start, like a fresh page
        self.reset_ball()

    @property
    def running(self) -> bool:
        return self.state == SessionState.RUNNING

    # ---------------- Transitions ----------------
    def reset_ball(self):
        rad = degrees_to_radians(self.angle_source())
        self.ball.pos = Vec2(self.arena.center)
        self.ball.vel = Vec2(math.cos(rad), math.sin(rad)) * self.cfg.ball_speed

    def start(self) -> bool:
        if self.running:
            return False
        prev = self.state
        self.reset_ball()
        self.message = None
        self.state = SessionState.RUNNING
        logger.info("session %s -> %s", prev.value, self.state.value)
        return True

    def _end(self):
        self.state = SessionState.ENDED
        self.message = GAME_OVER_MESSAGE
        logger.info("session running -> ended (ball escaped)")
        if self.notify is not None:
            self.notify(self.message)

    # ---------------- Per tick ----------------
    def update_paddles(self, inputs: InputState):
        step = self.cfg.paddle_speed
        p1, p2 = self.paddles

        # paddles move in every state, the frozen ball is unaffected
        if inputs.p1_negative:
            p1.rotate(-step)
        if inputs.p1_positive:
            p1.rotate(step)
        if inputs.p2_negative:
            p2.rotate(-step)
        if inputs.p2_positive:
            p2.rotate(step)

    def step_ball(self) -> Contact:
        if not self.running:
            return Contact.NONE

        contact = advance_ball(self.arena, self.ball, self.paddles, self.cfg.reflect_margin)
        if contact == Contact.ESCAPE:
            self._end()
        return contact

    def tick(self, inputs: InputState) -> Contact:
        if inputs.consume_start():
            self.start()
        self.update_paddles(inputs)
        return self.step_ball()
