# shared/game_config.py
from dataclasses import dataclass

@dataclass(frozen=True)
class ArenaConfig:
    arena_radius: float = 280.0
    ball_radius: float = 8.0
    ball_speed: float = 3.0          # px per tick

    paddle_arc: float = 10.0         # degrees, full length
    paddle_speed: float = 2.0        # degrees per tick
    paddle_thickness: int = 15       # visual
    border_width: int = 3            # visual

    reflect_margin: float = 5.0      # pulled back inside after a hit

    paddle1_angle: float = 45.0
    paddle2_angle: float = 225.0     # opposite side

    @property
    def half_width(self) -> float:
        return self.paddle_arc / 2

    def validate(self) -> "ArenaConfig":
        if self.arena_radius <= 0:
            raise ValueError(f"arena_radius must be positive, got {self.arena_radius}")
        if self.ball_radius <= 0 or self.ball_radius + self.reflect_margin >= self.arena_radius:
            raise ValueError("ball does not fit inside the arena")
        if self.ball_speed <= 0:
            raise ValueError(f"ball_speed must be positive, got {self.ball_speed}")
        if not 0 < self.paddle_arc < 180:
            raise ValueError(f"paddle_arc must be in (0, 180) degrees, got {self.paddle_arc}")
        return self

CFG = ArenaConfig().validate()
