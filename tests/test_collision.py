import math
import unittest

from pygame.math import Vector2 as Vec2

from shared.collision import Contact, advance_ball, contact_angle, inward_normal, reflect
from shared.constants import BLUE, RED
from shared.entities import Arena, Ball, Paddle


def radial_ball(arena, angle, dist, speed=3.0):
    rad = math.radians(angle)
    direction = Vec2(math.cos(rad), math.sin(rad))
    return Ball(arena.center + direction * dist, direction * speed, radius=8)


class TestReflect(unittest.TestCase):
    def test_preserves_speed(self) -> None:
        for v in (Vec2(3, 0), Vec2(-1.5, 2.2), Vec2(0.1, -7)):
            for deg in (0, 33, 90, 181, 270, 333):
                n = Vec2(1, 0).rotate(deg)
                self.assertAlmostEqual(reflect(v, n).length(), v.length(), places=9)

    def test_head_on_reverses(self) -> None:
        out = reflect(Vec2(3, 0), Vec2(-1, 0))
        self.assertAlmostEqual(out.x, -3)
        self.assertAlmostEqual(out.y, 0)

    def test_inward_normal_zero_length(self) -> None:
        arena = Arena(center=Vec2(300, 300), radius=280)
        self.assertIsNone(inward_normal(arena, Vec2(300, 300)))
        n = inward_normal(arena, Vec2(400, 300))
        self.assertAlmostEqual(n.x, -1)


class TestAdvanceBall(unittest.TestCase):
    def setUp(self) -> None:
        self.arena = Arena(center=Vec2(300, 300), radius=280)

    def test_free_flight_moves_by_velocity(self) -> None:
        ball = Ball(Vec2(300, 300), Vec2(3, -1), radius=8)
        paddles = [Paddle(45, RED, 5), Paddle(225, BLUE, 5)]
        self.assertEqual(advance_ball(self.arena, ball, paddles, 5), Contact.NONE)
        self.assertEqual(ball.pos, Vec2(303, 299))

    def test_hit_reflects_and_pulls_back(self) -> None:
        ball = radial_ball(self.arena, 45, 277)
        paddles = [Paddle(45, RED, 5), Paddle(225, BLUE, 5)]

        self.assertEqual(advance_ball(self.arena, ball, paddles, 5), Contact.HIT)
        self.assertAlmostEqual(ball.distance_from(self.arena.center), 267, places=6)

        outward = (ball.pos - self.arena.center).normalize()
        self.assertLessEqual(ball.vel.dot(outward), 0)
        self.assertAlmostEqual(ball.vel.dot(outward), -3, places=6)
        self.assertAlmostEqual(ball.speed, 3, places=9)

    def test_oblique_hit_keeps_speed(self) -> None:
        ball = radial_ball(self.arena, 100, 271)
        ball.vel = Vec2(2, 2.2)
        speed = ball.speed
        paddles = [Paddle(100, RED, 5), Paddle(280, BLUE, 5)]

        self.assertEqual(advance_ball(self.arena, ball, paddles, 5), Contact.HIT)
        self.assertAlmostEqual(ball.speed, speed, places=9)
        self.assertAlmostEqual(ball.distance_from(self.arena.center), 267, places=6)

    def test_second_paddle_also_counts(self) -> None:
        ball = radial_ball(self.arena, 225, 277)
        paddles = [Paddle(45, RED, 5), Paddle(225, BLUE, 5)]
        self.assertEqual(advance_ball(self.arena, ball, paddles, 5), Contact.HIT)

    def test_paddle_across_seam(self) -> None:
        ball = radial_ball(self.arena, 358, 277)
        paddles = [Paddle(2, RED, 5), Paddle(180, BLUE, 5)]
        self.assertEqual(advance_ball(self.arena, ball, paddles, 5), Contact.HIT)

    def test_exact_contact_counts(self) -> None:
        # 272 + 8 lands exactly on the rim
        paddles = [Paddle(200, RED, 5), Paddle(225, BLUE, 5)]
        ball = Ball(Vec2(569, 300), Vec2(3, 0), radius=8)
        self.assertEqual(advance_ball(self.arena, ball, paddles, 5), Contact.ESCAPE)
        self.assertEqual(ball.pos, Vec2(572, 300))

        paddles = [Paddle(0, RED, 5), Paddle(180, BLUE, 5)]
        ball = Ball(Vec2(569, 300), Vec2(3, 0), radius=8)
        self.assertEqual(advance_ball(self.arena, ball, paddles, 5), Contact.HIT)
        self.assertEqual(ball.vel, Vec2(-3, 0))

    def test_just_short_of_rim_is_free(self) -> None:
        paddles = [Paddle(200, RED, 5), Paddle(225, BLUE, 5)]
        ball = Ball(Vec2(568, 300), Vec2(3, 0), radius=8)
        self.assertEqual(advance_ball(self.arena, ball, paddles, 5), Contact.NONE)

    def test_ball_on_center_is_skipped(self) -> None:
        # arena smaller than the ball: contact while sitting on the center
        arena = Arena(center=Vec2(300, 300), radius=5)
        ball = Ball(Vec2(300, 300), Vec2(0, 0), radius=8)
        paddles = [Paddle(0, RED, 5), Paddle(180, BLUE, 5)]

        self.assertEqual(advance_ball(arena, ball, paddles, 1), Contact.DEGENERATE)
        self.assertEqual(ball.vel, Vec2(0, 0))
        self.assertEqual(ball.pos, Vec2(300, 300))

    def test_miss_escapes_and_leaves_ball(self) -> None:
        ball = radial_ball(self.arena, 45, 277)
        paddles = [Paddle(200, RED, 5), Paddle(225, BLUE, 5)]

        self.assertEqual(advance_ball(self.arena, ball, paddles, 5), Contact.ESCAPE)
        self.assertAlmostEqual(ball.distance_from(self.arena.center), 280, places=6)
        self.assertAlmostEqual(ball.speed, 3)

    def test_contact_angle(self) -> None:
        self.assertAlmostEqual(contact_angle(self.arena, Vec2(300, 200)), 270)
        self.assertAlmostEqual(contact_angle(self.arena, Vec2(400, 400)), 45)


if __name__ == "__main__":
    unittest.main()
