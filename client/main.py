# client/main.py
import logging
import os
import random
import sys
import pygame

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from shared.constants import APP_TITLE, WIDTH, HEIGHT, FPS, BLACK, WHITE
from client.screens import GameScreen

logger = logging.getLogger(__name__)


def seeded_angle_source(seed):
    rng = random.Random(int(seed))
    return lambda: rng.random() * 360


class App:
    def __init__(self):
        pygame.init()
        pygame.display.set_caption(APP_TITLE)
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 22)

        # Reproducible serve directions:
        #   ARENA_SEED=42 python client/main.py
        self.fps = int(os.getenv("ARENA_FPS", str(FPS)))
        seed = os.getenv("ARENA_SEED")
        angle_source = None
        if seed is not None:
            angle_source = seeded_angle_source(seed)
            logger.info("serve directions seeded with %s", seed)

        self.current = GameScreen(self, angle_source=angle_source)
        self.current.on_enter()
        self.running = True

    def handle_global_keys(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False

    def draw_footer(self):
        text = "ESC: Quit"
        img = self.font.render(text, True, WHITE)
        rect = img.get_rect(midbottom=(WIDTH // 2, HEIGHT - 8))
        shadow = self.font.render(text, True, BLACK)
        self.screen.blit(shadow, (rect.x + 1, rect.y + 1))
        self.screen.blit(img, rect)

    def step(self):
        # one fixed step per frame, the elapsed time is ignored
        self.clock.tick(self.fps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            self.handle_global_keys(event)
            self.current.handle_event(event)

        self.current.update()

        self.current.draw(self.screen)
        self.draw_footer()
        pygame.display.flip()

    def run(self):
        logger.info("running at %d fps", self.fps)
        try:
            while self.running:
                self.step()
        finally:
            pygame.quit()


def main():
    logging.basicConfig(
        level=os.getenv("ARENA_LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    App().run()


if __name__ == "__main__":
    main()
