# client/screens.py
import logging

import pygame

from client.render import PygameCanvas, draw_session
from client.ui import Banner
from shared.constants import WIDTH, HEIGHT, GRAY
from shared.session import GameSession, InputState, SessionState

logger = logging.getLogger(__name__)

# key -> InputState flag
HOLD_KEYS = {
    pygame.K_z: "p1_negative",
    pygame.K_x: "p1_positive",
    pygame.K_LEFT: "p2_negative",
    pygame.K_RIGHT: "p2_positive",
}
START_KEY = pygame.K_SPACE

STATUS_TEXT = {
    SessionState.IDLE: "SPACE: start | Red: Z/X | Blue: LEFT/RIGHT",
    SessionState.RUNNING: "Red: Z/X | Blue: LEFT/RIGHT",
    SessionState.ENDED: "SPACE: restart",
}


class Screen:
    name = "base"
    def __init__(self, app): self.app = app
    def on_enter(self, **kwargs): pass
    def handle_event(self, event): pass
    def update(self): pass
    def draw(self, surface): pass


# -------------------- Game --------------------
class GameScreen(Screen):
    name = "game"
    def __init__(self, app, angle_source=None):
        super().__init__(app)
        self.small_font = pygame.font.SysFont(None, 24)
        self.banner = Banner(pygame.font.SysFont(None, 34))
        self.inputs = InputState()
        self.angle_source = angle_source
        self.session = None

    def on_enter(self, **kwargs):
        kw = {"notify": self.banner.show}
        if self.angle_source is not None:
            kw["angle_source"] = self.angle_source
        self.session = GameSession(**kw)
        self.inputs = InputState()
        self.banner.clear()

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            if event.key in HOLD_KEYS:
                setattr(self.inputs, HOLD_KEYS[event.key], True)
            elif event.key == START_KEY:
                self.inputs.request_start()
        elif event.type == pygame.KEYUP:
            if event.key in HOLD_KEYS:
                setattr(self.inputs, HOLD_KEYS[event.key], False)
        elif event.type == pygame.WINDOWFOCUSLOST:
            # key-ups are lost while unfocused
            self.inputs.release_all()

    def update(self):
        was_running = self.session.running
        self.session.tick(self.inputs)
        if self.session.running and not was_running:
            self.banner.clear()

    def draw(self, surface):
        draw_session(PygameCanvas(surface), self.session)

        status = self.small_font.render(STATUS_TEXT[self.session.state], True, GRAY)
        surface.blit(status, (10, 10))

        self.banner.draw(surface)
