# client/ui.py
import pygame

from shared.constants import BLACK, WHITE


class Banner:
    """Overlay message; set and forget, it stays up until cleared."""

    def __init__(self, font, fg=WHITE, bg=(0, 0, 0, 170)):
        self.font = font
        self.fg = fg
        self.bg = bg
        self.text = None

    def show(self, text):
        self.text = text

    def clear(self):
        self.text = None

    @property
    def visible(self):
        return self.text is not None

    def draw(self, surface):
        if not self.text:
            return
        w, h = surface.get_size()
        img = self.font.render(self.text, True, self.fg)
        box = img.get_rect(center=(w // 2, h // 2)).inflate(40, 28)

        overlay = pygame.Surface(box.size, pygame.SRCALPHA)
        overlay.fill(self.bg)
        surface.blit(overlay, box.topleft)
        pygame.draw.rect(surface, self.fg, box, width=2, border_radius=10)

        shadow = self.font.render(self.text, True, BLACK)
        rect = img.get_rect(center=box.center)
        surface.blit(shadow, (rect.x + 1, rect.y + 1))
        surface.blit(img, rect)
