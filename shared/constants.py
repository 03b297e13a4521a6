# shared/constants.py

APP_TITLE = "Circle Pong"
WIDTH, HEIGHT = 600, 600
CENTER = (WIDTH // 2, HEIGHT // 2)
FPS = 60

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (150, 150, 150)
RED = (255, 68, 68)
BLUE = (68, 68, 255)
YELLOW = (255, 255, 68)
