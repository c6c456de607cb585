GAME_WIDTH = 800
GAME_HEIGHT = 600
FPS = 60
WINDOW_TITLE = "Wraparound Snake"

# Kinematics (per frame)
MAX_SPEED = 4.0
ACCEL_STEP = 0.1
TURN_RATE = 0.01
INITIAL_SPEED = 1.0
INITIAL_ANGLE = 0.0

# Length budget is measured in summed segment speed, not segment count
INITIAL_LENGTH = 100.0
MAX_LENGTH = 10000.0
FRUIT_GROWTH = 100.0

HEAD_RADIUS = 10.0
FRUIT_RADIUS = 16.0
FRUIT_VARIANTS = 5

# Most recent trail entries ignored by the self-collision check
SELF_COLLISION_SKIP = 100

# Explosion
POP_CHANCE = 0.1
POP_JITTER = 20.0
POP_FRAMES = 7
POP_DURATION = 60
POP_MAX_RADIUS = 18

DEAD_COOLDOWN = 2.0  # seconds

WHITE = (255,255,255)
BLACK = (0,0,0)
GREEN = (0,255,0)
DARK_GREEN = (0,150,0)
RED = (255,50,50)
YELLOW = (255,255,0)
ORANGE = (255, 165, 0)
PURPLE = (170, 80, 220)

BACKGROUND = (26, 51, 77)
FRUIT_COLORS = [RED, ORANGE, YELLOW, PURPLE, GREEN]
SNAKE_STRIPE_LENGTH = 12.0  # summed speed per body stripe

HIGHSCORE_FILE = "highscore.json"

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
