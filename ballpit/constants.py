# --- Window ---
WIDTH, HEIGHT = 1000, 700
FPS = 60
DEBUG = False

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

PARTICLE_COLOR = (255, 255, 255)  # gravity mode, drawn at 40% over black
PARTICLE_ALPHA = 0.4
CENTER_OF_MASS_COLOR = RED
CENTER_OF_MASS_SIZE = 10
TRAIL_ALPHA = 26  # ~0.1 opacity fade per frame

# --- Gravity (N-body) ---
G = 0.2
GRAVITY_MAX_VELOCITY = 10000.0
GROWTH_INCREMENT = 0.3
INITIAL_RADIUS = 1.0
TRANSLATE_STEP = 15

# --- Pretty balls ---
NUM_PARTICLES = 200
ELASTIC_MAX_VELOCITY = 50.0
ACCELERATION_FACTOR = 0.002
DAMPING_FACTOR = 0.998
RADIUS_RANGE = (2.0, 10.0)
SPEED_RANGE = (-1.0, 1.0)
MOUSE_THRESHOLD_DIVISOR = 6
