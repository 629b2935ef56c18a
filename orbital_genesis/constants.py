"""Application-wide constants for Orbital Genesis."""

# --- Display ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Orbital Genesis"

# --- Colors (RGB) ---
SPACE_BLACK = (5, 5, 5)
WHITE = (255, 255, 255)
LIGHT_GREY = (180, 180, 190)
MID_GREY = (110, 110, 120)
STAR_WHITE = (220, 220, 235)
ASTEROID_GREY = (85, 85, 85)

# Orbit rings
PLANET_ORBIT_COLOR = (45, 45, 50)
MOON_ORBIT_COLOR = (28, 28, 32)

# HUD / UI accent colors
CYAN = (34, 211, 238)

# --- UI Panel ---
PANEL_BG = (17, 24, 39, 220)
PANEL_BORDER = (60, 60, 80)

# --- Metadata ---
APP_TITLE = "ORBITAL"
APP_TITLE_ACCENT = "GENESIS"
APP_SUBTITLE = "PROCEDURAL SYSTEM VISUALIZER"
APP_VERSION = "1.0.0"

# --- Simulation clock ---
TIME_SCALE = 3.0  # Simulated time per real second at 1x (0.05 per frame at 60 FPS)
SPEED_OPTIONS = (0.5, 1.0, 2.0, 5.0)
BELT_TIME_SCALE = 0.001  # Belt particles drift much slower than planets

# --- Camera ---
DEFAULT_ZOOM = 0.3
MIN_ZOOM = 0.1
MAX_ZOOM = 5.0
ZOOM_STEP = 0.1
WHEEL_ZOOM_FACTOR = 0.1  # Relative zoom change per wheel notch
MOON_ORBIT_MIN_ZOOM = 0.5  # Moon rings only drawn when zoomed in past this
HOVER_RADIUS = 15  # Minimum hit radius in screen pixels

# --- Units ---
PIXELS_PER_AU = 100.0

# --- Star field ---
NUM_BACKGROUND_STARS = 100
STAR_PARALLAX = 0.05
