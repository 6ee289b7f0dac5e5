"""
Scene constants and configuration for the Sphere Caster renderer.
"""
import sys

# Floating point
VECTOR_EPSILON = sys.float_info.epsilon

# Canvas
DEFAULT_WIDTH = 2048
DEFAULT_HEIGHT = 1080
BACKGROUND_HEX = "#e6af2e"

# Random scene generation
DEFAULT_SPHERE_COUNT = 200
DEFAULT_SEED = 0
MAX_DEPTH = 1000.0
MIN_RADIUS = 0.0
MAX_RADIUS = 50.0
CHANNEL_MAX_EXCLUSIVE = 255  # Channels drawn from [0, 255)
OPAQUE = 255

# Light
LIGHT_DEPTH = 0.0
LIGHT_BRIGHTNESS = 1.0

# Orthographic camera: every primary ray points along +Z from the z = 0 plane.
RAY_DIRECTION = (0.0, 0.0, 1.0)

# Output
OUTPUT_DIR = "output"
DEFAULT_OUTPUT = "output/render.png"
