"""
constants.py: Centralized configuration for game world, physics and rendering.
"""

# -------- Game World Config --------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
GROUND_HEIGHT = 50
BIRD_X = 100                    # Fixed bird X position
SPAWN_Y = 300                   # Bird Y after every reset
BIRD_SIZE = 30                  # Square hitbox edge (pixels)

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_GAP = 150
PIPE_SPEED = 2.0                # Horizontal scroll (pixels/tick)
PIPE_SPACING = 300              # Distance from the right edge before the next spawn
PIPE_TOP_RANGE = 350            # Ceiling for gap top + gap + margin
PIPE_TOP_MARGIN = 50            # Minimum top segment height

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.5                   # Added to velocity every tick
JUMP_IMPULSE = -8.0             # Velocity set by a flap (not accumulated)
JUMP_ROTATION = -20.0           # Nose-up angle on flap (degrees)
ROTATION_GAIN = 3.0             # Degrees per unit of velocity
MAX_ROTATION = 45.0             # Nose-down clamp (degrees)

# -------- Render Config --------
RENDER_FPS = 60                 # One simulation tick per rendered frame
DB_FILE = "flappy_scores.db"
DEFAULT_PROFILE = "local"
