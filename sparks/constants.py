#!/usr/bin/env python3
"""
Shared constants for the Sparks animations (pixels and frames unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
simulation core and the renderer.
"""

# Canvas (fixed surface)
CANVAS_WIDTH = 500
CANVAS_HEIGHT = 500
CANVAS_CENTER = (CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2)

# Frame pacing
DEFAULT_FPS = 60

# Particles
PARTICLE_TRAIL_LENGTH = 5
PARTICLE_FRICTION = 0.95
PARTICLE_GRAVITY = 0.0
PARTICLE_SPEED_RANGE = (1.0, 10.0)  # px per frame
PARTICLE_BRIGHTNESS_RANGE = (50.0, 80.0)  # HSL lightness, percent
PARTICLE_DECAY_RANGE = (0.015, 0.03)  # alpha lost per frame

# Projectiles (lasers)
PROJECTILE_TRAIL_LENGTH = 3
PROJECTILE_START_SPEED = 2.0  # px per frame
PROJECTILE_ACCELERATION = 1.05  # speed multiplier per frame
PROJECTILE_BRIGHTNESS_RANGE = (50.0, 70.0)
TARGET_RADIUS_MIN = 1.0
TARGET_RADIUS_MAX = 8.0
TARGET_RADIUS_STEP = 0.3

# Explosions
EXPLOSION_PARTICLE_COUNT = 30

# Drifting dot
DOT_STEP = 3  # px per frame on each axis
DOT_SIZE = 3  # px

# Rendering
BACKGROUND_COLOR = (0, 0, 0)
DOT_COLOR = (255, 255, 255)
HUD_TEXT_COLOR = (200, 200, 200)
PROJECTILE_HUE = 30  # degrees
PARTICLE_HUE = 30

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
