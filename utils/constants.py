"""
Constants for the Ray Tracer Challenge programs.
"""

# Projectile launch settings
DEFAULT_START_POSITION = (0.0, 1.0, 0.0)
DEFAULT_LAUNCH_DIRECTION = (1.0, 1.0, 0.0)
DEFAULT_LAUNCH_SPEED = 100.0  # Applied to the normalized launch direction

# Environment acting on the projectile every tick
DEFAULT_GRAVITY = (0.0, -1.0, 0.0)
DEFAULT_WIND = (-0.01, 0.0, 0.0)

# Upper bound on simulation length
DEFAULT_MAX_TICKS = 10_000

# Logging settings
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
