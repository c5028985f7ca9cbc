"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# GRID
# =============================================================================
GRID_SIZE = 20               # cells per side (square grid)

# =============================================================================
# PLAYER
# =============================================================================
PLAYER_SPEED = 2.0           # cells per move command
STARTING_HEALTH = 10
STARTING_LEVEL = 1

# =============================================================================
# COMBAT
# =============================================================================
SHOOT_RANGE = 50.0           # larger than the grid diagonal, so shots never miss
HIT_RADIUS = 1.0             # enemy this close hits the player
KILL_SCORE = 10              # points per kill, before the multiplier

# =============================================================================
# WAVES
# =============================================================================
BASE_ENEMY_COUNT = 10
ENEMIES_PER_LEVEL = 5        # wave size = BASE_ENEMY_COUNT + level * ENEMIES_PER_LEVEL
ENEMY_BASE_SPEED = 0.5
ENEMY_SPEED_PER_LEVEL = 0.2  # speed = ENEMY_BASE_SPEED + level * ENEMY_SPEED_PER_LEVEL

# =============================================================================
# TIMING (all in seconds)
# =============================================================================
TICK_DELAY = 0.15
MENU_RETRY_DELAY = 0.5

# =============================================================================
# PERSISTENCE
# =============================================================================
HIGH_SCORE_FILE = "highscore.txt"
