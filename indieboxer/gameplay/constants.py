"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# BOARD
# =============================================================================
BOARD_COLUMNS = 5     # cells, columns 0..4
BOARD_ROWS = 6        # cells, rows 0..5

GOAL_ROW = 0
ENEMY_ROWS = (1, 2, 3)
ROCK_ROW = 4
HOME_ROW = 5

HOME_CELL = (2, 5)    # where the player starts and lands after game over

# Pixel conversion used by the renderer contract
COL_WIDTH = 101
ROW_HEIGHT = 80
OFFSET_Y = 25

# Off-board parking spot for hidden items
OFFBOARD_CELL = (100, 100)

# =============================================================================
# PLAYER
# =============================================================================
PLAYER_BASE_SPEED = 5         # cells per second at level 1
STARTING_LIVES = 3

# =============================================================================
# LEVELS
# =============================================================================
LEVEL_BAND = 1000             # points per level
MAX_LEVEL = 10

# =============================================================================
# ENEMIES
# =============================================================================
ENEMY_MIN_SPEED = 1
ENEMY_MAX_SPEED = 4
ENEMY_POOL_SPEEDS = (1, 2, 2, 4, 4)
ENEMY_INITIAL_SLOTS = (1, 7)  # initial spawn columns -1..-7
ENEMY_RESPAWN_SLOTS = (1, 5)  # respawn columns -1..-5
CONVOY_DISTANCE = 1.0         # columns ahead that trigger speed matching

HIT_TOLERANCE = 0.5           # columns either side counted as a collision

# =============================================================================
# SCORING
# =============================================================================
DELIVERY_POINTS = {0: 100, 1: 50, 2: 25}
BOX_DESTROY_HITS = 3
BOX_LOST_PENALTY = 50
HEART_POINTS = 50

# =============================================================================
# HEART CADENCE (elapsed whole seconds)
# =============================================================================
HEART_APPEAR_EVERY = 30
HEART_HIDE_EVERY = 9
