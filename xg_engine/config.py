"""
Configuration constants for the xG engine.
"""
from pathlib import Path

# Heuristic parameters (see model.get_default_params)
PENALTY_XG = 0.76           # Historical penalty conversion rate
MAX_XG = 0.4                # Probability right at the goal mouth
MIN_XG = 0.02               # Floor: every shot keeps some chance
DISTANCE_DECAY_RATE = 0.006  # Per normalized unit; floor reached at ~63
HEADER_MULTIPLIER = 0.7     # Headers convert worse than footed shots
XG_EPSILON = 1e-6           # Lower clamp, xG is never exactly zero

# Output rounding (2 decimal places, half-up)
ROUND_DECIMALS = 2

# Outcome vocabulary
GOAL_OUTCOMES = {'goal', 'penalty_goal'}
PENALTY_OUTCOMES = {'penalty_goal', 'penalty_miss'}

# Normalized pitch (0-100 on both axes, attacking towards x=100)
GOAL_CENTER_X = 100
GOAL_CENTER_Y = 50

# Real pitch dimensions in metres, for descriptive geometry
PITCH_LENGTH = 105
PITCH_WIDTH = 68
GOAL_WIDTH = 7.32
SIX_YARD_BOX_DEPTH = 5.5
SIX_YARD_BOX_HALF_WIDTH = 9.16
PENALTY_BOX_DEPTH = 16.5
PENALTY_BOX_HALF_WIDTH = 20.16

# Fixed descriptive geometry reported for penalties
PENALTY_DISTANCE = 11.0
PENALTY_ANGLE = 45.0

# StatsBomb open data (120x80 yards)
STATSBOMB_PITCH_LENGTH = 120
STATSBOMB_PITCH_WIDTH = 80
COMPETITION_ID = 11  # La Liga
SEASON_ID = 27       # 2015/16

# Directories (created on first write)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
OUTPUT_DIR = BASE_DIR / "output"
