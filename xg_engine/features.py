"""
Shot geometry.

The probability model only uses `distance_to_goal` (normalized units).
Distance in metres, goal angle and zone are descriptive and are reported
alongside each shot's xG.
"""
import numpy as np

from .config import (
    GOAL_CENTER_X, GOAL_CENTER_Y,
    PITCH_LENGTH, PITCH_WIDTH, GOAL_WIDTH,
    SIX_YARD_BOX_DEPTH, SIX_YARD_BOX_HALF_WIDTH,
    PENALTY_BOX_DEPTH, PENALTY_BOX_HALF_WIDTH,
)


# Goal post positions in metres (constant)
GOAL_Y_LEFT_M = (PITCH_WIDTH - GOAL_WIDTH) / 2
GOAL_Y_RIGHT_M = (PITCH_WIDTH + GOAL_WIDTH) / 2

# Box edges in normalized units
SIX_YARD_X = 100 - SIX_YARD_BOX_DEPTH / PITCH_LENGTH * 100          # ~94.8
SIX_YARD_Y_MIN = 50 - SIX_YARD_BOX_HALF_WIDTH / PITCH_WIDTH * 50    # ~43.3
SIX_YARD_Y_MAX = 50 + SIX_YARD_BOX_HALF_WIDTH / PITCH_WIDTH * 50    # ~56.7
PENALTY_BOX_X = 100 - PENALTY_BOX_DEPTH / PITCH_LENGTH * 100        # ~84.3
PENALTY_BOX_Y_MIN = 50 - PENALTY_BOX_HALF_WIDTH / PITCH_WIDTH * 50  # ~35.2
PENALTY_BOX_Y_MAX = 50 + PENALTY_BOX_HALF_WIDTH / PITCH_WIDTH * 50  # ~64.8


def distance_to_goal(x, y):
    """Distance from shot location to goal center, in normalized pitch units."""
    return np.sqrt((GOAL_CENTER_X - x)**2 + (GOAL_CENTER_Y - y)**2)


def to_meters(x, y):
    """Convert normalized coordinates to metres on a standard pitch."""
    return x / 100 * PITCH_LENGTH, y / 100 * PITCH_WIDTH


def distance_to_goal_meters(x, y):
    """Distance from shot location to goal center, in metres."""
    x_m, y_m = to_meters(x, y)
    return np.sqrt((PITCH_LENGTH - x_m)**2 + (PITCH_WIDTH / 2 - y_m)**2)


def angle_to_goal(x, y):
    """
    Angle subtended by goal posts from shot location (degrees).
    Larger angle = more of goal visible.
    """
    x_m, y_m = to_meters(x, y)
    dx = PITCH_LENGTH - x_m

    angle_left = np.arctan2(GOAL_Y_LEFT_M - y_m, dx)
    angle_right = np.arctan2(GOAL_Y_RIGHT_M - y_m, dx)

    return np.clip(np.degrees(np.abs(angle_right - angle_left)), 0, 180)


def shot_zone(x, y):
    """Classify a shot location as 'six_yard_box', 'penalty_box' or 'outside_box'."""
    if x >= SIX_YARD_X and SIX_YARD_Y_MIN <= y <= SIX_YARD_Y_MAX:
        return 'six_yard_box'
    if x >= PENALTY_BOX_X and PENALTY_BOX_Y_MIN <= y <= PENALTY_BOX_Y_MAX:
        return 'penalty_box'
    return 'outside_box'
