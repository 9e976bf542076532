"""
Heuristic xG model: distance-only linear decay with a floor.

    base = max(min_xg, max_xg - distance * decay_rate)

Headers are scaled down by a fixed multiplier and penalties bypass the
geometry with a fixed conversion rate. All functions are pure.
"""
import numpy as np

from .config import (
    PENALTY_XG, MAX_XG, MIN_XG, DISTANCE_DECAY_RATE, HEADER_MULTIPLIER,
    XG_EPSILON, ROUND_DECIMALS, PENALTY_DISTANCE, PENALTY_ANGLE,
)
from .features import distance_to_goal, distance_to_goal_meters, angle_to_goal, shot_zone
from .shots import is_goal_outcome, shots_from_dataframe


def get_default_params():
    """
    Return the default heuristic parameters.

    With these defaults every non-penalty xG lies strictly inside (0, 1) and a
    header is always strictly below the same footed shot. Overrides can break
    that: a max_xg of 1/0.7 or more clamps both to 1 near goal, and min_xg=0
    clamps both to XG_EPSILON at long range.
    """
    return {
        'penalty_xg': PENALTY_XG,
        'max_xg': MAX_XG,
        'min_xg': MIN_XG,
        'decay_rate': DISTANCE_DECAY_RATE,
        'header_multiplier': HEADER_MULTIPLIER,
    }


def _resolve_params(params):
    resolved = get_default_params()
    if params is not None:
        resolved.update(params)
    return resolved


def round_half_up(value, decimals=ROUND_DECIMALS):
    """
    Round halves upwards, e.g. 0.125 -> 0.13.

    Python's round() uses banker's rounding; dashboard figures are rounded
    with floor(v * 100 + 0.5) / 100, which this reproduces.
    """
    factor = 10 ** decimals
    return float(np.floor(value * factor + 0.5) / factor)


def calculate_xg_value(x, y, is_header=False, is_penalty=False, params=None):
    """Goal probability in (0, 1] for a single shot described by its fields."""
    p = _resolve_params(params)

    if is_penalty:
        xg = p['penalty_xg']
    else:
        distance = distance_to_goal(x, y)
        xg = max(p['min_xg'], p['max_xg'] - distance * p['decay_rate'])
        if is_header:
            xg *= p['header_multiplier']

    return float(min(1.0, max(XG_EPSILON, xg)))


def calculate_shot_xg(shot, params=None):
    """
    Calculate xG for a single shot.

    Args:
        shot: ShotEvent
        params: Optional overrides for get_default_params()

    Returns:
        dict with 'xg' (unrounded), 'is_goal', and descriptive
        'distance' (metres), 'angle' (degrees) and 'zone'
    """
    xg = calculate_xg_value(shot.x, shot.y, shot.is_header, shot.is_penalty, params)

    if shot.is_penalty:
        distance, angle, zone = PENALTY_DISTANCE, PENALTY_ANGLE, 'penalty_box'
    else:
        distance = round_half_up(distance_to_goal_meters(shot.x, shot.y), 1)
        angle = round_half_up(angle_to_goal(shot.x, shot.y), 1)
        zone = shot_zone(shot.x, shot.y)

    return {
        'xg': xg,
        'is_goal': is_goal_outcome(shot.shot_outcome),
        'distance': distance,
        'angle': angle,
        'zone': zone,
    }


def calculate_total_xg(shots, params=None):
    """Unrounded sum of xG over a collection of shots."""
    return sum(calculate_shot_xg(shot, params)['xg'] for shot in shots)


def calculate_xg_overperformance(shots, actual_goals, params=None):
    """
    Goals minus xG, rounded.
    Positive = scoring more than expected.
    """
    return round_half_up(actual_goals - calculate_total_xg(shots, params))


def calculate_xg_quality(shots, params=None):
    """Average xG per shot (chance quality), rounded. 0 for no shots."""
    if len(shots) == 0:
        return 0
    return round_half_up(calculate_total_xg(shots, params) / len(shots))


def predict_xg(df, params=None):
    """
    Get xG values for every row of a shots DataFrame.

    Returns:
        Array of xG values (probabilities)
    """
    shots = shots_from_dataframe(df)
    return np.array([calculate_shot_xg(shot, params)['xg'] for shot in shots], dtype=float)


def add_xg(df, params=None):
    """Return a copy of a shots DataFrame with 'xg' and 'is_goal' columns."""
    df = df.copy()
    shots = shots_from_dataframe(df)
    results = [calculate_shot_xg(shot, params) for shot in shots]
    df['xg'] = [r['xg'] for r in results]
    df['is_goal'] = [int(r['is_goal']) for r in results]
    return df
