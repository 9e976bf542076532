"""
xG Engine Package

Deterministic expected-goals (xG) calculation for shot events, with player,
team and match aggregation.
"""

from .shots import ShotEvent, shot_from_event, shots_from_dataframe
from .model import (
    calculate_shot_xg, calculate_total_xg, calculate_xg_overperformance,
    calculate_xg_quality, get_default_params, predict_xg, add_xg,
)
from .aggregation import aggregate, match_xg, aggregate_by_player, team_totals, xg_by_match
from .sources import ShotSource, DataFrameShotSource, StatsBombShotSource

__all__ = [
    'ShotEvent',
    'shot_from_event',
    'shots_from_dataframe',
    'calculate_shot_xg',
    'calculate_total_xg',
    'calculate_xg_overperformance',
    'calculate_xg_quality',
    'get_default_params',
    'predict_xg',
    'add_xg',
    'aggregate',
    'match_xg',
    'aggregate_by_player',
    'team_totals',
    'xg_by_match',
    'ShotSource',
    'DataFrameShotSource',
    'StatsBombShotSource',
]
