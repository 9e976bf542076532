"""
Player, team and match xG aggregation.
"""
import pandas as pd

from .model import calculate_shot_xg, round_half_up, add_xg
from .shots import is_goal_outcome


def count_goals(shots):
    """Number of shots whose outcome denotes a goal."""
    return sum(1 for shot in shots if is_goal_outcome(shot.shot_outcome))


def _summarize(total_xg, shot_count, actual_goals):
    return {
        'total_xg': round_half_up(total_xg),
        'shot_count': int(shot_count),
        'actual_goals': int(actual_goals),
        'overperformance': round_half_up(actual_goals - total_xg),
        'xg_per_shot': round_half_up(total_xg / shot_count) if shot_count > 0 else 0,
    }


def aggregate(shots, actual_goals, params=None):
    """
    Aggregate a collection of shots into summary statistics.

    actual_goals is taken from the caller as-is, since it may come from a
    wider source than the shot sample (e.g. own goals).

    Args:
        shots: Sequence of ShotEvent
        actual_goals: Goals scored
        params: Optional overrides for the xG heuristic

    Returns:
        dict with total_xg, shot_count, actual_goals, overperformance,
        xg_per_shot (floats rounded to 2 dp)
    """
    total_xg = sum(calculate_shot_xg(shot, params)['xg'] for shot in shots)
    return _summarize(total_xg, len(shots), actual_goals)


def match_xg(home_shots, away_shots, home_goals=None, away_goals=None, params=None):
    """
    xG summary for each side of a match.

    Each side is aggregated on its own. Goals default to the goal outcomes
    found in that side's shots.
    """
    if home_goals is None:
        home_goals = count_goals(home_shots)
    if away_goals is None:
        away_goals = count_goals(away_shots)

    return {
        'home': aggregate(home_shots, home_goals, params),
        'away': aggregate(away_shots, away_goals, params),
    }


def aggregate_by_player(df, params=None):
    """
    Per-player xG table from a shots DataFrame.

    Expects 'player' and 'team' columns plus the shot columns. Goals are
    counted from outcome tags. Only players with at least one shot appear,
    sorted by total xG (highest first).
    """
    columns = ['player', 'team', 'total_xg', 'shot_count',
               'actual_goals', 'overperformance', 'xg_per_shot']
    if df is None or len(df) == 0:
        return pd.DataFrame(columns=columns)

    df_xg = add_xg(df, params)

    grouped = df_xg.groupby(['player', 'team'], dropna=False).agg(
        raw_xg=('xg', 'sum'),
        shot_count=('xg', 'count'),
        actual_goals=('is_goal', 'sum'),
    ).reset_index()

    rows = []
    for _, row in grouped.iterrows():
        summary = _summarize(row['raw_xg'], row['shot_count'], row['actual_goals'])
        rows.append({'player': row['player'], 'team': row['team'], **summary, 'raw_xg': row['raw_xg']})

    table = pd.DataFrame(rows)
    table = table.sort_values(['raw_xg', 'player'], ascending=[False, True]).reset_index(drop=True)
    return table[columns]


def team_totals(player_table):
    """
    Sum a player table from aggregate_by_player into one team summary.

    Totals are built from the rounded per-player figures shown in the table.
    """
    if len(player_table) == 0:
        return _summarize(0.0, 0, 0)
    return _summarize(
        player_table['total_xg'].sum(),
        player_table['shot_count'].sum(),
        player_table['actual_goals'].sum(),
    )


def xg_by_match(df, params=None):
    """
    Match-by-match xG for a set of shots (typically one player's).

    Returns a DataFrame with match_id, xg, shots and goals, ordered by
    match_date when that column is present, otherwise by match_id.
    """
    columns = ['match_id', 'xg', 'shots', 'goals']
    if df is None or len(df) == 0:
        return pd.DataFrame(columns=columns)

    df_xg = add_xg(df, params)
    keys = ['match_id', 'match_date'] if 'match_date' in df_xg.columns else ['match_id']

    result = df_xg.groupby(keys).agg(
        xg=('xg', 'sum'),
        shots=('xg', 'count'),
        goals=('is_goal', 'sum'),
    ).reset_index()

    result = result.sort_values(keys[-1]).reset_index(drop=True)
    result['xg'] = result['xg'].apply(round_half_up)
    return result[keys + ['xg', 'shots', 'goals']]
