"""
Shot events: the engine's input type and conversion from raw event records.
"""
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .config import GOAL_OUTCOMES, PENALTY_OUTCOMES


@dataclass(frozen=True)
class ShotEvent:
    """
    One shot attempt.

    Coordinates are on a 0-100 scale with x increasing towards the target
    goal. player/team/match_id are carried for the query layer only; the
    xG calculation never reads them.
    """
    x: float
    y: float
    shot_outcome: Optional[str] = None
    is_header: bool = False
    is_penalty: bool = False
    player: Optional[str] = None
    team: Optional[str] = None
    match_id: Optional[object] = None


def _outcome_key(outcome):
    if outcome is None or pd.isna(outcome):
        return None
    return str(outcome).strip().lower()


def is_goal_outcome(outcome):
    """True if the outcome tag denotes a goal. Missing outcomes are not goals."""
    return _outcome_key(outcome) in GOAL_OUTCOMES


def is_penalty_outcome(outcome):
    """True if the outcome tag can only come from a penalty kick."""
    return _outcome_key(outcome) in PENALTY_OUTCOMES


def _is_missing(value):
    return value is None or (not isinstance(value, (list, dict)) and pd.isna(value))


def shot_from_event(event):
    """
    Build a ShotEvent from a raw match-event record (dict or pandas row).

    Matches the dashboard's event-store layout: a shot is a header when
    `aerial_outcome` is set, and a penalty when its outcome is a penalty
    outcome. Explicit `is_header` / `is_penalty` fields take precedence.
    """
    outcome = event.get('shot_outcome')
    if _is_missing(outcome):
        outcome = None

    is_header = event.get('is_header')
    if _is_missing(is_header):
        is_header = not _is_missing(event.get('aerial_outcome'))

    is_penalty = event.get('is_penalty')
    if _is_missing(is_penalty):
        is_penalty = is_penalty_outcome(outcome)

    def optional(key):
        value = event.get(key)
        return None if _is_missing(value) else value

    return ShotEvent(
        x=float(event['x']),
        y=float(event['y']),
        shot_outcome=outcome,
        is_header=bool(is_header),
        is_penalty=bool(is_penalty),
        player=optional('player'),
        team=optional('team'),
        match_id=optional('match_id'),
    )


def shots_from_dataframe(df):
    """
    Convert a shots DataFrame into a list of ShotEvent.

    Requires `x` and `y` columns; everything else is optional.
    """
    if df is None or len(df) == 0:
        return []
    missing = {'x', 'y'} - set(df.columns)
    if missing:
        raise ValueError(f"Shots DataFrame is missing columns: {sorted(missing)}")
    return [shot_from_event(row) for _, row in df.iterrows()]
