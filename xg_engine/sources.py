"""
Shot sources: where the engine's ShotEvents come from.

The engine itself never does I/O. A ShotSource answers "which shots" for a
player, team or match; DataFrameShotSource serves an in-memory event table
and StatsBombShotSource loads (and caches) StatsBomb open data.
"""
from abc import ABC, abstractmethod

import pandas as pd
from statsbombpy import sb

from .config import (
    COMPETITION_ID, SEASON_ID, DATA_DIR,
    STATSBOMB_PITCH_LENGTH, STATSBOMB_PITCH_WIDTH,
)
from .shots import shots_from_dataframe, is_goal_outcome


class ShotSource(ABC):
    """Anything that can return shot events filtered by player, team or match."""

    @abstractmethod
    def get_shots(self, player=None, team=None, match_id=None):
        """Return a list of ShotEvent matching every filter given."""

    def count_goals(self, player=None, team=None, match_id=None):
        """Goals among the shots matching the filters."""
        shots = self.get_shots(player=player, team=team, match_id=match_id)
        return sum(1 for shot in shots if is_goal_outcome(shot.shot_outcome))


class DataFrameShotSource(ShotSource):
    """
    Shot source backed by a pandas DataFrame, one row per shot.

    Required columns: x, y. Optional: shot_outcome, is_header (or the event
    store's aerial_outcome), is_penalty, player, team, match_id.
    """

    def __init__(self, df):
        missing = {'x', 'y'} - set(df.columns)
        if missing:
            raise ValueError(f"Shots DataFrame is missing columns: {sorted(missing)}")
        self.df = df

    def filter(self, player=None, team=None, match_id=None):
        """Rows matching every filter given."""
        mask = pd.Series(True, index=self.df.index)
        for column, value in (('player', player), ('team', team), ('match_id', match_id)):
            if value is None:
                continue
            if column not in self.df.columns:
                raise ValueError(f"Cannot filter on '{column}': column not present")
            mask &= self.df[column] == value
        return self.df[mask]

    def get_shots(self, player=None, team=None, match_id=None):
        return shots_from_dataframe(self.filter(player=player, team=team, match_id=match_id))

    def match_sides(self, match_id, home_team, away_team):
        """
        Partition a match's shots into home and away.

        Shots by any other team are ignored.

        Returns:
            (home_shots, away_shots)
        """
        match_df = self.filter(match_id=match_id)
        if 'team' not in match_df.columns:
            raise ValueError("Cannot partition a match without a 'team' column")

        home = shots_from_dataframe(match_df[match_df['team'] == home_team])
        away = shots_from_dataframe(match_df[match_df['team'] == away_team])
        return home, away


# StatsBomb outcome names -> engine outcome tags
STATSBOMB_OUTCOMES = {
    'Goal': 'goal',
    'Saved': 'saved',
    'Saved Off Target': 'saved',
    'Saved to Post': 'saved',
    'Off T': 'off_target',
    'Wayward': 'off_target',
    'Post': 'missed',
    'Blocked': 'blocked',
}


def map_statsbomb_outcome(outcome, is_penalty):
    """Translate a StatsBomb shot outcome into the engine vocabulary."""
    tag = STATSBOMB_OUTCOMES.get(outcome, 'missed')
    if is_penalty:
        return 'penalty_goal' if tag == 'goal' else 'penalty_miss'
    return tag


def statsbomb_to_normalized(x, y):
    """Rescale StatsBomb 120x80 yard coordinates to the 0-100 scale."""
    return x / STATSBOMB_PITCH_LENGTH * 100, y / STATSBOMB_PITCH_WIDTH * 100


class StatsBombShotSource(DataFrameShotSource):
    """
    Shots from a StatsBomb open-data competition season.

    Loads every match's events on first use, keeps only shots, and caches
    the converted table to a pickle under DATA_DIR.
    """

    def __init__(self, competition_id=COMPETITION_ID, season_id=SEASON_ID, use_cache=True):
        self.competition_id = competition_id
        self.season_id = season_id
        super().__init__(self.load_shots(use_cache=use_cache))

    @property
    def cache_path(self):
        return DATA_DIR / f"statsbomb_{self.competition_id}_{self.season_id}_shots.pkl"

    def load_shots(self, use_cache=True):
        """
        Load all shots for the competition season.

        Returns:
            pd.DataFrame: One row per shot in the engine's column layout
        """
        cache_path = self.cache_path

        if use_cache and cache_path.exists():
            print("Loading shots from cache...")
            return pd.read_pickle(cache_path)

        print("Loading shots from StatsBomb API...")

        matches = sb.matches(competition_id=self.competition_id, season_id=self.season_id)
        print(f"Found {len(matches)} matches")

        all_shots = []

        for _, match in matches.iterrows():
            match_id = match['match_id']

            try:
                events = sb.events(match_id=match_id)
            except Exception as e:
                print(f"Error loading match {match_id}: {e}")
                continue

            shots = events[events['type'] == 'Shot'].copy()
            if len(shots) == 0:
                continue

            shots['match_id'] = match_id
            shots['match_date'] = pd.to_datetime(match['match_date'])
            shots['home_team'] = match['home_team']
            shots['away_team'] = match['away_team']
            all_shots.append(shots)

        if not all_shots:
            df = pd.DataFrame(columns=[
                'match_id', 'match_date', 'player', 'team', 'home_team', 'away_team',
                'x', 'y', 'shot_outcome', 'is_header', 'is_penalty',
            ])
        else:
            df = extract_shot_data(pd.concat(all_shots, ignore_index=True))
        print(f"Loaded {len(df)} total shots")

        DATA_DIR.mkdir(parents=True, exist_ok=True)
        df.to_pickle(cache_path)
        print(f"Cached to {cache_path}")

        return df


def extract_shot_data(df):
    """Flatten raw StatsBomb shot events into the engine's column layout."""
    location = df['location']
    x_raw = location.apply(lambda loc: loc[0] if isinstance(loc, list) else None).astype(float)
    y_raw = location.apply(lambda loc: loc[1] if isinstance(loc, list) else None).astype(float)
    x, y = statsbomb_to_normalized(x_raw, y_raw)

    is_penalty = (df['shot_type'] == 'Penalty')
    outcome = [
        map_statsbomb_outcome(o, p) for o, p in zip(df['shot_outcome'], is_penalty)
    ]

    result = pd.DataFrame({
        'match_id': df['match_id'],
        'match_date': df['match_date'],
        'player': df['player'],
        'team': df['team'],
        'home_team': df['home_team'],
        'away_team': df['away_team'],
        'x': x,
        'y': y,
        'shot_outcome': outcome,
        'is_header': (df['shot_body_part'] == 'Head'),
        'is_penalty': is_penalty,
    })

    # Shots without a location can't be placed on the pitch
    return result.dropna(subset=['x', 'y']).reset_index(drop=True)
