"""Shared fixtures for xG engine tests."""
import matplotlib
matplotlib.use('Agg')

import pandas as pd
import pytest

from xg_engine.shots import ShotEvent


@pytest.fixture
def close_shot():
    """Footed shot from just in front of the goal, centred."""
    return ShotEvent(x=95, y=50, shot_outcome='goal')


@pytest.fixture
def shots_df():
    """Small event table covering two matches, two teams and three players."""
    return pd.DataFrame({
        'match_id': [1, 1, 1, 1, 2, 2],
        'match_date': pd.to_datetime([
            '2024-08-10', '2024-08-10', '2024-08-10', '2024-08-10',
            '2024-08-17', '2024-08-17',
        ]),
        'player': ['Ana', 'Ana', 'Bea', 'Cleo', 'Ana', 'Cleo'],
        'team': ['Reds', 'Reds', 'Reds', 'Blues', 'Reds', 'Blues'],
        'x': [95.0, 70.0, 88.0, 90.0, 40.0, 89.0],
        'y': [50.0, 40.0, 55.0, 50.0, 50.0, 50.0],
        'shot_outcome': ['goal', 'saved', 'missed', 'penalty_goal', 'blocked', None],
        'aerial_outcome': [None, None, 'won', None, None, None],
    })
