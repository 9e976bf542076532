import pandas as pd
import pytest

from xg_engine import sources


def test_dataframe_source_filters(shots_df):
    source = sources.DataFrameShotSource(shots_df)
    assert len(source.get_shots()) == 6
    assert len(source.get_shots(player='Ana')) == 3
    assert len(source.get_shots(player='Ana', match_id=2)) == 1
    assert len(source.get_shots(team='Blues')) == 2
    assert source.get_shots(player='Nobody') == []


def test_dataframe_source_count_goals(shots_df):
    source = sources.DataFrameShotSource(shots_df)
    assert source.count_goals() == 2
    assert source.count_goals(team='Reds') == 1
    assert source.count_goals(player='Bea') == 0


def test_dataframe_source_validation():
    with pytest.raises(ValueError):
        sources.DataFrameShotSource(pd.DataFrame({'x': [1.0]}))

    source = sources.DataFrameShotSource(pd.DataFrame({'x': [90.0], 'y': [50.0]}))
    with pytest.raises(ValueError):
        source.get_shots(player='Ana')
    with pytest.raises(ValueError):
        source.match_sides(1, 'Reds', 'Blues')


def test_match_sides_ignores_other_teams(shots_df):
    df = pd.concat([shots_df, pd.DataFrame({
        'match_id': [1], 'player': ['Dee'], 'team': ['Greens'],
        'x': [90.0], 'y': [50.0], 'shot_outcome': ['goal'],
    })], ignore_index=True)
    home, away = sources.DataFrameShotSource(df).match_sides(1, 'Reds', 'Blues')
    assert {s.team for s in home} == {'Reds'}
    assert {s.team for s in away} == {'Blues'}
    assert len(home) + len(away) == 4


def test_shot_source_is_abstract():
    with pytest.raises(TypeError):
        sources.ShotSource()


@pytest.mark.parametrize('outcome, is_penalty, expected', [
    ('Goal', False, 'goal'),
    ('Goal', True, 'penalty_goal'),
    ('Saved', True, 'penalty_miss'),
    ('Saved to Post', False, 'saved'),
    ('Off T', False, 'off_target'),
    ('Wayward', False, 'off_target'),
    ('Post', False, 'missed'),
    ('Blocked', False, 'blocked'),
])
def test_map_statsbomb_outcome(outcome, is_penalty, expected):
    assert sources.map_statsbomb_outcome(outcome, is_penalty) == expected


def test_statsbomb_to_normalized():
    assert sources.statsbomb_to_normalized(120, 40) == pytest.approx((100, 50))
    assert sources.statsbomb_to_normalized(108, 40) == pytest.approx((90, 50))


class FakeStatsBomb:
    """Stands in for statsbombpy.sb with two matches, one of which fails."""

    def __init__(self):
        self.event_calls = 0

    def matches(self, competition_id, season_id):
        return pd.DataFrame({
            'match_id': [10, 11],
            'match_date': ['2016-01-02', '2016-01-09'],
            'home_team': ['Reds', 'Blues'],
            'away_team': ['Blues', 'Reds'],
        })

    def events(self, match_id):
        self.event_calls += 1
        if match_id == 11:
            raise ConnectionError("network down")
        return pd.DataFrame({
            'type': ['Pass', 'Shot', 'Shot', 'Shot'],
            'location': [[60, 40], [108, 40], [114, 36], None],
            'shot_outcome': [None, 'Goal', 'Saved', 'Off T'],
            'shot_type': [None, 'Penalty', 'Open Play', 'Open Play'],
            'shot_body_part': [None, 'Right Foot', 'Head', 'Left Foot'],
            'player': ['Ana', 'Ana', 'Bea', 'Cleo'],
            'team': ['Reds', 'Reds', 'Reds', 'Blues'],
        })


@pytest.fixture
def fake_sb(monkeypatch, tmp_path):
    fake = FakeStatsBomb()
    monkeypatch.setattr(sources, 'sb', fake)
    monkeypatch.setattr(sources, 'DATA_DIR', tmp_path)
    return fake


def test_statsbomb_source_loads_and_converts(fake_sb, tmp_path):
    source = sources.StatsBombShotSource(competition_id=1, season_id=2)
    df = source.df

    # the pass, the location-less shot and the failed match are dropped
    assert len(df) == 2
    assert list(df['x']) == pytest.approx([90, 95])
    assert list(df['y']) == pytest.approx([50, 45])
    assert list(df['shot_outcome']) == ['penalty_goal', 'saved']
    assert list(df['is_penalty']) == [True, False]
    assert list(df['is_header']) == [False, True]
    assert (tmp_path / 'statsbomb_1_2_shots.pkl').exists()

    shots = source.get_shots(player='Bea')
    assert len(shots) == 1
    assert shots[0].is_header is True
    assert source.count_goals(team='Reds') == 1


def test_statsbomb_source_uses_cache(fake_sb):
    sources.StatsBombShotSource(competition_id=1, season_id=2)
    calls = fake_sb.event_calls
    cached = sources.StatsBombShotSource(competition_id=1, season_id=2)
    assert fake_sb.event_calls == calls
    assert len(cached.df) == 2
