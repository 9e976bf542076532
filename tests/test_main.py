import json
from types import SimpleNamespace

import pytest

from xg_engine import evaluate
from xg_engine import main as report


@pytest.fixture
def match_df(shots_df):
    df = shots_df.copy()
    df['home_team'] = 'Reds'
    df['away_team'] = 'Blues'
    return df


def test_match_summary_sides_and_share(match_df, capsys):
    summary = report.match_summary(match_df, 1)

    assert summary['home_team'] == 'Reds'
    assert summary['away_team'] == 'Blues'
    assert summary['home']['total_xg'] == pytest.approx(0.81)
    assert summary['home']['shot_count'] == 3
    assert summary['home']['actual_goals'] == 1
    assert summary['away']['total_xg'] == pytest.approx(0.76)
    assert summary['away']['actual_goals'] == 1
    assert summary['away']['overperformance'] == pytest.approx(0.24)
    assert summary['home_share'] + summary['away_share'] == pytest.approx(100.0)
    assert summary['home_share'] == pytest.approx(0.81 / (0.81 + 0.76) * 100)

    out = capsys.readouterr().out
    assert 'Reds 1 - 1 Blues' in out
    assert 'xG 0.81 - 0.76' in out
    assert '(52% / 48%)' in out
    assert 'Reds: 0.19 overperform' in out
    assert 'Blues: 0.24 overperform' in out


def test_match_summary_unknown_match(match_df):
    with pytest.raises(ValueError):
        report.match_summary(match_df, 99)


def test_label_on_par():
    assert report._label({'actual_goals': 1, 'total_xg': 1.0}) == 'on par'
    assert report._label({'actual_goals': 0, 'total_xg': 0.37}) == '0.37 underperform'


def test_main_report_with_match(monkeypatch, tmp_path, match_df, capsys):
    monkeypatch.setattr(report, 'StatsBombShotSource',
                        lambda *args, **kwargs: SimpleNamespace(df=match_df))
    monkeypatch.setattr(evaluate, 'OUTPUT_DIR', tmp_path)

    table, metrics = report.main(top=5, match_id=1)

    assert list(table['player'])[0] == 'Cleo'
    assert metrics['match']['home']['total_xg'] == pytest.approx(0.81)
    assert set(metrics['teams']) == {'Reds', 'Blues'}

    out = capsys.readouterr().out
    assert 'Team totals:' in out
    assert '0.09 underperform' in out

    with open(tmp_path / 'metrics.json') as f:
        saved = json.load(f)
    assert saved['match']['away_team'] == 'Blues'
