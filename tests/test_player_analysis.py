import matplotlib.pyplot as plt
import pytest

from xg_engine import player_analysis


@pytest.fixture(autouse=True)
def output_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(player_analysis, 'OUTPUT_DIR', tmp_path)
    yield tmp_path
    plt.close('all')


def test_get_player_shots_partial_match(shots_df):
    assert len(player_analysis.get_player_shots(shots_df, 'an')) == 3
    assert player_analysis.get_player_shots(shots_df, 'Zed').empty


def test_player_summary(shots_df):
    ana = player_analysis.get_player_shots(shots_df, 'Ana')
    summary = player_analysis.player_summary(ana)
    assert summary['player'] == 'Ana'
    assert summary['shot_count'] == 3
    assert summary['actual_goals'] == 1
    assert summary['total_xg'] == pytest.approx(0.62)
    assert player_analysis.player_summary(ana.iloc[0:0]) == {}


def test_plots_saved(shots_df, output_dir):
    cleo = player_analysis.get_player_shots(shots_df, 'Cleo')
    assert player_analysis.plot_shot_map(cleo) is not None
    assert player_analysis.plot_cumulative_xg(cleo) is not None
    assert (output_dir / 'shot_map_cleo.png').exists()
    assert (output_dir / 'cumulative_xg_cleo.png').exists()


def test_plots_without_goals(shots_df):
    bea = player_analysis.get_player_shots(shots_df, 'Bea')
    assert player_analysis.plot_shot_map(bea, save=False) is not None
    assert player_analysis.plot_shot_map(bea.iloc[0:0], save=False) is None


def test_analyse_player(shots_df, output_dir):
    summary = player_analysis.analyse_player(shots_df, 'Ana')
    assert summary['shot_count'] == 3
    assert (output_dir / 'shot_map_ana.png').exists()
    assert player_analysis.analyse_player(shots_df, 'Nobody') is None


def test_shot_map_left_touchline_at_top(shots_df):
    # y=0 is the attacker's left touchline, drawn along the top edge
    fig = player_analysis.plot_shot_map(shots_df, save=False)
    ax = fig.axes[0]
    assert ax.yaxis_inverted()
    left_y = ax.transData.transform((50, 10))[1]
    right_y = ax.transData.transform((50, 90))[1]
    assert left_y > right_y
