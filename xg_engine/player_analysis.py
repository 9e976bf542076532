"""
Player-level xG analysis.
"""
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from mplsoccer import Pitch

from .config import OUTPUT_DIR
from .aggregation import aggregate, count_goals
from .formatting import print_player_summary
from .model import add_xg
from .shots import shots_from_dataframe


def get_player_shots(df, player_name):
    """
    Get all shots for a specific player.

    Args:
        df: DataFrame with all shots
        player_name: Player name to filter (partial match)

    Returns:
        DataFrame of player's shots
    """
    mask = df['player'].str.contains(player_name, case=False, na=False, regex=False)
    player_df = df[mask].copy()

    if len(player_df) == 0:
        print(f"No shots found for player: {player_name}")
        return pd.DataFrame()

    print(f"Found {len(player_df)} shots for {player_df['player'].iloc[0]}")
    return player_df


def player_summary(df_player, params=None):
    """
    Summary statistics for a player's shots, goals counted from outcomes.

    Returns:
        dict with 'player' plus the aggregate fields, or {} for no shots
    """
    if len(df_player) == 0:
        return {}

    shots = shots_from_dataframe(df_player)
    summary = aggregate(shots, count_goals(shots), params)
    return {'player': df_player['player'].iloc[0], **summary}


def _save(fig, filename):
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    path = OUTPUT_DIR / filename
    fig.savefig(path, dpi=150, bbox_inches='tight')
    return path


def _safe_name(player_name):
    return player_name.replace(' ', '_').lower()


def plot_shot_map(df_player, params=None, save=True, filename=None):
    """
    Plot shot map for a player on a football pitch.

    Goals are shown as stars, misses as circles.
    Color intensity shows xG value.
    """
    if len(df_player) == 0:
        return None

    player_name = df_player['player'].iloc[0]
    df_xg = add_xg(df_player, params)
    xg_values = df_xg['xg'].values

    # Wyscout pitch: 0-100 on both axes, y=0 on the attacker's left touchline
    pitch = Pitch(pitch_type='wyscout', pitch_color='grass',
                  line_color='white', stripe=True)
    fig, ax = pitch.draw(figsize=(12, 8))

    goals = (df_xg['is_goal'] == 1).values
    non_goals = ~goals

    scatter = None
    if non_goals.sum() > 0:
        scatter = pitch.scatter(
            df_xg.loc[non_goals, 'x'], df_xg.loc[non_goals, 'y'],
            c=xg_values[non_goals], cmap='Reds', s=100,
            edgecolors='black', linewidth=1, alpha=0.7,
            vmin=0, vmax=0.5, marker='o', label='Miss/Saved', ax=ax
        )

    if goals.sum() > 0:
        scatter_goal = pitch.scatter(
            df_xg.loc[goals, 'x'], df_xg.loc[goals, 'y'],
            c=xg_values[goals], cmap='Reds', s=200,
            edgecolors='gold', linewidth=2, alpha=1.0,
            vmin=0, vmax=0.5, marker='*', label='Goal', ax=ax
        )
        if scatter is None:
            scatter = scatter_goal

    plt.colorbar(scatter, ax=ax, label='xG', shrink=0.6)

    total_goals = int(goals.sum())
    ax.set_title(f"{player_name}\n{len(df_xg)} shots, {total_goals} goals, {xg_values.sum():.2f} xG")
    ax.legend(loc='upper left')

    if save:
        path = _save(fig, filename or f"shot_map_{_safe_name(player_name)}.png")
        print(f"Saved shot map to {path}")

    return fig


def plot_cumulative_xg(df_player, params=None, save=True, filename=None):
    """
    Plot cumulative goals vs cumulative xG, shot by shot.

    Shows if player is over/under-performing their xG.
    """
    if len(df_player) == 0:
        return None

    player_name = df_player['player'].iloc[0]

    df_sorted = df_player
    if 'match_date' in df_player.columns:
        df_sorted = df_player.sort_values('match_date', kind='stable')
    df_sorted = add_xg(df_sorted, params)

    cumulative_goals = df_sorted['is_goal'].cumsum().values
    cumulative_xg = np.cumsum(df_sorted['xg'].values)

    fig, ax = plt.subplots(figsize=(12, 6))

    shots = range(1, len(df_sorted) + 1)
    ax.plot(shots, cumulative_goals, 'b-', linewidth=2, label='Actual Goals')
    ax.plot(shots, cumulative_xg, 'r--', linewidth=2, label='Expected Goals (xG)')
    ax.fill_between(shots, cumulative_goals, cumulative_xg,
                    alpha=0.3, color='green' if cumulative_goals[-1] > cumulative_xg[-1] else 'red')

    ax.set_xlabel('Shot Number')
    ax.set_ylabel('Cumulative Goals / xG')
    ax.set_title(f'{player_name} - Cumulative Goals vs xG')
    ax.legend()
    ax.grid(True, alpha=0.3)

    final_goals = int(cumulative_goals[-1])
    final_xg = cumulative_xg[-1]
    ax.annotate(
        f'Goals: {final_goals}\nxG: {final_xg:.2f}\nDiff: {final_goals - final_xg:+.2f}',
        xy=(len(df_sorted), cumulative_goals[-1]),
        xytext=(10, 0),
        textcoords='offset points',
        fontsize=10,
        bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
    )

    if save:
        path = _save(fig, filename or f"cumulative_xg_{_safe_name(player_name)}.png")
        print(f"Saved cumulative xG plot to {path}")

    return fig


def analyse_player(df, player_name, params=None, save=True):
    """
    Complete analysis for one player: summary plus shot map and
    cumulative xG plots.
    """
    df_player = get_player_shots(df, player_name)

    if len(df_player) == 0:
        return None

    summary = player_summary(df_player, params)
    print_player_summary(summary, player=summary['player'])

    plot_shot_map(df_player, params, save=save)
    plot_cumulative_xg(df_player, params, save=save)

    return summary
