"""
Command-line xG report for a StatsBomb open-data season.

Run this script to:
1. Load and cache StatsBomb shots
2. Calculate heuristic xG for every shot
3. Score the heuristic against actual outcomes
4. Print the player xG table and team totals
5. (Optional) Analyse one player with plots

Usage:
    python -m xg_engine.main                                # La Liga 2015/16
    python -m xg_engine.main --competition 11 --season 27 --top 20
    python -m xg_engine.main --player Griezmann
    python -m xg_engine.main --match <match_id>
"""
import argparse
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for saving plots

from .config import COMPETITION_ID, SEASON_ID, OUTPUT_DIR
from .sources import StatsBombShotSource, DataFrameShotSource
from .model import add_xg
from .aggregation import aggregate_by_player, team_totals, match_xg
from .evaluate import evaluate_model, save_metrics
from .formatting import format_xg, format_overperformance, performance_label, xg_share
from .player_analysis import analyse_player
import matplotlib.pyplot as plt


def _label(summary):
    label, gap = performance_label(summary['actual_goals'], summary['total_xg'])
    return label if label == 'on par' else f"{format_xg(gap)} {label}"


def match_summary(df, match_id):
    """
    Print and return home/away xG for one match.

    Sides come from the match's home_team/away_team columns; goals are
    counted from each side's shot outcomes.
    """
    match_df = df[df['match_id'] == match_id]
    if len(match_df) == 0:
        raise ValueError(f"No shots found for match {match_id}")

    home_team = match_df['home_team'].iloc[0]
    away_team = match_df['away_team'].iloc[0]
    home_shots, away_shots = DataFrameShotSource(df).match_sides(match_id, home_team, away_team)
    result = match_xg(home_shots, away_shots)

    home_pct, away_pct = xg_share(result['home']['total_xg'], result['away']['total_xg'])
    print(f"\n{home_team} {result['home']['actual_goals']} - "
          f"{result['away']['actual_goals']} {away_team}")
    print(f"  xG {format_xg(result['home']['total_xg'])} - {format_xg(result['away']['total_xg'])}"
          f"  ({home_pct:.0f}% / {away_pct:.0f}%)")
    print(f"  {home_team}: {_label(result['home'])}")
    print(f"  {away_team}: {_label(result['away'])}")

    return {'home_team': home_team, 'away_team': away_team,
            'home_share': home_pct, 'away_share': away_pct, **result}


def main(competition_id=COMPETITION_ID, season_id=SEASON_ID, top=15,
         player=None, match_id=None, use_cache=True):
    """Run the full xG report."""
    print("="*60)
    print(f"xG Report - competition {competition_id}, season {season_id}")
    print("="*60)

    # 1. Load data
    print("\n[1/4] Loading shot data...")
    source = StatsBombShotSource(competition_id, season_id, use_cache=use_cache)
    df = source.df
    print(f"Total shots: {len(df)}")

    # 2. xG
    print("\n[2/4] Calculating xG...")
    df = add_xg(df)
    print(f"Total goals: {df['is_goal'].sum()}, total xG: {df['xg'].sum():.1f}")

    # 3. Evaluate
    print("\n[3/4] Evaluating heuristic...")
    metrics = evaluate_model(df['is_goal'], df['xg']) if len(df) else {}

    # 4. Player table
    print(f"\n[4/4] Top {top} players by xG:")
    table = aggregate_by_player(df)
    display = table.head(top).copy()
    display['total_xg'] = display['total_xg'].apply(format_xg)
    display['overperformance'] = display['overperformance'].apply(format_overperformance)
    display['xg_per_shot'] = display['xg_per_shot'].apply(format_xg)
    print(display.to_string(index=False))

    teams = {}
    if len(table):
        print("\nTeam totals:")
        for team, team_table in table.groupby('team'):
            totals = team_totals(team_table)
            teams[str(team)] = totals
            print(f"  {team:<30} xG {format_xg(totals['total_xg']):>6}  "
                  f"goals {totals['actual_goals']:>3}  "
                  f"{format_overperformance(totals['overperformance']):>6}  "
                  f"{_label(totals)}")

    if match_id is not None:
        print(f"\nMatch {match_id}:")
        metrics['match'] = match_summary(df, match_id)

    if player:
        print(f"\nPlayer analysis: {player}")
        summary = analyse_player(df, player)
        plt.close('all')
        if summary:
            metrics['player'] = summary

    metrics['teams'] = teams
    save_metrics(metrics)

    print(f"\nOutputs saved to: {OUTPUT_DIR}")
    return table, metrics


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Heuristic xG report')
    parser.add_argument('--competition', type=int, default=COMPETITION_ID,
                        help=f'StatsBomb competition id (default: {COMPETITION_ID})')
    parser.add_argument('--season', type=int, default=SEASON_ID,
                        help=f'StatsBomb season id (default: {SEASON_ID})')
    parser.add_argument('--top', type=int, default=15,
                        help='Number of players to list (default: 15)')
    parser.add_argument('--player', default=None,
                        help='Player name (partial match) to analyse with plots')
    parser.add_argument('--match', type=int, default=None,
                        help='Match id to summarise home vs away')
    parser.add_argument('--no-cache', action='store_true',
                        help='Reload from the StatsBomb API instead of the local cache')
    args = parser.parse_args()

    main(competition_id=args.competition, season_id=args.season, top=args.top,
         player=args.player, match_id=args.match, use_cache=not args.no_cache)
