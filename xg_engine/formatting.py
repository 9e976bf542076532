"""
Presentation helpers for xG figures (badges, score headers, comparison rows).
"""
from .model import round_half_up


def format_xg(value):
    """Format an xG figure to 2 decimal places, e.g. 1.5 -> '1.50'."""
    return f"{round_half_up(value):.2f}"


def format_overperformance(value):
    """Signed 2-dp overperformance: '+0.35', '-0.35', or '0.00' when level."""
    rounded = round_half_up(value)
    if rounded > 0:
        return f"+{rounded:.2f}"
    if rounded < 0:
        return f"{rounded:.2f}"
    return "0.00"


def performance_label(goals, total_xg):
    """
    Describe goals against xG for a score header.

    Returns:
        (label, gap) where label is 'overperform', 'underperform' or 'on par'
        and gap is the absolute difference, rounded
    """
    gap = round_half_up(abs(goals - total_xg))
    if goals > total_xg:
        return 'overperform', gap
    if goals < total_xg:
        return 'underperform', gap
    return 'on par', gap


def xg_share(home_xg, away_xg):
    """
    Split of total match xG between the sides, in percent.

    Returns (50.0, 50.0) when neither side has any xG.
    """
    total = home_xg + away_xg
    if total <= 0:
        return 50.0, 50.0
    home_pct = home_xg / total * 100
    return home_pct, 100 - home_pct


def print_player_summary(summary, player=None):
    """Pretty print an aggregate summary."""
    if not summary:
        return

    print(f"\n{'='*50}")
    if player is not None:
        print(f"Player: {player}")
        print(f"{'='*50}")
    print(f"Shots:             {summary['shot_count']}")
    print(f"Goals:             {summary['actual_goals']}")
    print(f"xG:                {format_xg(summary['total_xg'])}")
    print(f"Goals - xG:        {format_overperformance(summary['overperformance'])}")
    print(f"xG per shot:       {format_xg(summary['xg_per_shot'])}")
