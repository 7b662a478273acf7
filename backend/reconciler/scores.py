"""
Tiered score resolution for a single live-feed game.

Tiers, first success wins:
  1. direct:     scores.home.total / scores.away.total (authoritative)
  2. periods:    sum of per-period partial scores (estimated)
  3. statistics: box-score points per side (estimated)

Each tier is all-or-nothing; a partial pair never leaks into a lower tier.
"""
from __future__ import annotations

from typing import Optional, Union

from shared.models.domain import ScoreEstimate
from shared.models.feeds import RawLiveEvent, RawPeriodScore, RawStatistics

Number = Union[int, float]


def extract_live_score(event: RawLiveEvent) -> Optional[ScoreEstimate]:
    """Tier 1: both direct totals present and finite."""
    home = event.scores.home.total
    away = event.scores.away.total
    if home is None or away is None:
        return None
    return ScoreEstimate(home=home, away=away, estimated=False)


def sum_period_totals(periods: Optional[dict[str, RawPeriodScore]]) -> Optional[tuple[Number, Number]]:
    """
    Tier 2: sum every numeric period value per side.

    Succeeds when at least one value was found on either side; a side with
    no values at all contributes 0.
    """
    if not periods:
        return None
    home: Number = 0
    away: Number = 0
    has_value = False
    for period in periods.values():
        if period.home is not None:
            home += period.home
            has_value = True
        if period.away is not None:
            away += period.away
            has_value = True
    return (home, away) if has_value else None


def extract_stats_totals(statistics: RawStatistics) -> Optional[tuple[Number, Number]]:
    """Tier 3: box-score points for both sides."""
    home = statistics.home.points
    away = statistics.away.points
    if home is None or away is None:
        return None
    return home, away


def estimate_score(event: RawLiveEvent) -> Optional[ScoreEstimate]:
    """Tiers 2 and 3 only; always flagged as estimated."""
    totals = sum_period_totals(event.periods)
    if totals is None:
        totals = extract_stats_totals(event.statistics)
    if totals is None:
        return None
    home, away = totals
    return ScoreEstimate(home=home, away=away, estimated=True)


def resolve_score(event: RawLiveEvent) -> Optional[ScoreEstimate]:
    """Best available score for a game, or None when no tier qualifies."""
    direct = extract_live_score(event)
    if direct is not None:
        return direct
    return estimate_score(event)

