"""
Reconciliation core for Live Board.
Normalizes team names, indexes the odds feed and merges it with the live-score
feed into one record per game. Pure and synchronous; callers own all I/O.
"""
from reconciler.engine import ReconciliationEngine, merge_board
from reconciler.normalize import composite_key, normalize_team_name
from reconciler.odds import OddsIndex
from reconciler.scores import estimate_score, extract_live_score, resolve_score
from reconciler.teams import TeamAliases

__all__ = [
    "OddsIndex",
    "ReconciliationEngine",
    "TeamAliases",
    "composite_key",
    "estimate_score",
    "extract_live_score",
    "merge_board",
    "normalize_team_name",
    "resolve_score",
]
