"""
Odds index: moneyline quotes keyed by the normalized (away, home) pair.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from shared.models.domain import OddsQuote
from shared.models.feeds import RawOddsEvent, RawOutcome, parse_odds_events
from shared.utils.logging import get_logger

from reconciler.normalize import composite_key
from reconciler.teams import TeamAliases

logger = get_logger(__name__)


class OddsIndex:
    """
    Exact-match lookup of moneyline quotes.

    Only the first bookmaker and its first market are read. A repeated
    (away, home) pair overwrites the earlier quote.
    """

    def __init__(self, quotes: dict[str, OddsQuote] | None = None) -> None:
        self._quotes: dict[str, OddsQuote] = dict(quotes or {})

    @classmethod
    def build(
        cls,
        odds_events: Iterable[RawOddsEvent | Mapping[str, Any]],
        teams: TeamAliases | None = None,
    ) -> "OddsIndex":
        teams = teams or TeamAliases()
        quotes: dict[str, OddsQuote] = {}
        skipped = 0

        for event in parse_odds_events(odds_events):
            home_key = teams.key(event.home_team)
            away_key = teams.key(event.away_team)
            if not home_key or not away_key:
                skipped += 1
                logger.debug(
                    "odds_event_unmatchable",
                    odds_event_id=event.id,
                    home_team=event.home_team,
                    away_team=event.away_team,
                )
                continue

            outcomes = _first_market_outcomes(event)
            quotes[composite_key(away_key, home_key)] = OddsQuote(
                home_moneyline=_price_for(outcomes, home_key, teams),
                away_moneyline=_price_for(outcomes, away_key, teams),
            )

        logger.debug("odds_index_built", quotes=len(quotes), skipped=skipped)
        return cls(quotes)

    def lookup(self, away_key: str, home_key: str) -> Optional[OddsQuote]:
        return self._quotes.get(composite_key(away_key, home_key))

    def __len__(self) -> int:
        return len(self._quotes)


def _first_market_outcomes(event: RawOddsEvent) -> list[RawOutcome]:
    if not event.bookmakers:
        return []
    markets = event.bookmakers[0].markets
    if not markets:
        return []
    return markets[0].outcomes


def _price_for(outcomes: list[RawOutcome], team_key: str, teams: TeamAliases) -> Optional[Union[int, float]]:
    for outcome in outcomes:
        if teams.key(outcome.name) == team_key:
            return outcome.price
    return None
